"""Component resolution: exact name lookup with a substring fallback."""

import re
from collections.abc import Iterator

from magentaa11y_mcp.core.content import load_content
from magentaa11y_mcp.models.domain import (
    Category,
    Component,
    ComponentSummary,
    DocumentCollection,
    ResolvedComponent,
)

# Words shorter than this are too noisy for did-you-mean suggestions
MIN_SUGGESTION_WORD = 3


def normalize_name(raw_name: str | None) -> str:
    """Lower-case and trim a user-supplied name or query."""
    return (raw_name or "").strip().lower()


def iter_components(
    content: DocumentCollection, platform: str
) -> Iterator[tuple[Category, Component]]:
    """Walk a platform's components in category-then-child order."""
    for category in content.categories(platform):
        for component in category.children:
            yield category, component


def _contains(component: Component, needle: str) -> bool:
    return needle in component.name.lower() or needle in component.label.lower()


def find_component(
    platform: str, raw_name: str | None, content: DocumentCollection | None = None
) -> ResolvedComponent | None:
    """Resolve a component by name.

    An exact, case-insensitive match on ``name`` wins. Failing that, the
    first component whose name or label contains the query is returned.
    Scan order (categories, then children, as stored) breaks ties.

    Returns:
        The component annotated with its category, or None if nothing matches
    """
    needle = normalize_name(raw_name)
    if not needle:
        return None

    content = content if content is not None else load_content()

    for category, component in iter_components(content, platform):
        if component.name.lower() == needle:
            return ResolvedComponent.from_component(
                component, category.label, category.name
            )

    for category, component in iter_components(content, platform):
        if _contains(component, needle):
            return ResolvedComponent.from_component(
                component, category.label, category.name
            )

    return None


def _summary(category: Category, component: Component) -> ComponentSummary:
    return ComponentSummary(
        name=component.name,
        label=component.label,
        category=category.label,
        category_name=category.name,
    )


def list_components(
    platform: str,
    category: str | None = None,
    content: DocumentCollection | None = None,
) -> list[ComponentSummary]:
    """List components of a platform, optionally limited to one category name."""
    content = content if content is not None else load_content()
    wanted = normalize_name(category)

    return [
        _summary(cat, component)
        for cat, component in iter_components(content, platform)
        if not wanted or cat.name.lower() == wanted
    ]


def suggest_components(
    platform: str,
    raw_name: str | None,
    limit: int = 5,
    content: DocumentCollection | None = None,
) -> list[ComponentSummary]:
    """Did-you-mean candidates for a name that failed to resolve.

    Uses the same substring test as the fallback pass of ``find_component``,
    first with the whole query and then with each of its words.
    """
    needle = normalize_name(raw_name)
    if not needle or limit <= 0:
        return []

    content = content if content is not None else load_content()

    words = [w for w in re.split(r"[\s\-_]+", needle) if len(w) >= MIN_SUGGESTION_WORD]

    suggestions: list[ComponentSummary] = []
    seen: set[str] = set()
    for needles in ([needle], words):
        for candidate in needles:
            for category, component in iter_components(content, platform):
                if component.name in seen or not _contains(component, candidate):
                    continue
                seen.add(component.name)
                suggestions.append(_summary(category, component))
                if len(suggestions) >= limit:
                    return suggestions
        if suggestions:
            break

    return suggestions
