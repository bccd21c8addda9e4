"""Keyword search over component criteria with weighted field scoring."""

import logging

from magentaa11y_mcp.core.content import load_content
from magentaa11y_mcp.core.resolver import iter_components, normalize_name
from magentaa11y_mcp.models.domain import Component, DocumentCollection, ScoredMatch

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10

# (field, weight) in scoring order; matched fields are reported in this order
SEARCH_FIELDS: tuple[tuple[str, int], ...] = (
    ("label", 10),
    ("name", 10),
    ("generalNotes", 5),
    ("gherkin", 3),
    ("condensed", 3),
    ("developerNotes", 2),
    ("androidDeveloperNotes", 2),
    ("iosDeveloperNotes", 2),
)


def _field_text(component: Component, field: str) -> str | None:
    if field == "name":
        return component.name
    if field == "label":
        return component.label
    return component.section(field)


def score_component(component: Component, needle: str) -> tuple[int, list[str]]:
    """Score one component against a normalized query.

    Each matching field adds its weight plus one point per extra
    (non-overlapping) occurrence of the query in that field.

    Returns:
        (score, matched field names)
    """
    score = 0
    matched: list[str] = []

    for field, weight in SEARCH_FIELDS:
        text = _field_text(component, field)
        if not text:
            continue
        occurrences = text.lower().count(needle)
        if occurrences:
            score += weight + occurrences - 1
            matched.append(field)

    return score, matched


def search_components(
    platform: str,
    query: str | None,
    max_results: int = DEFAULT_MAX_RESULTS,
    content: DocumentCollection | None = None,
) -> list[ScoredMatch]:
    """Rank a platform's components by how well they match a keyword query.

    Results are ordered by score (highest first), then by name, and capped
    at ``max_results``. A blank query or unknown platform gives no results.
    """
    needle = normalize_name(query)
    if not needle:
        return []

    content = content if content is not None else load_content()

    results: list[ScoredMatch] = []
    for category, component in iter_components(content, platform):
        score, matched = score_component(component, needle)
        if score <= 0:
            continue
        results.append(
            ScoredMatch(
                name=component.name,
                label=component.label,
                category=category.label,
                category_name=category.name,
                score=score,
                matched_fields=tuple(matched),
                general_notes=component.general_notes,
            )
        )

    results.sort(key=lambda match: (-match.score, match.name))
    logger.debug(
        f"Search '{needle}' on {platform}: {len(results)} matches",
        extra={"extra_data": {"max_results": max_results}},
    )
    return results[: max(max_results, 0)]
