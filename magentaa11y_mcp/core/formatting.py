"""Markdown rendering of query results for MCP tool responses."""

from collections.abc import Sequence

from magentaa11y_mcp.core.formats import FORMAT_DESCRIPTIONS
from magentaa11y_mcp.models.domain import (
    CategorySummary,
    ComponentSummary,
    FormatReport,
    NativePlatform,
    Platform,
    ResolvedComponent,
    ScoredMatch,
)

NATIVE_PLATFORM_NAMES = {
    NativePlatform.IOS: "iOS",
    NativePlatform.ANDROID: "Android",
}

NATIVE_NOTES_FIELDS = {
    NativePlatform.IOS: "iosDeveloperNotes",
    NativePlatform.ANDROID: "androidDeveloperNotes",
}


def _platform_title(platform: str) -> str:
    return "Native" if platform == Platform.NATIVE else "Web"


def render_component_list(
    platform: str, components: Sequence[ComponentSummary]
) -> str:
    """Components grouped by category label, in listing order."""
    grouped: dict[str, list[ComponentSummary]] = {}
    for component in components:
        grouped.setdefault(component.category, []).append(component)

    output = (
        f"# {_platform_title(platform)} Accessibility Components "
        f"({len(components)} total)\n\n"
    )
    if platform == Platform.NATIVE:
        output += "*For iOS (VoiceOver) and Android (TalkBack)*\n\n"

    for category, members in grouped.items():
        output += f"## {category}\n"
        for component in members:
            output += f"- **{component.label}** (`{component.name}`)\n"
        output += "\n"

    return output


def render_unknown_category(
    category: str, categories: Sequence[CategorySummary]
) -> str:
    """Message for a category filter that matched nothing."""
    lines = "\n".join(
        f"- {c.label} ({c.name}): {c.component_count} components" for c in categories
    )
    return (
        f'No components found in category "{category}".\n\n'
        f"Available categories:\n{lines}"
    )


def render_not_found(
    name: str, suggestions: Sequence[ComponentSummary], native: bool = False
) -> str:
    """Not-found message with an optional did-you-mean list."""
    prefix = "Native component" if native else "Component"
    message = f'{prefix} "{name}" not found.'
    if suggestions:
        lines = "\n".join(f"- {s.label} (`{s.name}`)" for s in suggestions)
        message += f"\n\nDid you mean:\n{lines}"
    return message


def _header(title: str, component: ResolvedComponent) -> str:
    return (
        f"# {title}\n\n"
        f"**Category:** {component.category}\n"
        f"**Component ID:** `{component.name}`\n\n"
    )


def _criteria_sections(component: ResolvedComponent) -> str:
    output = ""
    if component.general_notes:
        output += f"## Overview\n{component.general_notes}\n\n"
    if component.condensed:
        output += f"## Condensed Criteria\n{component.condensed}\n\n"
    if component.gherkin:
        output += f"## Gherkin Acceptance Criteria\n{component.gherkin}\n\n"
    return output


def render_web_component(
    component: ResolvedComponent, include_code_examples: bool = True
) -> str:
    """Full criteria for a web component."""
    output = _header(component.label, component)
    output += _criteria_sections(component)
    if include_code_examples and component.developer_notes:
        output += f"## Developer Notes & Code Examples\n{component.developer_notes}\n"
    return output


def render_native_component(
    component: ResolvedComponent, include_code_examples: bool = True
) -> str:
    """Full criteria for a native component, with iOS and Android notes."""
    output = _header(f"{component.label} (Native)", component)
    output += _criteria_sections(component)
    if include_code_examples:
        if component.ios_developer_notes:
            output += (
                f"## iOS Developer Notes (VoiceOver)\n"
                f"{component.ios_developer_notes}\n\n"
            )
        if component.android_developer_notes:
            output += (
                f"## Android Developer Notes (TalkBack)\n"
                f"{component.android_developer_notes}\n\n"
            )
        if component.developer_notes:
            output += f"## General Developer Notes\n{component.developer_notes}\n"
    return output


def render_search_results(
    platform: str, query: str, results: Sequence[ScoredMatch]
) -> str:
    """Ranked search hits with the fields each one matched in."""
    title = "Native Search Results" if platform == Platform.NATIVE else "Search Results"
    output = f'# {title} for "{query}" ({len(results)} matches)\n\n'

    for result in results:
        output += f"## {result.label} (`{result.name}`)\n"
        output += f"**Category:** {result.category}\n"
        output += f"**Matched in:** {', '.join(result.matched_fields)}\n"
        if result.general_notes:
            output += f"**Overview:** {result.general_notes}\n"
        output += "\n"

    return output


def render_section(
    title: str, platform: str, component: ResolvedComponent, text: str
) -> str:
    """A single named content section (Gherkin, condensed) of a component."""
    return (
        f"# {title}: {component.label}\n\n"
        f"**Platform:** {platform}\n"
        f"**Category:** {component.category}\n\n"
        f"{text}"
    )


def render_developer_notes(platform: str, component: ResolvedComponent) -> str | None:
    """General notes plus, for native, the iOS and Android notes.

    Returns None when the component has none of them.
    """
    sections = []
    if component.developer_notes:
        sections.append(f"## General Developer Notes\n{component.developer_notes}\n\n")
    if platform == Platform.NATIVE:
        if component.ios_developer_notes:
            sections.append(
                f"## iOS Developer Notes\n{component.ios_developer_notes}\n\n"
            )
        if component.android_developer_notes:
            sections.append(
                f"## Android Developer Notes\n{component.android_developer_notes}\n\n"
            )
    if not sections:
        return None

    return (
        f"# Developer Notes: {component.label}\n\n"
        f"**Platform:** {platform}\n"
        f"**Category:** {component.category}\n\n" + "".join(sections)
    )


def render_native_notes(
    native_platform: NativePlatform, component: ResolvedComponent
) -> str | None:
    """iOS or Android developer notes; None when the component has none."""
    notes = component.section(NATIVE_NOTES_FIELDS[native_platform])
    if not notes:
        return None

    return (
        f"# {NATIVE_PLATFORM_NAMES[native_platform]} Developer Notes: {component.label}\n\n"
        f"**Component:** {component.name}\n"
        f"**Category:** {component.category}\n\n"
        f"{notes}"
    )


def render_formats(platform: str, report: FormatReport) -> str:
    """Checklist of the content formats available for a component."""
    output = (
        f"# Available Formats: {report.label}\n\n"
        f"**Platform:** {platform}\n"
        f"**Category:** {report.category}\n"
        f"**Component ID:** `{report.name}`\n\n"
        "## Available Content Formats\n\n"
    )
    for fmt, available in report.formats.items():
        status = "✅" if available else "❌"
        output += f"{status} **{fmt}**: {FORMAT_DESCRIPTIONS.get(fmt, fmt)}\n"
    return output
