"""Report which optional content sections a component provides."""

from magentaa11y_mcp.core.resolver import find_component
from magentaa11y_mcp.models.domain import DocumentCollection, FormatReport

# Report order
FORMAT_FIELDS = (
    "gherkin",
    "condensed",
    "developerNotes",
    "androidDeveloperNotes",
    "iosDeveloperNotes",
    "videos",
    "generalNotes",
)

FORMAT_DESCRIPTIONS = {
    "gherkin": "Gherkin-style acceptance criteria (Given/When/Then)",
    "condensed": "Condensed acceptance criteria (quick reference)",
    "developerNotes": "Developer implementation notes with code examples",
    "androidDeveloperNotes": "Android-specific developer notes (TalkBack)",
    "iosDeveloperNotes": "iOS-specific developer notes (VoiceOver)",
    "videos": "Demo videos",
    "generalNotes": "General overview notes",
}


def list_component_formats(
    platform: str, name: str | None, content: DocumentCollection | None = None
) -> FormatReport | None:
    """Resolve a component and report the presence of each content format."""
    component = find_component(platform, name, content=content)
    if component is None:
        return None

    return FormatReport(
        name=component.name,
        label=component.label,
        category=component.category,
        formats={field: component.has_section(field) for field in FORMAT_FIELDS},
    )
