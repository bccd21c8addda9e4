"""Shared fixtures: a small content tree and an isolated content store."""

import copy
import json

import pytest

from magentaa11y_mcp.config import set_config
from magentaa11y_mcp.core.content import parse_content, reset_content_cache
from magentaa11y_mcp.mcp_server.tools import A11yTools
from magentaa11y_mcp.models.config import Settings

SAMPLE_CONTENT = {
    "web": [
        {
            "name": "controls",
            "label": "Controls",
            "children": [
                {
                    "name": "button",
                    "label": "Button",
                    "generalNotes": "A button triggers an action.",
                    "gherkin": "WHEN I tab to the button\nTHEN I see a visible focus indicator",
                    "condensed": "Tab moves focus to the button",
                    "developerNotes": "Use the native button element.",
                    "videos": [{"src": "button.mp4"}],
                },
                {
                    "name": "checkbox",
                    "label": "Checkbox",
                    "gherkin": "Given I am on a page with a checkbox\nWhen I press space\nThen it toggles",
                },
                {
                    "name": "toggle-switch",
                    "label": "Toggle switch",
                    "condensed": "Spacebar toggles the state",
                    "developerNotes": "Use role switch.",
                },
            ],
        },
        {
            "name": "forms",
            "label": "Forms",
            "children": [
                {
                    "name": "text-input",
                    "label": "Text input",
                    "generalNotes": "Every input needs a label.",
                    "developerNotes": "Associate the label with for/id.",
                },
                {
                    "name": "select",
                    "label": "Select",
                    "condensed": "Arrow keys change the option",
                },
            ],
        },
    ],
    "native": [
        {
            "name": "controls",
            "label": "Controls",
            "children": [
                {
                    "name": "button",
                    "label": "Button",
                    "gherkin": "WHEN I swipe to the button\nTHEN I hear its name",
                    "iosDeveloperNotes": "Use UIButton.",
                    "androidDeveloperNotes": "Use android.widget.Button.",
                },
                {
                    "name": "switch",
                    "label": "Switch",
                    "iosDeveloperNotes": "Use UISwitch.",
                },
            ],
        },
        {
            "name": "components",
            "label": "Components",
            "children": [
                {
                    "name": "picker",
                    "label": "Picker",
                    "generalNotes": "A picker selects a value.",
                    "developerNotes": "Picker general notes.",
                },
            ],
        },
    ],
}


@pytest.fixture(autouse=True)
def isolated_content_store():
    """Every test starts with an empty content cache and default settings."""
    reset_content_cache()
    set_config(Settings())
    yield
    reset_content_cache()
    set_config(None)


@pytest.fixture
def sample_content() -> dict:
    return copy.deepcopy(SAMPLE_CONTENT)


@pytest.fixture
def collection(sample_content):
    return parse_content(sample_content)


@pytest.fixture
def tools(collection) -> A11yTools:
    return A11yTools(collection)


@pytest.fixture
def content_file(tmp_path, sample_content):
    """The sample tree written to a content.json on disk."""
    path = tmp_path / "content.json"
    path.write_text(json.dumps(sample_content), encoding="utf-8")
    return path


@pytest.fixture
def configured_content(content_file):
    """Point the process configuration at the sample content.json."""
    set_config(Settings(content_path=content_file))
    return content_file
