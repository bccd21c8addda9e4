"""
Unit tests for the MCP tool dispatcher.
"""

import json
from unittest.mock import patch

import pytest

from magentaa11y_mcp.core.content import parse_content
from magentaa11y_mcp.mcp_server.definitions import (
    TOOL_DEFINITIONS,
    TOOL_NAMES,
    get_tool_definition,
)
from magentaa11y_mcp.mcp_server.errors import (
    ComponentNotFoundError,
    UnknownToolError,
    handle_tool_errors,
)
from magentaa11y_mcp.mcp_server.tools import A11yTools


class TestToolDefinitions:
    """Test the advertised tool catalog."""

    def test_eleven_tools(self):
        """Test every tool is advertised exactly once."""
        assert len(TOOL_DEFINITIONS) == 11
        assert len(set(TOOL_NAMES)) == 11

    def test_schemas(self):
        """Test each tool has an object input schema."""
        for tool in TOOL_DEFINITIONS:
            assert tool["description"]
            assert tool["inputSchema"]["type"] == "object"

    def test_required_parameters(self):
        """Test required parameters per tool."""
        assert "required" not in get_tool_definition("list_web_components")["inputSchema"]
        assert get_tool_definition("search_web_criteria")["inputSchema"]["required"] == ["query"]
        assert get_tool_definition("get_component_gherkin")["inputSchema"]["required"] == [
            "platform",
            "component",
        ]
        assert get_tool_definition("get_component_native_notes")["inputSchema"]["properties"][
            "platform"
        ]["enum"] == ["ios", "android"]

    def test_unknown_definition(self):
        """Test lookup of an unknown tool."""
        assert get_tool_definition("nope") is None

    def test_every_tool_has_a_handler(self, tools):
        """Test the catalog and the dispatcher agree."""
        assert set(tools._handlers) == set(TOOL_NAMES)


class TestListTools:
    """Test the listing tools."""

    def test_list_web_components(self, tools):
        """Test the full web listing."""
        text = tools.call("list_web_components", {})
        assert text.startswith("# Web Accessibility Components (5 total)")

    def test_list_with_category(self, tools):
        """Test the category filter."""
        text = tools.call("list_web_components", {"category": "forms"})
        assert "(2 total)" in text
        assert "Button" not in text

    def test_list_unknown_category(self, tools):
        """Test an unknown category lists the available ones."""
        text = tools.call("list_native_components", {"category": "navigation"})
        assert text.startswith('No components found in category "navigation".')
        assert "- Components (components): 1 components" in text

    def test_list_empty_platform(self):
        """Test an empty platform."""
        tools = A11yTools(parse_content({"web": []}))
        assert tools.call("list_native_components", {}) == "No native components found."


class TestGetComponent:
    """Test the component detail tools."""

    def test_get_web_component(self, tools):
        """Test full web criteria."""
        text = tools.call("get_web_component", {"component": "Checkbox"})
        assert text.startswith("# Checkbox")
        assert "**Category:** Controls" in text

    def test_include_code_examples_false(self, tools):
        """Test developer notes are omitted on request."""
        text = tools.call(
            "get_web_component", {"component": "button", "include_code_examples": False}
        )
        assert "Developer Notes" not in text

    def test_not_found(self, tools):
        """Test a not-found reply."""
        text = tools.call("get_web_component", {"component": "carousel"})
        assert text == 'Component "carousel" not found.'

    def test_not_found_with_suggestions(self, tools):
        """Test suggestions follow a not-found reply."""
        text = tools.call("get_native_component", {"component": "big picker wheel"})
        assert text.startswith('Native component "big picker wheel" not found.')
        assert "- Picker (`picker`)" in text

    def test_missing_component(self, tools):
        """Test a missing required parameter."""
        assert tools.call("get_web_component", {}) == "Missing required parameter: component"
        assert tools.call("get_web_component", {"component": "  "}) == (
            "Missing required parameter: component"
        )

    def test_get_native_component(self, tools):
        """Test native criteria."""
        text = tools.call("get_native_component", {"component": "button"})
        assert text.startswith("# Button (Native)")
        assert "## iOS Developer Notes (VoiceOver)" in text


class TestSearchTools:
    """Test the search tools."""

    def test_search_web(self, tools):
        """Test a web search reply."""
        text = tools.call("search_web_criteria", {"query": "given"})
        assert text.startswith('# Search Results for "given" (1 matches)')
        assert "**Matched in:** gherkin" in text

    def test_search_native(self, tools):
        """Test a native search reply."""
        text = tools.call("search_native_criteria", {"query": "picker"})
        assert text.startswith('# Native Search Results for "picker" (1 matches)')
        assert "**Overview:** A picker selects a value." in text

    def test_no_results(self, tools):
        """Test a search with no hits."""
        assert tools.call("search_native_criteria", {"query": "carousel"}) == (
            'No results found for "carousel" in native accessibility criteria.'
        )

    def test_max_results(self, tools):
        """Test the result cap."""
        text = tools.call("search_web_criteria", {"query": "toggle", "max_results": 1})
        assert "(1 matches)" in text
        assert "toggle-switch" in text

    @pytest.mark.parametrize("max_results", [None, 0, -3, "many"])
    def test_invalid_max_results_use_default(self, tools, max_results):
        """Test unusable limits fall back to the default."""
        text = tools.call("search_web_criteria", {"query": "toggle", "max_results": max_results})
        assert "(2 matches)" in text

    def test_infinite_max_results_are_unbounded(self, tools):
        """Test a limit too large for an int returns every match."""
        arguments = json.loads('{"query": "toggle", "max_results": 1e400}')
        text = tools.call("search_web_criteria", arguments)
        assert "(2 matches)" in text

    def test_missing_query(self, tools):
        """Test a missing query."""
        assert tools.call("search_web_criteria", {}) == "Missing required parameter: query"

    def test_non_string_query(self, tools):
        """Test a query of the wrong type is reported as such."""
        assert tools.call("search_web_criteria", {"query": 42}) == (
            "Parameter query must be a non-empty string"
        )


class TestSectionTools:
    """Test the per-format tools."""

    def test_gherkin(self, tools):
        """Test Gherkin criteria for a component."""
        text = tools.call("get_component_gherkin", {"platform": "web", "component": "checkbox"})
        assert text.startswith("# Gherkin Acceptance Criteria: Checkbox")
        assert "**Platform:** web" in text
        assert text.endswith("Then it toggles")

    def test_platform_is_case_insensitive(self, tools):
        """Test platform names are normalized."""
        text = tools.call("get_component_gherkin", {"platform": "WEB", "component": "checkbox"})
        assert "**Platform:** web" in text

    def test_gherkin_missing(self, tools):
        """Test a component without Gherkin criteria."""
        text = tools.call("get_component_gherkin", {"platform": "web", "component": "select"})
        assert text == 'No Gherkin criteria available for "Select".'

    def test_condensed(self, tools):
        """Test condensed criteria."""
        text = tools.call("get_component_condensed", {"platform": "web", "component": "select"})
        assert text.startswith("# Condensed Acceptance Criteria: Select")

    def test_section_component_not_found(self, tools):
        """Test an unresolved component."""
        text = tools.call("get_component_condensed", {"platform": "native", "component": "carousel"})
        assert text == 'Component "carousel" not found for platform "native".'

    def test_invalid_platform(self, tools):
        """Test an unknown platform is rejected."""
        text = tools.call("get_component_gherkin", {"platform": "desktop", "component": "button"})
        assert text == 'Invalid platform "desktop". Expected one of: web, native'

    def test_missing_platform(self, tools):
        """Test a missing platform is rejected."""
        text = tools.call("get_component_condensed", {"component": "button"})
        assert text == "Missing required parameter: platform"

    def test_developer_notes(self, tools):
        """Test developer notes for a native component."""
        text = tools.call(
            "get_component_developer_notes", {"platform": "native", "component": "button"}
        )
        assert "## iOS Developer Notes\nUse UIButton." in text
        assert "## Android Developer Notes\nUse android.widget.Button." in text

    def test_developer_notes_missing(self, tools):
        """Test a component without developer notes."""
        text = tools.call(
            "get_component_developer_notes", {"platform": "web", "component": "checkbox"}
        )
        assert text == 'No developer notes available for "Checkbox".'

    def test_native_notes(self, tools):
        """Test iOS notes."""
        text = tools.call("get_component_native_notes", {"platform": "ios", "component": "switch"})
        assert text.startswith("# iOS Developer Notes: Switch")
        assert "**Component:** switch" in text

    def test_native_notes_missing(self, tools):
        """Test a native component without Android notes."""
        text = tools.call(
            "get_component_native_notes", {"platform": "android", "component": "switch"}
        )
        assert text == 'No Android developer notes available for "Switch".'

    def test_native_notes_not_found(self, tools):
        """Test an unresolved native component."""
        text = tools.call(
            "get_component_native_notes", {"platform": "ios", "component": "carousel"}
        )
        assert text == 'Native component "carousel" not found.'

    def test_native_notes_invalid_platform(self, tools):
        """Test web is not a native platform."""
        text = tools.call("get_component_native_notes", {"platform": "web", "component": "switch"})
        assert text == 'Invalid platform "web". Expected one of: ios, android'

    def test_list_formats(self, tools):
        """Test the format checklist."""
        text = tools.call("list_component_formats", {"platform": "web", "component": "button"})
        assert text.startswith("# Available Formats: Button")
        assert "✅ **gherkin**" in text
        assert "❌ **androidDeveloperNotes**" in text

    def test_list_formats_not_found(self, tools):
        """Test formats of an unresolved component."""
        text = tools.call("list_component_formats", {"platform": "web", "component": "carousel"})
        assert text == 'Component "carousel" not found for platform "web".'


class TestDispatch:
    """Test dispatch and error handling."""

    def test_unknown_tool(self, tools):
        """Test an unknown tool name raises."""
        with pytest.raises(UnknownToolError, match="Unknown tool: nope"):
            tools.call("nope", {})

    def test_undeclared_arguments_ignored(self, tools):
        """Test arguments outside the schema are dropped."""
        text = tools.call("list_web_components", {"category": "forms", "verbose": True})
        assert "(2 total)" in text

    def test_none_arguments(self, tools):
        """Test missing arguments behave as an empty object."""
        assert tools.call("list_native_components", None).startswith("# Native")

    def test_unexpected_failure_becomes_text(self, tools):
        """Test unexpected exceptions are reported, not raised."""
        with patch(
            "magentaa11y_mcp.mcp_server.tools.search_components",
            side_effect=RuntimeError("index unavailable"),
        ):
            text = tools.call("search_web_criteria", {"query": "button"})
        assert text == "Error searching web criteria: index unavailable"

    def test_defaults_to_content_store(self, configured_content):
        """Test tools load the configured content when none is given."""
        tools = A11yTools()
        assert tools.call("get_web_component", {"component": "checkbox"}).startswith("# Checkbox")


class TestHandleToolErrors:
    """Test the error decorator directly."""

    def test_tool_error_message(self):
        """Test tool errors become their message."""

        @handle_tool_errors("testing")
        def fail():
            raise ComponentNotFoundError("nothing here")

        assert fail() == "nothing here"

    def test_passthrough(self):
        """Test successful results are returned unchanged."""

        @handle_tool_errors("testing")
        def succeed(value):
            return value

        assert succeed("ok") == "ok"
