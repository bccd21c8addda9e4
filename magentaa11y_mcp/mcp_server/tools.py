"""MCP tools for querying MagentaA11y accessibility criteria."""

import logging
import sys
from typing import Any, Callable

from magentaa11y_mcp.core import formatting
from magentaa11y_mcp.core.content import list_categories, load_content
from magentaa11y_mcp.core.formats import list_component_formats
from magentaa11y_mcp.core.resolver import (
    find_component,
    list_components,
    suggest_components,
)
from magentaa11y_mcp.core.search import DEFAULT_MAX_RESULTS, search_components
from magentaa11y_mcp.mcp_server.definitions import get_tool_definition
from magentaa11y_mcp.mcp_server.errors import (
    ComponentNotFoundError,
    ToolValidationError,
    UnknownToolError,
    handle_tool_errors,
)
from magentaa11y_mcp.models.domain import (
    DocumentCollection,
    NativePlatform,
    Platform,
    ResolvedComponent,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5


def _require_text(value: Any, parameter: str) -> str:
    """Validate a required string parameter is present and non-empty."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ToolValidationError(f"Missing required parameter: {parameter}")
    if not isinstance(value, str):
        raise ToolValidationError(f"Parameter {parameter} must be a non-empty string")
    return value


def _parse_platform(value: Any) -> Platform:
    text = _require_text(value, "platform")
    try:
        return Platform(text.strip().lower())
    except ValueError:
        raise ToolValidationError(
            f'Invalid platform "{text}". Expected one of: web, native'
        ) from None


def _parse_native_platform(value: Any) -> NativePlatform:
    text = _require_text(value, "platform")
    try:
        return NativePlatform(text.strip().lower())
    except ValueError:
        raise ToolValidationError(
            f'Invalid platform "{text}". Expected one of: ios, android'
        ) from None


def _parse_max_results(value: Any) -> int:
    """Missing, non-numeric or non-positive limits fall back to the default."""
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return DEFAULT_MAX_RESULTS
    except OverflowError:
        # Infinite limits are unbounded
        return sys.maxsize
    return limit if limit > 0 else DEFAULT_MAX_RESULTS


def _optional_text(value: Any) -> str | None:
    return value if isinstance(value, str) and value.strip() else None


class A11yTools:
    """The eleven MagentaA11y query tools.

    Every tool returns Markdown text. Not-found and validation outcomes are
    returned as descriptive text rather than raised.
    """

    def __init__(self, content: DocumentCollection | None = None):
        """Initialize tools over a loaded collection (defaults to the content store)."""
        self.content = content if content is not None else load_content()
        self._handlers: dict[str, Callable[..., str]] = {
            "list_web_components": self.list_web_components,
            "get_web_component": self.get_web_component,
            "search_web_criteria": self.search_web_criteria,
            "list_native_components": self.list_native_components,
            "get_native_component": self.get_native_component,
            "search_native_criteria": self.search_native_criteria,
            "get_component_gherkin": self.get_component_gherkin,
            "get_component_condensed": self.get_component_condensed,
            "get_component_developer_notes": self.get_component_developer_notes,
            "get_component_native_notes": self.get_component_native_notes,
            "list_component_formats": self.list_component_formats,
        }

    def call(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Dispatch a tool call by name.

        Arguments not declared in the tool's input schema are ignored.

        Raises:
            UnknownToolError: If no tool has this name
        """
        handler = self._handlers.get(name)
        definition = get_tool_definition(name)
        if handler is None or definition is None:
            raise UnknownToolError(name)

        declared = definition["inputSchema"].get("properties", {})
        kwargs = {
            key: value
            for key, value in (arguments or {}).items()
            if key in declared
        }
        logger.debug(f"Calling tool {name}", extra={"extra_data": kwargs})
        return handler(**kwargs)

    # Shared helpers

    def _resolve(self, platform: str, component: str) -> ResolvedComponent:
        resolved = find_component(platform, component, content=self.content)
        if resolved is None:
            raise ComponentNotFoundError(
                f'Component "{component}" not found for platform "{platform}".'
            )
        return resolved

    def _resolve_with_suggestions(
        self, platform: Platform, component: str
    ) -> ResolvedComponent:
        resolved = find_component(platform, component, content=self.content)
        if resolved is None:
            suggestions = suggest_components(
                platform, component, limit=MAX_SUGGESTIONS, content=self.content
            )
            raise ComponentNotFoundError(
                formatting.render_not_found(
                    component, suggestions, native=platform is Platform.NATIVE
                )
            )
        return resolved

    def _list(self, platform: Platform, category: Any) -> str:
        category = _optional_text(category)
        components = list_components(platform, category, content=self.content)

        if not components:
            if category:
                return formatting.render_unknown_category(
                    category, list_categories(platform, content=self.content)
                )
            return f"No {platform.value} components found."

        return formatting.render_component_list(platform, components)

    def _search(self, platform: Platform, query: Any, max_results: Any) -> str:
        query = _require_text(query, "query")
        results = search_components(
            platform,
            query,
            _parse_max_results(max_results),
            content=self.content,
        )
        if not results:
            scope = "native" if platform is Platform.NATIVE else "web"
            return f'No results found for "{query}" in {scope} accessibility criteria.'
        return formatting.render_search_results(platform, query, results)

    # Web platform tools

    @handle_tool_errors("listing web components")
    def list_web_components(self, category: str | None = None) -> str:
        return self._list(Platform.WEB, category)

    @handle_tool_errors("getting component")
    def get_web_component(
        self, component: str | None = None, include_code_examples: bool = True
    ) -> str:
        component = _require_text(component, "component")
        resolved = self._resolve_with_suggestions(Platform.WEB, component)
        return formatting.render_web_component(
            resolved, include_code_examples is not False
        )

    @handle_tool_errors("searching web criteria")
    def search_web_criteria(
        self, query: str | None = None, max_results: int | None = None
    ) -> str:
        return self._search(Platform.WEB, query, max_results)

    # Native platform tools

    @handle_tool_errors("listing native components")
    def list_native_components(self, category: str | None = None) -> str:
        return self._list(Platform.NATIVE, category)

    @handle_tool_errors("getting native component")
    def get_native_component(
        self, component: str | None = None, include_code_examples: bool = True
    ) -> str:
        component = _require_text(component, "component")
        resolved = self._resolve_with_suggestions(Platform.NATIVE, component)
        return formatting.render_native_component(
            resolved, include_code_examples is not False
        )

    @handle_tool_errors("searching native criteria")
    def search_native_criteria(
        self, query: str | None = None, max_results: int | None = None
    ) -> str:
        return self._search(Platform.NATIVE, query, max_results)

    # Content format tools

    @handle_tool_errors("getting Gherkin criteria")
    def get_component_gherkin(
        self, platform: str | None = None, component: str | None = None
    ) -> str:
        key = _parse_platform(platform)
        resolved = self._resolve(key.value, _require_text(component, "component"))
        if not resolved.gherkin:
            return f'No Gherkin criteria available for "{resolved.label}".'
        return formatting.render_section(
            "Gherkin Acceptance Criteria", key.value, resolved, resolved.gherkin
        )

    @handle_tool_errors("getting condensed criteria")
    def get_component_condensed(
        self, platform: str | None = None, component: str | None = None
    ) -> str:
        key = _parse_platform(platform)
        resolved = self._resolve(key.value, _require_text(component, "component"))
        if not resolved.condensed:
            return f'No condensed criteria available for "{resolved.label}".'
        return formatting.render_section(
            "Condensed Acceptance Criteria", key.value, resolved, resolved.condensed
        )

    @handle_tool_errors("getting developer notes")
    def get_component_developer_notes(
        self, platform: str | None = None, component: str | None = None
    ) -> str:
        key = _parse_platform(platform)
        resolved = self._resolve(key.value, _require_text(component, "component"))
        notes = formatting.render_developer_notes(key.value, resolved)
        if notes is None:
            return f'No developer notes available for "{resolved.label}".'
        return notes

    @handle_tool_errors("getting native notes")
    def get_component_native_notes(
        self, platform: str | None = None, component: str | None = None
    ) -> str:
        native_platform = _parse_native_platform(platform)
        component = _require_text(component, "component")
        resolved = find_component(Platform.NATIVE, component, content=self.content)
        if resolved is None:
            return f'Native component "{component}" not found.'

        notes = formatting.render_native_notes(native_platform, resolved)
        if notes is None:
            platform_name = formatting.NATIVE_PLATFORM_NAMES[native_platform]
            return f'No {platform_name} developer notes available for "{resolved.label}".'
        return notes

    @handle_tool_errors("listing formats")
    def list_component_formats(
        self, platform: str | None = None, component: str | None = None
    ) -> str:
        key = _parse_platform(platform)
        component = _require_text(component, "component")
        report = list_component_formats(key.value, component, content=self.content)
        if report is None:
            return f'Component "{component}" not found for platform "{key.value}".'
        return formatting.render_formats(key.value, report)
