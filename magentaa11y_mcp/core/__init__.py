"""Query core: content store, resolver, search engine and format inspector."""

from magentaa11y_mcp.core.content import (
    LoadError,
    list_categories,
    load_content,
    reset_content_cache,
)
from magentaa11y_mcp.core.formats import list_component_formats
from magentaa11y_mcp.core.resolver import (
    find_component,
    list_components,
    suggest_components,
)
from magentaa11y_mcp.core.search import search_components

__all__ = [
    "LoadError",
    "load_content",
    "reset_content_cache",
    "list_categories",
    "find_component",
    "list_components",
    "suggest_components",
    "search_components",
    "list_component_formats",
]
