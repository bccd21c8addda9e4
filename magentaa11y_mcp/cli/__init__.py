"""Command-line interface for the MagentaA11y MCP server."""

from magentaa11y_mcp import __version__

__all__ = ["__version__"]
