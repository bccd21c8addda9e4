"""MCP server for MagentaA11y accessibility criteria.

This package holds the tool definitions and the dispatcher shared by both
transports, and the stdio transport built on the ``mcp`` SDK.
"""

from magentaa11y_mcp.mcp_server.definitions import TOOL_DEFINITIONS, TOOL_NAMES
from magentaa11y_mcp.mcp_server.errors import (
    ComponentNotFoundError,
    ToolError,
    ToolValidationError,
    UnknownToolError,
)
from magentaa11y_mcp.mcp_server.tools import A11yTools

__all__ = [
    "A11yTools",
    "TOOL_DEFINITIONS",
    "TOOL_NAMES",
    "ToolError",
    "ToolValidationError",
    "ComponentNotFoundError",
    "UnknownToolError",
]
