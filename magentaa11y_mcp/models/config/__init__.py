"""Configuration models for the MagentaA11y MCP server."""

from magentaa11y_mcp.models.config.server import *
from magentaa11y_mcp.models.config.settings import *

__all__ = ["ServerConfig", "Settings", "DEFAULT_CONFIG_DIR"]
