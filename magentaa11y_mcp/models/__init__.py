"""Centralized model definitions for the MagentaA11y MCP server.

This package contains all Pydantic models organized by domain:
- domain/: content tree and query result models
- config/: configuration models
"""

from magentaa11y_mcp.models.config.server import *
from magentaa11y_mcp.models.config.settings import *
from magentaa11y_mcp.models.domain.content import *
from magentaa11y_mcp.models.domain.results import *

__all__ = [
    # Domain models
    "Platform",
    "NativePlatform",
    "Component",
    "Category",
    "DocumentCollection",
    "ResolvedComponent",
    "ComponentSummary",
    "CategorySummary",
    "ScoredMatch",
    "FormatReport",
    # Config models
    "ServerConfig",
    "Settings",
    "DEFAULT_CONFIG_DIR",
]
