"""Core domain models for the MagentaA11y content index."""

from magentaa11y_mcp.models.domain.content import *
from magentaa11y_mcp.models.domain.results import *

__all__ = [
    # Content tree
    "Platform",
    "NativePlatform",
    "Component",
    "Category",
    "DocumentCollection",
    # Query results
    "ResolvedComponent",
    "ComponentSummary",
    "CategorySummary",
    "ScoredMatch",
    "FormatReport",
]
