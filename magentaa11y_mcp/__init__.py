"""
MagentaA11y MCP Server: accessibility criteria over the Model Context Protocol.

Serves the MagentaA11y web and native component criteria (Gherkin, condensed
criteria, developer notes) to MCP clients over stdio or stateless HTTP JSON-RPC.
"""

__version__ = "1.0.0"
