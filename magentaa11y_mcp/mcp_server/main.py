"""Main MCP server: exposes the MagentaA11y tools over stdio."""

import asyncio
import logging
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from magentaa11y_mcp.config import get_config
from magentaa11y_mcp.core.content import load_content
from magentaa11y_mcp.core.logging import setup_logging
from magentaa11y_mcp.mcp_server.definitions import TOOL_DEFINITIONS
from magentaa11y_mcp.mcp_server.errors import UnknownToolError
from magentaa11y_mcp.mcp_server.tools import A11yTools

logger = logging.getLogger(__name__)

server = Server("magentaa11y-mcp")

# Set by main() once content is loaded
tools: A11yTools | None = None


def get_tools() -> A11yTools:
    """Tools over the process-wide content, created on first use."""
    global tools
    if tools is None:
        tools = A11yTools(load_content())
    return tools


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    """List available MCP tools."""
    return [
        types.Tool(
            name=tool["name"],
            description=tool["description"],
            inputSchema=tool["inputSchema"],
        )
        for tool in TOOL_DEFINITIONS
    ]


@server.call_tool()
async def handle_call_tool(
    name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    """Handle MCP tool calls."""
    try:
        text = get_tools().call(name, arguments or {})
    except UnknownToolError:
        text = f"Error: Unknown tool '{name}'"
    except Exception as e:
        logger.error(f"Tool execution failed: {e}", exc_info=True)
        text = f"Error: Tool execution failed - {e}"

    return [types.TextContent(type="text", text=text)]


async def main() -> None:
    """Main entry point for the MCP stdio server."""
    config = get_config()
    setup_logging(config.log_level, config.log_file)

    # A broken content artifact must stop the server before the handshake
    get_tools()
    logger.info(
        f"Starting {config.server.server_name} v{config.server.server_version} on stdio"
    )

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=config.server.server_name,
                server_version=config.server.server_version,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def cli_main():
    """Synchronous entry point for script generation."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
