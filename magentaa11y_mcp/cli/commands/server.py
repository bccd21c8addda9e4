"""Server commands: run the MCP transports."""

import asyncio

import click

from magentaa11y_mcp.cli.utils import echo_error, echo_info, get_tools
from magentaa11y_mcp.config import get_config
from magentaa11y_mcp.core.content import LoadError
from magentaa11y_mcp.core.logging import setup_logging


@click.group()
def serve():
    """Run the MagentaA11y MCP server.

    Examples:
        magentaa11y serve stdio                     # For local MCP clients
        magentaa11y serve http --host 0.0.0.0       # Stateless HTTP JSON-RPC
    """
    pass


@serve.command()
def stdio():
    """Serve MCP over stdin/stdout.

    Logs go to stderr; stdout carries the protocol.
    """
    from magentaa11y_mcp.mcp_server.main import main as stdio_main

    try:
        asyncio.run(stdio_main())
    except LoadError as e:
        echo_error(f"Failed to load content: {e.message}")
        raise click.exceptions.Exit(1)
    except KeyboardInterrupt:
        pass


@serve.command()
@click.option("--host", default=None, help="Bind address (default from config)")
@click.option("--port", default=None, type=int, help="Bind port (default from config)")
def http(host, port):
    """Serve MCP as stateless JSON-RPC over HTTP at /mcp."""
    import uvicorn

    from magentaa11y_mcp.api.main import create_app

    config = get_config()
    setup_logging(config.log_level, config.log_file)

    host = host or config.server.host
    port = port or config.server.port

    app = create_app(get_tools(), config.server)
    echo_info(f"Serving MCP JSON-RPC at http://{host}:{port}/mcp")
    uvicorn.run(app, host=host, port=port, log_level=config.log_level.lower())
