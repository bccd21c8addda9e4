"""Main CLI entry point for the MagentaA11y MCP server."""

from pathlib import Path

import click
from rich.console import Console

from magentaa11y_mcp.cli.utils import echo_error
from magentaa11y_mcp.config import set_config
from magentaa11y_mcp.core.logging import setup_logging
from magentaa11y_mcp.models.config import Settings

console = Console()


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--content",
    "content_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="content.json to serve instead of the configured one",
)
@click.option("--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, version, config_path, content_path, verbose):
    """MagentaA11y accessibility criteria for MCP clients and the terminal.

    Serve the MagentaA11y web and native component criteria over MCP
    (stdio or HTTP), or query them directly.

    Examples:
        magentaa11y -v                               # Show version
        magentaa11y serve stdio                      # Run the MCP stdio server
        magentaa11y serve http --port 8000           # Run the HTTP JSON-RPC server
        magentaa11y components list web              # List web components
        magentaa11y components get native switch     # Show native criteria
        magentaa11y search web "focus indicator"     # Keyword search
    """
    if version:
        from magentaa11y_mcp import __version__

        console.print(f"MagentaA11y MCP v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)

    config = Settings.load_from_file(config_path)
    if content_path is not None:
        config.content_path = content_path
    set_config(config)
    ctx.obj["config"] = config

    if not config.color:
        console.no_color = True

    setup_logging("DEBUG" if verbose else "WARNING", config.log_file)


def register_commands():
    """Register all command groups."""
    try:
        from magentaa11y_mcp.cli.commands.server import serve

        cli.add_command(serve)
    except ImportError as e:
        echo_error(f"Failed to load serve commands: {e}")

    from magentaa11y_mcp.cli.commands.components import components
    from magentaa11y_mcp.cli.commands.content import content
    from magentaa11y_mcp.cli.commands.search import search

    cli.add_command(components)
    cli.add_command(search)
    cli.add_command(content)


register_commands()


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
