"""Utility functions for the MagentaA11y CLI."""

import subprocess
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from magentaa11y_mcp.core.content import LoadError, load_content
from magentaa11y_mcp.mcp_server.tools import A11yTools
from magentaa11y_mcp.models.domain import DocumentCollection, Platform

console = Console()

PLATFORM_CHOICE = click.Choice([p.value for p in Platform], case_sensitive=False)


def run_command(
    command: list[str],
    cwd: Path | None = None,
    capture_output: bool = False,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run a command with better error handling."""
    try:
        return subprocess.run(
            command,
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            check=check,
        )
    except subprocess.CalledProcessError as e:
        if not capture_output:
            console.print(f"[red]Command failed: {' '.join(command)}[/red]")
            if e.stderr:
                console.print(f"[red]Error: {e.stderr}[/red]")
        raise


def print_table(
    data: list[dict], title: str = "", headers: list[str] | None = None
) -> None:
    """Print data as a rich table."""
    if not data:
        console.print(f"[yellow]No {title.lower()} found.[/yellow]")
        return

    table = Table(title=title)
    columns = headers or list(data[0].keys())
    for column in columns:
        table.add_column(column.replace("_", " ").title())

    for row in data:
        table.add_row(*[str(row.get(column, "")) for column in columns])

    console.print(table)


def echo_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]")


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {message}[/red]")


def echo_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ {message}[/yellow]")


def echo_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ {message}[/blue]")


def load_content_or_exit() -> DocumentCollection:
    """Load the content store, exiting with status 1 on a LoadError."""
    try:
        return load_content()
    except LoadError as e:
        echo_error(f"Failed to load content: {e.message}")
        raise click.exceptions.Exit(1)


def get_tools() -> A11yTools:
    """Tools over the configured content, exiting on load failure."""
    return A11yTools(load_content_or_exit())
