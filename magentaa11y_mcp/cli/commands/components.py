"""Component commands: list, inspect and check formats of components."""

import json

import click
from rich.console import Console
from rich.markdown import Markdown

from magentaa11y_mcp.cli.utils import (
    PLATFORM_CHOICE,
    echo_info,
    echo_warning,
    get_tools,
    load_content_or_exit,
    print_table,
)
from magentaa11y_mcp.core.content import list_categories
from magentaa11y_mcp.core.resolver import list_components

console = Console()


@click.group()
def components():
    """Browse MagentaA11y components.

    Examples:
        magentaa11y components categories web          # Categories with counts
        magentaa11y components list native --category controls
        magentaa11y components get web button          # Full criteria
        magentaa11y components formats native switch  # Available sections
    """
    pass


@components.command("list")
@click.argument("platform", type=PLATFORM_CHOICE)
@click.option("--category", default=None, help="Only components of this category name")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json", "markdown"]),
    help="Output format",
)
def list_command(platform, category, output_format):
    """List components of a platform in catalog order."""
    platform = platform.lower()
    content = load_content_or_exit()

    if output_format == "markdown":
        tool = "list_web_components" if platform == "web" else "list_native_components"
        console.print(Markdown(get_tools().call(tool, {"category": category})))
        return

    results = list_components(platform, category, content=content)
    if output_format == "json":
        click.echo(json.dumps([r.model_dump(by_alias=True) for r in results], indent=2))
        return

    if not results and category:
        echo_warning(f'No components found in category "{category}"')
        echo_info("Available categories:")
        print_table(
            [c.model_dump() for c in list_categories(platform, content=content)],
            title="Categories",
        )
        return

    print_table(
        [r.model_dump() for r in results],
        title=f"{platform.title()} components ({len(results)})",
        headers=["name", "label", "category"],
    )


@components.command()
@click.argument("platform", type=PLATFORM_CHOICE)
def categories(platform):
    """List categories of a platform with component counts."""
    content = load_content_or_exit()
    print_table(
        [c.model_dump() for c in list_categories(platform.lower(), content=content)],
        title=f"{platform.title()} categories",
    )


@components.command()
@click.argument("platform", type=PLATFORM_CHOICE)
@click.argument("name")
@click.option(
    "--code/--no-code",
    default=True,
    help="Include developer notes and code examples",
)
def get(platform, name, code):
    """Show the full criteria for a component."""
    tool = "get_web_component" if platform.lower() == "web" else "get_native_component"
    text = get_tools().call(tool, {"component": name, "include_code_examples": code})
    console.print(Markdown(text))


@components.command()
@click.argument("platform", type=PLATFORM_CHOICE)
@click.argument("name")
def formats(platform, name):
    """Show which content sections a component provides."""
    text = get_tools().call(
        "list_component_formats", {"platform": platform.lower(), "component": name}
    )
    console.print(Markdown(text))
