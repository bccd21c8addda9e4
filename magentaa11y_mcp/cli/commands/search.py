"""Search command for the MagentaA11y CLI."""

import json

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from magentaa11y_mcp.cli.utils import PLATFORM_CHOICE, echo_info, load_content_or_exit
from magentaa11y_mcp.core.formatting import render_search_results
from magentaa11y_mcp.core.search import DEFAULT_MAX_RESULTS, search_components

console = Console()


@click.command()
@click.argument("platform", type=PLATFORM_CHOICE)
@click.argument("query")
@click.option(
    "--limit",
    default=DEFAULT_MAX_RESULTS,
    type=click.IntRange(min=1),
    help="Maximum number of results",
)
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json", "markdown"]),
    help="Output format",
)
def search(platform, query, limit, output_format):
    """Search accessibility criteria by keyword.

    Matches in labels and names rank highest, then overviews, acceptance
    criteria and developer notes.

    Examples:
        magentaa11y search web "focus indicator"
        magentaa11y search native voiceover --limit 3 --format json
    """
    platform = platform.lower()
    content = load_content_or_exit()
    results = search_components(platform, query, limit, content=content)

    if output_format == "json":
        click.echo(
            json.dumps(
                [
                    r.model_dump(by_alias=True, exclude={"general_notes"})
                    for r in results
                ],
                indent=2,
            )
        )
        return

    if not results:
        echo_info(f'No results found for "{query}"')
        return

    if output_format == "markdown":
        console.print(Markdown(render_search_results(platform, query, results)))
        return

    table = Table(title=f'Results for "{query}" ({len(results)})')
    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Component")
    table.add_column("Category")
    table.add_column("Matched in", style="dim")
    for result in results:
        table.add_row(
            str(result.score),
            f"{result.label} ({result.name})",
            result.category,
            ", ".join(result.matched_fields),
        )
    console.print(table)
