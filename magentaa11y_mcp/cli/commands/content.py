"""Content commands: inspect and refresh the content.json artifact."""

import json
import shutil
from pathlib import Path

import click

from magentaa11y_mcp.cli.utils import (
    echo_error,
    echo_info,
    echo_success,
    load_content_or_exit,
    print_table,
    run_command,
)
from magentaa11y_mcp.core.content import (
    LoadError,
    parse_content,
    reset_content_cache,
    resolve_content_path,
)
from magentaa11y_mcp.models.domain import Platform

# Where the upstream MagentaA11y build writes its content.json
UPSTREAM_CONTENT_PATH = Path("src") / "shared" / "content.json"


@click.group()
def content():
    """Inspect or refresh the accessibility content artifact.

    Examples:
        magentaa11y content info
        magentaa11y content update ./content.json
        magentaa11y content update ../magentaA11y --build
    """
    pass


@content.command()
def info():
    """Show the artifact path and per-platform counts."""
    path = resolve_content_path()
    collection = load_content_or_exit()

    echo_info(f"Content file: {path}")
    print_table(
        [
            {
                "platform": platform.value,
                "categories": len(collection.categories(platform)),
                "components": collection.component_count(platform),
            }
            for platform in Platform
        ],
        title="Content",
    )


def _source_file(source: Path, build: bool) -> Path:
    """The content.json to install, building an upstream checkout if asked."""
    if source.is_file():
        return source

    if build:
        echo_info(f"Pulling latest MagentaA11y into {source}")
        run_command(["git", "pull", "origin", "main"], cwd=source)
        echo_info("Installing dependencies")
        run_command(["npm", "install"], cwd=source)
        echo_info("Building MagentaA11y")
        run_command(["npm", "run", "build"], cwd=source)

    return source / UPSTREAM_CONTENT_PATH


@content.command()
@click.argument("source", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--dest",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file (default: the configured content path)",
)
@click.option(
    "--build",
    is_flag=True,
    help="SOURCE is a MagentaA11y checkout: pull and build it first",
)
def update(source, dest, build):
    """Validate a content.json and install it as the served artifact.

    SOURCE is either a content.json file or a MagentaA11y checkout whose
    build output lives in src/shared/content.json.
    """
    source_file = _source_file(source, build)
    if not source_file.is_file():
        echo_error(f"Build output not found: {source_file}")
        raise click.exceptions.Exit(1)

    try:
        with open(source_file, "r", encoding="utf-8") as f:
            collection = parse_content(json.load(f), source_file)
    except (ValueError, LoadError) as e:
        echo_error(f"Refusing to install invalid content: {e}")
        raise click.exceptions.Exit(1)

    destination = dest or resolve_content_path()
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source_file, destination)
    reset_content_cache()

    echo_success(
        f"Installed {collection.component_count('web')} web and "
        f"{collection.component_count('native')} native components to {destination}"
    )
