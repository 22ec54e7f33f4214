"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from ProgramBrowser.cli.runner import CommandRunner
from ProgramBrowser.config import load_cli_config


@click.group(help="ProgramBrowser: search, filter and sort program records.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config. A
    non-default config file is layered over config/default.yml.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    cfg = load_cli_config(config_path)
    ctx.obj = cfg


@cli.command("search")
@click.option("--search", "-s", "search", default=None, help="Free-text search term.")
@click.option(
    "--filter",
    "-f",
    "filters",
    multiple=True,
    metavar="FIELD=VALUE",
    help="Facet selection; sets single fields and toggles multi fields. Repeatable.",
)
@click.option(
    "--sort",
    "sorts",
    multiple=True,
    metavar="FIELD",
    help="Sort field; repeating the current field flips direction.",
)
@click.pass_context
def search_cmd(ctx: click.Context, search: str | None, filters: tuple[str, ...], sorts: tuple[str, ...]) -> None:
    """Query programs once and write the results to the configured outputs.

    Raises:
        click.Abort: When the search fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_search(action=ctx.command.name, search=search, filters=filters, sorts=sorts)


@cli.command("facets")
@click.pass_context
def facets_cmd(ctx: click.Context) -> None:
    """List filter options derived from all programs."""
    CommandRunner(ctx.obj).run_facets(action=ctx.command.name)


@cli.command("browse")
@click.pass_context
def browse_cmd(ctx: click.Context) -> None:
    """Browse programs interactively, one command per line."""
    stdin = click.get_text_stream("stdin")
    CommandRunner(ctx.obj).run_browse(action=ctx.command.name, lines=stdin)
