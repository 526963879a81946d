"""Command-line interface — thin controller that delegates to the use case."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from rels.domain.entities import ReleaseReport
from rels.domain.exceptions import MissingRepositoryError
from rels.domain.value_objects import RepositoryId
from rels.infrastructure.config import Settings, app_version, get_settings
from rels.interface import dependencies
from rels.interface.error_handlers import report_error
from rels.services.formatting import DEFAULT_LIST_COUNT, parse_list_count
from rels.services.reporter import print_report

_EXAMPLES = """\
[bold]Examples[/bold]

$ rels --repo klaussinani/tusk

$ rels --repo klaussinani/tusk --all

$ rels --repo klaussinani/tusk --list 3
"""

_MISSING_REPO_MESSAGE = (
    "No repository was given as input.\n"
    'Run "rels --help" for more information and examples.'
)

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_console = Console(highlight=False, soft_wrap=True)
_err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(app_version())
        raise typer.Exit(code=0)


async def fetch_report(settings: Settings, repo: RepositoryId) -> ReleaseReport:
    async with dependencies.open_use_case(settings) as use_case:
        return await use_case.execute(repo)


@app.command(epilog=_EXAMPLES)
def rels(
    repo: str | None = typer.Option(
        None, "--repo", "-r", help="Repository to get analytics for, e.g. owner/name."
    ),
    list_count: str | None = typer.Option(
        None,
        "--list",
        "-l",
        metavar="N",
        help=f"Number of releases to be displayed (default: {DEFAULT_LIST_COUNT}).",
    ),
    show_all: bool = typer.Option(False, "--all", "-a", help="Display all releases."),
    version: bool = typer.Option(  # noqa: ARG001
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Display installed version.",
    ),
) -> None:
    """Show download statistics of a GitHub repository's releases."""
    try:
        if not repo:
            raise MissingRepositoryError(_MISSING_REPO_MESSAGE)
        repo_id = RepositoryId.from_string(repo)
        report = asyncio.run(fetch_report(get_settings(), repo_id))
    except Exception as exc:
        raise typer.Exit(code=report_error(_err_console, exc)) from exc

    limit = None if show_all else parse_list_count(list_count)
    print_report(_console, report, limit)
