"""Report renderer — prints a :class:`ReleaseReport` on a rich console."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from rels.domain.entities import NormalizedRelease, ReleaseReport, SummaryStatistics
from rels.services.formatting import format_count

_PADDING = " " * 5


def release_title(release: NormalizedRelease) -> str:
    """``Release v1.2.0 [Latest] [Pre-release]`` (badges only when they apply)."""
    parts = [f"Release {release.tag}"]
    if release.is_latest:
        parts.append("[Latest]")
    if release.is_prerelease:
        parts.append("[Pre-release]")
    return " ".join(parts)


def shown_count(report: ReleaseReport, limit: int | None) -> int:
    """Number of release blocks printed for *limit* (``None`` = all)."""
    total = len(report.releases)
    if limit is None:
        return total
    return min(limit, total)


def summary_lines(report: ReleaseReport) -> list[str]:
    stats: SummaryStatistics = report.statistics
    return [
        f"In total: {format_count(stats.total_downloads)} downloads, "
        f"{format_count(stats.total_assets)} assets & "
        f"{format_count(stats.releases_count)} releases.",
        f"On average, each release receives "
        f"{format_count(stats.downloads_per_release)} downloads.",
        f"Most popular release is {stats.popular_tag} with "
        f"{format_count(stats.popular_downloads)} downloads.",
        f"Latest release is {report.latest_tag} created on {report.latest_date}.",
    ]


def print_release(console: Console, release: NormalizedRelease) -> None:
    console.print(f"[bold cyan]{escape(release_title(release))}[/bold cyan]")
    for line in (
        f"Assets: {format_count(release.asset_count)}",
        f"Downloads: {format_count(release.downloads)}",
        f"Date: {release.date}",
        f"Author: @{release.author}",
    ):
        console.print(f"{_PADDING}{line}", markup=False)
    console.print()


def print_report(console: Console, report: ReleaseReport, limit: int | None) -> None:
    """Print the header, the most recent *limit* releases and the summary.

    Releases arrive newest-first; the shown slice is printed oldest-first so
    the most recent release ends up closest to the summary.
    """
    count = shown_count(report, limit)
    console.print()
    console.print(f"Last {count} releases of {report.repository} repository:", markup=False)
    console.print()

    for release in reversed(report.releases[:count]):
        print_release(console, release)

    for line in summary_lines(report):
        console.print(line, markup=False)
