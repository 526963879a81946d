"""Release aggregation: pure functions from raw releases to report figures.

Nothing here touches the network or keeps state between calls: the latest
release marker is passed in explicitly by the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from rels.domain.entities import (
    NormalizedRelease,
    Release,
    ReleaseReport,
    SummaryStatistics,
)
from rels.domain.exceptions import EmptyReleasesError
from rels.services.formatting import format_long_date, format_short_date


def release_downloads(release: Release) -> int:
    """Sum the download counters of every asset (0 without assets)."""
    return sum(asset.download_count for asset in release.assets)


def normalize_releases(
    releases: Sequence[Release], latest: Release
) -> list[NormalizedRelease]:
    """Reduce each release to its display figures, keeping provider order."""
    return [
        NormalizedRelease(
            tag=release.tag,
            author=release.author,
            date=format_short_date(release.created_at),
            asset_count=len(release.assets),
            downloads=release_downloads(release),
            is_latest=release.tag == latest.tag,
            is_prerelease=release.prerelease,
        )
        for release in releases
    ]


def compute_statistics(releases: Sequence[NormalizedRelease]) -> SummaryStatistics:
    """Compute totals, the per-release average and the most popular release.

    Among releases sharing the highest download count the first one in
    provider order (the newest) is the most popular.

    Raises:
        EmptyReleasesError: when *releases* is empty.
    """
    if not releases:
        raise EmptyReleasesError("No available release data to aggregate")

    total_downloads = sum(r.downloads for r in releases)
    count = len(releases)

    popular = releases[0]
    for release in releases[1:]:
        if release.downloads > popular.downloads:
            popular = release

    return SummaryStatistics(
        total_assets=sum(r.asset_count for r in releases),
        total_downloads=total_downloads,
        releases_count=count,
        # ceil without floats
        downloads_per_release=-(-total_downloads // count),
        popular_tag=popular.tag,
        popular_downloads=popular.downloads,
    )


def aggregate(
    repository: str, releases: Sequence[Release], latest: Release
) -> ReleaseReport:
    """Normalize *releases* and bundle them with their statistics."""
    normalized = normalize_releases(releases, latest)
    return ReleaseReport(
        repository=repository,
        releases=tuple(normalized),
        statistics=compute_statistics(normalized),
        latest_tag=latest.tag,
        latest_date=format_long_date(latest.created_at),
    )
