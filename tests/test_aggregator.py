"""Tests for rels.services.aggregator."""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from rels.domain.entities import Release
from rels.domain.exceptions import EmptyReleasesError
from rels.services.aggregator import (
    aggregate,
    compute_statistics,
    normalize_releases,
    release_downloads,
)

MakeRelease = Callable[..., Release]


class TestNormalizeReleases:
    """Tests for normalize_releases()."""

    def test_counts_assets_and_downloads(self, make_release: MakeRelease) -> None:
        release = make_release("v1", [10, 20, 5])

        [normalized] = normalize_releases([release], latest=release)

        assert normalized.asset_count == 3
        assert normalized.downloads == 35

    def test_release_without_assets(self, make_release: MakeRelease) -> None:
        release = make_release("v1")

        [normalized] = normalize_releases([release], latest=release)

        assert normalized.asset_count == 0
        assert normalized.downloads == 0
        assert release_downloads(release) == 0

    def test_preserves_provider_order(self, make_release: MakeRelease) -> None:
        releases = [make_release("v3"), make_release("v2"), make_release("v1")]

        normalized = normalize_releases(releases, latest=releases[0])

        assert [r.tag for r in normalized] == ["v3", "v2", "v1"]

    def test_exactly_one_latest(self, make_release: MakeRelease) -> None:
        releases = [make_release("v3"), make_release("v2"), make_release("v1")]

        normalized = normalize_releases(releases, latest=make_release("v2"))

        assert [r.is_latest for r in normalized] == [False, True, False]

    def test_no_match_marks_nothing_latest(self, make_release: MakeRelease) -> None:
        releases = [make_release("v2"), make_release("v1")]

        normalized = normalize_releases(releases, latest=make_release("v9"))

        assert not any(r.is_latest for r in normalized)

    def test_copies_prerelease_author_and_date(self, make_release: MakeRelease) -> None:
        release = make_release(
            "v2.0.0-rc.1",
            prerelease=True,
            author="hubot",
            created_at=datetime(2023, 11, 9, 8, 0, tzinfo=timezone.utc),
        )

        [normalized] = normalize_releases([release], latest=make_release("v1"))

        assert normalized.is_prerelease is True
        assert normalized.author == "hubot"
        assert normalized.date == "11/9/2023"


class TestComputeStatistics:
    """Tests for compute_statistics()."""

    def test_two_release_scenario(self, make_release: MakeRelease) -> None:
        releases = [make_release("v2", [50]), make_release("v1", [100, 50])]
        normalized = normalize_releases(releases, latest=releases[0])

        stats = compute_statistics(normalized)

        assert stats.popular_tag == "v1"
        assert stats.popular_downloads == 150
        assert stats.total_downloads == 200
        assert stats.total_assets == 3
        assert stats.releases_count == 2
        assert stats.downloads_per_release == 100
        assert [r.is_latest for r in normalized] == [True, False]

    def test_per_release_rounds_up(self, make_release: MakeRelease) -> None:
        releases = [make_release("v3", [1]), make_release("v2", [1]), make_release("v1", [0])]

        stats = compute_statistics(normalize_releases(releases, latest=releases[0]))

        assert stats.downloads_per_release == 1

    @pytest.mark.parametrize(
        "downloads",
        [[0], [7, 0, 3], [1_000_001, 999, 12], [5, 5, 5, 5, 6]],
    )
    def test_totals_match_sum_of_releases(
        self, make_release: MakeRelease, downloads: list[int]
    ) -> None:
        releases = [make_release(f"v{i}", [d]) for i, d in enumerate(downloads)]
        normalized = normalize_releases(releases, latest=releases[0])

        stats = compute_statistics(normalized)

        assert stats.total_downloads == sum(r.downloads for r in normalized)
        assert stats.downloads_per_release == math.ceil(sum(downloads) / len(downloads))

    def test_tie_goes_to_newest(self, make_release: MakeRelease) -> None:
        releases = [
            make_release("v3", [10]),
            make_release("v2", [40]),
            make_release("v1", [40]),
        ]

        stats = compute_statistics(normalize_releases(releases, latest=releases[0]))

        assert stats.popular_tag == "v2"
        assert stats.popular_downloads == 40

    def test_empty_is_rejected(self) -> None:
        with pytest.raises(EmptyReleasesError):
            compute_statistics([])


class TestAggregate:
    """Tests for aggregate()."""

    def test_bundles_report(self, make_release: MakeRelease) -> None:
        latest = make_release(
            "v2", [50], created_at=datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)
        )
        releases = [latest, make_release("v1", [150])]

        report = aggregate("owner/name", releases, latest)

        assert report.repository == "owner/name"
        assert report.latest_tag == "v2"
        assert report.latest_date == "Fri Jan 05 2024"
        assert len(report.releases) == 2
        assert report.statistics.popular_tag == "v1"

    def test_empty_list_raises(self, make_release: MakeRelease) -> None:
        with pytest.raises(EmptyReleasesError):
            aggregate("owner/name", [], make_release("v1"))
