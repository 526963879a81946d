"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Asset:
    """A downloadable file attached to a release."""

    name: str
    download_count: int = 0


@dataclass(frozen=True, slots=True)
class Release:
    """A release as published by GitHub, after schema validation."""

    tag: str
    created_at: datetime
    author: str
    prerelease: bool = False
    assets: tuple[Asset, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class NormalizedRelease:
    """One release reduced to the figures shown in the report."""

    tag: str
    author: str
    date: str  # short display form, M/D/YYYY
    asset_count: int
    downloads: int
    is_latest: bool = False
    is_prerelease: bool = False


@dataclass(frozen=True, slots=True)
class SummaryStatistics:
    """Totals computed over every fetched release."""

    total_assets: int
    total_downloads: int
    releases_count: int
    downloads_per_release: int
    popular_tag: str
    popular_downloads: int


@dataclass(frozen=True, slots=True)
class ReleaseReport:
    """Everything the reporter needs to print one repository."""

    repository: str
    releases: tuple[NormalizedRelease, ...]
    statistics: SummaryStatistics
    latest_tag: str
    latest_date: str  # long display form, e.g. "Mon Oct 19 2026"
