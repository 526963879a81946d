"""Shared fixtures: GitHub payload and domain release factories."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from rels.domain.entities import Asset, Release
from rels.infrastructure.config import get_settings

ReleaseJson = dict[str, Any]


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the cached settings."""
    for var in ("GITHUB_TOKEN", "GITHUB_API_URL", "REQUEST_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()


@pytest.fixture
def release_json() -> Callable[..., ReleaseJson]:
    """Build a release object shaped like the GitHub API response."""

    def _make(
        tag: str,
        downloads: list[int] | None = None,
        *,
        created_at: str = "2024-01-05T10:00:00Z",
        prerelease: bool = False,
        author: str | None = "octocat",
    ) -> ReleaseJson:
        return {
            "url": f"https://api.github.com/repos/owner/name/releases/{tag}",
            "tag_name": tag,
            "name": f"Release {tag}",
            "draft": False,
            "prerelease": prerelease,
            "created_at": created_at,
            "author": {"login": author, "id": 1} if author is not None else None,
            "assets": [
                {"name": f"asset-{i}.zip", "download_count": count}
                for i, count in enumerate(downloads or [])
            ],
        }

    return _make


@pytest.fixture
def make_release() -> Callable[..., Release]:
    """Build a domain :class:`Release` directly."""

    def _make(
        tag: str,
        downloads: list[int] | None = None,
        *,
        created_at: datetime | None = None,
        prerelease: bool = False,
        author: str = "octocat",
    ) -> Release:
        return Release(
            tag=tag,
            created_at=created_at or datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc),
            author=author,
            prerelease=prerelease,
            assets=tuple(
                Asset(name=f"asset-{i}.zip", download_count=count)
                for i, count in enumerate(downloads or [])
            ),
        )

    return _make
