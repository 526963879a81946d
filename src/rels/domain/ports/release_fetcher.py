"""Port: release fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from rels.domain.entities import Release
from rels.domain.value_objects import RepositoryId


class ReleaseFetcher(Protocol):
    """Abstract contract for fetching GitHub release data."""

    async def fetch_releases(self, repo: RepositoryId) -> list[Release]:
        """Return every release on the first page, newest first."""
        ...

    async def fetch_latest_release(self, repo: RepositoryId) -> Release:
        """Return the release GitHub designates as latest."""
        ...
