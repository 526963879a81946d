"""Show-releases use case — fetch both endpoints, then aggregate.

Depends only on the :class:`ReleaseFetcher` port and the pure aggregator;
the interface layer injects the concrete adapter at runtime.
"""

from __future__ import annotations

import asyncio
import logging

from rels.domain.entities import ReleaseReport
from rels.domain.exceptions import EmptyReleasesError
from rels.domain.ports.release_fetcher import ReleaseFetcher
from rels.domain.value_objects import RepositoryId
from rels.services.aggregator import aggregate

logger = logging.getLogger(__name__)


class ShowReleasesUseCase:
    """Orchestrates repository → release report.

    Parameters
    ----------
    release_fetcher:
        Adapter that can fetch the release list and the latest release.
    """

    def __init__(self, release_fetcher: ReleaseFetcher) -> None:
        self._fetcher = release_fetcher

    async def execute(self, repo: RepositoryId) -> ReleaseReport:
        """Fetch, validate and aggregate the releases of *repo*.

        Both requests are in flight at once. The release list is awaited
        first: GitHub answers ``/releases/latest`` with 404 for a repository
        without releases, and "no release data" is the more useful error.
        """
        logger.info("Fetching releases of %s", repo.full_name)

        releases_task = asyncio.ensure_future(self._fetcher.fetch_releases(repo))
        latest_task = asyncio.ensure_future(self._fetcher.fetch_latest_release(repo))
        try:
            releases = await releases_task
            if not releases:
                raise EmptyReleasesError(
                    f"No available release data for the {repo.full_name} repository"
                )
            latest = await latest_task
        finally:
            await _discard(releases_task, latest_task)

        return aggregate(repo.full_name, releases, latest)


async def _discard(*tasks: asyncio.Future) -> None:
    """Cancel whatever is still running and drop results nobody will read."""
    for task in tasks:
        if not task.done():
            task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
