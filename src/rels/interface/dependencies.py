"""Build the HTTP client, adapter and use case from settings."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from rels.infrastructure.config import Settings, user_agent
from rels.infrastructure.github_rest_adapter import GitHubRestAdapter
from rels.services.show_releases import ShowReleasesUseCase


@asynccontextmanager
async def open_use_case(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[ShowReleasesUseCase]:
    """Yield a use case whose HTTP client is closed when the block exits."""
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        transport=transport,
    ) as client:
        token = settings.github_token.get_secret_value() if settings.github_token else None
        adapter = GitHubRestAdapter(
            client=client,
            user_agent=user_agent(),
            token=token,
            api_url=settings.github_api_url,
        )
        yield ShowReleasesUseCase(release_fetcher=adapter)
