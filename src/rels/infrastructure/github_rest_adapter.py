"""GitHub REST API adapter — implements the ReleaseFetcher port."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

import httpx
from pydantic import ValidationError

from rels.domain.entities import Release
from rels.domain.exceptions import (
    ApiError,
    GitHubRateLimitError,
    MalformedResponseError,
    NetworkError,
    RepositoryNotFoundError,
)
from rels.domain.value_objects import RepositoryId
from rels.infrastructure.github_schemas import GitHubRelease, release_list_adapter

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class GitHubRestAdapter:
    """Concrete ReleaseFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_releases(self, repo: RepositoryId) -> list[Release]:
        """GET /repos/{owner}/{repo}/releases → [Release]."""
        data = await self._api_get(f"/repos/{repo.full_name}/releases")
        try:
            releases = release_list_adapter.validate_python(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected release list payload for {repo.full_name}: {exc}"
            ) from exc

        logger.info("Fetched %d releases for %s", len(releases), repo.full_name)
        return [r.to_entity() for r in releases]

    async def fetch_latest_release(self, repo: RepositoryId) -> Release:
        """GET /repos/{owner}/{repo}/releases/latest → Release."""
        data = await self._api_get(f"/repos/{repo.full_name}/releases/latest")
        try:
            latest = GitHubRelease.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected latest release payload for {repo.full_name}: {exc}"
            ) from exc

        logger.info("Latest release of %s is %s", repo.full_name, latest.tag_name)
        return latest.to_entity()

    async def _api_get(self, endpoint: str) -> Any:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_url}{endpoint}"
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error fetching {url}: {exc}") from exc

        if 200 <= resp.status_code <= 299:
            try:
                return resp.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise MalformedResponseError(
                    f"GitHub API returned invalid JSON for {url}: {exc}"
                ) from exc

        status = resp.status_code
        message = _error_message(resp)

        if status == 404:
            raise RepositoryNotFoundError(status, message)

        if status == 429 or (
            status == 403 and resp.headers.get("x-ratelimit-remaining", "") == "0"
        ):
            raise GitHubRateLimitError(status, message, detail=_rate_limit_detail(resp))

        raise ApiError(status, message)


def _error_message(resp: httpx.Response) -> str:
    """Return the ``message`` field of an error body, or an empty string."""
    try:
        body = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return ""
    if isinstance(body, dict):
        return str(body.get("message", ""))
    return ""


def _rate_limit_detail(resp: httpx.Response) -> str:
    reset_raw = resp.headers.get("x-ratelimit-reset", "")
    try:
        reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S UTC"
        )
    except (ValueError, OSError):
        reset_str = reset_raw or "unknown"
    return (
        f"GitHub API rate limit exceeded (HTTP {resp.status_code}). Resets at {reset_str}. "
        "Set the GITHUB_TOKEN environment variable to increase the limit."
    )
