"""Domain exception hierarchy.

Each exception maps to a specific process exit code at the interface layer.
Inner layers raise these; the CLI error handler translates them.
"""

from __future__ import annotations


class RelsError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class MissingRepositoryError(RelsError):
    """No repository identifier was supplied on the command line."""


class InvalidRepositoryError(RelsError):
    """The supplied identifier is not of the form ``owner/name``."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class NetworkError(RelsError):
    """The request never produced a response (DNS, reset, timeout)."""


class ApiError(RelsError):
    """GitHub answered with a status code outside the 2xx range."""

    def __init__(self, status_code: int, message: str = "", detail: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(
            detail
            or f"Request to get data failed with HTTP status code: {status_code} - {message}"
        )


class RepositoryNotFoundError(ApiError):
    """The repository does not exist or is not accessible (404)."""


class GitHubRateLimitError(ApiError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class MalformedResponseError(RelsError):
    """The response body is not JSON or does not match the release schema."""


# ── Processing errors ───────────────────────────────────────────────────────


class EmptyReleasesError(RelsError):
    """The repository exists but has published no releases."""
