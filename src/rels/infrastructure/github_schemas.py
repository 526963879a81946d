"""Pydantic models for the slice of the GitHub releases payload we consume.

Response schema:
https://docs.github.com/en/rest/releases/releases?apiVersion=2022-11-28#list-releases
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter

from rels.domain.entities import Asset, Release

# GitHub shows releases of deleted accounts under this login
GHOST_LOGIN = "ghost"


class GitHubAuthor(BaseModel):
    """``release.author``; only the login is displayed."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    login: str


class GitHubAsset(BaseModel):
    """``release.assets[]``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    download_count: NonNegativeInt


class GitHubRelease(BaseModel):
    """A single release object, as returned by both release endpoints."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    tag_name: str
    created_at: datetime
    prerelease: bool = False
    author: GitHubAuthor | None = None
    assets: list[GitHubAsset] = Field(default_factory=list)

    def to_entity(self) -> Release:
        return Release(
            tag=self.tag_name,
            created_at=self.created_at,
            author=self.author.login if self.author else GHOST_LOGIN,
            prerelease=self.prerelease,
            assets=tuple(
                Asset(name=a.name, download_count=a.download_count) for a in self.assets
            ),
        )


release_list_adapter: TypeAdapter[list[GitHubRelease]] = TypeAdapter(list[GitHubRelease])
