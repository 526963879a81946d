"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rels.domain.exceptions import InvalidRepositoryError

_SEGMENT = r"[A-Za-z0-9\-_.]+"

_REPOSITORY_RE = re.compile(
    rf"^(?:https?://github\.com/)?(?P<owner>{_SEGMENT})/(?P<name>{_SEGMENT}?)(?:\.git)?/?$"
)


@dataclass(frozen=True, slots=True)
class RepositoryId:
    """Validated ``owner/name`` repository identifier.

    Accepts the bare ``owner/name`` form as well as a GitHub URL like
    ``https://github.com/klaussinani/tusk``.
    """

    owner: str
    name: str

    @classmethod
    def from_string(cls, value: str) -> RepositoryId:
        """Parse and validate a raw identifier string."""
        value = value.strip()
        match = _REPOSITORY_RE.match(value)
        if not match:
            raise InvalidRepositoryError(
                f"Invalid repository: '{value}'. Expected format: <owner>/<name>"
            )
        return cls(owner=match["owner"], name=match["name"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name
