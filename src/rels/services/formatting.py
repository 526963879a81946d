"""Display helpers, applied at render time only."""

from __future__ import annotations

from datetime import datetime, timezone

DEFAULT_LIST_COUNT = 5

_MILLION = 10**6
_THOUSAND = 10**3


def format_count(value: int) -> str:
    """Abbreviate large counts: ``1500000`` → ``1.50m``, ``1000`` → ``1.00k``."""
    if value >= _MILLION:
        return f"{value / _MILLION:.2f}m"
    if value >= _THOUSAND:
        return f"{value / _THOUSAND:.2f}k"
    return str(value)


def format_short_date(moment: datetime) -> str:
    """Render a timestamp as ``M/D/YYYY`` (UTC calendar date, no padding)."""
    day = _as_utc(moment)
    return f"{day.month}/{day.day}/{day.year}"


def format_long_date(moment: datetime) -> str:
    """Render a timestamp as ``Www Mmm DD YYYY``, e.g. ``Mon Oct 19 2026``."""
    return _as_utc(moment).strftime("%a %b %d %Y")


def parse_list_count(value: str | int | None) -> int:
    """Return a positive display count, falling back to the default.

    Anything that is not a positive integer (missing, ``"abc"``, ``0``,
    ``-3``) yields :data:`DEFAULT_LIST_COUNT`.
    """
    if value is None:
        return DEFAULT_LIST_COUNT
    try:
        count = int(value)
    except (TypeError, ValueError):
        return DEFAULT_LIST_COUNT
    return count if count > 0 else DEFAULT_LIST_COUNT


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
