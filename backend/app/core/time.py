"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def utc_today() -> date:
    return utc_now().date()


def today_iso() -> str:
    """Calendar date (UTC) in ISO format, e.g. ``2024-05-01``."""
    return utc_today().isoformat()
