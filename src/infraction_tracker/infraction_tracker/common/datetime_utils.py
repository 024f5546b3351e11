from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def retention_cutoff(today: date, days: int) -> date:
    """First calendar day still inside a retention window of `days`."""
    return today - timedelta(days=int(days))


def is_older_than_days(value: date, days: int, *, today: date) -> bool:
    """True when `value` falls strictly before the retention cutoff day."""
    return value < retention_cutoff(today, days)
