from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT, TIMESTAMP_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_timestamp(value: datetime | None = None) -> str:
    return (value or now_local()).strftime(TIMESTAMP_FORMAT)
