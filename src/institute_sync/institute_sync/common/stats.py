from __future__ import annotations

from typing import Iterable


def rate(part: int, whole: int) -> float:
    """Percentage rounded to 2 places; 0 for an empty population."""
    return round(part / whole * 100, 2) if whole else 0


def presence_statistics(records: Iterable[dict]) -> dict:
    records = list(records)
    present = sum(1 for r in records if r.get("present") is True)
    absent = sum(1 for r in records if r.get("present") is False)
    return {
        "presentCount": present,
        "absentCount": absent,
        "attendanceRate": rate(present, len(records)),
    }
