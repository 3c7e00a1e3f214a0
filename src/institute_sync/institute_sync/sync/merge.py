"""Insert-or-update reconciliation of incoming batches against stored collections.

Both merges scan the existing collection linearly for every incoming record and
mutate it in place. Collections are small, so no index is built; the first
match wins.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional
from uuid import uuid4

from .model import MergeCounts


def _index_of(records: list[dict], predicate: Callable[[dict], bool]) -> Optional[int]:
    for i, record in enumerate(records):
        if predicate(record):
            return i
    return None


def _course_of(record: dict):
    return record.get("course") or record.get("courseName")


def _same_id(stored, wanted: str) -> bool:
    # Files written by older clients may hold numeric ids.
    return stored is not None and str(stored) == wanted


def _default_hours(record: dict) -> int:
    return 1 if record.get("present") is False else 0


def _normalize_student(student: dict) -> dict:
    student = dict(student)
    if student.get("id") in (None, ""):
        student["id"] = f"student-{uuid4().hex}"
    else:
        student["id"] = str(student["id"])
    return student


def _normalize_attendance(record: dict) -> dict:
    record = dict(record)
    if record.get("studentId") is not None:
        record["studentId"] = str(record["studentId"])
    return record


def attendance_key(record: dict) -> str:
    """Dedup key: explicit id, else ``studentId-date-course``."""

    if record.get("id") not in (None, ""):
        return str(record["id"])
    return f"{record.get('studentId')}-{record.get('date')}-{_course_of(record)}"


def _same_lesson(existing: dict, incoming: dict) -> bool:
    return (
        _same_id(existing.get("studentId"), str(incoming.get("studentId")))
        and existing.get("date") == incoming.get("date")
        and _course_of(incoming) in (existing.get("course"), existing.get("courseName"))
    )


def merge_students(
    existing: list[dict],
    incoming: Iterable[dict],
    *,
    source: str,
    timestamp: str,
    counts: MergeCounts,
) -> None:
    for raw in incoming:
        student = _normalize_student(raw)
        index = _index_of(existing, lambda s: _same_id(s.get("id"), student["id"]))

        if index is None:
            existing.append({**student, "importedAt": timestamp, "source": source})
            counts.imported_students += 1
        else:
            # Updates are applied but not counted.
            existing[index] = {**existing[index], **student, "updatedAt": timestamp, "source": source}


def merge_attendance(
    existing: list[dict],
    incoming: Iterable[dict],
    *,
    source: str,
    timestamp: str,
    counts: MergeCounts,
) -> None:
    for raw in incoming:
        record = _normalize_attendance(raw)
        key = attendance_key(record)
        index = _index_of(existing, lambda a: _same_id(a.get("id"), key) or _same_lesson(a, record))

        if index is None:
            hours = record.get("hours")
            if hours is None:
                hours = _default_hours(record)
            existing.append(
                {
                    **record,
                    "id": key,
                    "courseName": _course_of(record),
                    "hours": hours,
                    "importedAt": timestamp,
                    "source": source,
                    "synced": True,
                }
            )
            counts.imported_attendance += 1
        else:
            current = existing[index]
            merged = {**current, **record}
            if record.get("hours") is None:
                merged["hours"] = _default_hours(merged)
            existing[index] = {
                **merged,
                "id": current.get("id", key),
                "courseName": _course_of(record) or current.get("courseName"),
                "updatedAt": timestamp,
                "source": source,
                "synced": True,
            }
            counts.updated_attendance += 1
