from __future__ import annotations

from typing import Optional

from ..common.stats import presence_statistics
from ..common.validators import optional_iso_date
from ..core.constants import UNKNOWN_STUDENT_NAME
from ..core.enums import Collection
from ..storage.repository import CollectionStore


def _course_matches(record: dict, course: Optional[str]) -> bool:
    return course is None or record.get("course") == course or record.get("courseName") == course


def _day_of(record: dict) -> str:
    # Stored dates may carry a time part; only the calendar day is compared.
    return str(record.get("date") or "")[:10]


class AttendanceService:
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_attendance(
        self,
        *,
        date: Optional[str] = None,
        student_id: Optional[str] = None,
        course: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> dict:
        from_date = optional_iso_date(from_date, "fromDate")
        to_date = optional_iso_date(to_date, "toDate")

        records = self._store.read(Collection.ATTENDANCE)
        filtered = [
            a
            for a in records
            if (date is None or a.get("date") == date)
            and (student_id is None or a.get("studentId") == student_id)
            and _course_matches(a, course)
            and (from_date is None or _day_of(a) >= from_date)
            and (to_date is None or _day_of(a) <= to_date)
        ]

        return {
            "count": len(filtered),
            "total": len(records),
            "statistics": presence_statistics(filtered),
            "attendance": filtered,
        }

    def attendance_report(
        self,
        *,
        date: Optional[str] = None,
        course: Optional[str] = None,
        level: Optional[str] = None,
        group: Optional[str] = None,
    ) -> dict:
        """Attendance joined with the students' current level/group."""

        students = {s.get("id"): s for s in self._store.read(Collection.STUDENTS)}
        rows = []
        for record in self._store.read(Collection.ATTENDANCE):
            if date is not None and record.get("date") != date:
                continue
            if not _course_matches(record, course):
                continue

            student = students.get(record.get("studentId")) or {}
            row = {
                **record,
                "studentName": student.get("name") or UNKNOWN_STUDENT_NAME,
                "studentFatherName": student.get("fatherName") or "",
                "studentLevel": student.get("level", ""),
                "studentGroup": student.get("group", ""),
            }
            if level is not None and str(row["studentLevel"]) != level:
                continue
            if group is not None and str(row["studentGroup"]) != group:
                continue
            rows.append(row)

        return {
            "report": {
                "date": date or "all",
                "course": course or "all",
                "level": level or "all",
                "group": group or "all",
                "totalRecords": len(rows),
                "totalStudents": len(rows),
                **presence_statistics(rows),
            },
            "data": rows,
        }
