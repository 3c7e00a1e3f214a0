from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import uuid4

from ..common.datetime_utils import format_timestamp
from ..common.validators import require_non_empty, require_object
from ..core.constants import API_SOURCE, RECENT_DETAIL_LIMIT
from ..core.enums import Collection
from ..core.exceptions import ConflictError, NotFoundError
from ..storage.repository import CollectionStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("name", "Name"),
    ("fatherName", "Father name"),
    ("level", "Level"),
    ("group", "Group"),
)


def _matches(value: Any, wanted: Optional[str]) -> bool:
    # Query strings are text; stored levels may be numbers.
    return wanted is None or str(value) == wanted


class StudentService:
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_students(
        self,
        *,
        level: Optional[str] = None,
        group: Optional[str] = None,
        search: Optional[str] = None,
    ) -> dict:
        students = self._store.read(Collection.STUDENTS)

        filtered = [s for s in students if _matches(s.get("level"), level) and _matches(s.get("group"), group)]
        if search:
            needle = search.lower()
            filtered = [
                s
                for s in filtered
                if needle in str(s.get("name") or "").lower() or needle in str(s.get("fatherName") or "").lower()
            ]

        return {"count": len(filtered), "total": len(students), "students": filtered}

    def create_student(self, body: Any) -> dict:
        data = require_object(body, "Student data is missing or invalid")
        for key, label in REQUIRED_FIELDS:
            require_non_empty(data.get(key), label)

        students = self._store.read(Collection.STUDENTS)
        duplicate = any(
            s.get("name") == data["name"] and s.get("fatherName") == data["fatherName"] and s.get("level") == data["level"]
            for s in students
        )
        if duplicate:
            raise ConflictError("Student is already registered")

        student = {
            **data,
            "id": str(uuid4()),
            "createdAt": format_timestamp(),
            "source": API_SOURCE,
        }
        students.append(student)
        self._store.write(Collection.STUDENTS, students)
        logger.info("Student %s created via API", student["id"])
        return student

    def get_student_detail(self, student_id: str) -> dict:
        students = self._store.read(Collection.STUDENTS)
        student = next((s for s in students if s.get("id") == student_id), None)
        if student is None:
            raise NotFoundError("Student not found")

        attendance = [a for a in self._store.read(Collection.ATTENDANCE) if a.get("studentId") == student_id]
        grades = [g for g in self._store.read(Collection.GRADES) if g.get("studentId") == student_id]

        absences = sum(1 for a in attendance if a.get("present") is False)
        average = 0
        if grades:
            average = round(sum(float(g.get("totalGrade") or 0) for g in grades) / len(grades), 2)

        return {
            "student": {
                **student,
                "attendanceCount": len(attendance),
                "absencesCount": absences,
                "gradesCount": len(grades),
                "averageGrade": average,
            },
            "attendance": attendance[-RECENT_DETAIL_LIMIT:],
            "grades": grades[-RECENT_DETAIL_LIMIT:],
            "statistics": {
                "totalAttendance": len(attendance),
                "totalAbsences": absences,
                "totalGrades": len(grades),
                "averageGrade": average,
            },
        }
