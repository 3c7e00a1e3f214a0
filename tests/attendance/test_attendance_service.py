from __future__ import annotations

import pytest

from src.institute_sync.institute_sync.attendance.service import AttendanceService
from src.institute_sync.institute_sync.core.enums import Collection
from src.institute_sync.institute_sync.core.exceptions import ValidationError
from src.institute_sync.institute_sync.storage.memory_store import InMemoryStore

STUDENTS = [
    {"id": "s1", "name": "Ali", "fatherName": "Omar", "level": "1", "group": "A"},
    {"id": "s2", "name": "Sara", "fatherName": "Khalid", "level": "2", "group": "B"},
]

ATTENDANCE = [
    {"id": "a1", "studentId": "s1", "date": "2024-01-01", "course": "Math", "courseName": "Math", "present": True, "level": "9"},
    {"id": "a2", "studentId": "s1", "date": "2024-01-05", "courseName": "Art", "present": False},
    {"id": "a3", "studentId": "s2", "date": "2024-01-10", "course": "Math", "courseName": "Math", "present": False},
    {"id": "a4", "studentId": "ghost", "date": "2024-01-10", "course": "Math", "courseName": "Math", "present": True},
]


@pytest.fixture
def service():
    return AttendanceService(InMemoryStore({Collection.STUDENTS: STUDENTS, Collection.ATTENDANCE: ATTENDANCE}))


def test_date_range_is_inclusive_on_both_ends(service):
    data = service.list_attendance(from_date="2024-01-01", to_date="2024-01-05")

    assert [a["id"] for a in data["attendance"]] == ["a1", "a2"]


def test_single_bound_is_honoured(service):
    assert [a["id"] for a in service.list_attendance(from_date="2024-01-05")["attendance"]] == ["a2", "a3", "a4"]
    assert [a["id"] for a in service.list_attendance(to_date="2024-01-01")["attendance"]] == ["a1"]


def test_bad_range_bound_is_rejected(service):
    with pytest.raises(ValidationError):
        service.list_attendance(from_date="01/01/2024")


def test_unpadded_bound_is_compared_as_a_calendar_date():
    service = AttendanceService(
        InMemoryStore(
            {
                Collection.ATTENDANCE: [
                    {"id": "early", "studentId": "s1", "date": "2024-01-05", "present": True},
                    {"id": "late", "studentId": "s1", "date": "2024-09-30", "present": True},
                ]
            }
        )
    )

    assert [a["id"] for a in service.list_attendance(to_date="2024-1-5")["attendance"]] == ["early"]
    assert [a["id"] for a in service.list_attendance(from_date="2024-9-1")["attendance"]] == ["late"]


def test_course_filter_matches_course_or_course_name(service):
    data = service.list_attendance(course="Art")

    assert [a["id"] for a in data["attendance"]] == ["a2"]


def test_list_statistics(service):
    data = service.list_attendance(student_id="s1")

    assert data["count"] == 2
    assert data["total"] == 4
    assert data["statistics"] == {"presentCount": 1, "absentCount": 1, "attendanceRate": 50.0}


def test_empty_result_has_zero_rate(service):
    data = service.list_attendance(date="1999-01-01")

    assert data["attendance"] == []
    assert data["statistics"]["attendanceRate"] == 0


def test_report_joins_current_student_metadata(service):
    data = service.attendance_report(level="1")

    # a1 carries its own stale "level" but the student's current level decides.
    assert [r["id"] for r in data["data"]] == ["a1", "a2"]
    assert data["data"][0]["studentName"] == "Ali"
    assert data["report"]["level"] == "1"
    assert data["report"]["course"] == "all"


def test_report_renders_dangling_students_as_unknown(service):
    data = service.attendance_report(date="2024-01-10", course="Math")

    rows = {r["id"]: r for r in data["data"]}
    assert rows["a4"]["studentName"] == "unknown"
    assert rows["a4"]["studentGroup"] == ""
    assert data["report"]["totalRecords"] == 2
    assert data["report"]["totalStudents"] == 2
    assert data["report"]["presentCount"] == 1
    assert data["report"]["absentCount"] == 1
    assert data["report"]["attendanceRate"] == 50.0


def test_report_group_filter_drops_unknown_students(service):
    data = service.attendance_report(group="B")

    assert [r["id"] for r in data["data"]] == ["a3"]
