from __future__ import annotations

import pytest

from src.institute_sync.institute_sync.core.enums import Collection
from src.institute_sync.institute_sync.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.institute_sync.institute_sync.storage.memory_store import InMemoryStore
from src.institute_sync.institute_sync.students.service import StudentService

STUDENTS = [
    {"id": "s1", "name": "Ali Hama", "fatherName": "Omar", "level": 1, "group": "A"},
    {"id": "s2", "name": "Sara", "fatherName": "Khalid ALI", "level": "2", "group": "B"},
    {"id": "s3", "name": "Karwan", "fatherName": "Aziz", "level": "1", "group": "B"},
]


@pytest.fixture
def store():
    return InMemoryStore({Collection.STUDENTS: STUDENTS})


def test_search_is_case_insensitive_over_name_and_father_name(store):
    data = StudentService(store).list_students(search="ali")

    assert [s["id"] for s in data["students"]] == ["s1", "s2"]
    assert data["count"] == 2
    assert data["total"] == 3


def test_level_filter_matches_numeric_and_text_levels(store):
    data = StudentService(store).list_students(level="1")

    assert [s["id"] for s in data["students"]] == ["s1", "s3"]


def test_filters_combine(store):
    data = StudentService(store).list_students(level="1", group="B")

    assert [s["id"] for s in data["students"]] == ["s3"]


def test_create_student_assigns_id_and_source(store):
    student = StudentService(store).create_student(
        {"id": "client-chosen", "name": "Dilan", "fatherName": "Rebwar", "level": "3", "group": "C"}
    )

    assert student["id"] != "client-chosen"
    assert student["source"] == "API"
    assert "createdAt" in student
    assert store.read(Collection.STUDENTS)[-1] == student


def test_create_duplicate_triple_conflicts(store):
    with pytest.raises(ConflictError):
        StudentService(store).create_student({"name": "Sara", "fatherName": "Khalid ALI", "level": "2", "group": "Z"})

    assert len(store.read(Collection.STUDENTS)) == 3


@pytest.mark.parametrize(
    "body",
    [None, ["Dilan"], {"name": "Dilan", "fatherName": "Rebwar", "level": "3"}, {"name": " ", "fatherName": "R", "level": "3", "group": "C"}],
)
def test_create_requires_core_fields(store, body):
    with pytest.raises(ValidationError):
        StudentService(store).create_student(body)


def test_unknown_student_detail_is_not_found_and_changes_nothing(store):
    before = {c: store.read(c) for c in Collection}

    with pytest.raises(NotFoundError):
        StudentService(store).get_student_detail("missing")

    assert {c: store.read(c) for c in Collection} == before


def test_detail_joins_recent_attendance_and_grades():
    attendance = [
        {"id": f"a{i}", "studentId": "s1", "date": f"2024-01-{i:02d}", "present": i % 3 != 0} for i in range(1, 13)
    ]
    attendance.append({"id": "other", "studentId": "s2", "date": "2024-01-01", "present": False})
    grades = [{"studentId": "s1", "totalGrade": 80}, {"studentId": "s1", "totalGrade": 91}, {"studentId": "s1"}]
    store = InMemoryStore(
        {Collection.STUDENTS: STUDENTS, Collection.ATTENDANCE: attendance, Collection.GRADES: grades}
    )

    data = StudentService(store).get_student_detail("s1")

    assert data["student"]["attendanceCount"] == 12
    assert data["student"]["absencesCount"] == 4
    assert data["student"]["gradesCount"] == 3
    assert data["student"]["averageGrade"] == 57.0
    assert [a["id"] for a in data["attendance"]] == [f"a{i}" for i in range(3, 13)]
    assert len(data["grades"]) == 3
    assert data["statistics"]["totalAbsences"] == 4


def test_detail_average_is_zero_without_grades(store):
    data = StudentService(store).get_student_detail("s3")

    assert data["student"]["averageGrade"] == 0
    assert data["attendance"] == []
