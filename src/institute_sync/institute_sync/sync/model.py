from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import optional_list, require_object
from ..core.constants import DEFAULT_SOURCE, DEFAULT_SYNC_TYPE


@dataclass(frozen=True)
class BackupBatch:
    """A bundle of student and attendance records pushed by the teacher system."""

    students: list = field(default_factory=list)
    attendance: list = field(default_factory=list)
    source: str = DEFAULT_SOURCE
    sync_type: str = DEFAULT_SYNC_TYPE
    test: bool = False
    backup_date: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "BackupBatch":
        data = require_object(payload, "Backup data is missing or invalid")
        return cls(
            students=optional_list(data, "students"),
            attendance=optional_list(data, "attendance"),
            source=data.get("source") or data.get("sourceSystem") or DEFAULT_SOURCE,
            sync_type=data.get("syncType") or DEFAULT_SYNC_TYPE,
            test=data.get("test") is True,
            backup_date=data.get("backupDate"),
        )


@dataclass
class MergeCounts:
    """Running counters; kept mutable so a failed merge still reports partial progress."""

    imported_students: int = 0
    imported_attendance: int = 0
    updated_attendance: int = 0


@dataclass(frozen=True)
class BackupResult:
    sync_id: Optional[str]
    timestamp: str
    summary: dict = field(default_factory=dict)
    test: bool = False
