from __future__ import annotations

from enum import Enum


class Collection(str, Enum):
    """Persisted collections; the value is the backing file stem."""

    STUDENTS = "students"
    ATTENDANCE = "attendance"
    GRADES = "grades"
    SYNC_HISTORY = "sync_history"


class WipeTarget(str, Enum):
    """Values accepted by DELETE /api/data/<type>."""

    ATTENDANCE = "attendance"
    SYNC_HISTORY = "sync-history"
    ALL = "all"

    def collections(self) -> tuple[Collection, ...]:
        if self is WipeTarget.ATTENDANCE:
            return (Collection.ATTENDANCE,)
        if self is WipeTarget.SYNC_HISTORY:
            return (Collection.SYNC_HISTORY,)
        return tuple(Collection)


class StorageBackend(str, Enum):
    FILE = "file"
    MEMORY = "memory"
