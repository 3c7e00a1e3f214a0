from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.constants import API_VERSION, RECENT_DATES_LIMIT, SYSTEM_NAME, SYSTEM_VERSION
from ..core.enums import Collection, WipeTarget
from ..core.exceptions import AuthorizationError, ValidationError
from ..storage.repository import CollectionStore

logger = logging.getLogger(__name__)

ENDPOINTS = [
    "GET    /api/status - API health and record counts",
    "POST   /api/backup - receive a backup from the teacher system",
    "GET    /api/students - list students",
    "GET    /api/students/<id> - student detail",
    "POST   /api/students - add a student",
    "GET    /api/attendance - attendance records",
    "GET    /api/reports/attendance - attendance report",
    "GET    /api/sync-history - sync history",
    "GET    /api/config - filter values",
    "DELETE /api/data/<type> - wipe data (admin)",
]

WIPE_MESSAGES = {
    WipeTarget.ATTENDANCE: "All attendance records were deleted",
    WipeTarget.SYNC_HISTORY: "All sync history was deleted",
    WipeTarget.ALL: "All system data was deleted",
}


def _distinct_sorted(values) -> list:
    # Levels may mix numbers and strings across imports.
    return sorted({v for v in values if v not in (None, "")}, key=str)


class SystemService:
    def __init__(self, store: CollectionStore, *, admin_password: str):
        self._store = store
        self._admin_password = admin_password

    @staticmethod
    def index() -> dict:
        return {
            "message": SYSTEM_NAME,
            "version": SYSTEM_VERSION,
            "endpoints": ENDPOINTS,
        }

    def status(self) -> dict:
        return {
            "system": SYSTEM_NAME,
            "version": SYSTEM_VERSION,
            "status": "active",
            "statistics": {
                "totalStudents": len(self._store.read(Collection.STUDENTS)),
                "totalAttendance": len(self._store.read(Collection.ATTENDANCE)),
                "totalGrades": len(self._store.read(Collection.GRADES)),
                "totalSyncs": len(self._store.read(Collection.SYNC_HISTORY)),
            },
            "endpoints": ENDPOINTS,
        }

    def get_config(self) -> dict:
        """Distinct values the client uses to populate its filters."""

        students = self._store.read(Collection.STUDENTS)
        attendance = self._store.read(Collection.ATTENDANCE)

        dates = sorted({a.get("date") for a in attendance if a.get("date")}, reverse=True)
        return {
            "config": {
                "levels": _distinct_sorted(s.get("level") for s in students),
                "groups": _distinct_sorted(s.get("group") for s in students),
                "courses": _distinct_sorted(a.get("course") or a.get("courseName") for a in attendance),
                "recentDates": dates[:RECENT_DATES_LIMIT],
                "systemInfo": {
                    "name": SYSTEM_NAME,
                    "version": SYSTEM_VERSION,
                    "apiVersion": API_VERSION,
                },
            }
        }

    def wipe(self, data_type: str, body: Any) -> str:
        password: Optional[str] = body.get("password") if isinstance(body, dict) else None
        if password != self._admin_password:
            raise AuthorizationError("Admin password is incorrect")

        try:
            target = WipeTarget(data_type)
        except ValueError:
            raise ValidationError("Unknown data type")

        for collection in target.collections():
            self._store.write(collection, [])
        logger.warning("Wiped %s", ", ".join(c.value for c in target.collections()))
        return WIPE_MESSAGES[target]
