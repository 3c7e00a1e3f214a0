from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import uuid4

from ..common.datetime_utils import format_timestamp
from ..common.stats import rate
from ..core.enums import Collection
from ..core.exceptions import InternalError
from ..storage.repository import CollectionStore
from .merge import merge_attendance, merge_students
from .model import BackupBatch, BackupResult, MergeCounts

logger = logging.getLogger(__name__)


class BackupService:
    """Merges teacher-system backups into the store and records every attempt."""

    def __init__(self, store: CollectionStore):
        self._store = store

    def apply_backup(self, payload: Any) -> BackupResult:
        batch = BackupBatch.from_payload(payload)
        timestamp = format_timestamp()

        if batch.test:
            logger.info("Connectivity test received from %s", batch.source)
            return BackupResult(sync_id=None, timestamp=timestamp, test=True)

        logger.info(
            "Backup received from %s: %d students, %d attendance records (backupDate=%s)",
            batch.source,
            len(batch.students),
            len(batch.attendance),
            batch.backup_date,
        )

        counts = MergeCounts()
        try:
            students = self._store.read(Collection.STUDENTS)
            attendance = self._store.read(Collection.ATTENDANCE)

            merge_students(students, batch.students, source=batch.source, timestamp=timestamp, counts=counts)
            merge_attendance(attendance, batch.attendance, source=batch.source, timestamp=timestamp, counts=counts)

            self._store.write(Collection.STUDENTS, students)
            self._store.write(Collection.ATTENDANCE, attendance)

            record = self._sync_record(batch, counts, timestamp)
            self._append_history(record)
        except Exception as e:
            logger.exception("Backup from %s failed", batch.source)
            self._record_failure(batch, counts, e)
            raise InternalError(str(e)) from e

        summary = {
            "importedStudents": counts.imported_students,
            "importedAttendance": counts.imported_attendance,
            "updatedAttendance": counts.updated_attendance,
            "totalStudents": len(students),
            "totalAttendance": len(attendance),
        }
        logger.info("Backup %s applied: %s", record["id"], summary)
        return BackupResult(sync_id=record["id"], timestamp=timestamp, summary=summary)

    def _sync_record(
        self,
        batch: BackupBatch,
        counts: MergeCounts,
        timestamp: str,
        *,
        error: Optional[Exception] = None,
    ) -> dict:
        record = {
            "id": str(uuid4()),
            "timestamp": timestamp,
            "source": batch.source,
            "syncType": batch.sync_type,
            "data": {
                "studentsCount": len(batch.students),
                "attendanceCount": len(batch.attendance),
                "importedStudents": counts.imported_students,
                "importedAttendance": counts.imported_attendance,
                "updatedAttendance": counts.updated_attendance,
            },
            "success": error is None,
        }
        if error is not None:
            record["error"] = str(error)
        return record

    def _append_history(self, record: dict) -> None:
        history = self._store.read(Collection.SYNC_HISTORY)
        history.append(record)
        self._store.write(Collection.SYNC_HISTORY, history)

    def _record_failure(self, batch: BackupBatch, counts: MergeCounts, error: Exception) -> None:
        record = self._sync_record(batch, counts, format_timestamp(), error=error)
        try:
            self._append_history(record)
        except Exception:
            logger.exception("Could not record failed sync %s", record["id"])


class SyncHistoryService:
    def __init__(self, store: CollectionStore):
        self._store = store

    def history(self, *, limit: Optional[int] = None) -> dict:
        records = self._store.read(Collection.SYNC_HISTORY)
        newest_first = list(reversed(records))
        if limit is not None:
            newest_first = newest_first[:limit]

        successful = sum(1 for r in records if r.get("success"))
        failed = len(records) - successful
        return {
            "count": len(newest_first),
            "total": len(records),
            "statistics": {
                "successfulSyncs": successful,
                "failedSyncs": failed,
                "successRate": rate(successful, len(records)),
            },
            "history": newest_first,
        }
