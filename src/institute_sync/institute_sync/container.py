from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.service import AttendanceService
from .auth.gateway import AccessGateway
from .core.enums import StorageBackend
from .storage.json_file_store import JsonFileStore
from .storage.memory_store import InMemoryStore
from .storage.repository import CollectionStore
from .students.service import StudentService
from .sync.service import BackupService, SyncHistoryService
from .system.service import SystemService


@dataclass(frozen=True)
class Container:
    store: CollectionStore
    gateway: AccessGateway

    backup_service: BackupService
    sync_history_service: SyncHistoryService
    student_service: StudentService
    attendance_service: AttendanceService
    system_service: SystemService


def build_store(*, backend: str, data_dir: str | Path) -> CollectionStore:
    if StorageBackend(backend) is StorageBackend.MEMORY:
        return InMemoryStore()
    return JsonFileStore(data_dir)


def build_container(*, store: CollectionStore, api_token: str, admin_password: str) -> Container:
    return Container(
        store=store,
        gateway=AccessGateway(api_token),
        backup_service=BackupService(store),
        sync_history_service=SyncHistoryService(store),
        student_service=StudentService(store),
        attendance_service=AttendanceService(store),
        system_service=SystemService(store, admin_password=admin_password),
    )
