from .snapshot_service import SnapshotService, SnapshotError, ImportResult, BACKUP_PREFIX

__all__ = ["SnapshotService", "SnapshotError", "ImportResult", "BACKUP_PREFIX"]
