"""Services package."""

from services.snapshot_service import SnapshotError, SnapshotService

__all__ = ["SnapshotError", "SnapshotService"]
