"""Import and export of the whole store as a JSON snapshot."""

import logging
from pathlib import Path

from pydantic import ValidationError

from repositories.exceptions import StoreError
from repositories.store_db import StoreDB
from schemas.snapshot import StoreSnapshot

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """A snapshot could not be read, written or applied."""


class SnapshotService:
    """Service moving the store contents to and from a JSON document.

    Rows are written one insert at a time with no enclosing transaction, so a
    failure part way through an import leaves the rows inserted so far in
    place.
    """

    def __init__(self, store: StoreDB):
        self.store = store

    def load_from_json(self, path: str | Path) -> int:
        """Insert every employee and product found in the snapshot file.

        Identifiers in the file are ignored; the store assigns new ones.

        Args:
            path: Location of the snapshot document.

        Returns:
            Number of rows inserted; 0 when the file does not exist.

        Raises:
            SnapshotError: If the file cannot be parsed or a row cannot be inserted.
        """
        path = Path(path)
        if not path.exists():
            logger.info("Snapshot file %s does not exist, nothing to import", path)
            return 0

        try:
            snapshot = StoreSnapshot.model_validate_json(path.read_bytes())
        except (OSError, ValidationError) as e:
            raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e

        logger.info(
            "Importing snapshot %s: employees=%d, products=%d",
            path,
            len(snapshot.employees),
            len(snapshot.products),
        )

        inserted = 0
        try:
            for employee in snapshot.employees:
                self.store.employees.create(employee)
                inserted += 1
            for product in snapshot.products:
                self.store.products.create(product)
                inserted += 1
        except StoreError as e:
            raise SnapshotError(
                f"Snapshot import from {path} stopped after {inserted} rows: {e}"
            ) from e

        logger.info("Snapshot %s imported: rows=%d", path, inserted)
        return inserted

    def save_to_json(self, path: str | Path) -> None:
        """Write every employee and product to the snapshot file.

        Raises:
            SnapshotError: If the store cannot be read or the file cannot be written.
        """
        path = Path(path)
        try:
            snapshot = StoreSnapshot(
                employees=self.store.employees.query(),
                products=self.store.products.query(),
            )
        except StoreError as e:
            raise SnapshotError(f"Cannot read store for snapshot: {e}") from e

        try:
            path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise SnapshotError(f"Cannot write snapshot {path}: {e}") from e

        logger.info(
            "Snapshot saved to %s: employees=%d, products=%d",
            path,
            len(snapshot.employees),
            len(snapshot.products),
        )
