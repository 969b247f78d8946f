"""Repository for single-table entity operations."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import Connection, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from repositories.exceptions import InvalidStoredValueError, MissingFieldError, StoreError
from repositories.query_builder import (
    BuiltQuery,
    TableSpec,
    build_delete,
    build_insert,
    build_select,
    build_update,
    missing_required,
)
from repositories.row_mapping import row_to_values

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class EntityRepository(Generic[EntityT]):
    """Data access layer for one entity table.

    Every operation runs as a single statement in its own transaction on a
    connection checked out from the shared engine pool.
    """

    def __init__(self, engine: Engine, table: TableSpec, schema: type[EntityT]):
        """Initialize repository with the shared engine.

        Args:
            engine: SQLAlchemy engine owning the connection pool.
            table: Column layout of the table.
            schema: Pydantic model the rows are mapped to.
        """
        self.engine = engine
        self.table = table
        self.schema = schema

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Connection]:
        try:
            with self.engine.begin() as connection:
                yield connection
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to {action} {self.table.table}") from e

    def _run(self, connection: Connection, query: BuiltQuery):
        logger.debug("Executing: %s params=%s", query.sql, query.params)
        return connection.execute(text(query.sql), query.bind_params())

    def create(self, entity: EntityT) -> int:
        """Insert a new row, ignoring any identifier set on the entity.

        Args:
            entity: Values of the new row.

        Returns:
            Identifier assigned by the store.

        Raises:
            MissingFieldError: If a NOT NULL field is unset.
            StoreError: If the insert fails.
        """
        missing = missing_required(self.table, entity)
        if missing:
            raise MissingFieldError(self.table.table, missing)

        query = build_insert(self.table, entity)
        with self._transaction("insert into") as connection:
            new_id = self._run(connection, query).lastrowid

        logger.info("Created %s record: id=%s", self.table.table, new_id)
        return new_id

    def delete(self, entity_id: int) -> bool:
        """Delete a row by identifier.

        Returns:
            True if a row was removed, False if no row had that identifier.
        """
        query = build_delete(self.table, entity_id)
        with self._transaction("delete from") as connection:
            deleted = self._run(connection, query).rowcount > 0

        if deleted:
            logger.info("Deleted %s record: id=%s", self.table.table, entity_id)
        else:
            logger.info("No %s record to delete: id=%s", self.table.table, entity_id)
        return deleted

    def update(self, entity: EntityT) -> bool:
        """Update the set fields of the row identified by ``entity.id``.

        Unset fields keep their stored values. Nothing is executed when the
        entity has no identifier or no field to change.

        Returns:
            True if a row was changed, False otherwise.
        """
        query = build_update(self.table, entity)
        if query is None:
            logger.info(
                "Nothing to update in %s: id=%s",
                self.table.table,
                getattr(entity, self.table.identifier.name, None),
            )
            return False

        with self._transaction("update") as connection:
            updated = self._run(connection, query).rowcount > 0

        logger.info(
            "Update of %s record: id=%s, changed=%s",
            self.table.table,
            query.params[-1],
            updated,
        )
        return updated

    def query(self, filter_entity: EntityT | None = None) -> list[EntityT]:
        """Return every row matching the set fields of ``filter_entity``.

        Args:
            filter_entity: Filter entity; None or an empty entity matches all rows.

        Returns:
            Matching rows ordered by identifier.
        """
        query = build_select(self.table, filter_entity)
        with self._transaction("read from") as connection:
            rows = self._run(connection, query).mappings().all()
            return [self._to_entity(row) for row in rows]

    def _to_entity(self, row) -> EntityT:
        values = row_to_values(self.table, row)
        try:
            return self.schema.model_validate(values)
        except ValidationError as e:
            error = e.errors()[0]
            column = str(error["loc"][0]) if error["loc"] else "?"
            raise InvalidStoredValueError(self.table.table, column, error.get("input")) from e
