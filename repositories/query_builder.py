"""Parameterized SQL built from partially populated entities.

Each table is described once as an ordered tuple of ``FieldSpec``. The
builders walk that tuple, read the matching attribute from the entity and
emit a clause plus a bound parameter for every field that is set. Values are
always bound as ``:p0``, ``:p1`` ... and never formatted into the SQL text.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any


class FieldKind(str, Enum):
    """How a field takes part in filters and writes."""

    IDENTIFIER = "identifier"
    EXACT = "exact"
    SUBSTRING = "substring"


class ValueType(str, Enum):
    """Application-side type of a column."""

    TEXT = "text"
    REAL = "real"
    FLAG = "flag"
    DATE = "date"
    UINT32 = "uint32"
    INT64 = "int64"


@dataclass(frozen=True)
class FieldSpec:
    """Layout of one column as seen by the query builders."""

    name: str
    kind: FieldKind
    value_type: ValueType
    required: bool = False


@dataclass(frozen=True)
class TableSpec:
    """Ordered column layout of one table.

    The order of ``fields`` fixes the order of conditions, assignments and
    parameters in every generated statement.
    """

    table: str
    fields: tuple[FieldSpec, ...]

    @property
    def identifier(self) -> FieldSpec:
        """The primary key field."""
        return next(f for f in self.fields if f.kind is FieldKind.IDENTIFIER)

    @property
    def writable_fields(self) -> tuple[FieldSpec, ...]:
        """Every field except the identifier, in table order."""
        return tuple(f for f in self.fields if f.kind is not FieldKind.IDENTIFIER)

    @property
    def column_names(self) -> list[str]:
        """Column names in table order, identifier first."""
        return [f.name for f in self.fields]


@dataclass
class BuiltQuery:
    """SQL text with its positionally ordered parameters."""

    sql: str
    params: list[Any] = field(default_factory=list)

    def placeholder(self, value: Any) -> str:
        """Append a parameter and return the placeholder that binds it."""
        self.params.append(value)
        return f":p{len(self.params) - 1}"

    def bind_params(self) -> dict[str, Any]:
        """Parameters keyed by placeholder name, as passed to ``execute``."""
        return {f"p{index}": value for index, value in enumerate(self.params)}


def to_storage(spec: FieldSpec, value: Any) -> Any:
    """Convert an entity value to the form stored in its column."""
    if spec.value_type is ValueType.FLAG:
        return 1 if value else 0
    if spec.value_type is ValueType.DATE and isinstance(value, date):
        return value.isoformat()
    return value


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value is matched literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_select(table: TableSpec, entity: Any | None = None) -> BuiltQuery:
    """Build a SELECT returning every row matching the set fields of ``entity``.

    Substring fields match with ``LIKE``; an empty string is ignored so that it
    does not narrow the result. Every other set field must be equal. Passing
    ``None`` or an entity with nothing set selects the whole table.

    Args:
        table: Layout of the table to read.
        entity: Filter entity, or None for no constraint.

    Returns:
        The query ordered by identifier.
    """
    query = BuiltQuery(sql="")
    conditions = ["1=1"]

    for spec in table.fields:
        value = getattr(entity, spec.name, None) if entity is not None else None
        if value is None:
            continue

        if spec.kind is FieldKind.SUBSTRING:
            if value == "":
                continue
            placeholder = query.placeholder(f"%{escape_like(value)}%")
            conditions.append(f"{spec.name} LIKE {placeholder} ESCAPE '\\'")
        else:
            placeholder = query.placeholder(to_storage(spec, value))
            conditions.append(f"{spec.name} = {placeholder}")

    query.sql = (
        f"SELECT {', '.join(table.column_names)} FROM {table.table} "
        f"WHERE {' AND '.join(conditions)} ORDER BY {table.identifier.name}"
    )
    return query


def build_update(table: TableSpec, entity: Any) -> BuiltQuery | None:
    """Build an UPDATE assigning every set field of ``entity`` by identifier.

    The identifier parameter always comes last, after the assignments.

    Returns:
        The query, or None when the entity has no identifier or nothing to
        assign.
    """
    entity_id = getattr(entity, table.identifier.name, None)
    if entity_id is None:
        return None

    query = BuiltQuery(sql="")
    assignments = []

    for spec in table.writable_fields:
        value = getattr(entity, spec.name, None)
        if value is None:
            continue
        assignments.append(f"{spec.name} = {query.placeholder(to_storage(spec, value))}")

    if not assignments:
        return None

    id_placeholder = query.placeholder(entity_id)
    query.sql = (
        f"UPDATE {table.table} SET {', '.join(assignments)} "
        f"WHERE {table.identifier.name} = {id_placeholder}"
    )
    return query


def build_insert(table: TableSpec, entity: Any) -> BuiltQuery:
    """Build an INSERT of every writable column; the identifier is never sent."""
    query = BuiltQuery(sql="")
    columns = []
    placeholders = []

    for spec in table.writable_fields:
        value = getattr(entity, spec.name, None)
        columns.append(spec.name)
        placeholders.append(query.placeholder(None if value is None else to_storage(spec, value)))

    query.sql = (
        f"INSERT INTO {table.table} ({', '.join(columns)}) "
        f"VALUES ({', '.join(placeholders)})"
    )
    return query


def build_delete(table: TableSpec, entity_id: int) -> BuiltQuery:
    """Build a DELETE of the row with the given identifier."""
    query = BuiltQuery(sql="")
    placeholder = query.placeholder(entity_id)
    query.sql = f"DELETE FROM {table.table} WHERE {table.identifier.name} = {placeholder}"
    return query


def missing_required(table: TableSpec, entity: Any) -> list[str]:
    """Names of NOT NULL fields that are unset on ``entity``."""
    return [
        spec.name
        for spec in table.writable_fields
        if spec.required and getattr(entity, spec.name, None) is None
    ]
