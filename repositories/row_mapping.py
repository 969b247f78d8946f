"""Conversion of stored rows back into entity values."""

from collections.abc import Mapping
from datetime import date
from typing import Any

from repositories.exceptions import InvalidStoredValueError, ValueOutOfRangeError
from repositories.query_builder import FieldSpec, TableSpec, ValueType
from schemas.limits import INT64_MAX, INT64_MIN, UINT32_MAX

INTEGER_RANGES = {
    ValueType.UINT32: (0, UINT32_MAX),
    ValueType.INT64: (INT64_MIN, INT64_MAX),
}


def _to_date(table: TableSpec, spec: FieldSpec, value: Any) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise InvalidStoredValueError(table.table, spec.name, value) from e


def _to_integer(table: TableSpec, spec: FieldSpec, value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        raise InvalidStoredValueError(table.table, spec.name, value)

    low, high = INTEGER_RANGES[spec.value_type]
    if not low <= number <= high:
        raise ValueOutOfRangeError(table.table, spec.name, number)
    return number


def from_storage(table: TableSpec, spec: FieldSpec, value: Any) -> Any:
    """Convert one stored column value to its entity form.

    Integers outside the range of the application-side type raise
    ``ValueOutOfRangeError``. Fractional numbers in integer columns and dates
    that are not ISO text raise ``InvalidStoredValueError``. Nothing is
    truncated.
    """
    if value is None:
        return None

    if spec.value_type is ValueType.FLAG:
        return value == 1
    if spec.value_type is ValueType.DATE:
        return _to_date(table, spec, value)
    if spec.value_type in INTEGER_RANGES:
        return _to_integer(table, spec, value)
    return value


def row_to_values(table: TableSpec, row: Mapping[str, Any]) -> dict[str, Any]:
    """Map every column of a stored row to its entity value."""
    return {spec.name: from_storage(table, spec, row.get(spec.name)) for spec in table.fields}
