"""Column layouts of the employees and products tables.

Field order matches the table definitions in ``models`` and is the order in
which filters, assignments and parameters are generated.
"""

from repositories.query_builder import FieldKind, FieldSpec, TableSpec, ValueType

EMPLOYEE_TABLE = TableSpec(
    table="employees",
    fields=(
        FieldSpec("id", FieldKind.IDENTIFIER, ValueType.UINT32),
        FieldSpec("name", FieldKind.SUBSTRING, ValueType.TEXT),
        FieldSpec("surname", FieldKind.SUBSTRING, ValueType.TEXT),
        FieldSpec("position", FieldKind.EXACT, ValueType.TEXT, required=True),
        FieldSpec("department", FieldKind.EXACT, ValueType.TEXT),
        FieldSpec("shift", FieldKind.EXACT, ValueType.TEXT),
        FieldSpec("salary", FieldKind.EXACT, ValueType.REAL),
        FieldSpec("phone_number", FieldKind.EXACT, ValueType.TEXT),
        FieldSpec("email", FieldKind.EXACT, ValueType.TEXT),
        FieldSpec("status", FieldKind.EXACT, ValueType.FLAG),
        FieldSpec("note", FieldKind.SUBSTRING, ValueType.TEXT),
        FieldSpec("hire_date", FieldKind.EXACT, ValueType.DATE),
    ),
)

PRODUCT_TABLE = TableSpec(
    table="products",
    fields=(
        FieldSpec("id", FieldKind.IDENTIFIER, ValueType.UINT32),
        FieldSpec("name", FieldKind.SUBSTRING, ValueType.TEXT, required=True),
        FieldSpec("category", FieldKind.EXACT, ValueType.TEXT, required=True),
        FieldSpec("quantity", FieldKind.EXACT, ValueType.UINT32, required=True),
        FieldSpec("status", FieldKind.EXACT, ValueType.FLAG),
        FieldSpec("bar_code", FieldKind.EXACT, ValueType.INT64, required=True),
        FieldSpec("cost_price", FieldKind.EXACT, ValueType.REAL, required=True),
        FieldSpec("sell_price", FieldKind.EXACT, ValueType.REAL, required=True),
        FieldSpec("description", FieldKind.SUBSTRING, ValueType.TEXT),
        FieldSpec("brand", FieldKind.EXACT, ValueType.TEXT),
        FieldSpec("supplier", FieldKind.EXACT, ValueType.TEXT),
        FieldSpec("employee_id", FieldKind.EXACT, ValueType.UINT32),
        FieldSpec("date_added", FieldKind.EXACT, ValueType.DATE),
        FieldSpec("date_remove", FieldKind.EXACT, ValueType.DATE),
    ),
)
