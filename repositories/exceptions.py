"""Errors raised by the persistence layer."""


class StoreError(Exception):
    """A store operation failed.

    The underlying driver error, when there is one, is chained as
    ``__cause__``. Its text is meant for logs, not for API clients.
    """


class MissingFieldError(StoreError):
    """A create was attempted without one or more NOT NULL fields."""

    def __init__(self, table: str, fields: list[str]):
        self.table = table
        self.fields = fields
        super().__init__(f"Missing required fields for {table}: {', '.join(fields)}")


class ValueOutOfRangeError(StoreError):
    """A stored integer does not fit the application-side type of its column."""

    def __init__(self, table: str, column: str, value: int):
        self.table = table
        self.column = column
        self.value = value
        super().__init__(f"Value {value} in {table}.{column} is out of range")


class InvalidStoredValueError(StoreError):
    """A stored value cannot be read back as the type of its column."""

    def __init__(self, table: str, column: str, value: object):
        self.table = table
        self.column = column
        self.value = value
        super().__init__(f"Value {value!r} in {table}.{column} is not a valid stored value")
