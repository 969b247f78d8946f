"""Repositories package."""

from repositories.entity_repository import EntityRepository
from repositories.exceptions import (
    InvalidStoredValueError,
    MissingFieldError,
    StoreError,
    ValueOutOfRangeError,
)
from repositories.store_db import StoreDB

__all__ = [
    "EntityRepository",
    "InvalidStoredValueError",
    "MissingFieldError",
    "StoreDB",
    "StoreError",
    "ValueOutOfRangeError",
]
