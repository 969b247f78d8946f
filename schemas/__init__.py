"""Schemas package."""

from schemas.employee import EmployeeSchema
from schemas.product import ProductSchema
from schemas.responses import CreatedResponse, ErrorResponse
from schemas.snapshot import StoreSnapshot

__all__ = [
    "EmployeeSchema",
    "ProductSchema",
    "StoreSnapshot",
    "CreatedResponse",
    "ErrorResponse",
]
