"""Snapshot document schema."""

from pydantic import BaseModel, Field

from schemas.employee import EmployeeSchema
from schemas.product import ProductSchema


class StoreSnapshot(BaseModel):
    """Full export of the store used for backup and seeding."""

    employees: list[EmployeeSchema] = Field(default_factory=list)
    products: list[ProductSchema] = Field(default_factory=list)
