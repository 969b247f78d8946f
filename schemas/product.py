"""Pydantic schema for products."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from schemas.limits import INT64_MAX, INT64_MIN, UINT32_MAX


class ProductSchema(BaseModel):
    """Product on the store's shelves.

    ``employee_id`` refers to the employee responsible for the product. The
    reference is not checked, so it can point to an employee that no longer
    exists.
    """

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(default=None, ge=0, le=UINT32_MAX)
    name: str | None = None
    category: str | None = None
    quantity: int | None = Field(default=None, ge=0, le=UINT32_MAX)
    status: bool | None = None
    bar_code: int | None = Field(default=None, ge=INT64_MIN, le=INT64_MAX)
    cost_price: float | None = None
    sell_price: float | None = None
    description: str | None = None
    brand: str | None = None
    supplier: str | None = None
    employee_id: int | None = Field(default=None, ge=0, le=UINT32_MAX)
    date_added: date | None = None
    date_remove: date | None = None
