"""Pydantic schema for employees.

Every field is optional. As a search body an unset field places no
constraint; as an update body it leaves the stored value untouched.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from schemas.limits import UINT32_MAX


class EmployeeSchema(BaseModel):
    """Employee of the store."""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Jana",
                "surname": "Novakova",
                "position": "Cashier",
                "department": "Sales",
                "shift": "morning",
                "salary": 1450.0,
                "phone_number": "+421900123456",
                "email": "jana@example.com",
                "status": True,
                "note": "Prefers weekday shifts",
                "hire_date": "2023-04-01",
            }
        },
    )

    id: int | None = Field(default=None, ge=0, le=UINT32_MAX)
    name: str | None = None
    surname: str | None = None
    position: str | None = None
    department: str | None = None
    shift: str | None = None
    salary: float | None = None
    phone_number: str | None = None
    email: str | None = None
    status: bool | None = Field(
        default=None,
        description="True for active, False for inactive, null when unknown",
    )
    note: str | None = None
    hire_date: date | None = None
