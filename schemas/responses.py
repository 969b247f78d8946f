"""Response schemas shared by the routers."""

from pydantic import BaseModel, Field


class CreatedResponse(BaseModel):
    """Response schema for create endpoints."""

    id: int = Field(
        description="Identifier assigned by the store",
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(
        description="Error message",
    )
