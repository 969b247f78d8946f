"""Employee API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from config.database import get_store
from repositories.exceptions import MissingFieldError, StoreError
from repositories.store_db import StoreDB
from routers.errors import internal_error
from schemas.employee import EmployeeSchema
from schemas.limits import UINT32_MAX
from schemas.responses import CreatedResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

EmployeeId = Annotated[int, Path(ge=0, le=UINT32_MAX, description="Employee identifier")]


@router.get(
    "",
    response_model=list[EmployeeSchema],
    summary="List Employees",
)
def list_employees(
    store: Annotated[StoreDB, Depends(get_store)],
) -> list[EmployeeSchema]:
    """Return every employee."""
    try:
        return store.employees.query()
    except StoreError as e:
        logger.exception("Failed to list employees")
        raise internal_error() from e


@router.post(
    "/search",
    response_model=list[EmployeeSchema],
    summary="Search Employees",
    description="""
    Return the employees matching every field set in the body.

    `name`, `surname` and `note` match as substrings, all other fields must be
    equal. Unset fields place no constraint.
    """,
)
def search_employees(
    employee_filter: EmployeeSchema,
    store: Annotated[StoreDB, Depends(get_store)],
) -> list[EmployeeSchema]:
    """Return the employees matching the filter in the body."""
    try:
        return store.employees.query(employee_filter)
    except StoreError as e:
        logger.exception("Failed to search employees")
        raise internal_error() from e


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Employee",
    responses={
        400: {"model": ErrorResponse, "description": "Required field missing"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def create_employee(
    employee: EmployeeSchema,
    store: Annotated[StoreDB, Depends(get_store)],
) -> CreatedResponse:
    """Create an employee. Any id in the body is ignored."""
    try:
        new_id = store.employees.create(employee)
    except MissingFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except StoreError as e:
        logger.exception("Failed to create employee")
        raise internal_error() from e

    return CreatedResponse(id=new_id)


@router.put(
    "/{employee_id}",
    response_model=EmployeeSchema,
    summary="Update Employee",
    responses={
        404: {"model": ErrorResponse, "description": "Employee not found or nothing to change"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def update_employee(
    employee_id: EmployeeId,
    employee: EmployeeSchema,
    store: Annotated[StoreDB, Depends(get_store)],
) -> EmployeeSchema:
    """Change the fields set in the body; the id in the path wins over the body.

    Returns:
        The employee as stored after the update.
    """
    employee.id = employee_id
    try:
        updated = store.employees.update(employee)
        current = store.employees.query(EmployeeSchema(id=employee_id)) if updated else []
    except StoreError as e:
        logger.exception("Failed to update employee id=%s", employee_id)
        raise internal_error() from e

    if not current:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with ID {employee_id} not found",
        )
    return current[0]


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Employee",
    responses={404: {"model": ErrorResponse, "description": "Employee not found"}},
)
def delete_employee(
    employee_id: EmployeeId,
    store: Annotated[StoreDB, Depends(get_store)],
) -> Response:
    """Delete an employee by id."""
    try:
        deleted = store.employees.delete(employee_id)
    except StoreError as e:
        logger.exception("Failed to delete employee id=%s", employee_id)
        raise internal_error() from e

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with ID {employee_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
