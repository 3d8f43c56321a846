"""Employee endpoints used by the admin dashboard."""
import logging
from typing import Any, Sequence

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError

from ..dependencies import get_employee_repository
from ..errors import DuplicateEmailError, EmployeeNotFoundError, InvalidPayloadError, ServerError
from ..models import Employee
from ..repository import EmployeeRepository
from ..schemas import (
    DeleteEmployeeRequest,
    EmployeeCreated,
    EmployeeDeleted,
    EmployeeFields,
    EmployeeRead,
    EmployeeUpdated,
)
from ..validators import validate_employee

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])


def _validated_fields(payload: dict[str, Any]) -> EmployeeFields:
    """Reject the payload with its first error, or map it to model fields."""

    result = validate_employee(payload)
    if not result.ok:
        logger.info("Validation error: %s", result.first.message)
        raise InvalidPayloadError(result.errors)
    return EmployeeFields.from_payload(payload)


@router.post("/createemployee", response_model=EmployeeCreated)
async def create_employee(
    payload: dict[str, Any] = Body(...),
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeCreated:
    """Insert a new employee; the response echoes the submitted body."""

    fields = _validated_fields(payload)
    if await employees.email_taken(fields.email):
        logger.info("Email already exists: %s", fields.email)
        raise DuplicateEmailError()

    await employees.create(fields)
    return EmployeeCreated(data=payload)


@router.get("/employeelist", response_model=list[EmployeeRead])
async def list_employees(
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> Sequence[Employee]:
    """Return every stored employee, unfiltered."""

    return await employees.list_all()


@router.delete("/deleteemployee", response_model=EmployeeDeleted)
async def delete_employee(
    payload: DeleteEmployeeRequest | None = None,
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeDeleted:
    """Delete the employee named by `_id` in the body."""

    # Stored ids are strings; any other JSON value cannot name a record.
    employee_id = payload.id if payload is not None else None
    if not isinstance(employee_id, str):
        logger.info("Employee not found: %r", employee_id)
        raise EmployeeNotFoundError()

    try:
        deleted = await employees.delete(employee_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete employee %s", employee_id)
        raise ServerError(extra={"success": False}) from exc

    if not deleted:
        logger.info("Employee not found: %s", employee_id)
        raise EmployeeNotFoundError()
    return EmployeeDeleted()


@router.get("/{employee_id}/edit", response_model=EmployeeRead)
async def get_employee(
    employee_id: str,
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> Employee:
    """Return one employee for the edit form."""

    employee = await employees.get(employee_id)
    if employee is None:
        logger.info("Employee not found: %s", employee_id)
        raise EmployeeNotFoundError()
    return employee


@router.put("/employeeedit/{employee_id}", response_model=EmployeeUpdated)
async def update_employee(
    employee_id: str,
    payload: dict[str, Any] = Body(...),
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeUpdated:
    """Replace every field of an employee.

    The email check skips the employee itself, so an unchanged email passes.
    """

    fields = _validated_fields(payload)
    if await employees.email_taken(fields.email, exclude_id=employee_id):
        logger.info("Email already exists: %s", fields.email)
        raise DuplicateEmailError()

    employee = await employees.replace(employee_id, fields)
    if employee is None:
        logger.info("Employee not found: %s", employee_id)
        raise EmployeeNotFoundError()
    return EmployeeUpdated(data=EmployeeRead.model_validate(employee))
