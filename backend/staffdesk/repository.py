"""Persistence adapter: single-document reads and writes for both collections."""
from __future__ import annotations

from collections.abc import Sequence
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import DuplicateEmailError
from .models import Admin, Employee
from .schemas import EmployeeFields

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Find, insert, replace and delete employee documents."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> Sequence[Employee]:
        result = await self.session.execute(select(Employee))
        return list(result.scalars().all())

    async def get(self, employee_id: str) -> Employee | None:
        return await self.session.get(Employee, employee_id)

    async def email_taken(self, email: str, *, exclude_id: str | None = None) -> bool:
        """Return True when another employee already uses `email`."""

        query = select(Employee.id).where(Employee.email == email)
        if exclude_id is not None:
            query = query.where(Employee.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def create(self, fields: EmployeeFields) -> Employee:
        employee = Employee(**fields.model_dump())
        self.session.add(employee)
        await self._commit()
        await self.session.refresh(employee)
        return employee

    async def replace(self, employee_id: str, fields: EmployeeFields) -> Employee | None:
        """Overwrite every field of an existing employee; None if it is gone."""

        employee = await self.get(employee_id)
        if employee is None:
            return None

        for attribute, value in fields.model_dump().items():
            setattr(employee, attribute, value)
        await self._commit()
        await self.session.refresh(employee)
        return employee

    async def delete(self, employee_id: str) -> bool:
        employee = await self.get(employee_id)
        if employee is None:
            return False

        await self.session.delete(employee)
        await self.session.commit()
        return True

    async def _commit(self) -> None:
        # The unique index on f_Email is the last word on concurrent writers.
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info("Email uniqueness constraint rejected a write: %s", exc.orig)
            raise DuplicateEmailError() from exc


class AdminRepository:
    """Read access to administrator credentials, plus provisioning."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_username(self, username: str) -> Admin | None:
        result = await self.session.execute(select(Admin).where(Admin.username == username))
        return result.scalar_one_or_none()

    async def save(self, username: str, password_hash: str) -> Admin:
        """Insert the administrator, or reset the hash of an existing one."""

        admin = await self.get_by_username(username)
        if admin is None:
            admin = Admin(username=username, password_hash=password_hash)
            self.session.add(admin)
        else:
            admin.password_hash = password_hash
        await self.session.commit()
        await self.session.refresh(admin)
        return admin
