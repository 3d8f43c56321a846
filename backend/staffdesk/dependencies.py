"""Reusable FastAPI dependencies."""
from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .database import Database
from .repository import AdminRepository, EmployeeRepository


def get_database(request: Request) -> Database:
    """Return the handle the application was built with."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an AsyncSession."""
    async with database.session() as session:
        yield session


def get_employee_repository(
    session: AsyncSession = Depends(get_db_session),
) -> EmployeeRepository:
    return EmployeeRepository(session)


def get_admin_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AdminRepository:
    return AdminRepository(session)
