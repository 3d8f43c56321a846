"""Test fixtures for the backend."""
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from staffdesk.auth import ensure_admin
from staffdesk.config import Settings
from staffdesk.main import create_app
from staffdesk.repository import AdminRepository

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret123"


def employee_payload(**overrides: object) -> dict:
    """A valid create/update body; keyword overrides replace single fields."""

    payload = {
        "name": "Ann Lee",
        "email": "ann@x.com",
        "mobileNo": "1234567890",
        "designation": "Dev",
        "gender": "Female",
        "course": "BCA",
        "pic": "http://x.com/p.jpg",
        "createDate": "2024-01-01",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""

    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test_backend.db'}",
        cors_origins="http://dashboard.local",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    """An application whose database schema has been created."""

    application = create_app(settings)
    database = application.state.database
    await database.connect()
    yield application
    await database.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an HTTP client for integration tests."""

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def admin(app: FastAPI):
    """A stored administrator with a known password."""

    async with app.state.database.session() as session:
        return await ensure_admin(AdminRepository(session), ADMIN_USERNAME, ADMIN_PASSWORD)
