"""FastAPI application entry point."""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from .auth import ensure_admin, router as auth_router
from .config import Settings, get_settings
from .database import Database
from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .repository import AdminRepository
from .routers.employees import router as employees_router

logger = logging.getLogger(__name__)


async def _seed_admin(database: Database, settings: Settings) -> None:
    if not (settings.admin_username and settings.admin_password):
        return
    async with database.session() as session:
        admins = AdminRepository(session)
        if await admins.get_by_username(settings.admin_username) is None:
            await ensure_admin(admins, settings.admin_username, settings.admin_password)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the store on startup and release it on shutdown.

    A store that cannot be reached is logged and the app keeps serving;
    requests then fail with 500 when they touch it.
    """

    database: Database = app.state.database
    try:
        await database.connect()
        await _seed_admin(database, app.state.settings)
    except (SQLAlchemyError, OSError, ImportError):
        logger.exception("Database connection error")
    try:
        yield
    finally:
        await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one explicitly constructed database handle."""

    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Staffdesk Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = Database(settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        """Readiness check for uptime monitors."""

        return {"status": "ok"}

    app.include_router(auth_router)
    app.include_router(employees_router)
    return app


app = create_app()
