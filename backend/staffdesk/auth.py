"""Administrator login route and credential helpers."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from passlib.context import CryptContext
from sqlalchemy.exc import SQLAlchemyError

from .dependencies import get_admin_repository
from .errors import InvalidCredentialsError, InvalidPayloadError, ServerError
from .models import Admin
from .repository import AdminRepository
from .schemas import AdminRead, LoginResponse
from .validators import validate_login

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

# Use PBKDF2-SHA256 instead of bcrypt to avoid bcrypt backend issues
password_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
)


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return password_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against the stored hash."""
    return password_context.verify(password, password_hash)


async def ensure_admin(admins: AdminRepository, username: str, password: str) -> Admin:
    """Store an administrator credential, hashing the password."""

    admin = await admins.save(username, hash_password(password))
    logger.info("Administrator %r provisioned", username)
    return admin


@router.post("/", response_model=LoginResponse)
async def login(
    payload: dict[str, Any] = Body(...),
    admins: AdminRepository = Depends(get_admin_repository),
) -> LoginResponse:
    """Check `{f_userName, f_Pwd}` against the stored administrators."""

    result = validate_login(payload)
    if not result.ok:
        raise InvalidPayloadError(result.errors, detailed=True)

    try:
        admin = await admins.get_by_username(payload["f_userName"])
    except SQLAlchemyError as exc:
        logger.exception("Error in login process")
        raise ServerError("Internal server error") from exc

    if admin is None or not verify_password(payload["f_Pwd"], admin.password_hash):
        logger.info("Rejected login for %r", payload["f_userName"])
        raise InvalidCredentialsError()

    return LoginResponse(admin=AdminRead.model_validate(admin))
