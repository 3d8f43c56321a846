"""Administrator credential checked by the login endpoint."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, DocumentMixin


class Admin(DocumentMixin, Base):
    """Dashboard administrator. `password_hash` holds a passlib hash."""

    __tablename__ = "t_admins"

    username: Mapped[str] = mapped_column("f_userName", String(30), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column("f_Pwd", String)
