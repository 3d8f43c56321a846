"""SQLAlchemy models exposed by the backend."""
from .admin import Admin
from .base import Base
from .employee import Employee

__all__ = ["Admin", "Base", "Employee"]
