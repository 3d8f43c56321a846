"""Declarative base classes for ORM models."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy import MetaData, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def new_document_id() -> str:
    """Return an opaque identifier for a freshly inserted document."""

    return uuid4().hex


class Base(DeclarativeBase):
    """Base declarative class that centralises metadata."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class DocumentMixin:
    """Mixin that adds the store-assigned `_id` column."""

    id: Mapped[str] = mapped_column("_id", String(32), primary_key=True, default=new_document_id)
