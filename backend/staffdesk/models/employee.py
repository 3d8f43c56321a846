"""Employee model for the backend API."""
from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, DocumentMixin


class Employee(DocumentMixin, Base):
    """Employee document; column names follow the dashboard's `f_*` keys."""

    __tablename__ = "t_employees"

    name: Mapped[str] = mapped_column("f_Name", String(30))
    email: Mapped[str] = mapped_column("f_Email", String)
    mobile_no: Mapped[str] = mapped_column("f_MobileNo", String(10))
    designation: Mapped[str] = mapped_column("f_Designation", String)
    gender: Mapped[str] = mapped_column("f_Gender", String)
    course: Mapped[str] = mapped_column("f_Course", String)
    image: Mapped[str] = mapped_column("f_Image", String)
    create_date: Mapped[str] = mapped_column("f_CreateDate", String)

    __table_args__ = (
        Index("ix_t_employees_email", "f_Email", unique=True),
    )
