"""Pydantic schemas used across the backend API.

Output models accept ORM attributes by their Python names and serialize under
the stored document keys (`_id`, `f_*`) the dashboard expects.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmployeeFields(BaseModel):
    """A validated employee payload mapped to model attribute names."""

    name: str
    email: str
    mobile_no: str
    designation: str
    gender: str
    course: str
    image: str
    create_date: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "EmployeeFields":
        """Translate the dashboard's camelCase keys; the payload must already be valid."""

        return cls(
            name=payload["name"],
            email=payload["email"],
            mobile_no=payload["mobileNo"],
            designation=payload["designation"],
            gender=payload["gender"],
            course=payload["course"],
            image=payload["pic"],
            create_date=payload["createDate"],
        )


class EmployeeRead(BaseModel):
    """Employee representation returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="f_Name")
    email: str = Field(alias="f_Email")
    mobile_no: str = Field(alias="f_MobileNo")
    designation: str = Field(alias="f_Designation")
    gender: str = Field(alias="f_Gender")
    course: str = Field(alias="f_Course")
    image: str = Field(alias="f_Image")
    create_date: str | None = Field(default=None, alias="f_CreateDate")


class AdminRead(BaseModel):
    """Public representation of an administrator; never carries the hash."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    username: str = Field(alias="f_userName")


class LoginResponse(BaseModel):
    message: str = "Login successful"
    admin: AdminRead


class EmployeeCreated(BaseModel):
    """Create echoes the submitted body back unchanged."""

    message: str = "Form submitted successfully"
    data: dict[str, Any]


class EmployeeUpdated(BaseModel):
    message: str = "Form submitted successfully"
    data: EmployeeRead


class EmployeeDeleted(BaseModel):
    success: bool = True
    message: str = "Employee deleted successfully"


class DeleteEmployeeRequest(BaseModel):
    """Body of the delete call; the id travels under the stored key `_id`."""

    model_config = ConfigDict(populate_by_name=True)

    id: Any = Field(default=None, alias="_id")
