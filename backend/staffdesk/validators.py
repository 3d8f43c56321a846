"""Field-level validation for request bodies.

Each validator receives the raw JSON value of one key (``MISSING`` when the
key is absent) and returns a ``FieldError`` or ``None``. The record
validators run them in a fixed key order and then flag unknown keys, so the
first error of a result is always the one the dashboard should show.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import email_validator
from pydantic import AnyUrl, TypeAdapter, ValidationError

MISSING: Any = object()

GENDERS = ("Male", "Female")
COURSES = ("MCA", "BCA", "BSC")

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 30
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6

MOBILE_NO_PATTERN = re.compile(r"[0-9]{10}")
# Whitespace and control characters never appear in a well-formed URI.
URI_FORBIDDEN_PATTERN = re.compile(r"[\s\x00-\x1f\x7f]")

_uri_adapter = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class FieldError:
    """One failed rule: the offending key, a readable message and a rule code."""

    field: str
    message: str
    type: str

    def as_detail(self) -> dict[str, Any]:
        return {"message": self.message, "path": [self.field], "type": self.type}


@dataclass
class ValidationResult:
    """Ordered outcome of validating one record."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def first(self) -> FieldError | None:
        return self.errors[0] if self.errors else None


Validator = Callable[[Any], FieldError | None]


def _check_string(
    key: str,
    value: Any,
    *,
    required: str | None = None,
    base: str | None = None,
    empty: str | None = None,
) -> FieldError | None:
    """Presence, type and emptiness checks shared by every string field."""

    if value is MISSING:
        return FieldError(key, required or f'"{key}" is required', "any.required")
    if not isinstance(value, str):
        return FieldError(key, base or f'"{key}" must be a string', "string.base")
    if value == "":
        return FieldError(key, empty or f'"{key}" is not allowed to be empty', "string.empty")
    return None


def _check_choice(key: str, value: Any, choices: tuple[str, ...], *, required: str, invalid: str) -> FieldError | None:
    if value is MISSING:
        return FieldError(key, required, "any.required")
    if not isinstance(value, str) or value not in choices:
        return FieldError(key, invalid, "any.only")
    return None


# Employee fields


def validate_name(value: Any) -> FieldError | None:
    error = _check_string(
        "name",
        value,
        required="Name is required.",
        base="Name should be a string.",
        empty="Name cannot be empty.",
    )
    if error:
        return error
    if len(value) < NAME_MIN_LENGTH:
        return FieldError("name", "Name should be at least 3 characters.", "string.min")
    if len(value) > NAME_MAX_LENGTH:
        return FieldError("name", "Name should not exceed 30 characters.", "string.max")
    return None


def validate_email(value: Any) -> FieldError | None:
    error = _check_string(
        "email",
        value,
        required="Email is required.",
        empty="Email cannot be empty.",
    )
    if error:
        return error
    try:
        email_validator.validate_email(value, check_deliverability=False, test_environment=True)
    except email_validator.EmailNotValidError:
        return FieldError("email", "Please enter a valid email address.", "string.email")
    return None


def validate_mobile_no(value: Any) -> FieldError | None:
    error = _check_string(
        "mobileNo",
        value,
        required="Mobile number is required.",
        empty="Mobile No cannot be empty.",
    )
    if error:
        return error
    if not MOBILE_NO_PATTERN.fullmatch(value):
        return FieldError("mobileNo", "Mobile number must be a 10-digit number.", "string.pattern.base")
    return None


def validate_designation(value: Any) -> FieldError | None:
    return _check_string(
        "designation",
        value,
        required="Designation is required.",
        empty="Enter a valid Designation",
    )


def validate_gender(value: Any) -> FieldError | None:
    return _check_choice(
        "gender",
        value,
        GENDERS,
        required="Gender is required.",
        invalid="Gender must be either 'Male' or 'Female'.",
    )


def validate_course(value: Any) -> FieldError | None:
    return _check_choice(
        "course",
        value,
        COURSES,
        required="Course is required.",
        invalid="Course must be either 'MCA', 'BCA', or 'BSC'.",
    )


def validate_pic(value: Any) -> FieldError | None:
    error = _check_string(
        "pic",
        value,
        required="Picture is required.",
        empty="Upload the Image",
    )
    if error:
        return error
    if URI_FORBIDDEN_PATTERN.search(value):
        return FieldError("pic", "Please provide a valid URL for the picture.", "string.uri")
    try:
        _uri_adapter.validate_python(value)
    except ValidationError:
        return FieldError("pic", "Please provide a valid URL for the picture.", "string.uri")
    return None


def validate_create_date(value: Any) -> FieldError | None:
    # Free-form; the dashboard sends whatever date string it renders.
    return _check_string("createDate", value)


EMPLOYEE_FIELDS: tuple[tuple[str, Validator], ...] = (
    ("name", validate_name),
    ("email", validate_email),
    ("mobileNo", validate_mobile_no),
    ("designation", validate_designation),
    ("gender", validate_gender),
    ("course", validate_course),
    ("pic", validate_pic),
    ("createDate", validate_create_date),
)


# Login fields


def validate_username(value: Any) -> FieldError | None:
    error = _check_string("f_userName", value)
    if error:
        return error
    if len(value) < USERNAME_MIN_LENGTH:
        return FieldError(
            "f_userName",
            f'"f_userName" length must be at least {USERNAME_MIN_LENGTH} characters long',
            "string.min",
        )
    if len(value) > USERNAME_MAX_LENGTH:
        return FieldError(
            "f_userName",
            f'"f_userName" length must be less than or equal to {USERNAME_MAX_LENGTH} characters long',
            "string.max",
        )
    return None


def validate_password(value: Any) -> FieldError | None:
    error = _check_string("f_Pwd", value)
    if error:
        return error
    if len(value) < PASSWORD_MIN_LENGTH:
        return FieldError(
            "f_Pwd",
            f'"f_Pwd" length must be at least {PASSWORD_MIN_LENGTH} characters long',
            "string.min",
        )
    return None


LOGIN_FIELDS: tuple[tuple[str, Validator], ...] = (
    ("f_userName", validate_username),
    ("f_Pwd", validate_password),
)


def validate_record(payload: Mapping[str, Any], fields: tuple[tuple[str, Validator], ...]) -> ValidationResult:
    """Run every field validator in order, then reject keys no validator owns."""

    result = ValidationResult()
    for key, validator in fields:
        error = validator(payload.get(key, MISSING))
        if error is not None:
            result.errors.append(error)

    known = {key for key, _ in fields}
    for key in payload:
        if key not in known:
            result.errors.append(FieldError(key, f'"{key}" is not allowed', "object.unknown"))
    return result


def validate_employee(payload: Mapping[str, Any]) -> ValidationResult:
    return validate_record(payload, EMPLOYEE_FIELDS)


def validate_login(payload: Mapping[str, Any]) -> ValidationResult:
    return validate_record(payload, LOGIN_FIELDS)
