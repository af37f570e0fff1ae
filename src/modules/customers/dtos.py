"""Customer DTO for the Service Layer.

Framework-agnostic data transfer object using Pydantic v2.  It is both the
wire contract (``phoneNumber`` in JSON) and the domain representation the
service hands back to callers.  DTOs are immutable (``frozen=True``) and
always detached from the database.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from modules.customers.models import (
    NAME_MESSAGE,
    NAME_PATTERN,
    PHONE_NUMBER_MESSAGE,
    PHONE_NUMBER_PATTERN,
)


class CustomerDTO(BaseModel):
    """Immutable Customer representation.

    Validates:
    - ``name``: letters and spaces, 2 to 25 characters.
    - ``email``: a bare, well-formed address.  It is stored exactly as
      submitted so look-ups by the same string find it; display-name forms
      such as ``Name <addr>`` are rejected.
    - ``phone_number``: 10 to 12 digits.

    ``id`` is ``None`` until the database assigns one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | None = None
    name: str
    email: str
    phone_number: str = Field(alias="phoneNumber")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not NAME_PATTERN.match(v):
            raise PydanticCustomError("name_pattern", NAME_MESSAGE)
        return v

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        _, normalized = validate_email(v)
        if normalized.lower() != v.lower():
            raise PydanticCustomError(
                "email_format", "Please use a plain email address"
            )
        return v

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: str) -> str:
        if not PHONE_NUMBER_PATTERN.match(v):
            raise PydanticCustomError("phone_number_pattern", PHONE_NUMBER_MESSAGE)
        return v


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a Pydantic ``ValidationError`` into ``{field: message}``.

    Field names are the wire names (``phoneNumber``).  Only the first
    message per field is kept.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        key = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        errors.setdefault(key, error["msg"])
    return errors
