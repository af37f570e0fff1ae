"""Explicit success/failure values returned by the Service Layer.

Domain failures (not found, validation, uniqueness, ...) travel back to the
API layer as data instead of exceptions.  The views translate an
``ErrorKind`` into an HTTP status in a single place
(``modules.core.errors.error_response``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Failure taxonomy shared by every service."""

    NOT_FOUND = "not_found"
    FIELD_VALIDATION = "field_validation"
    UNIQUE_EMAIL = "unique_email"
    INVALID_AREA_CODE = "invalid_area_code"
    CONFLICT = "conflict"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ServiceError:
    """A typed failure.

    ``fields`` maps a field name to a human-readable message and is empty
    for failures that are not tied to a specific field.
    """

    kind: ErrorKind
    message: str
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a ``value`` or an ``error``, never both."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        fields: dict[str, str] | None = None,
    ) -> Result[T]:
        return cls(error=ServiceError(kind=kind, message=message, fields=fields or {}))
