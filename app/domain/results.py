"""Result and error types returned by use cases and repositories.

Use cases never raise for business rule violations. They return a
:class:`Result` whose ``error`` describes what went wrong, and the API layer
maps the error kind to an HTTP status code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class ErrorKind(str, Enum):
    """Categories of failures a use case can report."""

    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    BAD_REQUEST = "bad_request"


@dataclass(frozen=True)
class ValidationFailure:
    """A single problem tied to the request field that caused it."""

    field: str
    message: str


@dataclass(frozen=True)
class DomainError:
    kind: ErrorKind
    failures: tuple[ValidationFailure, ...]

    @classmethod
    def not_found(cls, field: str, message: str) -> DomainError:
        return cls(ErrorKind.NOT_FOUND, (ValidationFailure(field, message),))

    @classmethod
    def forbidden(cls, field: str, message: str) -> DomainError:
        return cls(ErrorKind.FORBIDDEN, (ValidationFailure(field, message),))

    @classmethod
    def bad_request(cls, field: str, message: str) -> DomainError:
        return cls(ErrorKind.BAD_REQUEST, (ValidationFailure(field, message),))

    @property
    def fields(self) -> list[str]:
        return [failure.field for failure in self.failures]

    @property
    def message(self) -> str:
        return "; ".join(failure.message for failure in self.failures)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Either a success ``value`` or an ``error``, never both."""

    value: T | None = None
    error: E | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T, E]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: E) -> Result[T, E]:
        return cls(error=error)


__all__ = [
    "DomainError",
    "ErrorKind",
    "Result",
    "ValidationFailure",
]
