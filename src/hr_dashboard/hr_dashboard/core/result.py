from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .enums import ErrorKind
from .exceptions import NotFoundError, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged outcome returned by every CRUD operation.

    Either ``ok`` with a ``value``, or not ok with an ``error_kind`` and a
    human readable ``message``.
    """

    ok: bool
    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error_kind: ErrorKind, message: str) -> "Result[T]":
        return cls(ok=False, error_kind=error_kind, message=message)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls.failure(ErrorKind.NOT_FOUND, message)

    @classmethod
    def invalid(cls, message: str) -> "Result[T]":
        return cls.failure(ErrorKind.VALIDATION, message)

    def unwrap(self) -> T:
        """Return the value or raise the exception matching ``error_kind``."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        if self.error_kind == ErrorKind.NOT_FOUND:
            raise NotFoundError(self.message)
        raise ValidationError(self.message)
