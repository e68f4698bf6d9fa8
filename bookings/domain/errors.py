"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    CANNOT_BOOK = "CANNOT_BOOK"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class BadRequestError(DomainError):
    """Raised when the caller sent malformed input."""

    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(code=ErrorCode.BAD_REQUEST, message=message)


class NotFoundError(DomainError):
    """Raised when a referenced room or booking does not exist."""

    def __init__(self, message: str = "No result for this search") -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class CannotBookError(DomainError):
    """Raised when a well-formed booking request breaks a booking rule."""

    def __init__(self, message: str = "Cannot book this room") -> None:
        super().__init__(code=ErrorCode.CANNOT_BOOK, message=message)
