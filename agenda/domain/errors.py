"""Domain error codes for the agenda module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_RECORD = "INVALID_RECORD"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class DuplicateEmailError(DomainError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EMAIL,
            message="Email already registered",
        )
        self.email = email


class UserNotFoundError(DomainError):
    """Raised when no user matches the given email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found, register first",
        )
        self.email = email


class EventNotFoundError(DomainError):
    """Raised when a selected event index does not exist."""

    def __init__(self, index: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Invalid event",
        )
        self.index = index


class RecordFormatError(DomainError):
    """Raised when a persisted record cannot be decoded."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_RECORD,
            message=reason,
        )
        self.line = line


class StorageError(DomainError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_FAILURE,
            message=reason,
        )
        self.path = path
