"""
Error types raised by the SpaceTraders access layer.
ApiError is constructed at the HTTP boundary; the others fail fast before any request is sent.
"""

from enum import Enum


class ErrorKind(Enum):
    THROTTLED = "THROTTLED"
    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    UNAUTHORIZED = "UNAUTHORIZED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_status(cls, status: int | None) -> "ErrorKind":
        if status in (408, 429):
            return cls.THROTTLED
        if status == 404:
            return cls.NOT_FOUND
        if status in (400, 409, 422):
            return cls.INVALID
        if status in (401, 403):
            return cls.UNAUTHORIZED
        return cls.UNKNOWN


class SpaceTradersError(Exception):
    """Base exception for the access layer."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.UNKNOWN, status: int | None = None):
        self.message = message
        self.kind = kind
        self.status = status
        super().__init__(message)


class ApiError(SpaceTradersError):
    """Remote HTTP failure. `message` is the raw response body text."""

    def __init__(self, status: int, message: str):
        super().__init__(message, ErrorKind.from_status(status), status)

    def __str__(self) -> str:
        return f"{self.status}: {self.message}"


class InvalidArgumentError(SpaceTradersError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID)


class ConfigurationError(SpaceTradersError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID)
