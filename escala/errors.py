"""Exception types raised by escala."""

from typing import Optional


class EscalaError(Exception):
    """Base class for errors raised by this package."""


class ApiError(EscalaError):
    """The backend API failed or answered with something unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class SessionError(EscalaError):
    """Login failed or the current session lacks the required role."""


class ScheduleFormatError(EscalaError, ValueError):
    """A time or time range string is not in HH:MM / HH:MM-HH:MM form."""
