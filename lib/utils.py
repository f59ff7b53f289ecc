# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone
from typing import Any


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Treat naive datetimes as UTC.

    SQLite hands timestamps back without tzinfo even when they were stored
    aware, so comparisons go through this first.

    Example:
        as_utc(datetime(2024, 1, 15, 10, 30))  # 2024-01-15 10:30:00+00:00
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =============================================================================
# Library Errors
# =============================================================================

class ApplicationError(Exception):
    """
    Base for errors raised below the HTTP layer (lib/, agents/).

    These never reach the client directly: agents catch them and fall back
    to canned content, so they only need to read well in logs.

    Attributes:
        code: Short machine-readable code, e.g. "LLM_API_ERROR"
        suggestion: What an operator should check
        details: Extra context such as the model or base URL
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        if self.suggestion:
            return f"[{self.code}] {self.message} ({self.suggestion})"
        return f"[{self.code}] {self.message}"
