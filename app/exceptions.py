# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings

logger = logging.getLogger(__name__)


class AmeoException(Exception):
    """
    Error that maps straight onto an HTTP response.

    Services raise subclasses; ameo_exception_handler turns them into
    {"detail", "code", "suggestion"?, "details"?} with status_code.
    """

    def __init__(
        self,
        message: str,
        code: str = "AMEO_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.suggestion:
            body["suggestion"] = self.suggestion
        if self.details:
            body["details"] = self.details
        return body


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidRequestError(AmeoException):
    """Raised when a request body is structurally valid JSON but unusable."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
            status_code=400,
            suggestion=suggestion,
        )


class MissingFieldsError(AmeoException):
    """Raised when required message fields are missing or blank."""

    def __init__(self, fields: list[str]):
        super().__init__(
            message="Missing required fields",
            code="MISSING_FIELDS",
            status_code=400,
            suggestion=f"Provide non-empty values for: {', '.join(fields)}",
            details={"fields": fields},
        )


# =============================================================================
# Messaging Exceptions
# =============================================================================

class CatNameRequiredError(AmeoException):
    """Raised when registering without a usable cat name."""

    def __init__(self):
        super().__init__(
            message="Cat name is required",
            code="CAT_NAME_REQUIRED",
            status_code=400,
            suggestion="Send a non-blank cat_name in the request body",
        )


class UserNotFoundError(AmeoException):
    """Raised when a cat name has not been registered."""

    def __init__(self, cat_name: str):
        super().__init__(
            message="User not found",
            code="USER_NOT_FOUND",
            status_code=404,
            suggestion="Register the cat name first using POST /api/messages/register",
            details={"cat_name": cat_name},
        )


class SelfConversationError(AmeoException):
    """Raised when a user tries to message themselves."""

    def __init__(self, cat_name: str):
        super().__init__(
            message="Cannot start a conversation with yourself",
            code="SELF_CONVERSATION",
            status_code=400,
            suggestion="Choose a different recipient_cat_name",
            details={"cat_name": cat_name},
        )


class MessagingUnavailableError(AmeoException):
    """Raised when messaging routes are hit without a configured database."""

    def __init__(self):
        super().__init__(
            message="Messaging is not available",
            code="MESSAGING_UNAVAILABLE",
            status_code=503,
            suggestion="Set DATABASE_URL and restart the server to enable messaging",
        )


# =============================================================================
# Asset Exceptions
# =============================================================================

class AssetNotFoundError(AmeoException):
    """Raised when a requested asset file doesn't exist."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Asset not found: {name}",
            code="ASSET_NOT_FOUND",
            status_code=404,
            suggestion="GET / lists the available asset files",
            details={"name": name},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def ameo_exception_handler(
    request: Request,
    exc: AmeoException
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Answer a malformed body or path with 422.

    Each error is reduced to where it happened and what was wrong, e.g.
    {"loc": "body.count", "msg": "Input should be less than or equal to 10"}.
    """
    errors = [
        {"loc": ".".join(str(part) for part in error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={"detail": "Validation error", "code": "VALIDATION_ERROR", "errors": errors},
    )


# Routes listed in the 404 body so plugin developers can find their way.
AVAILABLE_ROUTES = [
    "GET /health",
    "GET /",
    "POST /api/feedback",
    "POST /api/speech",
    "GET /api/speech/daily",
    "POST /api/messages/register",
    "GET /api/messages/list/:cat_name",
]


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unknown routes with the list of entry points."""
    detail = getattr(exc, "detail", None)
    if isinstance(detail, str) and detail not in ("Not Found", "Not found"):
        # A route raised HTTPException(404) with its own message
        return JSONResponse(status_code=404, content={"detail": detail, "code": "NOT_FOUND"})

    return JSONResponse(
        status_code=404,
        content={
            "detail": "Not found",
            "code": "NOT_FOUND",
            "path": request.url.path,
            "available": AVAILABLE_ROUTES,
        }
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    content = {
        "detail": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }
    if settings.DEBUG:
        content["message"] = str(exc)
    return JSONResponse(status_code=500, content=content)
