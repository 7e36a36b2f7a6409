"""
Custom exception classes and JSON error handling.

Every error leaves the API as ``{"error": "<message>"}`` with the matching
HTTP status code.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict

from app.models.enums import TranscriptErrorKind


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint."""
    error: str

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


class BadRequestError(AppException):
    """Malformed or missing input."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class InternalServerError(AppException):
    """Internal server error exception."""

    def __init__(self, detail: str = "An unexpected error occurred."):
        super().__init__(status_code=500, detail=detail)


class UpstreamServiceError(Exception):
    """An external API (YouTube Data API, LLM provider) failed."""

    def __init__(self, service: str, message: str):
        self.service = service
        self.message = message
        super().__init__(f"{service}: {message}")


class TranscriptFetchError(Exception):
    """Transcript retrieval failed; ``kind`` says why."""

    def __init__(self, kind: TranscriptErrorKind, message: str, video_id: Optional[str] = None):
        self.kind = kind
        self.message = message
        self.video_id = video_id
        super().__init__(message)


def create_error_response(status_code: int, detail: str) -> JSONResponse:
    """Create the JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=detail).model_dump(),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return a JSON error body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return create_error_response(exc.status_code, exc.detail)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable request bodies as 400 instead of FastAPI's 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"Invalid request: {location} {first.get('msg', '')}".strip()
    else:
        detail = "Invalid request."
    logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
    return create_error_response(400, detail)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback and answer with a JSON 500."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return create_error_response(500, "An unexpected error occurred.")
