"""FastAPI exception handlers for converting QuoteError to HTTP responses.

The ErrorCode-to-HTTP status mapping:
- 400 Bad Request: Date range, guest count or add-on validation failures
- 404 Not Found: Missing pricing configuration or persisted quote
- 409 Conflict: Blocked dates, or a quote already persisted

Usage:
    from stayquote.api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from stayquote.models.errors import ErrorCode, QuoteError

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_RANGE: HTTP_400_BAD_REQUEST,
    ErrorCode.GUEST_LIMIT_EXCEEDED: HTTP_400_BAD_REQUEST,
    ErrorCode.DATES_BLOCKED: HTTP_409_CONFLICT,
    ErrorCode.UNKNOWN_SERVICE: HTTP_400_BAD_REQUEST,
    ErrorCode.PRICING_NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorCode.QUOTE_NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorCode.QUOTE_ALREADY_PERSISTED: HTTP_409_CONFLICT,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, defaulting to 400."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def quote_error_handler(request: Request, exc: QuoteError) -> JSONResponse:
    """Convert a QuoteError into a JSON error response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The QuoteError exception

    Returns:
        JSONResponse with error details and the mapped status code.
    """
    return JSONResponse(
        status_code=get_http_status_for_error(exc.code),
        content=exc.to_response().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(QuoteError, quote_error_handler)  # type: ignore[arg-type]
