"""Logging helpers that tag every record with the request's correlation ID.

The ID lives in a ContextVar, so concurrent requests (threads or asyncio
tasks) never see each other's IDs. Records logged outside a request are
tagged ``no-correlation-id``.

Usage:
    from stayquote.utils.logging import get_logger, log_quote_operation

    logger = get_logger(__name__)
    log_quote_operation(logger, "live_preview", property_id="jardin-aguilas", nights=7)
"""

import logging
import uuid
from contextvars import ContextVar
from decimal import Decimal
from typing import Any

NO_CORRELATION_ID = "no-correlation-id"

_correlation_id: ContextVar[str | None] = ContextVar("stayquote_correlation_id", default=None)


def generate_correlation_id() -> str:
    """Fresh random correlation ID."""
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind a correlation ID to the current context.

    Args:
        correlation_id: ID received from the caller; a new one is generated
            when empty

    Returns:
        The ID now bound
    """
    bound = correlation_id or generate_correlation_id()
    _correlation_id.set(bound)
    return bound


def get_correlation_id() -> str | None:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(None)


def _current_id() -> str:
    return _correlation_id.get() or NO_CORRELATION_ID


class CorrelationIdFilter(logging.Filter):
    """Stamps ``record.correlation_id``; never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = _current_id()
        return True


class StructuredFormatter(logging.Formatter):
    """Prefixes the formatted record with ``[correlation_id]``.

    Records that bypassed CorrelationIdFilter (third-party loggers) are
    stamped here instead.
    """

    def format(self, record: logging.LogRecord) -> str:
        correlation_id = getattr(record, "correlation_id", None) or _current_id()
        return f"[{correlation_id}] {super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """Module logger with a single CorrelationIdFilter attached."""
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())
    return logger


def log_quote_operation(
    logger: logging.Logger,
    operation: str,
    *,
    property_id: str | None = None,
    reservation_id: str | None = None,
    nights: int | None = None,
    grand_total: Decimal | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Emit one line summarizing a quote computation.

    Rejected quotes (``error`` set) are logged at WARNING, everything else
    at INFO. The fields are also attached to the record as ``extra`` for
    handlers that ship structured logs.

    Args:
        logger: Logger to write to
        operation: Adapter that ran, e.g. "live_preview" or "snapshot_quote"
        property_id: Property or tour quoted
        reservation_id: Reservation the quote belongs to
        nights: Nights priced
        grand_total: Resulting total
        error: Rejection message
        **extra: Further fields to include
    """
    fields: dict[str, Any] = {
        "property_id": property_id,
        "reservation_id": reservation_id,
        "nights": nights,
        "grand_total": str(grand_total) if grand_total is not None else None,
        "error": error,
        **extra,
    }
    fields = {key: value for key, value in fields.items() if value is not None and value != ""}

    message = " | ".join(
        [f"Quote operation: {operation}", *(f"{key}={value}" for key, value in fields.items())]
    )
    level = logging.WARNING if error else logging.INFO
    logger.log(level, message, extra={"operation": operation, **fields})
