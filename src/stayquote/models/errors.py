"""Standard error codes for quote computation.

Every failure of the quote engine is one of these codes. Exceptions carry
the code plus a human-readable message and a recovery hint so callers
(the HTTP layer, the booking flow) can surface them consistently.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .overrides import BlockedRange


class ErrorCode(str, Enum):
    """Standard quote error codes."""

    # Request validation errors (ERR_QUOTE_001-ERR_QUOTE_004)
    INVALID_RANGE = "ERR_QUOTE_001"
    GUEST_LIMIT_EXCEEDED = "ERR_QUOTE_002"
    DATES_BLOCKED = "ERR_QUOTE_003"
    UNKNOWN_SERVICE = "ERR_QUOTE_004"

    # Store lookup errors (ERR_STORE_001-ERR_STORE_003)
    PRICING_NOT_FOUND = "ERR_STORE_001"
    QUOTE_NOT_FOUND = "ERR_STORE_002"
    QUOTE_ALREADY_PERSISTED = "ERR_STORE_003"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_RANGE: "The selected dates are not valid for this property",
    ErrorCode.GUEST_LIMIT_EXCEEDED: "Number of guests exceeds the property's maximum",
    ErrorCode.DATES_BLOCKED: "The requested dates overlap a blocked period",
    ErrorCode.UNKNOWN_SERVICE: "A selected add-on service is not offered by this property",
    ErrorCode.PRICING_NOT_FOUND: "No pricing configuration exists for this property",
    ErrorCode.QUOTE_NOT_FOUND: "No persisted quote exists for this reservation",
    ErrorCode.QUOTE_ALREADY_PERSISTED: "A quote has already been persisted for this reservation",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.INVALID_RANGE: "Choose a check-out after check-in that meets the minimum stay",
    ErrorCode.GUEST_LIMIT_EXCEEDED: "Reduce the number of guests",
    ErrorCode.DATES_BLOCKED: "Choose dates outside the blocked period",
    ErrorCode.UNKNOWN_SERVICE: "Reload the property's service menu and select again",
    ErrorCode.PRICING_NOT_FOUND: "Configure pricing for the property in the admin panel",
    ErrorCode.QUOTE_NOT_FOUND: "Verify the reservation ID",
    ErrorCode.QUOTE_ALREADY_PERSISTED: "Read the persisted quote instead of creating a new one",
}


class QuoteErrorResponse(BaseModel):
    """Standard error response format for quote failures."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, Any]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, Any]] = None,
        message: Optional[str] = None,
    ) -> "QuoteErrorResponse":
        """Create an error response from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error
            message: Optional message overriding the default for the code

        Returns:
            A QuoteErrorResponse with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=message or ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class QuoteError(Exception):
    """Base exception raised by the quote engine and its stores."""

    code: ErrorCode = ErrorCode.INVALID_RANGE

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message or ERROR_MESSAGES[self.code]
        self.recovery = ERROR_RECOVERY[self.code]
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> QuoteErrorResponse:
        """Convert this exception to a QuoteErrorResponse."""
        return QuoteErrorResponse.from_code(self.code, self.details, self.message)


class InvalidRangeError(QuoteError):
    """Check-out not after check-in, or stay shorter than the minimum."""

    code = ErrorCode.INVALID_RANGE


class GuestLimitError(QuoteError):
    """Requested guests exceed the property's maximum."""

    code = ErrorCode.GUEST_LIMIT_EXCEEDED


class BlockedDatesError(QuoteError):
    """Requested stay overlaps one or more blocked ranges."""

    code = ErrorCode.DATES_BLOCKED

    def __init__(self, conflicts: list["BlockedRange"]):
        self.conflicts = list(conflicts)
        details = {
            "conflicts": [
                {
                    "start": c.start.isoformat(),
                    "end": c.end.isoformat(),
                    "reason": c.reason,
                }
                for c in self.conflicts
            ]
        }
        spans = ", ".join(f"{c.start.isoformat()} to {c.end.isoformat()}" for c in self.conflicts)
        super().__init__(f"{ERROR_MESSAGES[self.code]}: {spans}", details)


class UnknownServiceError(QuoteError):
    """A selected add-on key is missing from the property's service menu."""

    code = ErrorCode.UNKNOWN_SERVICE

    def __init__(self, unknown_keys: list[str]):
        self.unknown_keys = sorted(unknown_keys)
        super().__init__(
            f"{ERROR_MESSAGES[self.code]}: {', '.join(self.unknown_keys)}",
            {"unknown_keys": self.unknown_keys},
        )


class PricingConfigNotFoundError(QuoteError):
    """The catalog has no pricing configuration for the property."""

    code = ErrorCode.PRICING_NOT_FOUND


class ReservationQuoteNotFoundError(QuoteError):
    """No breakdown was persisted for the reservation."""

    code = ErrorCode.QUOTE_NOT_FOUND


class QuoteAlreadyPersistedError(QuoteError):
    """The reservation already has a persisted breakdown."""

    code = ErrorCode.QUOTE_ALREADY_PERSISTED
