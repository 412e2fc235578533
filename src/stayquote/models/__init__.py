"""Pydantic models for stayquote data entities."""

from .enums import BookingKind, GroupBracket, SeasonBucket, StayBracket
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    BlockedDatesError,
    ErrorCode,
    GuestLimitError,
    InvalidRangeError,
    PricingConfigNotFoundError,
    QuoteAlreadyPersistedError,
    QuoteError,
    QuoteErrorResponse,
    ReservationQuoteNotFoundError,
    UnknownServiceError,
)
from .overrides import BlockedRange, SpecialPriceRange
from .pricing import (
    AdditionalService,
    NightlyRate,
    PriceBreakdown,
    PricingConfig,
    ServiceLine,
    StayRequest,
)
from .reservation import ReservationQuote, SummaryLine

__all__ = [
    # Enums
    "BookingKind",
    "GroupBracket",
    "SeasonBucket",
    "StayBracket",
    # Pricing
    "AdditionalService",
    "NightlyRate",
    "PriceBreakdown",
    "PricingConfig",
    "ServiceLine",
    "StayRequest",
    # Overrides
    "BlockedRange",
    "SpecialPriceRange",
    # Reservation
    "ReservationQuote",
    "SummaryLine",
    # Errors
    "BlockedDatesError",
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "GuestLimitError",
    "InvalidRangeError",
    "PricingConfigNotFoundError",
    "QuoteAlreadyPersistedError",
    "QuoteError",
    "QuoteErrorResponse",
    "ReservationQuoteNotFoundError",
    "UnknownServiceError",
]
