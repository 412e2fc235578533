"""API request/response models for quote endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from stayquote.models import PriceBreakdown, PricingConfig, ReservationQuote, SummaryLine


class QuotePreviewRequest(BaseModel):
    """Current state of the booking form.

    Dates may be missing while the customer is still choosing them.
    """

    model_config = ConfigDict(
        # Note: strict=False allows string-to-date coercion from JSON
        strict=False,
        json_schema_extra={
            "examples": [
                {
                    "property_id": "jardin-aguilas",
                    "check_in": "2026-10-05",
                    "check_out": "2026-10-12",
                    "guests": 2,
                    "selected_services": ["desayuno"],
                }
            ]
        },
    )

    property_id: str = Field(..., description="Property or tour being booked")
    check_in: dt.date | None = Field(default=None, description="Check-in date (YYYY-MM-DD)")
    check_out: dt.date | None = Field(default=None, description="Check-out date (YYYY-MM-DD)")
    guests: int = Field(default=1, ge=1, description="Number of guests")
    selected_services: list[str] = Field(
        default_factory=list,
        description="Keys of selected add-on services",
    )


class QuotePreviewResponse(BaseModel):
    """Live quote, or null while the input is incomplete."""

    quote: PriceBreakdown | None = None


class AdminExampleRequest(BaseModel):
    """Unsaved draft pricing config to preview."""

    model_config = ConfigDict(strict=False)

    config: PricingConfig
    check_in: dt.date | None = Field(
        default=None,
        description="Example check-in date; defaults to today",
    )


class ReservationQuoteRequest(BaseModel):
    """Stay being reserved, priced once at booking time."""

    model_config = ConfigDict(
        strict=False,
        json_schema_extra={
            "examples": [
                {
                    "property_id": "jardin-aguilas",
                    "check_in": "2026-10-05",
                    "check_out": "2026-10-12",
                    "guests": 2,
                    "selected_services": [],
                }
            ]
        },
    )

    property_id: str
    check_in: dt.date
    check_out: dt.date | None = None
    guests: int = Field(default=1, ge=1)
    selected_services: list[str] = Field(default_factory=list)


class ReservationQuoteResponse(BaseModel):
    """Persisted reservation quote with its rendered summary."""

    snapshot: ReservationQuote
    summary: list[SummaryLine]
