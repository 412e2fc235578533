"""Booking-time quote snapshot stored alongside a reservation."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from .pricing import PriceBreakdown


class ReservationQuote(BaseModel):
    """The breakdown a reservation was priced with.

    Written once when the reservation is created. Later views read this
    record instead of recomputing from the (possibly edited) pricing config.
    """

    model_config = ConfigDict(frozen=True)

    reservation_id: str
    property_id: str
    check_in: dt.date
    check_out: dt.date | None = None
    guests: int = Field(ge=1)
    selected_services: tuple[str, ...] = ()
    breakdown: PriceBreakdown
    quoted_at: dt.datetime


class SummaryLine(BaseModel):
    """One rendered line of a reservation summary."""

    model_config = ConfigDict(frozen=True)

    label: str
    amount: str
