"""Presentation adapters built on the quote calculator.

- live_preview: recomputed on every date/guest/add-on change in the booking form
- admin_example_preview: fixed 7-night, 2-guest example for an unsaved draft config
- snapshot_quote: computes once at reservation time and persists the breakdown
- render_reservation_summary: renders a persisted breakdown, never recomputing it
"""

import datetime as dt
from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

from stayquote.models import (
    BookingKind,
    PriceBreakdown,
    PricingConfig,
    QuoteError,
    ReservationQuote,
    StayRequest,
    SummaryLine,
)
from stayquote.utils.logging import get_logger, log_quote_operation

from .overrides import OverrideResolver
from .quote import compute_quote, to_units

if TYPE_CHECKING:
    from .catalog import ReservationQuoteStore

logger = get_logger(__name__)

ADMIN_EXAMPLE_NIGHTS = 7
ADMIN_EXAMPLE_GUESTS = 2


def live_preview(
    config: PricingConfig,
    check_in: dt.date | None,
    check_out: dt.date | None,
    guests: int = 1,
    selected_services: Iterable[str] = (),
    overrides: OverrideResolver | None = None,
) -> PriceBreakdown | None:
    """Quote for the booking form's current input.

    Returns None ("no quote yet") while the dates are incomplete: no
    check-in, or no check-out for a lodging property. Complete but invalid
    input still raises the calculator's errors.
    """
    if check_in is None:
        return None
    if check_out is None and config.kind is BookingKind.LODGING:
        return None

    request = StayRequest(
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        selected_service_keys=frozenset(selected_services),
    )
    try:
        breakdown = compute_quote(config, request, overrides)
    except QuoteError as e:
        log_quote_operation(logger, "live_preview", property_id=config.property_id, error=e.message)
        raise

    log_quote_operation(
        logger,
        "live_preview",
        property_id=config.property_id,
        nights=breakdown.nights,
        grand_total=breakdown.grand_total,
    )
    return breakdown


def admin_example_preview(
    draft: PricingConfig,
    check_in: dt.date | None = None,
) -> PriceBreakdown:
    """Preview an unsaved draft config against the fixed admin example.

    The example is 7 nights for 2 guests with no add-ons and no calendar
    overrides, starting today unless a check-in is given.

    Args:
        draft: The pricing config being edited (not the persisted one)
        check_in: Example check-in date, defaults to today

    Returns:
        Breakdown of the example stay under the draft config
    """
    start = check_in or dt.date.today()
    request = StayRequest(
        check_in=start,
        check_out=start + dt.timedelta(days=ADMIN_EXAMPLE_NIGHTS),
        guests=ADMIN_EXAMPLE_GUESTS,
    )
    return compute_quote(draft, request, OverrideResolver.empty(draft.property_id))


def snapshot_quote(
    reservation_id: str,
    config: PricingConfig,
    request: StayRequest,
    overrides: OverrideResolver | None,
    store: "ReservationQuoteStore",
    quoted_at: dt.datetime | None = None,
) -> ReservationQuote:
    """Compute a reservation's quote once and persist it verbatim.

    Raises:
        QuoteError: Any calculator error; nothing is persisted in that case
        QuoteAlreadyPersistedError: If the reservation already has a snapshot
    """
    try:
        breakdown = compute_quote(config, request, overrides)
    except QuoteError as e:
        log_quote_operation(
            logger,
            "snapshot_quote",
            property_id=config.property_id,
            reservation_id=reservation_id,
            error=e.message,
        )
        raise

    snapshot = ReservationQuote(
        reservation_id=reservation_id,
        property_id=config.property_id,
        check_in=request.check_in,
        check_out=request.check_out,
        guests=request.guests,
        selected_services=tuple(sorted(request.selected_service_keys)),
        breakdown=breakdown,
        quoted_at=quoted_at or dt.datetime.now(dt.UTC),
    )
    store.save(snapshot)

    log_quote_operation(
        logger,
        "snapshot_quote",
        property_id=config.property_id,
        reservation_id=reservation_id,
        nights=breakdown.nights,
        grand_total=breakdown.grand_total,
    )
    return snapshot


def format_currency(amount: Decimal) -> str:
    """Format as whole currency units with dot thousands separators ($1.350.544).

    Fractional amounts (a service fee on an odd subtotal) are rounded half-up
    for display only.
    """
    whole = to_units(amount)
    sign = "-" if whole < 0 else ""
    return f"{sign}${abs(whole):,.0f}".replace(",", ".")


def render_reservation_summary(snapshot: ReservationQuote) -> list[SummaryLine]:
    """Summary lines for a reservation, read from its persisted breakdown."""
    b = snapshot.breakdown
    night_word = "night" if b.nights == 1 else "nights"
    lines = [
        SummaryLine(
            label=f"{format_currency(b.adjusted_nightly_rate)} x {b.nights} {night_word}",
            amount=format_currency(b.base_total),
        )
    ]

    # Stay discount applies after the group discount and absorbs subtotal rounding
    group_amount = to_units(b.base_total * b.group_discount_fraction)
    stay_amount = b.base_total - b.subtotal - group_amount
    for label, fraction, percent, amount in (
        ("Group discount", b.group_discount_fraction, b.group_discount_percent, group_amount),
        ("Stay discount", b.stay_discount_fraction, b.stay_discount_percent, stay_amount),
    ):
        if fraction:
            lines.append(
                SummaryLine(label=f"{label} ({percent})", amount=format_currency(-amount))
            )

    lines.append(SummaryLine(label="Subtotal", amount=format_currency(b.subtotal)))

    for label, amount in (
        ("Cleaning fee", b.cleaning_fee),
        ("Service fee", b.service_fee),
        ("Extra guests", b.extra_guest_fee),
        ("Tourism tax", b.tourism_tax),
        ("IVA", b.iva_amount),
    ):
        if amount:
            lines.append(SummaryLine(label=label, amount=format_currency(amount)))

    for service in b.services_breakdown:
        lines.append(SummaryLine(label=service.name, amount=format_currency(service.price)))

    lines.append(SummaryLine(label="Total", amount=format_currency(b.grand_total)))
    return lines
