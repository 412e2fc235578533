"""Quote calculator: turns a stay request into an itemized price breakdown.

Calculation flow:
1. Nights = check-out - check-in (tours are a single day, one "night")
2. Nightly rate = base price x season multiplier, replaced entirely by a
   special price when one covers the night
3. Base total = sum of nightly rates
4. Subtotal = base total x (1 - group discount) x (1 - stay discount),
   rounded once to whole currency units
5. Service fee is a percentage of the subtotal; IVA is too, rounded to
   whole units; cleaning fee is flat; tourism tax and extra-guest fee are
   charged per night
6. Grand total = subtotal + fees + taxes + selected add-ons

The function is pure: identical inputs always produce an identical
breakdown, and nothing is read or written outside the arguments.
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal

from stayquote.models import (
    BookingKind,
    GuestLimitError,
    InvalidRangeError,
    NightlyRate,
    PriceBreakdown,
    PricingConfig,
    ServiceLine,
    StayRequest,
    UnknownServiceError,
)

from .classifier import classify_group, classify_season, classify_stay
from .overrides import OverrideResolver

WHOLE_UNIT = Decimal("1")
ZERO = Decimal("0")


def to_units(amount: Decimal) -> Decimal:
    """Round half-up to whole currency units."""
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


def format_percent(fraction: Decimal) -> str:
    """Whole-percent display string, e.g. Decimal("0.1") -> "10%"."""
    return f"{to_units(fraction * 100)}%"


def count_nights(config: PricingConfig, request: StayRequest) -> int:
    """Validate the requested dates and return the number of nights.

    Raises:
        InvalidRangeError: Missing or non-positive range, or below minimum stay
    """
    if config.kind is BookingKind.TOUR:
        return 1

    if request.check_out is None:
        raise InvalidRangeError("A check-out date is required for lodging bookings")

    nights = (request.check_out - request.check_in).days
    if nights < 1:
        raise InvalidRangeError("Check-out must be after check-in")
    if nights < config.min_nights:
        raise InvalidRangeError(
            f"Minimum stay is {config.min_nights} nights. You selected {nights} nights.",
            {"minimum_nights": config.min_nights, "requested_nights": nights},
        )
    return nights


def nightly_rate_sequence(
    config: PricingConfig,
    check_in: dt.date,
    nights: int,
    overrides: OverrideResolver,
) -> list[NightlyRate]:
    """Price each night of a lodging stay in calendar order.

    A special price replaces the seasonal rate for its night; it never
    composes with the season multiplier.
    """
    rates = []
    for offset in range(nights):
        night = check_in + dt.timedelta(days=offset)
        season = classify_season(night)
        special = overrides.resolve_nightly_override(night)
        if special is not None:
            rates.append(NightlyRate(night=night, season=season, rate=special, overridden=True))
        else:
            rate = config.base_price_per_night * config.multiplier_for(season)
            rates.append(NightlyRate(night=night, season=season, rate=rate))
    return rates


def select_services(
    config: PricingConfig,
    selected_keys: frozenset[str],
) -> list[ServiceLine]:
    """Selected add-ons, ordered by service key.

    Raises:
        UnknownServiceError: If a key is not on the property's menu
    """
    unknown = [key for key in selected_keys if key not in config.additional_services]
    if unknown:
        raise UnknownServiceError(unknown)

    lines = []
    for key in sorted(selected_keys):
        service = config.additional_services[key]
        lines.append(ServiceLine(name=service.label, price=service.price))
    return lines


def compute_quote(
    config: PricingConfig,
    request: StayRequest,
    overrides: OverrideResolver | None = None,
) -> PriceBreakdown:
    """Compute the itemized price breakdown for a stay.

    Args:
        config: Pricing configuration of the property or tour
        request: Dates, guest count and selected add-ons
        overrides: Blocked dates and special prices for the property

    Returns:
        Fully populated PriceBreakdown

    Raises:
        InvalidRangeError: Dates invalid or below the minimum stay
        GuestLimitError: More guests than the property allows
        BlockedDatesError: Stay overlaps a blocked range
        UnknownServiceError: Add-on key not on the service menu
    """
    if overrides is None:
        overrides = OverrideResolver.empty(config.property_id)

    nights = count_nights(config, request)

    if config.max_guests is not None and request.guests > config.max_guests:
        raise GuestLimitError(
            f"This property allows at most {config.max_guests} guests. "
            f"You requested {request.guests}.",
            {"max_guests": config.max_guests, "requested_guests": request.guests},
        )

    # Occupied dates run from check-in through the last night
    last_night = request.check_in + dt.timedelta(days=nights - 1)
    overrides.ensure_bookable(request.check_in, last_night)

    services = select_services(config, request.selected_service_keys)

    if config.kind is BookingKind.TOUR:
        nightly_rates: list[NightlyRate] = []
        base_total = config.base_price_per_night
    else:
        nightly_rates = nightly_rate_sequence(config, request.check_in, nights, overrides)
        base_total = sum((r.rate for r in nightly_rates), ZERO)

    season = classify_season(request.check_in)
    season_discount = 1 - config.multiplier_for(season)
    group_discount = config.group_discount_for(classify_group(request.guests))
    stay_discount = config.stay_discount_for(classify_stay(nights))

    subtotal = to_units(base_total * (1 - group_discount) * (1 - stay_discount))

    extra_guests = max(0, request.guests - config.base_guests_included)
    extra_guest_fee = extra_guests * config.extra_guest_fee_per_night * nights
    service_fee = subtotal * config.service_fee_percentage
    cleaning_fee = config.cleaning_fee
    tourism_tax = config.tourism_tax_per_night * nights
    iva_amount = to_units(subtotal * config.iva_percentage) if config.apply_iva else ZERO
    services_total = sum((s.price for s in services), ZERO)

    grand_total = (
        subtotal
        + cleaning_fee
        + service_fee
        + tourism_tax
        + iva_amount
        + extra_guest_fee
        + services_total
    )

    return PriceBreakdown(
        nights=nights,
        base_nightly_rate=config.base_price_per_night,
        adjusted_nightly_rate=to_units(base_total / nights),
        base_total=base_total,
        nightly_rates=tuple(nightly_rates),
        season_label=season,
        season_discount_fraction=season_discount,
        group_discount_fraction=group_discount,
        stay_discount_fraction=stay_discount,
        season_discount_percent=format_percent(season_discount),
        group_discount_percent=format_percent(group_discount),
        stay_discount_percent=format_percent(stay_discount),
        subtotal=subtotal,
        cleaning_fee=cleaning_fee,
        service_fee=service_fee,
        tourism_tax=tourism_tax,
        iva_amount=iva_amount,
        extra_guest_fee=extra_guest_fee,
        services_breakdown=tuple(services),
        services_total=services_total,
        grand_total=grand_total,
    )
