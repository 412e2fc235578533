"""Pricing models: property pricing configuration, stay requests and breakdowns.

All amounts are whole currency units held as Decimal (the catalog prices in
COP, which has no sub-units in practice). Fractions are Decimals as well,
e.g. Decimal("0.10") for a 10% discount.
"""

import datetime as dt
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from .enums import BookingKind, GroupBracket, SeasonBucket, StayBracket

DiscountFraction = Annotated[Decimal, Field(ge=0, lt=1)]
Multiplier = Annotated[Decimal, Field(gt=0)]


class AdditionalService(BaseModel):
    """Optional flat-price add-on from a property's service menu."""

    label: str
    price: Decimal = Field(ge=0)


class PricingConfig(BaseModel):
    """Pricing configuration for one bookable property or tour.

    Owned by the catalog. The calculator only reads it; admins edit a
    draft copy and preview it before saving.
    """

    model_config = ConfigDict(
        # Note: strict=False allows string keys ("low", "3-4") and numeric
        # strings coming from JSON and DynamoDB to coerce
        strict=False,
        json_schema_extra={
            "examples": [
                {
                    "property_id": "jardin-aguilas",
                    "kind": "lodging",
                    "base_price_per_night": "180000",
                    "seasonal_multipliers": {"low": "0.9", "medium": "1.0", "high": "1.2", "peak": "1.4"},
                    "group_discounts": {"1": "0", "2": "0", "3-4": "0.05"},
                    "stay_discounts": {"1": "0", "2": "0", "3-5": "0.05", "6-7": "0.10"},
                    "cleaning_fee": "50000",
                    "service_fee_percentage": "0.05",
                    "tourism_tax_per_night": "5000",
                    "iva_percentage": "0.19",
                    "apply_iva": True,
                    "min_nights": 1,
                    "max_guests": 6,
                }
            ]
        },
    )

    property_id: str
    kind: BookingKind = BookingKind.LODGING
    base_price_per_night: Decimal = Field(gt=0)
    seasonal_multipliers: dict[SeasonBucket, Multiplier] = Field(default_factory=dict)
    group_discounts: dict[GroupBracket, DiscountFraction] = Field(default_factory=dict)
    stay_discounts: dict[StayBracket, DiscountFraction] = Field(default_factory=dict)
    cleaning_fee: Decimal = Field(default=Decimal("0"), ge=0)
    service_fee_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=1)
    tourism_tax_per_night: Decimal = Field(default=Decimal("0"), ge=0)
    iva_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=1)
    apply_iva: bool = False
    extra_guest_fee_per_night: Decimal = Field(default=Decimal("0"), ge=0)
    base_guests_included: int = Field(default=1, ge=1)
    min_nights: int = Field(default=1, ge=1)
    max_guests: int | None = Field(default=None, ge=1)
    additional_services: dict[str, AdditionalService] = Field(default_factory=dict)

    def multiplier_for(self, season: SeasonBucket) -> Decimal:
        """Seasonal multiplier, neutral when the season is not configured."""
        return self.seasonal_multipliers.get(season, Decimal("1"))

    def group_discount_for(self, bracket: GroupBracket) -> Decimal:
        """Group discount fraction, zero when the bracket is not configured."""
        return self.group_discounts.get(bracket, Decimal("0"))

    def stay_discount_for(self, bracket: StayBracket) -> Decimal:
        """Stay discount fraction, zero when the bracket is not configured."""
        return self.stay_discounts.get(bracket, Decimal("0"))


class StayRequest(BaseModel):
    """A customer's request for a quote. Built per call, never stored."""

    model_config = ConfigDict(strict=False)

    check_in: dt.date
    check_out: dt.date | None = None
    guests: int = Field(default=1, ge=1)
    selected_service_keys: frozenset[str] = Field(default_factory=frozenset)


class ServiceLine(BaseModel):
    """One selected add-on as it appears on the breakdown."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal


class NightlyRate(BaseModel):
    """Rate charged for a single night of a lodging stay."""

    model_config = ConfigDict(frozen=True)

    night: dt.date
    season: SeasonBucket
    rate: Decimal
    overridden: bool = False


class PriceBreakdown(BaseModel):
    """Itemized result of a quote.

    Persisted verbatim with the reservation at booking time; summaries and
    invoices render this object and never recompute it.
    """

    model_config = ConfigDict(frozen=True)

    nights: int
    base_nightly_rate: Decimal
    adjusted_nightly_rate: Decimal
    base_total: Decimal
    nightly_rates: tuple[NightlyRate, ...] = ()
    season_label: SeasonBucket
    season_discount_fraction: Decimal
    group_discount_fraction: Decimal
    stay_discount_fraction: Decimal
    season_discount_percent: str
    group_discount_percent: str
    stay_discount_percent: str
    subtotal: Decimal
    cleaning_fee: Decimal
    service_fee: Decimal
    tourism_tax: Decimal
    iva_amount: Decimal
    extra_guest_fee: Decimal
    services_breakdown: tuple[ServiceLine, ...] = ()
    services_total: Decimal = Decimal("0")
    grand_total: Decimal
