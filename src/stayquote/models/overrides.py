"""Calendar override models entered by admins in the property calendar.

Both ranges are inclusive on both ends: a range from the 10th to the 12th
covers the nights of the 10th, 11th and 12th.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_REASON = "Unspecified"


class BlockedRange(BaseModel):
    """Dates on which the property cannot be booked."""

    model_config = ConfigDict(frozen=True)

    start: dt.date
    end: dt.date
    reason: str = DEFAULT_REASON

    @model_validator(mode="after")
    def validate_order(self) -> "BlockedRange":
        """End date may not precede start date."""
        if self.end < self.start:
            raise ValueError("end must be on or after start")
        return self

    def overlaps(self, start: dt.date, end: dt.date) -> bool:
        """Inclusive overlap test against [start, end]."""
        return start <= self.end and end >= self.start


class SpecialPriceRange(BaseModel):
    """A manual nightly price that replaces the seasonal rate."""

    model_config = ConfigDict(frozen=True)

    start: dt.date
    end: dt.date
    price_per_night: Decimal = Field(gt=0)
    reason: str = DEFAULT_REASON
    active: bool = True
    created_at: dt.datetime | None = None

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, v: dt.datetime | None) -> dt.datetime | None:
        """Store timestamps as aware UTC; naive values are taken to be UTC."""
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=dt.UTC)
        return v.astimezone(dt.UTC)

    @model_validator(mode="after")
    def validate_order(self) -> "SpecialPriceRange":
        """End date may not precede start date."""
        if self.end < self.start:
            raise ValueError("end must be on or after start")
        return self

    def covers(self, night: dt.date) -> bool:
        """Whether the range includes the given night."""
        return self.start <= night <= self.end

    @property
    def span_days(self) -> int:
        """Number of nights the range covers."""
        return (self.end - self.start).days + 1
