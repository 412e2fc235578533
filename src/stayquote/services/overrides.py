"""Override resolution for admin-entered blocked dates and special prices.

The resolver wraps the override records of a single property, already
fetched from the calendar override store. It performs no I/O and holds no
mutable state, so one instance can serve concurrent quotes.

Special price precedence (when several active ranges cover the same night):
1. The most recently created range wins (highest ``created_at``).
2. Ranges without ``created_at``, or with equal timestamps, fall back to
   the shortest range (fewest nights).
3. Remaining ties go to the range supplied last, i.e. last inserted.
"""

import datetime as dt
from collections.abc import Iterable, Sequence
from decimal import Decimal

from stayquote.models import BlockedDatesError, BlockedRange, SpecialPriceRange


def _precedence_key(position: int, special: SpecialPriceRange) -> tuple:
    """Sort key where the greatest value is the winning range."""
    has_timestamp = special.created_at is not None
    return (
        has_timestamp,
        special.created_at if has_timestamp else 0,
        -special.span_days,
        position,
    )


def select_special_price(
    candidates: Sequence[SpecialPriceRange],
) -> SpecialPriceRange | None:
    """Pick the single special price range that applies to a night.

    Args:
        candidates: Active ranges covering the night, in insertion order

    Returns:
        The winning range, or None when there are no candidates
    """
    if not candidates:
        return None
    _, winner = max(
        enumerate(candidates),
        key=lambda pair: _precedence_key(pair[0], pair[1]),
    )
    return winner


class OverrideResolver:
    """Answers blocked-date and special-price questions for one property."""

    def __init__(
        self,
        property_id: str,
        blocked: Iterable[BlockedRange] = (),
        special_prices: Iterable[SpecialPriceRange] = (),
    ) -> None:
        """Initialize resolver.

        Args:
            property_id: Property the override records belong to
            blocked: Blocked ranges for the property
            special_prices: Special price ranges, in insertion order
        """
        self.property_id = property_id
        self.blocked = tuple(blocked)
        self.special_prices = tuple(special_prices)

    @classmethod
    def empty(cls, property_id: str = "") -> "OverrideResolver":
        """Resolver with no overrides at all."""
        return cls(property_id)

    def blocking_ranges(self, start: dt.date, end: dt.date) -> list[BlockedRange]:
        """Blocked ranges overlapping the inclusive range [start, end]."""
        return [b for b in self.blocked if b.overlaps(start, end)]

    def is_blocked(self, start: dt.date, end: dt.date) -> bool:
        """Whether [start, end] overlaps any blocked range (inclusive)."""
        return bool(self.blocking_ranges(start, end))

    def ensure_bookable(self, start: dt.date, end: dt.date) -> None:
        """Raise BlockedDatesError naming every conflicting blocked range.

        Args:
            start: First occupied date
            end: Last occupied date (inclusive)

        Raises:
            BlockedDatesError: If any blocked range overlaps [start, end]
        """
        conflicts = self.blocking_ranges(start, end)
        if conflicts:
            raise BlockedDatesError(conflicts)

    def resolve_nightly_override(self, night: dt.date) -> Decimal | None:
        """Special price replacing the computed rate for a night, if any.

        Args:
            night: Calendar night to price

        Returns:
            The overriding nightly rate, or None when no active range covers it
        """
        candidates = [s for s in self.special_prices if s.active and s.covers(night)]
        winner = select_special_price(candidates)
        return winner.price_per_night if winner else None
