"""Unit tests for blocked-date checks and special price resolution.

Test categories:
- Blocked range overlap (inclusive on both ends)
- Special price coverage and the inactive flag
- Precedence when several special prices cover one night
- Model validation of override ranges
"""

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from stayquote.models import BlockedDatesError, BlockedRange, ErrorCode, SpecialPriceRange
from stayquote.services.overrides import OverrideResolver, select_special_price


def _special(
    start: dt.date,
    end: dt.date,
    price: str,
    created_at: dt.datetime | None = None,
    active: bool = True,
) -> SpecialPriceRange:
    return SpecialPriceRange(
        start=start,
        end=end,
        price_per_night=Decimal(price),
        active=active,
        created_at=created_at,
    )


# === Blocked Range Tests ===


class TestBlockedRanges:
    """Tests for is_blocked and ensure_bookable."""

    @pytest.fixture
    def resolver(self) -> OverrideResolver:
        """Property blocked Oct 10-12 for maintenance."""
        return OverrideResolver(
            "jardin-aguilas",
            blocked=[
                BlockedRange(
                    start=dt.date(2026, 10, 10),
                    end=dt.date(2026, 10, 12),
                    reason="Maintenance",
                )
            ],
        )

    def test_overlap_in_the_middle(self, resolver: OverrideResolver) -> None:
        """A range spanning the block is blocked."""
        assert resolver.is_blocked(dt.date(2026, 10, 8), dt.date(2026, 10, 14))

    def test_touching_start_is_blocked(self, resolver: OverrideResolver) -> None:
        """Ending on the block's first day overlaps (inclusive)."""
        assert resolver.is_blocked(dt.date(2026, 10, 5), dt.date(2026, 10, 10))

    def test_touching_end_is_blocked(self, resolver: OverrideResolver) -> None:
        """Starting on the block's last day overlaps (inclusive)."""
        assert resolver.is_blocked(dt.date(2026, 10, 12), dt.date(2026, 10, 15))

    def test_adjacent_ranges_are_free(self, resolver: OverrideResolver) -> None:
        """Days right before and after the block are bookable."""
        assert not resolver.is_blocked(dt.date(2026, 10, 5), dt.date(2026, 10, 9))
        assert not resolver.is_blocked(dt.date(2026, 10, 13), dt.date(2026, 10, 20))

    def test_ensure_bookable_raises_with_conflicts(self, resolver: OverrideResolver) -> None:
        """The error lists each conflicting range with its reason."""
        with pytest.raises(BlockedDatesError) as exc_info:
            resolver.ensure_bookable(dt.date(2026, 10, 11), dt.date(2026, 10, 11))

        error = exc_info.value
        assert error.code == ErrorCode.DATES_BLOCKED
        assert error.details == {
            "conflicts": [{"start": "2026-10-10", "end": "2026-10-12", "reason": "Maintenance"}]
        }
        assert "2026-10-10 to 2026-10-12" in error.message

    def test_ensure_bookable_passes_when_free(self, resolver: OverrideResolver) -> None:
        """No exception for a free range."""
        resolver.ensure_bookable(dt.date(2026, 11, 1), dt.date(2026, 11, 3))

    def test_reports_every_conflict(self) -> None:
        """All overlapping blocks are reported, not just the first."""
        resolver = OverrideResolver(
            "p",
            blocked=[
                BlockedRange(start=dt.date(2026, 3, 1), end=dt.date(2026, 3, 2)),
                BlockedRange(start=dt.date(2026, 3, 5), end=dt.date(2026, 3, 6)),
                BlockedRange(start=dt.date(2026, 4, 1), end=dt.date(2026, 4, 2)),
            ],
        )
        conflicts = resolver.blocking_ranges(dt.date(2026, 3, 1), dt.date(2026, 3, 10))
        assert len(conflicts) == 2

    def test_empty_resolver_never_blocks(self) -> None:
        """A resolver without overrides blocks nothing and prices nothing."""
        resolver = OverrideResolver.empty()
        assert not resolver.is_blocked(dt.date(2026, 1, 1), dt.date(2026, 12, 31))
        assert resolver.resolve_nightly_override(dt.date(2026, 6, 1)) is None


# === Special Price Tests ===


class TestResolveNightlyOverride:
    """Tests for resolve_nightly_override."""

    def test_covered_night_gets_special_price(self) -> None:
        """Nights inside the range (inclusive) get the special price."""
        resolver = OverrideResolver(
            "p",
            special_prices=[_special(dt.date(2026, 10, 7), dt.date(2026, 10, 8), "80000")],
        )
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 7)) == Decimal("80000")
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 8)) == Decimal("80000")
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 9)) is None

    def test_inactive_range_is_ignored(self) -> None:
        """Inactive ranges never apply."""
        resolver = OverrideResolver(
            "p",
            special_prices=[
                _special(dt.date(2026, 10, 1), dt.date(2026, 10, 31), "80000", active=False)
            ],
        )
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 15)) is None

    def test_price_used_as_entered(self) -> None:
        """The special price is returned unchanged, without rounding."""
        resolver = OverrideResolver(
            "p",
            special_prices=[_special(dt.date(2026, 10, 1), dt.date(2026, 10, 1), "99999.5")],
        )
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 1)) == Decimal("99999.5")


# === Precedence Tests ===


class TestSpecialPricePrecedence:
    """Tests for select_special_price when ranges overlap."""

    def test_no_candidates(self) -> None:
        """Nothing to select from."""
        assert select_special_price([]) is None

    def test_latest_created_wins(self) -> None:
        """The most recently created range wins regardless of list order."""
        newer = _special(
            dt.date(2026, 10, 1), dt.date(2026, 10, 31), "90000",
            created_at=dt.datetime(2026, 9, 2, tzinfo=dt.UTC),
        )
        older = _special(
            dt.date(2026, 10, 5), dt.date(2026, 10, 6), "70000",
            created_at=dt.datetime(2026, 9, 1, tzinfo=dt.UTC),
        )
        assert select_special_price([newer, older]) is newer

    def test_shortest_wins_without_timestamps(self) -> None:
        """Without creation times the narrower range wins."""
        month = _special(dt.date(2026, 10, 1), dt.date(2026, 10, 31), "90000")
        weekend = _special(dt.date(2026, 10, 10), dt.date(2026, 10, 11), "120000")
        assert select_special_price([weekend, month]) is weekend
        assert select_special_price([month, weekend]) is weekend

    def test_last_inserted_breaks_remaining_ties(self) -> None:
        """Equal spans and timestamps resolve to the last supplied range."""
        first = _special(dt.date(2026, 10, 1), dt.date(2026, 10, 2), "90000")
        second = _special(dt.date(2026, 10, 1), dt.date(2026, 10, 2), "95000")
        assert select_special_price([first, second]) is second

    def test_timestamped_beats_untimestamped(self) -> None:
        """A range with a creation time outranks legacy ranges without one."""
        legacy = _special(dt.date(2026, 10, 10), dt.date(2026, 10, 10), "50000")
        stamped = _special(
            dt.date(2026, 10, 1), dt.date(2026, 10, 31), "90000",
            created_at=dt.datetime(2026, 9, 1, tzinfo=dt.UTC),
        )
        assert select_special_price([stamped, legacy]) is stamped

    def test_naive_and_aware_timestamps_compare(self) -> None:
        """A naive creation time is read as UTC and ranks against aware ones."""
        naive = _special(
            dt.date(2026, 10, 1), dt.date(2026, 10, 31), "90000",
            created_at=dt.datetime(2026, 9, 1),
        )
        aware = _special(
            dt.date(2026, 10, 5), dt.date(2026, 10, 6), "70000",
            created_at=dt.datetime(2026, 9, 2, tzinfo=dt.UTC),
        )
        resolver = OverrideResolver("p", special_prices=[naive, aware])
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 5)) == Decimal("70000")
        assert select_special_price([aware, naive]) is aware

    def test_resolver_applies_precedence_per_night(self) -> None:
        """Each night is priced by the winning range covering it."""
        resolver = OverrideResolver(
            "p",
            special_prices=[
                _special(dt.date(2026, 10, 1), dt.date(2026, 10, 31), "90000"),
                _special(dt.date(2026, 10, 10), dt.date(2026, 10, 11), "120000"),
            ],
        )
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 9)) == Decimal("90000")
        assert resolver.resolve_nightly_override(dt.date(2026, 10, 10)) == Decimal("120000")


# === Model Validation Tests ===


class TestOverrideModels:
    """Tests for BlockedRange and SpecialPriceRange validation."""

    def test_blocked_end_before_start_rejected(self) -> None:
        """End may not precede start."""
        with pytest.raises(ValidationError):
            BlockedRange(start=dt.date(2026, 10, 12), end=dt.date(2026, 10, 10))

    def test_single_day_range_allowed(self) -> None:
        """Start equal to end covers one night."""
        special = _special(dt.date(2026, 10, 1), dt.date(2026, 10, 1), "80000")
        assert special.span_days == 1

    def test_special_price_must_be_positive(self) -> None:
        """Zero or negative nightly prices are rejected."""
        with pytest.raises(ValidationError):
            _special(dt.date(2026, 10, 1), dt.date(2026, 10, 2), "0")

    def test_created_at_normalized_to_utc(self) -> None:
        """Naive stamps gain UTC; offset stamps are converted to UTC."""
        bogota = dt.timezone(dt.timedelta(hours=-5))
        naive = _special(
            dt.date(2026, 10, 1), dt.date(2026, 10, 2), "80000",
            created_at=dt.datetime(2026, 9, 1, 12, 0),
        )
        local = _special(
            dt.date(2026, 10, 1), dt.date(2026, 10, 2), "80000",
            created_at=dt.datetime(2026, 9, 1, 7, 0, tzinfo=bogota),
        )
        assert naive.created_at == dt.datetime(2026, 9, 1, 12, 0, tzinfo=dt.UTC)
        assert local.created_at.tzinfo == dt.UTC
        assert local.created_at == naive.created_at

    def test_default_reason(self) -> None:
        """Reason defaults when the admin leaves it empty."""
        blocked = BlockedRange(start=dt.date(2026, 10, 1), end=dt.date(2026, 10, 2))
        assert blocked.reason == "Unspecified"
