"""DynamoDB-backed stores the quote engine reads from and writes to.

- CatalogStore: pricing configurations and calendar overrides (read by quotes,
  written by the admin tools)
- ReservationQuoteStore: breakdown snapshots persisted at booking time

Items are written in pydantic JSON mode, so amounts are stored as their exact
decimal strings and dates as ISO strings; models coerce them back on read.
"""

import datetime as dt
import uuid
from typing import TYPE_CHECKING, Any

from stayquote.models import (
    BlockedRange,
    PricingConfig,
    PricingConfigNotFoundError,
    QuoteAlreadyPersistedError,
    ReservationQuote,
    ReservationQuoteNotFoundError,
    SpecialPriceRange,
)
from stayquote.utils.logging import get_logger

from .overrides import OverrideResolver

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService

logger = get_logger(__name__)

BLOCKED_PREFIX = "blocked#"
SPECIAL_PREFIX = "special#"


class CatalogStore:
    """Pricing configurations and calendar overrides per property."""

    CONFIG_TABLE = "pricing-configs"
    OVERRIDES_TABLE = "calendar-overrides"

    def __init__(self, db: "DynamoDBService") -> None:
        """Initialize catalog store.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def get_pricing_config(self, property_id: str) -> PricingConfig:
        """Load the pricing configuration for a property.

        Raises:
            PricingConfigNotFoundError: If the property has no configuration
        """
        item = self.db.get(self.CONFIG_TABLE, property_id=property_id)
        if not item:
            raise PricingConfigNotFoundError(details={"property_id": property_id})
        return PricingConfig.model_validate(item)

    def put_pricing_config(self, config: PricingConfig) -> bool:
        """Create or replace a property's pricing configuration."""
        saved = self.db.put(self.CONFIG_TABLE, config.model_dump(mode="json"))
        logger.info(f"Saved pricing configuration for {config.property_id}")
        return saved

    def add_blocked_range(self, property_id: str, blocked: BlockedRange) -> bool:
        """Store a blocked range for a property."""
        return self._put_override(property_id, BLOCKED_PREFIX, blocked.model_dump(mode="json"))

    def add_special_price(
        self,
        property_id: str,
        special: SpecialPriceRange,
    ) -> SpecialPriceRange:
        """Store a special price range, stamping its creation time if missing.

        Returns:
            The range as stored, including created_at
        """
        if special.created_at is None:
            special = special.model_copy(update={"created_at": dt.datetime.now(dt.UTC)})
        self._put_override(property_id, SPECIAL_PREFIX, special.model_dump(mode="json"))
        return special

    def get_overrides(
        self,
        property_id: str,
    ) -> tuple[list[BlockedRange], list[SpecialPriceRange]]:
        """Load all overrides for a property.

        Returns:
            Tuple of (blocked ranges, special price ranges in creation order)
        """
        partition = ("property_id", property_id)
        blocked = [
            BlockedRange.model_validate(item)
            for item in self.db.query_prefix(
                self.OVERRIDES_TABLE, partition, ("override_key", BLOCKED_PREFIX)
            )
        ]
        special = [
            SpecialPriceRange.model_validate(item)
            for item in self.db.query_prefix(
                self.OVERRIDES_TABLE, partition, ("override_key", SPECIAL_PREFIX)
            )
        ]
        return blocked, special

    def get_resolver(self, property_id: str) -> OverrideResolver:
        """Build an override resolver from the property's stored overrides."""
        blocked, special = self.get_overrides(property_id)
        return OverrideResolver(property_id, blocked, special)

    def _put_override(self, property_id: str, prefix: str, data: dict[str, Any]) -> bool:
        """Write an override item; sort keys order items by creation time."""
        stamp = data.get("created_at") or dt.datetime.now(dt.UTC).isoformat()
        item = {
            **data,
            "property_id": property_id,
            "override_key": f"{prefix}{stamp}#{uuid.uuid4().hex[:8]}",
        }
        return self.db.put(self.OVERRIDES_TABLE, item)


class ReservationQuoteStore:
    """Write-once storage of the breakdown each reservation was priced with."""

    TABLE = "reservation-quotes"

    def __init__(self, db: "DynamoDBService") -> None:
        """Initialize reservation quote store.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def save(self, snapshot: ReservationQuote) -> None:
        """Persist a snapshot; an existing snapshot is never overwritten.

        Raises:
            QuoteAlreadyPersistedError: If the reservation already has one
        """
        created = self.db.put(
            self.TABLE,
            snapshot.model_dump(mode="json"),
            unless_exists="reservation_id",
        )
        if not created:
            raise QuoteAlreadyPersistedError(
                details={"reservation_id": snapshot.reservation_id}
            )

    def get(self, reservation_id: str) -> ReservationQuote:
        """Load the persisted snapshot for a reservation.

        Raises:
            ReservationQuoteNotFoundError: If nothing was persisted
        """
        item = self.db.get(self.TABLE, reservation_id=reservation_id)
        if not item:
            raise ReservationQuoteNotFoundError(details={"reservation_id": reservation_id})
        return ReservationQuote.model_validate(item)
