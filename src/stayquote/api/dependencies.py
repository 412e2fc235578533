"""FastAPI dependency injection providers for the quote stores.

Service Dependency Graph:
    DynamoDBService (singleton via get_dynamodb_service)
        ├── CatalogStore
        └── ReservationQuoteStore

Testing:
    Override these providers with app.dependency_overrides, or call
    reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from stayquote.services.catalog import CatalogStore, ReservationQuoteStore
from stayquote.services.dynamodb import get_dynamodb_service


@lru_cache
def get_catalog_store() -> CatalogStore:
    """Get cached CatalogStore instance."""
    return CatalogStore(db=get_dynamodb_service())


@lru_cache
def get_reservation_quote_store() -> ReservationQuoteStore:
    """Get cached ReservationQuoteStore instance."""
    return ReservationQuoteStore(db=get_dynamodb_service())


def reset_services() -> None:
    """Clear cached store instances (for testing only)."""
    get_catalog_store.cache_clear()
    get_reservation_quote_store.cache_clear()
