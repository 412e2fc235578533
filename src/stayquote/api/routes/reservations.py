"""Reservation quote endpoints.

The quote a reservation is created with is persisted once and becomes the
source of truth for its summary and invoice. Reading it back never
recomputes from the current pricing configuration.
"""

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from stayquote.api.dependencies import get_catalog_store, get_reservation_quote_store
from stayquote.api.models.quotes import ReservationQuoteRequest, ReservationQuoteResponse
from stayquote.models import StayRequest
from stayquote.services.adapters import render_reservation_summary, snapshot_quote
from stayquote.services.catalog import CatalogStore, ReservationQuoteStore

router = APIRouter(tags=["reservations"])


@router.post(
    "/reservations/{reservation_id}/quote",
    summary="Persist the booking-time quote",
    status_code=HTTP_201_CREATED,
    response_model=ReservationQuoteResponse,
    responses={
        400: {"description": "Invalid dates, guest count or add-on"},
        404: {"description": "No pricing configured for the property"},
        409: {"description": "Blocked dates, or the reservation already has a quote"},
    },
)
async def create_reservation_quote(
    reservation_id: str,
    body: ReservationQuoteRequest,
    catalog: CatalogStore = Depends(get_catalog_store),
    quotes: ReservationQuoteStore = Depends(get_reservation_quote_store),
) -> ReservationQuoteResponse:
    """Compute the reservation's quote and store it verbatim."""
    config = catalog.get_pricing_config(body.property_id)
    request = StayRequest(
        check_in=body.check_in,
        check_out=body.check_out,
        guests=body.guests,
        selected_service_keys=frozenset(body.selected_services),
    )
    snapshot = snapshot_quote(
        reservation_id,
        config,
        request,
        catalog.get_resolver(body.property_id),
        quotes,
    )
    return ReservationQuoteResponse(
        snapshot=snapshot,
        summary=render_reservation_summary(snapshot),
    )


@router.get(
    "/reservations/{reservation_id}/quote",
    summary="Get the persisted reservation quote",
    response_model=ReservationQuoteResponse,
    responses={404: {"description": "No quote persisted for the reservation"}},
)
async def get_reservation_quote(
    reservation_id: str,
    quotes: ReservationQuoteStore = Depends(get_reservation_quote_store),
) -> ReservationQuoteResponse:
    """Return the breakdown exactly as it was persisted."""
    snapshot = quotes.get(reservation_id)
    return ReservationQuoteResponse(
        snapshot=snapshot,
        summary=render_reservation_summary(snapshot),
    )
