"""Quote endpoints for the booking form and the admin pricing tool.

Provides REST endpoints for:
- Live price preview while the customer edits dates, guests and add-ons
- Admin example preview of an unsaved pricing configuration

Amounts are whole COP units serialized as decimal strings.
"""

from fastapi import APIRouter, Depends

from stayquote.api.dependencies import get_catalog_store
from stayquote.api.models.quotes import (
    AdminExampleRequest,
    QuotePreviewRequest,
    QuotePreviewResponse,
)
from stayquote.models import PriceBreakdown
from stayquote.services.adapters import admin_example_preview, live_preview
from stayquote.services.catalog import CatalogStore

router = APIRouter(tags=["quotes"])


@router.post(
    "/quotes/preview",
    summary="Live price preview",
    description="""
Compute the price breakdown for the booking form's current input.

Returns `{"quote": null}` while the dates are incomplete (no check-in,
or no check-out for a lodging property). Blocked dates, guest limits and
unknown add-ons are reported as errors.
""",
    response_model=QuotePreviewResponse,
    responses={
        400: {"description": "Invalid dates, guest count or add-on"},
        404: {"description": "No pricing configured for the property"},
        409: {"description": "Requested dates overlap a blocked period"},
    },
)
async def preview_quote(
    body: QuotePreviewRequest,
    catalog: CatalogStore = Depends(get_catalog_store),
) -> QuotePreviewResponse:
    """Recompute the quote for the current form state."""
    config = catalog.get_pricing_config(body.property_id)
    breakdown = live_preview(
        config,
        body.check_in,
        body.check_out,
        guests=body.guests,
        selected_services=body.selected_services,
        overrides=catalog.get_resolver(body.property_id),
    )
    return QuotePreviewResponse(quote=breakdown)


@router.post(
    "/quotes/admin-example",
    summary="Preview a draft pricing configuration",
    description="""
Price the fixed admin example (7 nights, 2 guests, no add-ons, no calendar
overrides) with the pricing configuration in the request body.

The configuration is used as sent; nothing is read from or written to the
catalog.
""",
    response_model=PriceBreakdown,
)
async def preview_admin_example(body: AdminExampleRequest) -> PriceBreakdown:
    """Run the example stay against the unsaved draft config."""
    return admin_example_preview(body.config, check_in=body.check_in)
