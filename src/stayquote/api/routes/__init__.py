"""API routes package.

- quotes: live preview and admin example preview
- reservations: booking-time quote snapshots

All routers are registered in main.py with /api prefix.
"""

from stayquote.api.routes.quotes import router as quotes_router
from stayquote.api.routes.reservations import router as reservations_router

__all__ = [
    "quotes_router",
    "reservations_router",
]
