"""FastAPI application exposing the quote engine.

Endpoints:
- Live price preview for the booking form
- Admin example preview for draft pricing configurations
- Booking-time quote snapshots and their summaries
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from stayquote import __version__
from stayquote.api.exceptions import register_exception_handlers
from stayquote.api.middleware.correlation import CorrelationIdMiddleware
from stayquote.api.routes import quotes_router, reservations_router
from stayquote.utils.logging import StructuredFormatter

logger = logging.getLogger(__name__)

_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
logging.basicConfig(level=logging.INFO, handlers=[_handler])

app = FastAPI(
    title="Stay Quote API",
    description="Price breakdowns for property and tour bookings",
    version=__version__,
)

# Configure CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)

app.include_router(quotes_router, prefix="/api")
app.include_router(reservations_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Liveness check."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "stayquote-api",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the API with uvicorn for local development."""
    import uvicorn

    if reload:
        uvicorn.run("stayquote.api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
