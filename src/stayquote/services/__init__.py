"""Quote engine services.

Dependency order: classifier -> overrides -> quote -> adapters. The stores
in catalog wrap DynamoDB and supply configs and overrides to the adapters.
"""

from .adapters import (
    admin_example_preview,
    live_preview,
    render_reservation_summary,
    snapshot_quote,
)
from .classifier import classify_group, classify_season, classify_stay
from .overrides import OverrideResolver, select_special_price
from .quote import compute_quote

__all__ = [
    "OverrideResolver",
    "admin_example_preview",
    "classify_group",
    "classify_season",
    "classify_stay",
    "compute_quote",
    "live_preview",
    "render_reservation_summary",
    "select_special_price",
    "snapshot_quote",
]
