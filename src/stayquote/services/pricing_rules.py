"""Bundled sample pricing configurations.

The catalog's per-property pricing tables ship as JSON so they can seed a
catalog store or back local development. Loading returns plain values;
nothing is cached at module level.
"""

import json
import logging
from pathlib import Path
from typing import Any

from stayquote.models import PricingConfig

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent.parent / "data" / "pricing_rules.json"


def load_pricing_rules_from_dict(data: dict[str, Any]) -> dict[str, PricingConfig]:
    """Build pricing configurations keyed by property ID.

    Args:
        data: Mapping with a "pricing_rules" list of configuration dicts

    Returns:
        Dict of property_id -> PricingConfig, in file order
    """
    configs: dict[str, PricingConfig] = {}
    for rule in data.get("pricing_rules", []):
        config = PricingConfig.model_validate(rule)
        configs[config.property_id] = config
    return configs


def load_pricing_rules(json_path: Path | str | None = None) -> dict[str, PricingConfig]:
    """Load pricing configurations from a JSON file.

    Args:
        json_path: Path to JSON file. If None, uses the bundled rules.

    Returns:
        Dict of property_id -> PricingConfig

    Raises:
        FileNotFoundError: If JSON file doesn't exist.
        json.JSONDecodeError: If JSON is invalid.
        pydantic.ValidationError: If a configuration is invalid.
    """
    json_path = Path(json_path) if json_path is not None else DEFAULT_RULES_PATH

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    configs = load_pricing_rules_from_dict(data)
    logger.info(f"Loaded {len(configs)} pricing configurations from {json_path}")
    return configs
