"""
Planner configuration loading.

Settings come from config.yaml with optional command-line overrides. Missing
file or keys fall back to the PlannerOptions defaults.
"""

import logging
import os
from dataclasses import fields
from typing import Any, Dict, Optional

import yaml

from .errors import InvalidInputError
from .gases import Gas, get_gas
from .planner import PlannerOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config.yaml"
)

DEFAULT_GAS_SUPPLY = {
    "supply_volume": 12.0,  # L
    "supply_pressure": 200.0,  # bar
    "consumption_rate": 20.0,  # L/min
}

_OPTION_NAMES = {f.name for f in fields(PlannerOptions)}


def _parse_gas(value: Any) -> Gas:
    """Gas from a mix name ("nitrox32") or a mapping with f_o2/f_he."""
    if isinstance(value, str):
        return get_gas(value)
    if isinstance(value, dict):
        return Gas(f_o2=float(value["f_o2"]), f_he=float(value.get("f_he", 0.0)))
    raise InvalidInputError(f"Cannot read a gas from {value!r}")


def options_from_dict(settings: Dict[str, Any]) -> PlannerOptions:
    """Build PlannerOptions from a mapping of option names."""
    unknown = set(settings) - _OPTION_NAMES
    if unknown:
        raise InvalidInputError(f"Unknown planner options: {', '.join(sorted(unknown))}")
    settings = dict(settings)
    if "deco_gas" in settings:
        settings["deco_gas"] = _parse_gas(settings["deco_gas"])
    return PlannerOptions(**settings)


def load_effective_config(
    table_override: Optional[str] = None,
    config_path: Optional[str] = None,
) -> dict:
    """Load configuration from config.yaml with optional CLI table override.

    Returns a dict with resolved settings:
        options:       PlannerOptions instance
        gas_supply:    dict with supply_volume, supply_pressure, consumption_rate
        config_path:   str (resolved path)
        table_source:  'cli' | 'config' | 'default'
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config = {}
    if os.path.exists(config_path):
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
        logger.debug(f"Loaded config from {config_path}")
    else:
        logger.debug(f"No config at {config_path}, using defaults")

    planner_cfg = dict(config.get("planner") or {})
    table_source = "config" if "table_type" in planner_cfg else "default"
    if table_override:
        planner_cfg["table_type"] = table_override
        table_source = "cli"

    gas_supply = dict(DEFAULT_GAS_SUPPLY)
    for key, value in (config.get("gas_supply") or {}).items():
        if key not in gas_supply:
            raise InvalidInputError(f"Unknown gas_supply setting: {key}")
        gas_supply[key] = float(value)

    return {
        "options": options_from_dict(planner_cfg),
        "gas_supply": gas_supply,
        "config_path": config_path,
        "table_source": table_source,
    }
