"""
JSON bridge for the web front end.

JSON-in/JSON-out wrappers around the planner and the gas supply calculator,
using the camelCase field names the dive log and report pages consume.

Planner input:
    {"segments": [{"startDepth": 0, "endDepth": 30, "duration": 30,
                   "gas": {"fO2": 0.21, "fHe": 0}}],
     "options": {"tableType": "DCIEM", ...}}

Failures come back as {"error": message, "errorType": exception class}.
"""

import json
import logging
from typing import Any, Dict

from .errors import InvalidInputError, PlannerError
from .gas_supply import (
    calculate_gas_supply,
    consumption_rates,
    depth_adjusted_bottom_time,
    depth_consumption_fraction,
)
from .gases import Gas
from .planner import DiveResult, PlannerOptions, calculate_decompression
from .profile import DiveSegment

logger = logging.getLogger(__name__)

OPTION_FIELDS = {
    "lastStopDepth": "last_stop_depth",
    "decoStopDistance": "deco_stop_distance",
    "ascentSpeed6m": "ascent_speed_6m",
    "ascentSpeed50perc": "ascent_speed_50perc",
    "descentSpeed": "descent_speed",
    "problemSolvingDuration": "problem_solving_duration",
    "maxPpO2": "max_ppo2",
    "maxDecoPpO2": "max_deco_ppo2",
    "oxygenNarcotic": "oxygen_narcotic",
    "tableType": "table_type",
    "decoGas": "deco_gas",
    "includeDecoInOxygenLoad": "include_deco_in_oxygen_load",
    "strictTableRange": "strict_table_range",
}


def gas_from_dict(data: Dict[str, Any]) -> Gas:
    return Gas(
        f_o2=float(data["fO2"]),
        f_he=float(data.get("fHe", 0.0)),
        mod=data.get("mod"),
    )


def gas_to_dict(gas: Gas) -> Dict[str, Any]:
    data = {"fO2": gas.f_o2, "fHe": gas.f_he}
    if gas.mod is not None:
        data["mod"] = gas.mod
    return data


def segment_from_dict(data: Dict[str, Any]) -> DiveSegment:
    return DiveSegment(
        start_depth=float(data["startDepth"]),
        end_depth=float(data["endDepth"]),
        duration=float(data["duration"]),
        gas=gas_from_dict(data["gas"]),
    )


def segment_to_dict(segment: DiveSegment) -> Dict[str, Any]:
    return {
        "startDepth": segment.start_depth,
        "endDepth": segment.end_depth,
        "duration": segment.duration,
        "gas": gas_to_dict(segment.gas),
    }


def options_from_dict(data: Dict[str, Any]) -> PlannerOptions:
    if not isinstance(data, dict):
        raise InvalidInputError(f"options must be an object, got {type(data).__name__}")
    unknown = set(data) - set(OPTION_FIELDS)
    if unknown:
        raise InvalidInputError(f"Unknown options: {', '.join(sorted(unknown))}")
    kwargs = {OPTION_FIELDS[key]: value for key, value in data.items()}
    if "deco_gas" in kwargs:
        kwargs["deco_gas"] = gas_from_dict(kwargs["deco_gas"])
    return PlannerOptions(**kwargs)


def result_to_dict(result: DiveResult) -> Dict[str, Any]:
    """DiveResult in the shape the report generator reads."""
    return {
        "plan": {
            "segments": [segment_to_dict(s) for s in result.plan.segments],
            "totalTime": result.plan.total_time,
            "maxDepth": result.plan.max_depth,
            "gases": [gas_to_dict(g) for g in result.plan.gases],
        },
        "decompression": [segment_to_dict(s) for s in result.decompression],
        "cns": result.cns,
        "otu": result.otu,
        "tableGroup": result.table_group,
        "exceedsTableRange": result.exceeds_table_range,
    }


def _error(exc: Exception) -> str:
    logger.warning(f"Planner request rejected: {type(exc).__name__}: {exc}")
    return json.dumps({"error": str(exc), "errorType": type(exc).__name__})


def plan_dive(params_json: str) -> str:
    """
    Main entry point for dive planning.

    Args:
        params_json: JSON string with segments and options

    Returns:
        JSON string with the dive result or an error
    """
    try:
        params = json.loads(params_json)
        if not isinstance(params, dict):
            raise InvalidInputError("Request must be a JSON object")
        if not isinstance(params["segments"], list):
            raise InvalidInputError("segments must be a list")
        segments = [segment_from_dict(s) for s in params["segments"]]
        options = options_from_dict(params.get("options") or {})
        result = calculate_decompression(segments, options)
        return json.dumps(result_to_dict(result))
    except (PlannerError, ValueError, KeyError, TypeError) as e:
        return _error(e)


def gas_supply(params_json: str) -> str:
    """
    Gas supply entry point.

    Input keys: supplyVolume, supplyPressure, consumptionRate and an optional
    depth (m) for the depth-adjusted bottom time.
    """
    try:
        params = json.loads(params_json)
        result = calculate_gas_supply(
            float(params["supplyVolume"]),
            float(params["supplyPressure"]),
            float(params["consumptionRate"]),
        )
        data = {"totalVolume": result.total_volume, "availableTime": result.available_time}
        if params.get("depth") is not None:
            depth = float(params["depth"])
            data["bottomTime"] = depth_adjusted_bottom_time(result, depth)
            data["depthPercentage"] = round(depth_consumption_fraction(depth) * 100)
        return json.dumps(data)
    except (PlannerError, ValueError, KeyError, TypeError) as e:
        return _error(e)


def list_consumption_rates() -> str:
    return json.dumps(consumption_rates())
