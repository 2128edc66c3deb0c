"""
Gas supply arithmetic: how long a cylinder lasts at a given consumption rate.
"""

import bisect
import math
from dataclasses import dataclass
from typing import List, Tuple

from .errors import InvalidInputError

CONSUMPTION_RATE_STEP = 10  # L/min
MAX_CONSUMPTION_RATE = 120  # L/min

# Fraction of the surface supply lost to ambient pressure at depth (m).
# A diver at 10 m breathes twice the surface volume, so half the supply goes.
DEPTH_CONSUMPTION_FRACTIONS: Tuple[Tuple[int, float], ...] = (
    (0, 0.0),
    (5, 0.33),
    (10, 0.50),
    (15, 0.60),
    (20, 0.67),
    (25, 0.71),
    (30, 0.75),
    (35, 0.77),
    (40, 0.80),
    (45, 0.82),
    (50, 0.84),
)


@dataclass(frozen=True)
class GasSupplyResult:
    total_volume: float  # liters at surface pressure
    available_time: int  # minutes at the surface consumption rate


def calculate_gas_supply(
    supply_volume: float, supply_pressure: float, consumption_rate: float
) -> GasSupplyResult:
    """
    Free gas volume of a supply and the whole minutes it lasts.

    Args:
        supply_volume: Water volume of the cylinder(s) in liters
        supply_pressure: Fill pressure in bar
        consumption_rate: Surface consumption in L/min, must be positive
    """
    if not (math.isfinite(consumption_rate) and consumption_rate > 0):
        raise InvalidInputError(
            f"consumption_rate must be positive, got {consumption_rate}"
        )
    if not (math.isfinite(supply_volume) and supply_volume >= 0):
        raise InvalidInputError(f"supply_volume must be non-negative, got {supply_volume}")
    if not (math.isfinite(supply_pressure) and supply_pressure >= 0):
        raise InvalidInputError(
            f"supply_pressure must be non-negative, got {supply_pressure}"
        )

    total_volume = supply_volume * supply_pressure
    return GasSupplyResult(
        total_volume=total_volume,
        available_time=math.floor(total_volume / consumption_rate),
    )


def consumption_rates() -> List[int]:
    """Selectable consumption rates, 10 to 120 L/min."""
    return list(range(CONSUMPTION_RATE_STEP, MAX_CONSUMPTION_RATE + 1, CONSUMPTION_RATE_STEP))


def depth_consumption_fraction(depth: float) -> float:
    """Tabulated supply fraction lost at depth, rounded up to the next table depth."""
    if not (math.isfinite(depth) and depth >= 0):
        raise InvalidInputError(f"depth must be non-negative, got {depth}")
    depths = [d for d, _ in DEPTH_CONSUMPTION_FRACTIONS]
    idx = bisect.bisect_left(depths, depth)
    if idx == len(depths):
        raise InvalidInputError(
            f"No consumption fraction for {depth}m (table ends at {depths[-1]}m)"
        )
    return DEPTH_CONSUMPTION_FRACTIONS[idx][1]


def depth_adjusted_bottom_time(result: GasSupplyResult, depth: float) -> int:
    """Whole minutes the supply lasts when breathed at depth."""
    fraction = depth_consumption_fraction(depth)
    return math.floor(result.available_time * (1.0 - fraction))
