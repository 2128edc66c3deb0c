"""
Breathing gas value type and standard mixes.

Quick-reference helpers (ppO2, MOD) use the 1 bar per 10 m approximation with
a 1 bar surface, the way dive tables are read at the poolside.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import InvalidInputError


@dataclass(frozen=True)
class Gas:
    """Breathing gas given by oxygen and helium fractions.

    Nitrogen makes up the remainder. ``mod`` is an optional maximum operating
    depth annotation (meters) carried for display; it is not computed here.
    """
    f_o2: float
    f_he: float = 0.0
    mod: Optional[float] = None

    def __post_init__(self):
        if not (0.0 < self.f_o2 <= 1.0):
            raise InvalidInputError(f"f_o2 must be in (0, 1.0], got {self.f_o2}")
        if not (0.0 <= self.f_he < 1.0):
            raise InvalidInputError(f"f_he must be in [0, 1.0), got {self.f_he}")
        # Tolerate float noise such as 0.21 + 0.79
        if self.f_o2 + self.f_he > 1.0 + 1e-9:
            raise InvalidInputError(
                f"f_o2 + f_he must not exceed 1.0, got {self.f_o2 + self.f_he:.3f}"
            )
        if self.mod is not None and not (math.isfinite(self.mod) and self.mod >= 0):
            raise InvalidInputError(f"mod must be non-negative, got {self.mod}")

    @property
    def f_n2(self) -> float:
        return max(0.0, 1.0 - self.f_o2 - self.f_he)

    def ppo2(self, depth: float) -> float:
        """Partial pressure of oxygen (bar) at depth in meters."""
        return self.f_o2 * (depth / 10.0 + 1.0)

    def max_operating_depth(self, max_ppo2: float = 1.4) -> float:
        """Depth (m) at which ppO2 reaches max_ppo2."""
        return (max_ppo2 / self.f_o2 - 1.0) * 10.0

    @property
    def label(self) -> str:
        o2 = int(round(self.f_o2 * 100))
        he = int(round(self.f_he * 100))
        if he == 0 and o2 == 21:
            return "Air"
        if he == 0 and o2 == 100:
            return "Oxygen"
        if he == 0:
            return f"EAN{o2}"
        return f"Trimix {o2}/{he}"


AIR = Gas(f_o2=0.21)

GAS_MIXES: Dict[str, Gas] = {
    "air": AIR,
    "nitrox32": Gas(f_o2=0.32),
    "nitrox36": Gas(f_o2=0.36),
    "trimix1845": Gas(f_o2=0.18, f_he=0.45),
    "trimix1070": Gas(f_o2=0.10, f_he=0.70),
    "oxygen": Gas(f_o2=1.0),
}


def calculate_mod(gas: Gas, max_ppo2: float) -> float:
    """Maximum operating depth of ``gas`` for a ppO2 limit."""
    if max_ppo2 <= 0:
        raise InvalidInputError(f"max_ppo2 must be positive, got {max_ppo2}")
    return gas.max_operating_depth(max_ppo2)


def calculate_ppo2(gas: Gas, depth: float) -> float:
    if depth < 0:
        raise InvalidInputError(f"depth must be non-negative, got {depth}")
    return gas.ppo2(depth)


def get_gas(name: str) -> Gas:
    """Look up a standard mix by name (case-insensitive)."""
    try:
        return GAS_MIXES[name.lower()]
    except KeyError:
        raise InvalidInputError(
            f"Unknown gas mix: {name}. Use one of: {', '.join(GAS_MIXES)}"
        ) from None
