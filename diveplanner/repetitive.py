"""
DCIEM repetitive diving tables.

- Surface interval table: residual group x time on the surface -> repetitive
  factor (or NRD, no repetitive dive allowed yet).
- Repetitive dive table: depth x repetitive factor -> no-decompression
  minutes for the next dive.

Lookups round towards the more conservative row: depth and factor up, and
surface intervals down to the band they fall in.
"""

import bisect
import math
from typing import Dict, Optional, Tuple, Union

from .dciem_tables import NO_REPETITIVE_GROUP
from .errors import InvalidInputError, UnsupportedDepthError

NRD = "NRD"

# (label, first minute of the band)
SURFACE_INTERVALS: Tuple[Tuple[str, int], ...] = (
    ("0:15-0:29", 15),
    ("0:30-0:59", 30),
    ("1:00-1:29", 60),
    ("1:30-1:59", 90),
    ("2:00-2:59", 120),
    ("3:00-3:59", 180),
    ("4:00-5:59", 240),
    ("6:00-8:59", 360),
    ("9:00-11:59", 540),
    ("12:00-14:59", 720),
    ("15:00-18:00", 900),
)
MAX_SURFACE_INTERVAL = 18 * 60  # minutes

# One factor per surface interval band; None marks NRD
REPETITIVE_FACTORS: Dict[str, Tuple[Optional[float], ...]] = {
    "A": (1.4, 1.2, 1.1, 1.1, 1.1, 1.1, 1.1, 1.1, 1.0, 1.0, 1.0),
    "B": (1.5, 1.3, 1.2, 1.2, 1.2, 1.1, 1.1, 1.1, 1.0, 1.0, 1.0),
    "C": (1.6, 1.4, 1.3, 1.2, 1.2, 1.2, 1.1, 1.1, 1.1, 1.0, 1.0),
    "D": (1.8, 1.5, 1.3, 1.2, 1.2, 1.2, 1.1, 1.1, 1.1, 1.1, 1.0),
    "E": (1.9, 1.6, 1.5, 1.4, 1.3, 1.2, 1.2, 1.2, 1.1, 1.1, 1.1),
    "F": (2.0, 1.7, 1.6, 1.5, 1.4, 1.3, 1.3, 1.2, 1.2, 1.1, 1.1),
    "G": (None, 1.9, 1.7, 1.6, 1.5, 1.4, 1.3, 1.2, 1.1, 1.1, 1.0),
    "H": (None, None, None, 1.9, 1.7, 1.6, 1.5, 1.4, 1.3, 1.1, 1.1),
    "I": (None, None, None, 2.0, 1.8, 1.7, 1.5, 1.4, 1.3, 1.1, 1.1),
    "J": (None, None, None, None, 1.9, 1.8, 1.6, 1.5, 1.3, 1.2, 1.1),
    "K": (None, None, None, 2.0, 1.9, 1.7, 1.5, 1.3, 1.2, 1.1, 1.1),
    "L": (None, None, None, None, 2.0, 1.7, 1.6, 1.4, 1.2, 1.1, 1.1),
    "M": (None, None, None, None, None, 1.8, 1.6, 1.4, 1.2, 1.1, 1.1),
    "N": (None, None, None, None, None, 1.9, 1.7, 1.4, 1.2, 1.1, 1.1),
    "O": (None, None, None, None, None, 2.0, 1.7, 1.4, 1.2, 1.1, 1.1),
}

# Factor columns of the repetitive dive table
FACTORS: Tuple[float, ...] = (1.1, 1.2, 1.3, 1.4, 1.5, 1.6, 1.7, 1.8, 1.9, 2.0)

# depth (m) -> no-decompression minutes, one per FACTORS column
REPETITIVE_NO_DECO_LIMITS: Dict[int, Tuple[int, ...]] = {
    9: (272, 250, 230, 214, 200, 187, 176, 166, 157, 150),
    12: (136, 125, 115, 107, 100, 93, 88, 83, 78, 75),
    15: (60, 55, 50, 45, 41, 38, 36, 34, 32, 31),
    18: (40, 35, 31, 29, 27, 26, 24, 23, 22, 21),
    21: (30, 25, 21, 19, 18, 17, 16, 15, 14, 13),
    24: (20, 16, 15, 14, 13, 12, 12, 11, 11, 11),
    27: (16, 14, 12, 11, 10, 9, 9, 8, 8, 7),
    30: (13, 11, 11, 10, 9, 8, 7, 7, 7, 6),
    33: (10, 9, 8, 7, 6, 6, 6, 5, 5, 5),
    36: (9, 7, 6, 6, 5, 5, 5, 5, 5, 4),
    39: (7, 6, 6, 5, 5, 5, 5, 5, 5, 4),
    42: (6, 5, 5, 4, 4, 4, 4, 3, 3, 3),
    45: (5, 5, 4, 4, 4, 3, 3, 3, 3, 2),
}
REPETITIVE_DEPTHS: Tuple[int, ...] = tuple(REPETITIVE_NO_DECO_LIMITS)


def surface_interval_band(surface_interval: Union[str, float]) -> int:
    """Index of the surface interval band for a label or a time in minutes."""
    if isinstance(surface_interval, str):
        for idx, (label, _) in enumerate(SURFACE_INTERVALS):
            if label == surface_interval:
                return idx
        raise InvalidInputError(f"Unknown surface interval: {surface_interval}")

    starts = [start for _, start in SURFACE_INTERVALS]
    if not (starts[0] <= surface_interval <= MAX_SURFACE_INTERVAL):
        raise InvalidInputError(
            f"Surface interval {surface_interval} min is outside the table "
            f"({starts[0]} to {MAX_SURFACE_INTERVAL} min)"
        )
    return bisect.bisect_right(starts, surface_interval) - 1


def repetitive_factor(group: str, surface_interval: Union[str, float]) -> Union[float, str]:
    """
    Repetitive factor after a surface interval.

    Args:
        group: Residual group from the previous dive (A-O or NRG)
        surface_interval: Minutes on the surface, or a band label like "1:00-1:29"

    Returns:
        Factor as a float, or NRD when no repetitive dive is allowed
    """
    group = group.upper()
    if group == NO_REPETITIVE_GROUP:
        return NRD
    if group not in REPETITIVE_FACTORS:
        raise InvalidInputError(
            f"No surface interval row for group {group} (table covers A-O)"
        )
    factor = REPETITIVE_FACTORS[group][surface_interval_band(surface_interval)]
    return NRD if factor is None else factor


def repetitive_no_decompression_limit(depth: float, factor: float) -> int:
    """No-decompression minutes for a repetitive dive to ``depth``."""
    if not (math.isfinite(depth) and depth >= 0):
        raise InvalidInputError(f"depth must be non-negative, got {depth}")
    idx = bisect.bisect_left(REPETITIVE_DEPTHS, math.ceil(depth))
    if idx == len(REPETITIVE_DEPTHS):
        raise UnsupportedDepthError(depth, REPETITIVE_DEPTHS[-1])

    if not (math.isfinite(factor) and factor > 0):
        raise InvalidInputError(f"factor must be positive, got {factor}")
    # Round up to the next tenth; the epsilon keeps 1.3 from becoming 1.4
    tenths = max(math.ceil(factor * 10 - 1e-9), 11)
    if tenths > 20:
        raise InvalidInputError(f"Repetitive factor {factor} exceeds 2.0")

    return REPETITIVE_NO_DECO_LIMITS[REPETITIVE_DEPTHS[idx]][tenths - 11]
