"""
Dive table lookup.

Resolves a (depth, bottom time) pair against the reference tables:
- depth rounds up to the next reference depth
- bottom time rounds up to the next tabulated breakpoint

Both roundings go in the conservative direction. Anything the tables cannot
answer fails loudly instead of falling back to "no decompression".
"""

import bisect
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .dciem_tables import (
    DCIEM_TABLES,
    MAX_REFERENCE_DEPTH,
    MIN_REFERENCE_DEPTH,
    REFERENCE_DEPTHS,
    TableEntry,
    breakpoints,
)
from .errors import (
    DurationExceedsTableError,
    InvalidInputError,
    UnsupportedDepthError,
    UnsupportedTableFamilyError,
)
from .gases import AIR, Gas
from .profile import DiveSegment

logger = logging.getLogger(__name__)


class TableFamily(str, Enum):
    DCIEM = "DCIEM"
    US_NAVY = "US_NAVY"
    RECREATIONAL = "RECREATIONAL"

    @classmethod
    def parse(cls, value: Union[str, "TableFamily"]) -> "TableFamily":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise InvalidInputError(
                f"Unknown table type: {value}. "
                f"Use one of: {', '.join(f.value for f in cls)}"
            ) from None


# Families with real table data
IMPLEMENTED_FAMILIES = (TableFamily.DCIEM,)


@dataclass
class DiveTableResult:
    """Resolved table row for one dive."""
    residual_group: str
    decompression: int  # total decompression minutes
    decompression_stops: List[DiveSegment] = field(default_factory=list)  # named stops, deepest first
    reference_depth: int = 0
    breakpoint: int = 0
    exceeds_table_range: bool = False
    entry: Optional[TableEntry] = None


def reference_depth_for(depth: float) -> int:
    """
    Reference table depth for an actual depth.

    Depths shallower than the first table use it; otherwise the depth is
    rounded up to a whole meter and then up to the next reference depth.
    """
    if not (math.isfinite(depth) and depth >= 0):
        raise InvalidInputError(f"Depth must be non-negative and finite, got {depth}")
    rounded = MIN_REFERENCE_DEPTH if depth < MIN_REFERENCE_DEPTH else math.ceil(depth)
    idx = bisect.bisect_left(REFERENCE_DEPTHS, rounded)
    if idx == len(REFERENCE_DEPTHS):
        raise UnsupportedDepthError(depth, MAX_REFERENCE_DEPTH)
    return REFERENCE_DEPTHS[idx]


def select_breakpoint(reference_depth: int, duration: float) -> tuple:
    """
    Smallest breakpoint >= duration at a reference depth.

    Returns (breakpoint, exceeds_table_range). When the duration is longer
    than every breakpoint the last one is returned with the flag set.
    """
    if not (math.isfinite(duration) and duration > 0):
        raise InvalidInputError(f"Duration must be positive and finite, got {duration}")
    times = breakpoints(reference_depth)
    idx = bisect.bisect_left(times, duration)
    if idx == len(times):
        return times[-1], True
    return times[idx], False


def named_stop_segments(entry: TableEntry, gas: Gas = AIR) -> List[DiveSegment]:
    """Named stops of a table row as constant-depth segments, deepest first."""
    return [
        DiveSegment(float(depth), float(depth), float(minutes), gas)
        for depth, minutes in entry.named_stops()
    ]


def calculate_dive_table(
    depth: float,
    duration: float,
    table_type: Union[str, TableFamily] = TableFamily.DCIEM,
    deco_gas: Gas = AIR,
    strict: bool = False,
) -> DiveTableResult:
    """
    Look up the table row for a dive.

    Args:
        depth: Maximum depth in meters
        duration: Bottom time in minutes
        table_type: Table family; only DCIEM carries data
        deco_gas: Gas breathed at the named stops
        strict: Raise instead of flagging when the bottom time is off the table

    Returns:
        DiveTableResult with group, total decompression and named stops
    """
    family = TableFamily.parse(table_type)
    if family not in IMPLEMENTED_FAMILIES:
        raise UnsupportedTableFamilyError(family.value)

    reference_depth = reference_depth_for(depth)
    breakpoint, exceeds = select_breakpoint(reference_depth, duration)

    if exceeds:
        if strict:
            raise DurationExceedsTableError(duration, reference_depth, breakpoint)
        logger.warning(
            f"Bottom time {duration} min is beyond the {reference_depth}m table; "
            f"using the {breakpoint} min row, which may understate decompression"
        )

    entry = DCIEM_TABLES[reference_depth][breakpoint]
    logger.debug(
        f"{family.value} lookup {depth}m/{duration}min -> "
        f"{reference_depth}m/{breakpoint}min: group {entry.group}, "
        f"deco {entry.total_deco} min"
    )

    return DiveTableResult(
        residual_group=entry.group,
        decompression=entry.total_deco,
        decompression_stops=named_stop_segments(entry, deco_gas),
        reference_depth=reference_depth,
        breakpoint=breakpoint,
        exceeds_table_range=exceeds,
        entry=entry,
    )
