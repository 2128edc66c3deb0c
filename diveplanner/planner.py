"""
Table-based dive planner.

Combines the input dive segments with the table lookup and stop composer
into a full plan, and adds oxygen exposure estimates. Advisory only: the
result is a reading of reference tables, not a decompression model.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .deco_stops import compose_decompression
from .errors import InvalidInputError
from .gases import AIR, Gas
from .oxygen import calculate_cns, calculate_otu
from .profile import DivePlan, DiveSegment, bottom_time, max_depth, validate_segments
from .tables import TableFamily, calculate_dive_table

logger = logging.getLogger(__name__)


@dataclass
class PlannerOptions:
    """Planning options.

    The speed, spacing and ppO2 fields describe the dive as submitted by the
    caller and are carried into reports; the table lookup itself only reads
    table_type, deco_gas, include_deco_in_oxygen_load and strict_table_range.
    """
    last_stop_depth: float = 3.0  # m
    deco_stop_distance: float = 3.0  # m
    ascent_speed_6m: float = 3.0  # m/min, last 6 m
    ascent_speed_50perc: float = 9.0  # m/min, up to 50% of max depth
    descent_speed: float = 18.0  # m/min
    problem_solving_duration: float = 1.0  # min
    max_ppo2: float = 1.4  # bar
    max_deco_ppo2: float = 1.6  # bar
    oxygen_narcotic: bool = True
    table_type: TableFamily = TableFamily.DCIEM

    # Gas for the named stops; the tables assume air
    deco_gas: Gas = AIR
    # Count time at decompression stops towards CNS/OTU
    include_deco_in_oxygen_load: bool = False
    # Raise instead of flagging a bottom time beyond the table
    strict_table_range: bool = False

    def __post_init__(self):
        self.table_type = TableFamily.parse(self.table_type)
        for name in (
            "last_stop_depth",
            "deco_stop_distance",
            "ascent_speed_6m",
            "ascent_speed_50perc",
            "descent_speed",
            "max_ppo2",
            "max_deco_ppo2",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not (math.isfinite(value) and value > 0):
                raise InvalidInputError(f"{name} must be positive, got {value}")
        if not (
            math.isfinite(self.problem_solving_duration)
            and self.problem_solving_duration >= 0
        ):
            raise InvalidInputError(
                f"problem_solving_duration must be non-negative, "
                f"got {self.problem_solving_duration}"
            )
        # "false" from JSON or YAML would otherwise read as True
        for name in ("oxygen_narcotic", "include_deco_in_oxygen_load", "strict_table_range"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidInputError(f"{name} must be true or false, got {value!r}")
        if not isinstance(self.deco_gas, Gas):
            raise InvalidInputError(f"deco_gas must be a Gas, got {self.deco_gas!r}")


DEFAULT_OPTIONS = PlannerOptions()


@dataclass
class DiveResult:
    """Planner output consumed by dive logs and reports."""
    plan: DivePlan
    decompression: List[DiveSegment] = field(default_factory=list)
    cns: float = 0.0  # percent
    otu: float = 0.0
    table_group: str = ""
    exceeds_table_range: bool = False

    @property
    def requires_deco(self) -> bool:
        return bool(self.decompression)

    @property
    def total_deco_time(self) -> float:
        return sum(stop.duration for stop in self.decompression)


def calculate_decompression(
    segments: Sequence[DiveSegment], options: Optional[PlannerOptions] = None
) -> DiveResult:
    """
    Plan decompression for a dive.

    Args:
        segments: Ordered dive legs; all count towards bottom time
        options: Planner options (defaults to DEFAULT_OPTIONS)

    Returns:
        DiveResult with plan, stops, CNS/OTU and residual group
    """
    options = options or DEFAULT_OPTIONS
    segments = validate_segments(segments)

    deepest = max_depth(segments)
    elapsed = bottom_time(segments)

    table_result = calculate_dive_table(
        deepest,
        elapsed,
        options.table_type,
        deco_gas=options.deco_gas,
        strict=options.strict_table_range,
    )
    decompression = compose_decompression(table_result, final_stop_gas=segments[0].gas)
    deco_time = sum(stop.duration for stop in decompression)

    exposure = segments + decompression if options.include_deco_in_oxygen_load else segments
    cns = calculate_cns(exposure)
    otu = calculate_otu(exposure)

    logger.info(
        f"Planned {deepest}m/{elapsed}min: group {table_result.residual_group}, "
        f"{len(decompression)} stops, {deco_time} min deco, CNS {cns:.1f}%, OTU {otu:.1f}"
    )

    plan = DivePlan(
        segments=segments,
        total_time=elapsed + deco_time,
        max_depth=deepest,
        gases=[segment.gas for segment in segments],
    )
    return DiveResult(
        plan=plan,
        decompression=decompression,
        cns=cns,
        otu=otu,
        table_group=table_result.residual_group,
        exceeds_table_range=table_result.exceeds_table_range,
    )
