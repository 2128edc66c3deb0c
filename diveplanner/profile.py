"""
Dive segments and plan containers.

A dive is an ordered list of DiveSegment legs (descent, bottom, stops).
ProfileBuilder produces the common shapes:
- Square profiles (single bottom depth)
- Multi-level profiles (stepped depths, deepest first)

Table bottom time runs from leaving the surface to leaving the bottom, so a
descent leg is carved out of the requested bottom time rather than added.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidInputError
from .gases import AIR, Gas


@dataclass(frozen=True)
class DiveSegment:
    """One leg of a dive. Depths in meters, duration in minutes."""
    start_depth: float
    end_depth: float
    duration: float
    gas: Gas = AIR

    def __post_init__(self):
        # NaN compares false both ways, so test for the valid range
        if not all(math.isfinite(d) and d >= 0 for d in (self.start_depth, self.end_depth)):
            raise InvalidInputError(
                f"Segment depths must be non-negative and finite, got "
                f"{self.start_depth} -> {self.end_depth}"
            )
        if not (math.isfinite(self.duration) and self.duration > 0):
            raise InvalidInputError(
                f"Segment duration must be positive and finite, got {self.duration}"
            )
        if not isinstance(self.gas, Gas):
            raise InvalidInputError(f"Segment gas must be a Gas, got {self.gas!r}")

    @property
    def mean_depth(self) -> float:
        return (self.start_depth + self.end_depth) / 2.0

    @property
    def max_depth(self) -> float:
        return max(self.start_depth, self.end_depth)


@dataclass
class DivePlan:
    """Resolved plan: input segments, elapsed time incl. deco, gases used."""
    segments: List[DiveSegment] = field(default_factory=list)
    total_time: float = 0.0
    max_depth: float = 0.0
    gases: List[Gas] = field(default_factory=list)


def validate_segments(segments: Sequence[DiveSegment]) -> List[DiveSegment]:
    """Return segments as a list, rejecting empty input and foreign types."""
    if not segments:
        raise InvalidInputError("At least one dive segment is required")
    for idx, segment in enumerate(segments):
        if not isinstance(segment, DiveSegment):
            raise InvalidInputError(
                f"Segment {idx} is {type(segment).__name__}, expected DiveSegment"
            )
    return list(segments)


def max_depth(segments: Sequence[DiveSegment]) -> float:
    """Deepest start or end depth over all segments."""
    return max(segment.max_depth for segment in segments)


def bottom_time(segments: Sequence[DiveSegment]) -> float:
    return sum(segment.duration for segment in segments)


class ProfileBuilder:
    """Build segment lists for common dive shapes."""

    def __init__(self, descent_rate: Optional[float] = None):  # m/min
        if descent_rate is not None and not (math.isfinite(descent_rate) and descent_rate > 0):
            raise InvalidInputError(
                f"descent_rate must be positive, got {descent_rate}"
            )
        self.descent_rate = descent_rate

    def _descent(self, depth: float, available: float, gas: Gas) -> Tuple[List[DiveSegment], float]:
        """Descent leg from the surface and the bottom time it leaves over."""
        if self.descent_rate is None or depth == 0:
            return [], available
        descent_time = depth / self.descent_rate
        if descent_time >= available:
            raise InvalidInputError(
                f"Descent to {depth}m takes {descent_time:.1f} min, "
                f"longer than the {available} min bottom time"
            )
        return [DiveSegment(0.0, depth, descent_time, gas)], available - descent_time

    def square(self, depth: float, bottom_time: float, gas: Gas = AIR) -> List[DiveSegment]:
        """
        Square profile: straight to ``depth`` and stay there.

        Args:
            depth: Bottom depth in meters
            bottom_time: Table bottom time in minutes (includes descent)
            gas: Breathing gas
        """
        segments, remaining = self._descent(depth, bottom_time, gas)
        segments.append(DiveSegment(depth, depth, remaining, gas))
        return segments

    def multilevel(
        self, levels: Sequence[Tuple[float, float]], gas: Gas = AIR
    ) -> List[DiveSegment]:
        """
        Multi-level profile from (depth_m, duration_min) pairs, deepest first.

        Level changes are treated as instantaneous; the descent leg, when a
        descent rate is set, comes out of the first level's duration.
        """
        if not levels:
            raise InvalidInputError("At least one level is required")

        first_depth, first_duration = levels[0]
        segments, remaining = self._descent(first_depth, first_duration, gas)
        segments.append(DiveSegment(first_depth, first_depth, remaining, gas))
        for depth, duration in levels[1:]:
            segments.append(DiveSegment(depth, depth, duration, gas))
        return segments
