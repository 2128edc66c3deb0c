"""
Decompression stop composition.

Turns a resolved table row into the ordered list of stops a diver makes on
the way up: the named stops (15/12/9/6 m) followed by a final shallow stop
that takes up whatever part of the total decompression time the named stops
do not cover.
"""

from typing import List

from .errors import InvalidInputError
from .gases import Gas
from .profile import DiveSegment
from .tables import DiveTableResult

FINAL_STOP_DEPTH = 3.0  # meters


def residual_minutes(table_result: DiveTableResult) -> int:
    """Total decompression time not spent at named stops."""
    named = sum(stop.duration for stop in table_result.decompression_stops)
    return table_result.decompression - named


def compose_decompression(
    table_result: DiveTableResult, final_stop_gas: Gas
) -> List[DiveSegment]:
    """
    Ordered decompression stops for a table result.

    Args:
        table_result: Resolved table row (named stops already deepest first)
        final_stop_gas: Gas breathed at the final shallow stop

    Returns:
        Stops deepest first; empty when the row has no decompression time.
        Stop durations always sum to table_result.decompression.
    """
    if table_result.decompression <= 0:
        return []

    stops = list(table_result.decompression_stops)
    remainder = residual_minutes(table_result)
    if remainder < 0:
        raise InvalidInputError(
            f"Named stops ({table_result.decompression - remainder} min) exceed "
            f"total decompression ({table_result.decompression} min)"
        )
    if remainder > 0:
        stops.append(
            DiveSegment(FINAL_STOP_DEPTH, FINAL_STOP_DEPTH, float(remainder), final_stop_gas)
        )
    return stops
