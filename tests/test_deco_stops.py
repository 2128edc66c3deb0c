"""
Unit tests for diveplanner/deco_stops.py
"""

import pytest

from diveplanner.dciem_tables import DCIEM_TABLES
from diveplanner.deco_stops import FINAL_STOP_DEPTH, compose_decompression, residual_minutes
from diveplanner.errors import InvalidInputError
from diveplanner.gases import AIR, Gas
from diveplanner.profile import DiveSegment
from diveplanner.tables import DiveTableResult, calculate_dive_table, named_stop_segments

NITROX32 = Gas(f_o2=0.32)


class TestComposeDecompression:
    """Named stops plus the final 3m stop."""

    def test_30m_30min(self):
        """5 min at 6m, the other 10 min at 3m."""
        stops = compose_decompression(calculate_dive_table(30, 30), final_stop_gas=AIR)
        assert [(s.start_depth, s.end_depth, s.duration) for s in stops] == [
            (6.0, 6.0, 5.0),
            (3.0, 3.0, 10.0),
        ]

    def test_named_stops_cover_total(self):
        """18m/60 min: the 6m stop is the whole obligation, no 3m stop."""
        stops = compose_decompression(calculate_dive_table(18, 60), final_stop_gas=AIR)
        assert [(s.start_depth, s.duration) for s in stops] == [(6.0, 5.0)]

    def test_no_named_stops(self):
        """12m/20 min: 1 min, all of it at 3m."""
        stops = compose_decompression(calculate_dive_table(12, 20), final_stop_gas=AIR)
        assert [(s.start_depth, s.duration) for s in stops] == [(FINAL_STOP_DEPTH, 1.0)]

    def test_no_decompression(self):
        """21m/10 min has a zero total and no stops."""
        assert compose_decompression(calculate_dive_table(21, 10), final_stop_gas=AIR) == []

    def test_final_stop_gas(self):
        """Named stops keep the table gas; the 3m stop uses the supplied gas."""
        stops = compose_decompression(calculate_dive_table(30, 60), final_stop_gas=NITROX32)
        assert [s.gas for s in stops[:-1]] == [AIR, AIR]
        assert stops[-1].start_depth == FINAL_STOP_DEPTH
        assert stops[-1].gas == NITROX32

    def test_every_row_sums_to_total(self):
        """Composed durations equal the row total and depths strictly decrease."""
        for depth, table in DCIEM_TABLES.items():
            for time, entry in table.items():
                result = DiveTableResult(
                    residual_group=entry.group,
                    decompression=entry.total_deco,
                    decompression_stops=named_stop_segments(entry),
                    reference_depth=depth,
                    breakpoint=time,
                    entry=entry,
                )
                stops = compose_decompression(result, final_stop_gas=AIR)
                assert sum(s.duration for s in stops) == entry.total_deco, f"{depth}m/{time}min"
                depths = [s.start_depth for s in stops]
                assert all(a > b for a, b in zip(depths, depths[1:])), f"{depth}m/{time}min"
                assert all(s.duration > 0 for s in stops)

    def test_named_stops_exceeding_total_rejected(self):
        result = DiveTableResult(
            residual_group="X",
            decompression=5,
            decompression_stops=[DiveSegment(6.0, 6.0, 10.0, AIR)],
        )
        with pytest.raises(InvalidInputError, match="exceed"):
            compose_decompression(result, final_stop_gas=AIR)


class TestResidualMinutes:
    def test_residual(self):
        assert residual_minutes(calculate_dive_table(30, 30)) == 10
        assert residual_minutes(calculate_dive_table(18, 60)) == 0
