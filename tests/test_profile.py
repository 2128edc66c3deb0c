"""
Unit tests for diveplanner/profile.py
"""

import math

import pytest

from diveplanner.errors import InvalidInputError
from diveplanner.gases import AIR, Gas
from diveplanner.profile import (
    DiveSegment,
    ProfileBuilder,
    bottom_time,
    max_depth,
    validate_segments,
)


class TestDiveSegment:
    def test_depths(self):
        seg = DiveSegment(0, 30, 2)
        assert seg.mean_depth == 15
        assert seg.max_depth == 30
        assert seg.gas == AIR

    def test_negative_depth(self):
        with pytest.raises(InvalidInputError, match="non-negative"):
            DiveSegment(-1, 10, 5)

    @pytest.mark.parametrize("duration", [0, -2])
    def test_non_positive_duration(self, duration):
        with pytest.raises(InvalidInputError, match="duration must be positive"):
            DiveSegment(10, 10, duration)

    def test_gas_type(self):
        with pytest.raises(InvalidInputError, match="gas"):
            DiveSegment(10, 10, 5, gas=0.21)


class TestSegmentHelpers:
    def test_max_depth_and_bottom_time(self):
        segments = [DiveSegment(0, 30, 2), DiveSegment(30, 30, 20), DiveSegment(30, 18, 3)]
        assert max_depth(segments) == 30
        assert bottom_time(segments) == 25

    def test_validate_empty(self):
        with pytest.raises(InvalidInputError, match="At least one dive segment"):
            validate_segments([])

    def test_validate_returns_list(self):
        segments = (DiveSegment(10, 10, 5),)
        assert validate_segments(segments) == [DiveSegment(10, 10, 5)]


class TestProfileBuilder:
    """Square and multilevel profile shapes."""

    def test_square_without_descent(self):
        segments = ProfileBuilder().square(30, 30)
        assert segments == [DiveSegment(30, 30, 30, AIR)]

    def test_square_with_descent(self):
        """36m at 18 m/min: 2 min descent, 28 min at depth."""
        segments = ProfileBuilder(descent_rate=18).square(36, 30)
        assert len(segments) == 2
        assert segments[0] == DiveSegment(0.0, 36, 2.0, AIR)
        assert segments[1].duration == pytest.approx(28.0)
        assert bottom_time(segments) == pytest.approx(30.0)

    def test_descent_longer_than_bottom_time(self):
        with pytest.raises(InvalidInputError, match="longer than"):
            ProfileBuilder(descent_rate=10).square(40, 3)

    def test_invalid_descent_rate(self):
        with pytest.raises(InvalidInputError):
            ProfileBuilder(descent_rate=0)

    def test_multilevel(self):
        nitrox = Gas(f_o2=0.32)
        segments = ProfileBuilder().multilevel([(30, 10), (20, 15), (12, 20)], gas=nitrox)
        assert [(s.start_depth, s.duration) for s in segments] == [(30, 10), (20, 15), (12, 20)]
        assert all(s.gas == nitrox for s in segments)
        assert max_depth(segments) == 30
        assert bottom_time(segments) == 45

    def test_multilevel_empty(self):
        with pytest.raises(InvalidInputError):
            ProfileBuilder().multilevel([])


class TestNonFiniteSegments:
    """NaN and infinity never reach the table lookup."""

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_duration(self, value):
        with pytest.raises(InvalidInputError, match="duration must be positive and finite"):
            DiveSegment(30, 30, value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_depth(self, value):
        with pytest.raises(InvalidInputError, match="finite"):
            DiveSegment(value, 30, 10)
        with pytest.raises(InvalidInputError, match="finite"):
            DiveSegment(0, value, 10)

    def test_non_finite_descent_rate(self):
        with pytest.raises(InvalidInputError):
            ProfileBuilder(descent_rate=math.nan)
