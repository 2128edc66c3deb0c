"""
Unit tests for diveplanner/oxygen.py

Tests cover:
- ppO2 at segment mean depth
- CNS two-bucket rate
- OTU threshold
"""

import pytest

from diveplanner.gases import AIR, Gas
from diveplanner.oxygen import P_SURFACE, calculate_cns, calculate_otu, segment_ppo2
from diveplanner.profile import DiveSegment

OXYGEN = Gas(f_o2=1.0)


class TestSegmentPpo2:
    def test_mean_depth(self):
        """A 0-30m leg is evaluated at 15m."""
        ppo2 = segment_ppo2([DiveSegment(0, 30, 2, AIR)])
        assert ppo2[0] == pytest.approx(0.21 * (1.5 + P_SURFACE))

    def test_empty(self):
        assert len(segment_ppo2([])) == 0


class TestCns:
    """CNS oxygen toxicity percentage."""

    def test_air_18m_40min(self):
        """ppO2 ~0.59 is in the low bucket: 40 * 0.25 = 10%."""
        assert calculate_cns([DiveSegment(18, 18, 40, AIR)]) == pytest.approx(10.0)

    def test_high_bucket(self):
        """Oxygen at 6m (ppO2 ~1.61) accrues 0.5%/min."""
        assert calculate_cns([DiveSegment(6, 6, 20, OXYGEN)]) == pytest.approx(10.0)

    def test_mixed_segments(self):
        segments = [DiveSegment(18, 18, 40, AIR), DiveSegment(6, 6, 20, OXYGEN)]
        assert calculate_cns(segments) == pytest.approx(20.0)

    def test_empty(self):
        assert calculate_cns([]) == 0.0

    def test_returns_float(self):
        assert isinstance(calculate_cns([DiveSegment(18, 18, 40, AIR)]), float)


class TestOtu:
    """Pulmonary oxygen toxicity units."""

    def test_air_18m_40min(self):
        expected = 40 * 0.21 * (1.8 + P_SURFACE)
        assert calculate_otu([DiveSegment(18, 18, 40, AIR)]) == pytest.approx(expected)

    def test_below_threshold_is_zero(self):
        """Air at 6m has ppO2 ~0.34, below 0.5 bar."""
        assert calculate_otu([DiveSegment(6, 6, 60, AIR)]) == 0.0

    def test_surface_pressure_parameter(self):
        segments = [DiveSegment(18, 18, 40, AIR)]
        assert calculate_otu(segments, surface_pressure=1.0) == pytest.approx(40 * 0.21 * 2.8)

    def test_empty(self):
        assert calculate_otu([]) == 0.0
