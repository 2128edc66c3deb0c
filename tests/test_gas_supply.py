"""
Unit tests for diveplanner/gas_supply.py
"""

import math

import pytest

from diveplanner.errors import InvalidInputError
from diveplanner.gas_supply import (
    GasSupplyResult,
    calculate_gas_supply,
    consumption_rates,
    depth_adjusted_bottom_time,
    depth_consumption_fraction,
)


class TestCalculateGasSupply:
    def test_standard_cylinder(self):
        """12 L at 200 bar breathed at 20 L/min lasts 120 min."""
        result = calculate_gas_supply(12, 200, 20)
        assert result.total_volume == 2400
        assert result.available_time == 120

    def test_available_time_floors(self):
        """2000 L / 30 L/min = 66.7 -> 66 whole minutes."""
        assert calculate_gas_supply(10, 200, 30).available_time == 66

    def test_empty_supply(self):
        result = calculate_gas_supply(0, 200, 20)
        assert result.total_volume == 0
        assert result.available_time == 0

    @pytest.mark.parametrize("rate", [0, -5])
    def test_rate_must_be_positive(self, rate):
        with pytest.raises(InvalidInputError, match="consumption_rate must be positive"):
            calculate_gas_supply(12, 200, rate)

    def test_negative_volume_or_pressure(self):
        with pytest.raises(InvalidInputError):
            calculate_gas_supply(-12, 200, 20)
        with pytest.raises(InvalidInputError):
            calculate_gas_supply(12, -200, 20)


class TestConsumptionRates:
    def test_rates(self):
        rates = consumption_rates()
        assert rates[0] == 10
        assert rates[-1] == 120
        assert len(rates) == 12


class TestDepthAdjustment:
    """Supply fraction lost to ambient pressure."""

    def test_tabulated_depths(self):
        assert depth_consumption_fraction(0) == 0.0
        assert depth_consumption_fraction(10) == 0.50
        assert depth_consumption_fraction(50) == 0.84

    def test_rounds_up_to_next_depth(self):
        """12m reads the 15m row."""
        assert depth_consumption_fraction(12) == 0.60

    def test_beyond_table(self):
        with pytest.raises(InvalidInputError, match="50m"):
            depth_consumption_fraction(51)

    def test_bottom_time_at_depth(self):
        supply = GasSupplyResult(total_volume=2400, available_time=120)
        assert depth_adjusted_bottom_time(supply, 10) == 60
        assert depth_adjusted_bottom_time(supply, 0) == 120
        # 120 * 0.25 = 30
        assert depth_adjusted_bottom_time(supply, 30) == 30


class TestNonFiniteSupply:
    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_rate(self, value):
        with pytest.raises(InvalidInputError, match="consumption_rate"):
            calculate_gas_supply(12, 200, value)

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_volume_and_pressure(self, value):
        with pytest.raises(InvalidInputError, match="supply_volume"):
            calculate_gas_supply(value, 200, 20)
        with pytest.raises(InvalidInputError, match="supply_pressure"):
            calculate_gas_supply(12, value, 20)

    def test_non_finite_depth(self):
        with pytest.raises(InvalidInputError):
            depth_consumption_fraction(math.nan)
