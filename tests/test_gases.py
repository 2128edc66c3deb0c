"""
Unit tests for diveplanner/gases.py and diveplanner/units.py
"""

import dataclasses

import pytest

from diveplanner.errors import InvalidInputError
from diveplanner.gases import AIR, GAS_MIXES, Gas, calculate_mod, calculate_ppo2, get_gas
from diveplanner.units import (
    bar_to_psi,
    cuft_to_liters,
    feet_to_meters,
    liters_to_cuft,
    meters_to_feet,
    psi_to_bar,
)


class TestGas:
    """Gas validation and derived values."""

    def test_air(self):
        assert AIR.f_o2 == 0.21
        assert AIR.f_he == 0.0
        assert AIR.f_n2 == pytest.approx(0.79)
        assert AIR.label == "Air"

    def test_trimix(self):
        gas = Gas(f_o2=0.18, f_he=0.45)
        assert gas.f_n2 == pytest.approx(0.37)
        assert gas.label == "Trimix 18/45"

    def test_labels(self):
        assert Gas(f_o2=0.32).label == "EAN32"
        assert Gas(f_o2=1.0).label == "Oxygen"

    @pytest.mark.parametrize("f_o2", [0.0, -0.1, 1.1])
    def test_invalid_oxygen(self, f_o2):
        with pytest.raises(InvalidInputError, match="f_o2"):
            Gas(f_o2=f_o2)

    def test_invalid_helium(self):
        with pytest.raises(InvalidInputError, match="f_he"):
            Gas(f_o2=0.21, f_he=-0.1)

    def test_fractions_over_one(self):
        with pytest.raises(InvalidInputError, match="must not exceed 1.0"):
            Gas(f_o2=0.5, f_he=0.6)

    def test_is_value_type(self):
        assert Gas(f_o2=0.21) == AIR
        with pytest.raises(dataclasses.FrozenInstanceError):
            AIR.f_o2 = 0.32

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            Gas(f_o2=2.0)


class TestGasHelpers:
    def test_ppo2(self):
        assert calculate_ppo2(AIR, 30) == pytest.approx(0.84)
        assert AIR.ppo2(0) == pytest.approx(0.21)

    def test_mod(self):
        assert calculate_mod(AIR, 1.4) == pytest.approx(56.667, abs=0.001)
        assert calculate_mod(GAS_MIXES["nitrox32"], 1.4) == pytest.approx(33.75)
        assert GAS_MIXES["oxygen"].max_operating_depth(1.6) == pytest.approx(6.0)

    def test_invalid_helper_input(self):
        with pytest.raises(InvalidInputError):
            calculate_mod(AIR, 0)
        with pytest.raises(InvalidInputError):
            calculate_ppo2(AIR, -1)

    def test_get_gas(self):
        assert get_gas("air") is AIR
        assert get_gas("Nitrox32") == Gas(f_o2=0.32)

    def test_get_unknown_gas(self):
        with pytest.raises(InvalidInputError, match="Unknown gas mix"):
            get_gas("heliox")


class TestUnits:
    def test_depth(self):
        assert meters_to_feet(10) == pytest.approx(32.8084)
        assert feet_to_meters(meters_to_feet(30)) == pytest.approx(30)

    def test_pressure(self):
        assert bar_to_psi(200) == pytest.approx(2900.76)
        assert psi_to_bar(14.5038) == pytest.approx(1.0)

    def test_volume(self):
        assert liters_to_cuft(2400) == pytest.approx(84.756)
        assert cuft_to_liters(0.035315) == pytest.approx(1.0)
