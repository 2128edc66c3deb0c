"""Metric/imperial conversions for depth, pressure and gas volume."""

METERS_TO_FEET = 3.28084
BAR_TO_PSI = 14.5038
LITER_TO_CUFT = 0.035315


def meters_to_feet(meters: float) -> float:
    return meters * METERS_TO_FEET


def feet_to_meters(feet: float) -> float:
    return feet / METERS_TO_FEET


def bar_to_psi(bar: float) -> float:
    return bar * BAR_TO_PSI


def psi_to_bar(psi: float) -> float:
    return psi / BAR_TO_PSI


def liters_to_cuft(liters: float) -> float:
    return liters * LITER_TO_CUFT


def cuft_to_liters(cuft: float) -> float:
    return cuft / LITER_TO_CUFT
