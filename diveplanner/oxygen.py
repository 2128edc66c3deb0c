"""
Oxygen exposure estimates (CNS % and OTU).

Coarse per-segment approximations, vectorized across segments with numpy:
- CNS: two-bucket rate, 0.5 %/min above ppO2 1.4 bar, 0.25 %/min otherwise.
  This is not the NOAA exposure-limit curve.
- OTU: duration * ppO2 for ppO2 above 0.5 bar, nothing below.

Each segment is evaluated at its mean depth.
"""

from typing import Sequence, Tuple

import numpy as np

from .profile import DiveSegment

P_SURFACE = 1.01325  # bar

CNS_PPO2_THRESHOLD = 1.4  # bar
CNS_RATE_HIGH = 0.5  # %/min above threshold
CNS_RATE_LOW = 0.25  # %/min at or below threshold

OTU_PPO2_THRESHOLD = 0.5  # bar


def _segment_arrays(
    segments: Sequence[DiveSegment], surface_pressure: float
) -> Tuple[np.ndarray, np.ndarray]:
    """(durations, ppO2) arrays, one element per segment."""
    durations = np.array([s.duration for s in segments], dtype=float)
    mean_depths = np.array([s.mean_depth for s in segments], dtype=float)
    f_o2 = np.array([s.gas.f_o2 for s in segments], dtype=float)
    pressures = mean_depths / 10.0 + surface_pressure
    return durations, f_o2 * pressures


def segment_ppo2(
    segments: Sequence[DiveSegment], surface_pressure: float = P_SURFACE
) -> np.ndarray:
    """ppO2 (bar) at the mean depth of each segment."""
    if not segments:
        return np.zeros(0)
    return _segment_arrays(segments, surface_pressure)[1]


def calculate_cns(
    segments: Sequence[DiveSegment], surface_pressure: float = P_SURFACE
) -> float:
    """CNS oxygen toxicity load in percent. Not capped at 100."""
    if not segments:
        return 0.0
    durations, ppo2 = _segment_arrays(segments, surface_pressure)
    rates = np.where(ppo2 > CNS_PPO2_THRESHOLD, CNS_RATE_HIGH, CNS_RATE_LOW)
    return float(np.sum(durations * rates))


def calculate_otu(
    segments: Sequence[DiveSegment], surface_pressure: float = P_SURFACE
) -> float:
    """Pulmonary oxygen toxicity units."""
    if not segments:
        return 0.0
    durations, ppo2 = _segment_arrays(segments, surface_pressure)
    return float(np.sum(np.where(ppo2 > OTU_PPO2_THRESHOLD, durations * ppo2, 0.0)))
