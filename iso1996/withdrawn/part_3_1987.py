"""ISO 1996-3:1987 application to noise limits (withdrawn)."""

from __future__ import annotations

from typing import Iterable, Mapping, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict

from iso1996._energy import db_to_energy, divide, log10


class Constants(BaseModel):
    model_config = ConfigDict(frozen=True)

    impulse_correction_threshold: float = 130.0  # dB L_Cpeak, 7.2
    standard_24h_period: float = 24.0  # h, Annex A


CONSTANTS = Constants()

# Table 1: (lower ΔL, upper ΔL, K_T). Both bounds inclusive.
TONAL_ADJUSTMENT_TABLE = (
    (15.0, float("inf"), 6.0),
    (10.0, 14.0, 5.0),
    (5.0, 9.0, 2.0),
)


class PeriodLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: float
    duration: float  # hours


PeriodInput = Union[PeriodLevel, Mapping[str, float], Tuple[float, float]]


def tonal_adjustment_factor(delta_l: float) -> float:
    """
    K_T from Table 1 for the tone-to-background difference ``delta_l``.

    Rows are matched literally as listed in the table (15 and up, 10 to 14,
    5 to 9), so fractional values inside 9..10 or 14..15 match no row and
    give 0 dB. See :func:`tonal_adjustment_factor_continuous` for the
    gap-free reading.
    """
    for lower, upper, k_t in TONAL_ADJUSTMENT_TABLE:
        if lower <= delta_l <= upper:
            return k_t
    return 0.0


def tonal_adjustment_factor_continuous(delta_l: float) -> float:
    """K_T with each Table 1 row extended up to the next one (no gaps)."""
    if delta_l >= 15.0:
        return 6.0
    if delta_l >= 10.0:
        return 5.0
    if delta_l >= 5.0:
        return 2.0
    return 0.0


def impulsive_adjustment_factor(l_cpeak: float, is_highly_annoying: bool = False) -> float:
    """K_I = 6 dB when L_Cpeak >= 130 dB or the noise is judged highly annoying (7.2)."""
    if l_cpeak >= CONSTANTS.impulse_correction_threshold or is_highly_annoying:
        return 6.0
    return 0.0


def assessment_level(l_aeq_t: float, k_t: float, k_i: float) -> float:
    """L_r = L_AeqT + K_T + K_I, section 8."""
    return l_aeq_t + k_t + k_i


def compliance_evaluation(l_r: float, noise_limit: float, uncertainty: float) -> bool:
    return bool(l_r > noise_limit + uncertainty)


def _period_tuple(period: PeriodInput) -> Tuple[float, float]:
    if isinstance(period, PeriodLevel):
        return period.level, period.duration
    if isinstance(period, Mapping):
        return float(period["level"]), float(period["duration"])
    level, duration = period
    return float(level), float(duration)


def time_period_conversion(period_levels: Iterable[PeriodInput], total_period: float = CONSTANTS.standard_24h_period):
    """
    Combine period levels into one equivalent level over ``total_period`` hours (Annex A).

    L = 10 log10(Σ t_i 10^(L_i/10) / T). An empty input gives -inf.
    """
    pairs = np.asarray([_period_tuple(p) for p in period_levels], dtype=np.float64).reshape(-1, 2)
    energy_sum = float(np.sum(pairs[:, 1] * db_to_energy(pairs[:, 0])))
    return 10.0 * log10(divide(energy_sum, total_period))
