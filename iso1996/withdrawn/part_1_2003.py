"""ISO 1996-1:2003 basic quantities and assessment procedures (withdrawn).

Level formulas only. Day-evening-night levels, adjustment factors and the
assessment level live in :mod:`iso1996.part_1_2016`.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict

from iso1996._energy import divide, log10, sum_energy
from iso1996.exceptions import InvalidMeasurementTimeError


class Constants(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference_sound_pressure: float = 20e-6  # Pa, 3.1
    reference_time: float = 1.0  # s, 3.9


CONSTANTS = Constants()


def _pressure_ratio_squared(p):
    p = np.asarray(p, dtype=np.float64)
    return p**2 / CONSTANTS.reference_sound_pressure**2


def sound_pressure_level(p):
    return 10.0 * log10(_pressure_ratio_squared(p))


def a_weighted_sound_pressure_level(p_a, measurement_time: float = 1.0):
    """L_A = 10 log10((1/T) p_A² / p0²), section 3.2."""
    return 10.0 * log10(divide(_pressure_ratio_squared(p_a), measurement_time))


def sound_exposure_level(p_a):
    return 10.0 * log10((1.0 / CONSTANTS.reference_time) * _pressure_ratio_squared(p_a))


def equivalent_continuous_sound_level(levels: Sequence[float], measurement_time: float):
    if measurement_time <= 0:
        raise InvalidMeasurementTimeError()
    if len(levels) == 0:
        return float("-inf")
    return 10.0 * log10(sum_energy(levels) / measurement_time)


def peak_sound_pressure_level(p_c_max):
    """C-weighted peak level L_Cpeak = 20 log10(p_Cmax / p0), section 3.10."""
    p_c_max = np.asarray(p_c_max, dtype=np.float64)
    return 20.0 * log10(p_c_max / CONSTANTS.reference_sound_pressure)
