"""ISO 1996-1:2016 basic quantities and assessment procedures."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict

from iso1996._energy import db_to_energy, divide, log10, sum_energy
from iso1996.exceptions import InvalidMeasurementTimeError

logger = logging.getLogger(__name__)


class Constants(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference_sound_pressure: float = 20e-6  # Pa, 3.1.1
    reference_time: float = 1.0  # s, 3.1.8
    day_duration: float = 12.0  # h, Annex C.2
    evening_duration: float = 4.0
    night_duration: float = 8.0
    evening_penalty: float = 5.0  # dB, Annex C.2
    night_penalty: float = 10.0


CONSTANTS = Constants()


class DayEveningNightSettings(BaseModel):
    """Period durations (hours) and penalties (dB) used to build L_den."""

    model_config = ConfigDict(frozen=True)

    day_duration: float = CONSTANTS.day_duration
    evening_duration: float = CONSTANTS.evening_duration
    night_duration: float = CONSTANTS.night_duration
    evening_penalty: float = CONSTANTS.evening_penalty
    night_penalty: float = CONSTANTS.night_penalty

    @property
    def total_duration(self) -> float:
        return self.day_duration + self.evening_duration + self.night_duration


DEFAULT_DEN_SETTINGS = DayEveningNightSettings()


def sound_pressure_level(p):
    """L_p = 10 log10(p² / p0²), section 3.1.2."""
    p = np.asarray(p, dtype=np.float64)
    return 10.0 * log10(p**2 / CONSTANTS.reference_sound_pressure**2)


def sound_exposure_level(p_a):
    """
    L_AE = 10 log10((1/t0) p_A² / p0²), section 3.1.8.

    Single-value form: the caller supplies the already integrated A-weighted
    pressure, no time integration is done here.
    """
    p_a = np.asarray(p_a, dtype=np.float64)
    return 10.0 * log10((1.0 / CONSTANTS.reference_time) * p_a**2 / CONSTANTS.reference_sound_pressure**2)


def equivalent_continuous_sound_level(levels: Sequence[float], measurement_time: float):
    """
    L_Aeq,T = 10 log10((1/T) Σ 10^(0.1 L_i)), section 3.1.7.

    Raises InvalidMeasurementTimeError when measurement_time <= 0. An empty
    set of levels gives -inf.
    """
    if measurement_time <= 0:
        raise InvalidMeasurementTimeError()
    if len(levels) == 0:
        return float("-inf")
    return 10.0 * log10(sum_energy(levels) / measurement_time)


def peak_sound_pressure_level(p_c_max):
    """L_pC,peak = 20 log10(p_Cmax / p0), section 3.1.10."""
    p_c_max = np.asarray(p_c_max, dtype=np.float64)
    return 20.0 * log10(p_c_max / CONSTANTS.reference_sound_pressure)


def _resolve_den_settings(settings: Optional[DayEveningNightSettings], **overrides) -> DayEveningNightSettings:
    base = settings if settings is not None else DEFAULT_DEN_SETTINGS
    updates = {name: float(value) for name, value in overrides.items() if value is not None}
    if not updates:
        return base
    return base.model_copy(update=updates)


def day_evening_night_level(
    l_day: float,
    l_evening: float,
    l_night: float,
    day_duration: Optional[float] = None,
    evening_duration: Optional[float] = None,
    night_duration: Optional[float] = None,
    evening_penalty: Optional[float] = None,
    night_penalty: Optional[float] = None,
    settings: Optional[DayEveningNightSettings] = None,
) -> float:
    """
    Day-evening-night level L_den, Annex C.2.

    L_den = 10 log10((t_d 10^(L_day/10) + t_e 10^((L_evening + P_e)/10)
                      + t_n 10^((L_night + P_n)/10)) / (t_d + t_e + t_n))

    Keyword overrides take precedence over ``settings``; anything left
    unset falls back to 12/4/8 hours and 5/10 dB penalties. The sum is
    normalised by the total of the durations actually used, not by 24.
    """
    cfg = _resolve_den_settings(
        settings,
        day_duration=day_duration,
        evening_duration=evening_duration,
        night_duration=night_duration,
        evening_penalty=evening_penalty,
        night_penalty=night_penalty,
    )
    if cfg is not DEFAULT_DEN_SETTINGS:
        logger.debug("L_den with non-default settings: %s", cfg.model_dump())

    term_day = cfg.day_duration * db_to_energy(l_day)
    term_evening = cfg.evening_duration * db_to_energy(l_evening + cfg.evening_penalty)
    term_night = cfg.night_duration * db_to_energy(l_night + cfg.night_penalty)
    return 10.0 * log10(divide(term_day + term_evening + term_night, cfg.total_duration))


def tonal_adjustment_factor(is_audible: bool = False, is_prominent: bool = False) -> float:
    """K_T per Annex D.3: 6 dB prominent, 3 dB clearly audible, otherwise 0."""
    if not is_audible:
        return 0.0
    if is_prominent:
        return 6.0
    return 3.0


def impulsive_adjustment_factor(is_audible: bool = False, is_distinct: bool = False) -> float:
    """K_I per Annex D.4: 6 dB distinct, 3 dB clearly audible, otherwise 0."""
    if not is_audible:
        return 0.0
    if is_distinct:
        return 6.0
    return 3.0


def assessment_level(l_aeq_t: float, k_t: float, k_i: float) -> float:
    return l_aeq_t + k_t + k_i


def compliance_evaluation(assessment_level: float, noise_limit: float, uncertainty: float) -> bool:
    """True when the limit is exceeded, i.e. L_r > limit + uncertainty (section 9.2)."""
    return bool(assessment_level > noise_limit + uncertainty)
