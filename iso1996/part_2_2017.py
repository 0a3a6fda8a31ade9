"""ISO 1996-2:2017 determination of sound pressure levels."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict

from iso1996._energy import log10
from iso1996.exceptions import UncertainMeasurementError

logger = logging.getLogger(__name__)


class Constants(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_background_level_difference: float = 3.0  # dB, 6.3
    background_correction_threshold: float = 10.0  # dB, 6.3


CONSTANTS = Constants()


def background_noise_correction(l_total: float, l_background: float) -> float:
    """
    Background noise correction K1 = -10 log10(1 - 10^(-0.1 ΔL)), section 6.3 / Annex D.

    ΔL = l_total - l_background. Raises UncertainMeasurementError when
    ΔL <= 3 dB; returns 0 when ΔL >= 10 dB.
    """
    delta_l = l_total - l_background

    if delta_l <= CONSTANTS.min_background_level_difference:
        raise UncertainMeasurementError(CONSTANTS.min_background_level_difference)
    if delta_l >= CONSTANTS.background_correction_threshold:
        logger.debug("ΔL = %.2f dB, background correction not needed", delta_l)
        return 0.0
    return float(-10.0 * log10(1.0 - 10.0 ** (-0.1 * delta_l)))


def atmospheric_absorption_correction(attenuation_coefficient, distance):
    """A_atm = α d (dB), section 7.3 / Annex A."""
    return attenuation_coefficient * distance


def measurement_uncertainty(components: Sequence[float]) -> float:
    """Combined standard uncertainty sqrt(Σ u_i²), section 9."""
    values = np.asarray(components, dtype=np.float64)
    return float(np.sqrt(np.sum(values**2)))
