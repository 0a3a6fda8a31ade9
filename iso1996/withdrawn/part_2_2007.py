"""ISO 1996-2:2007 determination of sound pressure levels (withdrawn)."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from iso1996.exceptions import UncertainMeasurementError

logger = logging.getLogger(__name__)


class Constants(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_background_level_difference: float = 3.0  # dB, 6.3
    background_correction_threshold: float = 10.0  # dB, 6.3


CONSTANTS = Constants()


def background_noise_correction(l_total: float, l_background: float) -> float:
    delta_l = l_total - l_background

    if delta_l <= CONSTANTS.min_background_level_difference:
        raise UncertainMeasurementError(CONSTANTS.min_background_level_difference)
    elif delta_l >= CONSTANTS.background_correction_threshold:
        logger.debug("ΔL = %.2f dB is above %.1f dB, K1 = 0", delta_l, CONSTANTS.background_correction_threshold)
        return 0.0
    else:
        return -10.0 * math.log10(1.0 - 10.0 ** (-0.1 * delta_l))


def atmospheric_absorption_correction(attenuation_coefficient, propagation_distance):
    return attenuation_coefficient * propagation_distance


def measurement_uncertainty(uncertainty_components: Sequence[float]) -> float:
    return math.sqrt(sum(c**2 for c in uncertainty_components))
