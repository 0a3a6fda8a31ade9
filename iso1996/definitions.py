"""
Environmental noise descriptors as defined in ISO 1996-1:2003.

Weighting types, level metrics, periods of day with their penalties,
adjustment and sound event types, and the fixed registry of canonical
acoustic descriptors built from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class WeightingType(str, Enum):
    A = "A"
    C = "C"
    Z = "Z"  # flat

    def __str__(self) -> str:
        return self.value


class LevelMetric(str, Enum):
    LAeq = "LAeq"
    LAE = "LAE"
    LAmax = "LAmax"
    LCpeak = "LCpeak"
    LR = "LR"
    Lden = "Lden"
    Lnight = "Lnight"

    def __str__(self) -> str:
        return self.value


_PERIOD_HOURS = {
    "day": tuple(range(7, 19)),
    "evening": tuple(range(19, 23)),
    "night": (23, 0, 1, 2, 3, 4, 5, 6),
}

_PERIOD_PENALTY_DB = {
    "day": 0,
    "evening": 5,
    "night": 10,
}


class PeriodOfDay(str, Enum):
    DAY = "day"
    EVENING = "evening"
    NIGHT = "night"

    def __str__(self) -> str:
        return self.value

    @property
    def hours(self) -> Tuple[int, ...]:
        return _PERIOD_HOURS[self.value]

    @property
    def penalty_db(self) -> int:
        return _PERIOD_PENALTY_DB[self.value]

    @classmethod
    def for_hour(cls, hour: int) -> "PeriodOfDay":
        for period in cls:
            if hour in period.hours:
                return period
        raise ValueError(f"Hour out of range 0-23: {hour}")


class AdjustmentType(str, Enum):
    IMPULSIVENESS = "impulsiveness"
    TONALITY = "tonality"
    LOW_FREQUENCY = "low_frequency"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class SoundEventType(str, Enum):
    SINGLE = "single_event"
    REPETITIVE = "repetitive_event"
    CONTINUOUS = "continuous"
    IMPULSIVE = "impulsive"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AcousticDescriptor:
    metric: LevelMetric
    weighting: Optional[WeightingType]
    description: str

    def __str__(self) -> str:
        weighting = "" if self.weighting is None else str(self.weighting)
        return f"{self.metric}({weighting}) – {self.description}"


DESCRIPTORS: Tuple[AcousticDescriptor, ...] = (
    AcousticDescriptor(LevelMetric.LAeq, WeightingType.A, "Equivalent continuous A-weighted sound level"),
    AcousticDescriptor(LevelMetric.LAE, WeightingType.A, "Sound exposure level (A-weighted)"),
    AcousticDescriptor(LevelMetric.LAmax, WeightingType.A, "Maximum A-weighted sound level"),
    AcousticDescriptor(LevelMetric.LCpeak, WeightingType.C, "Peak C-weighted sound level"),
    AcousticDescriptor(LevelMetric.LR, None, "Rating level with adjustments"),
    AcousticDescriptor(LevelMetric.Lden, WeightingType.A, "Day-Evening-Night level"),
    AcousticDescriptor(LevelMetric.Lnight, WeightingType.A, "Night noise level"),
)


def descriptor_for(metric: LevelMetric) -> AcousticDescriptor:
    metric = LevelMetric(metric)
    return next(d for d in DESCRIPTORS if d.metric is metric)
