"""ISO 1996 environmental noise formulas, one module per standard revision.

Current: ``part_1_2016``, ``part_2_2017``.
Withdrawn: ``withdrawn.part_1_2003``, ``withdrawn.part_2_2007``, ``withdrawn.part_3_1987``.
Descriptor taxonomy (ISO 1996-1:2003): ``definitions``.
"""

import logging

from . import definitions, part_1_2016, part_2_2017, withdrawn
from .exceptions import ISO1996Error, InvalidMeasurementTimeError, UncertainMeasurementError

__version__ = "2.0.2"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ISO1996Error",
    "InvalidMeasurementTimeError",
    "UncertainMeasurementError",
    "definitions",
    "part_1_2016",
    "part_2_2017",
    "withdrawn",
]
