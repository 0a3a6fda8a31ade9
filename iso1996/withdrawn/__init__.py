"""Withdrawn revisions of ISO 1996, kept for reassessment of older reports."""

from . import part_1_2003, part_2_2007, part_3_1987

__all__ = ["part_1_2003", "part_2_2007", "part_3_1987"]
