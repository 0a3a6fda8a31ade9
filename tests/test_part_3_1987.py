import math

import pytest

from iso1996 import part_1_2016
from iso1996.withdrawn import part_3_1987 as p3


def test_tonal_adjustment_table_1():
    assert p3.tonal_adjustment_factor(15) == 6.0
    assert p3.tonal_adjustment_factor(20) == 6.0
    assert p3.tonal_adjustment_factor(14) == 5.0
    assert p3.tonal_adjustment_factor(12) == 5.0
    assert p3.tonal_adjustment_factor(10) == 5.0
    assert p3.tonal_adjustment_factor(9) == 2.0
    assert p3.tonal_adjustment_factor(7) == 2.0
    assert p3.tonal_adjustment_factor(5) == 2.0
    assert p3.tonal_adjustment_factor(4.9) == 0.0


def test_tonal_adjustment_literal_table_gaps():
    assert p3.tonal_adjustment_factor(14.5) == 0.0
    assert p3.tonal_adjustment_factor(9.5) == 0.0


def test_tonal_adjustment_continuous_closes_gaps():
    assert p3.tonal_adjustment_factor_continuous(14.5) == 5.0
    assert p3.tonal_adjustment_factor_continuous(9.5) == 2.0
    for delta_l in (4.9, 5, 7, 12, 15, 20):
        assert p3.tonal_adjustment_factor_continuous(delta_l) == p3.tonal_adjustment_factor(delta_l)


def test_impulsive_adjustment_factor():
    assert p3.impulsive_adjustment_factor(130.0) == 6.0
    assert p3.impulsive_adjustment_factor(135.0) == 6.0
    assert p3.impulsive_adjustment_factor(125.0, is_highly_annoying=True) == 6.0
    assert p3.impulsive_adjustment_factor(125.0) == 0.0
    assert p3.impulsive_adjustment_factor(129.99) == 0.0


def test_assessment_level():
    assert p3.assessment_level(57.8, 3.0, 2.0) == pytest.approx(62.8)


def test_compliance_evaluation():
    assert p3.compliance_evaluation(65.0, 62.0, 2.0) is True
    assert p3.compliance_evaluation(63.9, 62.0, 2.0) is False
    assert p3.compliance_evaluation(64.0, 62.0, 2.0) is False


def test_functions_are_separate_from_current_revision():
    assert p3.assessment_level is not part_1_2016.assessment_level
    assert p3.compliance_evaluation is not part_1_2016.compliance_evaluation


def test_time_period_conversion_day_night():
    expected = 10.0 * math.log10((16 * 10 ** 6.5 + 8 * 10 ** 5.5) / 24.0)
    periods = [(65.0, 16), (55.0, 8)]
    assert abs(p3.time_period_conversion(periods) - expected) < 1e-3


def test_time_period_conversion_accepts_mappings_and_models():
    as_dicts = [{"level": 60.0, "duration": 8}, {"level": 65.0, "duration": 8}, {"level": 70.0, "duration": 8}]
    as_models = [p3.PeriodLevel(level=d["level"], duration=d["duration"]) for d in as_dicts]
    expected = 10.0 * math.log10(sum(8 * 10 ** (l / 10.0) for l in (60.0, 65.0, 70.0)) / 24.0)
    assert abs(p3.time_period_conversion(as_dicts) - expected) < 1e-3
    assert abs(p3.time_period_conversion(as_models) - expected) < 1e-3


def test_time_period_conversion_custom_total_period():
    out = p3.time_period_conversion([(60.0, 8.0)], total_period=8.0)
    assert abs(out - 60.0) < 1e-9


def test_time_period_conversion_empty_is_minus_inf():
    assert p3.time_period_conversion([]) == -math.inf


def test_time_period_conversion_zero_total_period_is_inf():
    assert p3.time_period_conversion([(60.0, 8.0)], total_period=0.0) == math.inf
