import math
import warnings

import numpy as np

from iso1996 import _energy


def test_sum_energy_two_equal_levels():
    assert abs(10.0 * math.log10(_energy.sum_energy([50.0, 50.0])) - 53.0103) < 1e-3


def test_divide_by_zero_is_inf_or_nan_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert _energy.divide(1.0, 0.0) == math.inf
        assert math.isnan(_energy.divide(0.0, 0.0))
        assert _energy.log10(0.0) == -math.inf


def test_divide_broadcasts():
    assert np.allclose(_energy.divide([2.0, 4.0], 2.0), [1.0, 2.0])


def test_no_energy_to_db_helper():
    assert not hasattr(_energy, "energy_to_db")
