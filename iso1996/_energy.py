from __future__ import annotations

import numpy as np


def log10(x):
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log10(np.asarray(x, dtype=np.float64))[()]


def divide(a, b):
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64))[()]


def db_to_energy(db):
    return np.power(10.0, np.asarray(db, dtype=np.float64) / 10.0)


def sum_energy(levels_db) -> float:
    return float(np.sum(db_to_energy(levels_db)))
