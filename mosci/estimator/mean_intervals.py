"""Asymptotic confidence intervals for the mean of a test condition.

Both estimators centre a symmetric interval on the MOS with half-width
``q * s / sqrt(n)``. They are not clamped to the rating scale.
"""

import math

from mosci.estimator.distributions import inverse_normal, inverse_student_t
from mosci.estimator.interval_models import CIBounds, RowStatistics


def _symmetric_interval(row: RowStatistics, quantile: float) -> CIBounds:
    half_width = quantile * row.std / math.sqrt(row.n)
    return CIBounds(lower=row.mos - half_width, upper=row.mos + half_width)


def normal_interval(row: RowStatistics, alpha: float) -> CIBounds:
    """Normal approximation: MOS -/+ z * s / sqrt(n)."""
    return _symmetric_interval(row, inverse_normal(1 - alpha / 2))


def student_t_interval(row: RowStatistics, alpha: float) -> CIBounds:
    """Student-t approximation with n - 1 degrees of freedom.

    Wider than the normal interval for small n and converges to it as n grows.
    """
    return _symmetric_interval(row, inverse_student_t(1 - alpha / 2, row.n - 1))
