"""Simultaneous confidence interval from multinomial category proportions.

Instead of collapsing a test condition to a binomial count, the ratings are
treated as a histogram over the d categories of the scale. A Bonferroni
corrected chi-square critical value ``a = chi2^-1(1 - alpha/d; 1)`` makes the
per-category intervals hold jointly with confidence 1 - alpha, and the
resulting bound on the mean is

    scim -/+ sqrt(a / n * (sum(i^2 * p_i) - scim^2)),   scim = sum(i * p_i)

over rating values i with empirical frequencies p_i.

Dependencies:
    - mosci.estimator.distributions: inverse_chi_square
"""

import math

import numpy as np

from mosci.estimator.distributions import inverse_chi_square
from mosci.estimator.interval_models import CIBounds, RowStatistics


def bonferroni_critical_value(alpha: float, num_categories: int) -> float:
    """Chi-square quantile with one degree of freedom at level alpha / d."""
    return inverse_chi_square(1 - alpha / num_categories, 1)


def simultaneous_interval(row: RowStatistics, alpha: float) -> CIBounds:
    """Simultaneous multinomial interval for the MOS, clamped to the scale.

    Example:
        >>> bounds = simultaneous_interval(row, 0.05)
        >>> bounds.lower <= row.mos <= bounds.upper
        True
    """
    scale = row.scale
    values = np.asarray(scale.categories, dtype=float)
    frequencies = row.category_counts / row.n

    a = bonferroni_critical_value(alpha, scale.num_categories)
    scim = float(np.sum(values * frequencies))
    variance = max(0.0, float(np.sum(values**2 * frequencies)) - scim**2)
    half_width = math.sqrt(a / row.n * variance)

    return CIBounds(
        lower=scale.clamp(scim - half_width),
        upper=scale.clamp(scim + half_width),
    )
