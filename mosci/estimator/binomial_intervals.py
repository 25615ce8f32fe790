"""Binomial-proportion confidence intervals for the MOS.

A rating on a scale with range m is read as the number of successes in m
Bernoulli trials, so a test condition with n subjects becomes
``num_successes`` out of ``n * m`` trials with proportion
``p = (MOS - scale_min) / m``. By the binomial sum variance inequality the
binomial variance bounds the variance of any rating distribution with the
same mean, which makes these intervals conservative. Each proportion
interval is mapped back with ``rating = p * m + scale_min``.

Boundary policy:
    At p = 0 (every rating at the scale minimum) the lower bound is the scale
    minimum, and at p = 1 the upper bound is the scale maximum. The beta
    based estimators never evaluate a beta inverse with a zero shape
    parameter.

Dependencies:
    - mosci.estimator.distributions: inverse_normal, inverse_beta
"""

import math

from mosci.estimator.distributions import inverse_beta, inverse_normal
from mosci.estimator.interval_models import CIBounds, RowStatistics


def wald_interval(row: RowStatistics, alpha: float) -> CIBounds:
    """Wald interval ``p -/+ z * sqrt(p(1 - p) / n)``.

    The bounds are mapped back to the rating scale but not clamped, so they
    may leave the scale for proportions near 0 or 1.
    """
    z = inverse_normal(1 - alpha / 2)
    p = row.proportion
    half_width = z * math.sqrt(p * (1 - p) / row.n)
    return CIBounds(
        lower=row.scale.to_rating(p - half_width),
        upper=row.scale.to_rating(p + half_width),
    )


def wilson_interval(row: RowStatistics, alpha: float) -> CIBounds:
    """Wilson score interval with continuity correction over ``n * m`` trials.

    Args:
        row: Statistics of the test condition
        alpha: Significance level in (0, 1)

    Returns:
        CIBounds mapped to the rating scale and clamped to it
    """
    z = inverse_normal(1 - alpha / 2)
    z2 = z**2
    trials = row.trials
    p = row.proportion

    # Floored at zero: negative for large alpha when p is 0 or 1.
    radicand = max(0.0, z2 - 1 / trials + 4 * trials * p * (1 - p) + (4 * p - 2))
    correction = 1 + z * math.sqrt(radicand)
    centre = 2 * trials * p + z2
    denominator = 2 * (trials + z2)

    scale = row.scale
    if row.num_successes == 0:
        lower = float(scale.scale_min)
    else:
        lower = scale.clamp(scale.to_rating((centre - correction) / denominator))
    if row.num_successes == trials:
        upper = float(scale.scale_max)
    else:
        upper = scale.clamp(scale.to_rating((centre + correction) / denominator))
    return CIBounds(lower=lower, upper=upper)


def clopper_pearson_interval(row: RowStatistics, alpha: float) -> CIBounds:
    """Exact Clopper-Pearson interval via the beta-binomial relationship.

    ``lower = Beta^-1(alpha/2; x, N - x + 1)`` and
    ``upper = Beta^-1(1 - alpha/2; x + 1, N - x)``, clamped to the scale.
    """
    x = row.num_successes
    trials = row.trials
    scale = row.scale

    if x == 0:
        lower = float(scale.scale_min)
    else:
        lower = scale.clamp(scale.to_rating(inverse_beta(alpha / 2, x, trials - x + 1)))
    if x == trials:
        upper = float(scale.scale_max)
    else:
        upper = scale.clamp(scale.to_rating(inverse_beta(1 - alpha / 2, x + 1, trials - x)))
    return CIBounds(lower=lower, upper=upper)


def jeffreys_interval(row: RowStatistics, alpha: float) -> CIBounds:
    """Jeffreys credible interval from the Beta(x + 1/2, N - x + 1/2) posterior.

    The Jeffreys prior Beta(1/2, 1/2) keeps both shape parameters positive,
    but the boundary policy still pins the bounds at the scale ends when
    every rating sits at one end of the scale.
    """
    x = row.num_successes
    trials = row.trials
    scale = row.scale
    a = x + 0.5
    b = trials - x + 0.5

    if x == 0:
        lower = float(scale.scale_min)
    else:
        lower = scale.to_rating(inverse_beta(alpha / 2, a, b))
    if x == trials:
        upper = float(scale.scale_max)
    else:
        upper = scale.to_rating(inverse_beta(1 - alpha / 2, a, b))
    return CIBounds(lower=lower, upper=upper)
