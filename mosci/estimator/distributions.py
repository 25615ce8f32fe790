"""Inverse cumulative distribution functions used by the interval estimators.

Thin, domain-checked wrappers over ``scipy.stats`` percent point functions.
Each returns a plain float. Arguments outside the documented domain raise
DistributionDomainError; the estimators only call these with validated
inputs, so an error here is an internal invariant violation.

Dependencies:
    - scipy.stats: norm, t, chi2 and beta distributions
"""

from scipy import stats

from mosci.estimator.errors import DegenerateProportionError, DistributionDomainError


def _check_probability(p: float) -> None:
    if not 0 < p < 1:
        raise DistributionDomainError(f"probability must be in (0, 1), got {p}")


def _check_degrees_of_freedom(df: float) -> None:
    if not df > 0:
        raise DistributionDomainError(f"degrees of freedom must be positive, got {df}")


def inverse_normal(p: float) -> float:
    """Quantile of the standard normal distribution.

    Example:
        >>> round(inverse_normal(0.975), 4)
        1.96
    """
    _check_probability(p)
    return float(stats.norm.ppf(p))


def inverse_student_t(p: float, df: float) -> float:
    """Quantile of Student's t distribution with ``df`` degrees of freedom.

    Example:
        >>> round(inverse_student_t(0.975, 3), 4)
        3.1824
    """
    _check_probability(p)
    _check_degrees_of_freedom(df)
    return float(stats.t.ppf(p, df))


def inverse_chi_square(p: float, df: float) -> float:
    """Quantile of the chi-square distribution with ``df`` degrees of freedom.

    Example:
        >>> round(inverse_chi_square(0.95, 1), 4)
        3.8415
    """
    _check_probability(p)
    _check_degrees_of_freedom(df)
    return float(stats.chi2.ppf(p, df))


def inverse_beta(p: float, a: float, b: float) -> float:
    """Quantile of the Beta(a, b) distribution.

    Raises:
        DistributionDomainError: If p is outside (0, 1)
        DegenerateProportionError: If a or b is not positive, which happens
            when a binomial proportion sits exactly at 0 or 1
    """
    _check_probability(p)
    if not (a > 0 and b > 0):
        raise DegenerateProportionError(
            f"beta shape parameters must be positive, got a={a}, b={b}"
        )
    return float(stats.beta.ppf(p, a, b))
