from mosci.estimator.binomial_intervals import (
    clopper_pearson_interval,
    jeffreys_interval,
    wald_interval,
    wilson_interval,
)
from mosci.estimator.bootstrap import BootstrapResampler
from mosci.estimator.catalog import METHOD_NAMES, SHORT_LABELS, build_catalog, method_index
from mosci.estimator.engine import estimate, estimate_row, estimate_with_config
from mosci.estimator.errors import (
    DegenerateProportionError,
    DistributionDomainError,
    InsufficientSamplesError,
    InvalidParameterError,
    InvalidRatingError,
    StatisticalError,
)
from mosci.estimator.interval_models import CIBounds, RowStatistics
from mosci.estimator.mean_intervals import normal_interval, student_t_interval
from mosci.estimator.multinomial_intervals import simultaneous_interval

__all__ = [
    "METHOD_NAMES",
    "SHORT_LABELS",
    "BootstrapResampler",
    "CIBounds",
    "DegenerateProportionError",
    "DistributionDomainError",
    "InsufficientSamplesError",
    "InvalidParameterError",
    "InvalidRatingError",
    "RowStatistics",
    "StatisticalError",
    "build_catalog",
    "clopper_pearson_interval",
    "estimate",
    "estimate_row",
    "estimate_with_config",
    "jeffreys_interval",
    "method_index",
    "normal_interval",
    "simultaneous_interval",
    "student_t_interval",
    "wald_interval",
    "wilson_interval",
]
