"""Ordered catalog of the eight confidence interval estimators."""

from collections.abc import Callable
from dataclasses import dataclass

from mosci.estimator.binomial_intervals import (
    clopper_pearson_interval,
    jeffreys_interval,
    wald_interval,
    wilson_interval,
)
from mosci.estimator.bootstrap import BootstrapResampler
from mosci.estimator.interval_models import CIBounds, RowStatistics
from mosci.estimator.mean_intervals import normal_interval, student_t_interval
from mosci.estimator.multinomial_intervals import simultaneous_interval

IntervalEstimator = Callable[[RowStatistics, float], CIBounds]


@dataclass(frozen=True)
class EstimatorEntry:
    """One catalog entry: presentation names plus the interval function."""

    name: str
    short_label: str
    compute: IntervalEstimator


METHOD_NAMES: tuple[str, ...] = (
    "bootstrap",
    "normal",
    "student-t",
    "Wald",
    "Wilson",
    "Clopper-Pearson",
    "sim. CI",
    "Jeffreys",
)

SHORT_LABELS: tuple[str, ...] = (
    "boot.",
    "norm.",
    "stud.",
    "Wald",
    "Wils.",
    "C-P",
    "sim.CI",
    "Jeff.",
)


def build_catalog(resampler: BootstrapResampler) -> tuple[EstimatorEntry, ...]:
    """Build the catalog with ``resampler`` backing the bootstrap entry.

    The order is fixed and matches METHOD_NAMES and SHORT_LABELS; result
    matrices are indexed by position in this tuple.
    """
    functions: tuple[IntervalEstimator, ...] = (
        resampler.mean_interval,
        normal_interval,
        student_t_interval,
        wald_interval,
        wilson_interval,
        clopper_pearson_interval,
        simultaneous_interval,
        jeffreys_interval,
    )
    return tuple(
        EstimatorEntry(name=name, short_label=label, compute=compute)
        for name, label, compute in zip(METHOD_NAMES, SHORT_LABELS, functions, strict=True)
    )


def method_index(key: str) -> int:
    """Return the catalog position of a method given its name or short label.

    Raises:
        KeyError: If no method matches ``key``
    """
    for index, (name, label) in enumerate(zip(METHOD_NAMES, SHORT_LABELS, strict=True)):
        if key in (name, label):
            return index
    raise KeyError(f"Unknown estimator: {key!r}")
