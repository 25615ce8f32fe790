"""Confidence interval estimation for mean opinion scores.

This module provides the ``estimate`` entry point, which validates a
ratings matrix (test conditions x subjects) and, for every test condition,
computes the MOS and the eight interval estimates of the catalog:

    1. bootstrap          percentile bootstrap of the mean
    2. normal             normal approximation of the mean
    3. student-t          Student-t approximation of the mean
    4. Wald               binomial proportion, normal approximation
    5. Wilson             binomial proportion, score interval with continuity correction
    6. Clopper-Pearson    binomial proportion, exact beta interval
    7. sim. CI            simultaneous multinomial interval, Bonferroni corrected
    8. Jeffreys           binomial proportion, Bayesian credible interval

Rows are independent. Each row gets its own bootstrap generator spawned from
one SeedSequence, so a fixed seed gives the same report for any number of
workers.

Dependencies:
    - mosci.estimator.row_stats: validation and per-row statistics
    - mosci.estimator.catalog: ordered estimator catalog
    - mosci.common.models: MOSConfidenceReport result record
"""

import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from numpy.typing import ArrayLike

from mosci.common.config import EstimatorConfig, RatingScale
from mosci.common.logging import get_logger
from mosci.common.models import MOSConfidenceReport
from mosci.estimator.bootstrap import BootstrapResampler
from mosci.estimator.catalog import METHOD_NAMES, SHORT_LABELS, build_catalog
from mosci.estimator.errors import InvalidParameterError, StatisticalError
from mosci.estimator.interval_models import CIBounds
from mosci.estimator.row_stats import compute_row_statistics, validate_alpha, validate_ratings

logger = get_logger("estimator.engine")

DEFAULT_ALPHA = 0.05


def estimate_row(
    ratings: np.ndarray,
    alpha: float,
    scale: RatingScale,
    resampler: BootstrapResampler,
) -> tuple[float, list[CIBounds]]:
    """Compute the MOS and all eight intervals for one validated row.

    Args:
        ratings: One-dimensional integer array of ratings
        alpha: Validated significance level
        scale: Rating scale of the ratings
        resampler: Bootstrap resampler owned by this row

    Returns:
        Tuple of (MOS, list of CIBounds in catalog order)
    """
    row = compute_row_statistics(ratings, scale)
    bounds = [entry.compute(row, alpha) for entry in build_catalog(resampler)]
    return row.mos, bounds


def estimate(
    ratings: ArrayLike,
    alpha: float = DEFAULT_ALPHA,
    *,
    scale: RatingScale | None = None,
    bootstrap_iterations: int = BootstrapResampler.DEFAULT_ITERATIONS,
    seed: int | None = None,
    max_workers: int = 1,
) -> MOSConfidenceReport:
    """Estimate the MOS and eight confidence intervals per test condition.

    Args:
        ratings: k x n matrix of integer ratings; rows are test conditions
        alpha: Significance level in (0, 1) (default 0.05 for 95% intervals)
        scale: Rating scale (default 1..5)
        bootstrap_iterations: Resamples per test condition (default 2000)
        seed: Seed for the bootstrap generators; None draws fresh entropy
        max_workers: Number of threads the rows are spread over (default 1)

    Returns:
        MOSConfidenceReport with the MOS vector and k x 8 bound matrices

    Raises:
        InvalidParameterError: If alpha, bootstrap_iterations or max_workers
            is out of range
        InvalidRatingError: If the matrix is malformed or holds a value outside
            the scale
        InsufficientSamplesError: If there are fewer than two subjects

    Example:
        >>> report = estimate([[1, 2, 3, 4, 5], [3, 3, 4, 3, 3]], seed=1)
        >>> report.mos
        [3.0, 3.2]
        >>> report.short_labels[5]
        'C-P'
    """
    scale = scale or RatingScale()
    try:
        alpha = validate_alpha(alpha)
        if bootstrap_iterations < BootstrapResampler.MIN_ITERATIONS:
            raise InvalidParameterError(
                f"bootstrap_iterations must be at least {BootstrapResampler.MIN_ITERATIONS}"
            )
        if max_workers < 1:
            raise InvalidParameterError("max_workers must be at least 1")
        matrix = validate_ratings(ratings, scale)
    except StatisticalError as e:
        logger.error(
            "Estimation rejected",
            {"error_type": type(e).__name__, "error": str(e), "alpha": alpha},
        )
        raise

    num_conditions, num_subjects = matrix.shape
    logger.info(
        "Estimation started",
        {
            "conditions": num_conditions,
            "subjects": num_subjects,
            "alpha": alpha,
            "bootstrap_iterations": bootstrap_iterations,
            "seed": seed,
            "max_workers": max_workers,
        },
    )
    start = time.perf_counter()

    child_seeds = np.random.SeedSequence(seed).spawn(num_conditions)
    num_methods = len(METHOD_NAMES)
    mos = np.zeros(num_conditions)
    lower = np.zeros((num_conditions, num_methods))
    upper = np.zeros((num_conditions, num_methods))

    def run_row(index: int) -> None:
        resampler = BootstrapResampler(seed=child_seeds[index], iterations=bootstrap_iterations)
        row_mos, bounds = estimate_row(matrix[index], alpha, scale, resampler)
        mos[index] = row_mos
        lower[index] = [b.lower for b in bounds]
        upper[index] = [b.upper for b in bounds]

    if max_workers == 1:
        for index in range(num_conditions):
            run_row(index)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # list() re-raises the first worker exception
            list(executor.map(run_row, range(num_conditions)))

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Estimation completed",
        {"conditions": num_conditions, "duration_ms": round(duration_ms, 3)},
    )

    return MOSConfidenceReport(
        alpha=alpha,
        method_names=list(METHOD_NAMES),
        short_labels=list(SHORT_LABELS),
        mos=mos.tolist(),
        ci_lower=lower.tolist(),
        ci_upper=upper.tolist(),
        ci_width=(upper - lower).tolist(),
        num_subjects=num_subjects,
        bootstrap_iterations=bootstrap_iterations,
        seed=seed,
        scale=scale,
    )


def estimate_with_config(ratings: ArrayLike, config: EstimatorConfig) -> MOSConfidenceReport:
    """Run ``estimate`` with the parameters of an EstimatorConfig."""
    return estimate(
        ratings,
        config.alpha,
        scale=config.scale,
        bootstrap_iterations=config.bootstrap_iterations,
        seed=config.seed,
        max_workers=config.max_workers,
    )
