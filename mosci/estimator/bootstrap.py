"""Bootstrap confidence intervals for the mean opinion score.

This module provides the BootstrapResampler class, which estimates the
sampling distribution of a test condition's MOS by resampling its ratings
with replacement and reads the interval off the empirical quantiles.

Dependencies:
    - numpy: vectorised resampling and quantiles
    - mosci.estimator.errors: InvalidParameterError
"""

from __future__ import annotations

import numpy as np

from mosci.estimator.errors import InvalidParameterError
from mosci.estimator.interval_models import CIBounds, RowStatistics


class BootstrapResampler:
    """Percentile bootstrap for the mean of one test condition.

    Each resampler owns its own random generator. Pass a seed (an int or a
    ``numpy.random.SeedSequence``) to make the bounds reproducible.
    """

    MIN_ITERATIONS = 2
    DEFAULT_ITERATIONS = 2000

    def __init__(
        self,
        seed: int | np.random.SeedSequence | None = None,
        iterations: int = DEFAULT_ITERATIONS,
    ) -> None:
        """Initialize the resampler.

        Args:
            seed: Random seed for reproducibility
            iterations: Number of bootstrap resamples (default 2000)

        Raises:
            InvalidParameterError: If iterations < MIN_ITERATIONS
        """
        if iterations < self.MIN_ITERATIONS:
            msg = f"iterations must be at least {self.MIN_ITERATIONS} for CI calculation"
            raise InvalidParameterError(msg)

        self.seed = seed
        self.iterations = iterations
        self.rng = np.random.default_rng(seed)

    def resample_means(self, ratings: np.ndarray) -> np.ndarray:
        """Draw ``iterations`` resamples with replacement and return their means.

        Args:
            ratings: One-dimensional array of ratings

        Returns:
            Array of length ``iterations`` with one mean per resample
        """
        n = ratings.size
        idx = self.rng.integers(0, n, size=(self.iterations, n))
        return ratings[idx].mean(axis=1)

    def mean_interval(self, row: RowStatistics, alpha: float) -> CIBounds:
        """Percentile bootstrap interval for the MOS of ``row``.

        Args:
            row: Statistics of the test condition
            alpha: Significance level in (0, 1)

        Returns:
            CIBounds at the alpha/2 and 1 - alpha/2 empirical quantiles

        Example:
            >>> resampler = BootstrapResampler(seed=42)
            >>> bounds = resampler.mean_interval(row, 0.05)
            >>> bounds.lower <= row.mos <= bounds.upper
            True
        """
        if not 0 < alpha < 1:
            raise InvalidParameterError(f"alpha must be in (0, 1), got {alpha}")

        means = self.resample_means(row.ratings)
        lower, upper = np.quantile(means, [alpha / 2, 1 - alpha / 2])
        return CIBounds(lower=float(lower), upper=float(upper))
