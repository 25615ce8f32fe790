"""Data classes shared by the interval estimators."""

from dataclasses import dataclass

import numpy as np

from mosci.common.config import RatingScale


@dataclass(frozen=True)
class CIBounds:
    """Lower and upper bound of one confidence interval."""

    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


@dataclass(frozen=True, eq=False)
class RowStatistics:
    """Summary statistics of the ratings of one test condition."""

    ratings: np.ndarray
    mos: float
    std: float
    n: int
    num_successes: int
    trials: int
    category_counts: np.ndarray
    scale: RatingScale

    @property
    def proportion(self) -> float:
        """MOS expressed as a binomial success proportion in [0, 1]."""
        return self.num_successes / self.trials
