"""Input validation and per-condition statistics.

Every check runs over the whole matrix before any interval is computed, so
a single malformed rating rejects the dataset without partial results.

Dependencies:
    - mosci.estimator.errors: InvalidParameterError, InvalidRatingError,
      InsufficientSamplesError
"""

import numpy as np
from numpy.typing import ArrayLike

from mosci.common.config import RatingScale
from mosci.estimator.errors import (
    InsufficientSamplesError,
    InvalidParameterError,
    InvalidRatingError,
)
from mosci.estimator.interval_models import RowStatistics

MIN_SUBJECTS = 2


def validate_alpha(alpha: float) -> float:
    """Validate the significance level.

    Args:
        alpha: Significance level of the two-sided intervals

    Returns:
        alpha as a float

    Raises:
        InvalidParameterError: If alpha is not a number in the open interval (0, 1)

    Example:
        >>> validate_alpha(0.05)
        0.05
    """
    try:
        value = float(alpha)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"alpha must be a number, got {alpha!r}") from e
    if not 0 < value < 1:
        raise InvalidParameterError(f"alpha must be in (0, 1), got {alpha}")
    return value


def validate_ratings(ratings: ArrayLike, scale: RatingScale | None = None) -> np.ndarray:
    """Validate a ratings matrix and return it as a k x n integer array.

    Args:
        ratings: Array-like of shape (k, n); rows are test conditions,
            columns are subjects
        scale: Rating scale the values must belong to (default 1..5)

    Returns:
        Integer numpy array of shape (k, n)

    Raises:
        InvalidRatingError: If the input is not a non-empty rectangular numeric
            matrix, or holds non-integral or out-of-scale values
        InsufficientSamplesError: If there are fewer than two subjects
    """
    scale = scale or RatingScale()

    try:
        matrix = np.asarray(ratings, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidRatingError(
            "ratings must be a rectangular numeric matrix (test conditions x subjects)"
        ) from e

    if matrix.ndim != 2 or matrix.shape[0] == 0:
        raise InvalidRatingError(
            f"ratings must be a non-empty two-dimensional matrix, got shape {matrix.shape}"
        )

    if matrix.shape[1] < MIN_SUBJECTS:
        raise InsufficientSamplesError(
            f"at least {MIN_SUBJECTS} ratings per test condition are required, "
            f"got {matrix.shape[1]}",
            min_required=MIN_SUBJECTS,
        )

    if not np.all(np.isfinite(matrix)):
        raise InvalidRatingError("ratings must not contain NaN or infinite values")

    if not np.all(matrix == np.round(matrix)):
        row, col = np.argwhere(matrix != np.round(matrix))[0]
        raise InvalidRatingError(
            f"rating {matrix[row, col]} at test condition {row}, subject {col} is not an integer"
        )

    outside = (matrix < scale.scale_min) | (matrix > scale.scale_max)
    if np.any(outside):
        row, col = np.argwhere(outside)[0]
        raise InvalidRatingError(
            f"rating {int(matrix[row, col])} at test condition {row}, subject {col} "
            f"is outside the scale [{scale.scale_min}, {scale.scale_max}]"
        )

    return matrix.astype(int)


def compute_row_statistics(row: np.ndarray, scale: RatingScale | None = None) -> RowStatistics:
    """Compute the statistics of one validated row of ratings.

    Args:
        row: One-dimensional integer array of ratings for a test condition
        scale: Rating scale of the ratings (default 1..5)

    Returns:
        RowStatistics with the MOS, sample standard deviation (ddof=1), the
        binomial success count and the per-category histogram
    """
    scale = scale or RatingScale()
    n = int(row.size)
    shifted = row - scale.scale_min
    counts = np.bincount(shifted, minlength=scale.num_categories)

    return RowStatistics(
        ratings=row,
        mos=float(np.mean(row)),
        std=float(np.std(row, ddof=1)),
        n=n,
        num_successes=int(np.sum(shifted)),
        trials=n * scale.scale_range,
        category_counts=counts,
        scale=scale,
    )
