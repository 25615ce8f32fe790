"""Synthetic ratings for demonstrations.

Generates a ratings matrix whose test conditions span the whole rating
scale: test condition i draws every rating as ``Binomial(m, p_i) + scale_min``
with success probabilities ``p_i`` linearly spaced over [0, 1].

Dependencies:
    - numpy: binomial sampling
"""

import numpy as np

from mosci.common.config import RatingScale

DEFAULT_NUM_CONDITIONS = 101
DEFAULT_NUM_SUBJECTS = 20


def demo_success_probabilities(num_conditions: int) -> np.ndarray:
    """Linearly spaced success probabilities from 0 to 1, one per test condition.

    Example:
        >>> demo_success_probabilities(3).tolist()
        [0.0, 0.5, 1.0]
    """
    if num_conditions < 1:
        raise ValueError("num_conditions must be at least 1")
    if num_conditions == 1:
        return np.array([0.5])
    return np.linspace(0.0, 1.0, num_conditions)


def generate_demo_ratings(
    num_conditions: int = DEFAULT_NUM_CONDITIONS,
    num_subjects: int = DEFAULT_NUM_SUBJECTS,
    scale: RatingScale | None = None,
    seed: int | None = None,
) -> np.ndarray:
    """Generate a num_conditions x num_subjects matrix of synthetic ratings.

    Args:
        num_conditions: Number of test conditions (rows)
        num_subjects: Number of subjects (columns)
        scale: Rating scale (default 1..5)
        seed: Random seed for reproducibility

    Returns:
        Integer numpy array with values on the rating scale
    """
    if num_subjects < 1:
        raise ValueError("num_subjects must be at least 1")
    scale = scale or RatingScale()
    rng = np.random.default_rng(seed)
    probabilities = demo_success_probabilities(num_conditions)
    draws = rng.binomial(
        scale.scale_range, probabilities[:, np.newaxis], size=(num_conditions, num_subjects)
    )
    return draws.astype(int) + scale.scale_min
