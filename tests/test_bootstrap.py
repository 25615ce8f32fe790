"""Tests for BootstrapResampler class."""

import numpy as np
import pytest

from mosci.estimator.bootstrap import BootstrapResampler
from mosci.estimator.errors import InvalidParameterError
from mosci.estimator.row_stats import compute_row_statistics


@pytest.fixture
def spread_row():
    """Ratings covering the whole 5-point scale."""
    return compute_row_statistics(np.array([1, 2, 2, 3, 3, 3, 4, 4, 5, 5]))


class TestBootstrapResampler:
    """Tests for BootstrapResampler class."""

    def test_initialization_with_seed(self) -> None:
        resampler = BootstrapResampler(seed=42)
        assert resampler.seed == 42
        assert resampler.iterations == BootstrapResampler.DEFAULT_ITERATIONS

    def test_default_iterations_is_2000(self) -> None:
        assert BootstrapResampler.DEFAULT_ITERATIONS == 2000

    def test_too_few_iterations_raises(self) -> None:
        with pytest.raises(InvalidParameterError, match="at least 2"):
            BootstrapResampler(iterations=1)

    def test_resample_means_shape(self, spread_row) -> None:
        resampler = BootstrapResampler(seed=1, iterations=500)
        means = resampler.resample_means(spread_row.ratings)
        assert means.shape == (500,)
        assert means.min() >= 1
        assert means.max() <= 5

    def test_same_seed_is_reproducible(self, spread_row) -> None:
        first = BootstrapResampler(seed=7).mean_interval(spread_row, 0.05)
        second = BootstrapResampler(seed=7).mean_interval(spread_row, 0.05)
        assert first == second

    def test_seed_sequence_is_accepted(self, spread_row) -> None:
        seed = np.random.SeedSequence(2024)
        first = BootstrapResampler(seed=seed).mean_interval(spread_row, 0.05)
        second = BootstrapResampler(seed=np.random.SeedSequence(2024)).mean_interval(
            spread_row, 0.05
        )
        assert first == second

    def test_different_seeds_draw_different_resamples(self, spread_row) -> None:
        first = BootstrapResampler(seed=1).resample_means(spread_row.ratings)
        second = BootstrapResampler(seed=2).resample_means(spread_row.ratings)
        assert not np.array_equal(first, second)

    def test_interval_brackets_mos(self, spread_row) -> None:
        bounds = BootstrapResampler(seed=3).mean_interval(spread_row, 0.05)
        assert 1 <= bounds.lower <= spread_row.mos <= bounds.upper <= 5

    def test_constant_ratings_give_zero_width(self) -> None:
        row = compute_row_statistics(np.array([4, 4, 4, 4]))
        bounds = BootstrapResampler(seed=0).mean_interval(row, 0.05)
        assert bounds.lower == pytest.approx(4.0)
        assert bounds.upper == pytest.approx(4.0)
        assert bounds.width == pytest.approx(0.0)

    def test_smaller_alpha_widens_interval(self, spread_row) -> None:
        wide = BootstrapResampler(seed=11).mean_interval(spread_row, 0.01)
        narrow = BootstrapResampler(seed=11).mean_interval(spread_row, 0.1)
        assert wide.width >= narrow.width

    @pytest.mark.parametrize("alpha", [0.0, 1.0])
    def test_invalid_alpha_raises(self, spread_row, alpha) -> None:
        with pytest.raises(InvalidParameterError):
            BootstrapResampler(seed=0).mean_interval(spread_row, alpha)
