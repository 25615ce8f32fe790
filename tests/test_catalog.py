"""Tests for the estimator catalog."""

import numpy as np
import pytest

from mosci.estimator.bootstrap import BootstrapResampler
from mosci.estimator.catalog import METHOD_NAMES, SHORT_LABELS, build_catalog, method_index
from mosci.estimator.interval_models import CIBounds
from mosci.estimator.row_stats import compute_row_statistics


class TestBuildCatalog:
    def test_eight_entries_in_fixed_order(self):
        catalog = build_catalog(BootstrapResampler(seed=0))
        assert [entry.name for entry in catalog] == list(METHOD_NAMES)
        assert [entry.short_label for entry in catalog] == list(SHORT_LABELS)
        assert len(catalog) == 8

    def test_every_entry_returns_bounds(self):
        row = compute_row_statistics(np.array([1, 3, 4, 5, 2]))
        catalog = build_catalog(BootstrapResampler(seed=0, iterations=200))
        for entry in catalog:
            bounds = entry.compute(row, 0.05)
            assert isinstance(bounds, CIBounds)
            assert bounds.width >= 0

    def test_bootstrap_entry_uses_given_resampler(self):
        resampler = BootstrapResampler(seed=0)
        catalog = build_catalog(resampler)
        assert catalog[0].compute == resampler.mean_interval


class TestMethodIndex:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [("bootstrap", 0), ("stud.", 2), ("Clopper-Pearson", 5), ("C-P", 5), ("Jeff.", 7)],
    )
    def test_lookup_by_name_or_label(self, key, expected):
        assert method_index(key) == expected

    def test_unknown_method(self):
        with pytest.raises(KeyError):
            method_index("bayes")


class TestCIBounds:
    def test_width(self):
        assert CIBounds(lower=2.5, upper=3.75).width == pytest.approx(1.25)

    def test_is_immutable(self):
        bounds = CIBounds(lower=1.0, upper=2.0)
        with pytest.raises(AttributeError):
            bounds.lower = 0.0
