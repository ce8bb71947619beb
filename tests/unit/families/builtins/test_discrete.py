"""
Tests for the natural-valued families

Bernoulli, Binomial, Geometric and Poisson: declarations, enumeration
descriptors and agreement with SciPy.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy import stats

import pysatl_dists as pd
from pysatl_dists.errors import BackendError
from pysatl_dists.families.configuration import configure_families_register
from pysatl_dists.types import LAZY_INFINITE, Domain, FamilyName, UnivariateDiscrete
from tests.unit.base import BaseDistributionTest


class TestDiscreteFamilies(BaseDistributionTest):
    """Test suite for natural-valued families."""

    def setup_method(self):
        self.registry = configure_families_register()

    @pytest.mark.parametrize(
        "name, parameter_names",
        [
            (FamilyName.BERNOULLI, ("prob",)),
            (FamilyName.BINOMIAL, ("n", "p")),
            (FamilyName.GEOMETRIC, ("p",)),
            (FamilyName.POISSON, ("mean",)),
        ],
    )
    def test_family_properties(self, name, parameter_names):
        family = self.registry.get(name)
        assert family.name == name
        assert family.domain is Domain.NATURAL
        assert family.parameter_names == parameter_names
        assert family.distribution_type == UnivariateDiscrete

    def test_bernoulli(self):
        d = pd.bernoulli(0.3)
        assert d.enum() == 2
        assert d.pdf(0) == pytest.approx(0.7)
        assert d.pdf(1) == pytest.approx(0.3)
        assert d.pdf(2) == 0.0
        assert d.cdf(0) == pytest.approx(0.7)

    @pytest.mark.parametrize("n, expected", [(0, 1), (5, 6), (12, 13)])
    def test_binomial_enumeration(self, n, expected):
        assert pd.enum(pd.binomial(n, 0.5)) == expected

    @pytest.mark.parametrize("n", [math.nan, math.inf, -math.inf])
    def test_binomial_non_finite_trials(self, n):
        with pytest.raises(BackendError) as exc_info:
            pd.binomial(n, 0.5)
        assert exc_info.value.family == FamilyName.BINOMIAL

    def test_binomial_matches_scipy(self):
        d = pd.binomial(8, 0.35)
        k = np.arange(9)
        actual = np.array([d.pdf(int(i)) for i in k])
        self.assert_arrays_almost_equal(actual, stats.binom.pmf(k, 8, 0.35))
        assert sum(actual) == pytest.approx(1.0)

    def test_geometric_counts_failures(self):
        d = pd.geometric(0.4)
        assert d.enum() is LAZY_INFINITE
        assert d.pdf(0) == pytest.approx(0.4)
        assert d.pdf(3) == pytest.approx(0.6**3 * 0.4)
        assert d.cdf(2) == pytest.approx(1 - 0.6**3)
        assert d.support().min_k == 0

    def test_geometric_samples_include_zero(self, rng):
        sample = pd.geometric(0.9).sample_n(200, rng=rng).array
        assert sample.min() == 0

    def test_poisson(self):
        d = pd.poisson(2.5)
        assert d.enum() is LAZY_INFINITE
        assert d.pdf(4) == pytest.approx(stats.poisson.pmf(4, 2.5))
        assert d.inv_cdf(0.5) == pytest.approx(stats.poisson.ppf(0.5, 2.5))

    def test_sample_mean(self, rng):
        sample = pd.poisson(4.0).sample_n(20_000, rng=rng).array
        assert abs(sample.mean() - 4.0) < 0.1
