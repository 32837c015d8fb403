"""
Tests for Binomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import binom

from pysatl_variates.distributions.support import IntegerIntervalSupport
from pysatl_variates.errors import DomainError, InvalidParameterError
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.stats._variates import BinomialSampler
from pysatl_variates.stats._variates.binomial import BtpeSetup, ChopDownSetup
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateDiscrete

from .base import BaseDiscreteDistributionTest


class TestBinomialFamily(BaseDiscreteDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.binomial_family = registry.get(FamilyName.BINOMIAL)
        self.binomial_dist_example = self.binomial_family(n=20, p=0.5)

    def test_family_properties(self):
        dist = self.binomial_dist_example
        assert dist.distribution_type == UnivariateDiscrete
        assert dist.parameters == {"n": 20, "p": 0.5}
        assert self.binomial_family.parametrization_names == ["standard"]

    def test_pmf_value(self):
        pmf = self.binomial_dist_example.query_method(CharacteristicName.PMF)
        assert pmf(15.0) == pytest.approx(0.0147857666, rel=1e-8)

    def test_characteristics_match_scipy(self):
        dist = self.binomial_family(n=30, p=0.3)
        k = np.arange(-2, 33, dtype=np.float64)
        p = np.array([0.01, 0.25, 0.5, 0.75, 0.99, 1.0])

        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.PMF)(k), binom.pmf(k, 30, 0.3), atol=1e-14
        )
        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.CDF)(k), binom.cdf(k, 30, 0.3), atol=1e-12
        )
        np.testing.assert_array_equal(
            dist.query_method(CharacteristicName.PPF)(p), binom.ppf(p, 30, 0.3)
        )

    def test_moments(self):
        dist = self.binomial_family(n=30, p=0.3)
        mean, var, skew, kurt = (float(v) for v in binom.stats(30, 0.3, moments="mvsk"))

        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(mean)
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(var)
        assert dist.query_method(CharacteristicName.SKEW)(None) == pytest.approx(skew)
        assert dist.query_method(CharacteristicName.KURT)(None, excess=True) == pytest.approx(kurt)

    def test_degenerate_moments(self):
        dist = self.binomial_family(n=10, p=1.0)
        assert dist.query_method(CharacteristicName.VAR)(None) == 0
        assert math.isnan(dist.query_method(CharacteristicName.SKEW)(None))

    def test_non_integer_arguments_rejected(self):
        with pytest.raises(DomainError):
            self.binomial_dist_example.query_method(CharacteristicName.PMF)(2.5)
        with pytest.raises(DomainError):
            self.binomial_dist_example.query_method(CharacteristicName.CDF)(np.array([1.0, 1.5]))
        with pytest.raises(DomainError):
            self.binomial_dist_example.query_method(CharacteristicName.PPF)(1.5)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"n": -1, "p": 0.5}, "n is a non-negative integer"),
            ({"n": 2.5, "p": 0.5}, "n is a non-negative integer"),
            ({"n": 10, "p": 1.5}, "0 <= p <= 1"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(InvalidParameterError, match=message):
            self.binomial_family(**params)

    def test_support(self):
        support = self.binomial_dist_example.support
        assert isinstance(support, IntegerIntervalSupport)
        assert support.contains(0) and support.contains(20)
        assert not support.contains(21)
        assert not support.contains(3.5)

    @pytest.mark.parametrize(
        "n, p, setup_type",
        [(20, 0.3, ChopDownSetup), (200, 0.4, BtpeSetup), (1000, 0.95, BtpeSetup)],
    )
    def test_sample_distribution(self, n, p, setup_type):
        dist = self.binomial_family(n=n, p=p)
        sampler = dist.sampler

        assert isinstance(sampler, BinomialSampler)
        assert isinstance(sampler.setup, setup_type)
        draws = dist.sample(10_000, seed=n).array[:, 0]
        assert np.all(draws == np.floor(draws))
        assert self.goodness_of_fit(draws, binom(n, p)) > 1e-3
