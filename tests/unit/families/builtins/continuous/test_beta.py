"""
Tests for Beta Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import beta, kstest

from pysatl_variates.errors import InvalidParameterError
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.stats._variates import BetaSampler
from pysatl_variates.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestBetaFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.beta_family = registry.get(FamilyName.BETA)
        self.beta_dist_example = self.beta_family(alpha=2.0, beta=5.0)

    def test_moments(self):
        dist = self.beta_dist_example
        mean, var, skew, kurt = beta.stats(2.0, 5.0, moments="mvsk")

        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(2.0 / 7.0)
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(var)
        assert dist.query_method(CharacteristicName.SKEW)(None) == pytest.approx(skew)
        assert dist.query_method(CharacteristicName.KURT)(None, excess=True) == pytest.approx(kurt)

    def test_characteristics_match_scipy(self):
        x = np.array([0.05, 0.2, 0.5, 0.9])
        self.assert_arrays_almost_equal(
            self.beta_dist_example.query_method(CharacteristicName.PDF)(x), beta.pdf(x, 2.0, 5.0)
        )
        self.assert_arrays_almost_equal(
            self.beta_dist_example.query_method(CharacteristicName.CDF)(x), beta.cdf(x, 2.0, 5.0)
        )

    @pytest.mark.parametrize("params", [{"alpha": 0.0, "beta": 1.0}, {"alpha": 1.0, "beta": -2.0}])
    def test_parametrization_constraints(self, params):
        with pytest.raises(InvalidParameterError):
            self.beta_family(**params)

    def test_sample_distribution(self):
        assert isinstance(self.beta_dist_example.sampler, BetaSampler)
        sample = self.beta_dist_example.sample(3000, seed=5).array[:, 0]

        assert ((sample > 0) & (sample < 1)).all()
        assert kstest(sample, "beta", args=(2.0, 5.0)).pvalue > 1e-3

    def test_small_shapes(self):
        sample = self.beta_family(alpha=0.5, beta=0.5).sample(3000, seed=6).array[:, 0]
        assert kstest(sample, "beta", args=(0.5, 0.5)).pvalue > 1e-3
