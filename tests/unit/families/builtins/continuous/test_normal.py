"""
Tests for Normal Distribution Family

This module tests the normal distribution family: parametrizations,
analytical characteristics against SciPy, support and variate sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import kstest, norm

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.errors import DomainError, InvalidParameterError
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.stats._variates import PolarNormalSampler
from pysatl_variates.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        assert self.normal_family.name == FamilyName.NORMAL
        assert set(self.normal_family.parametrization_names) == {
            "meanStd",
            "meanPrec",
            "exponential",
        }
        assert self.normal_family.base_parametrization_name == "meanStd"

    def test_mean_std_parametrization_creation(self):
        dist = self.normal_dist_example

        assert dist.family_name == FamilyName.NORMAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parametrization_name == "meanStd"

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mu, expected_sigma",
        [
            ("meanStd", {"mu": 2.0, "sigma": 1.5}, 2.0, 1.5),
            ("meanPrec", {"mu": 2.0, "tau": 0.25}, 2.0, 2.0),
            ("exponential", {"a": -1 / (2 * 1.5**2), "b": 2 / (1.5**2)}, 2.0, 1.5),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_mu, expected_sigma
    ):
        base_params = self.normal_family.to_base(
            self.normal_family.get_parametrization(parametrization_name)(**params)
        )

        assert base_params.parameters["mu"] == pytest.approx(expected_mu)
        assert base_params.parameters["sigma"] == pytest.approx(expected_sigma)

    @pytest.mark.parametrize(
        "parametrization_name, params, message",
        [
            ("meanStd", {"mu": 0.0, "sigma": -1.0}, "sigma > 0"),
            ("meanPrec", {"mu": 0.0, "tau": 0.0}, "tau > 0"),
            ("exponential", {"a": 1.0, "b": 0.0}, "a < 0"),
        ],
    )
    def test_parametrization_constraints(self, parametrization_name, params, message):
        with pytest.raises(InvalidParameterError, match=message):
            self.normal_family(parametrization_name=parametrization_name, **params)

    def test_moments(self):
        dist = self.normal_dist_example
        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(2.0)
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(2.25)
        assert dist.query_method(CharacteristicName.SKEW)(None) == 0

        kurt_func = dist.query_method(CharacteristicName.KURT)
        assert kurt_func(None) == 3
        assert kurt_func(None, excess=True) == 0

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.pdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.cdf),
            (CharacteristicName.PPF, [0.001, 0.1, 0.25, 0.5, 0.75, 0.9, 0.999], norm.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        char_func = self.normal_dist_example.query_method(char_name)
        input_array = np.array(test_data)

        result = char_func(input_array)

        assert result.shape == input_array.shape
        self.assert_arrays_almost_equal(result, scipy_func(input_array, loc=2.0, scale=1.5))

    def test_normal_support(self):
        support = self.normal_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.left == float("-inf") and support.right == float("inf")
        assert support.contains(0) is True
        assert support.contains(float("inf")) is False
        assert support.shape == ContinuousSupportShape1D.REAL_LINE

    def test_sampler_uses_base_parameters(self):
        dist = self.normal_family(mu=2.0, tau=0.25, parametrization_name="meanPrec")
        sampler = dist.sampler

        assert isinstance(sampler, PolarNormalSampler)
        assert sampler.mu == 2.0
        assert sampler.sigma == pytest.approx(2.0)

    def test_sample_distribution(self):
        sample = self.normal_dist_example.sample(4000, seed=2025).array[:, 0]

        assert sample.mean() == pytest.approx(2.0, abs=0.1)
        assert sample.std() == pytest.approx(1.5, rel=0.05)
        assert kstest(sample, "norm", args=(2.0, 1.5)).pvalue > 1e-3


class TestNormalFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions."""

    def setup_method(self):
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)

    def test_invalid_parameterization(self):
        with pytest.raises(KeyError):
            self.normal_family.distribution(parametrization_name="invalid_name", mu=0, sigma=1)

    def test_missing_parameters(self):
        with pytest.raises(TypeError):
            self.normal_family.distribution(mu=0)

    def test_ppf_boundaries_and_domain(self):
        ppf = self.normal_family(mu=2.0, sigma=1.5).query_method(CharacteristicName.PPF)

        assert ppf(0.0) == -math.inf
        assert ppf(1.0) == math.inf
        with pytest.raises(DomainError):
            ppf(-0.1)
        with pytest.raises(DomainError):
            ppf(1.1)
