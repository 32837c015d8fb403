"""
Tests for Continuous Uniform Distribution Family

This module tests the uniform distribution family: its three
parametrizations, characteristics, closed support and variate sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import uniform

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.errors import DomainError, InvalidParameterError
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.stats._variates import SequenceUniformSource
from pysatl_variates.types import CharacteristicName, ContinuousSupportShape1D, FamilyName

from .base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(lower_bound=2.0, upper_bound=5.0)

    def test_family_properties(self):
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert set(self.uniform_family.parametrization_names) == {
            "standard",
            "meanWidth",
            "minRange",
        }
        assert self.uniform_family.base_parametrization_name == "standard"

    @pytest.mark.parametrize(
        "parametrization_name, params",
        [
            ("standard", {"lower_bound": 2.0, "upper_bound": 5.0}),
            ("meanWidth", {"mean": 3.5, "width": 3.0}),
            ("minRange", {"minimum": 2.0, "range_val": 3.0}),
        ],
    )
    def test_parametrization_conversions(self, parametrization_name, params):
        dist = self.uniform_family(parametrization_name=parametrization_name, **params)
        base_params = self.uniform_family.to_base(dist.parametrization)

        assert dist.parameters == params
        assert base_params.parameters == {"lower_bound": 2.0, "upper_bound": 5.0}

    @pytest.mark.parametrize(
        "parametrization_name, params, message",
        [
            ("standard", {"lower_bound": 5.0, "upper_bound": 2.0}, "lower_bound < upper_bound"),
            ("standard", {"lower_bound": 2.0, "upper_bound": 2.0}, "lower_bound < upper_bound"),
            ("meanWidth", {"mean": 3.5, "width": 0.0}, "width > 0"),
            ("minRange", {"minimum": 2.0, "range_val": -1.0}, "range_val > 0"),
        ],
    )
    def test_parametrization_constraints(self, parametrization_name, params, message):
        with pytest.raises(InvalidParameterError, match=message):
            self.uniform_family(parametrization_name=parametrization_name, **params)

    def test_moments(self):
        dist = self.uniform_dist_example
        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(3.5)
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(0.75)
        assert dist.query_method(CharacteristicName.SKEW)(None) == 0
        assert dist.query_method(CharacteristicName.KURT)(None) == pytest.approx(1.8)
        assert dist.query_method(CharacteristicName.KURT)(None, excess=True) == pytest.approx(-1.2)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [1.0, 2.0, 3.5, 5.0, 6.0], uniform.pdf),
            (CharacteristicName.CDF, [1.0, 2.0, 3.5, 5.0, 6.0], uniform.cdf),
            (CharacteristicName.PPF, [0.0, 0.25, 0.5, 0.75, 1.0], uniform.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        char_func = self.uniform_dist_example.query_method(char_name)
        input_array = np.array(test_data)

        self.assert_arrays_almost_equal(
            char_func(input_array), scipy_func(input_array, loc=2.0, scale=3.0)
        )

    def test_ppf_domain(self):
        ppf = self.uniform_dist_example.query_method(CharacteristicName.PPF)
        with pytest.raises(DomainError):
            ppf(-0.1)

    def test_uniform_support(self):
        support = self.uniform_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.left_closed and support.right_closed
        results = support.contains(np.array([1.9, 2.0, 3.5, 5.0, 5.1]))
        np.testing.assert_array_equal(results, [False, True, True, True, False])
        assert support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL

    def test_sampler_is_affine_in_the_uniform(self):
        dist = self.uniform_family(mean=3.5, width=3.0, parametrization_name="meanWidth")
        source = SequenceUniformSource([0.0, 0.5, 0.999])

        draws = [dist.sample_one(source) for _ in range(3)]

        assert draws == pytest.approx([2.0, 3.5, 4.997])

    def test_sample_within_bounds(self):
        sample = self.uniform_dist_example.sample(1000, seed=1).array

        assert sample.shape == (1000, 1)
        assert (sample >= 2.0).all() and (sample < 5.0).all()
        assert sample.mean() == pytest.approx(3.5, abs=0.1)
