"""
Cross-checks of the unbounded discrete families against SciPy
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_variates.errors import DomainError, InvalidParameterError
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.types import CharacteristicName, FamilyName

from .base import BaseDiscreteDistributionTest

PROBABILITIES = np.array([0.05, 0.3, 0.5, 0.7, 0.95, 1.0])

CASES = [
    (FamilyName.POISSON, {"lambda_": 4.2}, stats.poisson(4.2)),
    (FamilyName.POISSON, {"lambda_": 0.3}, stats.poisson(0.3)),
    (FamilyName.NEGATIVE_BINOMIAL, {"r": 3.5, "p": 0.4}, stats.nbinom(3.5, 0.4)),
    (FamilyName.NEGATIVE_BINOMIAL, {"r": 1.0, "p": 0.9}, stats.nbinom(1.0, 0.9)),
    (FamilyName.LOGARITHMIC, {"p": 0.6}, stats.logser(0.6)),
    (FamilyName.LOGARITHMIC, {"p": 0.99}, stats.logser(0.99)),
]


def _ids(cases):
    return [f"{name}-{'-'.join(str(v) for v in params.values())}" for name, params, _ in cases]


class TestDiscreteFamiliesAgainstScipy(BaseDiscreteDistributionTest):
    def setup_method(self):
        self.registry = configure_families_register()

    @pytest.mark.parametrize("family_name, params, frozen", CASES, ids=_ids(CASES))
    def test_pmf_cdf(self, family_name, params, frozen):
        dist = self.registry.get(family_name)(**params)
        k = np.arange(-1, 40, dtype=np.float64)

        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.PMF)(k), frozen.pmf(k), rtol=1e-9, atol=1e-15
        )
        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.CDF)(k), frozen.cdf(k), atol=1e-10
        )

    @pytest.mark.parametrize("family_name, params, frozen", CASES, ids=_ids(CASES))
    def test_ppf(self, family_name, params, frozen):
        dist = self.registry.get(family_name)(**params)
        np.testing.assert_array_equal(
            dist.query_method(CharacteristicName.PPF)(PROBABILITIES), frozen.ppf(PROBABILITIES)
        )

    @pytest.mark.parametrize("family_name, params, frozen", CASES, ids=_ids(CASES))
    def test_moments(self, family_name, params, frozen):
        dist = self.registry.get(family_name)(**params)
        mean, var, skew, kurt = (float(v) for v in frozen.stats(moments="mvsk"))

        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(mean)
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(var)
        assert dist.query_method(CharacteristicName.SKEW)(None) == pytest.approx(skew, rel=1e-6)
        assert dist.query_method(CharacteristicName.KURT)(None, excess=True) == pytest.approx(
            kurt, rel=1e-6
        )

    @pytest.mark.parametrize("family_name, params, frozen", CASES, ids=_ids(CASES))
    def test_sampler(self, family_name, params, frozen):
        dist = self.registry.get(family_name)(**params)
        draws = dist.sample(10_000, seed=99).array[:, 0]

        assert np.all(dist.support.contains(draws))
        assert self.goodness_of_fit(draws, frozen) > 1e-3

    def test_non_integer_arguments_rejected(self):
        dist = self.registry.get(FamilyName.POISSON)(lambda_=2.0)
        with pytest.raises(DomainError):
            dist.query_method(CharacteristicName.PMF)(0.5)

    def test_logarithmic_cdf_tail(self):
        dist = self.registry.get(FamilyName.LOGARITHMIC)(p=0.5)
        cdf = dist.query_method(CharacteristicName.CDF)
        assert cdf(200.0) == 1.0
        assert cdf(math.inf) == 1.0
        assert cdf(0.0) == 0.0

    @pytest.mark.parametrize(
        "family_name, params",
        [
            (FamilyName.POISSON, {"lambda_": 0.0}),
            (FamilyName.NEGATIVE_BINOMIAL, {"r": 0.0, "p": 0.5}),
            (FamilyName.NEGATIVE_BINOMIAL, {"r": 1.0, "p": 1.0}),
            (FamilyName.LOGARITHMIC, {"p": 1.0}),
        ],
    )
    def test_parametrization_constraints(self, family_name, params):
        with pytest.raises(InvalidParameterError):
            self.registry.get(family_name)(**params)
