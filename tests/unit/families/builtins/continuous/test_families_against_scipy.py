"""
Cross-checks of the remaining continuous families against SciPy

Every family is evaluated at interior points of its support, its moments
are compared with ``scipy.stats`` and its sampler is checked with a
Kolmogorov-Smirnov test.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest

PROBABILITIES = np.array([0.05, 0.3, 0.5, 0.7, 0.95])

CASES = [
    (FamilyName.CHI_SQUARED, {"df": 4.5}, stats.chi2(4.5)),
    (FamilyName.F, {"df1": 5.0, "df2": 12.0}, stats.f(5.0, 12.0)),
    (FamilyName.STUDENT_T, {"df": 7.0}, stats.t(7.0)),
    (FamilyName.LOG_NORMAL, {"mu": 0.3, "sigma": 0.6}, stats.lognorm(0.6, scale=math.exp(0.3))),
    (FamilyName.LOG_LOGISTIC, {"scale": 2.0, "shape": 6.0}, stats.fisk(6.0, scale=2.0)),
    (FamilyName.LOGISTIC, {"mu": 1.0, "scale": 2.0}, stats.logistic(1.0, 2.0)),
    (FamilyName.LAPLACE, {"location": -1.0, "scale": 0.5}, stats.laplace(-1.0, 0.5)),
    (FamilyName.WEIBULL, {"shape": 1.7, "scale": 3.0}, stats.weibull_min(1.7, scale=3.0)),
    (FamilyName.RAYLEIGH, {"scale": 2.0}, stats.rayleigh(scale=2.0)),
    (
        FamilyName.TRIANGULAR,
        {"lower": 0.0, "mode": 1.0, "upper": 4.0},
        stats.triang(0.25, loc=0.0, scale=4.0),
    ),
    (FamilyName.PARETO, {"scale": 1.5, "shape": 6.0}, stats.pareto(6.0, scale=1.5)),
    (FamilyName.ERLANG, {"shape": 3, "rate": 2.0}, stats.gamma(3.0, scale=0.5)),
    (FamilyName.CAUCHY, {"location": 1.0, "scale": 2.0}, stats.cauchy(1.0, 2.0)),
    (FamilyName.LEVY, {"location": 0.5, "scale": 1.5}, stats.levy(0.5, 1.5)),
]

FINITE_MOMENT_CASES = [
    case for case in CASES if case[0] not in (FamilyName.CAUCHY, FamilyName.LEVY)
]


def _ids(cases):
    return [str(case[0]) for case in cases]


class TestContinuousFamiliesAgainstScipy(BaseDistributionTest):
    def setup_method(self):
        self.registry = configure_families_register()

    @pytest.mark.parametrize("family_name, params, frozen", CASES, ids=_ids(CASES))
    def test_pdf_cdf_ppf(self, family_name, params, frozen):
        dist = self.registry.get(family_name)(**params)
        x = frozen.ppf(PROBABILITIES)

        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.PDF)(x), frozen.pdf(x), rtol=1e-8
        )
        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.CDF)(x), frozen.cdf(x), rtol=1e-8
        )
        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.PPF)(PROBABILITIES), x, rtol=1e-7
        )

    @pytest.mark.parametrize(
        "family_name, params, frozen", FINITE_MOMENT_CASES, ids=_ids(FINITE_MOMENT_CASES)
    )
    def test_moments(self, family_name, params, frozen):
        dist = self.registry.get(family_name)(**params)
        mean, var, skew, kurt = (float(v) for v in frozen.stats(moments="mvsk"))

        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(mean)
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(var)
        skewness = dist.query_method(CharacteristicName.SKEW)(None)
        assert skewness == pytest.approx(skew, rel=1e-8, abs=1e-12)
        kurt_func = dist.query_method(CharacteristicName.KURT)
        assert kurt_func(None, excess=True) == pytest.approx(kurt, rel=1e-8, abs=1e-12)
        assert kurt_func(None) == pytest.approx(kurt + 3.0)

    def test_undefined_moments(self):
        cauchy = self.registry.get(FamilyName.CAUCHY)(location=0.0, scale=1.0)
        levy = self.registry.get(FamilyName.LEVY)(location=0.0, scale=1.0)

        assert math.isnan(cauchy.query_method(CharacteristicName.MEAN)(None))
        assert math.isnan(cauchy.query_method(CharacteristicName.KURT)(None, excess=True))
        assert levy.query_method(CharacteristicName.MEAN)(None) == math.inf
        assert levy.query_method(CharacteristicName.VAR)(None) == math.inf
        assert math.isnan(levy.query_method(CharacteristicName.SKEW)(None))

    def test_heavy_tailed_moments(self):
        student = self.registry.get(FamilyName.STUDENT_T)(df=2.0)
        pareto = self.registry.get(FamilyName.PARETO)(scale=1.0, shape=1.5)

        assert student.query_method(CharacteristicName.VAR)(None) == math.inf
        assert pareto.query_method(CharacteristicName.VAR)(None) == math.inf
        assert math.isnan(pareto.query_method(CharacteristicName.SKEW)(None))

    @pytest.mark.parametrize("family_name, params, frozen", CASES, ids=_ids(CASES))
    def test_sampler(self, family_name, params, frozen):
        dist = self.registry.get(family_name)(**params)
        sample = dist.sample(2000, seed=20250).array[:, 0]

        assert sample.shape == (2000,)
        assert np.all(dist.support.contains(sample))
        assert stats.kstest(sample, frozen.cdf).pvalue > 1e-4
