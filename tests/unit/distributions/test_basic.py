from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from typing import Any, cast

import pytest
from mypy_extensions import KwArg

from pysatl_variates.distributions import (
    AnalyticalComputation,
    AnalyticalComputationStrategy,
    Distribution,
)
from pysatl_variates.distributions.support import ContinuousSupport, IntegerIntervalSupport
from pysatl_variates.stats._variates import (
    BinomialSampler,
    SequenceUniformSource,
    UniformSampler,
)
from pysatl_variates.types import Kind
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


class DistributionTestBase:
    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    PMF = "pmf"

    def make_uniform_distribution(self) -> StandaloneEuclideanUnivariateDistribution:
        ppf_func = cast(Callable[[float, KwArg(Any)], float], lambda q, **kwargs: q)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[float, float](target=self.PPF, func=ppf_func),
            ],
            sampler=UniformSampler(0.0, 1.0),
            support=ContinuousSupport(0, 1),
        )

    def make_logistic_cdf_distribution(self) -> StandaloneEuclideanUnivariateDistribution:
        def logistic_cdf(x: float, **_: Any) -> float:
            return 1.0 / (1.0 + math.exp(-x))

        logistic_cdf_func = cast(Callable[[float, KwArg(Any)], float], logistic_cdf)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[float, float](target=self.CDF, func=logistic_cdf_func),
            ],
            support=ContinuousSupport(),
        )

    def make_binomial_distribution(self) -> StandaloneEuclideanUnivariateDistribution:
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.DISCRETE,
            sampler=BinomialSampler(10, 0.3),
            support=IntegerIntervalSupport(0, 10),
        )


class TestDistributionProtocol(DistributionTestBase):
    def test_standalone_is_distribution(self) -> None:
        assert isinstance(self.make_uniform_distribution(), Distribution)

    def test_query_method_returns_analytical_computation(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        method = distr.query_method(self.CDF)
        assert isinstance(method, AnalyticalComputation)
        assert method(0.0) == pytest.approx(0.5)

    def test_calculate_characteristic(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        assert distr.calculate_characteristic(self.CDF, 0.0) == pytest.approx(0.5)

    def test_missing_characteristic_lists_available(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        with pytest.raises(RuntimeError, match=r"'pdf' .*available: cdf"):
            distr.query_method(self.PDF)

    def test_strategy_reports_none_available(self) -> None:
        distr = self.make_binomial_distribution()
        with pytest.raises(RuntimeError, match="available: none"):
            AnalyticalComputationStrategy().query_method(self.PMF, distr)

    def test_sample_one_consumes_source(self) -> None:
        distr = self.make_uniform_distribution()
        source = SequenceUniformSource([0.25, 0.75])
        assert distr.sample_one(source) == 0.25
        assert distr.sample_one(source) == 0.75

    def test_discrete_draws_in_support(self) -> None:
        distr = self.make_binomial_distribution()
        sample = distr.sample(500, seed=3)
        assert distr.support is not None
        assert distr.support.contains(sample.array[:, 0]).all()

    def test_missing_sampler(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        with pytest.raises(RuntimeError, match="No sampler"):
            distr.sample(3)
