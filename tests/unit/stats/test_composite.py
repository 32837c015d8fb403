from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import special, stats

from pysatl_variates.stats._variates import (
    BetaSampler,
    FSampler,
    LogLogisticSampler,
    LogNormalSampler,
    MarsagliaTsangGammaSampler,
    NegativeBinomialSampler,
    NumpyUniformSource,
    StudentTSampler,
)

N = 20_000


@pytest.mark.parametrize(
    "sampler, reference",
    [
        (MarsagliaTsangGammaSampler(0.3), stats.gamma(0.3)),
        (MarsagliaTsangGammaSampler(1.0), stats.gamma(1.0)),
        (MarsagliaTsangGammaSampler(4.5), stats.gamma(4.5)),
        (BetaSampler(2.0, 5.0), stats.beta(2.0, 5.0)),
        (BetaSampler(0.5, 0.5), stats.beta(0.5, 0.5)),
        (FSampler(5.0, 10.0), stats.f(5.0, 10.0)),
        (FSampler(1.0, 0.7), stats.f(1.0, 0.7)),
        (StudentTSampler(3.0), stats.t(3.0)),
        (StudentTSampler(30.0), stats.t(30.0)),
        (LogNormalSampler(0.5, 0.8), stats.lognorm(s=0.8, scale=math.exp(0.5))),
        (LogLogisticSampler(2.0, 3.0), stats.fisk(c=3.0, scale=2.0)),
    ],
    ids=lambda value: repr(value) if not hasattr(value, "dist") else value.dist.name,
)
def test_matches_reference_distribution(sampler, reference) -> None:
    draws = sampler.sample(N, NumpyUniformSource(seed=101))
    assert stats.kstest(draws, reference.cdf).pvalue > 1e-3


class TestMarsagliaTsangGammaSampler:
    def test_log_draw_is_finite_where_draw_underflows(self) -> None:
        sampler = MarsagliaTsangGammaSampler(0.001)
        logs = np.array([sampler.log_draw(NumpyUniformSource(seed=s)) for s in range(2000)])

        assert np.isfinite(logs).all()
        assert logs.min() < -745.0
        assert logs.mean() == pytest.approx(special.digamma(0.001), rel=0.1)

    @pytest.mark.parametrize("shape", [0.3, 4.5])
    def test_log_draw_consumes_like_draw(self, shape: float) -> None:
        sampler = MarsagliaTsangGammaSampler(shape)
        value = sampler.draw(NumpyUniformSource(seed=5))
        log_value = sampler.log_draw(NumpyUniformSource(seed=5))
        assert log_value == pytest.approx(math.log(value), rel=1e-12)


class TestBetaSampler:
    def test_mean(self) -> None:
        draws = BetaSampler(2.0, 5.0).sample(N, NumpyUniformSource(seed=7))
        assert draws.mean() == pytest.approx(2.0 / 7.0, rel=0.02)
        assert ((draws > 0.0) & (draws < 1.0)).all()

    @pytest.mark.parametrize("alpha, beta", [(0.001, 0.001), (0.001, 2.0), (0.01, 0.05)])
    def test_tiny_shapes_stay_inside_unit_interval(self, alpha: float, beta: float) -> None:
        draws = BetaSampler(alpha, beta).sample(2000, NumpyUniformSource(seed=3))
        assert np.isfinite(draws).all()
        assert ((draws > 0.0) & (draws < 1.0)).all()
        assert draws.mean() == pytest.approx(alpha / (alpha + beta), abs=0.05)

    def test_parameters_pushed_into_constituents(self) -> None:
        sampler = BetaSampler(2.0, 5.0)
        source = NumpyUniformSource(seed=8)
        sampler.draw(source)
        sampler.alpha = 9.0
        draws = sampler.sample(N, source)
        assert draws.mean() == pytest.approx(9.0 / 14.0, rel=0.02)
        assert sampler._x.setup_cache.key == 9.0

    def test_trace_threshold_forwarded(self) -> None:
        sampler = BetaSampler(2.0, 5.0)
        sampler.set_trace_threshold(5)
        assert sampler._x.trace_threshold == 5
        assert sampler._y.trace_threshold == 5


class TestFSampler:
    def test_trace_threshold_forwarded(self) -> None:
        sampler = FSampler(3.0, 4.0)
        sampler.set_trace_threshold(12)
        assert sampler._numerator.trace_threshold == 12
        assert sampler._denominator.trace_threshold == 12


class TestNegativeBinomialSampler:
    @pytest.mark.parametrize("r, p", [(3.0, 0.4), (0.5, 0.2), (12.5, 0.7)])
    def test_moments(self, r: float, p: float) -> None:
        draws = NegativeBinomialSampler(r, p).sample(N, NumpyUniformSource(seed=17))
        reference = stats.nbinom(r, p)
        assert np.all(draws == np.floor(draws))
        assert draws.mean() == pytest.approx(reference.mean(), rel=0.05)
        assert draws.var() == pytest.approx(reference.var(), rel=0.1)

    def test_trace_threshold_forwarded(self) -> None:
        sampler = NegativeBinomialSampler(2.0, 0.5)
        sampler.set_trace_threshold(3)
        assert sampler._gamma.trace_threshold == 3
