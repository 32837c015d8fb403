from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_variates.stats._variates import (
    GammaSampler,
    NumpyUniformSource,
    SequenceUniformSource,
)


class TestGammaSampler:
    N = 20_000

    def test_mean_and_variance_gd(self) -> None:
        draws = GammaSampler(shape=5.0, scale=2.0).sample(self.N, NumpyUniformSource(seed=42))
        assert draws.mean() == pytest.approx(10.0, rel=0.03)
        assert draws.var() == pytest.approx(20.0, rel=0.08)

    @pytest.mark.parametrize("shape", [0.1, 0.5, 0.9])
    def test_small_shape_gs(self, shape: float) -> None:
        draws = GammaSampler(shape=shape).sample(self.N, NumpyUniformSource(seed=3))
        assert (draws >= 0.0).all()
        assert stats.kstest(draws, stats.gamma(shape).cdf).pvalue > 1e-3

    @pytest.mark.parametrize("shape", [1.0, 2.5, 7.0, 30.0])
    def test_matches_gamma_distribution(self, shape: float) -> None:
        draws = GammaSampler(shape=shape, scale=1.5).sample(self.N, NumpyUniformSource(seed=11))
        assert stats.kstest(draws, stats.gamma(shape, scale=1.5).cdf).pvalue > 1e-3

    def test_determinism(self) -> None:
        a = GammaSampler(3.3).sample(500, NumpyUniformSource(seed=9))
        b = GammaSampler(3.3).sample(500, NumpyUniformSource(seed=9))
        np.testing.assert_array_equal(a, b)

    def test_setup_cached_per_shape(self) -> None:
        sampler = GammaSampler(4.0)
        source = NumpyUniformSource(seed=1)
        sampler.sample(100, source)
        assert sampler.setup_cache.rebuilds == 1
        assert sampler.hat_cache.rebuilds <= 1

        sampler.scale = 3.0
        sampler.draw(source)
        assert sampler.setup_cache.rebuilds == 1

        sampler.shape = 0.5
        sampler.draw(source)
        assert sampler.setup_cache.rebuilds == 2
        assert sampler.setup_cache.key == 0.5

    def test_switching_regimes_keeps_distribution(self) -> None:
        sampler = GammaSampler(0.7)
        source = NumpyUniformSource(seed=21)
        sampler.sample(10, source)
        sampler.shape = 6.0
        draws = sampler.sample(self.N, source)
        assert draws.mean() == pytest.approx(6.0, rel=0.03)

    def test_setup_constants(self) -> None:
        sampler = GammaSampler(0.5)
        assert sampler.setup.b == pytest.approx(1.0 + 0.5 / np.e, rel=1e-9)
        sampler.shape = 8.5
        assert sampler.setup.s == pytest.approx(np.sqrt(8.0))
        assert sampler.setup.d == pytest.approx(5.656854249 - 12.0 * np.sqrt(8.0))

    def test_unit_shape_uses_gd(self) -> None:
        sampler = GammaSampler(1.0)
        assert sampler.setup.s == pytest.approx(math.sqrt(0.5))
        assert math.isnan(sampler.setup.b)

        # v1 = 0.6, v2 = 0.0, a non-negative normal deviate is accepted at once
        value = sampler.draw(SequenceUniformSource([0.8, 0.5]))
        t = 0.6 * math.sqrt(-2.0 * math.log(0.36) / 0.36)
        assert value == pytest.approx((math.sqrt(0.5) + 0.5 * t) ** 2)

    def test_shape_just_below_one_uses_gs(self) -> None:
        sampler = GammaSampler(math.nextafter(1.0, 0.0))
        assert not math.isnan(sampler.setup.b)
        assert math.isnan(sampler.setup.s)
