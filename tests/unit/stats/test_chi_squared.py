from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest
from scipy import stats

from pysatl_variates.stats._variates import ChiSquaredSampler, NumpyUniformSource


class TestChiSquaredSampler:
    N = 20_000

    @pytest.mark.parametrize("df", [0.4, 1.0, 1.5, 4.0, 25.0, 300.0])
    def test_matches_chi2_distribution(self, df: float) -> None:
        draws = ChiSquaredSampler(df).sample(self.N, NumpyUniformSource(seed=31))
        assert (draws >= 0.0).all()
        assert stats.kstest(draws, stats.chi2(df).cdf).pvalue > 1e-3

    def test_setup_only_above_one_degree(self) -> None:
        sampler = ChiSquaredSampler(1.0)
        assert sampler.setup is None
        sampler.df = 5.0
        setup = sampler.setup
        assert setup is not None
        assert setup.b == pytest.approx(2.0)
        assert setup.vd == pytest.approx(setup.vp - setup.vm)
        assert setup.vm >= -setup.b

    def test_small_df_routed_to_gamma(self) -> None:
        sampler = ChiSquaredSampler(0.5)
        sampler.sample(10, NumpyUniformSource(seed=1))
        assert sampler.diagnostics.draws == 0
        assert sampler.setup_cache.rebuilds == 0

    def test_trace_threshold_reaches_inner_gamma(self) -> None:
        sampler = ChiSquaredSampler(0.5)
        sampler.set_trace_threshold(17)
        assert sampler.trace_threshold == 17
        assert sampler._gamma.trace_threshold == 17
