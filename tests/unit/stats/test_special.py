from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_variates.stats._variates.special import (
    HALF_LOG_2PI,
    choose,
    log_factorial,
    log_hypergeometric_kernel,
    safe_log,
    stirling_correction,
)


class TestLogFactorial:
    @pytest.mark.parametrize("k", range(0, 21))
    def test_matches_lgamma_on_table(self, k: int) -> None:
        assert log_factorial(k) == pytest.approx(math.lgamma(k + 1), abs=1e-14)

    @pytest.mark.parametrize("k", [29, 30, 31, 50, 1000, 10**6])
    def test_series_matches_lgamma(self, k: int) -> None:
        assert log_factorial(k) == pytest.approx(math.lgamma(k + 1), rel=1e-13)

    def test_continuous_across_table_boundary(self) -> None:
        steps = [log_factorial(k + 1) - log_factorial(k) for k in (28, 29, 30)]
        for k, step in zip((28, 29, 30), steps, strict=True):
            assert step == pytest.approx(math.log(k + 1), rel=1e-12)

    def test_non_integer_is_floored(self) -> None:
        assert log_factorial(5.7) == log_factorial(5)

    def test_zero_and_one(self) -> None:
        assert log_factorial(0) == 0.0
        assert log_factorial(1) == 0.0

    @pytest.mark.parametrize("k", [-1, -0.5, -30])
    def test_negative_argument_rejected(self, k: float) -> None:
        with pytest.raises(ValueError, match="negative k"):
            log_factorial(k)


class TestStirlingCorrection:
    @pytest.mark.parametrize("k", [1, 2, 10, 29, 30, 31, 45, 200])
    def test_definition(self, k: int) -> None:
        expected = math.lgamma(k + 1) - ((k + 0.5) * math.log(k) - k + HALF_LOG_2PI)
        assert stirling_correction(k) == pytest.approx(expected, rel=1e-8, abs=1e-15)

    def test_decreasing(self) -> None:
        values = [stirling_correction(k) for k in range(1, 60)]
        assert all(a > b for a, b in zip(values, values[1:], strict=False))


class TestLogHypergeometricKernel:
    def test_sum_of_log_factorials(self) -> None:
        k, n_mn, m, n = 7, 300, 60, 200
        expected = (
            math.lgamma(k + 1)
            + math.lgamma(m - k + 1)
            + math.lgamma(n - k + 1)
            + math.lgamma(n_mn + k + 1)
        )
        assert log_hypergeometric_kernel(k, n_mn, m, n) == pytest.approx(expected, rel=1e-12)

    def test_kernel_difference_gives_pmf_ratio(self) -> None:
        big_n, big_m, n = 500, 60, 200
        n_mn = big_n - big_m - n

        def pmf(k: int) -> float:
            return math.comb(big_m, k) * math.comb(big_n - big_m, n - k) / math.comb(big_n, n)

        ratio = math.exp(
            log_hypergeometric_kernel(24, n_mn, big_m, n)
            - log_hypergeometric_kernel(20, n_mn, big_m, n)
        )
        assert ratio == pytest.approx(pmf(20) / pmf(24), rel=1e-10)


class TestChoose:
    @pytest.mark.parametrize(
        "n, k, expected",
        [(10, 3, 120.0), (5, 0, 1.0), (7.0, 1, 7.0), (52, 5, 2598960.0), (4, -1, 0.0)],
    )
    def test_values(self, n: float, k: int, expected: float) -> None:
        assert choose(n, k) == pytest.approx(expected, rel=1e-12)

    def test_large_arguments_do_not_overflow(self) -> None:
        assert choose(1000, 500) == pytest.approx(math.comb(1000, 500), rel=1e-10)


def test_safe_log() -> None:
    assert safe_log(0.0) == -math.inf
    assert safe_log(math.e) == pytest.approx(1.0)
