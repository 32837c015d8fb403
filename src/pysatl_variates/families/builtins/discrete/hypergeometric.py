"""
Hypergeometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln

from pysatl_variates.distributions.support import IntegerIntervalSupport
from pysatl_variates.families.builtins.common import discrete_ppf, require_integer
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.hypergeometric import HypergeometricSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def _log_choose(n: float, k: NumericArray) -> NumericArray:
    return cast(NumericArray, gammaln(n + 1.0) - gammaln(k + 1.0) - gammaln(n - k + 1.0))


def configure_hypergeometric_family() -> None:
    """
    Configure and register the Hypergeometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HYPERGEOMETRIC):
        return

    HYPERGEOMETRIC_DOC = """
    Hypergeometric distribution: number of marked items in a sample of n
    drawn without replacement from N items of which M are marked.

    Probability mass function:
        P(X = k) = C(M, k) C(N-M, n-k) / C(N, n)
        for max(0, n+M-N) ≤ k ≤ min(n, M)

    Variates are drawn with the algorithms of Kachitvichyanukul and Schmeiser
    (1985). Parameters are first reduced by the symmetries M → N-M and
    n → N-n. The reduced problem uses inversion (HIN) when its mean is below
    10 and the triangle–parallelogram–exponential rejection method (H2PE)
    otherwise, and the result is mapped back.
    """

    def _bounds(parameters: _Standard) -> tuple[int, int]:
        big_n, big_m, n = int(parameters.N), int(parameters.M), int(parameters.n)
        return max(0, n + big_m - big_n), min(n, big_m)

    def _pmf(parameters: _Standard, k: NumericArray) -> NumericArray:
        big_n, big_m, n = parameters.N, parameters.M, parameters.n
        lo, hi = _bounds(parameters)
        kk = np.clip(k, lo, hi)
        log_pmf = (
            _log_choose(big_m, kk)
            + _log_choose(big_n - big_m, n - kk)
            - _log_choose(big_n, n)
        )
        return np.where((k >= lo) & (k <= hi), np.exp(log_pmf), 0.0)

    def _cdf(parameters: _Standard, k: NumericArray) -> NumericArray:
        lo, hi = _bounds(parameters)
        grid = np.arange(lo, hi + 1, dtype=np.float64)
        cumulative = np.minimum(np.cumsum(_pmf(parameters, grid)), 1.0)
        index = np.clip(k, lo, hi).astype(np.int64) - lo
        return np.select([k < lo, k >= hi], [0.0, 1.0], default=cumulative[index])

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for hypergeometric distribution.

        Raises
        ------
        DomainError
            If any point is not an integer
        """
        parameters = cast(_Standard, parameters)
        return _pmf(parameters, require_integer(x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return _cdf(parameters, require_integer(x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        lo, hi = _bounds(parameters)
        return discrete_ppf(p, lambda k: _cdf(parameters, k), lower=lo, upper=hi)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        if parameters.N == 0:
            return 0.0
        return parameters.n * parameters.M / parameters.N

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        big_n, big_m, n = parameters.N, parameters.M, parameters.n
        if big_n <= 1:
            return 0.0
        return n * (big_m / big_n) * ((big_n - big_m) / big_n) * ((big_n - n) / (big_n - 1.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of hypergeometric distribution; nan when the variance vanishes."""
        parameters = cast(_Standard, parameters)
        big_n, big_m, n = parameters.N, parameters.M, parameters.n
        spread = n * big_m * (big_n - big_m) * (big_n - n)
        if spread == 0 or big_n <= 2:
            return math.nan
        return (
            (big_n - 2.0 * big_m)
            * math.sqrt(big_n - 1.0)
            * (big_n - 2.0 * n)
            / (math.sqrt(spread) * (big_n - 2.0))
        )

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis; nan when the variance vanishes or N ≤ 3."""
        parameters = cast(_Standard, parameters)
        big_n, big_m, n = float(parameters.N), float(parameters.M), float(parameters.n)
        spread = n * big_m * (big_n - big_m) * (big_n - n)
        if spread == 0 or big_n <= 3:
            return math.nan
        numerator = (big_n - 1.0) * big_n**2 * (
            big_n * (big_n + 1.0) - 6.0 * big_m * (big_n - big_m) - 6.0 * n * (big_n - n)
        ) + 6.0 * spread * (5.0 * big_n - 6.0)
        excess_kurtosis = numerator / (spread * (big_n - 2.0) * (big_n - 3.0))
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(parameters: Parametrization) -> IntegerIntervalSupport:
        parameters = cast(_Standard, parameters)
        lo, hi = _bounds(parameters)
        return IntegerIntervalSupport(lo, hi)

    def _sampler(parameters: Parametrization) -> HypergeometricSampler:
        parameters = cast(_Standard, parameters)
        return HypergeometricSampler(int(parameters.N), int(parameters.M), int(parameters.n))

    Hypergeometric = ParametricFamily(
        name=FamilyName.HYPERGEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        sampler_by_parametrization=_sampler,
        support_by_parametrization=_support,
    )
    Hypergeometric.__doc__ = HYPERGEOMETRIC_DOC

    @parametrization(family=Hypergeometric, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of hypergeometric distribution.

        Parameters
        ----------
        N : int
            Population size
        M : int
            Number of marked items in the population
        n : int
            Sample size
        """

        N: int
        M: int
        n: int

        @constraint(description="N is a non-negative integer")
        def check_population_size(self) -> bool:
            return float(self.N).is_integer() and self.N >= 0

        @constraint(description="M is an integer with 0 <= M <= N")
        def check_marked_count(self) -> bool:
            return float(self.M).is_integer() and 0 <= self.M <= self.N

        @constraint(description="n is an integer with 0 <= n <= N")
        def check_sample_size(self) -> bool:
            return float(self.n).is_integer() and 0 <= self.n <= self.N

    ParametricFamilyRegister.register(Hypergeometric)
