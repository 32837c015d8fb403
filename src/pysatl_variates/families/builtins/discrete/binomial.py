"""
Binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, gammaln, xlog1py, xlogy

from pysatl_variates.distributions.support import IntegerIntervalSupport
from pysatl_variates.families.builtins.common import discrete_ppf, require_integer
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.binomial import BinomialSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution: number of successes in n Bernoulli(p) trials.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1-p)^(n-k) for k = 0, ..., n

    Variates are drawn by chop-down inversion when n·min(p, 1-p) < 10 and
    by the BTPE algorithm of Kachitvichyanukul and Schmeiser (1988)
    otherwise. The setup constants of both are cached per (n, p).
    """

    def _cdf(parameters: _Standard, k: NumericArray) -> NumericArray:
        n, p = parameters.n, parameters.p
        inside = np.clip(k, 0, max(n - 1, 0))
        values = betainc(n - inside, inside + 1.0, 1.0 - p)
        return np.select([k < 0, k >= n], [0.0, 1.0], default=values)

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        x : NumericArray
            Integer points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x), 0 outside {0, ..., n}

        Raises
        ------
        DomainError
            If any point is not an integer
        """
        parameters = cast(_Standard, parameters)
        k = require_integer(x)

        n, p = parameters.n, parameters.p
        kk = np.clip(k, 0, n)
        log_pmf = (
            gammaln(n + 1.0)
            - gammaln(kk + 1.0)
            - gammaln(n - kk + 1.0)
            + xlogy(kk, p)
            + xlog1py(n - kk, -p)
        )
        return np.where((k >= 0) & (k <= n), np.exp(log_pmf), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function, I_{1-p}(n-k, k+1) on {0, ..., n-1}.

        Raises
        ------
        DomainError
            If any point is not an integer
        """
        parameters = cast(_Standard, parameters)
        return _cdf(parameters, require_integer(x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function, the smallest k with F(k) ≥ p.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        parameters = cast(_Standard, parameters)
        return discrete_ppf(p, lambda k: _cdf(parameters, k), lower=0, upper=parameters.n)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p * (1.0 - parameters.p)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of binomial distribution; nan for a degenerate distribution."""
        parameters = cast(_Standard, parameters)
        var = parameters.n * parameters.p * (1.0 - parameters.p)
        if var == 0:
            return math.nan
        return (1.0 - 2.0 * parameters.p) / math.sqrt(var)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        var = parameters.n * parameters.p * (1.0 - parameters.p)
        if var == 0:
            return math.nan
        excess_kurtosis = (1.0 - 6.0 * parameters.p * (1.0 - parameters.p)) / var
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(parameters: Parametrization) -> IntegerIntervalSupport:
        parameters = cast(_Standard, parameters)
        return IntegerIntervalSupport(0, int(parameters.n))

    def _sampler(parameters: Parametrization) -> BinomialSampler:
        parameters = cast(_Standard, parameters)
        return BinomialSampler(int(parameters.n), parameters.p)

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
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
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Success probability
        """

        n: int
        p: float

        @constraint(description="n is a non-negative integer")
        def check_n_non_negative_integer(self) -> bool:
            return float(self.n).is_integer() and self.n >= 0

        @constraint(description="0 <= p <= 1")
        def check_p_probability(self) -> bool:
            return 0.0 <= self.p <= 1.0

    ParametricFamilyRegister.register(Binomial)
