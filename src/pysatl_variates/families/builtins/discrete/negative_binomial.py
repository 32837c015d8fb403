"""
Negative binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, gammaln, xlog1py

from pysatl_variates.distributions.support import IntegerIntervalSupport
from pysatl_variates.families.builtins.common import discrete_ppf, require_integer
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.composite import NegativeBinomialSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_negative_binomial_family() -> None:
    """
    Configure and register the NegativeBinomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    NEGATIVE_BINOMIAL_DOC = """
    Negative binomial distribution: failures before the r-th success in
    Bernoulli(p) trials. The number of successes r may be any positive real.

    Probability mass function:
        P(X = k) = Γ(k+r) / (k! Γ(r)) p^r (1-p)^k for k = 0, 1, ...

    Variates are drawn as a gamma–Poisson mixture.
    """

    def _cdf(parameters: _Standard, k: NumericArray) -> NumericArray:
        kk = np.maximum(k, 0.0)
        return np.where(k >= 0, betainc(parameters.r, kk + 1.0, parameters.p), 0.0)

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for negative binomial distribution.

        Raises
        ------
        DomainError
            If any point is not an integer
        """
        parameters = cast(_Standard, parameters)
        k = require_integer(x)

        r, p = parameters.r, parameters.p
        kk = np.maximum(k, 0.0)
        log_pmf = (
            gammaln(kk + r) - gammaln(kk + 1.0) - gammaln(r) + r * math.log(p) + xlog1py(kk, -p)
        )
        return np.where(k >= 0, np.exp(log_pmf), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return _cdf(parameters, require_integer(x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return discrete_ppf(p, lambda k: _cdf(parameters, k), lower=0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.r * (1.0 - parameters.p) / parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.r * (1.0 - parameters.p) / parameters.p**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        r, p = parameters.r, parameters.p
        return (2.0 - p) / math.sqrt(r * (1.0 - p))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        r, p = parameters.r, parameters.p
        excess_kurtosis = 6.0 / r + p * p / (r * (1.0 - p))
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> IntegerIntervalSupport:
        return IntegerIntervalSupport(0)

    def _sampler(parameters: Parametrization) -> NegativeBinomialSampler:
        parameters = cast(_Standard, parameters)
        return NegativeBinomialSampler(parameters.r, parameters.p)

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
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
    NegativeBinomial.__doc__ = NEGATIVE_BINOMIAL_DOC

    @parametrization(family=NegativeBinomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of negative binomial distribution.

        Parameters
        ----------
        r : float
            Number of successes
        p : float
            Success probability of each trial
        """

        r: float
        p: float

        @constraint(description="r > 0")
        def check_r_positive(self) -> bool:
            return self.r > 0

        @constraint(description="0 < p < 1")
        def check_p_open_unit_interval(self) -> bool:
            return 0.0 < self.p < 1.0

    ParametricFamilyRegister.register(NegativeBinomial)
