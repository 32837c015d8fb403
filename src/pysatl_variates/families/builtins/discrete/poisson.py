"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaincc, gammaln, xlogy

from pysatl_variates.distributions.support import IntegerIntervalSupport
from pysatl_variates.families.builtins.common import discrete_ppf, require_integer
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.elementary import PoissonSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution with rate λ.

    Probability mass function:
        P(X = k) = λ^k exp(-λ) / k! for k = 0, 1, ...

    Variates count unit-rate exponential arrivals before time λ, so a draw
    consumes about λ + 1 uniforms.
    """

    def _cdf(parameters: _Standard, k: NumericArray) -> NumericArray:
        kk = np.maximum(k, 0.0)
        return np.where(k >= 0, gammaincc(kk + 1.0, parameters.lambda_), 0.0)

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        k = require_integer(x)

        lam = parameters.lambda_
        kk = np.maximum(k, 0.0)
        return np.where(k >= 0, np.exp(xlogy(kk, lam) - lam - gammaln(kk + 1.0)), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return _cdf(parameters, require_integer(x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return discrete_ppf(p, lambda k: _cdf(parameters, k), lower=0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.lambda_

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return 1.0 / math.sqrt(parameters.lambda_)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        excess_kurtosis = 1.0 / parameters.lambda_
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> IntegerIntervalSupport:
        return IntegerIntervalSupport(0)

    def _sampler(parameters: Parametrization) -> PoissonSampler:
        parameters = cast(_Standard, parameters)
        return PoissonSampler(parameters.lambda_)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
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
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Poisson distribution.

        Parameters
        ----------
        lambda_ : float
            Rate λ (mean number of events)
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

    ParametricFamilyRegister.register(Poisson)
