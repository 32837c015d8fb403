"""
Beta distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, betaincinv, betaln, xlog1py, xlogy

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.composite import BetaSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution on [0, 1].

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β) for 0 ≤ x ≤ 1

    Variates are drawn as X/(X+Y) of two unit-scale gamma variates
    (Marsaglia–Tsang).
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float
            - beta: float
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, 0 outside [0, 1]
        """
        parameters = cast(_Standard, parameters)

        a = parameters.alpha
        b = parameters.beta
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = np.clip(x, 0.0, 1.0)
            log_density = xlogy(a - 1.0, z) + xlog1py(b - 1.0, -z) - betaln(a, b)
            return np.where((x >= 0) & (x <= 1), np.exp(log_density), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, betainc(parameters.alpha, parameters.beta, np.clip(x, 0.0, 1.0)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for beta distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        return cast(NumericArray, betaincinv(parameters.alpha, parameters.beta, p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.alpha / (parameters.alpha + parameters.beta)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        return a * b / ((a + b) ** 2 * (a + b + 1.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        return 2.0 * (b - a) * math.sqrt(a + b + 1.0) / ((a + b + 2.0) * math.sqrt(a * b))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of beta distribution."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        numerator = 6.0 * ((a - b) ** 2 * (a + b + 1.0) - a * b * (a + b + 2.0))
        excess_kurtosis = numerator / (a * b * (a + b + 2.0) * (a + b + 3.0))
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    def _sampler(parameters: Parametrization) -> BetaSampler:
        parameters = cast(_Standard, parameters)
        return BetaSampler(parameters.alpha, parameters.beta)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
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
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of beta distribution.

        Parameters
        ----------
        alpha : float
            First shape parameter α
        beta : float
            Second shape parameter β
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    ParametricFamilyRegister.register(Beta)
