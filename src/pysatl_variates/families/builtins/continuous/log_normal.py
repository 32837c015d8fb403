"""
Log-normal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.composite import LogNormalSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_log_normal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    Log-normal distribution: X = exp(μ + σZ) with Z standard normal.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        mu, sigma = parameters.mu, parameters.sigma
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = (np.log(x) - mu) / sigma
            density = np.exp(-0.5 * z * z) / (x * sigma * math.sqrt(2.0 * math.pi))
            return np.where(x > 0, density, 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = (np.log(x) - parameters.mu) / parameters.sigma
            return np.where(x > 0, ndtr(z), 0.0)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for log-normal distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        return cast(NumericArray, np.exp(parameters.mu + parameters.sigma * ndtri(p)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return math.exp(parameters.mu + 0.5 * parameters.sigma**2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        s2 = parameters.sigma**2
        return math.expm1(s2) * math.exp(2.0 * parameters.mu + s2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        s2 = parameters.sigma**2
        return (math.exp(s2) + 2.0) * math.sqrt(math.expm1(s2))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        s2 = parameters.sigma**2
        excess_kurtosis = math.exp(4 * s2) + 2 * math.exp(3 * s2) + 3 * math.exp(2 * s2) - 6.0
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    def _sampler(parameters: Parametrization) -> LogNormalSampler:
        parameters = cast(_Standard, parameters)
        return LogNormalSampler(parameters.mu, parameters.sigma)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
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
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of log-normal distribution.

        Parameters
        ----------
        mu : float
            Mean of ln X
        sigma : float
            Standard deviation of ln X
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(LogNormal)
