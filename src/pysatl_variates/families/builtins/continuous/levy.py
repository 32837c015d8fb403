"""
Lévy distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erfc, erfcinv

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.elementary import LevySampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_levy_family() -> None:
    """
    Configure and register the Levy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LEVY):
        return

    LEVY_DOC = """
    Lévy distribution with location μ and scale c.

    Probability density function:
        f(x) = √(c/2π) exp(-c/(2(x-μ))) / (x-μ)^(3/2) for x > μ

    The mean and variance are infinite; skewness and kurtosis are undefined.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        c = parameters.scale
        y = np.asarray(x, dtype=np.float64) - parameters.location
        with np.errstate(divide="ignore", invalid="ignore"):
            density = math.sqrt(c / (2.0 * math.pi)) * np.exp(-0.5 * c / y) / y**1.5
        return np.where(y > 0, density, 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        y = np.asarray(x, dtype=np.float64) - parameters.location
        with np.errstate(divide="ignore", invalid="ignore"):
            values = erfc(np.sqrt(0.5 * parameters.scale / y))
        return np.where(y > 0, values, 0.0)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Lévy distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        with np.errstate(divide="ignore"):
            return cast(
                NumericArray,
                parameters.location + 0.5 * parameters.scale / erfcinv(p) ** 2,
            )

    def mean_func(_1: Parametrization, _2: Any) -> float:
        return math.inf

    def var_func(_1: Parametrization, _2: Any) -> float:
        return math.inf

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return math.nan

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        return math.nan

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(left=parameters.location, left_closed=False)

    def _sampler(parameters: Parametrization) -> LevySampler:
        parameters = cast(_Standard, parameters)
        return LevySampler(parameters.location, parameters.scale)

    Levy = ParametricFamily(
        name=FamilyName.LEVY,
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
    Levy.__doc__ = LEVY_DOC

    @parametrization(family=Levy, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Lévy distribution.

        Parameters
        ----------
        location : float
            Location μ
        scale : float
            Scale c
        """

        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Levy)
