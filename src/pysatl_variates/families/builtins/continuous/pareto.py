"""
Pareto distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.elementary import ParetoSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto (type I) distribution with scale x_m and shape α.

    Probability density function:
        f(x) = α x_m^α / x^(α+1) for x ≥ x_m

    The moment of order r exists only for α > r.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        xm, alpha = parameters.scale, parameters.shape
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            density = alpha / xm * (xm / x) ** (alpha + 1.0)
        return np.where(x >= xm, density, 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        xm = parameters.scale
        x = np.maximum(np.asarray(x, dtype=np.float64), xm)
        return cast(NumericArray, 1.0 - (xm / x) ** parameters.shape)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Pareto distribution.

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
                parameters.scale * (1.0 - p) ** (-1.0 / parameters.shape),
            )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 1.0:
            return math.inf
        return alpha * parameters.scale / (alpha - 1.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 1.0:
            return math.nan
        if alpha <= 2.0:
            return math.inf
        return parameters.scale**2 * alpha / ((alpha - 1.0) ** 2 * (alpha - 2.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 3.0:
            return math.nan
        return 2.0 * (1.0 + alpha) / (alpha - 3.0) * math.sqrt((alpha - 2.0) / alpha)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 4.0:
            return math.nan
        excess_kurtosis = (
            6.0
            * (alpha**3 + alpha**2 - 6.0 * alpha - 2.0)
            / (alpha * (alpha - 3.0) * (alpha - 4.0))
        )
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(left=parameters.scale)

    def _sampler(parameters: Parametrization) -> ParetoSampler:
        parameters = cast(_Standard, parameters)
        return ParetoSampler(parameters.scale, parameters.shape)

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
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
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Pareto distribution.

        Parameters
        ----------
        scale : float
            Scale x_m, the smallest attainable value
        shape : float
            Tail index α
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(Pareto)
