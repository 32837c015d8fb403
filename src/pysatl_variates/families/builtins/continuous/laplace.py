"""
Laplace distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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
from pysatl_variates.stats._variates.elementary import LaplaceSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = exp(-|x - μ|/b) / (2b)
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        b = parameters.scale
        return cast(NumericArray, np.exp(-np.abs(x - parameters.location) / b) / (2.0 * b))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        z = (np.asarray(x, dtype=np.float64) - parameters.location) / parameters.scale
        with np.errstate(over="ignore"):
            return np.where(z < 0, 0.5 * np.exp(z), 1.0 - 0.5 * np.exp(-z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Laplace distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        mu, b = parameters.location, parameters.scale
        with np.errstate(divide="ignore"):
            return np.where(p <= 0.5, mu + b * np.log(2.0 * p), mu - b * np.log(2.0 - 2.0 * p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.location

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return 2.0 * parameters.scale**2

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        if not excess:
            return 6.0
        else:
            return 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _sampler(parameters: Parametrization) -> LaplaceSampler:
        parameters = cast(_Standard, parameters)
        return LaplaceSampler(parameters.location, parameters.scale)

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
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
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Laplace distribution.

        Parameters
        ----------
        location : float
            Location μ
        scale : float
            Scale b
        """

        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Laplace)
