"""
Cauchy distribution family implementation.
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
from pysatl_variates.stats._variates.elementary import CauchySampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy distribution with location x₀ and scale γ.

    Probability density function:
        f(x) = 1 / (πγ (1 + ((x - x₀)/γ)²))

    No moments exist; mean, variance, skewness and kurtosis are nan.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        z = (np.asarray(x, dtype=np.float64) - parameters.location) / parameters.scale
        return cast(NumericArray, 1.0 / (math.pi * parameters.scale * (1.0 + z * z)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        z = (np.asarray(x, dtype=np.float64) - parameters.location) / parameters.scale
        return cast(NumericArray, 0.5 + np.arctan(z) / math.pi)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        quantile = parameters.location + parameters.scale * np.tan(math.pi * (p - 0.5))
        return np.select([p == 0.0, p == 1.0], [-np.inf, np.inf], default=quantile)

    def undefined_moment(_1: Parametrization, _2: Any) -> float:
        return math.nan

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        return math.nan

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _sampler(parameters: Parametrization) -> CauchySampler:
        parameters = cast(_Standard, parameters)
        return CauchySampler(parameters.location, parameters.scale)

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: undefined_moment,
            CharacteristicName.VAR: undefined_moment,
            CharacteristicName.SKEW: undefined_moment,
            CharacteristicName.KURT: kurt_func,
        },
        sampler_by_parametrization=_sampler,
        support_by_parametrization=_support,
    )
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Cauchy distribution.

        Parameters
        ----------
        location : float
            Location x₀ (the median)
        scale : float
            Scale γ (half width at half maximum)
        """

        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Cauchy)
