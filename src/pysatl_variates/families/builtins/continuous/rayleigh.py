"""
Rayleigh distribution family implementation.
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
from pysatl_variates.stats._variates.elementary import RayleighSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

RAYLEIGH_SKEWNESS = 2.0 * math.sqrt(math.pi) * (math.pi - 3.0) / (4.0 - math.pi) ** 1.5
RAYLEIGH_EXCESS_KURTOSIS = -(6.0 * math.pi**2 - 24.0 * math.pi + 16.0) / (4.0 - math.pi) ** 2


def configure_rayleigh_family() -> None:
    """
    Configure and register the Rayleigh distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.RAYLEIGH):
        return

    RAYLEIGH_DOC = """
    Rayleigh distribution with scale σ.

    Probability density function:
        f(x) = x/σ² exp(-x²/(2σ²)) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        s2 = parameters.scale**2
        x = np.asarray(x, dtype=np.float64)
        return np.where(x >= 0, x / s2 * np.exp(-0.5 * x * x / s2), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        z = np.maximum(np.asarray(x, dtype=np.float64), 0.0) / parameters.scale
        return cast(NumericArray, -np.expm1(-0.5 * z * z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        with np.errstate(divide="ignore"):
            return cast(NumericArray, parameters.scale * np.sqrt(-2.0 * np.log1p(-p)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.scale * math.sqrt(0.5 * math.pi)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return 0.5 * (4.0 - math.pi) * parameters.scale**2

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return RAYLEIGH_SKEWNESS

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        if not excess:
            return RAYLEIGH_EXCESS_KURTOSIS + 3.0
        else:
            return RAYLEIGH_EXCESS_KURTOSIS

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization) -> RayleighSampler:
        parameters = cast(_Standard, parameters)
        return RayleighSampler(parameters.scale)

    Rayleigh = ParametricFamily(
        name=FamilyName.RAYLEIGH,
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
    Rayleigh.__doc__ = RAYLEIGH_DOC

    @parametrization(family=Rayleigh, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Rayleigh distribution.

        Parameters
        ----------
        scale : float
            Scale σ
        """

        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Rayleigh)
