"""
Weibull distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gamma as gamma_function
from scipy.special import xlogy

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.elementary import WeibullSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution with shape k and scale λ.

    Probability density function:
        f(x) = (k/λ) (x/λ)^(k-1) exp(-(x/λ)^k) for x ≥ 0

    Moments follow from the raw moments E[X^r] = λ^r Γ(1 + r/k).
    """

    def _raw_moment(parameters: _Standard, r: int) -> float:
        return parameters.scale**r * float(gamma_function(1.0 + r / parameters.shape))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        k, lam = parameters.shape, parameters.scale
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            z = np.maximum(x, 0.0) / lam
            log_density = math.log(k / lam) + xlogy(k - 1.0, z) - z**k
            return np.where(x >= 0, np.exp(log_density), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        z = np.maximum(np.asarray(x, dtype=np.float64), 0.0) / parameters.scale
        return cast(NumericArray, -np.expm1(-(z**parameters.shape)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Weibull distribution.

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
                parameters.scale * (-np.log1p(-p)) ** (1.0 / parameters.shape),
            )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return _raw_moment(parameters, 1)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return _raw_moment(parameters, 2) - _raw_moment(parameters, 1) ** 2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        m1, m2, m3 = (_raw_moment(parameters, r) for r in (1, 2, 3))
        var = m2 - m1**2
        return (m3 - 3.0 * m1 * var - m1**3) / var**1.5

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        m1, m2, m3, m4 = (_raw_moment(parameters, r) for r in (1, 2, 3, 4))
        var = m2 - m1**2
        kurtosis = (m4 - 4.0 * m1 * m3 + 6.0 * m1**2 * m2 - 3.0 * m1**4) / var**2
        if not excess:
            return kurtosis
        else:
            return kurtosis - 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization) -> WeibullSampler:
        parameters = cast(_Standard, parameters)
        return WeibullSampler(parameters.shape, parameters.scale)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
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
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Weibull distribution.

        Parameters
        ----------
        shape : float
            Shape k
        scale : float
            Scale λ
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Weibull)
