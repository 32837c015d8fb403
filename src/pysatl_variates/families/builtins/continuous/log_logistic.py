"""
Log-logistic distribution family implementation.
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
from pysatl_variates.stats._variates.composite import LogLogisticSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_log_logistic_family() -> None:
    """
    Configure and register the LogLogistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_LOGISTIC):
        return

    LOG_LOGISTIC_DOC = """
    Log-logistic (Fisk) distribution with scale α and shape β.

    Cumulative distribution function:
        F(x) = 1 / (1 + (x/α)^(-β)) for x > 0

    The r-th raw moment α^r (rπ/β) / sin(rπ/β) exists only for β > r.
    """

    def _raw_moment(parameters: _Standard, r: int) -> float:
        b = r * math.pi / parameters.shape
        return parameters.scale**r * b / math.sin(b)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        alpha, beta = parameters.scale, parameters.shape
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            z = np.maximum(x, 0.0) / alpha
            density = (beta / alpha) * z ** (beta - 1.0) / (1.0 + z**beta) ** 2
            return np.where(x >= 0, density, 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", over="ignore"):
            z = (np.maximum(x, 0.0) / parameters.scale) ** parameters.shape
            return cast(NumericArray, np.where(np.isinf(z), 1.0, z / (1.0 + z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for log-logistic distribution.

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
                parameters.scale * (p / (1.0 - p)) ** (1.0 / parameters.shape),
            )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        if parameters.shape <= 1.0:
            return math.inf
        return _raw_moment(parameters, 1)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        if parameters.shape <= 1.0:
            return math.nan
        if parameters.shape <= 2.0:
            return math.inf
        return _raw_moment(parameters, 2) - _raw_moment(parameters, 1) ** 2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        if parameters.shape <= 3.0:
            return math.nan
        m1, m2, m3 = (_raw_moment(parameters, r) for r in (1, 2, 3))
        var = m2 - m1**2
        return (m3 - 3.0 * m1 * var - m1**3) / var**1.5

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        if parameters.shape <= 4.0:
            return math.nan
        m1, m2, m3, m4 = (_raw_moment(parameters, r) for r in (1, 2, 3, 4))
        var = m2 - m1**2
        kurtosis = (m4 - 4.0 * m1 * m3 + 6.0 * m1**2 * m2 - 3.0 * m1**4) / var**2
        if not excess:
            return kurtosis
        else:
            return kurtosis - 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization) -> LogLogisticSampler:
        parameters = cast(_Standard, parameters)
        return LogLogisticSampler(parameters.scale, parameters.shape)

    LogLogistic = ParametricFamily(
        name=FamilyName.LOG_LOGISTIC,
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
    LogLogistic.__doc__ = LOG_LOGISTIC_DOC

    @parametrization(family=LogLogistic, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of log-logistic distribution.

        Parameters
        ----------
        scale : float
            Scale α, the median of the distribution
        shape : float
            Shape β
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(LogLogistic)
