"""
Logistic distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit, logit

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.elementary import LogisticSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    LOGISTIC_DOC = """
    Logistic distribution with location μ and scale s.

    Cumulative distribution function:
        F(x) = 1 / (1 + exp(-(x-μ)/s))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        s = parameters.scale
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / s
        with np.errstate(over="ignore"):
            return cast(NumericArray, 1.0 / (4.0 * s * np.cosh(0.5 * z) ** 2))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, expit((np.asarray(x) - parameters.mu) / parameters.scale))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for logistic distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        return cast(NumericArray, parameters.mu + parameters.scale * logit(p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return (parameters.scale * math.pi) ** 2 / 3.0

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        if not excess:
            return 4.2
        else:
            return 1.2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _sampler(parameters: Parametrization) -> LogisticSampler:
        parameters = cast(_Standard, parameters)
        return LogisticSampler(parameters.mu, parameters.scale)

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
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
    Logistic.__doc__ = LOGISTIC_DOC

    @parametrization(family=Logistic, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of logistic distribution.

        Parameters
        ----------
        mu : float
            Location μ
        scale : float
            Scale s
        """

        mu: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Logistic)
