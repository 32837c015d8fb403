"""
Triangular distribution family implementation.
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
from pysatl_variates.stats._variates.elementary import TriangularSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return

    TRIANGULAR_DOC = """
    Triangular distribution on [a, b] with mode c.

    The density rises linearly from 0 at a to 2/(b-a) at c and falls
    linearly back to 0 at b. The mode may coincide with either endpoint.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for triangular distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower: float (a)
            - mode: float (c)
            - upper: float (b)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, 0 outside [a, b]
        """
        parameters = cast(_Standard, parameters)

        a, c, b = parameters.lower, parameters.mode, parameters.upper
        x = np.asarray(x, dtype=np.float64)
        peak = 2.0 / (b - a)
        with np.errstate(divide="ignore", invalid="ignore"):
            rising = peak * (x - a) / (c - a)
            falling = peak * (b - x) / (b - c)
        return np.select(
            [(x < a) | (x > b), x == c, x < c],
            [0.0, peak, rising],
            default=falling,
        )

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        a, c, b = parameters.lower, parameters.mode, parameters.upper
        x = np.clip(np.asarray(x, dtype=np.float64), a, b)
        with np.errstate(divide="ignore", invalid="ignore"):
            left = (x - a) ** 2 / ((b - a) * (c - a))
            right = 1.0 - (b - x) ** 2 / ((b - a) * (b - c))
        return np.where(x <= c, np.where(x == c, (c - a) / (b - a), left), right)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for triangular distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        split = (c - a) / (b - a)
        return np.where(
            p <= split,
            a + np.sqrt(p * (b - a) * (c - a)),
            b - np.sqrt((1.0 - p) * (b - a) * (b - c)),
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return (parameters.lower + parameters.mode + parameters.upper) / 3.0

    def _spread(parameters: _Standard) -> float:
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        return a * a + b * b + c * c - a * b - a * c - b * c

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return _spread(parameters) / 18.0

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        numerator = math.sqrt(2.0) * (a + b - 2 * c) * (2 * a - b - c) * (a - 2 * b + c)
        return numerator / (5.0 * _spread(parameters) ** 1.5)

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        if not excess:
            return 2.4
        else:
            return -0.6

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(left=parameters.lower, right=parameters.upper)

    def _sampler(parameters: Parametrization) -> TriangularSampler:
        parameters = cast(_Standard, parameters)
        return TriangularSampler(parameters.lower, parameters.mode, parameters.upper)

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
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
    Triangular.__doc__ = TRIANGULAR_DOC

    @parametrization(family=Triangular, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of triangular distribution.

        Parameters
        ----------
        lower : float
            Lower limit a
        mode : float
            Mode c
        upper : float
            Upper limit b
        """

        lower: float
        mode: float
        upper: float

        @constraint(description="lower < upper")
        def check_lower_less_than_upper(self) -> bool:
            return self.lower < self.upper

        @constraint(description="lower <= mode <= upper")
        def check_mode_inside(self) -> bool:
            return self.lower <= self.mode <= self.upper

    ParametricFamilyRegister.register(Triangular)
