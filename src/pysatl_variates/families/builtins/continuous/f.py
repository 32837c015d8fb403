"""
Fisher–Snedecor F distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betaln, fdtr, fdtri, xlogy

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.composite import FSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_f_family() -> None:
    """
    Configure and register the F distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.F):
        return

    F_DOC = """
    Fisher–Snedecor F distribution with (d1, d2) degrees of freedom.

    The distribution of (X1/d1) / (X2/d2) for independent chi-squared X1, X2,
    which is also how variates are drawn.

    Moments of order r exist only for d2 > 2r; the mean and variance are inf
    when they diverge, higher moments are nan when undefined.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        d1, d2 = parameters.df1, parameters.df2
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = np.maximum(x, 0.0)
            log_density = (
                0.5 * d1 * math.log(d1)
                + 0.5 * d2 * math.log(d2)
                + xlogy(0.5 * d1 - 1.0, z)
                - 0.5 * (d1 + d2) * np.log(d2 + d1 * z)
                - betaln(0.5 * d1, 0.5 * d2)
            )
            return np.where(x >= 0, np.exp(log_density), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, fdtr(parameters.df1, parameters.df2, np.maximum(x, 0.0)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for F distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        return cast(
            NumericArray, np.where(p < 1.0, fdtri(parameters.df1, parameters.df2, p), np.inf)
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        d2 = parameters.df2
        if d2 <= 2.0:
            return math.inf
        return d2 / (d2 - 2.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        d1, d2 = parameters.df1, parameters.df2
        if d2 <= 2.0:
            return math.nan
        if d2 <= 4.0:
            return math.inf
        return 2.0 * d2**2 * (d1 + d2 - 2.0) / (d1 * (d2 - 2.0) ** 2 * (d2 - 4.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        d1, d2 = parameters.df1, parameters.df2
        if d2 <= 6.0:
            return math.nan
        return (
            (2.0 * d1 + d2 - 2.0)
            * math.sqrt(8.0 * (d2 - 4.0))
            / ((d2 - 6.0) * math.sqrt(d1 * (d1 + d2 - 2.0)))
        )

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        d1, d2 = parameters.df1, parameters.df2
        if d2 <= 8.0:
            return math.nan
        numerator = 12.0 * (d1 * (5.0 * d2 - 22.0) * (d1 + d2 - 2.0) + (d2 - 4.0) * (d2 - 2.0) ** 2)
        excess_kurtosis = numerator / (d1 * (d2 - 6.0) * (d2 - 8.0) * (d1 + d2 - 2.0))
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization) -> FSampler:
        parameters = cast(_Standard, parameters)
        return FSampler(parameters.df1, parameters.df2)

    F = ParametricFamily(
        name=FamilyName.F,
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
    F.__doc__ = F_DOC

    @parametrization(family=F, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of F distribution.

        Parameters
        ----------
        df1 : float
            Numerator degrees of freedom
        df2 : float
            Denominator degrees of freedom
        """

        df1: float
        df2: float

        @constraint(description="df1 > 0")
        def check_df1_positive(self) -> bool:
            return self.df1 > 0

        @constraint(description="df2 > 0")
        def check_df2_positive(self) -> bool:
            return self.df2 > 0

    ParametricFamilyRegister.register(F)
