"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, stdtr, stdtrit

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.composite import StudentTSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_student_t_family() -> None:
    """
    Configure and register the StudentT distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    STUDENT_T_DOC = """
    Student's t distribution with ν degrees of freedom.

    Probability density function:
        f(x) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + x²/ν)^(-(ν+1)/2)

    Variates are drawn with Bailey's polar method.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        nu = parameters.df
        log_norm = gammaln(0.5 * (nu + 1.0)) - gammaln(0.5 * nu) - 0.5 * math.log(nu * math.pi)
        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.exp(log_norm - 0.5 * (nu + 1.0) * np.log1p(x * x / nu)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, stdtr(parameters.df, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Student's t distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        return cast(NumericArray, stdtrit(parameters.df, p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return 0.0 if parameters.df > 1.0 else math.nan

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        nu = parameters.df
        if nu > 2.0:
            return nu / (nu - 2.0)
        if nu > 1.0:
            return math.inf
        return math.nan

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return 0.0 if parameters.df > 3.0 else math.nan

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis; inf for 2 < ν ≤ 4, nan for ν ≤ 2."""
        parameters = cast(_Standard, parameters)
        nu = parameters.df
        if nu > 4.0:
            excess_kurtosis = 6.0 / (nu - 4.0)
        elif nu > 2.0:
            return math.inf
        else:
            return math.nan
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _sampler(parameters: Parametrization) -> StudentTSampler:
        parameters = cast(_Standard, parameters)
        return StudentTSampler(parameters.df)

    StudentT = ParametricFamily(
        name=FamilyName.STUDENT_T,
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
    StudentT.__doc__ = STUDENT_T_DOC

    @parametrization(family=StudentT, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Student's t distribution.

        Parameters
        ----------
        df : float
            Degrees of freedom ν
        """

        df: float

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    ParametricFamilyRegister.register(StudentT)
