"""
Chi-squared distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import chdtr, gammaincinv, gammaln, xlogy

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.chi_squared import ChiSquaredSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_chi_squared_family() -> None:
    """
    Configure and register the ChiSquared distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    CHI_SQUARED_DOC = """
    Chi-squared distribution with ν degrees of freedom.

    Probability density function:
        f(x) = x^(ν/2-1) exp(-x/2) / (2^(ν/2) Γ(ν/2)) for x ≥ 0

    Variates are drawn with Monahan's ratio-of-uniforms method; ν < 1 falls
    back to 2·Gamma(ν/2).
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for chi-squared distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - df: float (degrees of freedom)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_Standard, parameters)

        half_df = 0.5 * parameters.df
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = np.maximum(x, 0.0)
            log_density = xlogy(half_df - 1.0, z) - 0.5 * z - half_df * math.log(2.0)
            log_density -= gammaln(half_df)
            return np.where(x >= 0, np.exp(log_density), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, chdtr(parameters.df, np.maximum(x, 0.0)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for chi-squared distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        return cast(NumericArray, 2.0 * gammaincinv(0.5 * parameters.df, p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.df

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return 2.0 * parameters.df

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return math.sqrt(8.0 / parameters.df)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        excess_kurtosis = 12.0 / parameters.df
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization) -> ChiSquaredSampler:
        parameters = cast(_Standard, parameters)
        return ChiSquaredSampler(parameters.df)

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
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
    ChiSquared.__doc__ = CHI_SQUARED_DOC

    @parametrization(family=ChiSquared, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of chi-squared distribution.

        Parameters
        ----------
        df : float
            Degrees of freedom ν
        """

        df: float

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            """Check that degrees of freedom are positive."""
            return self.df > 0

    ParametricFamilyRegister.register(ChiSquared)
