"""
Uniform distribution family implementation.

Contains the continuous Uniform family with multiple parameterizations.
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
from pysatl_variates.stats._variates.elementary import UniformSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    The uniform distribution is a continuous probability distribution where
    all intervals of the same length are equally probable. It is defined by
    two parameters: lower bound and upper bound.

    Probability density function:
        f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for uniform distribution.
            - For x < lower_bound: returns 0
            - For x > upper_bound: returns 0
            - Otherwise: returns (1 / (upper_bound - lower_bound))
        """
        parameters = cast(_Standard, parameters)

        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound
        return np.where(
            (x >= lower_bound) & (x <= upper_bound), 1.0 / (upper_bound - lower_bound), 0.0
        )

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for uniform distribution (clipped to [0, 1])."""
        parameters = cast(_Standard, parameters)

        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound
        return cast(
            NumericArray, np.clip((x - lower_bound) / (upper_bound - lower_bound), 0.0, 1.0)
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for uniform distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_Standard, parameters)
        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound
        return cast(NumericArray, lower_bound + p * (upper_bound - lower_bound))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.lower_bound + parameters.upper_bound) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_Standard, parameters)
        width = parameters.upper_bound - parameters.lower_bound
        return width**2 / 12

    def skew_func(_1: Parametrization, _2: Any) -> int:
        """Skewness of uniform distribution (always 0)."""
        return 0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of uniform distribution."""
        if not excess:
            return 1.8
        else:
            return -1.2

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(
            left=parameters.lower_bound,
            right=parameters.upper_bound,
            left_closed=True,
            right_closed=True,
        )

    def _sampler(parameters: Parametrization) -> UniformSampler:
        parameters = cast(_Standard, parameters)
        return UniformSampler(parameters.lower_bound, parameters.upper_bound)

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth", "minRange"],
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
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower_bound : float
            Lower bound of the distribution
        upper_bound : float
            Upper bound of the distribution
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="lower_bound < upper_bound")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.lower_bound < self.upper_bound

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (upper_bound - lower_bound)
        """

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half_width = self.width / 2
            return _Standard(lower_bound=self.mean - half_width, upper_bound=self.mean + half_width)

    @parametrization(family=Uniform, name="minRange")
    class _MinRange(Parametrization):
        """
        Minimum-range parametrization of uniform distribution.

        Parameters
        ----------
        minimum : float
            Minimum value (lower bound)
        range_val : float
            Range of the distribution (upper_bound - lower_bound)
        """

        minimum: float
        range_val: float

        @constraint(description="range_val > 0")
        def check_range_positive(self) -> bool:
            """Check that range is positive."""
            return self.range_val > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Standard(lower_bound=self.minimum, upper_bound=self.minimum + self.range_val)

    ParametricFamilyRegister.register(Uniform)
