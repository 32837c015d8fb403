"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale, shape-rate and mean-variance
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln, xlogy

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.common import check_probability
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.gamma import GammaSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    A continuous distribution on [0, ∞) with shape k and scale θ.

    Probability density function (shape-scale parametrization):
        f(x) = x^(k-1) * exp(-x/θ) / (Γ(k) * θ^k) for x ≥ 0

    Variates are drawn with the Ahrens–Dieter algorithms: GS (1974) for
    k < 1 and GD (1982) with a normal-deviate fast path for k ≥ 1.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (shape k)
            - scale: float (scale θ)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x. At x = 0 the density is
            inf for k < 1 and 1/θ for k = 1.
        """
        parameters = cast(_ShapeScale, parameters)

        k = parameters.shape
        theta = parameters.scale
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = np.maximum(x, 0.0) / theta
            log_density = xlogy(k - 1.0, z) - z - gammaln(k) - np.log(theta)
            return np.where(x >= 0, np.exp(log_density), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, the regularized lower incomplete gamma P(k, x/θ)."""
        parameters = cast(_ShapeScale, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(
            NumericArray, gammainc(parameters.shape, np.maximum(x, 0.0) / parameters.scale)
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for gamma distribution.

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p = check_probability(p)

        parameters = cast(_ShapeScale, parameters)
        return cast(NumericArray, parameters.scale * gammaincinv(parameters.shape, p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        return 2.0 / float(np.sqrt(parameters.shape))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters
        excess : bool
            A value defines if there will be raw or excess kurtosis
            default is False

        Returns
        -------
        float
            Kurtosis value
        """
        parameters = cast(_ShapeScale, parameters)
        excess_kurtosis = 6.0 / parameters.shape
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of gamma distribution"""
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization) -> GammaSampler:
        parameters = cast(_ShapeScale, parameters)
        return GammaSampler(shape=parameters.shape, scale=parameters.scale)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "shapeRate", "meanVar"],
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
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter θ
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        rate : float
            Rate parameter β = 1/θ
        """

        shape: float
        rate: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeScale(shape=self.shape, scale=1.0 / self.rate)

    @parametrization(family=Gamma, name="meanVar")
    class _MeanVar(Parametrization):
        """
        Mean-variance parametrization of gamma distribution.

        Parameters
        ----------
        mean : float
            Mean kθ
        var : float
            Variance kθ²
        """

        mean: float
        var: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            return self.mean > 0

        @constraint(description="var > 0")
        def check_var_positive(self) -> bool:
            return self.var > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to shape-scale parametrization.

            Returns
            -------
            Parametrization
                Shape-scale instance with k = mean²/var and θ = var/mean
            """
            return _ShapeScale(shape=self.mean**2 / self.var, scale=self.var / self.mean)

    ParametricFamilyRegister.register(Gamma)
