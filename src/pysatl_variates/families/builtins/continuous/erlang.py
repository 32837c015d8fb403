"""
Erlang distribution family implementation.

Contains the Erlang family, the gamma distribution with integer shape.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
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
from pysatl_variates.stats._variates.elementary import ErlangSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_erlang_family() -> None:
    """
    Configure and register the Erlang distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.ERLANG):
        return

    ERLANG_DOC = """
    Erlang distribution.

    Waiting time until the k-th event of a Poisson process with rate λ:
        f(x) = λ^k x^(k-1) exp(-λx) / (k-1)! for x ≥ 0

    Variates are drawn as sums of k exponential spacings.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_ShapeRate, parameters)

        k = parameters.shape
        lam = parameters.rate
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = np.maximum(x, 0.0)
            log_density = k * math.log(lam) + xlogy(k - 1, z) - lam * z - gammaln(k)
            return np.where(x >= 0, np.exp(log_density), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_ShapeRate, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, gammainc(parameters.shape, np.maximum(x, 0.0) * parameters.rate))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        p = check_probability(p)

        parameters = cast(_ShapeRate, parameters)
        return cast(NumericArray, gammaincinv(parameters.shape, p) / parameters.rate)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeRate, parameters)
        return 2.0 / math.sqrt(parameters.shape)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_ShapeRate, parameters)
        excess_kurtosis = 6.0 / parameters.shape
        if not excess:
            return excess_kurtosis + 3.0
        else:
            return excess_kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization) -> ErlangSampler:
        parameters = cast(_ShapeRate, parameters)
        return ErlangSampler(shape=int(parameters.shape), rate=parameters.rate)

    Erlang = ParametricFamily(
        name=FamilyName.ERLANG,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate"],
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
    Erlang.__doc__ = ERLANG_DOC

    @parametrization(family=Erlang, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of Erlang distribution.

        Parameters
        ----------
        shape : int
            Number of events k
        rate : float
            Event rate λ
        """

        shape: int
        rate: float

        @constraint(description="shape is a positive integer")
        def check_shape_positive_integer(self) -> bool:
            return float(self.shape).is_integer() and self.shape >= 1

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    ParametricFamilyRegister.register(Erlang)
