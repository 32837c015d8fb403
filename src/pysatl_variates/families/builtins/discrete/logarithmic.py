"""
Logarithmic series distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_variates.distributions.support import IntegerIntervalSupport
from pysatl_variates.families.builtins.common import discrete_ppf, require_integer
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats._variates.elementary import LogarithmicSampler
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

# Terms p^k below this are dropped from the CDF sum.
TAIL_TOLERANCE = 1e-17


def configure_logarithmic_family() -> None:
    """
    Configure and register the Logarithmic series distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGARITHMIC):
        return

    LOGARITHMIC_DOC = """
    Logarithmic series distribution on the positive integers.

    Probability mass function:
        P(X = k) = -p^k / (k ln(1 - p)) for k = 1, 2, ...

    Variates are drawn by chop-down inversion for p < 0.97 and by Kemp's
    algorithm LK otherwise.
    """

    def _pmf(parameters: _Standard, k: NumericArray) -> NumericArray:
        p = parameters.p
        kk = np.maximum(k, 1.0)
        with np.errstate(over="ignore", under="ignore"):
            values = -np.exp(kk * math.log(p)) / (kk * math.log1p(-p))
        return np.where(k >= 1, values, 0.0)

    def _cdf(parameters: _Standard, k: NumericArray) -> NumericArray:
        cutoff = max(1, math.ceil(math.log(TAIL_TOLERANCE) / math.log(parameters.p)))
        k = np.asarray(k, dtype=np.float64)
        top = int(min(np.max(k[np.isfinite(k)], initial=1.0), cutoff))
        grid = np.arange(1, top + 1, dtype=np.float64)
        cumulative = np.minimum(np.cumsum(_pmf(parameters, grid)), 1.0)
        index = np.clip(k, 1, top).astype(np.int64) - 1
        return np.select([k < 1, k > top], [0.0, 1.0], default=cumulative[index])

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for logarithmic series distribution.

        Raises
        ------
        DomainError
            If any point is not an integer
        """
        parameters = cast(_Standard, parameters)
        return _pmf(parameters, require_integer(x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function as the running sum of the mass
        function; the tail beyond p^k < 1e-17 counts as zero.
        """
        parameters = cast(_Standard, parameters)
        return _cdf(parameters, require_integer(x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return discrete_ppf(p, lambda k: _cdf(parameters, k), lower=1)

    def _raw_moments(p: float) -> tuple[float, float, float, float]:
        a = -1.0 / math.log1p(-p)
        q = 1.0 - p
        return (
            a * p / q,
            a * p / q**2,
            a * p * (1.0 + p) / q**3,
            a * p * (1.0 + 4.0 * p + p * p) / q**4,
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return _raw_moments(parameters.p)[0]

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        m1, m2, _m3, _m4 = _raw_moments(parameters.p)
        return m2 - m1 * m1

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        m1, m2, m3, _m4 = _raw_moments(parameters.p)
        var = m2 - m1 * m1
        return (m3 - 3.0 * m1 * m2 + 2.0 * m1**3) / var**1.5

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis from the first four raw moments."""
        parameters = cast(_Standard, parameters)
        m1, m2, m3, m4 = _raw_moments(parameters.p)
        var = m2 - m1 * m1
        kurtosis = (m4 - 4.0 * m1 * m3 + 6.0 * m1 * m1 * m2 - 3.0 * m1**4) / (var * var)
        if not excess:
            return kurtosis
        else:
            return kurtosis - 3.0

    def _support(_: Parametrization) -> IntegerIntervalSupport:
        return IntegerIntervalSupport(1)

    def _sampler(parameters: Parametrization) -> LogarithmicSampler:
        parameters = cast(_Standard, parameters)
        return LogarithmicSampler(parameters.p)

    Logarithmic = ParametricFamily(
        name=FamilyName.LOGARITHMIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
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
    Logarithmic.__doc__ = LOGARITHMIC_DOC

    @parametrization(family=Logarithmic, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of logarithmic series distribution.

        Parameters
        ----------
        p : float
            Series parameter
        """

        p: float

        @constraint(description="0 < p < 1")
        def check_p_range(self) -> bool:
            return 0.0 < self.p < 1.0

    ParametricFamilyRegister.register(Logarithmic)
