"""
Composite Samplers
==================

Samplers defined through other samplers. Each composite owns its
constituents and pushes its current parameters into them before every draw,
so their setup caches see parameter changes made on the composite.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.stats._variates.api import REJECTED, accept, squeeze_accept
from pysatl_variates.stats._variates.chi_squared import ChiSquaredSampler
from pysatl_variates.stats._variates.elementary import LogisticSampler, PoissonSampler
from pysatl_variates.stats._variates.gamma import GammaSampler
from pysatl_variates.stats._variates.normal import PolarNormalSampler, leva_normal
from pysatl_variates.stats._variates.rejection import (
    DEFAULT_TRACE_THRESHOLD,
    RejectionSampler,
    Sampler,
)
from pysatl_variates.stats._variates.special import safe_log

if TYPE_CHECKING:
    from pysatl_variates.stats._variates.api import AcceptanceOutcome, UniformSource

SMALLEST_POSITIVE = math.nextafter(0.0, 1.0)
LARGEST_BELOW_ONE = math.nextafter(1.0, 0.0)


@dataclass(frozen=True, slots=True)
class MarsagliaTsangSetup:
    """``a1 = a - 1/3`` and ``a2 = 1/sqrt(9 a1)`` for the boosted shape ``a``."""

    a1: float
    a2: float


class MarsagliaTsangGammaSampler(RejectionSampler[float, MarsagliaTsangSetup]):
    """
    Unit-scale gamma variates by the Marsaglia–Tsang method
    (ACM Transactions on Mathematical Software 26, 2000).

    Shapes below 1 are drawn for ``shape + 1`` and multiplied by
    ``U^(1/shape)``.

    Parameters
    ----------
    shape : float
        Shape ``a > 0``.
    """

    shape: float

    def __init__(self, shape: float, trace_threshold: int = DEFAULT_TRACE_THRESHOLD) -> None:
        super().__init__(trace_threshold)
        self.shape = shape

    def _snapshot(self) -> float:
        return self.shape

    def _build_setup(self, key: float) -> MarsagliaTsangSetup:
        a = key + 1.0 if key < 1.0 else key
        a1 = a - 1.0 / 3.0
        return MarsagliaTsangSetup(a1=a1, a2=1.0 / math.sqrt(9.0 * a1))

    def draw(self, source: UniformSource) -> float:
        if self.shape >= 1.0:
            setup = self.setup
            return self._until_accepted(lambda src: self._attempt(src, setup), source)
        return math.exp(self.log_draw(source))

    def log_draw(self, source: UniformSource) -> float:
        """
        Natural logarithm of one variate.

        Stays finite for small shapes, where the boost ``U^(1/shape)``
        underflows the variate itself to zero.
        """
        setup = self.setup
        value = self._until_accepted(lambda src: self._attempt(src, setup), source)
        if self.shape >= 1.0:
            return math.log(value)

        while True:
            u = source.next()
            if u != 0.0:
                return math.log(u) / self.shape + math.log(value)

    @staticmethod
    def _attempt(source: UniformSource, s: MarsagliaTsangSetup) -> AcceptanceOutcome:
        while True:
            x = leva_normal(source)
            v = 1.0 + s.a2 * x
            if v > 0.0:
                break
        v = v * v * v
        u = source.next()
        if u <= 1.0 - 0.331 * x**4:
            return squeeze_accept(s.a1 * v)
        if safe_log(u) <= 0.5 * x * x + s.a1 * (1.0 - v + math.log(v)):
            return accept(s.a1 * v)
        return REJECTED


class BetaSampler(Sampler):
    """
    Beta variates as ``X / (X + Y)`` with ``X ~ Gamma(alpha)``, ``Y ~ Gamma(beta)``.

    Parameters
    ----------
    alpha : float
    beta : float
    """

    alpha: float
    beta: float

    def __init__(
        self, alpha: float, beta: float, trace_threshold: int = DEFAULT_TRACE_THRESHOLD
    ) -> None:
        self.alpha = alpha
        self.beta = beta
        self._x = MarsagliaTsangGammaSampler(alpha, trace_threshold)
        self._y = MarsagliaTsangGammaSampler(beta, trace_threshold)

    def draw(self, source: UniformSource) -> float:
        self._x.shape = self.alpha
        self._y.shape = self.beta
        log_x = self._x.log_draw(source)
        # x / (x + y) as a logistic function of log(y / x)
        d = self._y.log_draw(source) - log_x
        if d > 0.0:
            e = math.exp(-d)
            value = e / (1.0 + e)
        else:
            value = 1.0 / (1.0 + math.exp(d))
        return min(max(value, SMALLEST_POSITIVE), LARGEST_BELOW_ONE)

    def set_trace_threshold(self, threshold: int) -> None:
        self._x.set_trace_threshold(threshold)
        self._y.set_trace_threshold(threshold)


class FSampler(Sampler):
    """
    Fisher–Snedecor variates as ``(X1/d1) / (X2/d2)`` of two chi-squared variates.

    Parameters
    ----------
    df1 : float
    df2 : float
    """

    df1: float
    df2: float

    def __init__(
        self, df1: float, df2: float, trace_threshold: int = DEFAULT_TRACE_THRESHOLD
    ) -> None:
        self.df1 = df1
        self.df2 = df2
        self._numerator = ChiSquaredSampler(df1, trace_threshold)
        self._denominator = ChiSquaredSampler(df2, trace_threshold)

    def draw(self, source: UniformSource) -> float:
        self._numerator.df = self.df1
        self._denominator.df = self.df2
        x1 = self._numerator.draw(source) / self.df1
        return x1 / (self._denominator.draw(source) / self.df2)

    def set_trace_threshold(self, threshold: int) -> None:
        self._numerator.set_trace_threshold(threshold)
        self._denominator.set_trace_threshold(threshold)


class NegativeBinomialSampler(Sampler):
    """
    Negative binomial variates (failures before the ``r``-th success) as a
    gamma–Poisson mixture: ``λ ~ Gamma(r, (1-p)/p)``, ``K ~ Poisson(λ)``.

    Parameters
    ----------
    r : float
    p : float
    """

    discrete = True

    r: float
    p: float

    def __init__(self, r: float, p: float, trace_threshold: int = DEFAULT_TRACE_THRESHOLD) -> None:
        self.r = r
        self.p = p
        self._gamma = GammaSampler(r, (1.0 - p) / p, trace_threshold)
        self._poisson = PoissonSampler(0.0)

    def draw(self, source: UniformSource) -> float:
        self._gamma.shape = self.r
        self._gamma.scale = (1.0 - self.p) / self.p
        self._poisson.lambda_ = self._gamma.draw(source)
        return self._poisson.draw(source)

    def set_trace_threshold(self, threshold: int) -> None:
        self._gamma.set_trace_threshold(threshold)


class StudentTSampler(Sampler):
    """
    Student's t variates by the polar method (Bailey, Mathematics of
    Computation 62, 1994).

    Parameters
    ----------
    df : float
    """

    df: float

    def __init__(self, df: float) -> None:
        self.df = df

    def draw(self, source: UniformSource) -> float:
        df = self.df
        while True:
            u = 2.0 * source.next() - 1.0
            v = 2.0 * source.next() - 1.0
            w = u * u + v * v
            if 0.0 < w <= 1.0:
                break
        return u * math.sqrt(df * (math.exp(-2.0 / df * math.log(w)) - 1.0) / w)


class LogNormalSampler(Sampler):
    """
    Log-normal variates ``exp(mu + sigma Z)``.

    Parameters
    ----------
    mu : float
    sigma : float
    """

    mu: float
    sigma: float

    def __init__(self, mu: float, sigma: float) -> None:
        self.mu = mu
        self.sigma = sigma
        self._normal = PolarNormalSampler()

    def draw(self, source: UniformSource) -> float:
        return math.exp(self.mu + self.sigma * self._normal.draw(source))


class LogLogisticSampler(Sampler):
    """
    Log-logistic variates ``exp(L)`` with ``L`` logistic of location
    ``ln(scale)`` and scale ``1/shape``.

    Parameters
    ----------
    scale : float
    shape : float
    """

    scale: float
    shape: float

    def __init__(self, scale: float, shape: float) -> None:
        self.scale = scale
        self.shape = shape
        self._logistic = LogisticSampler(math.log(scale), 1.0 / shape)

    def draw(self, source: UniformSource) -> float:
        self._logistic.mu = math.log(self.scale)
        self._logistic.scale = 1.0 / self.shape
        return math.exp(self._logistic.draw(source))
