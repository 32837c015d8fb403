"""
Elementary Samplers
===================

Samplers that need no setup constants: inverse transforms of a single
uniform, sums of exponential spacings and short inversion searches.

Inverse transforms use ``1 - U`` where ``U = 0`` would hit a pole, since the
source may return ``0.0`` but never ``1.0``.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import ndtri

from pysatl_variates.stats._variates.rejection import Sampler

if TYPE_CHECKING:
    from pysatl_variates.stats._variates.api import UniformSource

LOGARITHMIC_INVERSION_LIMIT = 0.97


def standard_exponential(source: UniformSource) -> float:
    """Unit-rate exponential deviate ``-ln(1 - U)``."""
    return -math.log1p(-source.next())


def _positive_uniform(source: UniformSource) -> float:
    while True:
        u = source.next()
        if u > 0.0:
            return u


class UniformSampler(Sampler):
    lower_bound: float
    upper_bound: float

    def __init__(self, lower_bound: float, upper_bound: float) -> None:
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    def draw(self, source: UniformSource) -> float:
        return self.lower_bound + (self.upper_bound - self.lower_bound) * source.next()


class ExponentialSampler(Sampler):
    lambda_: float

    def __init__(self, lambda_: float) -> None:
        self.lambda_ = lambda_

    def draw(self, source: UniformSource) -> float:
        return standard_exponential(source) / self.lambda_


class LogisticSampler(Sampler):
    mu: float
    scale: float

    def __init__(self, mu: float, scale: float) -> None:
        self.mu = mu
        self.scale = scale

    def draw(self, source: UniformSource) -> float:
        u = _positive_uniform(source)
        return self.mu + self.scale * math.log(u / (1.0 - u))


class WeibullSampler(Sampler):
    shape: float
    scale: float

    def __init__(self, shape: float, scale: float) -> None:
        self.shape = shape
        self.scale = scale

    def draw(self, source: UniformSource) -> float:
        return self.scale * standard_exponential(source) ** (1.0 / self.shape)


class LaplaceSampler(Sampler):
    location: float
    scale: float

    def __init__(self, location: float, scale: float) -> None:
        self.location = location
        self.scale = scale

    def draw(self, source: UniformSource) -> float:
        u = _positive_uniform(source) - 0.5
        return self.location - self.scale * math.copysign(1.0, u) * math.log1p(-2.0 * abs(u))


class RayleighSampler(Sampler):
    scale: float

    def __init__(self, scale: float) -> None:
        self.scale = scale

    def draw(self, source: UniformSource) -> float:
        return self.scale * math.sqrt(2.0 * standard_exponential(source))


class TriangularSampler(Sampler):
    """Triangular variates on ``[lower, upper]`` with peak at ``mode``, by inversion."""

    lower: float
    mode: float
    upper: float

    def __init__(self, lower: float, mode: float, upper: float) -> None:
        self.lower = lower
        self.mode = mode
        self.upper = upper

    def draw(self, source: UniformSource) -> float:
        a, m, b = self.lower, self.mode, self.upper
        r = source.next()
        if r <= (m - a) / (b - a):
            return a + math.sqrt(r * (m - a) * (b - a))
        return b - math.sqrt((1.0 - r) * (b - m) * (b - a))


class CauchySampler(Sampler):
    location: float
    scale: float

    def __init__(self, location: float, scale: float) -> None:
        self.location = location
        self.scale = scale

    def draw(self, source: UniformSource) -> float:
        return self.location + self.scale * math.tan(math.pi * (source.next() - 0.5))


class ParetoSampler(Sampler):
    scale: float
    shape: float

    def __init__(self, scale: float, shape: float) -> None:
        self.scale = scale
        self.shape = shape

    def draw(self, source: UniformSource) -> float:
        return self.scale / _positive_uniform(source) ** (1.0 / self.shape)


class LevySampler(Sampler):
    """Lévy variates ``location + scale / Φ⁻¹(U/2)²``."""

    location: float
    scale: float

    def __init__(self, location: float, scale: float) -> None:
        self.location = location
        self.scale = scale

    def draw(self, source: UniformSource) -> float:
        z = float(ndtri(0.5 * _positive_uniform(source)))
        return self.location + self.scale / (z * z)


class ErlangSampler(Sampler):
    """Erlang variates as the sum of ``shape`` exponential spacings."""

    shape: int
    rate: float

    def __init__(self, shape: int, rate: float) -> None:
        self.shape = shape
        self.rate = rate

    def draw(self, source: UniformSource) -> float:
        total = 0.0
        for _ in range(self.shape):
            total += standard_exponential(source)
        return total / self.rate


class PoissonSampler(Sampler):
    """
    Poisson variates counted as unit-rate exponential arrivals before time ``λ``.

    Summing ``-ln(1 - U)`` instead of multiplying uniforms keeps the loop free
    of underflow for large ``λ``. The expected number of uniforms is ``λ + 1``.
    """

    discrete = True

    lambda_: float

    def __init__(self, lambda_: float) -> None:
        self.lambda_ = lambda_

    def draw(self, source: UniformSource) -> float:
        lam = self.lambda_
        k = 0
        elapsed = standard_exponential(source)
        while elapsed < lam:
            k += 1
            elapsed += standard_exponential(source)
        return float(k)


class LogarithmicSampler(Sampler):
    """
    Logarithmic series variates.

    Chop-down inversion from ``k = 1`` for ``p < 0.97``; Kemp's algorithm LK
    (Kemp, The Statistician 30, 1981) above, where the series converges
    too slowly.

    Parameters
    ----------
    p : float
        Parameter in ``(0, 1)``.
    """

    discrete = True

    p: float

    def __init__(self, p: float) -> None:
        self.p = p

    def draw(self, source: UniformSource) -> float:
        if self.p < LOGARITHMIC_INVERSION_LIMIT:
            return self._chop_down(source)
        return self._kemp(source)

    def _chop_down(self, source: UniformSource) -> float:
        a = self.p
        pk = -a / math.log1p(-a)
        u = source.next()
        k = 1
        while u > pk > 0.0:
            u -= pk
            k += 1
            pk *= a * (k - 1) / k
        return float(k)

    def _kemp(self, source: UniformSource) -> float:
        h = math.log1p(-self.p)
        while True:
            v = source.next()
            if v >= self.p:
                return 1.0
            q = -math.expm1(h * source.next())
            if v <= q * q:
                if v == 0.0:
                    continue
                k = math.floor(1.0 + math.log(v) / math.log(q))
                if k < 1:
                    continue
                return float(k)
            if v >= q:
                return 1.0
            return 2.0
