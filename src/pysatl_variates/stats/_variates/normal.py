"""
Normal Variates
===============

Two normal generators:

- :class:`PolarNormalSampler` — Marsaglia's polar form of Box–Muller;
- :func:`leva_normal` — Leva's ratio-of-uniforms method with quadratic
  squeezes (ACM Transactions on Mathematical Software 18, 1992), used inside
  the Marsaglia–Tsang gamma sampler.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_variates.stats._variates.rejection import Sampler

if TYPE_CHECKING:
    from pysatl_variates.stats._variates.api import UniformSource

# Leva's constants
LEVA_V_SCALE = 1.7156
LEVA_S = 0.449871
LEVA_T = 0.386595
LEVA_A = 0.19600
LEVA_B = 0.25472
LEVA_R1 = 0.27597
LEVA_R2 = 0.27846


def polar_normal(source: UniformSource) -> float:
    """
    Standard normal deviate by the polar method.

    Points are drawn uniformly in the square ``[-1, 1)²`` until one falls
    inside the unit disk (the origin excluded).
    """
    while True:
        x = 2.0 * source.next() - 1.0
        y = 2.0 * source.next() - 1.0
        r = x * x + y * y
        if 0.0 < r < 1.0:
            return y * math.sqrt(-2.0 * math.log(r) / r)


def leva_normal(source: UniformSource) -> float:
    """Standard normal deviate by Leva's ratio-of-uniforms method."""
    while True:
        u = source.next()
        if u == 0.0:
            continue
        v = LEVA_V_SCALE * (source.next() - 0.5)
        x = u - LEVA_S
        y = abs(v) + LEVA_T
        q = x * x + y * (LEVA_A * y - LEVA_B * x)
        if q <= LEVA_R1:
            return v / u
        if q > LEVA_R2:
            continue
        if v * v <= -4.0 * math.log(u) * u * u:
            return v / u


class PolarNormalSampler(Sampler):
    """
    Normal variates with mean ``mu`` and standard deviation ``sigma``.

    Parameters
    ----------
    mu : float, default 0.0
    sigma : float, default 1.0
    """

    mu: float
    sigma: float

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        self.mu = mu
        self.sigma = sigma

    def draw(self, source: UniformSource) -> float:
        return self.mu + self.sigma * polar_normal(source)
