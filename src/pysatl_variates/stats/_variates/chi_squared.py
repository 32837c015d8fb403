"""
Chi-Squared Variates
====================

Ratio-of-uniforms generator for the chi-squared distribution
(Monahan, ACM Transactions on Mathematical Software 13, 1987).

For ``df == 1`` the half-normal deviate ``z`` is squared; for ``df > 1`` the
sampler targets ``sqrt(X)`` shifted by ``b = sqrt(df - 1)`` with the region
bounds ``vm, vp`` cached per ``df``. Degrees of freedom below 1 are drawn as
``2·Gamma(df/2)``.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.stats._variates.api import REJECTED, accept, squeeze_accept
from pysatl_variates.stats._variates.gamma import GammaSampler
from pysatl_variates.stats._variates.rejection import DEFAULT_TRACE_THRESHOLD, RejectionSampler

if TYPE_CHECKING:
    from pysatl_variates.stats._variates.api import AcceptanceOutcome, UniformSource

HALF_NORMAL_VP = 0.857763884960707
EXP_MINUS_HALF = 0.6065306597
SQRT_HALF = 0.7071067812
SQUEEZE_SCALE = 0.3894003915
REJECT_SLOPE = 1.036961043


@dataclass(frozen=True, slots=True)
class ChiSquaredSetup:
    """Shift ``b`` and the ratio-of-uniforms bounds ``vm``, ``vp`` with ``vd = vp - vm``."""

    b: float
    vm: float
    vp: float
    vd: float


class ChiSquaredSampler(RejectionSampler[float, ChiSquaredSetup | None]):
    """
    Chi-squared variates with ``df`` degrees of freedom.

    Parameters
    ----------
    df : float
        Degrees of freedom, ``df > 0``.
    """

    df: float

    def __init__(self, df: float, trace_threshold: int = DEFAULT_TRACE_THRESHOLD) -> None:
        super().__init__(trace_threshold)
        self.df = df
        self._gamma = GammaSampler(shape=0.5 * df, scale=2.0, trace_threshold=trace_threshold)

    def _snapshot(self) -> float:
        return self.df

    def set_trace_threshold(self, threshold: int) -> None:
        super().set_trace_threshold(threshold)
        self._gamma.set_trace_threshold(threshold)

    def _build_setup(self, key: float) -> ChiSquaredSetup | None:
        if key <= 1.0:
            return None
        b = math.sqrt(key - 1.0)
        vm = -EXP_MINUS_HALF * (1.0 - 0.25 / (b * b + 1.0))
        vm = max(-b, vm)
        vp = EXP_MINUS_HALF * (SQRT_HALF + b) / (0.5 + b)
        return ChiSquaredSetup(b=b, vm=vm, vp=vp, vd=vp - vm)

    def draw(self, source: UniformSource) -> float:
        if self.df < 1.0:
            self._gamma.shape = 0.5 * self.df
            return self._gamma.draw(source)
        setup = self.setup
        if setup is None:
            return self._until_accepted(self._one_df_attempt, source)
        return self._until_accepted(lambda src: self._attempt(src, setup), source)

    @staticmethod
    def _one_df_attempt(source: UniformSource) -> AcceptanceOutcome:
        u = source.next()
        if u == 0.0:
            return REJECTED
        z = source.next() * HALF_NORMAL_VP / u
        zz = z * z
        if u < (2.5 - zz) * SQUEEZE_SCALE:
            return squeeze_accept(zz)
        if zz > REJECT_SLOPE / u + 1.4:
            return REJECTED
        if 2.0 * math.log(u) < -zz * 0.5:
            return accept(zz)
        return REJECTED

    @staticmethod
    def _attempt(source: UniformSource, s: ChiSquaredSetup) -> AcceptanceOutcome:
        u = source.next()
        if u == 0.0:
            return REJECTED
        v = source.next() * s.vd + s.vm
        z = v / u
        if z <= -s.b:
            return REJECTED
        zz = z * z
        r = 2.5 - zz
        if z < 0.0:
            r += zz * z / (3.0 * (z + s.b))
        x = (z + s.b) * (z + s.b)
        if u < r * SQUEEZE_SCALE:
            return squeeze_accept(x)
        if zz > REJECT_SLOPE / u + 1.4:
            return REJECTED
        if 2.0 * math.log(u) < math.log(1.0 + z / s.b) * s.b * s.b - zz * 0.5 - z * s.b:
            return accept(x)
        return REJECTED
