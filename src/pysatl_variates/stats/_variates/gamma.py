"""
Gamma Variates
==============

Ahrens–Dieter generators for the gamma distribution:

- ``shape < 1``: acceptance-rejection algorithm GS
  (Ahrens & Dieter, Computing 12, 1974);
- ``shape >= 1``: acceptance-complement algorithm GD built on a normal deviate
  (Ahrens & Dieter, Communications of the ACM 25, 1982).

``shape == 1`` goes through GD. Variates are generated for unit scale and
multiplied by ``scale`` on return.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.stats._variates.api import REJECTED, accept, squeeze_accept
from pysatl_variates.stats._variates.cache import SetupCache
from pysatl_variates.stats._variates.rejection import DEFAULT_TRACE_THRESHOLD, RejectionSampler
from pysatl_variates.stats._variates.special import safe_log

if TYPE_CHECKING:
    from pysatl_variates.stats._variates.api import AcceptanceOutcome, UniformSource

# Coefficients of q0 = sum q_k a^-k
Q1, Q2, Q3 = 0.0416666664, 0.0208333723, 0.0079849875
Q4, Q5, Q6 = 0.0015746717, -0.0003349403, 0.0003340332
Q7, Q8, Q9 = 0.0006053049, -0.0004701849, 0.0001710320

# Coefficients of q(t) for |v| <= 1/4
A1, A2, A3 = 0.333333333, -0.249999949, 0.199999867
A4, A5, A6 = -0.166677482, 0.142873973, -0.124385581
A7, A8, A9 = 0.110368310, -0.112750886, 0.104089866

# Coefficients of exp(q) - 1 for q <= 1/2
E1, E2, E3 = 1.000000000, 0.499999994, 0.166666848
E4, E5, E6 = 0.041664508, 0.008345522, 0.001353826
E7 = 0.000247453

EXP_M1 = 0.36788794412
TAIL_REJECTION_BOUND = -0.71874483771719
LOG_DBL_MAX = 709.78


@dataclass(frozen=True, slots=True)
class GammaSetup:
    """
    Per-shape constants.

    ``b`` is the GS envelope split ``1 + a/e``; ``ss``, ``s`` and ``d`` are the
    GD constants ``a - 1/2``, ``sqrt(a - 1/2)`` and ``sqrt(32) - 12 s``.
    Fields of the other regime are ``nan``.
    """

    b: float = math.nan
    ss: float = math.nan
    s: float = math.nan
    d: float = math.nan


@dataclass(frozen=True, slots=True)
class GammaHat:
    """Constants of the GD hat function: ``q0`` and the double-exponential ``b, si, c``."""

    q0: float
    b: float
    si: float
    c: float


def _build_hat(a: float) -> GammaHat:
    ss = a - 0.5
    s = math.sqrt(ss)
    r = 1.0 / a
    q0 = (
        ((((((((Q9 * r + Q8) * r + Q7) * r + Q6) * r + Q5) * r + Q4) * r + Q3) * r + Q2) * r + Q1)
        * r
    )
    if a > 3.686:
        if a > 13.022:
            b = 1.77
            si = 0.75
            c = 0.1515 / s
        else:
            b = 1.654 + 0.0076 * ss
            si = 1.68 / s + 0.275
            c = 0.062 / s + 0.024
    else:
        b = 0.463 + s - 0.178 * ss
        si = 1.235
        c = 0.195 / s - 0.079 + 0.016 * s
    return GammaHat(q0=q0, b=b, si=si, c=c)


def _log_quotient(t: float, setup: GammaSetup, hat: GammaHat) -> float:
    """``q(t)``: log of the ratio of the gamma density to the normal hat at ``t``."""
    s, ss = setup.s, setup.ss
    v = t / (s + s)
    if abs(v) > 0.25:
        return hat.q0 - s * t + 0.25 * t * t + (ss + ss) * math.log(1.0 + v)
    return hat.q0 + 0.5 * t * t * (
        (((((((A9 * v + A8) * v + A7) * v + A6) * v + A5) * v + A4) * v + A3) * v + A2) * v + A1
    ) * v


class GammaSampler(RejectionSampler[float, GammaSetup]):
    """
    Gamma variates with shape ``a`` and scale ``θ``.

    Parameters
    ----------
    shape : float
        Shape ``a > 0``.
    scale : float, default 1.0
        Scale ``θ > 0``.
    """

    shape: float
    scale: float

    def __init__(
        self, shape: float, scale: float = 1.0, trace_threshold: int = DEFAULT_TRACE_THRESHOLD
    ) -> None:
        super().__init__(trace_threshold)
        self.shape = shape
        self.scale = scale
        self._hat_cache: SetupCache[float, GammaHat] = SetupCache(_build_hat, name="GD hat")

    def _snapshot(self) -> float:
        return self.shape

    def _build_setup(self, key: float) -> GammaSetup:
        a = key
        if a < 1.0:
            return GammaSetup(b=1.0 + EXP_M1 * a)
        ss = a - 0.5
        s = math.sqrt(ss)
        return GammaSetup(ss=ss, s=s, d=5.656854249 - 12.0 * s)

    @property
    def hat_cache(self) -> SetupCache[float, GammaHat]:
        return self._hat_cache

    def draw(self, source: UniformSource) -> float:
        a = self.shape
        setup = self.setup
        if a < 1.0:
            value = self._until_accepted(lambda src: self._gs_attempt(src, a, setup.b), source)
            return value * self.scale

        outcome = self._gd_normal_attempt(source, a, setup)
        if outcome.accepted:
            self.diagnostics.record(1, outcome)
            return outcome.value * self.scale

        hat = self._hat_cache.get(a)
        value = self._until_accepted(
            lambda src: self._gd_tail_attempt(src, setup, hat), source, attempts=1
        )
        return value * self.scale

    @staticmethod
    def _gs_attempt(source: UniformSource, a: float, b: float) -> AcceptanceOutcome:
        p = b * source.next()
        if p <= 1.0:
            gds = p ** (1.0 / a)
            if safe_log(source.next()) <= -gds:
                return accept(gds)
        else:
            gds = -math.log((b - p) / a)
            if safe_log(source.next()) <= (a - 1.0) * math.log(gds):
                return accept(gds)
        return REJECTED

    def _gd_normal_attempt(
        self, source: UniformSource, a: float, setup: GammaSetup
    ) -> AcceptanceOutcome:
        """Steps 2-7 of GD: normal deviate, immediate, squeeze and quotient acceptance."""
        while True:
            v1 = 2.0 * source.next() - 1.0
            v2 = 2.0 * source.next() - 1.0
            v12 = v1 * v1 + v2 * v2
            if 0.0 < v12 <= 1.0:
                break

        t = v1 * math.sqrt(-2.0 * math.log(v12) / v12)
        x = setup.s + 0.5 * t
        gds = x * x
        if t >= 0.0:
            return accept(gds)

        u = source.next()
        if setup.d * u <= t * t * t:
            return squeeze_accept(gds)

        hat = self._hat_cache.get(a)
        if x > 0.0 and math.log(1.0 - u) <= _log_quotient(t, setup, hat):
            return accept(gds)
        return REJECTED

    @staticmethod
    def _gd_tail_attempt(
        source: UniformSource, setup: GammaSetup, hat: GammaHat
    ) -> AcceptanceOutcome:
        """Steps 8-12 of GD: double exponential deviate and hat acceptance."""
        e = -safe_log(source.next())
        u = source.next()
        u = u + u - 1.0
        sign_u = 1.0 if u > 0.0 else -1.0
        t = hat.b + (e * hat.si) * sign_u
        if t <= TAIL_REJECTION_BOUND:
            return REJECTED

        q = _log_quotient(t, setup, hat)
        if not q > 0.0:
            return REJECTED
        if q > 0.5:
            w = math.exp(q) - 1.0 if q < LOG_DBL_MAX else math.inf
        else:
            w = ((((((E7 * q + E6) * q + E5) * q + E4) * q + E3) * q + E2) * q + E1) * q

        if hat.c * u * sign_u <= w * math.exp(e - 0.5 * t * t):
            x = setup.s + 0.5 * t
            return accept(x * x)
        return REJECTED
