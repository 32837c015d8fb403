"""
Binomial Variates
=================

Kachitvichyanukul–Schmeiser generators for the binomial distribution
(Communications of the ACM 31, 1988).

With ``par = min(p, 1 - p)`` the sampler draws from ``Binomial(n, par)``
and reflects the result to ``n - K`` when ``p > 1/2``:

- ``n·par < 10``: chop-down inversion of the pmf from ``K = 0``;
- ``n·par >= 10``: BTPE, a four-region hat (triangle, parallelogram and two
  exponential tails) with squeeze bounds and a Stirling-based final test.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.stats._variates.api import REJECTED, accept, squeeze_accept
from pysatl_variates.stats._variates.rejection import DEFAULT_TRACE_THRESHOLD, RejectionSampler
from pysatl_variates.stats._variates.special import safe_log, stirling_correction

if TYPE_CHECKING:
    from pysatl_variates.stats._variates.api import AcceptanceOutcome, UniformSource

C1_3 = 0.33333333333333333
C5_8 = 0.62500000000000000
C1_6 = 0.16666666666666667
DMAX_KM = 20
INVERSION_THRESHOLD = 10.0


@dataclass(frozen=True, slots=True)
class ChopDownSetup:
    """Constants of the inversion regime: ``p0 = q^n`` and the safety bound ``b``."""

    par: float
    q: float
    p0: float
    b: int


@dataclass(frozen=True, slots=True)
class BtpeSetup:
    """
    Constants of the BTPE regime.

    ``m`` is the mode, ``[xl, xr]`` the triangle base, ``p1..p4`` the
    cumulative areas of the four hat regions, ``ll`` and ``lr`` the tail
    decay rates, ``rc`` and ``pq`` the pmf recurrence constants and ``ch``
    the log-pmf at the mode used by the final test.
    """

    par: float
    q: float
    pq: float
    rc: float
    ss: float
    m: int
    xm: float
    xl: float
    xr: float
    c: float
    ll: float
    lr: float
    p1: float
    p2: float
    p3: float
    p4: float
    nm: int
    ch: float


type BinomialSetup = ChopDownSetup | BtpeSetup


class BinomialSampler(RejectionSampler[tuple[int, float], BinomialSetup]):
    """
    Binomial variates: successes in ``n`` Bernoulli trials with probability ``p``.

    Parameters
    ----------
    n : int
        Number of trials, ``n >= 0``.
    p : float
        Success probability in ``[0, 1]``.
    """

    discrete = True

    n: int
    p: float

    def __init__(self, n: int, p: float, trace_threshold: int = DEFAULT_TRACE_THRESHOLD) -> None:
        super().__init__(trace_threshold)
        self.n = n
        self.p = p

    def _snapshot(self) -> tuple[int, float]:
        return (self.n, self.p)

    def _build_setup(self, key: tuple[int, float]) -> BinomialSetup:
        n, p = key
        par = min(p, 1.0 - p)
        q = 1.0 - par
        np_ = n * par

        if np_ < INVERSION_THRESHOLD:
            return ChopDownSetup(
                par=par,
                q=q,
                p0=math.exp(n * math.log(q)),
                b=int(min(n, np_ + 10.0 * math.sqrt(np_ * q))),
            )

        rm = np_ + par
        m = int(rm)
        pq = par / q
        rc = (n + 1.0) * pq
        ss = np_ * q
        i = int(2.195 * math.sqrt(ss) - 4.6 * q)
        xm = m + 0.5
        xl = float(m - i)
        xr = float(m + i + 1)
        f = (rm - xl) / (rm - xl * par)
        ll = f * (1.0 + 0.5 * f)
        f = (xr - rm) / (xr * q)
        lr = f * (1.0 + 0.5 * f)
        c = 0.134 + 20.5 / (15.3 + m)
        p1 = i + 0.5
        p2 = p1 * (1.0 + c + c)
        p3 = p2 + c / ll
        p4 = p3 + c / lr
        nm = n - m + 1
        ch = (
            xm * math.log((m + 1.0) / (pq * nm))
            + stirling_correction(m + 1)
            + stirling_correction(nm)
        )
        return BtpeSetup(
            par=par, q=q, pq=pq, rc=rc, ss=ss, m=m, xm=xm, xl=xl, xr=xr, c=c,
            ll=ll, lr=lr, p1=p1, p2=p2, p3=p3, p4=p4, nm=nm, ch=ch,
        )

    def draw(self, source: UniformSource) -> float:
        n, p = self.n, self.p
        if n == 0 or p == 0.0:
            return 0.0
        if p == 1.0:
            return float(n)

        setup = self.setup
        if isinstance(setup, ChopDownSetup):
            k = self._until_accepted(lambda src: self._chop_down_attempt(src, setup), source)
        else:
            k = self._until_accepted(lambda src: self._btpe_attempt(src, setup), source)
        return float(n - k) if p > 0.5 else k

    def _chop_down_attempt(self, source: UniformSource, setup: ChopDownSetup) -> AcceptanceOutcome:
        """One pass of the inversion scan; rejected when ``K`` overruns the safety bound."""
        n, par, q = self.n, setup.par, setup.q
        k = 0
        pk = setup.p0
        u = source.next()
        while u > pk:
            k += 1
            if k > setup.b:
                return REJECTED
            u -= pk
            pk = ((n - k + 1) * par * pk) / (k * q)
        return accept(float(k))

    def _btpe_attempt(self, source: UniformSource, s: BtpeSetup) -> AcceptanceOutcome:
        n = self.n
        v = source.next()
        u = source.next() * s.p4

        if u <= s.p1:
            # triangle
            return accept(float(int(s.xm - u + s.p1 * v)))

        if u <= s.p2:
            # parallelogram
            x = s.xl + (u - s.p1) / s.c
            v = v * s.c + 1.0 - abs(s.xm - x) / s.p1
            if v >= 1.0:
                return REJECTED
            k = int(x)
        elif u <= s.p3:
            # left tail
            x = s.xl + safe_log(v) / s.ll
            if x < 0.0:
                return REJECTED
            k = int(x)
            v *= (u - s.p2) * s.ll
        else:
            # right tail
            x = s.xr - safe_log(v) / s.lr
            if x >= n + 1:
                return REJECTED
            k = int(x)
            v *= (u - s.p3) * s.lr

        km = abs(k - s.m)
        if km <= DMAX_KM or km + km + 2 >= s.ss:
            # p(K) / p(m) by the recurrence from the mode
            f = 1.0
            if s.m < k:
                for i in range(s.m + 1, k + 1):
                    f *= s.rc / i - s.pq
                    if f < v:
                        break
            else:
                for i in range(k + 1, s.m + 1):
                    v *= s.rc / i - s.pq
                    if v > f:
                        break
            if v <= f:
                return accept(float(k))
            return REJECTED

        v = safe_log(v)
        t = -km * km / (s.ss + s.ss)
        e = (km / s.ss) * ((km * (km * C1_3 + C5_8) + C1_6) / s.ss + 0.5)
        if v <= t - e:
            return squeeze_accept(float(k))
        if v > t + e:
            return REJECTED

        nk = n - k + 1
        log_fk = (
            s.ch
            + (n + 1.0) * math.log(s.nm / nk)
            + (k + 0.5) * math.log(nk * s.pq / (k + 1.0))
            - stirling_correction(k + 1)
            - stirling_correction(nk)
        )
        if v <= log_fk:
            return accept(float(k))
        return REJECTED
