"""
Hypergeometric Variates
=======================

Stadlober's generators for the hypergeometric distribution
(Journal of Computational and Applied Mathematics 31, 1990):

- HIN: inversion by alternating down/up search from the mode, used when the
  mean ``n'·M'/N`` of the reduced problem is below 10;
- H2PE: a hat built of two centre regions split at the reflection points
  ``k2, k4`` and two exponential tails, used otherwise.

Both algorithms run on a reduced problem with ``M, n <= N/2`` and the result
is mapped back through the symmetries of the distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from pysatl_variates.stats._variates.api import REJECTED, accept, squeeze_accept
from pysatl_variates.stats._variates.rejection import DEFAULT_TRACE_THRESHOLD, RejectionSampler
from pysatl_variates.stats._variates.special import (
    log_factorial,
    log_hypergeometric_kernel,
    safe_log,
)

if TYPE_CHECKING:
    from pysatl_variates.stats._variates.api import AcceptanceOutcome, UniformSource

INVERSION_THRESHOLD = 10.0


class HypergeometricRegime(StrEnum):
    HIN = "hin"
    H2PE = "h2pe"


type HypergeometricKey = tuple[HypergeometricRegime, int, int, int]


@dataclass(frozen=True, slots=True)
class HinSetup:
    """
    Constants of the inversion regime.

    ``m`` is the mode, ``mp = m + 1``, ``fm`` the mode probability and ``b``
    the safety bound of the upward search.
    """

    n_mn: int
    m: int
    mp: int
    big_mp: int
    np1: int
    fm: float
    b: int


@dataclass(frozen=True, slots=True)
class H2peSetup:
    """
    Constants of the H2PE hat.

    ``k1 < k2 < m <= k4 < k5`` split the support into centre and tail regions,
    ``f*`` are ``p(k)/p(m)`` at the split points, ``r*`` the pmf ratios used by
    the squeezes, ``ll`` and ``lr`` the tail rates and ``p1..p6`` the
    cumulative region areas.
    """

    n_mn: int
    m: int
    k1: int
    k2: int
    k4: int
    k5: int
    dl: float
    dr: float
    r1: float
    r2: float
    r4: float
    r5: float
    ll: float
    lr: float
    c_pm: float
    f1: float
    f2: float
    f4: float
    f5: float
    p1: float
    p2: float
    p3: float
    p4: float
    p5: float
    p6: float


type HypergeometricSetup = HinSetup | H2peSetup


def _build_hin(big_n: int, big_m: int, n: int) -> HinSetup:
    big_mp = big_m + 1
    np1 = n + 1
    n_mn = big_n - big_m - n

    p = big_mp / (big_n + 2.0)
    nu = np1 * p
    m = int(nu)
    if m == nu and p == 0.5:
        mp = m
        m -= 1
    else:
        mp = m + 1

    fm = math.exp(
        log_factorial(big_n - big_m)
        - log_factorial(n_mn + m)
        - log_factorial(n - m)
        + log_factorial(big_m)
        - log_factorial(big_m - m)
        - log_factorial(m)
        - log_factorial(big_n)
        + log_factorial(big_n - n)
        + log_factorial(n)
    )

    # guarantees at least 17 significant decimal digits
    b = int(nu + 11.0 * math.sqrt(nu * (1.0 - p) * (1.0 - n / big_n) + 1.0))
    return HinSetup(n_mn=n_mn, m=m, mp=mp, big_mp=big_mp, np1=np1, fm=fm, b=min(b, n))


def _build_h2pe(big_n: int, big_m: int, n: int) -> H2peSetup:
    big_mp = big_m + 1
    np1 = n + 1
    n_mn = big_n - big_m - n

    p = big_mp / (big_n + 2.0)
    nu = np1 * p

    # approximate deviation of the reflection points k2, k4 from nu - 1/2
    u = math.sqrt(nu * (1.0 - p) * (1.0 - (n + 2.0) / (big_n + 3.0)) + 0.25)

    m = int(nu)
    k2 = int(math.ceil(nu - 0.5 - u))
    if k2 >= m:
        k2 = m - 1
    k4 = int(nu - 0.5 + u)
    k1 = k2 + k2 - m + 1
    k5 = k4 + k4 - m

    dl = float(k2 - k1)
    dr = float(k5 - k4)

    # p(k) / p(k - 1) at k = k1, k2, k4 + 1, k5 + 1
    r1 = (np1 / k1 - 1.0) * (big_mp - k1) / (n_mn + k1)
    r2 = (np1 / k2 - 1.0) * (big_mp - k2) / (n_mn + k2)
    r4 = (np1 / (k4 + 1) - 1.0) * (big_m - k4) / (n_mn + k4 + 1)
    r5 = (np1 / (k5 + 1) - 1.0) * (big_m - k5) / (n_mn + k5 + 1)

    ll = math.log(r1)
    lr = -math.log(r5)

    c_pm = log_hypergeometric_kernel(m, n_mn, big_m, n)
    f2 = math.exp(c_pm - log_hypergeometric_kernel(k2, n_mn, big_m, n))
    f4 = math.exp(c_pm - log_hypergeometric_kernel(k4, n_mn, big_m, n))
    f1 = math.exp(c_pm - log_hypergeometric_kernel(k1, n_mn, big_m, n))
    f5 = math.exp(c_pm - log_hypergeometric_kernel(k5, n_mn, big_m, n))

    p1 = f2 * (dl + 1.0)
    p2 = f2 * dl + p1
    p3 = f4 * (dr + 1.0) + p2
    p4 = f4 * dr + p3
    p5 = f1 / ll + p4
    p6 = f5 / lr + p5

    return H2peSetup(
        n_mn=n_mn, m=m, k1=k1, k2=k2, k4=k4, k5=k5, dl=dl, dr=dr,
        r1=r1, r2=r2, r4=r4, r5=r5, ll=ll, lr=lr, c_pm=c_pm,
        f1=f1, f2=f2, f4=f4, f5=f5, p1=p1, p2=p2, p3=p3, p4=p4, p5=p5, p6=p6,
    )


class HypergeometricSampler(RejectionSampler[HypergeometricKey, HypergeometricSetup]):
    """
    Hypergeometric variates: successes among ``n`` draws without replacement
    from a population of ``N`` items containing ``M`` successes.

    Parameters
    ----------
    N : int
        Population size, ``N >= 0``.
    M : int
        Successes in the population, ``0 <= M <= N``.
    n : int
        Number of draws, ``0 <= n <= N``.

    Notes
    -----
    The setup is keyed on the reduced triple and the regime, so HIN and H2PE
    share one cache and never see each other's constants.
    """

    discrete = True

    N: int
    M: int
    n: int

    def __init__(
        self, N: int, M: int, n: int, trace_threshold: int = DEFAULT_TRACE_THRESHOLD
    ) -> None:
        super().__init__(trace_threshold)
        self.N = N
        self.M = M
        self.n = n

    def _reduced(self) -> tuple[int, int, int]:
        """``(N, M', n')`` with ``n' <= M' <= N/2`` for the reduced problem."""
        big_n, big_m, n = self.N, self.M, self.n
        half = big_n / 2
        n_le = n if n <= half else big_n - n
        m_le = big_m if big_m <= half else big_n - big_m
        if n_le <= m_le:
            return big_n, m_le, n_le
        return big_n, n_le, m_le

    def _snapshot(self) -> HypergeometricKey:
        big_n, big_m, n = self._reduced()
        if n * big_m / big_n < INVERSION_THRESHOLD:
            return (HypergeometricRegime.HIN, big_n, big_m, n)
        return (HypergeometricRegime.H2PE, big_n, big_m, n)

    def _build_setup(self, key: HypergeometricKey) -> HypergeometricSetup:
        regime, big_n, big_m, n = key
        if regime is HypergeometricRegime.HIN:
            return _build_hin(big_n, big_m, n)
        return _build_h2pe(big_n, big_m, n)

    def draw(self, source: UniformSource) -> float:
        big_n, big_m, n = self.N, self.M, self.n
        if big_n == 0:
            return 0.0

        key = self._snapshot()
        _, _, reduced_m, reduced_n = key
        setup = self.setup_cache.get(key)
        if isinstance(setup, HinSetup):
            k = int(self._until_accepted(lambda src: self._hin_attempt(src, setup), source))
        else:
            k = int(
                self._until_accepted(
                    lambda src: self._h2pe_attempt(src, setup, reduced_m, reduced_n), source
                )
            )

        half = big_n / 2
        if n <= half:
            return float(k if big_m <= half else n - k)
        return float(big_m - k if big_m <= half else n - big_n + big_m + k)

    @staticmethod
    def _hin_attempt(source: UniformSource, s: HinSetup) -> AcceptanceOutcome:
        """One inversion pass; rejected when the upward search passes the safety bound."""
        u = source.next() - s.fm
        if u <= 0.0:
            return accept(float(s.m))
        c = d = s.fm

        for i in range(1, s.m + 1):
            k = s.mp - i
            c *= k / (s.np1 - k) * ((s.n_mn + k) / (s.big_mp - k))
            u -= c
            if u <= 0.0:
                return accept(float(k - 1))

            k = s.m + i
            d *= (s.np1 - k) / k * ((s.big_mp - k) / (s.n_mn + k))
            u -= d
            if u <= 0.0:
                return accept(float(k))

        for k in range(s.mp + s.m, s.b + 1):
            d *= (s.np1 - k) / k * ((s.big_mp - k) / (s.n_mn + k))
            u -= d
            if u <= 0.0:
                return accept(float(k))
        return REJECTED

    @staticmethod
    def _h2pe_attempt(
        source: UniformSource, s: H2peSetup, big_m: int, n: int
    ) -> AcceptanceOutcome:
        u = source.next() * s.p6

        if u < s.p2:
            # centre left
            w = u - s.p1
            if w < 0.0:
                return accept(float(s.k2 + int(u / s.f2)))
            y = w / s.dl
            if y < s.f1:
                return accept(float(s.k1 + int(w / s.f1)))

            dk = int(s.dl * source.next()) + 1
            if y <= s.f2 - dk * (s.f2 - s.f2 / s.r2):
                return squeeze_accept(float(s.k2 - dk))
            w = s.f2 + s.f2 - y
            if w < 1.0:
                v = s.k2 + dk
                if w <= s.f2 + dk * (1.0 - s.f2) / (s.dl + 1.0):
                    return squeeze_accept(float(v))
                if math.log(w) <= s.c_pm - log_hypergeometric_kernel(v, s.n_mn, big_m, n):
                    return accept(float(v))
            x = s.k2 - dk

        elif u < s.p4:
            # centre right
            w = u - s.p3
            if w < 0.0:
                return accept(float(s.k4 - int((u - s.p2) / s.f4)))
            y = w / s.dr
            if y < s.f5:
                return accept(float(s.k5 - int(w / s.f5)))

            dk = int(s.dr * source.next()) + 1
            if y <= s.f4 - dk * (s.f4 - s.f4 * s.r4):
                return squeeze_accept(float(s.k4 + dk))
            w = s.f4 + s.f4 - y
            if w < 1.0:
                v = s.k4 - dk
                if w <= s.f4 + dk * (1.0 - s.f4) / s.dr:
                    return squeeze_accept(float(v))
                if math.log(w) <= s.c_pm - log_hypergeometric_kernel(v, s.n_mn, big_m, n):
                    return accept(float(v))
            x = s.k4 + dk

        else:
            y = source.next()
            if u < s.p5:
                # exponential tail left
                tail = 1.0 - safe_log(y) / s.ll
                if tail >= s.k1 + 1:
                    return REJECTED
                dk = int(tail)
                x = s.k1 - dk
                y *= (u - s.p4) * s.ll
                if y <= s.f1 - dk * (s.f1 - s.f1 / s.r1):
                    return squeeze_accept(float(x))
            else:
                # exponential tail right
                tail = 1.0 - safe_log(y) / s.lr
                if tail >= n - s.k5 + 1:
                    return REJECTED
                dk = int(tail)
                x = s.k5 + dk
                y *= (u - s.p5) * s.lr
                if y <= s.f5 - dk * (s.f5 - s.f5 * s.r5):
                    return squeeze_accept(float(x))

        if safe_log(y) <= s.c_pm - log_hypergeometric_kernel(x, s.n_mn, big_m, n):
            return accept(float(x))
        return REJECTED
