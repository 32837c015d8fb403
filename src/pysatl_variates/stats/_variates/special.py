"""
Special Functions for Acceptance Tests
======================================

Log-factorials, the Stirling correction term and related helpers evaluated
inside the rejection loops of the discrete samplers.

Small arguments are served from tables; large ones from the Stirling series

    ln k! = (k + 1/2) ln k - k + ln(2π)/2 + C1/k + C3/k³ + C5/k⁵ + C7/k⁷

so that every call is O(1) and never overflows.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

# ln(k!) for k = 0..29
_LOG_FACTORIALS = (
    0.00000000000000000,
    0.00000000000000000,
    0.69314718055994531,
    1.79175946922805500,
    3.17805383034794562,
    4.78749174278204599,
    6.57925121201010100,
    8.52516136106541430,
    10.60460290274525023,
    12.80182748008146961,
    15.10441257307551530,
    17.50230784587388584,
    19.98721449566188615,
    22.55216385312342289,
    25.19122118273868150,
    27.89927138384089157,
    30.67186010608067280,
    33.50507345013688888,
    36.39544520803305358,
    39.33988418719949404,
    42.33561646075348503,
    45.38013889847690803,
    48.47118135183522388,
    51.60667556776437357,
    54.78472939811231919,
    58.00360522298051994,
    61.26170176100200198,
    64.55753862700633106,
    67.88974313718153498,
    71.25703896716800901,
)

# ln(k!) - [(k + 1/2) ln(k) - k + ln(2π)/2] for k = 0..30, index 0 unused
_STIRLING_CORRECTIONS = (
    0.0,
    8.106146679532726e-02,
    4.134069595540929e-02,
    2.767792568499834e-02,
    2.079067210376509e-02,
    1.664469118982119e-02,
    1.387612882307075e-02,
    1.189670994589177e-02,
    1.041126526197209e-02,
    9.255462182712733e-03,
    8.330563433362871e-03,
    7.573675487951841e-03,
    6.942840107209530e-03,
    6.408994188004207e-03,
    5.951370112758848e-03,
    5.554733551962801e-03,
    5.207655919609640e-03,
    4.901395948434738e-03,
    4.629153749334029e-03,
    4.385560249232324e-03,
    4.166319691996922e-03,
    3.967954218640860e-03,
    3.787618068444430e-03,
    3.622960224683090e-03,
    3.472021382978770e-03,
    3.333155636728090e-03,
    3.204970228055040e-03,
    3.086278682608780e-03,
    2.976063983550410e-03,
    2.873449362352470e-03,
    2.777674929752690e-03,
)

HALF_LOG_2PI = 9.18938533204672742e-01
C1 = 8.33333333333333333e-02  # +1/12
C3 = -2.77777777777777778e-03  # -1/360
C5 = 7.93650793650793651e-04  # +1/1260
C7 = -5.95238095238095238e-04  # -1/1680


def _series(k: float) -> float:
    r = 1.0 / k
    rr = r * r
    return r * (C1 + rr * (C3 + rr * (C5 + rr * C7)))


def log_factorial(k: float) -> float:
    """
    Natural logarithm of ``k!``.

    Parameters
    ----------
    k : float
        Non-negative integer (non-integer values are floored).

    Returns
    -------
    float
        Exact tabulated value for ``k < 30``, Stirling series otherwise.

    Raises
    ------
    ValueError
        If ``k`` is negative.
    """
    k = math.floor(k)
    if k < 0:
        raise ValueError(f"log_factorial is undefined for negative k, got {k}")
    if k >= 30:
        return (k + 0.5) * math.log(k) - k + HALF_LOG_2PI + _series(k)
    return _LOG_FACTORIALS[k]


def stirling_correction(k: int) -> float:
    """
    Correction term of the Stirling approximation of ``ln k!``.

    ``ln k! = (k + 1/2) ln k - k + ln(2π)/2 + stirling_correction(k)``

    Tabulated for ``k <= 30``, series in ``1/k`` above.
    """
    if k > 30:
        return _series(k)
    return _STIRLING_CORRECTIONS[k]


def log_hypergeometric_kernel(k: int, n_mn: int, m: int, n: int) -> float:
    """
    Negative hypergeometric log-density of ``k`` up to a constant.

    Computes ``ln k! + ln (m-k)! + ln (n-k)! + ln (n_mn+k)!`` where
    ``n_mn = N - m - n``; differences of this kernel give log-ratios of
    hypergeometric probabilities.
    """
    return (
        log_factorial(k)
        + log_factorial(m - k)
        + log_factorial(n - k)
        + log_factorial(n_mn + k)
    )


def choose(n: float, k: int) -> float:
    """
    Binomial coefficient as the running product ``∏ (n-k+i)/i``.

    Returns 0 for ``k < 0`` and 1 for ``k == 0``. The product form keeps
    intermediate values near the result and avoids factorial overflow.
    """
    if k < 0:
        return 0.0
    if k == 0:
        return 1.0
    if k == 1:
        return float(n)

    a = n - k + 1
    b = 1
    result = 1.0
    for _ in range(k):
        result *= a / b
        a += 1
        b += 1
    return result


def safe_log(x: float) -> float:
    """Natural logarithm with ``safe_log(0) == -inf``."""
    if x > 0.0:
        return math.log(x)
    return -math.inf


__all__ = [
    "log_factorial",
    "stirling_correction",
    "log_hypergeometric_kernel",
    "choose",
    "safe_log",
]
