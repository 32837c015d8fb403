"""
Shared argument checks and quantile search for built-in families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import cast

import numpy as np

from pysatl_variates.errors import DomainError
from pysatl_variates.types import NumericArray

MAX_QUANTILE_SEARCH = 2**31


def check_probability(p: NumericArray) -> NumericArray:
    """
    Return ``p`` as a float array.

    Raises
    ------
    DomainError
        If any probability is outside ``[0, 1]`` or is NaN.
    """
    p = np.asarray(p, dtype=np.float64)
    if np.any(~((p >= 0.0) & (p <= 1.0))):
        raise DomainError("Probability must be in [0, 1]")
    return p


def require_integer(x: NumericArray) -> NumericArray:
    """
    Return ``x`` as a float array of integer values.

    Raises
    ------
    DomainError
        If any value is not an integer.
    """
    x = np.asarray(x, dtype=np.float64)
    if np.any(x != np.floor(x)):
        raise DomainError("Discrete characteristics are defined for integer arguments only")
    return x


def discrete_ppf(
    p: NumericArray,
    cdf: Callable[[NumericArray], NumericArray],
    lower: int,
    upper: int | None = None,
) -> NumericArray:
    """
    Quantiles ``min{k : F(k) >= p}`` of an integer-valued distribution.

    The search grid starts at ``lower`` and doubles until the CDF reaches the
    largest requested probability or ``upper`` is hit.

    Parameters
    ----------
    p : NumericArray
        Probabilities in ``[0, 1]``.
    cdf : Callable
        Vectorized CDF on integer points of the support.
    lower : int
        Smallest support point.
    upper : int | None, default None
        Largest support point, ``None`` if unbounded.

    Raises
    ------
    DomainError
        If any probability is outside ``[0, 1]``.
    """
    p = check_probability(p)
    scalar = p.ndim == 0
    p = np.atleast_1d(p)

    finite = p < 1.0 if upper is None else np.ones_like(p, dtype=bool)
    target = float(p[finite].max()) if np.any(finite) else 0.0

    hi = lower
    while cdf(np.float64(hi)) < target and (upper is None or hi < upper):
        if hi - lower > MAX_QUANTILE_SEARCH:
            break
        hi = lower + 2 * (hi - lower) + 1
        if upper is not None:
            hi = min(hi, upper)

    grid = np.arange(lower, hi + 1, dtype=np.float64)
    values = np.asarray(cdf(grid), dtype=np.float64)
    index = np.minimum(np.searchsorted(values, p, side="left"), len(grid) - 1)
    result = np.where(finite, grid[index], np.inf)
    if upper is not None:
        result = np.where(p >= 1.0, float(upper), result)

    if scalar:
        return cast(NumericArray, result[0])
    return cast(NumericArray, result)
