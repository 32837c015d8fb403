"""
Supports
========

Supports of univariate distributions:

- :class:`ContinuousSupport` — an interval of the real line;
- :class:`IntegerIntervalSupport` — consecutive integers ``min_k..max_k``,
  optionally unbounded to the right.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_variates.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@dataclass(frozen=True, slots=True)
class IntegerIntervalSupport(Support):
    """
    Integers ``k`` with ``min_k <= k <= max_k``.

    Parameters
    ----------
    min_k : int
        Smallest support point.
    max_k : int | None, default None
        Largest support point, ``None`` for a right-unbounded support.
    """

    min_k: int
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        mask = np.isfinite(xf) & (xf == np.floor(xf)) & (xf >= self.min_k)
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_bounded(self) -> bool:
        return self.max_k is not None

    def __len__(self) -> int:
        if self.max_k is None:
            raise TypeError("Right-unbounded integer support has no length")
        return max(0, self.max_k - self.min_k + 1)

    def iter_points(self) -> Iterator[int]:
        """Iterate over support points in increasing order."""
        k = self.min_k
        while self.max_k is None or k <= self.max_k:
            yield k
            k += 1

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerIntervalSupport",
]
