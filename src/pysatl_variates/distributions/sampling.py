"""
Sampling Interfaces
===================

Protocol and array-backed container for samples drawn from a distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Sample stored as a 2D float array of shape ``(n, d)``.

    Univariate samplers produce 1D draws; use :meth:`from_draws` to wrap them
    as a single column.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_draws(cls, draws: npt.ArrayLike) -> ArraySample:
        """Wrap a sequence of univariate draws as an ``(n, 1)`` sample."""
        return cls(np.asarray(draws, dtype=np.float64).reshape(-1, 1))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over rows."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def values(self) -> npt.NDArray[np.floating[Any]]:
        """Draws of a univariate sample as a 1D array."""
        if self.dimension != 1:
            raise ValueError(f"values requires a univariate sample, got dimension {self.dimension}")
        return self.data[:, 0]

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


__all__ = ["Sample", "ArraySample"]
