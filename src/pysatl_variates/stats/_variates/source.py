"""
Uniform Sources
===============

Concrete implementations of :class:`~pysatl_variates.stats._variates.api.UniformSource`.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.errors import SourceExhaustedError

if TYPE_CHECKING:
    from collections.abc import Iterable


class NumpyUniformSource:
    """
    Uniform source backed by a NumPy generator.

    Values are fetched from ``Generator.random`` in blocks of ``buffer_size``
    and handed out one by one. For a given seed and buffer size the stream
    of values is fixed.

    Parameters
    ----------
    seed : int | numpy.random.Generator | None, optional
        Seed for :func:`numpy.random.default_rng`, or an existing generator.
    buffer_size : int, default 1024
        Block size of each refill.
    """

    __slots__ = ("_rng", "_buffer", "_position", "_buffer_size")

    def __init__(
        self, seed: int | np.random.Generator | None = None, buffer_size: int = 1024
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
        self._buffer_size = buffer_size
        self._buffer: list[float] = []
        self._position = 0

    def next(self) -> float:
        """Return the next uniform value in ``[0, 1)``."""
        if self._position >= len(self._buffer):
            self._buffer = self._rng.random(self._buffer_size).tolist()
            self._position = 0
        value = self._buffer[self._position]
        self._position += 1
        return value

    @property
    def generator(self) -> np.random.Generator:
        """The underlying NumPy generator."""
        return self._rng


class SequenceUniformSource:
    """
    Uniform source replaying a fixed sequence of values.

    Useful for reproducing a draw exactly and for counting how many uniforms a
    sampler consumed.

    Parameters
    ----------
    values : Iterable[float]
        Values to replay, each expected in ``[0, 1)``.

    Raises
    ------
    SourceExhaustedError
        From :meth:`next` once all values are consumed.
    """

    __slots__ = ("_values", "_position")

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(v) for v in values]
        self._position = 0

    def next(self) -> float:
        if self._position >= len(self._values):
            raise SourceExhaustedError(
                f"Uniform sequence exhausted after {len(self._values)} values"
            )
        value = self._values[self._position]
        self._position += 1
        return value

    @property
    def consumed(self) -> int:
        """Number of values handed out so far."""
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position
