"""
Variate Generation API
======================

This module defines the contracts of the variate-generation engine:

- :class:`UniformSource` — the single capability the engine consumes;
- :class:`VariateSampler` — a per-distribution sampler drawing one value at a
  time from a uniform source;
- :class:`SamplerConfig` — configuration of sources and rejection tracing;
- :class:`AcceptanceOutcome` — tagged result of one rejection-loop iteration.

The engine never seeds, copies or inspects a uniform source. It consumes the
stream strictly sequentially, so two sources seeded identically produce
identical variate sequences.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import nan
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


@runtime_checkable
class UniformSource(Protocol):
    """
    Protocol for uniform random number sources.

    Notes
    -----
    ``next()`` must return i.i.d. values in ``[0, 1)``. The value ``0.0`` is
    allowed and is handled by the engine.
    """

    def next(self) -> float: ...


class VariateSampler(Protocol):
    """
    Protocol for variate samplers.

    A sampler is created for one parameter tuple of one family. It may keep
    derived setup constants between draws but never changes its parameters.
    """

    def draw(self, source: UniformSource) -> float:
        """Draw a single variate (integer-valued float for discrete families)."""
        ...

    def sample(self, n: int, source: UniformSource) -> npt.NDArray[np.float64]:
        """Draw ``n`` variates into a 1D array."""
        ...

    def set_trace_threshold(self, threshold: int) -> None: ...


@dataclass(frozen=True, slots=True)
class SamplerConfig:
    """
    Configuration for variate sampling.

    Parameters
    ----------
    seed : int | None, default None
        Seed for the uniform source created when the caller supplies none.
        If ``None``, uses system entropy.
    buffer_size : int, default 1024
        Number of uniforms fetched from NumPy per refill of a
        :class:`~pysatl_variates.stats._variates.source.NumpyUniformSource`.
    trace_threshold : int, default 1000
        Number of attempts within a single draw after which a rejection
        sampler emits one DEBUG log record. Tracing never limits the loop.

    Raises
    ------
    ValueError
        If ``buffer_size`` or ``trace_threshold`` is not positive.
    """

    seed: int | None = None
    buffer_size: int = 1024
    trace_threshold: int = 1000

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.trace_threshold <= 0:
            raise ValueError(f"trace_threshold must be positive, got {self.trace_threshold}")


class Verdict(StrEnum):
    """
    Verdict of one rejection-loop iteration.

    - ``ACCEPT``: candidate accepted by a region test or the full density test;
    - ``SQUEEZE_ACCEPT``: candidate accepted by a cheap squeeze bound;
    - ``REJECT``: candidate rejected, the loop generates a new one.
    """

    ACCEPT = "accept"
    SQUEEZE_ACCEPT = "squeeze_accept"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class AcceptanceOutcome:
    """
    Tagged result of one iteration of a rejection loop.

    Parameters
    ----------
    verdict : Verdict
        Outcome of the acceptance tests.
    value : float
        Accepted value; ``nan`` for rejections.
    """

    verdict: Verdict
    value: float = nan

    @property
    def accepted(self) -> bool:
        return self.verdict is not Verdict.REJECT


REJECTED = AcceptanceOutcome(Verdict.REJECT)
"""Shared outcome for rejected candidates."""


def accept(value: float) -> AcceptanceOutcome:
    """Outcome for a candidate accepted by a region or density test."""
    return AcceptanceOutcome(Verdict.ACCEPT, value)


def squeeze_accept(value: float) -> AcceptanceOutcome:
    """Outcome for a candidate accepted by a squeeze bound."""
    return AcceptanceOutcome(Verdict.SQUEEZE_ACCEPT, value)
