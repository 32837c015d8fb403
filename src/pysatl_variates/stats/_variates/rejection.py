"""
Sampler Base Classes
====================

- :class:`Sampler` — base for every variate sampler (``draw`` / ``sample``).
- :class:`RejectionSampler` — base for samplers with parameter-dependent setup
  constants and retry loops. It owns a :class:`SetupCache`, runs attempts
  until one is accepted and records :class:`RejectionDiagnostics`.

Rejection loops are never capped. Termination has probability one and the
expected number of attempts is bounded by the envelope constant of each
algorithm.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import inspect
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from pysatl_variates.stats._variates.api import Verdict
from pysatl_variates.stats._variates.cache import SetupCache

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

    import numpy.typing as npt

    from pysatl_variates.stats._variates.api import AcceptanceOutcome, UniformSource

logger = logging.getLogger(__name__)

DEFAULT_TRACE_THRESHOLD = 1000


class Sampler(ABC):
    """Base class for variate samplers."""

    discrete: ClassVar[bool] = False

    @abstractmethod
    def draw(self, source: UniformSource) -> float:
        """Draw a single variate."""

    def sample(self, n: int, source: UniformSource) -> npt.NDArray[np.float64]:
        """
        Draw ``n`` variates in sequence.

        Parameters
        ----------
        n : int
            Number of variates.
        source : UniformSource
            Uniform stream consumed by every draw in order.

        Returns
        -------
        numpy.ndarray
            1D float array of shape ``(n,)``.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        return np.fromiter((self.draw(source) for _ in range(n)), dtype=np.float64, count=n)

    def set_trace_threshold(self, threshold: int) -> None:
        """Set the per-draw attempt count that triggers a DEBUG record (no-op here)."""

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.parameters().items())
        return f"{type(self).__name__}({params})"

    def parameters(self) -> dict[str, Any]:
        """Current parameter values of the sampler."""
        return {
            name: getattr(self, name)
            for name in inspect.get_annotations(type(self))
            if not name.startswith("_")
        }


@dataclass(slots=True)
class RejectionDiagnostics:
    """
    Counters of a rejection sampler.

    Attributes
    ----------
    draws : int
        Completed draws.
    attempts : int
        Loop iterations over all draws.
    squeeze_accepts : int
        Draws accepted by a squeeze bound.
    last_attempts : int
        Iterations of the most recent draw.
    max_attempts : int
        Largest number of iterations seen in a single draw.
    """

    draws: int = 0
    attempts: int = 0
    squeeze_accepts: int = 0
    last_attempts: int = 0
    max_attempts: int = 0

    @property
    def mean_attempts(self) -> float:
        if self.draws == 0:
            return 0.0
        return self.attempts / self.draws

    def record(self, attempts: int, outcome: AcceptanceOutcome) -> None:
        self.draws += 1
        self.attempts += attempts
        self.last_attempts = attempts
        if attempts > self.max_attempts:
            self.max_attempts = attempts
        if outcome.verdict is Verdict.SQUEEZE_ACCEPT:
            self.squeeze_accepts += 1

    def reset(self) -> None:
        self.draws = 0
        self.attempts = 0
        self.squeeze_accepts = 0
        self.last_attempts = 0
        self.max_attempts = 0


class RejectionSampler[K: Hashable, S](Sampler):
    """
    Sampler with cached setup constants and an acceptance-rejection loop.

    Subclasses implement :meth:`_snapshot` (the parameter tuple the setup
    depends on), :meth:`_build_setup` and :meth:`draw`, typically by passing
    an attempt function to :meth:`_until_accepted`.

    Parameters
    ----------
    trace_threshold : int, optional
        Attempts within one draw after which a DEBUG record is emitted.
    """

    def __init__(self, trace_threshold: int = DEFAULT_TRACE_THRESHOLD) -> None:
        self.trace_threshold = trace_threshold
        self.diagnostics = RejectionDiagnostics()
        self._setup_cache: SetupCache[K, S] = SetupCache(
            self._build_setup, name=f"{type(self).__name__} setup"
        )

    @abstractmethod
    def _snapshot(self) -> K:
        """Parameter tuple the setup constants are derived from."""

    @abstractmethod
    def _build_setup(self, key: K) -> S:
        """Compute setup constants for the snapshot ``key``."""

    @property
    def setup(self) -> S:
        """Setup constants for the current parameters (rebuilt on change)."""
        return self._setup_cache.get(self._snapshot())

    @property
    def setup_cache(self) -> SetupCache[K, S]:
        return self._setup_cache

    def set_trace_threshold(self, threshold: int) -> None:
        self.trace_threshold = threshold

    def _until_accepted(
        self,
        attempt: Callable[[UniformSource], AcceptanceOutcome],
        source: UniformSource,
        attempts: int = 0,
    ) -> float:
        """
        Call ``attempt`` until it accepts and return the accepted value.

        ``attempts`` counts iterations already spent on this draw by an
        earlier phase of the algorithm. The loop count only feeds diagnostics
        and tracing.
        """
        while True:
            attempts += 1
            outcome = attempt(source)
            if outcome.accepted:
                self.diagnostics.record(attempts, outcome)
                return outcome.value
            if attempts == self.trace_threshold:
                logger.debug("%r: %d candidates rejected within a single draw", self, attempts)
