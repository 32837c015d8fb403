"""
Computation and Sampling Strategies
===================================

Pluggable strategy interfaces:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`AnalyticalComputationStrategy` — serves the analytical
  computations a distribution publishes.
- :class:`SamplingStrategy` — draws samples from a distribution.

The default sampling strategy lives with the variate engine, see
:class:`pysatl_variates.stats._variates.strategy.VariateSamplingStrategy`.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

from pysatl_variates.distributions.computation import AnalyticalComputation
from pysatl_variates.types import GenericCharacteristicName

if TYPE_CHECKING:
    from .distribution import Distribution
    from .sampling import Sample

type Method[In, Out] = AnalyticalComputation[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class AnalyticalComputationStrategy[In, Out]:
    """
    Characteristic resolver backed by analytical computations only.

    Raises
    ------
    RuntimeError
        If the distribution does not provide the requested characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name.
        distr : Distribution
            The distribution providing analytical computations.
        **options
            Unused; accepted for interface compatibility.
        """
        computations = distr.analytical_computations
        if state not in computations:
            available = ", ".join(sorted(computations)) or "none"
            raise RuntimeError(
                f"Characteristic '{state}' is not provided by this distribution "
                f"(available: {available})."
            )
        return computations[state]


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> "Sample": ...
