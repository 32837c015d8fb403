from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from pysatl_variates.distributions import (
    AnalyticalComputation,
    AnalyticalComputationStrategy,
    ArraySample,
    ComputationStrategy,
    Distribution,
    Sample,
    SamplingStrategy,
    Support,
)
from pysatl_variates.stats._variates import VariateSampler, VariateSamplingStrategy
from pysatl_variates.types import EuclideanDistributionType, GenericCharacteristicName, Kind


class MockSamplingStrategy(SamplingStrategy):
    def sample(self, n: int, distr: Distribution, **options: Any) -> Sample:
        return ArraySample(np.random.random((n, 1)))


@dataclass(slots=True)
class StandaloneEuclideanUnivariateDistribution(Distribution):
    """
    Minimal standalone univariate Euclidean distribution.

    Notes
    -----
    - Dimension is fixed to 1.
    - Default strategies are attached: analytical computation and variate
      sampling through ``sampler``.
    """

    _distribution_type: EuclideanDistributionType
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
    _sampler: VariateSampler | None
    _support: Support | None
    _sampling_strategy: SamplingStrategy

    def __init__(
        self,
        kind: Kind,
        analytical_computations: (
            Iterable[AnalyticalComputation[Any, Any]]
            | Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
        ) = (),
        sampler: VariateSampler | None = None,
        support: Support | None = None,
    ) -> None:
        self._distribution_type = EuclideanDistributionType(kind, 1)
        if isinstance(analytical_computations, Mapping):
            self._analytical = dict(analytical_computations)
        else:
            self._analytical = {ac.target: ac for ac in analytical_computations}
        self._sampler = sampler
        self._support = support
        self._sampling_strategy = VariateSamplingStrategy()

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Distribution type descriptor (kind and dimension)."""
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Mapping from characteristic name to analytical callable."""
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self._sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return AnalyticalComputationStrategy()

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def sampler(self) -> VariateSampler:
        if self._sampler is None:
            raise RuntimeError("No sampler attached")
        return self._sampler
