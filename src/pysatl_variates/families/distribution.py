"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import Distribution
from pysatl_variates.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_variates.distributions.computation import AnalyticalComputation
    from pysatl_variates.distributions.sampling import Sample
    from pysatl_variates.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_variates.distributions.support import Support
    from pysatl_variates.families.parametric_family import ParametricFamily
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.stats._variates.api import UniformSource, VariateSampler
    from pysatl_variates.types import (
        DistributionType,
        GenericCharacteristicName,
    )

    type AnalyticalComputations = dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for computation and sampling.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parametrization : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.

    Notes
    -----
    Analytical computations and the variate sampler are built lazily and
    cached per instance. Both caches are invalidated when ``parametrization``
    is replaced.
    """

    family_name: str
    _distribution_type: DistributionType
    parametrization: Parametrization
    _support: Support | None
    _analytical_cache_key: tuple[int, str] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _analytical_cache_val: AnalyticalComputations | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _sampler_cache_key: tuple[int, str] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _sampler_cache_val: VariateSampler | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values of this distribution by name."""
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        return self.parametrization.name

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance. Cache invalidates when
        parametrization object or name changes.
        """
        key = (id(self.parametrization), self.parametrization.name)
        cache_val = self._analytical_cache_val

        if self._analytical_cache_key != key or cache_val is None:
            cache_val = self.family._build_analytical_computations(self.parametrization)
            self._analytical_cache_key = key
            self._analytical_cache_val = cache_val

        return cache_val

    @property
    def sampler(self) -> VariateSampler:
        """
        Variate sampler for the current parameters.

        Built on first use from the base parametrization and then reused, so
        its setup constants are computed once per parameter set.

        Raises
        ------
        RuntimeError
            If the family defines no sampler.
        """
        key = (id(self.parametrization), self.parametrization.name)
        sampler = self._sampler_cache_val

        if self._sampler_cache_key != key or sampler is None:
            sampler = self.family.build_sampler(self.parametrization)
            self._sampler_cache_key = key
            self._sampler_cache_val = sampler

        return sampler

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def sample_one(self, source: UniformSource) -> float:
        """Draw a single variate from ``source``."""
        return self.sampler.draw(source)

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Options of the sampling strategy, e.g. ``seed`` or ``source``.

        Returns
        -------
        Sample
            Generated samples of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
