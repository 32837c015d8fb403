"""
Variate Sampling Strategy
=========================

Default sampling strategy of parametric distributions. It asks the
distribution for its variate sampler, creates a uniform source from the
configuration (unless the caller passes one) and converts the draws to the
standard :class:`~pysatl_variates.distributions.sampling.Sample` format.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

from pysatl_variates.distributions.sampling import ArraySample
from pysatl_variates.stats._variates.api import SamplerConfig, UniformSource
from pysatl_variates.stats._variates.source import NumpyUniformSource

if TYPE_CHECKING:
    from pysatl_variates.distributions.distribution import Distribution
    from pysatl_variates.distributions.sampling import Sample

logger = logging.getLogger(__name__)

_CONFIG_OPTIONS = frozenset(field.name for field in dataclasses.fields(SamplerConfig))


class VariateSamplingStrategy:
    """
    Sampling strategy backed by the distribution's variate sampler.

    Notes
    -----
    - The sampler itself is owned and cached by the distribution, so repeated
      calls reuse its setup constants.
    - Every call without an explicit ``source`` creates a fresh
      :class:`NumpyUniformSource`; pass ``seed`` for reproducible output.
    """

    def __init__(self, default_config: SamplerConfig | None = None) -> None:
        """
        Initialize the sampling strategy.

        Parameters
        ----------
        default_config : SamplerConfig | None, optional
            Default configuration. If None, uses ``SamplerConfig()``.
        """
        self._default_config = default_config or SamplerConfig()

    def sample(self, n: int, distr: Distribution, **options: Any) -> Sample:
        """
        Generate a sample from the distribution.

        Parameters
        ----------
        n : int
            Number of observations to draw.
        distr : Distribution
            The distribution to sample from.
        **options : Any
            - ``source``: a :class:`UniformSource` to draw from;
            - ``seed``, ``buffer_size``, ``trace_threshold``: override the
              corresponding :class:`SamplerConfig` fields.

        Returns
        -------
        Sample
            A 2D sample of shape ``(n, 1)``.

        Raises
        ------
        ValueError
            If ``n`` is negative, an option is unknown or the resulting
            configuration is invalid.
        TypeError
            If ``source`` does not implement :class:`UniformSource`.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")

        source = options.pop("source", None)
        config = self._resolve_config(options)
        if source is None:
            source = NumpyUniformSource(config.seed, config.buffer_size)
        elif not isinstance(source, UniformSource):
            raise TypeError(f"source must provide next(), got {type(source).__name__}")

        sampler = distr.sampler
        sampler.set_trace_threshold(config.trace_threshold)
        logger.debug("Drawing %d variates with %r", n, sampler)
        return ArraySample.from_draws(sampler.sample(n, source))

    def _resolve_config(self, options: dict[str, Any]) -> SamplerConfig:
        unknown = set(options) - _CONFIG_OPTIONS
        if unknown:
            raise ValueError(f"Unknown sampling options: {', '.join(sorted(unknown))}")
        if not options:
            return self._default_config
        return dataclasses.replace(self._default_config, **options)

    @property
    def default_config(self) -> SamplerConfig:
        """Default sampling configuration."""
        return self._default_config
