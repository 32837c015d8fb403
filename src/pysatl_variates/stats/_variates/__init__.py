"""
Variate Generation Engine
=========================

Exact non-uniform variate generation from a stream of uniform numbers.

Every sampler draws one value at a time from a
:class:`~pysatl_variates.stats._variates.api.UniformSource`. Samplers with
non-trivial setup (gamma, binomial, hypergeometric, chi-squared and the
Marsaglia–Tsang gamma) keep their setup constants in a
:class:`~pysatl_variates.stats._variates.cache.SetupCache` that is rebuilt
only when the parameters it was built for change.

Examples
--------
    >>> from pysatl_variates.stats._variates import GammaSampler, NumpyUniformSource
    >>> source = NumpyUniformSource(seed=42)
    >>> draws = GammaSampler(shape=5.0, scale=2.0).sample(1000, source)
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_variates.stats._variates.api import (
    REJECTED,
    AcceptanceOutcome,
    SamplerConfig,
    UniformSource,
    VariateSampler,
    Verdict,
    accept,
    squeeze_accept,
)
from pysatl_variates.stats._variates.binomial import BinomialSampler
from pysatl_variates.stats._variates.cache import SetupCache
from pysatl_variates.stats._variates.chi_squared import ChiSquaredSampler
from pysatl_variates.stats._variates.composite import (
    BetaSampler,
    FSampler,
    LogLogisticSampler,
    LogNormalSampler,
    MarsagliaTsangGammaSampler,
    NegativeBinomialSampler,
    StudentTSampler,
)
from pysatl_variates.stats._variates.elementary import (
    CauchySampler,
    ErlangSampler,
    ExponentialSampler,
    LaplaceSampler,
    LevySampler,
    LogarithmicSampler,
    LogisticSampler,
    ParetoSampler,
    PoissonSampler,
    RayleighSampler,
    TriangularSampler,
    UniformSampler,
    WeibullSampler,
    standard_exponential,
)
from pysatl_variates.stats._variates.gamma import GammaSampler
from pysatl_variates.stats._variates.hypergeometric import (
    HypergeometricRegime,
    HypergeometricSampler,
)
from pysatl_variates.stats._variates.normal import PolarNormalSampler, leva_normal, polar_normal
from pysatl_variates.stats._variates.rejection import (
    RejectionDiagnostics,
    RejectionSampler,
    Sampler,
)
from pysatl_variates.stats._variates.source import NumpyUniformSource, SequenceUniformSource
from pysatl_variates.stats._variates.special import (
    choose,
    log_factorial,
    log_hypergeometric_kernel,
    safe_log,
    stirling_correction,
)
from pysatl_variates.stats._variates.strategy import VariateSamplingStrategy

__all__ = [
    # contracts
    "UniformSource",
    "VariateSampler",
    "SamplerConfig",
    "Verdict",
    "AcceptanceOutcome",
    "REJECTED",
    "accept",
    "squeeze_accept",
    # sources
    "NumpyUniformSource",
    "SequenceUniformSource",
    # infrastructure
    "SetupCache",
    "Sampler",
    "RejectionSampler",
    "RejectionDiagnostics",
    "VariateSamplingStrategy",
    # core samplers
    "GammaSampler",
    "BinomialSampler",
    "HypergeometricSampler",
    "HypergeometricRegime",
    "ChiSquaredSampler",
    "MarsagliaTsangGammaSampler",
    # composite samplers
    "BetaSampler",
    "FSampler",
    "NegativeBinomialSampler",
    "StudentTSampler",
    "LogNormalSampler",
    "LogLogisticSampler",
    # normal
    "PolarNormalSampler",
    "polar_normal",
    "leva_normal",
    # elementary samplers
    "UniformSampler",
    "ExponentialSampler",
    "LogisticSampler",
    "WeibullSampler",
    "LaplaceSampler",
    "RayleighSampler",
    "TriangularSampler",
    "CauchySampler",
    "ParetoSampler",
    "LevySampler",
    "ErlangSampler",
    "PoissonSampler",
    "LogarithmicSampler",
    "standard_exponential",
    # special functions
    "log_factorial",
    "stirling_correction",
    "log_hypergeometric_kernel",
    "choose",
    "safe_log",
]
