"""
Distributions subpackage

Interfaces shared by every distribution of PySATL variates:

- distribution protocol (:mod:`.distribution`);
- analytical computations (:mod:`.computation`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    AnalyticalComputationStrategy,
    ComputationStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, IntegerIntervalSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "AnalyticalComputationStrategy",
    "SamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerIntervalSupport",
]
