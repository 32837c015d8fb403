"""
PySATL Variates
===============

Unit tests of the variate generation engine, the distribution contracts and
the built-in parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
