"""
Error Types
===========

Exceptions raised at the boundary of the library. The sampling engine itself
never validates its inputs: parameters are checked once, when a distribution
is created from a parametric family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """
    A parametrization violates one of its constraints.

    Parameters
    ----------
    parametrization : str
        Name of the parametrization that failed validation.
    description : str
        Human-readable description of the violated constraint.
    """

    def __init__(self, parametrization: str, description: str) -> None:
        super().__init__(f'Constraint "{description}" does not hold')
        self.parametrization = parametrization
        self.description = description


class DomainError(ValueError):
    """A characteristic was evaluated outside of its domain."""


class SourceExhaustedError(RuntimeError):
    """A finite uniform source has no values left."""


__all__ = [
    "InvalidParameterError",
    "DomainError",
    "SourceExhaustedError",
]
