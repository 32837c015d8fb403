"""
PySATL Variates
===============

Random variate generation for univariate distributions: exact rejection and
inversion samplers driven by a caller-supplied uniform source, exposed
through parametric families with analytical characteristics.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import DomainError, InvalidParameterError, SourceExhaustedError
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    "DomainError",
    "InvalidParameterError",
    "SourceExhaustedError",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
