"""
PySATL Dists
============

Uniform interface over probability distributions of several parametric
families: density, cumulative probability, inverse cumulative probability,
sampling and enumeration metadata, with log-domain and complement-domain
evaluation.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .interface import *
from .interface import __all__ as _interface_all
from .sampling import ArraySample
from .support import ContinuousSupport, IntegerLatticeSupport
from .types import *
from .types import __all__ as _types_all

Distribution = ParametricFamilyDistribution

__version__ = version("pysatl-dists")
__all__ = [
    "__version__",
    "Distribution",
    "ArraySample",
    "ContinuousSupport",
    "IntegerLatticeSupport",
    *_errors_all,
    *_family_all,
    *_interface_all,
    *_types_all,
]

del _errors_all
del _family_all
del _interface_all
del _types_all
