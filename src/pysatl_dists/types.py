"""
Core Type Definitions
=====================

Fundamental types and markers used throughout PySATL dists: family names,
domain classification of family parameters, enumeration descriptors and
distribution kinds.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""


class Domain(StrEnum):
    """
    Domain classification of a family's parameters.

    The domain selects the default guard and the dispatch path of every
    interface operation.

    Attributes
    ----------
    NATURAL : str
        Integer-valued (counting) families delegated to the numeric backend.
    REAL : str
        Real-valued families delegated to the numeric backend.
    UNCONSTRAINED : str
        Families whose parameters are structured data (a weight vector),
        evaluated natively.
    """

    NATURAL = "natural"
    REAL = "real"
    UNCONSTRAINED = "unconstrained"

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Distribution type of the values produced by families of this domain."""
        if self is Domain.REAL:
            return UnivariateContinuous
        return UnivariateDiscrete


class Enumerability(Enum):
    """
    Symbolic enumeration descriptors.

    Attributes
    ----------
    LAZY
        The support is countably infinite and can only be listed lazily.
    NOT_ENUMERABLE
        The support cannot be listed (continuous families).
    """

    LAZY = "lazy"
    NOT_ENUMERABLE = "not_enumerable"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


LAZY_INFINITE = Enumerability.LAZY
"""Marker for a lazily enumerable, infinite support."""

NOT_ENUMERABLE = Enumerability.NOT_ENUMERABLE
"""Marker for a support that cannot be enumerated."""


class FamilyName(StrEnum):
    BERNOULLI = "bernoulli"
    BINOMIAL = "binomial"
    GEOMETRIC = "geometric"
    POISSON = "poisson"
    BETA = "beta"
    CAUCHY = "cauchy"
    EXPONENTIAL = "exponential"
    GAMMA = "gamma"
    LOGISTIC = "logistic"
    NORMAL = "normal"
    UNIFORM = "uniform"
    CATEGORICAL = "categorical"


type EnumerationDescriptor = int | Enumerability
"""Resolved enumeration descriptor: finite count or a symbolic marker."""

type ParameterName = str
"""Type alias for declared parameter names."""

type ParameterValues = tuple[Any, ...]
"""Type alias for the ordered, coerced parameter values of a distribution."""

type EnumerationSpec = EnumerationDescriptor | Callable[[dict[str, Any]], int | float]
"""Declared enumeration descriptor: a literal, a marker or a function of parameters."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for float64 arrays (e.g. normalized categorical weights)."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "Domain",
    "Enumerability",
    "LAZY_INFINITE",
    "NOT_ENUMERABLE",
    "FamilyName",
    "EnumerationDescriptor",
    "EnumerationSpec",
    "ParameterName",
    "ParameterValues",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
]
