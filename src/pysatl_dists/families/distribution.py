"""
Concrete distribution instances with specific parameter values.

This module provides the immutable, family-tagged value produced by a family
constructor. Its methods delegate to :mod:`pysatl_dists.interface`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_dists.families.parametric_family import ParametricFamily
    from pysatl_dists.families.parametrizations import Parametrization
    from pysatl_dists.sampling import ArraySample, SamplingStrategy
    from pysatl_dists.support import Support
    from pysatl_dists.types import (
        Domain,
        EnumerationDescriptor,
        EuclideanDistributionType,
        ParameterValues,
    )


@dataclass(frozen=True, slots=True, eq=False)
class ParametricFamilyDistribution:
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to; fixes the dispatch path.
    parameters : Parametrization
        Parameter values produced by the family's guard.
    enumeration : EnumerationDescriptor
        Enumeration descriptor resolved at construction.
    """

    family: ParametricFamily
    parameters: Parametrization
    enumeration: EnumerationDescriptor

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def domain(self) -> Domain:
        return self.family.domain

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type."""
        return self.family.distribution_type

    @property
    def values(self) -> ParameterValues:
        """Coerced parameter values in declaration order."""
        return self.parameters.values

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    def pdf(self, x: Any, log: bool = False) -> float:
        from pysatl_dists import interface

        return interface.pdf(self, x, log=log)

    def cdf(self, x: Any, log: bool = False, complement: bool = False) -> float:
        from pysatl_dists import interface

        return interface.cdf(self, x, log=log, complement=complement)

    def inv_cdf(self, p: float, log: bool = False, complement: bool = False) -> float | int:
        from pysatl_dists import interface

        return interface.inv_cdf(self, p, log=log, complement=complement)

    def sample(self, *, rng: np.random.Generator | None = None) -> Any:
        from pysatl_dists import interface

        return interface.sample(self, rng=rng)

    def sample_n(self, n: int, *, rng: np.random.Generator | None = None) -> ArraySample:
        from pysatl_dists import interface

        return interface.sample_n(self, n, rng=rng)

    def enum(self) -> EnumerationDescriptor:
        return self.enumeration

    def support(self) -> Support:
        from pysatl_dists import interface

        return interface.support(self)

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v!r}" for k, v in self.parameters.parameters.items())
        return f"{self.family_name}({body})"
