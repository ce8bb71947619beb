"""
Categorical distribution family.

The only family evaluated natively: a weighted discrete distribution over the
indices ``0, ..., N - 1`` of its weight vector.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_dists.families.guards import categorical_guard
from pysatl_dists.families.parametric_family import ParametricFamily
from pysatl_dists.families.registry import ParametricFamilyRegister
from pysatl_dists.types import Domain, FamilyName


def configure_categorical_family() -> None:
    """Configure and register the Categorical distribution family."""
    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return

    Categorical = ParametricFamily(
        name=FamilyName.CATEGORICAL,
        domain=Domain.UNCONSTRAINED,
        parameter_names=["weights"],
        enumeration=lambda params: len(params["weights"]),
        guard=categorical_guard,
    )
    ParametricFamilyRegister.register(Categorical)


__all__ = ["configure_categorical_family"]
