"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL dists:

- natural-valued: bernoulli, binomial, geometric, poisson;
- real-valued: beta, cauchy, exponential, gamma, logistic, normal, uniform;
- unconstrained: categorical.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration happens once, on first use, and is cached.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_dists.families.builtins import (
    configure_categorical_family,
    configure_continuous_families,
    configure_discrete_families,
)
from pysatl_dists.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_discrete_families()
    configure_continuous_families()
    configure_categorical_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
