"""
Built-in distribution families for PySATL dists.

This package contains the declarations of the families available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dists.families.builtins.categorical import configure_categorical_family
from pysatl_dists.families.builtins.continuous import configure_continuous_families
from pysatl_dists.families.builtins.discrete import configure_discrete_families

__all__ = [
    "configure_categorical_family",
    "configure_continuous_families",
    "configure_discrete_families",
]
