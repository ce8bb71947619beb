"""
Parametric Families module.

This package provides the declarative mechanism for defining distribution
families (parameter list, domain, enumeration descriptor, guard), the global
family register, and the immutable distribution values they produce.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricFamilyDistribution
from .guards import categorical_guard, float_guard
from .parametric_family import ParametricFamily
from .parametrizations import Parametrization
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "Parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "categorical_guard",
    "float_guard",
    "configure_families_register",
    "reset_families_register",
]
