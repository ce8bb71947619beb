"""
Parametric family definitions.

A family is declared, not programmed: an ordered parameter list, a domain
classification, an enumeration descriptor, a numeric backend (for natural- and
real-valued families) and an optional guard. The interface operations route
through this declaration, so a new family needs no interface code.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_dists.errors import BackendError
from pysatl_dists.families.distribution import ParametricFamilyDistribution
from pysatl_dists.families.guards import DEFAULT_GUARDS
from pysatl_dists.families.parametrizations import Parametrization, bind_arguments
from pysatl_dists.sampling import BackendSamplingStrategy, CategoricalSamplingStrategy
from pysatl_dists.types import Domain, Enumerability

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any

    from pysatl_dists.backend import NumericBackend
    from pysatl_dists.families.guards import Guard
    from pysatl_dists.sampling import SamplingStrategy
    from pysatl_dists.types import (
        EnumerationDescriptor,
        EnumerationSpec,
        EuclideanDistributionType,
        ParameterName,
    )


class ParametricFamily:
    """
    A family of distributions sharing one mathematical form.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    domain : Domain
        Domain classification; selects the default guard and the dispatch
        path (numeric backend or categorical engine).
    parameter_names : Sequence[ParameterName]
        Ordered parameter names; values are passed to the backend in this order.
    enumeration : EnumerationSpec
        Finite count, :data:`~pysatl_dists.types.LAZY_INFINITE`,
        :data:`~pysatl_dists.types.NOT_ENUMERABLE`, or a function of the
        coerced parameters returning a finite count.
    backend : NumericBackend, optional
        Numeric primitives. Required for natural- and real-valued families.
    guard : Guard, optional
        Custom guard. Required for the unconstrained domain.
    sampling_strategy : SamplingStrategy, optional
        Defaults to backend draws, or to the categorical engine for the
        unconstrained domain.

    Raises
    ------
    ValueError
        If the declaration is inconsistent with its domain.
    """

    def __init__(
        self,
        name: str,
        domain: Domain,
        parameter_names: Sequence[ParameterName],
        enumeration: EnumerationSpec,
        backend: NumericBackend | None = None,
        guard: Guard | None = None,
        sampling_strategy: SamplingStrategy | None = None,
    ):
        if not parameter_names:
            raise ValueError(f"Family '{name}' must declare at least one parameter.")
        if domain is not Domain.UNCONSTRAINED and backend is None:
            raise ValueError(f"Family '{name}' of {domain} domain requires a numeric backend.")
        if guard is None:
            if domain not in DEFAULT_GUARDS:
                raise ValueError(f"Family '{name}' of {domain} domain requires a custom guard.")
            guard = DEFAULT_GUARDS[domain]

        self._name = name
        self._domain = domain
        self._enumeration = enumeration
        self.parameter_names: tuple[ParameterName, ...] = tuple(parameter_names)
        self.backend = backend
        self.guard: Guard = guard

        if sampling_strategy is None:
            sampling_strategy = (
                CategoricalSamplingStrategy()
                if domain is Domain.UNCONSTRAINED
                else BackendSamplingStrategy()
            )
        self.sampling_strategy = sampling_strategy

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._domain.distribution_type

    def require_backend(self) -> NumericBackend:
        """
        Get the numeric backend.

        Raises
        ------
        RuntimeError
            If the family is evaluated natively and has no backend.
        """
        if self.backend is None:
            raise RuntimeError(f"Family '{self.name}' has no numeric backend.")
        return self.backend

    def enumeration_for(self, parameters: Parametrization) -> EnumerationDescriptor:
        """
        Resolve the enumeration descriptor for concrete parameters.

        Raises
        ------
        BackendError
            If a computed point count is not finite (e.g. a NaN parameter).
        """
        spec = self._enumeration
        if isinstance(spec, (int, Enumerability)):
            return spec
        count = spec(parameters.parameters)
        if not math.isfinite(count):
            raise BackendError(
                self.name, f"cannot enumerate support with parameters {parameters!r}", count
            )
        return int(count)

    def distribution(self, *args: Any, **kwargs: Any) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters are bound like a regular call, run through the guard once,
        and frozen into the returned value.

        Raises
        ------
        TypeError
            If the arguments do not match the declared parameter names.
        InvalidArgumentError
            If the guard rejects a value.
        """
        raw = bind_arguments(self.name, self.parameter_names, args, kwargs)
        values = tuple(self.guard(self.parameter_names, raw))
        parameters = Parametrization(self.parameter_names, values)
        return ParametricFamilyDistribution(
            family=self,
            parameters=parameters,
            enumeration=self.enumeration_for(parameters),
        )

    def __repr__(self) -> str:
        params = ", ".join(self.parameter_names)
        return f"ParametricFamily({self.name}({params}), domain={self._domain})"

    __call__ = distribution
