"""
Numeric Backend
===============

This module defines the contract of the external numeric backend used by every
natural- and real-valued family, and its implementation on top of
:mod:`scipy.stats`:

- :class:`NumericBackend` — the four primitives (density, cumulative,
  inverse cumulative, draw) plus support bounds, parameterized by the
  family's coerced parameters passed positionally.
- :class:`ScipyBackend` — adapter that maps those parameters onto a SciPy
  distribution and translates the ``log`` / ``complement`` flags onto the
  corresponding SciPy methods.

Notes
-----
- SciPy signals invalid parameters by returning NaN; the adapter turns this
  into :class:`~pysatl_dists.errors.BackendError` before evaluating anything.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from pysatl_dists.errors import BackendError
from pysatl_dists.types import Kind

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy.typing as npt

    from pysatl_dists.types import ParameterValues


@runtime_checkable
class NumericBackend(Protocol):
    """Per-family floating point primitives used by the distribution interface."""

    def density(self, params: ParameterValues, x: float, log: bool = False) -> float: ...

    def cumulative(
        self, params: ParameterValues, x: float, log: bool = False, complement: bool = False
    ) -> float: ...

    def inverse_cumulative(
        self, params: ParameterValues, p: float, log: bool = False, complement: bool = False
    ) -> float: ...

    def draw(
        self, params: ParameterValues, count: int, rng: np.random.Generator
    ) -> npt.NDArray[Any]: ...

    def bounds(self, params: ParameterValues) -> tuple[float, float]: ...


@dataclass(frozen=True, slots=True)
class ScipyBackend:
    """
    Numeric backend backed by a :mod:`scipy.stats` distribution.

    Parameters
    ----------
    family : str
        Family name, used in error messages.
    dist : Any
        SciPy distribution object (e.g. ``scipy.stats.norm``).
    kind : Kind
        Discrete families are evaluated with ``pmf``/``logpmf``, continuous
        ones with ``pdf``/``logpdf``.
    to_scipy : Callable[..., dict[str, float]]
        Maps the family's positional parameters to SciPy keyword arguments.
    """

    family: str
    dist: Any
    kind: Kind
    to_scipy: Callable[..., dict[str, float]]

    def freeze(self, params: ParameterValues) -> Any:
        """
        Freeze the SciPy distribution for ``params``.

        Raises
        ------
        BackendError
            If SciPy rejects the parameters.
        """
        frozen = self.dist(**self.to_scipy(*params))
        lo, hi = frozen.support()
        if np.isnan(lo) or np.isnan(hi):
            raise BackendError(self.family, f"invalid parameters {params!r}", params)
        return frozen

    def density(self, params: ParameterValues, x: float, log: bool = False) -> float:
        frozen = self.freeze(params)
        if self.kind is Kind.DISCRETE:
            value = frozen.logpmf(x) if log else frozen.pmf(x)
        else:
            value = frozen.logpdf(x) if log else frozen.pdf(x)
        return float(value)

    def cumulative(
        self, params: ParameterValues, x: float, log: bool = False, complement: bool = False
    ) -> float:
        frozen = self.freeze(params)
        if complement:
            value = frozen.logsf(x) if log else frozen.sf(x)
        else:
            value = frozen.logcdf(x) if log else frozen.cdf(x)
        return float(value)

    def inverse_cumulative(
        self, params: ParameterValues, p: float, log: bool = False, complement: bool = False
    ) -> float:
        frozen = self.freeze(params)
        prob = math.exp(p) if log else float(p)
        if not 0.0 <= prob <= 1.0:
            raise BackendError(self.family, f"probability {p!r} is outside [0, 1]", p)
        value = frozen.isf(prob) if complement else frozen.ppf(prob)
        return float(value)

    def draw(
        self, params: ParameterValues, count: int, rng: np.random.Generator
    ) -> npt.NDArray[Any]:
        frozen = self.freeze(params)
        values = np.asarray(frozen.rvs(size=count, random_state=rng))
        if self.kind is Kind.DISCRETE:
            return values.astype(np.int64)
        return values.astype(np.float64)

    def bounds(self, params: ParameterValues) -> tuple[float, float]:
        lo, hi = self.freeze(params).support()
        return float(lo), float(hi)


__all__ = ["NumericBackend", "ScipyBackend"]
