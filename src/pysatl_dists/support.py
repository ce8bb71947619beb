"""
Support objects of distributions.

- :class:`ContinuousSupport` — interval support of real-valued families.
- :class:`IntegerLatticeSupport` — the points ``min_k, min_k + 1, ...``,
  optionally bounded above. Iteration is lazy, so unbounded supports of
  lazily enumerable families can be traversed on demand.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from itertools import count
from math import inf
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_dists.types import BoolArray, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Closed interval ``[left, right]``; infinite endpoints are never contained.

    Parameters
    ----------
    left : float, default=-inf
    right : float, default=inf
    """

    left: float = -inf
    right: float = inf

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x, dtype=float)
        result = np.isfinite(arr) & (arr >= self.left) & (arr <= self.right)
        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


@dataclass(frozen=True, slots=True)
class IntegerLatticeSupport:
    """
    Integer support ``{min_k, min_k + 1, ..., max_k}``.

    Parameters
    ----------
    min_k : int, default 0
        Smallest support point.
    max_k : int or None, default None
        Largest support point; ``None`` means unbounded above.
    """

    min_k: int = 0
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0))
        mask = finite & (xf == v) & (v >= self.min_k)
        if self.max_k is not None:
            mask &= v <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_finite(self) -> bool:
        return self.max_k is not None

    @property
    def size(self) -> int | None:
        """Number of support points, ``None`` if unbounded."""
        if self.max_k is None:
            return None
        return max(self.max_k - self.min_k + 1, 0)

    def iter_points(self) -> Iterator[int]:
        if self.max_k is None:
            return count(self.min_k)
        return iter(range(self.min_k, self.max_k + 1))

    __iter__ = iter_points


__all__ = ["Support", "ContinuousSupport", "IntegerLatticeSupport"]
