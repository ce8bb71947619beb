"""
Sampling Interfaces
===================

This module defines the sample container and the pluggable sampling
strategies attached to parametric families:

- :class:`ArraySample` — ``(n, 1)`` array of draws.
- :class:`SamplingStrategy` — protocol for single and batch draws.
- :class:`BackendSamplingStrategy` — draws through the numeric backend.
- :class:`CategoricalSamplingStrategy` — inverse-transform draws through the
  categorical engine.

Notes
-----
- Natural-valued and categorical families produce integers, real-valued
  families produce floats.
- Strategies are stateless; randomness comes from the generator passed in.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_dists import categorical_engine
from pysatl_dists.errors import InvalidArgumentError
from pysatl_dists.types import Kind

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy.typing as npt

    from pysatl_dists.families.distribution import ParametricFamilyDistribution


class ArraySample:
    """
    Array-backed sample container.

    Parameters
    ----------
    data : numpy.ndarray
        2D array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[Any]

    def __init__(self, data: npt.NDArray[Any]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[Any]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[Any]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)


def _check_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise InvalidArgumentError(f"Sample size must be a non-negative integer, got {n!r}", n)
    return int(n)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies."""

    def draw(self, distr: ParametricFamilyDistribution, rng: np.random.Generator) -> Any: ...

    def sample(
        self, n: int, distr: ParametricFamilyDistribution, rng: np.random.Generator
    ) -> ArraySample: ...


class BackendSamplingStrategy(SamplingStrategy):
    """
    Sampler delegating to the family's numeric backend ``draw`` primitive.

    A single draw of a natural-valued family truncates the first drawn value
    to ``int``.
    """

    def draw(self, distr: ParametricFamilyDistribution, rng: np.random.Generator) -> Any:
        value = distr.family.require_backend().draw(distr.values, 1, rng)[0]
        if distr.distribution_type.kind is Kind.DISCRETE:
            return int(value)
        return float(value)

    def sample(
        self, n: int, distr: ParametricFamilyDistribution, rng: np.random.Generator
    ) -> ArraySample:
        n = _check_count(n)
        values = distr.family.require_backend().draw(distr.values, n, rng)
        return ArraySample(np.asarray(values).reshape(n, 1))


class CategoricalSamplingStrategy(SamplingStrategy):
    """
    Inverse transform sampler over the normalized categorical weights.

    Each draw consumes one uniform variate ``U ~ U[0, 1)``.
    """

    def draw(self, distr: ParametricFamilyDistribution, rng: np.random.Generator) -> int:
        return categorical_engine.sample(distr.values[0], rng)

    def sample(
        self, n: int, distr: ParametricFamilyDistribution, rng: np.random.Generator
    ) -> ArraySample:
        n = _check_count(n)
        probs = distr.values[0]
        vals = np.array(
            [categorical_engine.sample(probs, rng) for _ in range(n)], dtype=np.int64
        )
        return ArraySample(vals.reshape(n, 1))


__all__ = [
    "ArraySample",
    "SamplingStrategy",
    "BackendSamplingStrategy",
    "CategoricalSamplingStrategy",
]
