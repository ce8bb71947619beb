"""
Guards: construction-time coercion and validation of family parameters.

A guard receives the family's declared parameter names and the bound raw
arguments and returns the coerced values in declaration order. It runs exactly
once, before a distribution value is created.

- :func:`float_guard` — default for natural- and real-valued families.
- :func:`categorical_guard` — validates and normalizes a weight vector.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from numbers import Real
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_dists.errors import InvalidArgumentError
from pysatl_dists.types import Domain

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from pysatl_dists.types import FloatArray, ParameterName, ParameterValues

    type Guard = Callable[[Sequence[ParameterName], Mapping[str, Any]], ParameterValues]

logger = logging.getLogger(__name__)


def float_guard(names: Sequence[ParameterName], raw: Mapping[str, Any]) -> tuple[float, ...]:
    """
    Convert every declared parameter to ``float``.

    Range checks are left to the numeric backend.

    Raises
    ------
    InvalidArgumentError
        If a value cannot be converted to ``float``.
    """
    values: list[float] = []
    for name in names:
        value = raw[name]
        try:
            values.append(float(value))
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Parameter '{name}' must be a real number, got {value!r}", value
            ) from exc
    return tuple(values)


def _normalized_weights(weights: Any) -> FloatArray:
    if isinstance(weights, (str, bytes)) or not hasattr(weights, "__iter__"):
        raise InvalidArgumentError(f"Weights must be a sequence, got {weights!r}", weights)

    items = list(weights)
    for w in items:
        if isinstance(w, bool) or not isinstance(w, Real):
            raise InvalidArgumentError(f"Weight {w!r} is not a real number", w)
        if not math.isfinite(w) or w < 0:
            raise InvalidArgumentError(f"Weight {w!r} must be finite and >= 0", w)

    try:
        total = math.fsum(items)
    except OverflowError:
        total = math.inf
    if not total > 0:
        raise InvalidArgumentError(f"Weights must sum to a positive number, got {total!r}", total)

    probs = np.array(items, dtype=np.float64)
    if math.isinf(total):
        # rescale by the largest weight so the sum is representable
        probs = probs / probs.max()
        total = math.fsum(probs.tolist())
    if total != 1.0:
        logger.debug("Normalizing %d categorical weights with sum %r", probs.size, total)
        probs = probs / total
    probs.setflags(write=False)
    return probs


def categorical_guard(
    names: Sequence[ParameterName], raw: Mapping[str, Any]
) -> tuple[FloatArray, ...]:
    """
    Validate and normalize weight vectors.

    Every element must be a finite real number ``>= 0`` and the sum must be
    strictly positive. A vector already summing to exactly 1 is stored as is,
    otherwise it is divided by its sum. The result is a read-only copy.

    Raises
    ------
    InvalidArgumentError
        If any of the above conditions fails.
    """
    return tuple(_normalized_weights(raw[name]) for name in names)


DEFAULT_GUARDS: dict[Domain, Guard] = {
    Domain.NATURAL: float_guard,
    Domain.REAL: float_guard,
}
"""Guards selected by domain when a family declares none."""


__all__ = ["float_guard", "categorical_guard", "DEFAULT_GUARDS"]
