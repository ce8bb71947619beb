"""
Categorical Engine
==================

Native evaluation of the categorical (weighted discrete) distribution over the
support ``0, 1, ..., N - 1``. All functions operate on the stored, normalized
weight vector ``probs`` produced by the categorical guard.

Notes
-----
- ``cdf`` sums the first ``k + 1`` weights with :func:`math.fsum`.
- ``inv_cdf`` is a linear left-to-right scan; it supports neither log nor
  complement probabilities.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import operator
from typing import TYPE_CHECKING

from pysatl_dists.errors import (
    ExhaustedSupportError,
    OutOfRangeError,
    UnsupportedCombinationError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy as np


def convert_p(p: float, log: bool = False, complement: bool = False) -> float:
    """
    Apply the complement and log transforms to a probability.

    Parameters
    ----------
    p : float
        Probability in linear scale.
    log : bool, default False
        Return ``ln(p)`` (after the complement, if any).
    complement : bool, default False
        Replace ``p`` with ``1 - p`` first.

    Returns
    -------
    float
        Transformed probability.
    """
    if complement:
        p = 1.0 - p
    if log:
        # log(0) is -inf, not an error
        return math.log(p) if p > 0.0 else -math.inf
    return p


def _checked_index(probs: Sequence[float], k: object) -> int:
    size = len(probs)
    if isinstance(k, bool):
        raise OutOfRangeError(k, size)
    try:
        index = operator.index(k)  # type: ignore[arg-type]
    except TypeError:
        if isinstance(k, float) and k.is_integer():
            index = int(k)
        else:
            raise OutOfRangeError(k, size) from None
    if not 0 <= index < size:
        raise OutOfRangeError(k, size)
    return index


def pdf(probs: Sequence[float], k: int, log: bool = False) -> float:
    """
    Probability mass at ``k``.

    Raises
    ------
    OutOfRangeError
        If ``k`` is not an index of ``probs``.
    """
    index = _checked_index(probs, k)
    return convert_p(float(probs[index]), log=log)


def cdf(probs: Sequence[float], k: int, log: bool = False, complement: bool = False) -> float:
    """
    Probability that the variable is ``<= k`` (or ``> k`` with ``complement``).

    Raises
    ------
    OutOfRangeError
        If ``k`` is not an index of ``probs``.
    """
    index = _checked_index(probs, k)
    # normalized weights may sum to one ulp above 1
    p = min(math.fsum(probs[: index + 1]), 1.0)
    return convert_p(p, log=log, complement=complement)


def inv_cdf(
    probs: Sequence[float], p: float, log: bool = False, complement: bool = False
) -> int:
    """
    Smallest index ``k`` whose cumulative probability exceeds ``p``.

    Parameters
    ----------
    probs : Sequence[float]
        Normalized weights.
    p : float
        Probability in linear scale.
    log, complement : bool
        Must both be ``False``.

    Returns
    -------
    int
        Index into ``probs``.

    Raises
    ------
    UnsupportedCombinationError
        If ``log`` or ``complement`` is requested.
    ExhaustedSupportError
        If the scan runs past the last weight (``p >= 1`` or rounding at the
        upper boundary).
    """
    if log or complement:
        raise UnsupportedCombinationError("categorical inv_cdf", log=log, complement=complement)

    remainder = p
    index = 0
    for weight in probs:
        if remainder < weight:
            return index
        remainder -= weight
        index += 1
    raise ExhaustedSupportError(p, remainder)


def sample(probs: Sequence[float], rng: np.random.Generator) -> int:
    """Draw one index by inverting a uniform variate from ``rng``."""
    u = float(rng.random())
    return inv_cdf(probs, u)


__all__ = ["convert_p", "pdf", "cdf", "inv_cdf", "sample"]
