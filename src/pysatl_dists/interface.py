"""
Distribution Interface
======================

Public operations over distributions of every family:

- constructors, one per built-in family, plus :func:`distribution` for lookup
  by family name;
- :func:`pdf`, :func:`cdf`, :func:`inv_cdf`, :func:`sample`, :func:`enum`;
- :func:`sample_n`, :func:`support`, :func:`log_likelihood`.

Every operation dispatches on the distribution's family: the unconstrained
domain is evaluated by the categorical engine, every other domain by the
family's numeric backend with the coerced parameters passed positionally.
Backend errors propagate unchanged.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_dists import categorical_engine, random
from pysatl_dists.families.configuration import configure_families_register
from pysatl_dists.support import ContinuousSupport, IntegerLatticeSupport
from pysatl_dists.types import LAZY_INFINITE, Domain, FamilyName

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from typing import Any

    import numpy as np

    from pysatl_dists.families.distribution import ParametricFamilyDistribution
    from pysatl_dists.sampling import ArraySample
    from pysatl_dists.support import Support
    from pysatl_dists.types import EnumerationDescriptor

    type Distribution = ParametricFamilyDistribution


# --------------------------------------------------------------------------- #
# Constructors
# --------------------------------------------------------------------------- #


def distribution(name: str, *args: Any, **kwargs: Any) -> Distribution:
    """
    Construct a distribution of any registered family by name.

    Raises
    ------
    UnknownFamilyError
        If no family named ``name`` is registered.
    """
    return configure_families_register().get(name)(*args, **kwargs)


def family_names() -> list[str]:
    """Names of all registered families."""
    return configure_families_register().names()


def bernoulli(prob: float) -> Distribution:
    return distribution(FamilyName.BERNOULLI, prob=prob)


def binomial(n: float, p: float) -> Distribution:
    return distribution(FamilyName.BINOMIAL, n=n, p=p)


def geometric(p: float) -> Distribution:
    """Number of failures before the first success."""
    return distribution(FamilyName.GEOMETRIC, p=p)


def poisson(mean: float) -> Distribution:
    return distribution(FamilyName.POISSON, mean=mean)


def beta(a: float, b: float) -> Distribution:
    return distribution(FamilyName.BETA, a=a, b=b)


def cauchy(mode: float, scale: float) -> Distribution:
    return distribution(FamilyName.CAUCHY, mode=mode, scale=scale)


def exponential(mean: float) -> Distribution:
    return distribution(FamilyName.EXPONENTIAL, mean=mean)


def gamma(shape: float, scale: float) -> Distribution:
    return distribution(FamilyName.GAMMA, shape=shape, scale=scale)


def logistic(mean: float, scale: float) -> Distribution:
    return distribution(FamilyName.LOGISTIC, mean=mean, scale=scale)


def normal(mean: float, stddev: float) -> Distribution:
    return distribution(FamilyName.NORMAL, mean=mean, stddev=stddev)


def uniform(min: float, max: float) -> Distribution:  # noqa: A002
    return distribution(FamilyName.UNIFORM, min=min, max=max)


def categorical(weights: Sequence[float]) -> Distribution:
    """
    Weighted discrete distribution over ``0, ..., len(weights) - 1``.

    Weights are validated and normalized once, here.
    """
    return distribution(FamilyName.CATEGORICAL, weights=weights)


# --------------------------------------------------------------------------- #
# Operations
# --------------------------------------------------------------------------- #


def _is_native(d: Distribution) -> bool:
    return d.domain is Domain.UNCONSTRAINED


def pdf(d: Distribution, x: Any, log: bool = False) -> float:
    """
    Density (or probability mass) of ``d`` at ``x``.

    Parameters
    ----------
    d : Distribution
    x : Any
        Point; an index for categorical distributions.
    log : bool, default False
        Return the natural logarithm of the density.
    """
    if _is_native(d):
        return categorical_engine.pdf(d.values[0], x, log=log)
    return d.family.require_backend().density(d.values, x, log=log)


def cdf(d: Distribution, x: Any, log: bool = False, complement: bool = False) -> float:
    """
    Probability that the variable is ``<= x``.

    With ``complement`` the probability of ``> x`` is returned instead; with
    ``log`` its natural logarithm.
    """
    if _is_native(d):
        return categorical_engine.cdf(d.values[0], x, log=log, complement=complement)
    return d.family.require_backend().cumulative(d.values, x, log=log, complement=complement)


def inv_cdf(
    d: Distribution, p: float, log: bool = False, complement: bool = False
) -> float | int:
    """
    Inverse of :func:`cdf` under the same ``log`` / ``complement`` flags.

    ``p`` is given as a log-probability when ``log`` is true. Categorical
    distributions support neither flag.
    """
    if _is_native(d):
        return categorical_engine.inv_cdf(d.values[0], p, log=log, complement=complement)
    return d.family.require_backend().inverse_cumulative(
        d.values, p, log=log, complement=complement
    )


def sample(d: Distribution, *, rng: np.random.Generator | None = None) -> Any:
    """
    One random draw from ``d``.

    Returns ``int`` for natural-valued and categorical families, ``float``
    for real-valued ones. Uses the thread-local random source unless ``rng``
    is given.
    """
    return d.sampling_strategy.draw(d, random.resolve(rng))


def sample_n(d: Distribution, n: int, *, rng: np.random.Generator | None = None) -> ArraySample:
    """``n`` independent draws from ``d`` as an ``(n, 1)`` sample."""
    return d.sampling_strategy.sample(n, d, random.resolve(rng))


def enum(d: Distribution) -> EnumerationDescriptor:
    """
    Enumeration descriptor of ``d``.

    Returns
    -------
    int or Enumerability
        Finite number of support points,
        :data:`~pysatl_dists.types.LAZY_INFINITE` or
        :data:`~pysatl_dists.types.NOT_ENUMERABLE`.
    """
    return d.enumeration


def support(d: Distribution) -> Support:
    """
    Support of ``d``, consistent with :func:`enum`.

    Enumerable families have the integer support ``0, ..., N - 1`` (unbounded
    for lazily enumerable ones); other families report the backend's interval.
    """
    descriptor = d.enumeration
    if isinstance(descriptor, int):
        return IntegerLatticeSupport(min_k=0, max_k=descriptor - 1)
    if descriptor is LAZY_INFINITE:
        return IntegerLatticeSupport(min_k=0)
    return ContinuousSupport(*d.family.require_backend().bounds(d.values))


def log_likelihood(d: Distribution, data: Iterable[Any]) -> float:
    """Sum of log-densities of ``data`` under ``d``."""
    return math.fsum(pdf(d, x, log=True) for x in data)


__all__ = [
    "distribution",
    "family_names",
    "bernoulli",
    "binomial",
    "geometric",
    "poisson",
    "beta",
    "cauchy",
    "exponential",
    "gamma",
    "logistic",
    "normal",
    "uniform",
    "categorical",
    "pdf",
    "cdf",
    "inv_cdf",
    "sample",
    "sample_n",
    "enum",
    "support",
    "log_likelihood",
]
