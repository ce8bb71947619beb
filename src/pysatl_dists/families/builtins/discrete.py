"""
Natural-valued distribution families.

Contains the Bernoulli, Binomial, Geometric and Poisson families, evaluated by
the SciPy numeric backend.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from scipy import stats

from pysatl_dists.backend import ScipyBackend
from pysatl_dists.families.parametric_family import ParametricFamily
from pysatl_dists.families.registry import ParametricFamilyRegister
from pysatl_dists.types import LAZY_INFINITE, Domain, FamilyName, Kind


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.

    Single trial with success probability ``prob``; support ``{0, 1}``.
    """
    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        domain=Domain.NATURAL,
        parameter_names=["prob"],
        enumeration=2,
        backend=ScipyBackend(
            family=FamilyName.BERNOULLI,
            dist=stats.bernoulli,
            kind=Kind.DISCRETE,
            to_scipy=lambda prob: {"p": prob},
        ),
    )
    ParametricFamilyRegister.register(Bernoulli)


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.

    Number of successes in ``n`` trials; support ``{0, ..., n}``, hence
    ``n + 1`` enumerable points.
    """
    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        domain=Domain.NATURAL,
        parameter_names=["n", "p"],
        enumeration=lambda params: params["n"] + 1,
        backend=ScipyBackend(
            family=FamilyName.BINOMIAL,
            dist=stats.binom,
            kind=Kind.DISCRETE,
            to_scipy=lambda n, p: {"n": n, "p": p},
        ),
    )
    ParametricFamilyRegister.register(Binomial)


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.

    Number of failures before the first success; support ``{0, 1, ...}``.
    """
    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        domain=Domain.NATURAL,
        parameter_names=["p"],
        enumeration=LAZY_INFINITE,
        backend=ScipyBackend(
            family=FamilyName.GEOMETRIC,
            dist=stats.geom,
            kind=Kind.DISCRETE,
            # scipy counts trials, starting at 1
            to_scipy=lambda p: {"p": p, "loc": -1},
        ),
    )
    ParametricFamilyRegister.register(Geometric)


def configure_poisson_family() -> None:
    """Configure and register the Poisson distribution family."""
    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        domain=Domain.NATURAL,
        parameter_names=["mean"],
        enumeration=LAZY_INFINITE,
        backend=ScipyBackend(
            family=FamilyName.POISSON,
            dist=stats.poisson,
            kind=Kind.DISCRETE,
            to_scipy=lambda mean: {"mu": mean},
        ),
    )
    ParametricFamilyRegister.register(Poisson)


def configure_discrete_families() -> None:
    configure_bernoulli_family()
    configure_binomial_family()
    configure_geometric_family()
    configure_poisson_family()


__all__ = [
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_poisson_family",
    "configure_discrete_families",
]
