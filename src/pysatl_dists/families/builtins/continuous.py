"""
Real-valued distribution families.

Contains the Beta, Cauchy, Exponential, Gamma, Logistic, Normal and Uniform
families. None of them is enumerable; all are evaluated by the SciPy numeric
backend.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from scipy import stats

from pysatl_dists.backend import ScipyBackend
from pysatl_dists.families.parametric_family import ParametricFamily
from pysatl_dists.families.registry import ParametricFamilyRegister
from pysatl_dists.types import NOT_ENUMERABLE, Domain, FamilyName, Kind

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

NORMAL_DOC = """
Normal (Gaussian) distribution.

Parameters are the mean and the standard deviation:
    f(x) = 1 / (stddev * sqrt(2π)) * exp(-(x - mean)² / (2 * stddev²))
"""

EXPONENTIAL_DOC = """
Exponential distribution.

Parameterized by its mean (the scale, i.e. the inverse of the rate):
    f(x) = exp(-x / mean) / mean for x ≥ 0
"""


def _configure(
    name: FamilyName,
    parameter_names: list[str],
    dist: Any,
    to_scipy: Callable[..., dict[str, float]],
    doc: str | None = None,
) -> None:
    if ParametricFamilyRegister.contains(name):
        return

    family = ParametricFamily(
        name=name,
        domain=Domain.REAL,
        parameter_names=parameter_names,
        enumeration=NOT_ENUMERABLE,
        backend=ScipyBackend(family=name, dist=dist, kind=Kind.CONTINUOUS, to_scipy=to_scipy),
    )
    if doc is not None:
        family.__doc__ = doc
    ParametricFamilyRegister.register(family)


def configure_beta_family() -> None:
    _configure(FamilyName.BETA, ["a", "b"], stats.beta, lambda a, b: {"a": a, "b": b})


def configure_cauchy_family() -> None:
    _configure(
        FamilyName.CAUCHY,
        ["mode", "scale"],
        stats.cauchy,
        lambda mode, scale: {"loc": mode, "scale": scale},
    )


def configure_exponential_family() -> None:
    _configure(
        FamilyName.EXPONENTIAL,
        ["mean"],
        stats.expon,
        lambda mean: {"scale": mean},
        doc=EXPONENTIAL_DOC,
    )


def configure_gamma_family() -> None:
    _configure(
        FamilyName.GAMMA,
        ["shape", "scale"],
        stats.gamma,
        lambda shape, scale: {"a": shape, "scale": scale},
    )


def configure_logistic_family() -> None:
    _configure(
        FamilyName.LOGISTIC,
        ["mean", "scale"],
        stats.logistic,
        lambda mean, scale: {"loc": mean, "scale": scale},
    )


def configure_normal_family() -> None:
    _configure(
        FamilyName.NORMAL,
        ["mean", "stddev"],
        stats.norm,
        lambda mean, stddev: {"loc": mean, "scale": stddev},
        doc=NORMAL_DOC,
    )


def configure_uniform_family() -> None:
    """Uniform on ``[min, max]``; scipy takes ``loc=min`` and ``scale=max - min``."""
    _configure(
        FamilyName.UNIFORM,
        ["min", "max"],
        stats.uniform,
        lambda lo, hi: {"loc": lo, "scale": hi - lo},
    )


def configure_continuous_families() -> None:
    configure_beta_family()
    configure_cauchy_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_logistic_family()
    configure_normal_family()
    configure_uniform_family()


__all__ = [
    "configure_beta_family",
    "configure_cauchy_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_logistic_family",
    "configure_normal_family",
    "configure_uniform_family",
    "configure_continuous_families",
]
