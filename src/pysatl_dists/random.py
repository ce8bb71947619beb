"""
Process-wide random source.

Sampling reads from a :class:`numpy.random.Generator`. One generator is kept
per thread so that concurrent sampling never shares generator state; every
sampling operation also accepts an explicit generator which takes precedence.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import numpy as np

_local = threading.local()


def get_generator() -> np.random.Generator:
    """
    Return the generator of the calling thread, creating it on first use.

    Returns
    -------
    numpy.random.Generator
        Thread-local generator.
    """
    gen: np.random.Generator | None = getattr(_local, "generator", None)
    if gen is None:
        gen = np.random.default_rng()
        _local.generator = gen
    return gen


def set_generator(generator: np.random.Generator) -> None:
    """Install ``generator`` as the random source of the calling thread."""
    _local.generator = generator


def seed(value: int | None) -> np.random.Generator:
    """
    Reseed the random source of the calling thread.

    Parameters
    ----------
    value : int or None
        Seed passed to :func:`numpy.random.default_rng`.

    Returns
    -------
    numpy.random.Generator
        The freshly installed generator.
    """
    gen = np.random.default_rng(value)
    _local.generator = gen
    return gen


def resolve(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` if given, otherwise the thread-local generator."""
    return get_generator() if rng is None else rng


__all__ = ["get_generator", "set_generator", "seed", "resolve"]
