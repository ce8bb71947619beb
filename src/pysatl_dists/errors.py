"""
Typed failures raised by distribution construction and evaluation.

Every error derives from :class:`DistributionError` and from the closest
built-in exception, so callers may catch either one.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any


class DistributionError(Exception):
    """Base class for all errors raised by PySATL dists."""


class InvalidArgumentError(DistributionError, ValueError):
    """
    Construction-time argument failure.

    Parameters
    ----------
    message : str
        Human-readable description of the violated condition.
    value : Any
        The offending value.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class OutOfRangeError(DistributionError, IndexError):
    """Index outside the support ``[0, size)`` of a categorical distribution."""

    def __init__(self, index: Any, size: int) -> None:
        super().__init__(f"Index {index!r} is out of bounds for support of size {size}")
        self.index = index
        self.size = size


class UnsupportedCombinationError(DistributionError, NotImplementedError):
    """Requested combination of evaluation flags is not implemented."""

    def __init__(self, operation: str, **flags: bool) -> None:
        enabled = ", ".join(f"{name}={value}" for name, value in flags.items())
        super().__init__(f"{operation} is not implemented for {enabled}")
        self.operation = operation
        self.flags = flags


class ExhaustedSupportError(DistributionError, RuntimeError):
    """Inverse-cumulative scan ran past the last support point."""

    def __init__(self, p: float, remainder: float) -> None:
        super().__init__(
            f"Support exhausted while inverting p={p!r} (remaining mass {remainder!r})"
        )
        self.p = p
        self.remainder = remainder


class BackendError(DistributionError, ValueError):
    """Parameter or evaluation error reported by the numeric backend."""

    def __init__(self, family: str, message: str, value: Any = None) -> None:
        super().__init__(f"{family}: {message}")
        self.family = family
        self.value = value


class UnknownFamilyError(DistributionError, KeyError):
    """No family with the requested name is registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No family {self.name!r} found in register"


__all__ = [
    "DistributionError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "UnsupportedCombinationError",
    "ExhaustedSupportError",
    "BackendError",
    "UnknownFamilyError",
]
