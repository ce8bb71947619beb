"""
Validated parameter records of distributions.

This module provides the immutable container holding a distribution's coerced
parameters, and the binding of constructor arguments to a family's declared
parameter names.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from typing import Any

    from pysatl_dists.types import ParameterName, ParameterValues


@dataclass(frozen=True, slots=True, eq=False)
class Parametrization:
    """
    Ordered, coerced parameter values of a distribution.

    Parameters
    ----------
    names : tuple[ParameterName, ...]
        Declared parameter names of the family.
    values : ParameterValues
        Values produced by the family's guard, in declaration order.
    """

    names: tuple[ParameterName, ...]
    values: ParameterValues

    def __post_init__(self) -> None:
        if len(self.names) != len(self.values):
            raise ValueError(
                f"Expected {len(self.names)} parameter values, got {len(self.values)}"
            )

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return dict(zip(self.names, self.values, strict=True))

    def __getitem__(self, name: str) -> Any:
        try:
            return self.values[self.names.index(name)]
        except ValueError:
            raise KeyError(name) from None

    def __repr__(self) -> str:
        body = ", ".join(f"{n}={v!r}" for n, v in zip(self.names, self.values, strict=True))
        return f"{type(self).__name__}({body})"


def bind_arguments(
    family: str,
    names: Sequence[ParameterName],
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> dict[str, Any]:
    """
    Bind positional and keyword arguments to declared parameter names.

    Raises
    ------
    TypeError
        On too many, duplicated, unexpected or missing arguments, mirroring a
        regular Python call.
    """
    if len(args) > len(names):
        raise TypeError(
            f"{family}() takes {len(names)} parameters but {len(args)} were given"
        )
    bound = dict(zip(names, args, strict=False))
    for key, value in kwargs.items():
        if key not in names:
            raise TypeError(f"{family}() got an unexpected parameter '{key}'")
        if key in bound:
            raise TypeError(f"{family}() got multiple values for parameter '{key}'")
        bound[key] = value

    missing = [n for n in names if n not in bound]
    if missing:
        raise TypeError(f"{family}() missing required parameters: {', '.join(missing)}")
    return bound


__all__ = ["Parametrization", "bind_arguments"]
