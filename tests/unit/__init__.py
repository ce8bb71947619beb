"""
PySATL Dists unit tests
=======================

Categorical engine, guards, families, numeric backend and the public
distribution interface.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
