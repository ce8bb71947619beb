from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from math import inf, nan

import numpy as np
import pytest

from pysatl_dists.support import ContinuousSupport, IntegerLatticeSupport, Support


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, True),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (nan, False),
        ],
        ids=["left_bound", "right_bound", "inside_interval", "outside_interval", "+inf", "nan"],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_real_line_does_not_contain_infinity(self, infinity):
        assert infinity not in ContinuousSupport()

    def test_contains_array(self):
        mask = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 2.0]))
        np.testing.assert_array_equal(mask, [False, True, True, False])

    def test_is_support(self):
        assert isinstance(self.support_example, Support)


class TestIntegerLatticeSupport:
    def test_bounded(self):
        support = IntegerLatticeSupport(min_k=2, max_k=5)
        assert support.is_finite
        assert support.size == 4
        assert list(support) == [2, 3, 4, 5]
        assert 2 in support
        assert 6 not in support
        assert 2.5 not in support

    def test_empty_range(self):
        support = IntegerLatticeSupport(min_k=3, max_k=2)
        assert support.size == 0
        assert list(support) == []

    def test_unbounded(self):
        support = IntegerLatticeSupport()
        assert not support.is_finite
        assert support.size is None
        assert list(islice(support, 4)) == [0, 1, 2, 3]
        assert 10**6 in support
        assert -1 not in support
        assert inf not in support

    def test_contains_array(self):
        support = IntegerLatticeSupport(max_k=3)
        mask = support.contains(np.array([-1.0, 0.0, 1.5, 3.0, 4.0]))
        np.testing.assert_array_equal(mask, [False, True, False, True, False])

    def test_integral_float_is_contained(self):
        assert IntegerLatticeSupport(max_k=3).contains(2.0) is True
