from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_dists import categorical_engine as engine
from pysatl_dists.errors import (
    ExhaustedSupportError,
    OutOfRangeError,
    UnsupportedCombinationError,
)
from tests.unit.base import BaseDistributionTest


class TestConvertP:
    @pytest.mark.parametrize(
        "p, log, complement, expected",
        [
            (0.25, False, False, 0.25),
            (0.25, False, True, 0.75),
            (0.25, True, False, math.log(0.25)),
            (0.25, True, True, math.log(0.75)),
        ],
        ids=["linear", "complement", "log", "log_complement"],
    )
    def test_transforms(self, p, log, complement, expected) -> None:
        assert engine.convert_p(p, log=log, complement=complement) == pytest.approx(expected)

    def test_log_of_zero_is_minus_infinity(self) -> None:
        assert engine.convert_p(1.0, log=True, complement=True) == -math.inf


class TestCategoricalEngine(BaseDistributionTest):
    probs = np.array([0.25, 0.25, 0.5])

    def test_pdf_returns_weight(self) -> None:
        assert engine.pdf(self.probs, 0) == 0.25
        assert engine.pdf(self.probs, 2) == 0.5

    def test_pdf_log(self) -> None:
        for k in range(3):
            assert engine.pdf(self.probs, k, log=True) == pytest.approx(math.log(self.probs[k]))

    @pytest.mark.parametrize("k", [-1, 3, 10, 1.5, "1", True, False])
    def test_pdf_out_of_range(self, k) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            engine.pdf(self.probs, k)
        assert exc_info.value.index == k
        assert exc_info.value.size == 3

    def test_integral_float_index_is_accepted(self) -> None:
        assert engine.pdf(self.probs, 2.0) == 0.5
        assert engine.pdf(self.probs, np.int64(1)) == 0.25

    def test_cdf_inclusive_prefix_sum(self) -> None:
        assert engine.cdf(self.probs, 0) == pytest.approx(0.25)
        assert engine.cdf(self.probs, 1) == pytest.approx(0.5)
        assert engine.cdf(self.probs, 2) == pytest.approx(1.0)

    def test_cdf_complement_and_log(self) -> None:
        assert engine.cdf(self.probs, 0, complement=True) == pytest.approx(0.75)
        assert engine.cdf(self.probs, 1, log=True) == pytest.approx(math.log(0.5))
        assert engine.cdf(self.probs, 2, log=True, complement=True) == -math.inf

    def test_cdf_clamped_to_one(self) -> None:
        probs = np.array([0.5, 0.5000000000000002])
        assert math.fsum(probs) > 1.0
        assert engine.cdf(probs, 1) == 1.0
        assert engine.cdf(probs, 1, complement=True) == 0.0
        assert engine.cdf(probs, 1, log=True, complement=True) == -math.inf

    def test_cdf_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            engine.cdf(self.probs, 3)
        with pytest.raises(IndexError):
            engine.cdf(self.probs, -1)

    @pytest.mark.parametrize(
        "p, expected",
        [(0.0, 0), (0.1, 0), (0.25, 1), (0.49, 1), (0.5, 2), (0.999, 2)],
    )
    def test_inv_cdf_linear_scan(self, p, expected) -> None:
        assert engine.inv_cdf(self.probs, p) == expected

    def test_inv_cdf_skips_zero_weights(self) -> None:
        probs = np.array([0.0, 0.5, 0.0, 0.5])
        assert engine.inv_cdf(probs, 0.0) == 1
        assert engine.inv_cdf(probs, 0.5) == 3

    @pytest.mark.parametrize("flags", [{"log": True}, {"complement": True}])
    def test_inv_cdf_unsupported_flags(self, flags) -> None:
        with pytest.raises(UnsupportedCombinationError):
            engine.inv_cdf(self.probs, 0.5, **flags)
        with pytest.raises(NotImplementedError):
            engine.inv_cdf(self.probs, 0.5, **flags)

    @pytest.mark.parametrize("p", [1.0, 1.5])
    def test_inv_cdf_exhausted_support(self, p) -> None:
        with pytest.raises(ExhaustedSupportError) as exc_info:
            engine.inv_cdf(self.probs, p)
        assert exc_info.value.p == p

    def test_sample_inverts_uniform_draw(self) -> None:
        seed = 7
        u = np.random.default_rng(seed).random()
        expected = engine.inv_cdf(self.probs, u)
        assert engine.sample(self.probs, np.random.default_rng(seed)) == expected

    def test_sample_stays_in_support(self, rng) -> None:
        draws = {engine.sample(self.probs, rng) for _ in range(500)}
        assert draws <= {0, 1, 2}
