from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from math import inf

import numpy as np
import pytest

from pysatl_variates.distributions.support import (
    ContinuousSupport,
    IntegerIntervalSupport,
    Support,
)
from pysatl_variates.types import ContinuousSupportShape1D


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_continuous_support_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_continuous_support_doesnt_contain_inf(self, infinity):
        support = ContinuousSupport()
        assert infinity not in support
        assert support.contains(infinity) is False

    @pytest.mark.parametrize(
        "points,expected_result",
        [
            (np.array([-1.0, 0.0, 0.5, 1.0]), [False, True, True, False]),
            (np.array([]), []),
        ],
    )
    def test_continuous_support_contains_array(self, points, expected_result):
        result = self.support_example.contains(points)
        assert isinstance(result, np.ndarray)
        assert result.tolist() == expected_result

    @pytest.mark.parametrize(
        "support, expected_shape",
        [
            (ContinuousSupport(1, 0), ContinuousSupportShape1D.EMPTY),
            (ContinuousSupport(0, 1), ContinuousSupportShape1D.BOUNDED_INTERVAL),
            (ContinuousSupport(left=0), ContinuousSupportShape1D.RAY_RIGHT),
            (ContinuousSupport(right=0), ContinuousSupportShape1D.RAY_LEFT),
            (ContinuousSupport(), ContinuousSupportShape1D.REAL_LINE),
            (ContinuousSupport(1, 1), ContinuousSupportShape1D.SINGLE_POINT),
        ],
        ids=["empty", "bounded", "ray_right", "ray_left", "real_line", "single_point"],
    )
    def test_continuous_support_is_empty_and_shape_variants(self, support, expected_shape):
        assert support.shape == expected_shape

    def test_inf_bound_is_not_closed(self):
        assert ContinuousSupport().left_closed is False
        assert ContinuousSupport().right_closed is False

    def test_is_support(self):
        assert isinstance(self.support_example, Support)


class TestIntegerIntervalSupport:
    bounded = IntegerIntervalSupport(0, 5)
    unbounded = IntegerIntervalSupport(1)

    @pytest.mark.parametrize(
        "point, expected_result",
        [(0, True), (5, True), (3.0, True), (2.5, False), (-1, False), (6, False)],
    )
    def test_contains_scalar(self, point, expected_result):
        assert self.bounded.contains(point) is expected_result
        assert (point in self.bounded) is expected_result

    def test_contains_array(self):
        result = self.unbounded.contains(np.array([0, 1, 1.5, 10**9, inf]))
        assert result.tolist() == [False, True, False, True, False]

    def test_length_and_iteration(self):
        assert len(self.bounded) == 6
        assert list(self.bounded) == [0, 1, 2, 3, 4, 5]
        assert self.bounded.is_bounded
        assert len(IntegerIntervalSupport(3, 2)) == 0

    def test_unbounded_support(self):
        assert not self.unbounded.is_bounded
        assert list(islice(self.unbounded.iter_points(), 3)) == [1, 2, 3]
        with pytest.raises(TypeError, match="no length"):
            len(self.unbounded)
