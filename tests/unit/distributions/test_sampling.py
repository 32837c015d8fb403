from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_variates.distributions.sampling import ArraySample
from tests.unit.distributions.test_basic import DistributionTestBase


class TestSampling(DistributionTestBase):
    def test_sample_uniform_shape_bounds_and_mean(self) -> None:
        distr = self.make_uniform_distribution()

        n = 1000
        sample = distr.sample(n, seed=0)

        assert sample.shape == (n, 1)
        arr = sample.array
        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr <= 1.0)).all()

        mean = float(arr.mean())
        assert mean == pytest.approx(0.5, abs=0.1)


class TestArraySample:
    def test_from_draws_is_column(self) -> None:
        sample = ArraySample.from_draws([1.0, 2.0, 3.0])
        assert sample.shape == (3, 1)
        assert len(sample) == 3
        np.testing.assert_array_equal(sample.values, [1.0, 2.0, 3.0])

    def test_rows_iteration(self) -> None:
        sample = ArraySample(np.arange(6, dtype=float).reshape(3, 2))
        rows = list(sample)
        assert len(rows) == 3
        np.testing.assert_array_equal(rows[1], [2.0, 3.0])

    def test_requires_2d(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))

    def test_values_requires_univariate(self) -> None:
        with pytest.raises(ValueError, match="univariate"):
            _ = ArraySample(np.zeros((2, 2))).values
