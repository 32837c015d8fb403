from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_variates.errors import SourceExhaustedError
from pysatl_variates.stats._variates import (
    NumpyUniformSource,
    SequenceUniformSource,
    UniformSource,
)


class TestNumpyUniformSource:
    def test_values_in_unit_interval(self) -> None:
        source = NumpyUniformSource(seed=1, buffer_size=16)
        values = [source.next() for _ in range(100)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_same_seed_same_stream(self) -> None:
        a = NumpyUniformSource(seed=123)
        b = NumpyUniformSource(seed=123)
        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_stream_matches_generator_random(self) -> None:
        source = NumpyUniformSource(seed=7, buffer_size=8)
        expected = np.random.default_rng(7).random(8).tolist()
        assert [source.next() for _ in range(8)] == expected

    def test_accepts_existing_generator(self) -> None:
        rng = np.random.default_rng(5)
        source = NumpyUniformSource(rng)
        assert source.generator is rng

    def test_invalid_buffer_size(self) -> None:
        with pytest.raises(ValueError, match="buffer_size"):
            NumpyUniformSource(buffer_size=0)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(NumpyUniformSource(), UniformSource)


class TestSequenceUniformSource:
    def test_replays_values_in_order(self) -> None:
        source = SequenceUniformSource([0.1, 0.2, 0.3])
        assert [source.next(), source.next()] == [0.1, 0.2]
        assert source.consumed == 2
        assert source.remaining == 1

    def test_exhaustion(self) -> None:
        source = SequenceUniformSource([0.5])
        source.next()
        with pytest.raises(SourceExhaustedError, match="exhausted after 1"):
            source.next()

    def test_satisfies_protocol(self) -> None:
        assert isinstance(SequenceUniformSource([]), UniformSource)
