from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pytest

from pysatl_variates.stats._variates import SetupCache


class TestSetupCache:
    def setup_method(self) -> None:
        self.calls: list[tuple[int, float]] = []

        def builder(key: tuple[int, float]) -> float:
            self.calls.append(key)
            return key[0] * key[1]

        self.cache: SetupCache[tuple[int, float], float] = SetupCache(builder, name="test")

    def test_builds_once_per_key(self) -> None:
        assert self.cache.get((20, 0.5)) == 10.0
        assert self.cache.get((20, 0.5)) == 10.0
        assert self.calls == [(20, 0.5)]
        assert self.cache.rebuilds == 1

    def test_rebuilds_on_key_change(self) -> None:
        self.cache.get((20, 0.5))
        assert self.cache.get((20, 0.25)) == 5.0
        assert self.cache.get((20, 0.5)) == 10.0
        assert self.cache.rebuilds == 3

    def test_key_and_validity(self) -> None:
        assert not self.cache.is_valid
        assert self.cache.key is None
        self.cache.get((3, 1.0))
        assert self.cache.is_valid
        assert self.cache.key == (3, 1.0)

    def test_invalidate_forces_rebuild(self) -> None:
        self.cache.get((3, 1.0))
        self.cache.invalidate()
        assert self.cache.key is None
        self.cache.get((3, 1.0))
        assert self.calls == [(3, 1.0), (3, 1.0)]

    def test_rebuild_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pysatl_variates.stats._variates.cache"):
            self.cache.get((1, 2.0))
            self.cache.get((1, 2.0))
        records = [r for r in caplog.records if "Rebuilt test" in r.getMessage()]
        assert len(records) == 1
