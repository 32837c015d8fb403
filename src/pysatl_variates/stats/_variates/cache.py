"""
Setup Cache
===========

Memoization of per-parameter setup constants of a sampler.

A :class:`SetupCache` remembers the parameter snapshot its value was built
from and rebuilds on any mismatch. Samplers therefore stay correct when a
caller reassigns their parameters between draws.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

logger = logging.getLogger(__name__)


class SetupCache[K: Hashable, V]:
    """
    Value derived from a parameter snapshot, rebuilt when the snapshot changes.

    Parameters
    ----------
    builder : Callable[[K], V]
        Function computing the setup value from a snapshot.
    name : str, optional
        Label used in log records.

    Attributes
    ----------
    rebuilds : int
        Number of times the value has been (re)computed.
    """

    __slots__ = ("_builder", "_name", "_key", "_value", "_valid", "rebuilds")

    def __init__(self, builder: Callable[[K], V], name: str = "setup") -> None:
        self._builder = builder
        self._name = name
        self._key: K | None = None
        self._value: V | None = None
        self._valid = False
        self.rebuilds = 0

    def get(self, key: K) -> V:
        """
        Return the value for ``key``, rebuilding it if the snapshot differs.

        Parameters
        ----------
        key : K
            Snapshot of the parameters the value depends on.
        """
        if not self._valid or self._key != key:
            self._value = self._builder(key)
            self._key = key
            self._valid = True
            self.rebuilds += 1
            logger.debug("Rebuilt %s for parameters %r", self._name, key)
        return self._value  # type: ignore[return-value]

    def invalidate(self) -> None:
        """Drop the cached value."""
        self._key = None
        self._value = None
        self._valid = False

    @property
    def key(self) -> K | None:
        """Snapshot the current value was built from (``None`` if empty)."""
        return self._key if self._valid else None

    @property
    def is_valid(self) -> bool:
        return self._valid
