from __future__ import annotations

import itertools
from typing import Iterable

import pytest

from secretgen.secure_random import SecureRandom


class ScriptedRandom(SecureRandom):
    """SecureRandom stand-in that returns preset values (modulo the bound)."""

    def __init__(self, values: Iterable[int], cycle: bool = False) -> None:
        super().__init__()
        self._values = itertools.cycle(values) if cycle else iter(values)
        self.calls: list[int] = []

    def next_below(self, maximum: int) -> int:
        if maximum <= 0:
            raise ValueError(f"maximum must be positive, got {maximum}")
        self.calls.append(maximum)
        try:
            value = next(self._values)
        except StopIteration:
            raise AssertionError("scripted random values exhausted") from None
        return value % maximum


@pytest.fixture
def scripted():
    """Factory: scripted(values, cycle=False) -> ScriptedRandom."""
    return ScriptedRandom


@pytest.fixture
def zeros():
    """Random source that always draws index 0."""
    return ScriptedRandom([0], cycle=True)
