"""Shared fixtures."""

from itertools import cycle

import pytest


class FixedRandom:
    """Stand-in for ``numpy.random.Generator`` returning fixed values.

    ``uniform`` returns the point at ``fraction`` of the requested range, so
    the default gives zero lap-time noise and a 23 s pit stop. ``integers``
    cycles through ``integers`` (or returns ``low`` if none were given).
    """

    def __init__(self, fraction: float = 0.5, integers: list[int] | None = None):
        self.fraction = fraction
        self._integers = cycle(integers) if integers else None

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        return low + (high - low) * self.fraction

    def integers(self, low: int, high: int | None = None) -> int:
        if self._integers is None:
            return low if high is not None else 0
        return next(self._integers)


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def make_rng():
    return FixedRandom
