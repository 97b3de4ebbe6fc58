"""
Injectable randomness.

Blank selection and option shuffling draw from a RandomSource so tests can
script exact sequences. Production code uses SeededRandom.
"""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

from memoria.config import get_settings

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1)."""

    def next_float(self) -> float:
        ...


class SeededRandom:
    """RandomSource backed by ``random.Random``."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def next_float(self) -> float:
        return self._rng.random()


def default_random() -> SeededRandom:
    """Build a source seeded from settings (OS entropy when unset)."""
    return SeededRandom(get_settings().random_seed)


def pick_index(rng: RandomSource, size: int) -> int:
    """Uniform index in [0, size)."""
    index = int(rng.next_float() * size)
    # Guard against sources that return exactly 1.0
    return min(index, size - 1)


def shuffled(items: Sequence[T], rng: RandomSource) -> list[T]:
    """Return a uniformly shuffled copy (Fisher-Yates)."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = pick_index(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result
