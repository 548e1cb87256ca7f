"""
rng.py
======

Does: Randomness collaborator for palette queries: pick one item, or return a
      shuffled copy. SeededRandom wraps `random.Random`; tests inject their own
      RandomSource for deterministic output.
"""

from __future__ import annotations

import random
from typing import Any, Protocol, Sequence, TypeVar, Union

__all__ = ["RandomSource", "SeededRandom"]

T = TypeVar("T")
Seed = Union[int, float, str, bytes, None]


class RandomSource(Protocol):
    def pick(self, items: Sequence[T]) -> T: ...

    def shuffle(self, items: Sequence[T]) -> list[T]: ...


class SeededRandom:
    """Does: Default RandomSource backed by a private `random.Random`."""

    def __init__(self, seed: Seed = None) -> None:
        self._random = random.Random(seed)
        self.seed = seed

    def pick(self, items: Sequence[Any]) -> Any:
        return self._random.choice(items)

    def shuffle(self, items: Sequence[Any]) -> list[Any]:
        return self._random.sample(list(items), len(items))

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"
