"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import List, Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Seeded source of randomness for market offers and discounts.

    Battle resolution never draws from it.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._random = Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def sample(self, seq: Sequence[T_co], count: int) -> List[T_co]:
        """Return up to ``count`` distinct elements in random order."""
        if count <= 0 or not seq:
            return []
        pool = list(seq)
        self._random.shuffle(pool)
        return pool[:count]
