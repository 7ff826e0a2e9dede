"""Seeded pseudo-random source used for reproducible deals."""

from __future__ import annotations

import random

from .rules import Ruleset

MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280


class SeededRandom:
    """Linear congruential generator.

    Two instances built from the same seed emit identical streams; build a new
    instance to restart a stream.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._x = seed

    def random(self) -> float:
        self._x = (self._x * MULTIPLIER + INCREMENT) % MODULUS
        return self._x / MODULUS

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        return int(self.random() * n)


def choose_seed(ruleset: Ruleset | None = None) -> int:
    ruleset = ruleset or Ruleset()
    return random.randrange(ruleset.max_seed)
