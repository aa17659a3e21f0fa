"""Seeded random number generator for reproducible mazes."""

import random
from typing import Optional


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed

    def set_seed(self, seed: Optional[int]):
        """Set a new seed."""
        self._seed = seed
        self._rng.seed(seed)

    def random(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self._rng.random()

    def randrange(self, stop: int) -> int:
        """Generate a random integer N such that 0 <= N < stop."""
        return self._rng.randrange(stop)

    def shuffle(self, seq) -> None:
        """Shuffle the sequence in place."""
        self._rng.shuffle(seq)


# Global instance for convenience
default_rng = SeededRNG()


def resolve_rng(rng: Optional[SeededRNG] = None, seed: Optional[int] = None) -> SeededRNG:
    """
    Pick the generator an operation should draw from.

    An explicit ``rng`` wins, then a fresh generator for ``seed``,
    then the shared ``default_rng``.
    """
    if rng is not None:
        return rng
    if seed is not None:
        return SeededRNG(seed)
    return default_rng
