"""Seeded random number generator for reproducible mazes."""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed
        self._fresh = True

    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed

    @property
    def fresh(self) -> bool:
        """True until the first draw after seeding."""
        return self._fresh

    def set_seed(self, seed: Optional[int]):
        """Set a new seed."""
        self._seed = seed
        self._rng.seed(seed)
        self._fresh = True

    def shuffle(self, seq: List[T]) -> None:
        """Shuffle the list in place; every ordering is equally likely."""
        self._fresh = False
        self._rng.shuffle(seq)

    def shuffled(self, seq: Sequence[T]) -> List[T]:
        """Return a uniformly permuted copy of the sequence."""
        items = list(seq)
        self.shuffle(items)
        return items


# Global instance for convenience
default_rng = SeededRNG()


def set_global_seed(seed: Optional[int]):
    """Set the seed for the global RNG instance."""
    default_rng.set_seed(seed)


def get_global_seed() -> Optional[int]:
    """Get the seed of the global RNG instance."""
    return default_rng.seed
