import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        """Uniform integer in [0, stop)."""

    def random(self) -> float:
        """Uniform float in [0.0, 1.0)."""


def get_rng(seed: Optional[int] = None) -> random.Random:
    """Same seed always produces the same draw order."""
    return random.Random(seed)
