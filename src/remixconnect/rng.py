# src/remixconnect/rng.py
# Seedable linear-congruential generator shared by every generator stage.

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

A = 1103515245
C = 12345
M = 0x80000000  # 2^31


def lcg_next(state: int) -> int:
    return (state * A + C) % M


@dataclass
class LCGRandom:
    """
    Floats in [0, 1) from state = (state * A + C) mod M, result = state / M.
    With seed=None the stream comes from the process-wide `random` module
    and is not reproducible.
    """
    seed: Optional[int] = None
    state: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.seed is not None:
            self.state = self.seed % M

    @property
    def seeded(self) -> bool:
        return self.seed is not None

    def random(self) -> float:
        if self.seed is None:
            return random.random()
        self.state = lcg_next(self.state)
        return self.state / M

    def below(self, n: int) -> int:
        """Integer in 0..n-1."""
        assert n > 0
        return int(self.random() * n)

    def chance(self, p: float) -> bool:
        return self.random() < p

    def choice(self, items: Sequence[T]) -> T:
        return items[self.below(len(items))]

    def shuffle(self, items: List[T]) -> None:
        # Fisher-Yates, high index down.
        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]
