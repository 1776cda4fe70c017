# src/remixconnect/engine/timing.py
# Per-level countdown. The runner feeds elapsed seconds; nothing here sleeps.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..words import difficulty_tier

BASE_LEVEL_SECONDS = 20
SECONDS_PER_TIER = 3
LATE_LEVEL_SECONDS = 32   # levels 10..11
FINAL_LEVEL_SECONDS = 40  # level 12+


def level_time_for(difficulty: int) -> int:
    if difficulty >= 12:
        return FINAL_LEVEL_SECONDS
    if difficulty >= 10:
        return LATE_LEVEL_SECONDS
    return BASE_LEVEL_SECONDS + difficulty_tier(difficulty) * SECONDS_PER_TIER


@dataclass
class LevelClock:
    max_time: float
    remaining: Optional[float] = None
    stopped: bool = False

    def __post_init__(self) -> None:
        if self.remaining is None:
            self.remaining = self.max_time

    @classmethod
    def for_level(cls, difficulty: int) -> "LevelClock":
        return cls(max_time=float(level_time_for(difficulty)))

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    @property
    def fraction_left(self) -> float:
        return self.remaining / self.max_time if self.max_time > 0 else 0.0

    def stop(self) -> None:
        self.stopped = True

    def tick(self, seconds: float) -> bool:
        """Advance; returns True on the tick that runs the clock out."""
        if self.stopped or self.expired:
            return False
        self.remaining = max(0.0, self.remaining - seconds)
        return self.expired
