# src/remixconnect/engine/session.py
# Cross-level session: score, perfect streak, level progression, game over.
# All session memory lives in an explicit SessionState handed in by the host.

from __future__ import annotations

import logging as log
import math
from dataclasses import dataclass
from typing import Optional

from ..levelgen.generator import LevelConfig, LevelGenerator
from .path_state import MoveResult, PathState
from .platform import PlatformBridge
from .timing import LevelClock

BASE_POINTS = 100
STREAK_STEP = 0.25


def streak_multiplier(perfect_streak: int, perfect: bool) -> float:
    if perfect and perfect_streak >= 2:
        return 1 + (perfect_streak - 1) * STREAK_STEP
    return 1.0


def points_for_win(remaining: float, max_time: float, perfect_streak: int, perfect: bool) -> int:
    """100 x (1 + time left fraction) x streak bonus, rounded half up."""
    time_mult = 1 + (remaining / max_time if max_time > 0 else 0.0)
    raw = BASE_POINTS * time_mult * streak_multiplier(perfect_streak, perfect)
    return int(math.floor(raw + 0.5))


@dataclass
class SessionState:
    level: int = 1
    score: int = 0
    perfect_streak: int = 0
    tutorial_completed: bool = False
    muted: bool = False

    def to_dict(self) -> dict:
        return {"score": self.score, "level": self.level, "tutorialCompleted": self.tutorial_completed}

    @classmethod
    def from_dict(cls, blob: Optional[dict]) -> "SessionState":
        blob = blob or {}
        level = int(blob.get("level", 1))
        if level < 1:
            raise ValueError(f"saved level must be >= 1, got {level}")
        return cls(
            level=level,
            score=max(0, int(blob.get("score", 0))),
            tutorial_completed=blob.get("tutorialCompleted") is True,
        )


class GameSession:
    def __init__(
        self,
        state: Optional[SessionState] = None,
        platform: Optional[PlatformBridge] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.state = state or SessionState()
        self.platform = platform or PlatformBridge()
        self.seed = seed

        self.level: Optional[LevelConfig] = None
        self.path: Optional[PathState] = None
        self.clock: Optional[LevelClock] = None
        self.paused = False
        self.game_over = False
        self.last_points = 0
        self.start_level()

    # ---- lifecycle ----
    def start_level(self, level: Optional[int] = None) -> LevelConfig:
        if level is not None:
            self.state.level = level
        self.level = LevelGenerator(self.seed).generate(self.state.level)
        self.path = PathState(self.level)
        self.clock = LevelClock.for_level(self.state.level)
        self.game_over = False
        self.last_points = 0
        # Tutorial gate only on the first level of a fresh player.
        self.paused = self.state.level == 1 and not self.state.tutorial_completed
        log.info(
            "level %d: %r on %dx%d, %d walls",
            self.state.level, self.level.word, self.level.grid_cols, self.level.grid_rows, len(self.level.walls),
        )
        return self.level

    def complete_tutorial(self) -> None:
        self.paused = False
        if not self.state.tutorial_completed:
            self.state.tutorial_completed = True
            self.platform.persist({"tutorialCompleted": True})

    def advance(self) -> Optional[LevelConfig]:
        """Start the next level, carrying the score. Only a won level advances."""
        if not self.won:
            return None
        level = self.start_level(self.state.level + 1)
        self.platform.persist(self.snapshot())
        return level

    def snapshot(self) -> dict:
        return self.state.to_dict()

    def set_muted(self, muted: bool) -> None:
        # Sound preference survives level changes but is not persisted.
        self.state.muted = bool(muted)
        log.debug("sound %s", "muted" if self.state.muted else "on")

    def play_again(self) -> LevelConfig:
        self.state.perfect_streak = 0
        self.state.score = 0
        return self.start_level(1)

    # ---- per-frame ----
    @property
    def won(self) -> bool:
        return self.path is not None and self.path.won

    @property
    def accepting_input(self) -> bool:
        return not (self.paused or self.game_over or self.won)

    def tick(self, seconds: float) -> None:
        if self.paused or self.game_over or self.won:
            return
        if self.clock.tick(seconds):
            self.end_game()

    def end_game(self) -> None:
        if self.game_over:
            return
        self.game_over = True
        final = max(1, self.state.score)
        log.info("game over at level %d, score %d", self.state.level, final)
        self.platform.report_score(final)

    # ---- input ----
    def _after_move(self, result: MoveResult) -> MoveResult:
        if result is MoveResult.ACCEPTED and self.path.won:
            self._on_win()
        return result

    def press(self, pos) -> MoveResult:
        if not self.accepting_input:
            return MoveResult.IGNORED
        return self._after_move(self.path.press(pos))

    def move_to(self, pos) -> MoveResult:
        if not self.accepting_input:
            return MoveResult.IGNORED
        return self._after_move(self.path.move_to(pos))

    def reset_board(self) -> bool:
        if not self.accepting_input:
            return False
        return self.path.reset()

    def _on_win(self) -> None:
        self.clock.stop()
        perfect = not self.path.used_undo
        self.state.perfect_streak = self.state.perfect_streak + 1 if perfect else 0
        self.last_points = points_for_win(
            self.clock.remaining, self.clock.max_time, self.state.perfect_streak, perfect
        )
        self.state.score += self.last_points
        log.info(
            "level %d won: +%d (streak %d), score %d",
            self.state.level, self.last_points, self.state.perfect_streak, self.state.score,
        )
