# src/remixconnect/levelgen/generator.py
# Level orchestrator: word + grid size from the difficulty tables, then
# start cell -> Hamiltonian path -> letters -> walls, retried, with the snake
# path as a fallback that always succeeds.

from __future__ import annotations

import logging as log
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..config import TUNING, GeneratorTuning
from ..grid import EMPTY, Position, position_key, snake_path
from ..rng import LCGRandom
from ..words import check_difficulty, grid_for_word, word_for_level
from .hamiltonian import build_hamiltonian_path
from .letters import letter_grid, letter_order_map, place_letters
from .walls import Wall, build_walls


@dataclass
class LevelConfig:
    word: str
    grid: List[List[str]]
    start_position: Position
    difficulty: int
    grid_cols: int
    grid_rows: int
    letter_order_by_position: Dict[Position, int]
    walls: List[Wall] = field(default_factory=list)
    path: List[Position] = field(default_factory=list)

    @property
    def total_cells(self) -> int:
        return self.grid_cols * self.grid_rows

    def letter_at(self, pos: Position) -> Optional[str]:
        ch = self.grid[pos[0]][pos[1]]
        return None if ch == EMPTY else ch

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "grid": [row[:] for row in self.grid],
            "startPosition": {"row": self.start_position[0], "col": self.start_position[1]},
            "difficulty": self.difficulty,
            "gridCols": self.grid_cols,
            "gridRows": self.grid_rows,
            "letterOrderByPosition": {
                position_key(p): order for p, order in self.letter_order_by_position.items()
            },
            "walls": [{"segments": [s.to_dict() for s in w.segments]} for w in self.walls],
            "path": [[r, c] for r, c in self.path],
        }


def start_candidates(cols: int, rows: int, difficulty: int, tuning: GeneratorTuning = TUNING) -> List[Position]:
    """Corners always; edges and center cells only at higher difficulty."""
    out = [(0, 0), (0, cols - 1), (rows - 1, 0), (rows - 1, cols - 1)]
    if difficulty > tuning.edge_start_difficulty:
        for c in range(1, cols - 1):
            out.append((0, c))
            out.append((rows - 1, c))
        for r in range(1, rows - 1):
            out.append((r, 0))
            out.append((r, cols - 1))
    if difficulty > tuning.center_start_difficulty:
        cr, cc = rows // 2, cols // 2
        out.extend([(cr, cc), (cr - 1, cc), (cr, cc - 1)])
    return out


def assemble_level(
    word: str,
    cols: int,
    rows: int,
    path: Sequence[Position],
    letter_indices: Sequence[int],
    walls: List[Wall],
    difficulty: int,
) -> LevelConfig:
    g = letter_grid(cols, rows, path, word, letter_indices)
    return LevelConfig(
        word=word,
        grid=g.as_matrix(),
        start_position=path[0],
        difficulty=difficulty,
        grid_cols=cols,
        grid_rows=rows,
        letter_order_by_position=letter_order_map(path, letter_indices),
        walls=walls,
        path=list(path),
    )


class LevelGenerator:
    def __init__(self, seed: Optional[int] = None, tuning: GeneratorTuning = TUNING) -> None:
        self.rng = LCGRandom(seed)
        self.tuning = tuning

    def generate(self, difficulty: int) -> LevelConfig:
        return self.generate_with_word(word_for_level(difficulty), difficulty)

    def generate_with_word(self, word: str, difficulty: int) -> LevelConfig:
        check_difficulty(difficulty)
        if not word:
            raise ValueError("word must not be empty")
        word = word.upper()
        cols, rows = grid_for_word(word, difficulty, self.tuning.cells_per_letter)

        for attempt in range(1, self.tuning.max_attempts + 1):
            level = self._try_generate(word, cols, rows, difficulty)
            if level is not None:
                log.debug("level %d: path found on attempt %d (%dx%d)", difficulty, attempt, cols, rows)
                return level

        log.warning(
            "level %d: no Hamiltonian path in %d attempts on %dx%d, using snake path",
            difficulty, self.tuning.max_attempts, cols, rows,
        )
        return self._fallback(word, cols, rows, difficulty)

    def _try_generate(self, word: str, cols: int, rows: int, difficulty: int) -> Optional[LevelConfig]:
        start = self.rng.choice(start_candidates(cols, rows, difficulty, self.tuning))
        path = build_hamiltonian_path(cols, rows, start, self.rng, self.tuning)
        if path is None:
            log.debug("dead end from start %s", start)
            return None
        return self._finish(word, cols, rows, path, difficulty)

    def _fallback(self, word: str, cols: int, rows: int, difficulty: int) -> LevelConfig:
        return self._finish(word, cols, rows, snake_path(cols, rows), difficulty)

    def _finish(self, word: str, cols: int, rows: int, path: List[Position], difficulty: int) -> LevelConfig:
        indices = place_letters(path, word, self.rng, self.tuning)
        walls = build_walls(cols, rows, path, difficulty, self.rng, self.tuning)
        return assemble_level(word, cols, rows, path, indices, walls, difficulty)


def generate_level(difficulty: int, seed: Optional[int] = None) -> LevelConfig:
    return LevelGenerator(seed).generate(difficulty)


def generate_level_with_word(word: str, difficulty: int, seed: Optional[int] = None) -> LevelConfig:
    return LevelGenerator(seed).generate_with_word(word, difficulty)
