# src/remixconnect/engine/path_state.py
# Play-time path tracking: the player's connected chain of cells, letter order,
# wall blocking and the win check. Cells are flat row-major indices.

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Set

from ..grid import Edge, Position, edge_key, is_orthogonal
from ..levelgen.generator import LevelConfig
from ..levelgen.walls import blocked_edges


class MoveResult(Enum):
    ACCEPTED = "accepted"
    UNDONE = "undone"
    IGNORED = "ignored"
    NOT_ADJACENT = "not_adjacent"
    BLOCKED_BY_WALL = "blocked_by_wall"
    WRONG_ORDER = "wrong_order"
    PREMATURE_FINISH = "premature_finish"
    ALREADY_WON = "already_won"

    @property
    def rejected(self) -> bool:
        return self in (
            MoveResult.NOT_ADJACENT,
            MoveResult.BLOCKED_BY_WALL,
            MoveResult.WRONG_ORDER,
            MoveResult.PREMATURE_FINISH,
        )


class PathState:
    def __init__(self, config: LevelConfig) -> None:
        self.config = config
        self.cols = config.grid_cols
        self.rows = config.grid_rows
        self.total_cells = config.total_cells
        self.blocked: Set[Edge] = blocked_edges(config.walls)

        # Arena: letter order per cell index (0 = plain cell)
        self._order: List[int] = [0] * self.total_cells
        for pos, order in config.letter_order_by_position.items():
            self._order[self._idx(pos)] = order

        self.connected: List[bool] = [False] * self.total_cells
        self.path: List[int] = []
        self.next_expected_letter = 1
        self.won = False
        self.used_undo = False

        self._connect(self._idx(config.start_position))

    # ---- index helpers ----
    def _idx(self, pos: Position) -> int:
        return pos[0] * self.cols + pos[1]

    def _pos(self, idx: int) -> Position:
        return divmod(idx, self.cols)

    def _in_grid(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.rows and 0 <= pos[1] < self.cols

    # ---- read-only views ----
    @property
    def cells(self) -> List[Position]:
        return [self._pos(i) for i in self.path]

    @property
    def current(self) -> Position:
        return self._pos(self.path[-1])

    @property
    def predecessor(self) -> Optional[Position]:
        return self._pos(self.path[-2]) if len(self.path) >= 2 else None

    @property
    def connected_count(self) -> int:
        return len(self.path)

    @property
    def letters_lit(self) -> int:
        return self.next_expected_letter - 1

    def is_connected(self, pos: Position) -> bool:
        return self.connected[self._idx(pos)]

    def letter_order(self, pos: Position) -> int:
        return self._order[self._idx(pos)]

    def is_adjacent(self, a: Position, b: Position) -> bool:
        return is_orthogonal(a, b) and edge_key(a, b) not in self.blocked

    # ---- mutations ----
    def _connect(self, idx: int) -> None:
        self.connected[idx] = True
        self.path.append(idx)

    def activate(self, pos: Position) -> MoveResult:
        """Extend the path to `pos` if every move rule allows it."""
        if self.won:
            return MoveResult.ALREADY_WON
        if not self._in_grid(pos):
            return MoveResult.NOT_ADJACENT
        idx = self._idx(pos)
        if self.connected[idx]:
            return MoveResult.IGNORED

        cur = self.current
        if not is_orthogonal(cur, pos):
            return MoveResult.NOT_ADJACENT
        if edge_key(cur, pos) in self.blocked:
            return MoveResult.BLOCKED_BY_WALL

        order = self._order[idx]
        if order:
            if order != self.next_expected_letter:
                return MoveResult.WRONG_ORDER
            # The final letter may only close a path that covers every cell.
            if order == len(self.config.word) and len(self.path) + 1 < self.total_cells:
                return MoveResult.PREMATURE_FINISH
            self.next_expected_letter += 1

        self._connect(idx)
        self.won = self.check_win()
        return MoveResult.ACCEPTED

    def deactivate(self, pos: Position) -> MoveResult:
        """Undo the last step; only the path tail can be removed, never the start."""
        if self.won:
            return MoveResult.ALREADY_WON
        if not self._in_grid(pos) or len(self.path) < 2:
            return MoveResult.IGNORED
        idx = self._idx(pos)
        if idx != self.path[-1]:
            return MoveResult.IGNORED

        self.path.pop()
        self.connected[idx] = False
        if self._order[idx]:
            self.next_expected_letter -= 1
        self.used_undo = True
        return MoveResult.UNDONE

    def move_to(self, pos: Position) -> MoveResult:
        """Pointer-drag step onto `pos`."""
        if self.won:
            return MoveResult.ALREADY_WON
        if pos == self.current:
            return MoveResult.IGNORED
        if pos == self.predecessor:
            return self.deactivate(self.current)
        if self._in_grid(pos) and self.is_connected(pos):
            return MoveResult.IGNORED
        return self.activate(pos)

    def press(self, pos: Position) -> MoveResult:
        """Pointer-down on `pos`; same rules as a drag step."""
        return self.move_to(pos)

    def reset(self) -> bool:
        """Undo back to the start cell. Returns False when there was nothing to undo."""
        if self.won or len(self.path) <= 1:
            return False
        while len(self.path) > 1:
            self.deactivate(self.current)
        self.next_expected_letter = 1
        return True

    def check_win(self) -> bool:
        word = self.config.word
        if len(self.path) != self.total_cells:
            return False
        if self.config.letter_at(self.current) != word[-1]:
            return False
        return self.next_expected_letter == len(word) + 1
