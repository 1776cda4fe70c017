# src/remixconnect/grid.py
# Positions are (row, col); cells are also addressed by a flat row-major index.

from dataclasses import dataclass
from typing import Iterator, List, Tuple

Position = Tuple[int, int]
Edge = Tuple[Position, Position]

EMPTY = "."

# up, down, left, right
DIRS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def in_bounds(pos: Position, cols: int, rows: int) -> bool:
    r, c = pos
    return 0 <= r < rows and 0 <= c < cols


def neighbors(pos: Position, cols: int, rows: int) -> Iterator[Position]:
    r, c = pos
    for dr, dc in DIRS:
        n = (r + dr, c + dc)
        if in_bounds(n, cols, rows):
            yield n


def is_orthogonal(a: Position, b: Position) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def edge_key(a: Position, b: Position) -> Edge:
    """Canonical form of the unordered pair: row-major smaller cell first."""
    return (a, b) if a < b else (b, a)


def position_key(pos: Position) -> str:
    return f"{pos[0]},{pos[1]}"


def edge_key_str(a: Position, b: Position) -> str:
    p1, p2 = edge_key(a, b)
    return f"{position_key(p1)}-{position_key(p2)}"


def path_edges(path: List[Position]) -> set:
    return {edge_key(path[i], path[i + 1]) for i in range(len(path) - 1)}


def snake_path(cols: int, rows: int) -> List[Position]:
    """Boustrophedon: left-to-right on even rows, right-to-left on odd rows."""
    path: List[Position] = []
    for r in range(rows):
        cs = range(cols) if r % 2 == 0 else range(cols - 1, -1, -1)
        path.extend((r, c) for c in cs)
    return path


@dataclass
class Grid:
    cols: int
    rows: int
    buf: List[str]

    @classmethod
    def empty(cls, cols: int, rows: int) -> "Grid":
        if cols <= 0 or rows <= 0:
            raise ValueError(f"grid must be at least 1x1, got {cols}x{rows}")
        return cls(cols=cols, rows=rows, buf=[EMPTY] * (cols * rows))

    @property
    def size(self) -> int:
        return self.cols * self.rows

    def idx(self, pos: Position) -> int:
        return pos[0] * self.cols + pos[1]

    def pos(self, idx: int) -> Position:
        return divmod(idx, self.cols)

    def get(self, pos: Position) -> str:
        return self.buf[self.idx(pos)]

    def set(self, pos: Position, v: str) -> None:
        self.buf[self.idx(pos)] = v

    def as_matrix(self) -> List[List[str]]:
        return [self.buf[r * self.cols:(r + 1) * self.cols] for r in range(self.rows)]
