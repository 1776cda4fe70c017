# src/remixconnect/levelgen/walls.py
# Obstacles on grid edges the solution path never crosses.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from ..config import TUNING, GeneratorTuning
from ..grid import DIRS, Edge, Position, edge_key, edge_key_str, path_edges
from ..rng import LCGRandom
from ..words import wall_count_for_level

HORIZONTAL = "horizontal"  # between vertically adjacent cells
VERTICAL = "vertical"      # between horizontally adjacent cells


@dataclass(frozen=True)
class WallSegment:
    cell1: Position  # always the upper / left cell
    cell2: Position
    orientation: str

    @property
    def key(self) -> Edge:
        return edge_key(self.cell1, self.cell2)

    def to_dict(self) -> dict:
        return {
            "cell1": {"row": self.cell1[0], "col": self.cell1[1]},
            "cell2": {"row": self.cell2[0], "col": self.cell2[1]},
            "orientation": self.orientation,
            "edge": edge_key_str(self.cell1, self.cell2),
        }


@dataclass
class Wall:
    segments: List[WallSegment] = field(default_factory=list)

    def edges(self) -> Set[Edge]:
        return {s.key for s in self.segments}


def _available_segments(cols: int, rows: int, used: Set[Edge]) -> List[WallSegment]:
    out: List[WallSegment] = []
    for r in range(rows - 1):
        for c in range(cols):
            a, b = (r, c), (r + 1, c)
            if edge_key(a, b) not in used:
                out.append(WallSegment(a, b, HORIZONTAL))
    for r in range(rows):
        for c in range(cols - 1):
            a, b = (r, c), (r, c + 1)
            if edge_key(a, b) not in used:
                out.append(WallSegment(a, b, VERTICAL))
    return out


def _connected_segment(
    current: WallSegment,
    segments: List[WallSegment],
    by_key: Dict[Edge, WallSegment],
    claimed: Set[Edge],
    rng: LCGRandom,
) -> Optional[WallSegment]:
    """Random free segment sharing a cell with `current`."""
    own = {s.key for s in segments}
    candidates: List[WallSegment] = []
    for cell in (current.cell1, current.cell2):
        for dr, dc in DIRS:
            k = edge_key(cell, (cell[0] + dr, cell[1] + dc))
            seg = by_key.get(k)
            if seg is not None and k not in own and k not in claimed:
                candidates.append(seg)
    if not candidates:
        return None
    return rng.choice(candidates)


def _grow_wall(
    start: WallSegment,
    by_key: Dict[Edge, WallSegment],
    claimed: Set[Edge],
    rng: LCGRandom,
    tuning: GeneratorTuning,
) -> Optional[Wall]:
    segments = [start]
    target = 2 if rng.chance(tuning.two_segment_chance) else 3
    current = start
    while len(segments) < target:
        nxt = _connected_segment(current, segments, by_key, claimed, rng)
        if nxt is None:
            break
        segments.append(nxt)
        current = nxt
    if len(segments) < 2:
        return None
    return Wall(segments)


def build_walls(
    cols: int,
    rows: int,
    path: Sequence[Position],
    difficulty: int,
    rng: LCGRandom,
    tuning: GeneratorTuning = TUNING,
) -> List[Wall]:
    """
    Grow up to wall_count_for_level(difficulty) walls of 2-3 connected
    segments. Path edges and edges already claimed by a wall are never used.
    """
    want = wall_count_for_level(difficulty, tuning.wall_min_difficulty)
    if want == 0:
        return []

    on_path = path_edges(list(path))
    pool = _available_segments(cols, rows, on_path)
    by_key = {s.key: s for s in pool}
    rng.shuffle(pool)

    walls: List[Wall] = []
    claimed: Set[Edge] = set()
    for seg in pool:
        if len(walls) >= want:
            break
        if seg.key in claimed:
            continue
        wall = _grow_wall(seg, by_key, claimed, rng, tuning)
        if wall is not None:
            walls.append(wall)
            claimed |= wall.edges()
    return walls


def blocked_edges(walls: Sequence[Wall]) -> Set[Edge]:
    out: Set[Edge] = set()
    for w in walls:
        out |= w.edges()
    return out
