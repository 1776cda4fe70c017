# src/remixconnect/levelgen/hamiltonian.py
# Randomized Warnsdorff walk. One pass, no backtracking: a dead end returns None
# and the caller retries with a fresh run.

from typing import List, Optional

from ..config import TUNING, GeneratorTuning
from ..grid import Position, in_bounds, neighbors
from ..rng import LCGRandom


def build_hamiltonian_path(
    cols: int,
    rows: int,
    start: Position,
    rng: LCGRandom,
    tuning: GeneratorTuning = TUNING,
) -> Optional[List[Position]]:
    """
    Visit all cols*rows cells once with orthogonal steps from `start`.
    Candidates are ranked by unvisited-neighbor count plus noise in
    [0, score_noise); the least accessible wins, except that the runner-up
    is taken with probability `second_best_chance`.
    """
    if not in_bounds(start, cols, rows):
        raise ValueError(f"start {start} outside {cols}x{rows} grid")

    visited = [[False] * cols for _ in range(rows)]

    def accessibility(pos: Position) -> int:
        return sum(1 for (r, c) in neighbors(pos, cols, rows) if not visited[r][c])

    cur = start
    visited[cur[0]][cur[1]] = True
    path = [cur]
    total = cols * rows

    while len(path) < total:
        moves = []
        for n in neighbors(cur, cols, rows):
            if visited[n[0]][n[1]]:
                continue
            noise = rng.random() * tuning.score_noise
            moves.append((accessibility(n) + noise, n))
        if not moves:
            return None  # dead end

        moves.sort(key=lambda m: m[0])
        pick = 0
        if len(moves) > 1 and rng.chance(tuning.second_best_chance):
            pick = 1

        cur = moves[pick][1]
        visited[cur[0]][cur[1]] = True
        path.append(cur)

    return path
