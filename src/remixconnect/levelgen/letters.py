# src/remixconnect/levelgen/letters.py
# Letter placement along a solution path.

from typing import Dict, List, Sequence

from ..config import TUNING, GeneratorTuning
from ..grid import Grid, Position
from ..rng import LCGRandom


def place_letters(
    path: Sequence[Position],
    word: str,
    rng: LCGRandom,
    tuning: GeneratorTuning = TUNING,
) -> List[int]:
    """
    Return one strictly increasing path index per letter of `word`.
    - last letter pinned to the final path index
    - first letter at 1..first_letter_spread (never 0, the start cell)
    - interior letters spread evenly with +/- letter_jitter, kept at least
      two past the previous letter while leaving room for the rest
    """
    total = len(path)
    n = len(word)
    if n == 0:
        raise ValueError("word must not be empty")
    if n > total - 1:
        raise ValueError(f"cannot place {n} letters on a path of {total} cells")
    if n == 1:
        return [total - 1]

    spacing = (total - 2) / (n - 1)
    out: List[int] = []
    for i in range(n):
        if i == 0:
            pos = min(1 + rng.below(tuning.first_letter_spread), total - n)
        elif i == n - 1:
            pos = total - 1
        else:
            base = int(1 + i * spacing)
            jitter = rng.below(2 * tuning.letter_jitter + 1) - tuning.letter_jitter
            pos = max(out[i - 1] + 2, base + jitter)
            pos = min(pos, total - (n - i))
        if i > 0 and pos <= out[i - 1]:
            pos = out[i - 1] + 2
        out.append(pos)

    # Repair pass
    for i in range(n):
        if out[i] >= total:
            out[i] = total - 1 - (n - 1 - i)
        if i > 0 and out[i] <= out[i - 1]:
            out[i] = out[i - 1] + 1

    assert out[-1] == total - 1 and out[0] >= 1
    assert all(a < b for a, b in zip(out, out[1:]))
    return out


def letter_grid(cols: int, rows: int, path: Sequence[Position], word: str, indices: Sequence[int]) -> Grid:
    g = Grid.empty(cols, rows)
    for ch, i in zip(word, indices):
        g.set(path[i], ch)
    return g


def letter_order_map(path: Sequence[Position], indices: Sequence[int]) -> Dict[Position, int]:
    # 1-based; keyed by cell because words can repeat letters.
    return {path[i]: order for order, i in enumerate(indices, start=1)}
