# Difficulty tables: word choice, base grid size and wall count per level.

from typing import Tuple

# Levels 1..9 are hand-picked so consecutive levels never repeat a word.
LEVEL_WORD_SEQUENCE = (
    "REMIX",
    "GAMES",
    "TOKEN",
    "CRYPTO",
    "WALLET",
    "GAMER",
    "STAKING",
    "TRADING",
    "REWARDS",
)

# Level 10+ cycles through these.
HARD_WORDS = ("ETHEREUM", "FARCASTER", "METAVERSE", "BLOCKCHAIN")

# (cols, rows) per tier
GRID_BY_TIER = ((5, 6), (6, 7), (7, 7), (7, 8))


def check_difficulty(difficulty: int) -> None:
    if difficulty < 1:
        raise ValueError(f"difficulty must be >= 1, got {difficulty}")


def difficulty_tier(difficulty: int) -> int:
    check_difficulty(difficulty)
    return min((difficulty - 1) // 3, len(GRID_BY_TIER) - 1)


def word_for_level(difficulty: int) -> str:
    check_difficulty(difficulty)
    if difficulty <= len(LEVEL_WORD_SEQUENCE):
        return LEVEL_WORD_SEQUENCE[difficulty - 1]
    offset = len(LEVEL_WORD_SEQUENCE) + 1
    return HARD_WORDS[(difficulty - offset) % len(HARD_WORDS)]


def base_grid_for_level(difficulty: int) -> Tuple[int, int]:
    return GRID_BY_TIER[difficulty_tier(difficulty)]


def grid_for_word(word: str, difficulty: int, cells_per_letter: int = 4) -> Tuple[int, int]:
    """Base grid for the tier, grown (smaller side first) to hold the word."""
    cols, rows = base_grid_for_level(difficulty)
    need = cells_per_letter * len(word)
    while cols * rows < need:
        if cols <= rows:
            cols += 1
        else:
            rows += 1
    return cols, rows


def wall_count_for_level(difficulty: int, min_difficulty: int = 7) -> int:
    if difficulty < min_difficulty:
        return 0
    if difficulty <= 8:
        return 1
    if difficulty <= 10:
        return 2
    if difficulty <= 13:
        return 3
    return 4
