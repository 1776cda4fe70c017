from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorTuning:
    # Retry bound before falling back to the snake path.
    max_attempts: int = 100
    # Warnsdorff diversification.
    second_best_chance: float = 0.15
    score_noise: float = 0.5
    # Letter placement: first letter lands at 1..first_letter_spread.
    first_letter_spread: int = 2
    letter_jitter: int = 1
    # Walls.
    wall_min_difficulty: int = 7
    two_segment_chance: float = 0.6
    # Grid is grown until cols*rows >= cells_per_letter * len(word).
    cells_per_letter: int = 4
    # Start pool widens strictly above these levels.
    edge_start_difficulty: int = 3
    center_start_difficulty: int = 7


# Default tuning (can be swapped per generator)
TUNING = GeneratorTuning()
