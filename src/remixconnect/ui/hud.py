# src/remixconnect/ui/hud.py
# Text for the score badge, countdown and streak counter.


def score_digits(score: int, width: int = 5) -> str:
    """Zero-padded score, like the digital badge on screen."""
    if score < 0:
        raise ValueError("score must be >= 0")
    return f"{score:0{width}d}"


def format_time(seconds: float) -> str:
    return str(int(max(0.0, seconds) // 1))


def streak_label(perfect_streak: int) -> str:
    return f"x{perfect_streak}" if perfect_streak >= 2 else ""
