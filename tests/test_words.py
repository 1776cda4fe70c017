import pytest

from remixconnect.words import (
    HARD_WORDS, LEVEL_WORD_SEQUENCE, base_grid_for_level, difficulty_tier, grid_for_word,
    wall_count_for_level, word_for_level,
)


def test_fixed_sequence_then_hard_cycle():
    assert [word_for_level(d) for d in range(1, 10)] == list(LEVEL_WORD_SEQUENCE)
    assert word_for_level(10) == "ETHEREUM"
    assert word_for_level(11) == "FARCASTER"
    assert word_for_level(13) == "BLOCKCHAIN"
    assert word_for_level(14) == "ETHEREUM"
    assert word_for_level(10 + 4 * 25 + 2) == HARD_WORDS[2]


def test_tiers_and_base_grid():
    assert [difficulty_tier(d) for d in (1, 3, 4, 6, 7, 9, 10, 50)] == [0, 0, 1, 1, 2, 2, 3, 3]
    assert base_grid_for_level(1) == (5, 6)
    assert base_grid_for_level(5) == (6, 7)
    assert base_grid_for_level(8) == (7, 7)
    assert base_grid_for_level(99) == (7, 8)


def test_grid_grows_smaller_side_first():
    assert grid_for_word("REMIX", 1) == (5, 6)
    assert grid_for_word("BLOCKCHAIN", 10) == (7, 8)
    # 64 cells needed from 5x6: 6x6, 7x6, 7x7, 8x7, 8x8
    assert grid_for_word("ABCDEFGHIJKLMNOP", 1) == (8, 8)


def test_wall_count_steps():
    assert [wall_count_for_level(d) for d in range(1, 7)] == [0] * 6
    assert wall_count_for_level(7) == wall_count_for_level(8) == 1
    assert wall_count_for_level(9) == wall_count_for_level(10) == 2
    assert wall_count_for_level(11) == wall_count_for_level(13) == 3
    assert wall_count_for_level(14) == wall_count_for_level(40) == 4
    counts = [wall_count_for_level(d) for d in range(1, 30)]
    assert counts == sorted(counts)


def test_difficulty_below_one_is_rejected():
    with pytest.raises(ValueError):
        word_for_level(0)
    with pytest.raises(ValueError):
        difficulty_tier(-3)
