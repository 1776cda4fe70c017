import pytest

from remixconnect.levelgen.walls import HORIZONTAL, VERTICAL, WallSegment
from remixconnect.render.layout import BoardLayout


def test_fit_first_level_board():
    lay = BoardLayout.fit(5, 6)
    assert lay.cell == 85
    assert lay.origin_x == pytest.approx(131.5)
    assert lay.origin_y == pytest.approx(255)
    assert lay.cell_center((0, 0)) == pytest.approx((174, 297.5))


def test_large_board_shrinks_to_width():
    assert BoardLayout.fit(8, 8).cell == pytest.approx(73)


def test_cell_at_hits_and_gaps():
    lay = BoardLayout.fit(5, 6)
    assert lay.cell_at(lay.origin_x + 1, lay.origin_y + 1) == (0, 0)
    assert lay.cell_at(*lay.cell_center((3, 2))) == (3, 2)
    assert lay.cell_at(lay.origin_x + 89, lay.origin_y + 5) is None  # inside the gap
    assert lay.cell_at(lay.origin_x - 1, lay.origin_y + 5) is None
    assert lay.cell_at(700, 1000) is None


def test_wall_bars_sit_in_the_gap():
    lay = BoardLayout.fit(5, 6)
    x0, y0, x1, y1 = lay.wall_rect(WallSegment((0, 0), (1, 0), HORIZONTAL))
    assert (y0 + y1) / 2 == pytest.approx(344)
    assert x1 - x0 == pytest.approx(lay.cell + lay.gap)
    x0, y0, x1, y1 = lay.wall_rect(WallSegment((0, 0), (0, 1), VERTICAL))
    assert (x0 + x1) / 2 == pytest.approx(131.5 + 85 + 4)
