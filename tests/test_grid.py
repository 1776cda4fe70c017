import pytest

from remixconnect.grid import (
    Grid, edge_key, edge_key_str, is_orthogonal, neighbors, path_edges, position_key, snake_path,
)


def test_edge_key_is_order_independent():
    assert edge_key((1, 2), (1, 3)) == edge_key((1, 3), (1, 2)) == ((1, 2), (1, 3))
    assert edge_key((2, 0), (1, 0)) == ((1, 0), (2, 0))
    assert edge_key_str((1, 3), (1, 2)) == "1,2-1,3"
    assert position_key((4, 0)) == "4,0"


def test_orthogonal_only():
    assert is_orthogonal((0, 0), (0, 1))
    assert is_orthogonal((3, 2), (2, 2))
    assert not is_orthogonal((0, 0), (1, 1))
    assert not is_orthogonal((0, 0), (0, 2))
    assert not is_orthogonal((0, 0), (0, 0))


def test_neighbors_respect_bounds():
    assert list(neighbors((0, 0), 3, 2)) == [(1, 0), (0, 1)]
    assert len(list(neighbors((1, 1), 3, 3))) == 4


def test_snake_path():
    assert snake_path(3, 2) == [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0)]
    p = snake_path(5, 6)
    assert len(p) == 30 and len(set(p)) == 30
    assert all(is_orthogonal(a, b) for a, b in zip(p, p[1:]))
    assert len(path_edges(p)) == 29


def test_grid_indexing():
    g = Grid.empty(5, 6)
    assert g.size == 30
    assert g.idx((2, 3)) == 13 and g.pos(13) == (2, 3)
    g.set((5, 0), "X")
    assert g.get((5, 0)) == "X"
    m = g.as_matrix()
    assert len(m) == 6 and all(len(r) == 5 for r in m)
    assert m[5][0] == "X" and m[0][0] == "."


def test_grid_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        Grid.empty(0, 3)
