import pytest

from polymaze.errors import AdjacencyError
from polymaze.trigrid import TriGrid, is_even
from polymaze.vector import Vector2D as V


@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_counts(n):
    grid = TriGrid(n)
    assert len(grid) == n * n
    assert len(grid.interior_keys()) == 3 * n * (n - 1) // 2
    assert len(grid.wall_state()) == 3 * n * (n + 1) // 2
    assert len(grid.boundary()) == (3 * (n - 1) if n > 1 else 1)


def test_parity_rule():
    grid = TriGrid(3)
    evens = [node for node in grid.nodes() if is_even(node)]
    odds = [node for node in grid.nodes() if not is_even(node)]
    assert len(evens) == 6 and len(odds) == 3
    for node in odds:
        assert all(is_even(other) for other in grid.neighbors(node))
        assert len(grid.neighbors(node)) == 3


def test_wall_owned_by_up_cell():
    grid = TriGrid(3)
    assert grid.edge_key(V(1, 0), V(0, 0)) == (V(0, 0), "right")
    assert grid.edge_key(V(1, 0), V(2, 0)) == (V(2, 0), "left")
    assert grid.edge_key(V(1, 0), V(1, -1)) == (V(1, -1), "bottom")
    grid.set_wall(V(2, -1), V(2, -2), False)
    assert dict(grid.sides(V(2, -1)))["top"] is False
    assert dict(grid.sides(V(2, -2)))["bottom"] is False
    with pytest.raises(AdjacencyError):
        grid.wall(V(0, 0), V(2, 0))


def test_boundary_and_outward():
    grid = TriGrid(3)
    assert grid.boundary() == [V(0, 0), V(1, -1), V(2, -2), V(3, -1), V(4, 0), V(2, 0)]
    sides = [grid.outward_side(node) for node in grid.boundary()]
    assert sides == ["left", "left", "right", "right", "bottom", "bottom"]
    for node in grid.boundary():
        assert grid.outward_key(node) not in grid.interior_keys()
