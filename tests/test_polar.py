import pytest

from polymaze.errors import AdjacencyError
from polymaze.polar import PolarGrid, PolarPosition as P, layer_cell_counts
from polymaze.vector import Vector2D


def test_layer_counts():
    assert layer_cell_counts(4) == [1, 6, 12, 24]
    counts = layer_cell_counts(12)
    for inner, outer in zip(counts, counts[1:]):
        assert outer % inner == 0, f"{outer} cells cannot map onto {inner} parents"


def test_counts_and_edges():
    grid = PolarGrid(4)
    assert len(grid) == 43
    # clockwise walls of layers 1..3 plus one wall per parent/child pair
    assert len(grid.interior_keys()) == 42 + 42
    assert grid.boundary() == [P(3, c) for c in range(24)]


def test_adjacency():
    grid = PolarGrid(3)
    assert grid.neighbors(P(0, 0)) == [P(1, c) for c in range(6)]
    assert grid.neighbors(P(1, 0)) == [P(0, 0), P(1, 5), P(1, 1), P(2, 0), P(2, 1)]
    assert grid.edge_key(P(1, 5), P(1, 0)) == grid.edge_key(P(1, 0), P(1, 5))
    grid.set_wall(P(2, 3), P(1, 1), False)
    assert grid.wall(P(1, 1), P(2, 3)) is False
    with pytest.raises(AdjacencyError):
        grid.wall(P(1, 0), P(2, 3))
    with pytest.raises(AdjacencyError):
        grid.wall(P(1, 0), P(1, 3))


def test_neighbor_symmetry():
    grid = PolarGrid(6)
    for node in grid.nodes():
        for other in grid.neighbors(node):
            assert node in grid.neighbors(other), f"{node} -> {other} is one way"


def test_single_layer():
    grid = PolarGrid(1)
    assert grid.nodes() == [P(0, 0)]
    assert grid.interior_keys() == set()
    assert grid.generate_entries(1) == [P(0, 0)]
    grid.open_entries([P(0, 0)])
    assert grid.sides(P(0, 0)) == [("outward-0", False)]


def test_side_labels():
    grid = PolarGrid(3)
    labels = [label for label, _ in grid.sides(P(1, 2))]
    assert labels == ["inward", "counterclockwise", "clockwise", "outward-0", "outward-1"]
    assert [label for label, _ in grid.sides(P(2, 0))] == ["inward", "counterclockwise", "clockwise", "outward-0"]


@pytest.mark.parametrize("node", ["ab", (0.5, 0), (1, 0, 0), Vector2D(1, 0), None])
def test_foreign_values_are_not_cells(node):
    grid = PolarGrid(3)
    assert not grid.contains(node)
    with pytest.raises(AdjacencyError):
        grid.wall(node, P(1, 0))
