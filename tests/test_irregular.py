import random

import numpy as np
import pytest

from polymaze.errors import AdjacencyError, SizeOutOfRange
from polymaze.irregular import DIRECTIONS, IrregularGrid, points_of_hex_layer, to_cartesian


def make(size=3, seed=1):
    return IrregularGrid(size, random.Random(seed))


def test_hex_layer_points():
    assert len(points_of_hex_layer(1)) == 6
    assert len(points_of_hex_layer(3)) == 18


@pytest.mark.parametrize("size", [1, 26, 0])
def test_size_bounds(size):
    with pytest.raises(SizeOutOfRange):
        IrregularGrid(size, random.Random(0))


def test_squares_share_sides():
    grid = make()
    for square in grid.nodes():
        assert len(grid.sides(square)) == 4
        for other in grid.neighbors(square):
            assert square in grid.neighbors(other)
            assert grid.edge_key(square, other) == grid.edge_key(other, square)


def test_rim_is_split_in_halves():
    size = 3
    grid = make(size)
    rim = set(grid.wall_state()) - grid.interior_keys()
    # every edge of the outer lattice ring is split into two square sides
    assert len(rim) == 2 * 6 * (size - 1)


def test_boundary_squares():
    grid = make(4, seed=9)
    boundary = grid.boundary()
    assert boundary, "expected boundary squares"
    assert len(set(boundary)) == len(boundary)
    for square in boundary:
        key = grid.outward_key(square)
        assert key not in grid.interior_keys()
    inner = [s for s in grid.nodes() if s not in set(boundary)]
    assert inner, "a size 4 grid has interior squares"
    with pytest.raises(ValueError):
        grid.outward_key(inner[0])


def test_boundary_ordered_by_angle():
    grid = make(4, seed=2)
    angles = [np.arctan2(*reversed(grid.position(s))) for s in grid.boundary()]
    assert angles == sorted(angles)


def test_same_seed_same_layout():
    a = make(5, seed=11)
    b = make(5, seed=11)
    assert [s.corners for s in a.nodes()] == [s.corners for s in b.nodes()]
    assert np.array_equal(a.positions, b.positions)
    assert np.isfinite(a.positions).all()


def test_non_adjacent_squares():
    grid = make()
    first = grid.nodes()[0]
    far = next(s for s in grid.nodes() if s != first and s not in grid.neighbors(first))
    with pytest.raises(AdjacencyError):
        grid.wall(first, far)
    with pytest.raises(AdjacencyError):
        grid.wall(first, first)


def test_walls_start_up():
    grid = make()
    assert all(grid.wall_state().values())
    assert all(grid.wall_count(s) == 4 for s in grid.nodes())


class UnrelaxedGrid(IrregularGrid):
    RELAXATION_STEPS = 0


def lattice_positions(grid):
    ordered = sorted(grid._point_index.items(), key=lambda item: item[1])
    return np.array([to_cartesian(point) for point, _ in ordered])


def test_relaxation_moves_points():
    still = UnrelaxedGrid(4, random.Random(6))
    relaxed = IrregularGrid(4, random.Random(6))
    assert [s.corners for s in still.nodes()] == [s.corners for s in relaxed.nodes()]
    assert np.allclose(still.positions, lattice_positions(still))
    moved = np.linalg.norm(relaxed.positions - still.positions, axis=1)
    assert moved.max() > 0.05, "relaxation left the lattice untouched"
    # every step moves a point at most STEP_LENGTH
    assert moved.max() <= IrregularGrid.RELAXATION_STEPS * IrregularGrid.STEP_LENGTH + 1e-9


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_pruning_keeps_two_edges_per_triangle(seed):
    grid = make(5, seed=seed)
    lattice = grid._lattice
    nodes = set(lattice.nodes)
    for node in nodes:
        for first, second in zip(DIRECTIONS, DIRECTIONS[1:] + DIRECTIONS[:1]):
            a, b = node + first, node + second
            if a not in nodes or b not in nodes:
                continue
            missing = sum(not lattice.contains_edge(p, q) for p, q in ((node, a), (a, b), (b, node)))
            assert missing <= 1, f"triangle {node}, {a}, {b} lost {missing} edges"
    outer = points_of_hex_layer(grid.size - 1)
    for p, q in zip(outer, outer[1:] + outer[:1]):
        assert lattice.contains_edge(p, q), f"rim edge {p}-{q} was pruned"
