import random

import pytest

from polymaze.carve import depth_first_carve
from polymaze.errors import InvalidEntryCount
from polymaze.irregular import Square
from polymaze.polar import PolarPosition
from polymaze.topology import create_grid
from polymaze.vector import Vector2D as V

CASES = [
    ("rect", 5),
    ("polar", 4),
    ("hexhex", 3),
    ("trihex", 4),
    ("tri", 4),
    ("irregular", 3),
]


def build(topology, size):
    return create_grid(topology, size, random.Random(0))


@pytest.mark.parametrize("topology,size", CASES)
def test_zero_entries_rejected_before_mutation(topology, size):
    grid = build(topology, size)
    before = grid.wall_state()
    with pytest.raises(InvalidEntryCount):
        grid.generate_entries(0)
    assert grid.wall_state() == before


@pytest.mark.parametrize("topology,size", CASES)
def test_too_many_entries(topology, size):
    grid = build(topology, size)
    available = len(grid.boundary())
    assert len(grid.generate_entries(available)) == available
    with pytest.raises(InvalidEntryCount) as exc:
        grid.generate_entries(available + 1)
    assert exc.value.available == available


@pytest.mark.parametrize("topology,size", CASES)
def test_entries_evenly_spaced(topology, size):
    grid = build(topology, size)
    boundary = grid.boundary()
    entries = grid.generate_entries(3)
    spacing = len(boundary) // 3
    assert entries == [boundary[0], boundary[spacing], boundary[2 * spacing]]
    assert len(set(entries)) == 3


@pytest.mark.parametrize("topology,size", CASES)
def test_opening_clears_one_outward_wall(topology, size):
    rng = random.Random(4)
    grid = create_grid(topology, size, rng)
    entries = grid.generate_entries(len(grid.boundary()))
    depth_first_carve(grid, entries, rng)
    interior = grid.interior_keys()
    walls_before = {entry: grid.wall_count(entry) for entry in entries}
    state_before = grid.wall_state()
    grid.open_entries(entries)
    state_after = grid.wall_state()
    for entry in entries:
        assert grid.wall_count(entry) == walls_before[entry] - 1, f"{entry} lost more than one wall"
    changed = {key for key in state_before if state_before[key] != state_after[key]}
    assert len(changed) == len(entries)
    assert not (changed & interior)


def test_rect_example():
    grid = create_grid("rect", 4)
    assert grid.generate_entries(2) == [grid.boundary()[0], grid.boundary()[6]]


OFF_GRID = [
    ("rect", 3, V(7, 0)),
    ("polar", 3, PolarPosition(1, 40)),
    ("hexhex", 3, V(5, -9)),
    ("trihex", 3, V(9, 9)),
    ("tri", 3, V(20, 0)),
    ("irregular", 3, Square(9999, (0, 1, 2, 3))),
]


@pytest.mark.parametrize("topology,size,node", OFF_GRID)
def test_opening_off_grid_entry_fails(topology, size, node):
    grid = build(topology, size)
    before = grid.wall_state()
    with pytest.raises(ValueError):
        grid.open_entries([node])
    with pytest.raises(ValueError):
        grid.open_entries([grid.boundary()[0], node])
    assert grid.wall_state() == before, f"{topology} changed walls for an off-grid entry"
