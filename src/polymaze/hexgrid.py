from typing import Dict, Hashable, List
from abc import abstractmethod

from .errors import AdjacencyError
from .graph import Grid, Side
from .vector import Vector2D

# Axial directions, counter-clockwise starting east (y grows south)
DIRECTIONS: List[Vector2D] = [
    Vector2D(1, 0),
    Vector2D(1, -1),
    Vector2D(0, -1),
    Vector2D(-1, 0),
    Vector2D(-1, 1),
    Vector2D(0, 1),
]

EAST, NORTH_EAST, NORTH_WEST, WEST, SOUTH_WEST, SOUTH_EAST = DIRECTIONS

# Side labels in drawing order, clockwise from the upper left edge
SIDE_DIRECTIONS: Dict[str, Vector2D] = {
    "northwest": NORTH_WEST,
    "northeast": NORTH_EAST,
    "east": EAST,
    "southeast": SOUTH_EAST,
    "southwest": SOUTH_WEST,
    "west": WEST,
}

# A hex owns the walls it shares with these neighbours
OWNED_SIDES: Dict[Vector2D, str] = {
    EAST: "east",
    NORTH_EAST: "northeast",
    NORTH_WEST: "northwest",
}


def ring(layer: int) -> List[Vector2D]:
    """Coordinates of the hex ring at distance ``layer`` from the origin.

    Starts at ``(-layer, layer)`` and walks ``layer`` steps along each of the
    six directions in turn.
    """
    if layer == 0:
        return [Vector2D(0, 0)]
    coord = SOUTH_WEST * layer
    result = []
    for direction in DIRECTIONS:
        for _ in range(layer):
            result.append(coord)
            coord = coord + direction
    return result


class HexGrid(Grid):
    """Hex cells in axial coordinates.

    Interior walls are owned by the cell on the west / south side of the pair
    (east, north-east and north-west walls). Sides without a neighbour get a
    wall of their own, keyed by the cell and the side label.
    """

    def __init__(self, coords: List[Vector2D]) -> None:
        super().__init__()
        self._map: Dict[Vector2D, None] = dict.fromkeys(coords)
        for coord in self._map:
            for label, direction in SIDE_DIRECTIONS.items():
                other = coord + direction
                if other not in self._map:
                    self._walls[(coord, label)] = True
                elif direction in OWNED_SIDES:
                    self._walls[(coord, label)] = True

    def nodes(self) -> List[Vector2D]:
        return list(self._map)

    def contains(self, node) -> bool:
        return node in self._map

    def neighbors(self, node: Vector2D) -> List[Vector2D]:
        return [node + d for d in DIRECTIONS if node + d in self._map]

    def edge_key(self, a: Vector2D, b: Vector2D) -> Hashable:
        self._check_pair(a, b)
        if not (a.x < b.x or (a.x == b.x and a.y > b.y)):
            a, b = b, a
        label = OWNED_SIDES.get(b - a)
        if label is None:
            raise AdjacencyError(a, b)
        return (a, label)

    def side_key(self, node: Vector2D, label: str) -> Hashable:
        other = node + SIDE_DIRECTIONS[label]
        if other in self._map:
            return self.edge_key(node, other)
        return (node, label)

    def sides(self, node: Vector2D) -> List[Side]:
        return [(label, self._walls[self.side_key(node, label)]) for label in SIDE_DIRECTIONS]

    @abstractmethod
    def outward_side(self, node: Vector2D) -> str:
        """Label of the side an entry at ``node`` is opened through."""

    def outward_key(self, node: Vector2D) -> Hashable:
        label = self.outward_side(node)
        if node + SIDE_DIRECTIONS[label] in self._map:
            raise ValueError(f"{node!r} has a neighbour on its {label} side")
        return (node, label)
