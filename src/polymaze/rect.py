from typing import Dict, Hashable, List, Optional, Tuple
import random

from .errors import AdjacencyError, SizeOutOfRange
from .graph import Grid, Side
from .vector import Vector2D

# Directions in drawing order, y grows downwards (south)
DIRECTIONS: Dict[str, Vector2D] = {
    "north": Vector2D(0, -1),
    "east": Vector2D(1, 0),
    "south": Vector2D(0, 1),
    "west": Vector2D(-1, 0),
}


class RectGrid(Grid):
    """A ``size x size`` square grid.

    Every cell owns its east and south walls. Cells on the top row also own a
    north wall and cells on the left column a west wall, so the outer rim is
    stored exactly once.
    """

    MIN_SIZE = 1

    def __init__(self, size: int) -> None:
        if size < self.MIN_SIZE:
            raise SizeOutOfRange(size, (self.MIN_SIZE, None), "rect")
        super().__init__()
        self.size = size
        self._nodes: List[Vector2D] = [Vector2D(x, y) for y in range(size) for x in range(size)]
        for node in self._nodes:
            self._walls[(node, "east")] = True
            self._walls[(node, "south")] = True
            if node.y == 0:
                self._walls[(node, "north")] = True
            if node.x == 0:
                self._walls[(node, "west")] = True

    @classmethod
    def create(cls, size: int, rng: Optional[random.Random] = None) -> "RectGrid":
        return cls(size)

    def nodes(self) -> List[Vector2D]:
        return list(self._nodes)

    def contains(self, node) -> bool:
        return isinstance(node, Vector2D) and 0 <= node.x < self.size and 0 <= node.y < self.size

    def neighbors(self, node: Vector2D) -> List[Vector2D]:
        # north, west, east, south
        candidates = [node + DIRECTIONS["north"], node + DIRECTIONS["west"], node + DIRECTIONS["east"], node + DIRECTIONS["south"]]
        return [c for c in candidates if self.contains(c)]

    def edge_key(self, a: Vector2D, b: Vector2D) -> Hashable:
        self._check_pair(a, b)
        if (b.y, b.x) < (a.y, a.x):
            a, b = b, a
        delta = b - a
        if delta == DIRECTIONS["east"]:
            return (a, "east")
        if delta == DIRECTIONS["south"]:
            return (a, "south")
        raise AdjacencyError(a, b)

    def _side_key(self, node: Vector2D, direction: str) -> Tuple[Vector2D, str]:
        other = node + DIRECTIONS[direction]
        if self.contains(other):
            return self.edge_key(node, other)
        return (node, direction)

    def sides(self, node: Vector2D) -> List[Side]:
        return [(direction, self._walls[self._side_key(node, direction)]) for direction in DIRECTIONS]

    def boundary(self) -> List[Vector2D]:
        n = self.size
        if n == 1:
            return [Vector2D(0, 0)]
        top = [Vector2D(x, 0) for x in range(n - 1)]
        right = [Vector2D(n - 1, y) for y in range(n - 1)]
        bottom = [Vector2D(x, n - 1) for x in range(n - 1, 0, -1)]
        left = [Vector2D(0, y) for y in range(n - 1, 0, -1)]
        return top + right + bottom + left

    def outward_direction(self, node: Vector2D) -> str:
        if node.y == 0:
            return "north"
        if node.x == self.size - 1:
            return "east"
        if node.x == 0:
            return "west"
        if node.y == self.size - 1:
            return "south"
        raise ValueError(f"{node!r} is not on the boundary")

    def outward_key(self, node: Vector2D) -> Hashable:
        return (node, self.outward_direction(node))
