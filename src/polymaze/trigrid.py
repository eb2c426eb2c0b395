from typing import Dict, Hashable, List, Optional
import random

from .errors import AdjacencyError, SizeOutOfRange
from .graph import Grid, Side
from .vector import Vector2D

LEFT = Vector2D(-1, 0)
RIGHT = Vector2D(1, 0)
DOWN = Vector2D(0, 1)
UP = Vector2D(0, -1)

# Walls owned by an up-pointing ("even") cell, by offset to the neighbour
OWNED_SIDES: Dict[Vector2D, str] = {LEFT: "left", RIGHT: "right", DOWN: "bottom"}


def is_even(coord: Vector2D) -> bool:
    """Up-pointing cells have an even ``x + y``, down-pointing cells an odd one."""
    return (coord.x + coord.y) % 2 == 0


class TriGrid(Grid):
    """A large triangle tiled with ``size * size`` small triangles.

    Row ``y = -i`` (``y`` grows downwards, row 0 is the base) holds up cells at
    ``x = i, i + 2, .., 2 * (size - 1) - i`` and a down cell between each pair
    of them. Every wall belongs to an up cell: its left, right and bottom
    side.
    """

    MIN_SIZE = 1

    def __init__(self, size: int) -> None:
        if size < self.MIN_SIZE:
            raise SizeOutOfRange(size, (self.MIN_SIZE, None), "tri")
        super().__init__()
        self.size = size
        self._even: Dict[Vector2D, None] = {}
        for diagonal in range(size):
            start_x = diagonal * 2
            for i in range(diagonal + 1):
                self._even[Vector2D(start_x - i, -i)] = None
        self._odd: Dict[Vector2D, None] = {}
        for coord in sorted(self._even, key=lambda c: (-c.y, c.x)):
            if coord + RIGHT * 2 in self._even:
                self._odd[coord + RIGHT] = None
        for coord in self._even:
            for label in OWNED_SIDES.values():
                self._walls[(coord, label)] = True

    @classmethod
    def create(cls, size: int, rng: Optional[random.Random] = None) -> "TriGrid":
        return cls(size)

    def nodes(self) -> List[Vector2D]:
        return list(self._even) + list(self._odd)

    def contains(self, node) -> bool:
        return node in self._even or node in self._odd

    def neighbors(self, node: Vector2D) -> List[Vector2D]:
        if is_even(node):
            return [node + d for d in (LEFT, RIGHT, DOWN) if node + d in self._odd]
        return [node + d for d in (LEFT, RIGHT, UP) if node + d in self._even]

    def edge_key(self, a: Vector2D, b: Vector2D) -> Hashable:
        self._check_pair(a, b)
        if not is_even(a):
            a, b = b, a
        label = OWNED_SIDES.get(b - a)
        if label is None or is_even(b):
            raise AdjacencyError(a, b)
        return (a, label)

    def sides(self, node: Vector2D) -> List[Side]:
        if is_even(node):
            return [(label, self._walls[(node, label)]) for label in ("left", "right", "bottom")]
        return [
            ("left", self.wall(node, node + LEFT)),
            ("right", self.wall(node, node + RIGHT)),
            ("top", self.wall(node, node + UP)),
        ]

    def boundary(self) -> List[Vector2D]:
        n = self.size
        if n == 1:
            return [Vector2D(0, 0)]
        left = [Vector2D(i, -i) for i in range(n - 1)]
        right = [Vector2D(n - 1 + i, -(n - 1 - i)) for i in range(n - 1)]
        bottom = [Vector2D((n - 1 - i) * 2, 0) for i in range(n - 1)]
        return left + right + bottom

    def outward_side(self, node: Vector2D) -> str:
        if node.x == 0 and node.y == 0:
            return "left"
        if node.y == 0:
            return "bottom"
        if node.x - node.y == (self.size - 1) * 2:
            return "right"
        if node.x + node.y == 0:
            return "left"
        raise ValueError(f"{node!r} is not on the boundary")

    def outward_key(self, node: Vector2D) -> Hashable:
        if node not in self._even:
            raise ValueError(f"{node!r} is not an up-pointing cell")
        return (node, self.outward_side(node))
