from typing import List, Optional
import random

from .errors import SizeOutOfRange
from .hexgrid import HexGrid, NORTH_EAST
from .vector import Vector2D


class TriHexGrid(HexGrid):
    """Hex cells arranged in a triangle with ``size`` cells per side.

    Built from diagonals: diagonal ``i`` starts at ``(i, 0)`` and walks
    north-east for ``size - i`` cells.
    """

    MIN_SIZE = 1

    def __init__(self, size: int) -> None:
        if size < self.MIN_SIZE:
            raise SizeOutOfRange(size, (self.MIN_SIZE, None), "trihex")
        self.size = size
        coords: List[Vector2D] = []
        for diagonal in range(size):
            coord = Vector2D(diagonal, 0)
            for _ in range(size - diagonal):
                coords.append(coord)
                coord = coord + NORTH_EAST
        super().__init__(coords)

    @classmethod
    def create(cls, size: int, rng: Optional[random.Random] = None) -> "TriHexGrid":
        return cls(size)

    def boundary(self) -> List[Vector2D]:
        n = self.size
        if n == 1:
            return [Vector2D(0, 0)]
        left = [Vector2D(i, -i) for i in range(n - 1)]
        right = [Vector2D(n - 1, -(n - 1 - i)) for i in range(n - 1)]
        bottom = [Vector2D(n - 1 - i, 0) for i in range(n - 1)]
        return left + right + bottom

    def outward_side(self, node: Vector2D) -> str:
        last = self.size - 1
        if node.x == last and node.y == 0:
            return "east"
        if node.y == 0:
            return "southwest"
        if node.x + node.y == 0:
            return "northwest"
        if node.x == last:
            return "east"
        raise ValueError(f"{node!r} is not on the boundary")
