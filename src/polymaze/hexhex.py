from typing import List, Optional
import random

from .errors import SizeOutOfRange
from .hexgrid import HexGrid, ring
from .vector import Vector2D


class HexHexGrid(HexGrid):
    """A hexagon made of ``size`` concentric hex rings (the centre cell is ring 0)."""

    MIN_SIZE = 1

    def __init__(self, size: int) -> None:
        if size < self.MIN_SIZE:
            raise SizeOutOfRange(size, (self.MIN_SIZE, None), "hexhex")
        self.size = size
        coords: List[Vector2D] = []
        for layer in range(size):
            coords.extend(ring(layer))
        super().__init__(coords)

    @classmethod
    def create(cls, size: int, rng: Optional[random.Random] = None) -> "HexHexGrid":
        return cls(size)

    def boundary(self) -> List[Vector2D]:
        return ring(self.size - 1)

    def outward_side(self, node: Vector2D) -> str:
        """Pick the outward side from the macro side of the hexagon ``node`` lies on."""
        last = self.size - 1
        if node.y > 0 or (node.y == 0 and node.x < 0):
            if node.x >= 0:
                return "southeast"
            if node.y == last:
                return "southwest"
            return "west"
        if node.x <= 0:
            return "northwest"
        if -node.y == last:
            return "northeast"
        return "east"
