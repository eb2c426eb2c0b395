from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2D vector used as a node key by the lattice grids.

    Works with ints (rect, hex and triangular coordinates) as well as floats
    (irregular lattice points).
    """

    x: Number
    y: Number

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, factor: Number) -> "Vector2D":
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: Number) -> "Vector2D":
        return Vector2D(self.x / factor, self.y / factor)

    def __iter__(self):
        yield self.x
        yield self.y
