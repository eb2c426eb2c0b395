from typing import Hashable, List, NamedTuple, Optional
import math
import random

from .errors import AdjacencyError, SizeOutOfRange
from .graph import Grid, Side


class PolarPosition(NamedTuple):
    """A cell of a ``PolarGrid``, addressed by ring (layer) and index within the ring."""

    layer: int
    cell: int


def layer_cell_counts(layer_count: int) -> List[int]:
    """Cell count of every layer.

    Layer 0 is a single cell. Every further layer multiplies the previous count
    by the integer ratio that keeps the cells about as wide as the inner ones,
    so each outer cell has exactly one parent.
    """
    counts = [1]
    for layer in range(1, layer_count):
        previous = counts[-1]
        radius = layer / layer_count
        circumference = 2.0 * math.pi * radius
        estimated_width = circumference / previous
        ratio = int(round(estimated_width * layer_count))
        counts.append(previous * ratio)
    return counts


class PolarGrid(Grid):
    """Concentric rings of cells around a single centre cell.

    Each cell owns its clockwise wall and one wall per outward child. The
    cells of the last layer own a single outward wall: the outer rim.
    """

    MIN_SIZE = 1

    def __init__(self, layer_count: int) -> None:
        if layer_count < self.MIN_SIZE:
            raise SizeOutOfRange(layer_count, (self.MIN_SIZE, None), "polar")
        super().__init__()
        self.layer_count = layer_count
        self.counts = layer_cell_counts(layer_count)
        for layer, count in enumerate(self.counts):
            outward = self.outward_count(layer)
            for cell in range(count):
                if layer > 0:
                    self._walls[(layer, cell, "clockwise")] = True
                for index in range(outward):
                    self._walls[(layer, cell, "outward", index)] = True

    @classmethod
    def create(cls, size: int, rng: Optional[random.Random] = None) -> "PolarGrid":
        return cls(size)

    def outward_count(self, layer: int) -> int:
        """Number of outward walls of a cell in ``layer`` (children, or 1 for the rim)."""
        if layer + 1 < self.layer_count:
            return self.counts[layer + 1] // self.counts[layer]
        return 1

    def nodes(self) -> List[PolarPosition]:
        return [PolarPosition(layer, cell) for layer, count in enumerate(self.counts) for cell in range(count)]

    def contains(self, node) -> bool:
        if not isinstance(node, tuple) or len(node) != 2:
            return False
        layer, cell = node
        if not isinstance(layer, int) or not isinstance(cell, int):
            return False
        return 0 <= layer < self.layer_count and 0 <= cell < self.counts[layer]

    def _inward(self, node: PolarPosition) -> PolarPosition:
        ratio = self.outward_count(node.layer - 1)
        return PolarPosition(node.layer - 1, node.cell // ratio)

    def _counter_clockwise(self, node: PolarPosition) -> PolarPosition:
        count = self.counts[node.layer]
        return PolarPosition(node.layer, (node.cell - 1 + count) % count)

    def _clockwise(self, node: PolarPosition) -> PolarPosition:
        return PolarPosition(node.layer, (node.cell + 1) % self.counts[node.layer])

    def _outward(self, node: PolarPosition) -> List[PolarPosition]:
        if node.layer + 1 >= self.layer_count:
            return []
        ratio = self.outward_count(node.layer)
        return [PolarPosition(node.layer + 1, node.cell * ratio + i) for i in range(ratio)]

    def neighbors(self, node: PolarPosition) -> List[PolarPosition]:
        node = PolarPosition(*node)
        result: List[PolarPosition] = []
        if node.layer != 0:
            result.append(self._inward(node))
            result.append(self._counter_clockwise(node))
            result.append(self._clockwise(node))
        result.extend(self._outward(node))
        return result

    def edge_key(self, a, b) -> Hashable:
        self._check_pair(a, b)
        a, b = PolarPosition(*a), PolarPosition(*b)
        if b.layer < a.layer:
            a, b = b, a
        if a.layer == b.layer:
            count = self.counts[a.layer]
            if a.layer > 0 and (a.cell + 1) % count == b.cell:
                return (a.layer, a.cell, "clockwise")
            if a.layer > 0 and (b.cell + 1) % count == a.cell:
                return (b.layer, b.cell, "clockwise")
        elif a.layer + 1 == b.layer:
            ratio = self.outward_count(a.layer)
            if b.cell // ratio == a.cell:
                return (a.layer, a.cell, "outward", b.cell % ratio)
        raise AdjacencyError(a, b)

    def sides(self, node) -> List[Side]:
        node = PolarPosition(*node)
        result: List[Side] = []
        if node.layer != 0:
            result.append(("inward", self.wall(node, self._inward(node))))
            result.append(("counterclockwise", self.wall(node, self._counter_clockwise(node))))
            result.append(("clockwise", self._walls[(node.layer, node.cell, "clockwise")]))
        for index in range(self.outward_count(node.layer)):
            result.append((f"outward-{index}", self._walls[(node.layer, node.cell, "outward", index)]))
        return result

    def boundary(self) -> List[PolarPosition]:
        last = self.layer_count - 1
        return [PolarPosition(last, cell) for cell in range(self.counts[last])]

    def outward_key(self, node) -> Hashable:
        node = PolarPosition(*node)
        if node.layer != self.layer_count - 1:
            raise ValueError(f"{node!r} is not on the outer layer")
        return (node.layer, node.cell, "outward", 0)
