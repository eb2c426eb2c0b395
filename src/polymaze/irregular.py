"""Irregular maze built on a relaxed, randomly merged triangle lattice.

Construction runs in five phases:

1. lay out a hexagon of triangle-lattice points (``size`` rings);
2. connect every pair of neighbouring lattice points;
3. randomly remove edges, never removing two edges of the same triangle and
   never touching the outer rim, so faces become triangles or quads;
4. split every quad into four and every triangle into three four-sided
   cells ("squares") that share their sides with their neighbours;
5. relax the points a fixed number of steps so the squares even out.

The squares are the maze cells. A side owned by a single square is part of
the outer rim.
"""
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple
import logging
import math
import random

import numpy as np

from .errors import AdjacencyError, SizeOutOfRange
from .graph import Grid, Side
from .vector import Vector2D

logger = logging.getLogger(__name__)

DIRECTIONS: List[Vector2D] = [
    Vector2D(1.0, 0.0),
    Vector2D(1.0, -1.0),
    Vector2D(0.0, -1.0),
    Vector2D(-1.0, 0.0),
    Vector2D(-1.0, 1.0),
    Vector2D(0.0, 1.0),
]

SQRT3 = math.sqrt(3.0)

EdgeKey = Tuple[int, int]


def points_of_hex_layer(layer: int) -> List[Vector2D]:
    coord = DIRECTIONS[4] * layer
    points = []
    for direction in DIRECTIONS:
        for _ in range(layer):
            points.append(coord)
            coord = coord + direction
    return points


def to_cartesian(point: Vector2D) -> Tuple[float, float]:
    """Lattice (axial) coordinates to the plane, neighbouring points 1 apart."""
    return (0.5 * SQRT3 * point.x, point.y + 0.5 * point.x)


@dataclass(frozen=True)
class Square:
    """A maze cell: four corner point indices in walking order."""

    index: int
    corners: Tuple[int, int, int, int]

    def edges(self) -> List[EdgeKey]:
        a, b, c, d = self.corners
        return [edge_key(a, b), edge_key(b, c), edge_key(c, d), edge_key(d, a)]


def edge_key(a: int, b: int) -> EdgeKey:
    return (a, b) if a < b else (b, a)


class _LatticeGraph:
    """Undirected graph over lattice points, neighbour order is insertion order."""

    def __init__(self) -> None:
        self._adjacency: Dict[Vector2D, Dict[Vector2D, None]] = {}

    @property
    def nodes(self) -> List[Vector2D]:
        return list(self._adjacency)

    def add_node(self, node: Vector2D) -> None:
        self._adjacency.setdefault(node, {})

    def contains_node(self, node: Vector2D) -> bool:
        return node in self._adjacency

    def neighbors_of(self, node: Vector2D) -> List[Vector2D]:
        return list(self._adjacency[node])

    def add_edge(self, a: Vector2D, b: Vector2D) -> None:
        self._adjacency[a][b] = None
        self._adjacency[b][a] = None

    def remove_edge(self, a: Vector2D, b: Vector2D) -> None:
        del self._adjacency[a][b]
        del self._adjacency[b][a]

    def contains_edge(self, a: Vector2D, b: Vector2D) -> bool:
        return a in self._adjacency and b in self._adjacency[a]


class IrregularGrid(Grid):
    MIN_SIZE = 2
    MAX_SIZE = 25
    RELAXATION_STEPS = 50
    STEP_LENGTH = 0.025

    def __init__(self, size: int, rng: Optional[random.Random] = None) -> None:
        if not self.MIN_SIZE <= size <= self.MAX_SIZE:
            raise SizeOutOfRange(size, (self.MIN_SIZE, self.MAX_SIZE), "irregular")
        super().__init__()
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self._point_index: Dict[Vector2D, int] = {}
        self._points: List[Tuple[float, float]] = []
        self._squares: List[Square] = []
        self._edge_squares: Dict[EdgeKey, List[Square]] = {}

        self._lattice = _LatticeGraph()
        self._add_lattice_nodes()
        self._connect_lattice()
        removed = self._remove_random_edges()
        self._subdivide_faces()
        self.positions = np.array(self._points, dtype=float)
        self._corners = np.array([s.corners for s in self._squares], dtype=int)
        for _ in range(self.RELAXATION_STEPS):
            self._step_relaxation()
        self._boundary = self._find_boundary_squares()
        logger.debug(
            "irregular grid size=%d: %d lattice points, %d edges pruned, %d squares, %d boundary squares",
            size, len(self._lattice.nodes), removed, len(self._squares), len(self._boundary),
        )

    @classmethod
    def create(cls, size: int, rng: Optional[random.Random] = None) -> "IrregularGrid":
        return cls(size, rng)

    # --- Construction -------------------------------------------------
    def _add_lattice_nodes(self) -> None:
        self._lattice.add_node(Vector2D(0.0, 0.0))
        for layer in range(1, self.size):
            for point in points_of_hex_layer(layer):
                self._lattice.add_node(point)

    def _connect_lattice(self) -> None:
        offsets = points_of_hex_layer(1)
        for node in self._lattice.nodes:
            for offset in offsets:
                other = node + offset
                if self._lattice.contains_node(other):
                    self._lattice.add_edge(node, other)

    def _remove_random_edges(self) -> int:
        """Prune edges until no triangle can lose another one.

        After an edge is removed, the other edges of the triangles it bordered
        (those to the common neighbours of its endpoints) are no longer
        candidates. Edges of the outer ring are never candidates.
        """
        lattice = self._lattice
        nodes = lattice.nodes
        outer = points_of_hex_layer(self.size - 1)
        outer_edges = {frozenset(pair) for pair in zip(outer, outer[1:] + outer[:1])}
        available = {
            frozenset((node, other)) for node in nodes for other in lattice.neighbors_of(node)
        }
        available -= outer_edges

        removed = 0
        while available:
            node = self.rng.choice(nodes)
            candidates = [n for n in lattice.neighbors_of(node) if frozenset((node, n)) in available]
            if not candidates:
                continue
            neighbor = self.rng.choice(candidates)
            lattice.remove_edge(node, neighbor)
            available.discard(frozenset((node, neighbor)))
            removed += 1

            common = set(lattice.neighbors_of(neighbor)) & set(lattice.neighbors_of(node))
            for other in common:
                available.discard(frozenset((node, other)))
                available.discard(frozenset((neighbor, other)))
        return removed

    def _subdivide_faces(self) -> None:
        lattice = self._lattice
        d = DIRECTIONS
        for node in lattice.nodes:
            south_east = node + d[0]
            north_east = node + d[1]
            north = node + d[2]
            north_west = node + d[3]

            if (lattice.contains_node(south_east) and lattice.contains_node(north_east)
                    and not lattice.contains_edge(south_east, north_east)):
                center = node + (d[0] + d[1]) / 2.0
                se = center + d[0] / 2.0
                ne = center + d[1] / 2.0
                nw = center + d[3] / 2.0
                sw = center + d[4] / 2.0
                self._add_square(node, sw, center, nw)
                self._add_square(south_east, se, center, sw)
                self._add_square(south_east + d[1], ne, center, se)
                self._add_square(north_east, nw, center, ne)

            if (lattice.contains_node(north_east) and lattice.contains_node(north)
                    and not lattice.contains_edge(north_east, north)):
                center = node + (d[1] + d[2]) / 2.0
                ne = center + d[1] / 2.0
                n = center + d[2] / 2.0
                sw = center + d[4] / 2.0
                s = center + d[5] / 2.0
                self._add_square(node, s, center, sw)
                self._add_square(s, north_east, ne, center)
                self._add_square(center, ne, north_east + d[2], n)
                self._add_square(sw, center, n, north)

            if (lattice.contains_node(north) and lattice.contains_node(north_west)
                    and not lattice.contains_edge(north, north_west)):
                center = node + (d[2] + d[3]) / 2.0
                n = center + d[2] / 2.0
                nw = center + d[3] / 2.0
                s = center + d[5] / 2.0
                se = center + d[0] / 2.0
                self._add_square(node, se, center, s)
                self._add_square(se, north, n, center)
                self._add_square(center, n, north + d[3], nw)
                self._add_square(s, center, nw, north_west)

            if (lattice.contains_edge(node, south_east) and lattice.contains_edge(south_east, north_east)
                    and lattice.contains_edge(north_east, node)):
                center = node + d[0] * (2.0 / 3.0) + d[2] * (1.0 / 3.0)
                se = node + d[0] / 2.0
                e = node + d[0] + d[2] / 2.0
                ne = node + d[1] / 2.0
                self._add_square(node, se, center, ne)
                self._add_square(se, south_east, e, center)
                self._add_square(ne, center, e, north_east)

            if (lattice.contains_edge(node, north_east) and lattice.contains_edge(north_east, north)
                    and lattice.contains_edge(north, node)):
                center = node + d[1] * (2.0 / 3.0) + d[3] * (1.0 / 3.0)
                ne = node + d[1] / 2.0
                nne = node + d[1] + d[3] / 2.0
                n = node + d[2] / 2.0
                self._add_square(node, ne, center, n)
                self._add_square(ne, north_east, nne, center)
                self._add_square(n, center, nne, north)

    def _add_point(self, point: Vector2D) -> int:
        index = self._point_index.get(point)
        if index is None:
            index = len(self._points)
            self._point_index[point] = index
            self._points.append(to_cartesian(point))
        return index

    def _add_square(self, a: Vector2D, b: Vector2D, c: Vector2D, d: Vector2D) -> None:
        corners = (self._add_point(a), self._add_point(b), self._add_point(c), self._add_point(d))
        square = Square(len(self._squares), corners)
        self._squares.append(square)
        for key in square.edges():
            self._edge_squares.setdefault(key, []).append(square)
            self._walls[key] = True

    def _find_boundary_squares(self) -> List[Square]:
        found: Dict[Square, None] = {}
        for owners in self._edge_squares.values():
            if len(owners) == 1:
                found[owners[0]] = None
        squares = list(found)
        if not squares:
            return []
        centers = np.array([self.position(s) for s in squares])
        angles = np.arctan2(centers[:, 1], centers[:, 0])
        order = np.lexsort((np.array([s.index for s in squares]), angles))
        return [squares[i] for i in order]

    def _step_relaxation(self) -> None:
        """Move every point a fixed step towards the pull of its squares.

        For each corner of a square the other three corners are rotated by
        90, 180 and 270 degrees around the square's centre; the average is
        the corner's target.
        """
        corners = self.positions[self._corners]
        center = corners.mean(axis=1, keepdims=True)
        relative = corners - center
        target = np.zeros_like(relative)
        for k in (1, 2, 3):
            target += _rotate_quarter_turns(np.roll(relative, -k, axis=1), k)
        target = target / 3.0 + center

        velocity = np.zeros_like(self.positions)
        np.add.at(velocity, self._corners, target - corners)
        magnitude = np.linalg.norm(velocity, axis=1)
        moving = magnitude > 0
        self.positions[moving] += velocity[moving] / magnitude[moving, None] * self.STEP_LENGTH

    # --- Graph contract -----------------------------------------------
    def nodes(self) -> List[Square]:
        return list(self._squares)

    def contains(self, node) -> bool:
        return isinstance(node, Square) and 0 <= node.index < len(self._squares) and self._squares[node.index] == node

    def neighbors(self, node: Square) -> List[Square]:
        result = []
        for key in node.edges():
            for square in self._edge_squares[key]:
                if square != node:
                    result.append(square)
        return result

    def edge_key(self, a: Square, b: Square) -> Hashable:
        self._check_pair(a, b)
        common = set(a.corners) & set(b.corners)
        if len(common) == 2:
            key = edge_key(*common)
            owners = self._edge_squares.get(key, [])
            if a in owners and b in owners:
                return key
        raise AdjacencyError(a, b)

    def sides(self, node: Square) -> List[Side]:
        return [(f"side-{i}", self._walls[key]) for i, key in enumerate(node.edges())]

    def boundary(self) -> List[Square]:
        return list(self._boundary)

    def outward_key(self, node: Square) -> Hashable:
        for key in node.edges():
            if len(self._edge_squares[key]) == 1:
                return key
        raise ValueError(f"{node!r} is not on the boundary")

    # --- Geometry -----------------------------------------------------
    def corner_positions(self, node: Square) -> np.ndarray:
        """Relaxed planar positions of the four corners, shape ``(4, 2)``."""
        return self.positions[list(node.corners)]

    def position(self, node: Square) -> Tuple[float, float]:
        cx, cy = self.corner_positions(node).mean(axis=0)
        return (float(cx), float(cy))


def _rotate_quarter_turns(vectors: np.ndarray, turns: int) -> np.ndarray:
    x = vectors[..., 0]
    y = vectors[..., 1]
    turns %= 4
    if turns == 1:
        return np.stack((-y, x), axis=-1)
    if turns == 2:
        return np.stack((-x, -y), axis=-1)
    if turns == 3:
        return np.stack((y, -x), axis=-1)
    return vectors.copy()
