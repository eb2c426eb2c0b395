from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterable, List, Set, Tuple

from .errors import AdjacencyError, InvalidEntryCount

Side = Tuple[str, bool]


class Grid(ABC):
    """Common graph contract shared by every maze topology.

    Walls live in a single store keyed by a canonical edge key, so a wall is
    the same boolean whichever endpoint it is addressed from. Walls towards
    the outside of the maze use keys of their own in the same store.
    ``True`` means the wall is present.
    """

    def __init__(self) -> None:
        self._walls: Dict[Hashable, bool] = {}

    # --- Graph contract -----------------------------------------------
    @abstractmethod
    def nodes(self) -> List[Any]:
        """All nodes, in a fixed order."""

    @abstractmethod
    def contains(self, node: Any) -> bool:
        ...

    @abstractmethod
    def neighbors(self, node: Any) -> List[Any]:
        """Adjacent nodes that exist in the grid, never ``node`` itself."""

    @abstractmethod
    def edge_key(self, a: Any, b: Any) -> Hashable:
        """Canonical key of the wall between ``a`` and ``b``.

        Raises AdjacencyError if the nodes are equal, unknown or not adjacent.
        """

    def wall(self, a: Any, b: Any) -> bool:
        return self._walls[self.edge_key(a, b)]

    def set_wall(self, a: Any, b: Any, value: bool) -> None:
        self._walls[self.edge_key(a, b)] = bool(value)

    def _check_pair(self, a: Any, b: Any) -> None:
        if a == b:
            raise AdjacencyError(a, b, "Positions are equal.")
        if not self.contains(a) or not self.contains(b):
            raise AdjacencyError(a, b, "Positions are not on the grid.")

    # --- Entries ------------------------------------------------------
    @abstractmethod
    def boundary(self) -> List[Any]:
        """Boundary nodes in perimeter traversal order."""

    @abstractmethod
    def outward_key(self, node: Any) -> Hashable:
        """Key of the outward facing wall cleared when ``node`` becomes an entry."""

    def generate_entries(self, count: int) -> List[Any]:
        """Pick ``count`` boundary nodes spread evenly along the perimeter."""
        boundary = self.boundary()
        if count < 1 or count > len(boundary):
            raise InvalidEntryCount(count, len(boundary))
        spacing = len(boundary) // count
        return [boundary[i * spacing] for i in range(count)]

    def open_entries(self, entries: Iterable[Any]) -> None:
        """Clear the outward wall of every entry, or of none if one is invalid."""
        keys = []
        for entry in entries:
            if not self.contains(entry):
                raise ValueError(f"{entry!r} is not on the grid")
            key = self.outward_key(entry)
            if key not in self._walls:
                raise ValueError(f"{entry!r} has no outward wall {key!r}")
            keys.append(key)
        for key in keys:
            self._walls[key] = False

    # --- Rendering / inspection ---------------------------------------
    @abstractmethod
    def sides(self, node: Any) -> List[Side]:
        """Ordered ``(label, is_wall)`` pairs for every side of ``node``."""

    def wall_count(self, node: Any) -> int:
        return sum(1 for _, is_wall in self.sides(node) if is_wall)

    def wall_state(self) -> Dict[Hashable, bool]:
        return dict(self._walls)

    def interior_keys(self) -> Set[Hashable]:
        return {self.edge_key(node, other) for node in self.nodes() for other in self.neighbors(node)}

    def __len__(self) -> int:
        return len(self.nodes())
