"""Exceptions raised while building, carving or opening a maze.

Every failure is a local validation error: nothing is retried and a maze is
either fully generated or not at all.
"""
from typing import Any, Optional, Tuple


class MazeError(Exception):
    """Base class for all maze generation errors."""


class AdjacencyError(MazeError, ValueError):
    """A wall was addressed between nodes that are equal, unknown or not neighbours."""

    def __init__(self, a: Any, b: Any, reason: str = "Positions are not neighbours.") -> None:
        self.a = a
        self.b = b
        super().__init__(f"{reason} ({a!r}, {b!r})")


class SizeOutOfRange(MazeError, ValueError):
    """The requested size is outside of what the topology supports."""

    def __init__(self, size: int, bounds: Tuple[int, Optional[int]], topology: str = "") -> None:
        self.size = size
        self.bounds = bounds
        low, high = bounds
        expected = f">= {low}" if high is None else f"in [{low}, {high}]"
        prefix = f"{topology} " if topology else ""
        super().__init__(f"{prefix}size {size} out of range, expected {expected}")


class InvalidEntryCount(MazeError, ValueError):
    """Zero entries, or more entries than the boundary has cells."""

    def __init__(self, count: int, available: Optional[int] = None) -> None:
        self.count = count
        self.available = available
        if available is None:
            message = f"entry count must be positive, got {count}"
        else:
            message = f"entry count must be between 1 and {available}, got {count}"
        super().__init__(message)


class UnknownTopology(MazeError, ValueError):
    def __init__(self, name: Any, known: Tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        message = f"unknown topology {name!r}"
        if known:
            message += f" (choose one of: {', '.join(known)})"
        super().__init__(message)
