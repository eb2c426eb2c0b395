from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidEntryCount, SizeOutOfRange
from .topology import parse_topology


@dataclass
class MazeConfig:
    topology: str = "polar"
    size: int = 9
    entry_count: int = 3
    seed: Optional[int] = None
    line_width: float = 1.5
    figsize: Tuple[float, float] = (6, 6)

    def validate(self) -> "MazeConfig":
        """Reject settings no topology accepts, before any grid is built.

        Topology specific limits (the irregular size range, the boundary
        length bounding the entry count) are checked by the grid itself.
        """
        parse_topology(self.topology)
        if self.size < 1:
            raise SizeOutOfRange(self.size, (1, None), str(self.topology))
        if self.entry_count < 1:
            raise InvalidEntryCount(self.entry_count)
        return self
