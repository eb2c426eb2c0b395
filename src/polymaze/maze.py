from typing import Any, List, Optional, Tuple
import logging
import random

from .carve import depth_first_carve
from .config import MazeConfig
from .graph import Grid
from .render import render_grid
from .topology import Topology, create_grid, parse_topology

logger = logging.getLogger(__name__)


class Maze:
    """A perfect maze over one of the supported topologies.

    The grid is built fully walled, entries are spread along its boundary,
    every entry grows its own tree of passages and finally the outward wall
    of each entry is opened. A single ``random.Random(seed)`` drives both
    construction (the irregular topology prunes edges at random) and carving,
    so a fixed seed reproduces the maze exactly.
    """

    def __init__(self, topology: str = "polar", size: int = 9, entry_count: int = 3, seed: Optional[int] = None) -> None:
        self.topology: Topology = parse_topology(topology)
        self.size = size
        self.entry_count = entry_count
        self.seed = seed
        self.grid: Grid
        self.entries: List[Any] = []
        self._generate()

    @classmethod
    def from_config(cls, config: MazeConfig) -> "Maze":
        config.validate()
        return cls(config.topology, config.size, config.entry_count, config.seed)

    def _generate(self) -> None:
        rng = random.Random(self.seed)
        grid = create_grid(self.topology, self.size, rng)
        # entries are validated before the first wall is touched
        entries = grid.generate_entries(self.entry_count)
        opened = depth_first_carve(grid, entries, rng)
        grid.open_entries(entries)
        self.grid = grid
        self.entries = entries
        logger.info(
            "generated %s maze: size=%d cells=%d entries=%d passages=%d seed=%s",
            self.topology.value, self.size, len(grid), len(entries), opened, self.seed,
        )

    def regenerate(self, seed: Optional[int] = None) -> None:
        """Replace the grid with a freshly carved one."""
        self.seed = seed
        self._generate()

    def render(self, savepath: Optional[str] = None, figsize: Tuple[float, float] = (6, 6), line_width: float = 1.5) -> None:
        render_grid(self.grid, savepath=savepath, figsize=figsize, line_width=line_width)
