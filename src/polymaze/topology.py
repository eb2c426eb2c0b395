from enum import Enum
from typing import Dict, Optional, Type, Union
import random

from .errors import UnknownTopology
from .graph import Grid
from .hexhex import HexHexGrid
from .irregular import IrregularGrid
from .polar import PolarGrid
from .rect import RectGrid
from .trigrid import TriGrid
from .trihex import TriHexGrid


class Topology(str, Enum):
    RECT = "rect"
    POLAR = "polar"
    HEXHEX = "hexhex"
    TRIHEX = "trihex"
    TRI = "tri"
    IRREGULAR = "irregular"


GRID_TYPES: Dict[Topology, Type[Grid]] = {
    Topology.RECT: RectGrid,
    Topology.POLAR: PolarGrid,
    Topology.HEXHEX: HexHexGrid,
    Topology.TRIHEX: TriHexGrid,
    Topology.TRI: TriGrid,
    Topology.IRREGULAR: IrregularGrid,
}


def parse_topology(name: Union[str, Topology]) -> Topology:
    """Case-insensitive lookup of a topology by its name."""
    if isinstance(name, Topology):
        return name
    try:
        return Topology(str(name).strip().lower())
    except ValueError:
        raise UnknownTopology(name, tuple(t.value for t in Topology)) from None


def create_grid(topology: Union[str, Topology], size: int, rng: Optional[random.Random] = None) -> Grid:
    """Build a fully walled grid of the given topology."""
    grid_type = GRID_TYPES[parse_topology(topology)]
    return grid_type.create(size, rng)
