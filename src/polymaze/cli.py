import argparse
import logging
from typing import List, Optional

from .config import MazeConfig
from .errors import MazeError
from .maze import Maze
from .topology import Topology

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a perfect maze and save it as line art")
    p.add_argument("--topology", choices=[t.value for t in Topology], default="polar", help="Maze shape")
    p.add_argument("--size", type=int, default=9, help="Rings (polar, hexhex, irregular) or side length (rect, tri, trihex)")
    p.add_argument("--entries", type=int, default=3, help="Number of entries opened on the boundary")
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    p.add_argument("--out", type=str, default="maze.svg", help="Output image, format taken from the suffix")
    p.add_argument("--line-width", type=float, default=1.5, help="Wall stroke width")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    config = MazeConfig(
        topology=args.topology,
        size=args.size,
        entry_count=args.entries,
        seed=args.seed,
        line_width=args.line_width,
    )
    try:
        maze = Maze.from_config(config)
    except MazeError as exc:
        parser.error(str(exc))

    print(f"Maze: {maze.topology.value} size={maze.size} cells={len(maze.grid)} entries={len(maze.entries)} seed={maze.seed}")
    maze.render(savepath=args.out, figsize=config.figsize, line_width=config.line_width)


if __name__ == "__main__":
    main()
