from typing import Any, Iterable, List, Optional
import logging
import random

from .graph import Grid

logger = logging.getLogger(__name__)


def depth_first_carve(graph: Grid, starts: Iterable[Any], rng: Optional[random.Random] = None) -> int:
    """Carve a spanning forest into ``graph`` with interleaved randomized DFS.

    One stack is grown from every start node. Each round gives every
    non-empty stack a single step in order: pop the top node, and if it still
    has unvisited neighbours pick one at random, open the wall to it, mark it
    visited and push it. The popped node is pushed back first when more than
    one unvisited neighbour remains. Stacks that meet simply stop at each
    other's visited cells, so the result has one tree per distinct start.

    Returns the number of walls opened.
    """
    rng = rng if rng is not None else random.Random()
    starts = list(dict.fromkeys(starts))
    visited = set(starts)
    stacks: List[List[Any]] = [[start] for start in starts]

    opened = 0
    rounds = 0
    while any(stacks):
        rounds += 1
        for stack in stacks:
            if not stack:
                continue
            current = stack.pop()
            unvisited = [n for n in graph.neighbors(current) if n not in visited]
            if len(unvisited) > 1:
                stack.append(current)
            if unvisited:
                chosen = rng.choice(unvisited)
                graph.set_wall(current, chosen, False)
                visited.add(chosen)
                stack.append(chosen)
                opened += 1

    logger.debug("carved %d passages from %d start(s) in %d rounds", opened, len(starts), rounds)
    return opened
