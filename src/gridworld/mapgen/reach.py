# src/gridworld/mapgen/reach.py
# 4-connected breadth-first reachability over a cell matrix.

from collections import deque
from typing import Callable, List, Set

from ..grid import Cell, Coord
from ..tiles import Category

NEIGHBOURS = ((0, 1), (0, -1), (1, 0), (-1, 0))

def reachable(
    cells: List[List[Cell]],
    start: Coord,
    blocked: Callable[[Category], bool],
) -> Set[Coord]:
    """
    Every coordinate reachable from start moving up/down/left/right, never
    entering a cell whose category satisfies `blocked`. The start cell itself
    is always included. Each cell is enqueued at most once.
    """
    size = len(cells)
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < size and 0 <= ny < size):
                continue
            if (nx, ny) in seen or blocked(cells[ny][nx].category):
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    return seen

def has_path(
    cells: List[List[Cell]],
    start: Coord,
    end: Coord,
    blocked: Callable[[Category], bool],
) -> bool:
    return end in reachable(cells, start, blocked)
