# src/gridworld/mapgen/placement.py
from typing import List, Tuple

from ..config import GenConfig
from ..grid import Cell, Coord, row_major
from ..rng import Mulberry32
from ..tiles import Category

def draw_endpoints(rng: Mulberry32, config: GenConfig) -> Tuple[Coord, Coord]:
    """
    Start in the top-left quadrant, end in the bottom-right one.

    Draw order is start.x, start.y, end.x, end.y. A colliding end is redrawn
    uniformly over the whole board (x then y) at most `max_end_redraws` times;
    after that the first row-major coordinate differing from start is used.
    """
    n = config.size
    half = n // 2
    start = (rng.bounded(half), rng.bounded(half))
    end = (half + rng.bounded(n - half), half + rng.bounded(n - half))

    redraws = 0
    while end == start and redraws < config.max_end_redraws:
        end = (rng.bounded(n), rng.bounded(n))
        redraws += 1
    if end == start:
        end = next(c for c in row_major(n) if c != start)
    return start, end

def mark_endpoints(cells: List[List[Cell]], start: Coord, end: Coord) -> None:
    sx, sy = start
    ex, ey = end
    cells[sy][sx].category = Category.START
    cells[ey][ex].category = Category.END

def scatter(
    cells: List[List[Cell]],
    rng: Mulberry32,
    category: Category,
    density: float,
) -> int:
    """
    Row-major pass over EMPTY cells: one draw per cell, and the cell becomes
    `category` when the draw is below `density`. Non-empty cells consume no
    draw. Returns how many cells changed.
    """
    placed = 0
    for x, y in row_major(len(cells)):
        c = cells[y][x]
        if c.category is not Category.EMPTY:
            continue
        if rng.next() < density:
            c.category = category
            placed += 1
    return placed
