from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .tiles import Category

Coord = Tuple[int, int]  # (x, y) == (column, row)

@dataclass
class Cell:
    x: int
    y: int
    category: Category = Category.EMPTY
    # Only meaningful for hazards; flipped by whoever applies moves, never here.
    revealed: bool = False

def blank_cells(size: int) -> List[List[Cell]]:
    """Fresh size×size matrix of EMPTY cells, indexed cells[y][x]."""
    return [[Cell(x, y) for x in range(size)] for y in range(size)]

def row_major(size: int) -> Iterator[Coord]:
    for y in range(size):
        for x in range(size):
            yield (x, y)

@dataclass
class Board:
    cells: List[List[Cell]]
    start: Coord
    end: Coord

    @property
    def size(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def category_at(self, x: int, y: int) -> Category:
        return self.cells[y][x].category

    def coords(self) -> Iterator[Coord]:
        return row_major(self.size)

    def categories(self) -> List[List[Category]]:
        return [[c.category for c in row] for row in self.cells]

    def count(self, category: Category) -> int:
        return sum(1 for row in self.cells for c in row if c.category is category)
