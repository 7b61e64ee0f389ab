# src/gridworld/levelfile.py
"""
Plain-text level format: one line per row, one glyph per cell.

    .  empty      #  wall      ^  hazard
    S  start      E  end

Golden fixtures under data/golden_levels/ and the tools' output use it.
"""

from typing import Dict, Iterable, List

from .grid import Board, Cell
from .tiles import Category

GLYPHS: Dict[Category, str] = {
    Category.EMPTY: ".",
    Category.WALL: "#",
    Category.HAZARD: "^",
    Category.START: "S",
    Category.END: "E",
}
CATEGORIES: Dict[str, Category] = {g: c for c, g in GLYPHS.items()}

def board_to_lines(board: Board, show_hazards: bool = True) -> List[str]:
    """Hidden hazards print as empty unless revealed or show_hazards is set."""
    lines = []
    for row in board.cells:
        out = []
        for c in row:
            if c.category is Category.HAZARD and not (show_hazards or c.revealed):
                out.append(GLYPHS[Category.EMPTY])
            else:
                out.append(GLYPHS[c.category])
        lines.append("".join(out))
    return lines

def parse_lines(lines: Iterable[str]) -> Board:
    rows = [ln.rstrip("\r\n") for ln in lines]
    rows = [r for r in rows if r]
    size = len(rows)
    if size == 0:
        raise ValueError("empty level")
    if any(len(r) != size for r in rows):
        raise ValueError(f"expected {size} rows of {size} glyphs")

    cells: List[List[Cell]] = []
    starts, ends = [], []
    for y, r in enumerate(rows):
        row = []
        for x, g in enumerate(r):
            cat = CATEGORIES.get(g)
            if cat is None:
                raise ValueError(f"unknown glyph {g!r} at ({x},{y})")
            if cat is Category.START:
                starts.append((x, y))
            elif cat is Category.END:
                ends.append((x, y))
            row.append(Cell(x, y, cat))
        cells.append(row)

    if len(starts) != 1 or len(ends) != 1:
        raise ValueError(
            f"level needs exactly one S and one E (found {len(starts)} and {len(ends)})"
        )
    return Board(cells=cells, start=starts[0], end=ends[0])

def read_level(path: str) -> Board:
    with open(path, encoding="utf-8") as f:
        return parse_lines(f)

def write_level(board: Board, path: str, show_hazards: bool = True) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for line in board_to_lines(board, show_hazards=show_hazards):
            f.write(line + "\n")
