from typing import Tuple

from ..tiles import Category

RGBA = Tuple[int, int, int, int]

COLORS = {
    Category.EMPTY:  (  0,   0,   0, 255),
    Category.WALL:   ( 38,  38,  38, 255),
    Category.HAZARD: (127,  29,  29, 255),   # revealed trap
    Category.START:  ( 23,  37,  84, 255),
    Category.END:    ( 64,  64,  64, 255),
}
GRID_LINE: RGBA = (38, 38, 38, 255)

def color_for(category: Category, revealed: bool = False, show_hazards: bool = False) -> RGBA:
    # Unrevealed hazards are indistinguishable from empty floor.
    if category is Category.HAZARD and not (revealed or show_hazards):
        return COLORS[Category.EMPTY]
    return COLORS[category]

MARKER_START: RGBA = (59, 130, 246, 255)
MARKER_END: RGBA = (255, 255, 255, 255)
