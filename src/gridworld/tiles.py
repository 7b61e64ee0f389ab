# Cell categories and the blocking rules used by the reachability check.
from enum import Enum

class Category(Enum):
    EMPTY = "EMPTY"
    WALL = "WALL"
    HAZARD = "HAZARD"
    START = "START"
    END = "END"

def blocks_walk(category: Category) -> bool:
    # Hazards are permeable here: only the wall layout decides solvability.
    return category is Category.WALL

def blocks_safe_walk(category: Category) -> bool:
    return category is Category.WALL or category is Category.HAZARD

def is_endpoint(category: Category) -> bool:
    return category is Category.START or category is Category.END
