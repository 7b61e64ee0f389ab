# Level progression: the game cycles through a fixed set of sectors.

LEVEL_COUNT = 10

def next_level(level: int) -> int:
    # After the last level the cycle wraps to 1.
    return (level % LEVEL_COUNT) + 1

def prev_level(level: int) -> int:
    return LEVEL_COUNT if level <= 1 else level - 1

def golden_name(level: int) -> str:
    return f"{level:02d}.txt"
