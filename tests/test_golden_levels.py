import os
from gridworld.levelfile import board_to_lines, read_level
from gridworld.levels import LEVEL_COUNT, golden_name
from gridworld.mapgen.generator import generate

GOLDEN_DIR = os.path.join(os.path.dirname(__file__), "..", "data", "golden_levels")

def test_goldens_match():
    for lvl in range(1, LEVEL_COUNT + 1):
        want = read_level(os.path.join(GOLDEN_DIR, golden_name(lvl)))
        got = generate(lvl)
        assert got.start == want.start, f"start mismatch at level {lvl}"
        assert got.end == want.end, f"end mismatch at level {lvl}"
        assert board_to_lines(got) == board_to_lines(want), f"Mismatch at level {lvl}"
