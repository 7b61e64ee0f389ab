# tests/test_reach.py
from gridworld.levelfile import parse_lines
from gridworld.mapgen.reach import has_path, reachable
from gridworld.tiles import blocks_safe_walk, blocks_walk

# Hazard column splits the board; a wall gap leaves one safe detour.
DETOUR = [
    "S.^..",
    "..^..",
    "..^..",
    "..#..",
    "....E",
]

SEALED = [
    "S.^..",
    "..^..",
    "..^..",
    "..^..",
    "..^.E",
]

WALLED = [
    "S.#..",
    "..#..",
    "..#..",
    "..#..",
    "..#.E",
]

def test_detour_is_safe():
    b = parse_lines(DETOUR)
    assert has_path(b.cells, b.start, b.end, blocks_walk)
    assert has_path(b.cells, b.start, b.end, blocks_safe_walk)

def test_hazards_only_block_safe_walk():
    b = parse_lines(SEALED)
    assert has_path(b.cells, b.start, b.end, blocks_walk)
    assert not has_path(b.cells, b.start, b.end, blocks_safe_walk)

def test_walls_block_everything():
    b = parse_lines(WALLED)
    assert not has_path(b.cells, b.start, b.end, blocks_walk)
    assert not has_path(b.cells, b.start, b.end, blocks_safe_walk)

def test_no_diagonal_moves():
    b = parse_lines([
        "S#.",
        "#..",
        "..E",
    ])
    assert not has_path(b.cells, b.start, b.end, blocks_walk)

def test_reachable_set_stays_in_bounds():
    b = parse_lines(WALLED)
    got = reachable(b.cells, b.start, blocks_walk)
    assert got == {(x, y) for y in range(5) for x in range(2)}

def test_start_always_reachable_even_when_boxed_in():
    b = parse_lines([
        "S#E",
        "#..",
        "...",
    ])
    assert reachable(b.cells, b.start, blocks_walk) == {(0, 0)}
