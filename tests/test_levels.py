from gridworld.levels import LEVEL_COUNT, golden_name, next_level, prev_level

def test_cycle_wraps():
    assert next_level(1) == 2
    assert next_level(9) == 10
    assert next_level(LEVEL_COUNT) == 1
    assert prev_level(1) == LEVEL_COUNT
    assert prev_level(10) == 9

def test_next_then_prev_is_identity():
    for lvl in range(1, LEVEL_COUNT + 1):
        assert prev_level(next_level(lvl)) == lvl

def test_golden_name():
    assert golden_name(3) == "03.txt"
    assert golden_name(10) == "10.txt"
