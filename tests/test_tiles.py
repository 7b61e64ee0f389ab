from gridworld.tiles import Category, blocks_safe_walk, blocks_walk, is_endpoint

def test_walk_blocks_only_walls():
    assert blocks_walk(Category.WALL)
    for c in (Category.EMPTY, Category.HAZARD, Category.START, Category.END):
        assert not blocks_walk(c)

def test_safe_walk_blocks_walls_and_hazards():
    assert blocks_safe_walk(Category.WALL)
    assert blocks_safe_walk(Category.HAZARD)
    for c in (Category.EMPTY, Category.START, Category.END):
        assert not blocks_safe_walk(c)

def test_endpoints():
    assert is_endpoint(Category.START) and is_endpoint(Category.END)
    assert not is_endpoint(Category.WALL)
