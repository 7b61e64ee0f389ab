from gridworld.render.palette import COLORS, color_for
from gridworld.tiles import Category

def test_hidden_hazard_looks_like_floor():
    assert color_for(Category.HAZARD) == COLORS[Category.EMPTY]

def test_revealed_or_debug_hazard_is_distinct():
    assert color_for(Category.HAZARD, revealed=True) == COLORS[Category.HAZARD]
    assert color_for(Category.HAZARD, show_hazards=True) == COLORS[Category.HAZARD]
    assert COLORS[Category.HAZARD] != COLORS[Category.EMPTY]

def test_every_category_has_a_color():
    for c in Category:
        assert len(color_for(c)) == 4
