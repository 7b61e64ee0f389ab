# src/gridworld/mapgen/generator.py
# Level generator: seeded layout, reachability gates, rejection-retry.

import logging
from typing import Optional

from ..config import DEFAULT, GenConfig
from ..grid import Board, blank_cells
from ..rng import Mulberry32, seed_for_level
from ..tiles import Category, blocks_safe_walk, blocks_walk
from .placement import draw_endpoints, mark_endpoints, scatter
from .reach import has_path

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when no valid board is found within the fallback budget."""


def try_layout(rng: Mulberry32, config: GenConfig) -> Optional[Board]:
    """
    One attempt. Returns a valid board, or None when either gate fails:
      1) walls alone must leave start connected to end
      2) walls + hazards must still leave a hazard-free route
    """
    cells = blank_cells(config.size)
    start, end = draw_endpoints(rng, config)
    mark_endpoints(cells, start, end)

    scatter(cells, rng, Category.WALL, config.wall_density)
    if not has_path(cells, start, end, blocks_walk):
        return None

    scatter(cells, rng, Category.HAZARD, config.hazard_density)
    if not has_path(cells, start, end, blocks_safe_walk):
        return None
    return Board(cells=cells, start=start, end=end)


def build_for_seed(seed: int, config: GenConfig) -> Optional[Board]:
    # Attempts share one stream; they are never reseeded individually.
    rng = Mulberry32(seed)
    for attempt in range(config.max_attempts):
        board = try_layout(rng, config)
        if board is not None:
            logger.debug("seed %d accepted on attempt %d", seed, attempt + 1)
            return board
    return None


def generate(level: int, config: GenConfig = DEFAULT) -> Board:
    """
    Deterministic board for `level` (>= 1).

    If the attempt budget runs out, generation continues from the seed of
    level + 1 (then + 2, ...). The returned board then belongs to that
    fallback seed; the caller keeps displaying the requested level number.
    """
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    config.validate()

    for offset in range(config.max_fallbacks + 1):
        seed_level = level + offset
        board = build_for_seed(seed_for_level(seed_level, config.seed_multiplier), config)
        if board is not None:
            return board
        logger.warning(
            "level %d: no valid board from seed level %d after %d attempts",
            level, seed_level, config.max_attempts,
        )
    raise GenerationError(
        f"level {level}: no valid board after {config.max_fallbacks} fallbacks; "
        f"check densities for size {config.size}"
    )
