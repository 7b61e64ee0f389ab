# src/gridworld/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import Category
from .palette import GRID_LINE, color_for

class Tileset:
    """
    Tiny cached surface factory for the level viewer:
      - one flat colour per (category, visible-hazard) pair, see palette.py
      - 1px grid line so empty floor stays readable
      - returns pygame.Surface of exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, category: Category, hazard_visible: bool = False) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(color_for(category, show_hazards=hazard_visible))
        pygame.draw.rect(img, GRID_LINE, img.get_rect(), 1)
        return img

    def marker_rect(self, origin: Tuple[int, int]) -> pygame.Rect:
        # Small centred square used for start/end markers.
        s = max(2, self.tile_size // 4)
        x, y = origin
        off = (self.tile_size - s) // 2
        return pygame.Rect(x + off, y + off, s, s)
