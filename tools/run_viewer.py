#!/usr/bin/env python3
# Minimal interactive level browser (no gameplay).
# - Sources: level text goldens or the generator
# - Next / previous level: RIGHT / LEFT (wraps like the game's level cycle)
# - Hazard visibility toggle: R
# - Source toggle (FILE <-> GEN): G
# - 30 Hz loop

import argparse, logging, os
import pygame
from gridworld.levelfile import read_level
from gridworld.levels import golden_name, next_level, prev_level
from gridworld.mapgen.generator import generate
from gridworld.render.palette import MARKER_END, MARKER_START
from gridworld.render.tileset import Tileset
from gridworld.tiles import Category

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--level", type=int, default=1, help="Level (1..10)")
    ap.add_argument("--tile", type=int, default=40, help="Tile size in pixels")
    ap.add_argument("--source", choices=["file", "gen"], default="gen",
                    help="Where to load the board from")
    ap.add_argument("--indir", type=str, default=os.path.join("data", "golden_levels"),
                    help="Directory containing NN.txt levels when --source=file")
    ap.add_argument("--show-hazards", action="store_true", help="Start with hazards visible")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO)

    pygame.init()
    clock = pygame.time.Clock()
    tiles = Tileset(args.tile)

    level = args.level
    source_mode = args.source
    show_hazards = args.show_hazards

    def load_board():
        if source_mode == "file":
            return read_level(os.path.join(args.indir, golden_name(level)))
        return generate(level)

    board = load_board()
    screen = pygame.display.set_mode((board.size * args.tile, board.size * args.tile))
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in (pygame.K_RIGHT, pygame.K_PAGEUP):
                    level = next_level(level)
                    board = load_board()
                elif ev.key in (pygame.K_LEFT, pygame.K_PAGEDOWN):
                    level = prev_level(level)
                    board = load_board()
                elif ev.key == pygame.K_g:
                    source_mode = "gen" if source_mode == "file" else "file"
                    board = load_board()
                elif ev.key == pygame.K_r:
                    show_hazards = not show_hazards

        screen.fill((0, 0, 0))
        for x, y in board.coords():
            c = board.cell(x, y)
            origin = (x * args.tile, y * args.tile)
            visible = show_hazards or c.revealed
            screen.blit(tiles.get(c.category, visible), origin)
            if c.category is Category.START:
                pygame.draw.rect(screen, MARKER_START, tiles.marker_rect(origin))
            elif c.category is Category.END:
                pygame.draw.rect(screen, MARKER_END, tiles.marker_rect(origin))

        pygame.display.set_caption(
            f"Grid World Viewer - Sector {level}  [{source_mode.upper()}]  HAZARDS:{show_hazards}"
        )
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()

if __name__ == "__main__":
    main()
