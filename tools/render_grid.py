#!/usr/bin/env python3
# Render generated levels (or level text files) to PNGs using Pillow.

import argparse, os
from PIL import Image, ImageDraw

from gridworld.levelfile import read_level
from gridworld.levels import LEVEL_COUNT, golden_name
from gridworld.mapgen.generator import generate
from gridworld.render.palette import GRID_LINE, MARKER_END, MARKER_START, color_for
from gridworld.tiles import Category

MARKERS = {Category.START: MARKER_START, Category.END: MARKER_END}

def render_board(board, out_png, tile_size=32, margin=0, show_hazards=False):
    n = board.size
    w = h = n * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 255))
    draw = ImageDraw.Draw(canvas)
    for x, y in board.coords():
        c = board.cell(x, y)
        x0 = margin + x * tile_size
        y0 = margin + y * tile_size
        box = (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)
        draw.rectangle(box, fill=color_for(c.category, c.revealed, show_hazards), outline=GRID_LINE)
        marker = MARKERS.get(c.category)
        if marker is not None:
            s = max(2, tile_size // 4)
            off = (tile_size - s) // 2
            draw.ellipse((x0 + off, y0 + off, x0 + off + s, y0 + off + s), fill=marker)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--first", type=int, default=1, help="First level to render")
    ap.add_argument("--last", type=int, default=LEVEL_COUNT, help="Last level to render")
    ap.add_argument("--indir", type=str, default=None,
                    help="Render NN.txt level files from here instead of generating")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=32, help="Tile size in pixels")
    ap.add_argument("--show-hazards", action="store_true", help="Draw hidden hazards")
    args = ap.parse_args()

    for lvl in range(args.first, args.last + 1):
        if args.indir:
            board = read_level(os.path.join(args.indir, golden_name(lvl)))
        else:
            board = generate(lvl)
        png = os.path.join(args.outdir, f"{lvl:02d}.png")
        render_board(board, png, tile_size=args.tile, show_hazards=args.show_hazards)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
