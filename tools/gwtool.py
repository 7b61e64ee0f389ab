#!/usr/bin/env python3
import argparse, logging, os, sys
from gridworld.config import DEFAULT
from gridworld.levelfile import board_to_lines, write_level
from gridworld.levels import LEVEL_COUNT, golden_name
from gridworld.mapgen.generator import generate
from gridworld.tiles import Category

def cmd_emit(args):
    board = generate(args.level)
    if args.out == "-":
        for line in board_to_lines(board, show_hazards=not args.hide_hazards):
            print(line)
        return
    write_level(board, args.out, show_hazards=not args.hide_hazards)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for lvl in range(1, args.count + 1):
        write_level(generate(lvl), os.path.join(args.outdir, golden_name(lvl)))
    print(f"Wrote golden pack to {args.outdir}")

def cmd_stats(args):
    walls = hazards = cells = 0
    for lvl in range(args.first, args.last + 1):
        board = generate(lvl)
        walls += board.count(Category.WALL)
        hazards += board.count(Category.HAZARD)
        cells += board.size * board.size - 2
    open_cells = cells - walls
    print(f"levels {args.first}..{args.last}: "
          f"wall {walls / cells:.4f} (target {DEFAULT.wall_density}), "
          f"hazard {hazards / open_cells:.4f} of non-wall (target {DEFAULT.hazard_density})")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--out', type=str, default='-')
    p1.add_argument('--hide-hazards', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--outdir', type=str, default=os.path.join('data', 'golden_levels'))
    p2.add_argument('--count', type=int, default=LEVEL_COUNT)
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('stats')
    p3.add_argument('--first', type=int, default=1)
    p3.add_argument('--last', type=int, default=500)
    p3.set_defaults(func=cmd_stats)
    args = p.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args.func(args)

if __name__ == '__main__':
    main()
