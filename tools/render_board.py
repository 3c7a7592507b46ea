#!/usr/bin/env python3
# Render a generated board to PNG using Pillow.

import argparse, logging, os

from netgame.log_utils import setup_logging
from netgame.mapgen.generator import generate_board, unshuffle
from netgame.engine.state import duplicate
from netgame.params import GameParams
from netgame.render.board import render_board


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=7)
    ap.add_argument("--height", type=int, default=7)
    ap.add_argument("--wrap", action="store_true")
    ap.add_argument("--barriers", type=float, default=0.0)
    ap.add_argument("--seed", type=str, required=True)
    ap.add_argument("--tile", type=int, default=32, help="Tile size in pixels")
    ap.add_argument("--solved", action="store_true", help="Draw the unshuffled solution")
    ap.add_argument("--out", type=str, default="out/board.png")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    params = GameParams(args.width, args.height, args.wrap, args.barriers)
    board = generate_board(params, args.seed)
    state = board.state
    if args.solved:
        state = duplicate(state)
        state.tiles = unshuffle(state.tiles, board.rotations)

    img = render_board(state, tile=args.tile)
    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    img.save(args.out)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
