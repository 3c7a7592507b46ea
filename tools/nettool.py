#!/usr/bin/env python3
import argparse, csv, logging, sys

from netgame.log_utils import setup_logging
from netgame.mapgen.generator import generate_board
from netgame.params import PRESETS, GameParams, default_params, fetch_preset
from netgame.rng import new_seed_string
from netgame.ui.status_bar import status_text

# Box-drawing glyph per connection mask (R=1, U=2, L=4, D=8).
GLYPHS = " ╶╵└╴─┘┴╷┌│├┐┬┤┼"


def params_from_args(args) -> GameParams:
    if args.preset is not None:
        found = fetch_preset(args.preset)
        if found is None:
            raise SystemExit(f"no preset {args.preset}")
        _, p = found
        return GameParams(p.width, p.height, p.wrapping, args.barriers)
    return GameParams(args.width, args.height, args.wrap, args.barriers)


def write_tsv(mat, out):
    w = csv.writer(out, delimiter='\t', lineterminator='\n')
    for r in mat:
        w.writerow(r)


def cmd_emit(args):
    seed = args.seed or new_seed_string()
    board = generate_board(params_from_args(args), seed)
    grid = board.tree if args.solved else board.state.tiles
    if args.out:
        with open(args.out, 'w', newline='') as f:
            write_tsv(grid, f)
            f.write('\n')
            write_tsv(board.state.barriers, f)
        print(f"Wrote {args.out} (seed {seed})")
    else:
        write_tsv(grid, sys.stdout)
        print()
        write_tsv(board.state.barriers, sys.stdout)


def cmd_show(args):
    seed = args.seed or new_seed_string()
    board = generate_board(params_from_args(args), seed)
    grid = board.tree if args.solved else board.state.masks()
    print(f"seed {seed}")
    for row in grid:
        print("".join(GLYPHS[t & 0x0F] for t in row))
    print(status_text(board.state))


def cmd_presets(args):
    for i, p in enumerate(PRESETS):
        print(f"{i}\t{p.name}")


def add_board_args(p):
    d = default_params()
    p.add_argument('--width', type=int, default=d.width)
    p.add_argument('--height', type=int, default=d.height)
    p.add_argument('--wrap', action='store_true', default=d.wrapping)
    p.add_argument('--barriers', type=float, default=d.barrier_probability, help='barrier probability 0..1')
    p.add_argument('--preset', type=int, default=None, help='preset index (overrides size/wrap)')
    p.add_argument('--seed', type=str, default=None)
    p.add_argument('--solved', action='store_true', help='emit the unshuffled tree')


def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='count', default=0)
    p.add_argument('--log-file', type=str, default=None)
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    add_board_args(p1)
    p1.add_argument('--out', type=str, default=None)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('show')
    add_board_args(p2)
    p2.set_defaults(func=cmd_show)
    p3 = sub.add_parser('presets')
    p3.set_defaults(func=cmd_presets)
    args = p.parse_args()
    level = logging.WARNING if args.verbose == 0 else logging.INFO if args.verbose == 1 else logging.DEBUG
    setup_logging(level=level, color_logs=sys.stderr.isatty(), log_file=args.log_file)
    args.func(args)

if __name__ == '__main__':
    main()
