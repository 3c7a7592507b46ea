# tools/run_game.py
# Playable pygame front end for the engine.
# - Left click: rotate anticlockwise, right click: clockwise
# - Middle click (or L + left click): lock/unlock a tile
# - N: new game with a fresh seed, R: restart the current seed, Esc: quit

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

from netgame.engine.moves import LEFT_BUTTON, MIDDLE_BUTTON, RIGHT_BUTTON, make_move
from netgame.engine.connectivity import compute_active
from netgame.log_utils import setup_logging
from netgame.mapgen.generator import generate
from netgame.params import GameParams, default_params, fetch_preset
from netgame.render.board import cell_at, render_board
from netgame.rng import new_seed_string
from netgame.ui.status_bar import render_status_bar, status_for

log = logging.getLogger("netgame.run_game")

STATUS_H = 24

_BUTTONS = {1: LEFT_BUTTON, 2: MIDDLE_BUTTON, 3: RIGHT_BUTTON}


def main(argv: Optional[list] = None) -> int:
    defaults = default_params()
    parser = argparse.ArgumentParser(description="Net puzzle (pygame)")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--wrap", action="store_true", default=defaults.wrapping)
    parser.add_argument("--barriers", type=float, default=defaults.barrier_probability, help="barrier probability 0..1")
    parser.add_argument("--preset", type=int, default=None)
    parser.add_argument("--seed", type=str, default=None)
    parser.add_argument("--tile", type=int, default=32, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    params = GameParams(args.width, args.height, args.wrap, args.barriers)
    if args.preset is not None:
        found = fetch_preset(args.preset)
        if found is None:
            raise SystemExit(f"no preset {args.preset}")
        _, p = found
        params = GameParams(p.width, p.height, p.wrapping, args.barriers)

    seed = args.seed or new_seed_string()
    state = generate(params, seed)
    log.info("seed %s", seed)

    pygame.init()
    board_img = render_board(state, tile=args.tile)
    bw, bh = board_img.size
    screen = pygame.display.set_mode((bw, bh + STATUS_H))
    pygame.display.set_caption(f"Net {params.name} (seed {seed})")
    clock = pygame.time.Clock()

    dirty = True
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_n:
                    seed = new_seed_string()
                    state = generate(params, seed)
                    pygame.display.set_caption(f"Net {params.name} (seed {seed})")
                    log.info("seed %s", seed)
                    dirty = True
                elif event.key == pygame.K_r:
                    state = generate(params, seed)
                    dirty = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in _BUTTONS:
                cell = cell_at(event.pos[0], event.pos[1], state, tile=args.tile)
                if cell is None:
                    continue
                button = _BUTTONS[event.button]
                if button == LEFT_BUTTON and pygame.key.get_pressed()[pygame.K_l]:
                    button = MIDDLE_BUTTON
                new_state = make_move(state, cell[0], cell[1], button)
                if new_state is not None:
                    state = new_state
                    dirty = True

        if dirty:
            active = compute_active(state)
            img = render_board(state, tile=args.tile, active=active)
            surf = pygame.image.frombuffer(img.tobytes(), img.size, "RGBA")
            screen.fill((0, 0, 0))
            screen.blit(surf, (0, 0))
            render_status_bar(screen, (0, bh), bw, STATUS_H, status_for(state, active))
            pygame.display.flip()
            dirty = False

        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
