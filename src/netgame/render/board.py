# src/netgame/render/board.py
# Draw a GameState to a Pillow RGBA image. Used by the PNG tool and the
# pygame runner (which blits the image each frame).

from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from ..engine.connectivity import ActiveMap, compute_active
from ..engine.state import GameState
from ..grid import DIRECTIONS, anticlockwise, delta, flip, iter_dirs
from ..tiles import is_endpoint

TILE_SIZE = 32
TILE_BORDER = 1
WINDOW_OFFSET = 16

RGBA = Tuple[int, int, int, int]

COL_BACKGROUND: RGBA = (204, 204, 204, 255)
COL_BORDER: RGBA = (102, 102, 102, 255)     # half the background
COL_LOCKED: RGBA = (153, 153, 153, 255)     # three quarters
COL_WIRE: RGBA = (0, 0, 0, 255)
COL_POWERED: RGBA = (0, 255, 255, 255)
COL_ENDPOINT: RGBA = (0, 0, 255, 255)
COL_BARRIER: RGBA = (255, 0, 0, 255)


def image_size(width: int, height: int, tile: int = TILE_SIZE, margin: int = WINDOW_OFFSET) -> Tuple[int, int]:
    return (width * tile + 2 * margin + TILE_BORDER, height * tile + 2 * margin + TILE_BORDER)


def cell_at(px: int, py: int, state: GameState, tile: int = TILE_SIZE, margin: int = WINDOW_OFFSET) -> Optional[Tuple[int, int]]:
    """Map a pixel to a tile, or None for the margin and tile borders."""
    px -= margin + TILE_BORDER
    py -= margin + TILE_BORDER
    if px < 0 or py < 0:
        return None
    tx, ty = px // tile, py // tile
    if tx >= state.width or ty >= state.height:
        return None
    if px % tile >= tile - TILE_BORDER or py % tile >= tile - TILE_BORDER:
        return None
    return tx, ty


def _draw_tile(draw: ImageDraw.ImageDraw, state: GameState, active: ActiveMap,
               x: int, y: int, tile: int, margin: int) -> None:
    bx = margin + tile * x
    by = margin + tile * y
    t = state.tile(x, y)
    powered = active.is_active(x, y)

    draw.rectangle([bx, by, bx + tile, by + tile], fill=COL_BORDER)
    draw.rectangle(
        [bx + TILE_BORDER, by + TILE_BORDER, bx + tile - 1, by + tile - 1],
        fill=COL_LOCKED if state.locked(x, y) else COL_BACKGROUND,
    )

    c = TILE_BORDER + (tile - TILE_BORDER) // 2
    arm = (tile - TILE_BORDER - 1) / 2.0
    wire = COL_POWERED if powered else COL_WIRE
    for d in iter_dirs(t):
        dx, dy = delta(d)
        end = (bx + c + int(arm * dx), by + c + int(arm * dy))
        draw.line([(bx + c, by + c), end], fill=COL_WIRE, width=3)
        draw.line([(bx + c, by + c), end], fill=wire, width=1)

    # Box in the middle: black for the centre, blue/cyan for endpoints.
    box = None
    if (x, y) == state.centre:
        box = COL_WIRE
    elif is_endpoint(t):
        box = COL_POWERED if powered else COL_ENDPOINT
    if box is not None:
        r = int(tile * 0.24)
        draw.rectangle([bx + c - r, by + c - r, bx + c + r, by + c + r], fill=box, outline=COL_WIRE)

    # Where a neighbour's wire meets this tile's border: a wire segment across
    # the border if this tile answers it, a black dot if not.
    for d in DIRECTIONS:
        dx, dy = delta(d)
        ox, oy = x + dx, y + dy
        if not state.in_bounds(ox, oy) or not state.tile(ox, oy) & flip(d):
            continue
        px = bx + (tile if dx > 0 else 0 if dx < 0 else c)
        py = by + (tile if dy > 0 else 0 if dy < 0 else c)
        if t & d:
            vx, vy = (1 if dy else 0), (1 if dx else 0)
            draw.rectangle([px - vx, py - vy, px + vx, py + vy], fill=COL_WIRE)
            draw.point((px, py), fill=wire)
        else:
            draw.point((px, py), fill=COL_WIRE)

    b = state.barrier(x, y)
    corners = state.corners(x, y)
    for d in DIRECTIONS:
        if corners & d:
            dx, dy = delta(d)
            dx2, dy2 = delta(anticlockwise(d))
            cx = bx + (tile if dx + dx2 > 0 else 0)
            cy = by + (tile if dy + dy2 > 0 else 0)
            draw.rectangle([cx, cy, cx + TILE_BORDER - 1, cy + TILE_BORDER - 1], fill=COL_BARRIER)
    for d in DIRECTIONS:
        if b & d:
            dx, dy = delta(d)
            if dx:
                ex = bx + (tile if dx > 0 else 0)
                draw.rectangle([ex, by + TILE_BORDER, ex + TILE_BORDER - 1, by + tile - 1], fill=COL_BARRIER)
            else:
                ey = by + (tile if dy > 0 else 0)
                draw.rectangle([bx + TILE_BORDER, ey, bx + tile - 1, ey + TILE_BORDER - 1], fill=COL_BARRIER)


def render_board(state: GameState, tile: int = TILE_SIZE, margin: int = WINDOW_OFFSET,
                 active: Optional[ActiveMap] = None) -> Image.Image:
    if active is None:
        active = compute_active(state)
    img = Image.new("RGBA", image_size(state.width, state.height, tile, margin), COL_BACKGROUND)
    draw = ImageDraw.Draw(img)
    for x, y in state.cells():
        _draw_tile(draw, state, active, x, y, tile, margin)
    return img
