# src/netgame/engine/moves.py
# Player moves. Every move returns a fresh state; the input state is never
# touched, so a rejected move leaves the caller holding exactly what it had.

from __future__ import annotations

import logging
from typing import Optional

from ..errors import RejectedMove
from ..grid import rotate
from ..tiles import LOCKED
from .connectivity import is_completed
from .state import GameState, Rotation, duplicate

log = logging.getLogger(__name__)

LEFT_BUTTON = "left"
MIDDLE_BUTTON = "middle"
RIGHT_BUTTON = "right"


def _check_cell(state: GameState, x: int, y: int) -> None:
    if not state.in_bounds(x, y):
        raise RejectedMove(x, y, "outside the grid")


def apply_rotate(state: GameState, x: int, y: int, direction: Rotation) -> GameState:
    """
    Turn one tile a quarter-turn and re-run the completion check.
    Raises RejectedMove when the move cannot be made (bad direction,
    cell off the grid, locked tile).
    """
    try:
        direction = Rotation(direction)
    except ValueError:
        raise RejectedMove(x, y, "bad direction") from None
    _check_cell(state, x, y)
    if state.locked(x, y):
        raise RejectedMove(x, y, "tile is locked")

    ret = duplicate(state)
    ret.tiles[y][x] = rotate(ret.tiles[y][x], int(direction))
    ret.last_rotate_direction = direction

    # Completion is recomputed, so a later turn can break a finished network.
    ret.completed = is_completed(ret)
    if ret.completed and not state.completed:
        log.info("puzzle completed at %dx%d", ret.width, ret.height)
    return ret


def apply_lock_toggle(state: GameState, x: int, y: int) -> GameState:
    _check_cell(state, x, y)
    ret = duplicate(state)
    ret.tiles[y][x] ^= LOCKED
    return ret


def make_move(state: GameState, x: int, y: int, button: str) -> Optional[GameState]:
    """
    Mouse-button front end: left turns anticlockwise, right clockwise, middle
    toggles the lock. Returns None when the move does nothing.
    """
    try:
        if button == MIDDLE_BUTTON:
            return apply_lock_toggle(state, x, y)
        if button == LEFT_BUTTON:
            return apply_rotate(state, x, y, Rotation.ANTICLOCKWISE)
        if button == RIGHT_BUTTON:
            return apply_rotate(state, x, y, Rotation.CLOCKWISE)
    except RejectedMove as e:
        log.debug("%s", e)
        return None
    return None
