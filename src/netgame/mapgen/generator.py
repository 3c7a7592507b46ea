# src/netgame/mapgen/generator.py
# Board generator: tree -> shuffle -> barriers -> GameState.
#
# The random stream is consumed in a fixed order: tree growth, then one
# rotation per tile, then barrier picks. Barriers come last so the same seed
# with a higher barrier rate gives the same tiles and a superset of barriers.

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..config import FLAGS
from ..engine.connectivity import compute_active, is_completed
from ..engine.state import GameState, Rotation
from ..grid import DIRECTIONS, ALL_DIRS, count_bits, rotate
from ..params import GameParams
from ..rng import RandomSource, Seed
from ..tiles import is_valid_piece
from .barriers import (
    add_border_barriers,
    collect_barrier_candidates,
    empty_barriers,
    place_barriers,
    set_corner_flags,
)
from .tree import build_spanning_tree, count_edges

log = logging.getLogger(__name__)


@dataclass
class Board:
    state: GameState
    tree: List[List[int]]        # masks before the shuffle
    rotations: List[List[int]]   # quarter-turns ACW applied to each tile
    barrier_count: int


def shuffle_tiles(tiles: List[List[int]], rng: RandomSource) -> List[List[int]]:
    """Rotate every tile by a random 0..3 quarter-turns in place; returns the counts drawn."""
    rotations = []
    for row in tiles:
        rots = []
        for x, orig in enumerate(row):
            rot = rng.upto(4)
            row[x] = rotate(orig, rot)
            rots.append(rot)
        rotations.append(rots)
    return rotations


def unshuffle(tiles: List[List[int]], rotations: List[List[int]]) -> List[List[int]]:
    return [
        [rotate(t & ALL_DIRS, -rotations[y][x]) for x, t in enumerate(row)]
        for y, row in enumerate(tiles)
    ]


def verify_board(board: Board) -> None:
    """Full post-generation check: 1..3 arms per tile and a spanning tree underneath."""
    st = board.state
    for x, y in st.cells():
        assert is_valid_piece(st.tile(x, y)), f"tile ({x},{y}) has {count_bits(st.mask(x, y))} arms"
    assert count_edges(board.tree) == st.width * st.height - 1, "tree edge count"
    tree_state = GameState(
        width=st.width, height=st.height, cx=st.cx, cy=st.cy,
        wrapping=st.wrapping, tiles=[list(r) for r in board.tree],
        barriers=[list(r) for r in st.barriers],
    )
    assert compute_active(tree_state).completed, "tree does not span the board"
    for x, y in st.cells():
        for d in DIRECTIONS:
            assert not (board.tree[y][x] & d and st.barriers[y][x] & d), f"barrier across tree edge at ({x},{y})"


def generate_board(params: GameParams, seed: Seed, check: Optional[bool] = None) -> Board:
    params.validate()
    w, h = params.width, params.height
    cx, cy = w // 2, h // 2
    rng = RandomSource.from_seed(seed)

    tree = build_spanning_tree(w, h, cx, cy, params.wrapping, rng)

    barriers = empty_barriers(w, h)
    if not params.wrapping:
        add_border_barriers(barriers, w, h)

    # Candidates are taken from the unshuffled tree: the gaps in the solution.
    cands = collect_barrier_candidates(tree, params.wrapping)

    tiles = [list(row) for row in tree]
    rotations = shuffle_tiles(tiles, rng)

    n = place_barriers(barriers, cands, params.barrier_probability, rng, params.wrapping)
    set_corner_flags(barriers)

    state = GameState(
        width=w,
        height=h,
        cx=cx,
        cy=cy,
        wrapping=params.wrapping,
        tiles=tiles,
        barriers=barriers,
        last_rotate_direction=Rotation.ANTICLOCKWISE,
    )
    # Tiny boards can come out of the shuffle already solved.
    state.completed = is_completed(state)
    board = Board(state=state, tree=tree, rotations=rotations, barrier_count=n)

    if FLAGS.check_invariants if check is None else check:
        verify_board(board)

    log.info(
        "generated %s board: %d edges, %d barriers",
        params.name, count_edges(tree), n,
    )
    return board


def generate(params: GameParams, seed: Seed) -> GameState:
    """Deterministic in (params, seed)."""
    return generate_board(params, seed).state
