# src/netgame/engine/connectivity.py
# Which tiles are powered from the centre. Recomputed from scratch on every
# call; boards are small enough that incremental tracking isn't worth it.

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List

from ..grid import DIRECTIONS, flip, neighbour, on_border
from .state import GameState


@dataclass
class ActiveMap:
    active: List[List[bool]]

    def is_active(self, x: int, y: int) -> bool:
        return self.active[y][x]

    @property
    def count(self) -> int:
        return sum(1 for row in self.active for a in row if a)

    @property
    def total(self) -> int:
        return sum(len(row) for row in self.active)

    @property
    def completed(self) -> bool:
        return all(a for row in self.active for a in row)


def compute_active(state: GameState) -> ActiveMap:
    """
    Breadth-first walk from the centre. A step from one tile to the next is
    allowed when both have an arm pointing at each other and no barrier sits
    on the edge between them.
    """
    w, h = state.width, state.height
    active = [[False] * w for _ in range(h)]
    active[state.cy][state.cx] = True
    todo = deque([(state.cx, state.cy)])

    while todo:
        x1, y1 = todo.popleft()
        for d1 in DIRECTIONS:
            if not (state.tiles[y1][x1] & d1) or state.barriers[y1][x1] & d1:
                continue
            if not state.wrapping and on_border(x1, y1, d1, w, h):
                continue
            x2, y2 = neighbour(x1, y1, d1, w, h, state.wrapping)
            if state.tiles[y2][x2] & flip(d1) and not active[y2][x2]:
                active[y2][x2] = True
                todo.append((x2, y2))

    return ActiveMap(active=active)


def is_completed(state: GameState) -> bool:
    return compute_active(state).completed
