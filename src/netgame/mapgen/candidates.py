# src/netgame/mapgen/candidates.py
# Ordered, duplicate-free set of (x, y, direction) edge candidates.
# Kept as a sorted list: enumeration order depends only on content, and a
# random pick is a uniform index into that order.

from bisect import bisect_left
from typing import Iterator, List, NamedTuple

from ..grid import Direction
from ..rng import RandomSource


class Candidate(NamedTuple):
    x: int
    y: int
    direction: Direction


class CandidateSet:
    def __init__(self) -> None:
        self._items: List[Candidate] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._items)

    def __contains__(self, key: Candidate) -> bool:
        i = bisect_left(self._items, key)
        return i < len(self._items) and self._items[i] == key

    def count(self) -> int:
        return len(self._items)

    def insert(self, x: int, y: int, direction: Direction) -> bool:
        """Add a candidate; returns False if it was already present."""
        key = Candidate(x, y, Direction(direction))
        i = bisect_left(self._items, key)
        if i < len(self._items) and self._items[i] == key:
            return False
        self._items.insert(i, key)
        return True

    def pick_random_and_remove(self, rng: RandomSource) -> Candidate:
        assert self._items, "pick from an empty candidate set"
        return self._items.pop(rng.upto(len(self._items)))

    def find_and_remove(self, x: int, y: int, direction: Direction) -> bool:
        key = Candidate(x, y, Direction(direction))
        i = bisect_left(self._items, key)
        if i < len(self._items) and self._items[i] == key:
            del self._items[i]
            return True
        return False
