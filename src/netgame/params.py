# src/netgame/params.py
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import InvalidParams


@dataclass(frozen=True)
class GameParams:
    width: int = 5
    height: int = 5
    wrapping: bool = False
    barrier_probability: float = 0.0

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidParams(f"grid dimensions must be positive, got {self.width}x{self.height}")
        if self.width <= 1 and self.height <= 1:
            raise InvalidParams("grid must have more than one cell")
        if not (0.0 <= self.barrier_probability <= 1.0):
            raise InvalidParams(f"barrier probability {self.barrier_probability} outside [0, 1]")

    @property
    def name(self) -> str:
        return f"{self.width}x{self.height}" + (" wrapping" if self.wrapping else "")


def default_params() -> GameParams:
    return GameParams()


_PRESET_SIZES: List[Tuple[int, int]] = [(5, 5), (7, 7), (9, 9), (11, 11), (13, 11)]

PRESETS: List[GameParams] = (
    [GameParams(w, h, wrapping=False) for w, h in _PRESET_SIZES]
    + [GameParams(w, h, wrapping=True) for w, h in _PRESET_SIZES]
)


def fetch_preset(i: int) -> Optional[Tuple[str, GameParams]]:
    """Return (menu name, params) for preset i, or None past the end of the list."""
    if not (0 <= i < len(PRESETS)):
        return None
    p = PRESETS[i]
    return p.name, p
