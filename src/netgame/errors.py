# src/netgame/errors.py


class NetGameError(Exception):
    pass


class InvalidParams(NetGameError, ValueError):
    """Board parameters that can't produce a puzzle (raised before any generation)."""


class RejectedMove(NetGameError):
    """A move with no effect: off the grid, or rotating a locked tile. The state is untouched."""

    def __init__(self, x: int, y: int, reason: str) -> None:
        super().__init__(f"move at ({x},{y}) rejected: {reason}")
        self.x = x
        self.y = y
        self.reason = reason
