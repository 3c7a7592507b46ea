import os
from dataclasses import dataclass


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "0").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ModeFlags:
    # Full O(w*h) verification of every generated board (tree spans, no
    # zero/cross tiles). Tests and debugging runs switch it on.
    check_invariants: bool = False


# Global flags (can be swapped by launcher)
FLAGS = ModeFlags(check_invariants=_env_flag("NETGAME_CHECK_INVARIANTS"))
