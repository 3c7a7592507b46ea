from dataclasses import dataclass
from typing import Optional

from ..engine.connectivity import ActiveMap, compute_active
from ..engine.state import GameState


@dataclass
class StatusBarState:
    active: int = 0
    total: int = 0
    completed: bool = False

    @property
    def text(self) -> str:
        return ("COMPLETED! " if self.completed else "") + f"Active: {self.active}/{self.total}"


def status_for(state: GameState, active: Optional[ActiveMap] = None) -> StatusBarState:
    if active is None:
        active = compute_active(state)
    return StatusBarState(active=active.count, total=active.total, completed=state.completed)


def status_text(state: GameState) -> str:
    return status_for(state).text


def render_status_bar(screen, origin_xy: tuple, width_px: int, height_px: int, status: StatusBarState) -> None:
    """
    Draw the status line as plain text on a dark strip. Does not touch the game state.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width_px, height_px))
    font = pygame.font.SysFont(None, max(10, height_px - 4))
    img = font.render(status.text, True, (220, 220, 220))
    screen.blit(img, (ox + 4, oy + (height_px - img.get_height()) // 2))
