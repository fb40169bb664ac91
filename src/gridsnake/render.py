from __future__ import annotations

import pygame

from . import config
from .state import CellType, Snapshot

CELL_COLORS = {
    CellType.FOOD: config.FOOD_COLOR,
    CellType.BODY: config.BODY_COLOR,
    CellType.HEAD: config.HEAD_COLOR,
}


def window_size(size: int, block: int = config.BLOCK) -> tuple[int, int]:
    return size * block, size * block + config.HUD_HEIGHT


def status_text(snapshot: Snapshot, paused: bool) -> str:
    text = f"Score: {snapshot.score}"
    if snapshot.over:
        return text + "   GAME OVER - press space"
    if paused:
        return text + "   PAUSED"
    return text


def draw_state(
    screen: pygame.Surface,
    snapshot: Snapshot,
    paused: bool = False,
    font: pygame.font.Font | None = None,
    block: int = config.BLOCK,
) -> None:
    screen.fill(config.BG_COLOR)
    top = config.HUD_HEIGHT

    for row in range(snapshot.size):
        for col in range(snapshot.size):
            color = CELL_COLORS.get(CellType(int(snapshot.cells[row, col])))
            if color is None:
                continue
            rect = pygame.Rect(col * block, top + row * block, block, block)
            pygame.draw.rect(screen, color, rect)

    pygame.draw.line(screen, config.GRID_LINE, (0, top - 1), (snapshot.size * block, top - 1))

    if font is not None:
        label = font.render(status_text(snapshot, paused), True, config.TEXT_COLOR)
        screen.blit(label, (6, (top - label.get_height()) // 2))
