"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


class StatusBar:
    """Displays the last message and a line of map info below the grid."""

    def __init__(self, top: int, width: int) -> None:
        self._top = top
        self._width = width
        self._message = ""
        self._color = TEXT_COLOR
        self._info = ""
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        self._message = message
        self._color = color

    def set_info(self, info: str) -> None:
        self._info = info

    def draw(self, surface: pygame.Surface) -> None:
        bar_rect = pygame.Rect(0, self._top, self._width, STATUS_H)
        pygame.draw.rect(surface, STATUS_BG, bar_rect)

        font = self._get_font()
        if self._message:
            text = font.render(self._message, True, self._color)
            surface.blit(text, (8, self._top + 6))
        if self._info:
            text = font.render(self._info, True, TEXT_DIM)
            surface.blit(text, (8, self._top + 28))
