"""Keyboard and mouse bindings."""
from __future__ import annotations

import pygame

from delve_mapgen import Strategy

MOVE_KEYS: dict[int, tuple[int, int]] = {
    pygame.K_UP: (0, -1),
    pygame.K_w: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_s: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_a: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_d: (1, 0),
}

DIG_KEY = pygame.K_SPACE

STRATEGY_KEYS: dict[int, Strategy] = {
    pygame.K_1: Strategy.BELL_JAR,
    pygame.K_2: Strategy.SIMPLE_BOX,
    pygame.K_3: Strategy.OPEN_FIELD,
    pygame.K_4: Strategy.MAZE,
    pygame.K_5: Strategy.CAVERN,
}

REGENERATE_KEY = pygame.K_r
VIEW_KEY = pygame.K_TAB
GRID_LINES_KEY = pygame.K_g
EDIT_KEY = pygame.K_e
REPORT_KEY = pygame.K_F1

HELP = "WASD/arrows move  Space dig  Alt/right-click edit  1-5 strategy  R regen  Tab view  G grid"


def is_edit_click(event: pygame.event.Event, edit_mode: bool) -> bool:
    """Right click always edits; left click edits with Alt held or in edit mode."""
    if event.button == 3:
        return True
    if event.button == 1:
        return edit_mode or bool(pygame.key.get_mods() & pygame.KMOD_ALT)
    return False
