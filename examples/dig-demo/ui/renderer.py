"""Tile layer, base-grid debug view, and player rendering."""
from __future__ import annotations

from typing import Callable, Iterable

import pygame

from delve_play import Player
from delve_tiles import EMPTY_INDEX, AutoTiler, Cell

from ui.constants import (
    BG_COLOR, BORDER_COLOR, DEBUG_COLORS, DEBUG_HOME_BASE, DEBUG_HOME_TEXT,
    DEBUG_TEXT, DIG_PREVIEW_COLOR, GRID_LINE_COLOR, HOME_BASE_BORDER,
    HOME_BASE_COLOR, HOME_BASE_TILE_ALPHA, PLAYER_COLOR, PLAYER_FACING_COLOR,
)


class TileLayer:
    """Cached surface of every visual tile.

    Visual tile ``(x, y)`` is drawn at ``(x, y) * tile_size`` on the layer;
    the layer is blitted half a tile down and right so each tile straddles
    the four logical cells it samples. After a mutation only the dirty
    tiles are redrawn.
    """

    def __init__(
        self,
        tiler: AutoTiler,
        atlas: pygame.Surface,
        tile_size: int,
        home_base: Callable[[int, int], bool],
    ) -> None:
        self._tiler = tiler
        self._atlas = atlas
        self._tile_size = tile_size
        self._home_base = home_base
        self._surface = pygame.Surface((1, 1))
        self.rebuild()

    @property
    def offset(self) -> int:
        return self._tile_size // 2

    def rebuild(self) -> None:
        """Redraw every tile, resizing the layer to the current grid."""
        grid = self._tiler.grid
        size = (grid.width * self._tile_size, grid.height * self._tile_size)
        if self._surface.get_size() != size:
            self._surface = pygame.Surface(size)
        for y in range(grid.height):
            for x in range(grid.width):
                self._draw_tile(x, y)

    def redraw(self, tiles: Iterable[Cell]) -> int:
        count = 0
        for x, y in tiles:
            self._draw_tile(x, y)
            count += 1
        return count

    def _draw_tile(self, x: int, y: int) -> None:
        ts = self._tile_size
        dest = pygame.Rect(x * ts, y * ts, ts, ts)
        index = self._tiler.resolve(x, y)
        if self._tiler.tile_touches(x, y, self._home_base):
            self._surface.fill(HOME_BASE_COLOR, dest)
            if index != EMPTY_INDEX:
                tile = self._atlas.subsurface(self._tiler.catalog.source_rect(index, ts)).copy()
                tile.set_alpha(HOME_BASE_TILE_ALPHA)
                self._surface.blit(tile, dest)
            pygame.draw.rect(self._surface, HOME_BASE_BORDER, dest, 1)
            return
        self._surface.fill(BG_COLOR, dest)
        if index != EMPTY_INDEX:
            self._surface.blit(self._atlas, dest, self._tiler.catalog.source_rect(index, ts))

    def draw(self, screen: pygame.Surface, grid_lines: bool) -> None:
        screen.blit(self._surface, (self.offset, self.offset))
        if grid_lines:
            w, h = self._surface.get_size()
            draw_grid_lines(screen, self._tile_size, w, h, self.offset)


def draw_grid_lines(surface: pygame.Surface, tile_size: int, w: int, h: int, offset: int = 0) -> None:
    for x in range(0, w + 1, tile_size):
        pygame.draw.line(surface, GRID_LINE_COLOR, (x + offset, offset), (x + offset, h + offset))
    for y in range(0, h + 1, tile_size):
        pygame.draw.line(surface, GRID_LINE_COLOR, (offset, y + offset), (w + offset, y + offset))


def draw_base_grid(
    surface: pygame.Surface,
    tiler: AutoTiler,
    tile_size: int,
    home_base: Callable[[int, int], bool],
    font: pygame.font.Font,
) -> None:
    """Debug view: one flat square per logical cell, labelled with its state."""
    for x, y, state in tiler.grid.cells():
        rect = pygame.Rect(x * tile_size, y * tile_size, tile_size, tile_size)
        home = home_base(x, y)
        pygame.draw.rect(surface, DEBUG_HOME_BASE if home else DEBUG_COLORS[state], rect)
        pygame.draw.rect(surface, GRID_LINE_COLOR, rect, 1)
        label = f"{int(state)}H" if home else str(int(state))
        text = font.render(label, True, DEBUG_HOME_TEXT if home else DEBUG_TEXT)
        surface.blit(text, text.get_rect(center=rect.center))


def draw_player(surface: pygame.Surface, player: Player, tile_size: int) -> None:
    """Player disc at its logical cell, a facing tick, and the dig preview."""
    ts = tile_size
    cx = player.x * ts + ts // 2
    cy = player.y * ts + ts // 2
    radius = max(3, ts * 3 // 8)
    pygame.draw.circle(surface, PLAYER_COLOR, (cx, cy), radius)
    fx, fy = player.facing
    tip = (cx + fx * radius, cy + fy * radius)
    pygame.draw.line(surface, PLAYER_FACING_COLOR, (cx, cy), tip, 3)

    if player.can_dig():
        tx, ty = player.target()
        rect = pygame.Rect(tx * ts + 2, ty * ts + 2, ts - 4, ts - 4)
        pygame.draw.rect(surface, DIG_PREVIEW_COLOR, rect, 2)


def draw_map_border(surface: pygame.Surface, tiler: AutoTiler, tile_size: int) -> None:
    rect = pygame.Rect(0, 0, tiler.grid.width * tile_size, tiler.grid.height * tile_size)
    pygame.draw.rect(surface, BORDER_COLOR, rect.inflate(2, 2), 2)
