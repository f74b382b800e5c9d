"""Tile atlas loading, with a procedurally drawn fallback atlas."""
from __future__ import annotations

import logging

import pygame

from delve_tiles import PatternCatalog, TerrainState

from ui.constants import (
    BG_COLOR, DIGGABLE_DOT, TERRAIN_COLORS, TILE_OUTLINE, UNDIGGABLE_LINE,
)

logger = logging.getLogger(__name__)


def _draw_quadrant(surface: pygame.Surface, rect: pygame.Rect, state: TerrainState) -> None:
    pygame.draw.rect(surface, TERRAIN_COLORS[state], rect)
    if state is TerrainState.DIGGABLE:
        step = max(4, rect.width // 3)
        for i in range(3):
            for j in range(3):
                center = (rect.x + step // 2 + i * step, rect.y + step // 2 + j * step)
                if rect.collidepoint(center):
                    pygame.draw.circle(surface, DIGGABLE_DOT, center, 2)
    elif state is TerrainState.UNDIGGABLE:
        step = max(4, rect.height // 3)
        for i in range(3):
            y = rect.y + i * step
            pygame.draw.line(surface, UNDIGGABLE_LINE, (rect.x, y), (rect.right - 1, y))


def build_fallback_atlas(catalog: PatternCatalog, tile_size: int) -> pygame.Surface:
    """Draw every catalog tile as four colored quadrants at its atlas slot."""
    surface = pygame.Surface((catalog.columns * tile_size, catalog.rows * tile_size))
    surface.fill(BG_COLOR)
    half = tile_size // 2
    rest = tile_size - half
    for entry in catalog:
        ox = entry.atlas_x * tile_size
        oy = entry.atlas_y * tile_size
        p = entry.pattern
        _draw_quadrant(surface, pygame.Rect(ox, oy, half, half), p.top_left)
        _draw_quadrant(surface, pygame.Rect(ox + half, oy, rest, half), p.top_right)
        _draw_quadrant(surface, pygame.Rect(ox, oy + half, half, rest), p.bottom_left)
        _draw_quadrant(surface, pygame.Rect(ox + half, oy + half, rest, rest), p.bottom_right)
        pygame.draw.rect(surface, TILE_OUTLINE, (ox, oy, tile_size, tile_size), 1)
    return surface


def load_atlas(path: str | None, catalog: PatternCatalog, tile_size: int) -> pygame.Surface:
    """Load an atlas image laid out on the catalog's grid, scaled to *tile_size*.

    Falls back to :func:`build_fallback_atlas` when no path is given or the
    image cannot be read.
    """
    if path is None:
        logger.info("no atlas image given, using fallback tiles")
        return build_fallback_atlas(catalog, tile_size)
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        logger.warning("failed to load atlas %s (%s), using fallback tiles", path, exc)
        return build_fallback_atlas(catalog, tile_size)

    expected = (catalog.columns * tile_size, catalog.rows * tile_size)
    if image.get_width() % catalog.columns or image.get_height() % catalog.rows:
        logger.warning(
            "atlas %s is %dx%d, not a multiple of the %dx%d tile grid",
            path, image.get_width(), image.get_height(), catalog.columns, catalog.rows,
        )
    if image.get_size() != expected:
        image = pygame.transform.scale(image, expected)
    logger.info("loaded atlas %s", path)
    return image.convert_alpha()
