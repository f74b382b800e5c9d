"""Dig Demo - dual-grid autotiled digging over generated maps.

Controls:
  WASD / arrows   Move (blocked moves still turn the player)
  Space           Dig the cell in front
  Alt+click       Cycle a cell Empty -> Diggable -> Undiggable
  Right-click     Cycle a cell
  E               Toggle edit mode (plain left-click edits)
  1-5             BellJar / SimpleBox / OpenField / Maze / Cavern
  R               Regenerate with the current strategy
  Tab             Toggle tile view / base-grid debug view
  G               Toggle grid lines
  F1              Log a pattern usage report
  Escape          Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from delve_mapgen import GenerationError, Strategy
from delve_tiles import TerrainState

from game.controls import (
    DIG_KEY, EDIT_KEY, GRID_LINES_KEY, HELP, MOVE_KEYS, REGENERATE_KEY,
    REPORT_KEY, STRATEGY_KEYS, VIEW_KEY, is_edit_click,
)
from game.setup import DemoState, build_demo, log_pattern_report, regenerate
from ui.atlas import load_atlas
from ui.constants import BG_COLOR, DEFAULT_TILE_SIZE, FPS, compute_layout
from ui.renderer import TileLayer, draw_base_grid, draw_map_border, draw_player
from ui.status import StatusBar

logger = logging.getLogger("dig-demo")

STATE_LABELS = {
    TerrainState.EMPTY: "Empty",
    TerrainState.DIGGABLE: "Diggable",
    TerrainState.UNDIGGABLE: "Undiggable",
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Dig Demo - dual-grid autotiling")
    p.add_argument("--strategy", type=str, default=Strategy.BELL_JAR.value,
                   help="Map strategy: bellJar, simpleBox, openField, maze, cavern")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--atlas", type=str, default=None, metavar="PNG",
                   help="Tile atlas image laid out 10 tiles wide (default: drawn tiles)")
    p.add_argument("--tile-size", type=int, default=DEFAULT_TILE_SIZE,
                   help=f"On-screen tile size in pixels (8-64, default: {DEFAULT_TILE_SIZE})")
    p.add_argument("--strict", action="store_true",
                   help="Regenerate maps until every open body cell is reachable")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = p.parse_args()
    args.tile_size = max(8, min(64, args.tile_size))
    return args


def _info_line(state: DemoState) -> str:
    gen = state.generator
    x, y = state.player.position
    mode = "EDIT " if state.edit_mode else ""
    return (
        f"{mode}{gen.last_strategy.value}  seed {gen.seed}  "
        f"player ({x}, {y})  view {state.view_mode}"
    )


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        state = build_demo(args.strategy, args.seed, args.strict)
    except GenerationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    cfg = state.generator.config
    layout = compute_layout(cfg.width, cfg.height, args.tile_size)
    tile_size = layout["tile_size"]

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption("Dig Demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", max(8, tile_size // 3))

    atlas = load_atlas(args.atlas, state.tiler.catalog, tile_size)
    layer = TileLayer(state.tiler, atlas, tile_size, state.generator.is_in_home_base)
    status = StatusBar(layout["grid_h"], layout["screen_w"])
    status.set(HELP)

    def regen(strategy: Strategy | None = None) -> None:
        try:
            regenerate(state, strategy)
        except GenerationError as exc:
            status.set(str(exc), (255, 80, 80))
            return
        layer.rebuild()
        status.set(f"Generated {state.generator.last_strategy.value} map", (100, 255, 100))

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in MOVE_KEYS:
                    state.player.move(*MOVE_KEYS[event.key])
                elif event.key == DIG_KEY:
                    dirty = state.player.dig()
                    if dirty:
                        layer.redraw(dirty)
                        tx, ty = state.player.target()
                        status.set(f"Dug ({tx}, {ty}), {len(dirty)} tiles redrawn")
                elif event.key in STRATEGY_KEYS:
                    regen(STRATEGY_KEYS[event.key])
                elif event.key == REGENERATE_KEY:
                    regen()
                elif event.key == VIEW_KEY:
                    state.view_mode = "base" if state.view_mode == "draw" else "draw"
                elif event.key == GRID_LINES_KEY:
                    state.grid_lines = not state.grid_lines
                elif event.key == EDIT_KEY:
                    state.edit_mode = not state.edit_mode
                elif event.key == REPORT_KEY:
                    log_pattern_report(state)

            elif event.type == pygame.MOUSEBUTTONDOWN and is_edit_click(event, state.edit_mode):
                cx, cy = event.pos[0] // tile_size, event.pos[1] // tile_size
                result = state.editor.cycle(cx, cy)
                if result is None:
                    if state.grid.in_bounds(cx, cy):
                        status.set(f"Cannot edit ({cx}, {cy})", (255, 80, 80))
                else:
                    layer.redraw(result.dirty)
                    status.set(
                        f"({cx}, {cy}) {STATE_LABELS[result.before]} -> "
                        f"{STATE_LABELS[result.after]}",
                        (255, 180, 80),
                    )

        # --- Render ---
        screen.fill(BG_COLOR)
        if state.view_mode == "base":
            draw_base_grid(screen, state.tiler, tile_size, state.generator.is_in_home_base, font)
        else:
            layer.draw(screen, state.grid_lines)
        draw_map_border(screen, state.tiler, tile_size)
        draw_player(screen, state.player, tile_size)

        status.set_info(_info_line(state))
        status.draw(screen)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
