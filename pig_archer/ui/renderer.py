"""
Pygame renderer for Pig Archer.

Implements the :class:`~pig_archer.models.entity.DrawTarget` primitives
over a surface in the field's logical coordinate space, and draws whole
frames: scenery, entities, HUD and the start / game-over screens.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pygame

from pig_archer.config import (
    BRANCH_HEIGHT,
    BRANCH_Y,
    COLOR_FOLIAGE,
    COLOR_GROUND,
    COLOR_HUD,
    COLOR_OVERLAY,
    COLOR_ROPE,
    COLOR_SKY,
    COLOR_TRUNK,
    COLOR_WHITE,
    GROUND_HEIGHT,
    ROPE_WIDTH,
    ROPE_X,
    TRUNK_WIDTH,
)
from pig_archer.game import Game, GameState

logger = logging.getLogger(__name__)

Color = Sequence[int]
Point = tuple[float, float]


class Renderer:
    """Draws game frames onto *surface*."""

    def __init__(self, surface: pygame.Surface,
                 font_size: int = 28, title_size: int = 56) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, font_size)
        self.title_font = pygame.font.Font(None, title_size)

    # ── Primitives ──────────────────────────────────────────────────────

    def rect(self, color: Color, x: float, y: float,
             width: float, height: float) -> None:
        bounds = pygame.Rect(round(x), round(y), round(width), round(height))
        if len(color) == 4:
            overlay = self._overlay(bounds)
            if overlay is not None:
                overlay.fill(color)
                self.surface.blit(overlay, bounds.topleft)
            return
        pygame.draw.rect(self.surface, color, bounds)

    def circle(self, color: Color, cx: float, cy: float,
               radius: float, width: int = 0) -> None:
        center, r = (round(cx), round(cy)), round(radius)
        if len(color) == 4:
            bounds = pygame.Rect(center[0] - r, center[1] - r, 2 * r + 1, 2 * r + 1)
            overlay = self._overlay(bounds)
            if overlay is not None:
                pygame.draw.circle(overlay, color, (r, r), r, width)
                self.surface.blit(overlay, bounds.topleft)
            return
        pygame.draw.circle(self.surface, color, center, r, width)

    def line(self, color: Color, start: Point, end: Point,
             width: int = 1) -> None:
        pygame.draw.line(self.surface, color, start, end, width)

    def polygon(self, color: Color, points: Sequence[Point]) -> None:
        pygame.draw.polygon(self.surface, color, points)

    def text(self, message: str, x: float, y: float,
             color: Color = COLOR_HUD, font: Optional[pygame.font.Font] = None,
             centered: bool = False) -> pygame.Rect:
        font = font or self.font
        surf = font.render(message, True, color)
        rect = surf.get_rect()
        if centered:
            rect.center = (round(x), round(y))
        else:
            rect.topleft = (round(x), round(y))
        self.surface.blit(surf, rect)
        return rect

    @staticmethod
    def _overlay(bounds: pygame.Rect) -> Optional[pygame.Surface]:
        """Transparent surface covering only *bounds*, for per-pixel alpha."""
        if bounds.width <= 0 or bounds.height <= 0:
            return None
        return pygame.Surface(bounds.size, pygame.SRCALPHA)

    # ── Scene ───────────────────────────────────────────────────────────

    def draw_background(self) -> None:
        w, h = self.width, self.height
        self.surface.fill(COLOR_SKY)
        self.line(COLOR_ROPE, (ROPE_X, 0), (ROPE_X, h), ROPE_WIDTH)
        self.rect(COLOR_TRUNK, w - TRUNK_WIDTH, 0, TRUNK_WIDTH, h)
        self.rect(COLOR_TRUNK, w / 2, BRANCH_Y, w / 2, BRANCH_HEIGHT)
        self.circle(COLOR_FOLIAGE, w - TRUNK_WIDTH, BRANCH_Y, 40)
        self.circle(COLOR_FOLIAGE, w / 2, BRANCH_Y, 30)
        self.rect(COLOR_GROUND, 0, h - GROUND_HEIGHT, w, GROUND_HEIGHT)

    def draw_hud(self, game: Game) -> None:
        display = game.score_display
        self.text(display.format_score(), 10, 10)
        self.text(display.format_lives(), 10, 36)

    def draw_debug(self, game: Game, fps: float) -> None:
        lines = [
            f"FPS: {fps:.1f}",
            f"Tick: {game.tick_count}",
            f"Arrows: {len(game.arrows)}",
            f"Wolves: {len(game.wolves)}",
        ]
        y = 70
        for line in lines:
            self.text(line, 10, y, color=(0, 120, 0))
            y += 22

    def draw_start_screen(self) -> None:
        self.rect(COLOR_OVERLAY, 0, 0, self.width, self.height)
        cx, cy = self.width / 2, self.height / 2
        self.text("PIG ARCHER", cx, cy - 60, COLOR_WHITE, self.title_font, True)
        self.text("Press S to start", cx, cy, COLOR_WHITE, centered=True)
        self.text("SPACE / ENTER / click to shoot   M to mute",
                  cx, cy + 32, COLOR_WHITE, centered=True)

    def draw_game_over(self, game: Game) -> None:
        self.rect(COLOR_OVERLAY, 0, 0, self.width, self.height)
        cx, cy = self.width / 2, self.height / 2
        display = game.score_display
        self.text("GAME OVER", cx, cy - 60, COLOR_WHITE, self.title_font, True)
        self.text(display.format_final_score(), cx, cy, COLOR_WHITE, centered=True)
        self.text(display.format_high_score(), cx, cy + 28, COLOR_WHITE, centered=True)
        self.text("Press R to restart", cx, cy + 64, COLOR_WHITE, centered=True)

    def draw_frame(self, game: Game, fps: Optional[float] = None) -> None:
        """Render the whole scene for the current game state."""
        self.draw_background()
        if game.state != GameState.IDLE:
            game.pig.draw(self)
            for arrow in game.arrows:
                arrow.draw(self)
            for wolf in game.wolves:
                wolf.draw(self)
        self.draw_hud(game)

        if game.state == GameState.IDLE:
            self.draw_start_screen()
        elif game.state == GameState.GAME_OVER:
            self.draw_game_over(game)

        if fps is not None:
            self.draw_debug(game, fps)
