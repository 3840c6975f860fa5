"""
UI text utilities for Pig Archer.

Tracks the two HUD slots (score and lives) and formats them for display.
"""

from __future__ import annotations

from dataclasses import dataclass

from pig_archer.config import STARTING_LIVES

LIFE_GLYPH = "\u2665"


@dataclass
class ScoreDisplay:
    """Score and lives for the current session, plus the best score this run."""

    player_score: int = 0
    lives: int = STARTING_LIVES
    high_score: int = 0

    def add(self, points: int) -> None:
        """Add *points* to the player score and update high score."""
        self.player_score += points
        if self.player_score > self.high_score:
            self.high_score = self.player_score

    def lose_life(self) -> int:
        """Remove one life and return the remaining count."""
        self.lives -= 1
        return self.lives

    def reset(self) -> None:
        """Reset score and lives (high score persists)."""
        self.player_score = 0
        self.lives = STARTING_LIVES

    def format_score(self) -> str:
        return f"SCORE: {self.player_score}"

    def format_lives(self, glyph: str = LIFE_GLYPH) -> str:
        return f"LIVES: {glyph * max(0, self.lives)}"

    def format_high_score(self) -> str:
        return f"HIGH: {self.high_score}"

    def format_final_score(self) -> str:
        return f"FINAL SCORE: {self.player_score}"
