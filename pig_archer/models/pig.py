"""
Player avatar for Pig Archer.

The pig hangs on a rope at a fixed x and bobs up and down the lane at a
constant speed, reversing at the top and at the ground.
"""

from __future__ import annotations

from dataclasses import dataclass

from pig_archer.config import (
    COLOR_BLACK,
    COLOR_PIG,
    COLOR_PIG_SNOUT,
    FIELD_HEIGHT,
    PIG_HEIGHT,
    PIG_SPEED,
    PIG_START_Y,
    PIG_WIDTH,
    PIG_X,
)
from pig_archer.models.entity import DrawTarget, Entity


@dataclass
class Pig(Entity):
    """The archer.  Cannot be hit; only its position matters."""

    x: float = PIG_X
    y: float = PIG_START_Y
    width: int = PIG_WIDTH
    height: int = PIG_HEIGHT
    speed: int = PIG_SPEED
    direction: int = 1  # +1 = moving down, -1 = moving up
    lane_height: int = FIELD_HEIGHT

    def update(self) -> None:
        """Move one tick along the lane, bouncing at both bounds."""
        self.y += self.speed * self.direction
        if self.y <= 0:
            self.y = 0
            self.direction = 1
        if self.bottom >= self.lane_height:
            self.y = self.lane_height - self.height
            self.direction = -1

    @property
    def muzzle(self) -> tuple[float, float]:
        """Spawn point for arrows: right edge, vertically centred."""
        return (self.right, self.center[1])

    def draw(self, target: DrawTarget) -> None:
        target.rect(COLOR_PIG, self.x, self.y, self.width, self.height)
        target.rect(COLOR_BLACK, self.x + 25, self.y + 10, 5, 5)
        target.rect(COLOR_PIG_SNOUT, self.x + 28, self.y + 20, 12, 10)
