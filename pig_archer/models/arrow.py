"""
Arrow projectile for Pig Archer.
"""

from __future__ import annotations

from dataclasses import dataclass

from pig_archer.config import (
    ARROW_HEAD_LENGTH,
    ARROW_HEIGHT,
    ARROW_SPEED,
    ARROW_WIDTH,
    COLOR_BLACK,
    FIELD_WIDTH,
)
from pig_archer.models.entity import DrawTarget, Entity


@dataclass
class Arrow(Entity):
    """Flies right at a fixed speed until it leaves the field or hits.

    ``marked_for_deletion`` is only ever set, never cleared; the game
    prunes marked arrows on the next tick.
    """

    width: int = ARROW_WIDTH
    height: int = ARROW_HEIGHT
    speed: int = ARROW_SPEED
    field_width: int = FIELD_WIDTH
    marked_for_deletion: bool = False

    @property
    def tip(self) -> tuple[float, float]:
        """Leading edge of the shaft, vertically centred."""
        return (self.right, self.center[1])

    def update(self) -> None:
        self.x += self.speed
        if self.x > self.field_width:
            self.marked_for_deletion = True

    def mark_for_deletion(self) -> None:
        self.marked_for_deletion = True

    def draw(self, target: DrawTarget) -> None:
        target.rect(COLOR_BLACK, self.x, self.y, self.width, self.height)
        head_x, head_y = self.tip
        target.polygon(COLOR_BLACK, [
            (head_x, self.y - 2),
            (head_x + ARROW_HEAD_LENGTH, head_y),
            (head_x, self.y + 7),
        ])
