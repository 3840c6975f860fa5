"""
Balloon-carrying wolf for Pig Archer.

A wolf drifts down slowly while its balloon holds, then drops at a fixed
fall speed once the balloon is popped.  What happens when it reaches the
ground depends only on whether it still carries the balloon:

- landed with balloon  -> the player loses a life
- landed without       -> the player scores

The wolf itself never touches session state.  ``update`` reports what
happened as :class:`WolfEvent` values and the game applies the effects.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto

from pig_archer.config import (
    BALLOON_OFFSET_Y,
    BALLOON_RADIUS,
    COLOR_BALLOON,
    COLOR_BALLOON_SHINE,
    COLOR_WHITE,
    COLOR_WOLF,
    COLOR_WOLF_EYE,
    COLOR_WOLF_FALLING,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    WOLF_EYE_BUOYANT,
    WOLF_EYE_FALLING,
    WOLF_FALL_SPEED,
    WOLF_HEIGHT,
    WOLF_SPAWN_LEFT,
    WOLF_SPAWN_MARGIN,
    WOLF_SPEED_MAX,
    WOLF_SPEED_MIN,
    WOLF_START_Y,
    WOLF_WIDTH,
)
from pig_archer.models.entity import DrawTarget, Entity


class WolfEvent(Enum):
    """Outcomes a single wolf tick can report."""
    FALLING = auto()   # first tick after the balloon was popped
    LANDED_WITH_BALLOON = auto()
    LANDED_POPPED = auto()


def spawn_band(field_width: int = FIELD_WIDTH) -> tuple[float, float]:
    """Return the half-open ``[low, high)`` range of spawn x positions."""
    return (WOLF_SPAWN_LEFT, field_width - WOLF_SPAWN_MARGIN)


@dataclass
class Wolf(Entity):
    """A wolf hanging from a balloon."""

    y: float = WOLF_START_Y
    width: int = WOLF_WIDTH
    height: int = WOLF_HEIGHT
    speed_y: float = WOLF_SPEED_MIN
    fall_speed: float = WOLF_FALL_SPEED
    balloon_radius: int = BALLOON_RADIUS
    lane_height: int = FIELD_HEIGHT

    has_balloon: bool = True
    marked_for_deletion: bool = False
    fall_sound_played: bool = False

    @classmethod
    def spawn(
        cls,
        rng: random.Random | None = None,
        field_width: int = FIELD_WIDTH,
        lane_height: int = FIELD_HEIGHT,
    ) -> Wolf:
        """Create a wolf at a random x in the spawn band with a random drift speed."""
        rng = rng or random.Random()
        low, high = spawn_band(field_width)
        return cls(
            x=low + rng.random() * (high - low),
            speed_y=WOLF_SPEED_MIN + rng.random() * (WOLF_SPEED_MAX - WOLF_SPEED_MIN),
            lane_height=lane_height,
        )

    @property
    def balloon_center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y - BALLOON_OFFSET_Y)

    def pop(self) -> None:
        """Burst the balloon.  Buoyancy is never restored."""
        self.has_balloon = False

    def update(self) -> list[WolfEvent]:
        """Advance one tick and return the events it produced."""
        events: list[WolfEvent] = []
        if self.marked_for_deletion:
            return events

        if self.has_balloon:
            self.y += self.speed_y
        else:
            self.y += self.fall_speed
            if not self.fall_sound_played:
                self.fall_sound_played = True
                events.append(WolfEvent.FALLING)

        if self.bottom >= self.lane_height:
            self.y = self.lane_height - self.height
            self.marked_for_deletion = True
            if self.has_balloon:
                events.append(WolfEvent.LANDED_WITH_BALLOON)
            else:
                events.append(WolfEvent.LANDED_POPPED)
        return events

    def draw(self, target: DrawTarget) -> None:
        cx, cy = self.balloon_center
        if self.has_balloon:
            target.circle(COLOR_BALLOON, cx, cy, self.balloon_radius)
            target.circle(COLOR_BALLOON_SHINE, cx - 8, self.y - 23, 6)
            target.line(COLOR_WHITE, (cx, cy + self.balloon_radius), (cx, self.y))

        body = COLOR_WOLF if self.has_balloon else COLOR_WOLF_FALLING
        target.rect(body, self.x, self.y, self.width, self.height)

        eye = WOLF_EYE_BUOYANT if self.has_balloon else WOLF_EYE_FALLING
        target.rect(COLOR_WOLF_EYE, self.x + 5, self.y + 10, eye, eye)
        target.rect(COLOR_WOLF_EYE, self.x + 25, self.y + 10, eye, eye)
