"""
Shared utility functions for Pig Archer.

Distance math, difficulty pacing and the arrow-versus-balloon collision
pass used by the game loop.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from pig_archer.config import (
    FAST_SPAWN_SCORE,
    HIT_PADDING,
    SPAWN_INTERVAL,
    SPAWN_INTERVAL_FAST,
)
from pig_archer.models.arrow import Arrow
from pig_archer.models.wolf import Wolf

logger = logging.getLogger(__name__)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


# ── Pacing ──────────────────────────────────────────────────────────────────


def get_spawn_interval(score: int) -> int:
    """Return the number of ticks between wolf spawns for *score*.

    Evaluated every tick, so dropping back to or below the threshold
    would restore the slow cadence.  Score never decreases in play.
    """
    if score > FAST_SPAWN_SCORE:
        return SPAWN_INTERVAL_FAST
    return SPAWN_INTERVAL


def should_spawn(tick: int, score: int) -> bool:
    return tick > 0 and tick % get_spawn_interval(score) == 0


# ── Collision ───────────────────────────────────────────────────────────────


def arrow_hits_balloon(arrow: Arrow, wolf: Wolf,
                       padding: float = HIT_PADDING) -> bool:
    """True if the arrow tip is within the wolf's balloon plus *padding*."""
    bx, by = wolf.balloon_center
    ax, ay = arrow.tip
    return distance(bx, by, ax, ay) < wolf.balloon_radius + padding


def resolve_collisions(arrows: Iterable[Arrow],
                       wolves: Iterable[Wolf]) -> list[Wolf]:
    """Pop every buoyant wolf whose balloon an unspent arrow reaches.

    A hit pops the wolf and marks the arrow, so each arrow pops at most
    one wolf and a popped wolf cannot be hit again.  Returns the wolves
    popped in this pass.
    """
    wolves = list(wolves)
    popped: list[Wolf] = []
    for arrow in arrows:
        for wolf in wolves:
            if arrow.marked_for_deletion:
                break
            if not wolf.has_balloon:
                continue
            if arrow_hits_balloon(arrow, wolf):
                wolf.pop()
                arrow.mark_for_deletion()
                popped.append(wolf)
                logger.debug("Balloon popped at x=%.0f y=%.0f", wolf.x, wolf.y)
    return popped
