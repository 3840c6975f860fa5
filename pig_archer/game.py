"""
Core game logic for Pig Archer.

Owns one play session: the pig, live arrows and wolves, score and lives,
and the Idle -> Running -> GameOver state machine.  ``update`` advances
exactly one tick; the application calls it once per display refresh.

The session never plays audio or draws directly.  Sound cues raised
during a tick are queued and drained by the caller with
:meth:`Game.drain_sounds`.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from pig_archer.config import FIELD_HEIGHT, FIELD_WIDTH, POINTS_PER_WOLF
from pig_archer.models.arrow import Arrow
from pig_archer.models.pig import Pig
from pig_archer.models.wolf import Wolf, WolfEvent
from pig_archer.ui.audio import SoundEvent
from pig_archer.ui.text import ScoreDisplay
from pig_archer.utils.functions import resolve_collisions, should_spawn
from pig_archer.utils.input_handler import GameAction

logger = logging.getLogger(__name__)


# ── Game states ─────────────────────────────────────────────────────────────


class GameState(Enum):
    IDLE = auto()
    RUNNING = auto()
    GAME_OVER = auto()


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Session state and the per-tick update loop."""

    state: GameState = GameState.IDLE
    seed: Optional[int] = None
    field_width: int = FIELD_WIDTH
    field_height: int = FIELD_HEIGHT

    pig: Pig = field(default_factory=Pig)
    arrows: list[Arrow] = field(default_factory=list)
    wolves: list[Wolf] = field(default_factory=list)
    score_display: ScoreDisplay = field(default_factory=ScoreDisplay)
    tick_count: int = 0

    rng: random.Random = field(init=False, repr=False)
    _sound_queue: list[SoundEvent] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    # ── Convenience accessors ───────────────────────────────────────────

    @property
    def score(self) -> int:
        return self.score_display.player_score

    @property
    def lives(self) -> int:
        return self.score_display.lives

    @property
    def is_running(self) -> bool:
        return self.state == GameState.RUNNING

    # ── Session lifecycle ───────────────────────────────────────────────

    def start(self) -> bool:
        """Leave the start screen.  Only accepted while idle."""
        if self.state != GameState.IDLE:
            return False
        self._begin_session()
        return True

    def restart(self) -> bool:
        """Start a fresh session after game over."""
        if self.state != GameState.GAME_OVER:
            return False
        self._begin_session()
        return True

    def _begin_session(self) -> None:
        self.score_display.reset()
        self.tick_count = 0
        self.pig = Pig(lane_height=self.field_height)
        self.arrows = []
        self.wolves = []
        self._sound_queue.clear()
        self.state = GameState.RUNNING
        logger.info("Session started")

    def game_over(self) -> None:
        if self.state != GameState.RUNNING:
            return
        self.state = GameState.GAME_OVER
        logger.info("Game over with score %d", self.score)

    # ── Player actions ──────────────────────────────────────────────────

    def fire(self) -> bool:
        """Loose an arrow from the pig's current position."""
        if self.state != GameState.RUNNING:
            return False
        x, y = self.pig.muzzle
        self.arrows.append(Arrow(x, y, field_width=self.field_width))
        self._sound_queue.append(SoundEvent.SHOOT)
        return True

    def handle_action(self, action: GameAction) -> bool:
        """Apply a player action.  Returns False if it was ignored."""
        if action == GameAction.FIRE:
            return self.fire()
        if action == GameAction.START:
            return self.start()
        if action == GameAction.RESTART:
            return self.restart()
        return False

    # ── Spawning ────────────────────────────────────────────────────────

    def spawn_wolf(self) -> Optional[Wolf]:
        """Add a wolf in the spawn band.  Ignored unless the session is running."""
        if self.state != GameState.RUNNING:
            return None
        wolf = Wolf.spawn(self.rng, self.field_width, self.field_height)
        self.wolves.append(wolf)
        logger.debug("Wolf spawned at x=%.0f speed=%.2f", wolf.x, wolf.speed_y)
        return wolf

    # ── Per-tick update ─────────────────────────────────────────────────

    def update(self) -> GameState:
        """Advance the session by one tick.

        Returns the current GameState after the update.  Does nothing
        unless the session is running.
        """
        if self.state != GameState.RUNNING:
            return self.state

        # 1. Pig
        self.pig.update()

        # 2. Spawn cadence
        self.tick_count += 1
        if should_spawn(self.tick_count, self.score):
            self.spawn_wolf()

        # 3. Arrows
        for arrow in self.arrows:
            arrow.update()
        self.arrows = [a for a in self.arrows if not a.marked_for_deletion]

        # 4. Wolves (landing applies score / damage)
        for wolf in self.wolves:
            for event in wolf.update():
                self._apply_wolf_event(event)
        self.wolves = [w for w in self.wolves if not w.marked_for_deletion]

        # 5. Arrows vs balloons
        for _ in resolve_collisions(self.arrows, self.wolves):
            self._sound_queue.append(SoundEvent.POP)

        return self.state

    def _apply_wolf_event(self, event: WolfEvent) -> None:
        if event == WolfEvent.FALLING:
            self._sound_queue.append(SoundEvent.FALL)
        elif event == WolfEvent.LANDED_WITH_BALLOON:
            remaining = self.score_display.lose_life()
            self._sound_queue.append(SoundEvent.HURT)
            logger.debug("Wolf landed with balloon, %d lives left", remaining)
            if remaining <= 0:
                self.game_over()
        elif event == WolfEvent.LANDED_POPPED:
            self.score_display.add(POINTS_PER_WOLF)
            self._sound_queue.append(SoundEvent.SCORE)

    # ── Audio hand-off ──────────────────────────────────────────────────

    def drain_sounds(self) -> list[SoundEvent]:
        """Return and clear the sound cues queued since the last call."""
        sounds = self._sound_queue
        self._sound_queue = []
        return sounds
