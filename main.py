"""
Main entry point for Pig Archer.

Initializes pygame, runs the 60 Hz game loop and wires the game session
to the display, audio and input adapters.

Usage:
    python main.py [OPTIONS]

Options:
    --fullscreen         Launch in fullscreen mode
    --mute               Start with all audio muted
    --no-audio           Do not initialise the mixer at all
    --seed N             Seed the wolf spawner (deterministic replays)
    --debug              Enable debug overlay
    --sfx-dir DIR        Directory holding sound effects and music
    --log-level LEVEL    Logging verbosity (default: WARNING)

Controls:
    S / 1                Start
    SPACE / ENTER / click  Shoot
    M                    Mute / unmute
    R                    Restart after game over
    ESC                  Quit
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass, field
from typing import Optional

import pygame

from pig_archer.config import FIELD_HEIGHT, FIELD_WIDTH, UPDATE_RATE
from pig_archer.game import Game, GameState
from pig_archer.ui.audio import AudioManager
from pig_archer.ui.renderer import Renderer
from pig_archer.utils.input_handler import GameAction, map_event

logger = logging.getLogger(__name__)


# ── Constants ───────────────────────────────────────────────────────────────

FRAME_TIME: float = 1.0 / UPDATE_RATE          # ~16.67 ms
FPS_WINDOW: int = 60                            # frames averaged for the FPS readout

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ── Argument parsing ───────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Pig Archer – pop the wolves' balloons before they land",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    audio_group = parser.add_mutually_exclusive_group()
    audio_group.add_argument(
        "--mute", action="store_true",
        help="Start with audio muted (M toggles)",
    )
    audio_group.add_argument(
        "--no-audio", action="store_true",
        help="Skip mixer initialisation entirely",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        metavar="N",
        help="Seed for the wolf spawner",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug overlay (FPS, tick, entity counts)",
    )
    parser.add_argument(
        "--sfx-dir", default=os.path.join("data", "sfx"),
        metavar="DIR",
        help="Directory containing sound effects and bgm.ogg",
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class PigArcherApp:
    """Top-level application wrapper.

    Owns the pygame display, the game session and the main loop.
    """

    fullscreen: bool = False
    debug: bool = False
    seed: Optional[int] = None

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    renderer: Optional[Renderer] = field(default=None, repr=False)
    game: Game = field(default_factory=Game)
    running: bool = False

    # Performance tracking
    frame_times: list[float] = field(default_factory=list)
    fps: float = 0.0

    # Audio
    audio: AudioManager = field(default_factory=AudioManager)

    def __post_init__(self) -> None:
        if self.seed is not None:
            self.game = Game(seed=self.seed)

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        try:
            pygame.init()
        except Exception as exc:
            logger.error("Error initialising pygame: %s", exc)
            return False

        flags = pygame.SCALED
        if self.fullscreen:
            flags |= pygame.FULLSCREEN

        try:
            self.screen = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT), flags)
        except Exception as exc:
            logger.error("Error creating display: %s", exc)
            pygame.quit()
            return False

        pygame.display.set_caption("Pig Archer")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)
        self.audio.init()

        self.running = True
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main game loop at 60 FPS."""
        if not self.running:
            return

        try:
            while self.running:
                frame_start = time.perf_counter()

                self._handle_events()
                self._update()
                self._render()

                self.clock.tick(UPDATE_RATE)

                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                if len(self.frame_times) > FPS_WINDOW:
                    self.frame_times.pop(0)
                avg = sum(self.frame_times) / len(self.frame_times)
                self.fps = 1.0 / avg if avg > 0 else 0.0
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Process pending pygame events."""
        for event in pygame.event.get():
            self._dispatch(map_event(event).action)

    def _dispatch(self, action: GameAction) -> bool:
        """Apply one player action between ticks."""
        if action == GameAction.QUIT:
            self.running = False
            return True
        if action == GameAction.TOGGLE_MUTE:
            muted = self.audio.toggle_mute(self.game.is_running)
            logger.info("Audio %s", "muted" if muted else "unmuted")
            return True
        accepted = self.game.handle_action(action)
        if accepted and action in (GameAction.START, GameAction.RESTART):
            self.audio.start_music()
        return accepted

    # ── Game logic update ───────────────────────────────────────────────

    def _update(self) -> None:
        """Run one tick of game logic and play the cues it raised."""
        prev = self.game.state
        self.game.update()

        for sound in self.game.drain_sounds():
            self.audio.play(sound)

        if prev != GameState.GAME_OVER and self.game.state == GameState.GAME_OVER:
            self.audio.pause_music()

    # ── Rendering ───────────────────────────────────────────────────────

    def _render(self) -> None:
        """Execute the rendering pipeline."""
        if self.screen is None or self.renderer is None:
            return
        try:
            self.renderer.draw_frame(self.game, self.fps if self.debug else None)
            pygame.display.flip()
        except pygame.error as exc:
            logger.warning("Frame render failed: %s", exc)

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        self.audio.shutdown()
        try:
            pygame.quit()
        except Exception as exc:
            logger.debug("pygame.quit failed: %s", exc)


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    app = PigArcherApp(
        fullscreen=args.fullscreen,
        debug=args.debug,
        seed=args.seed,
        audio=AudioManager(
            sfx_dir=args.sfx_dir,
            enabled=not args.no_audio,
            muted=args.mute,
        ),
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
