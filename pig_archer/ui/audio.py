"""
Audio manager for Pig Archer.

Provides sound-effect loading and playback plus looping background
music, gracefully degrading when pygame.mixer is unavailable or sound
files are missing.  All playback is fire-and-forget.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from pig_archer.config import MUSIC_VOLUME

logger = logging.getLogger(__name__)


class SoundEvent(Enum):
    """Identifiers for game sound effects."""
    SHOOT = auto()
    POP = auto()
    FALL = auto()
    SCORE = auto()
    HURT = auto()


# Map each event to its .wav file name inside data/sfx/
_SOUND_FILES: dict[SoundEvent, str] = {
    SoundEvent.SHOOT: "shoot.wav",
    SoundEvent.POP: "pop.wav",
    SoundEvent.FALL: "fall.wav",
    SoundEvent.SCORE: "score.wav",
    SoundEvent.HURT: "hurt.wav",
}

_MUSIC_FILE = "bgm.ogg"


@dataclass
class AudioManager:
    """Loads and plays sound effects and background music.

    Falls back to silent operation when the mixer is unavailable or
    individual sound files are missing.  ``muted`` gates everything,
    including music.
    """

    sfx_dir: str = os.path.join("data", "sfx")
    enabled: bool = True
    muted: bool = False
    music_volume: float = MUSIC_VOLUME

    # Internal state
    _initialized: bool = field(default=False, repr=False)
    _sounds: dict[SoundEvent, Any] = field(default_factory=dict, repr=False)
    _music_loaded: bool = field(default=False, repr=False)

    def init(self) -> bool:
        """Initialise the mixer and load available sound files.

        Returns True if the mixer was initialised successfully.

        The default SDL audio driver is not always detected (virtual
        environments, headless machines), so several common drivers are
        tried before giving up.
        """
        if not self.enabled:
            return False

        try:
            import pygame.mixer
            if not pygame.mixer.get_init():
                drivers = [None, "pulseaudio", "alsa", "dsp", "dummy"]
                initialized = False
                original_driver = os.environ.get("SDL_AUDIODRIVER")
                for driver in drivers:
                    try:
                        if driver is not None:
                            os.environ["SDL_AUDIODRIVER"] = driver
                        pygame.mixer.init()
                        initialized = True
                        break
                    except Exception as exc:
                        logger.debug("Audio driver %s unavailable: %s", driver, exc)
                        continue
                # Keep a working fallback driver active; restore only on failure.
                if not initialized:
                    if original_driver is not None:
                        os.environ["SDL_AUDIODRIVER"] = original_driver
                    elif "SDL_AUDIODRIVER" in os.environ:
                        del os.environ["SDL_AUDIODRIVER"]
                    logger.warning("No audio driver available; running silent")
                    self._initialized = False
                    return False
            self._initialized = True
        except Exception as exc:
            logger.warning("Audio initialisation failed: %s", exc)
            self._initialized = False
            return False

        self._load_sounds()
        self._load_music()
        return True

    def _load_sounds(self) -> None:
        """Attempt to load each configured sound file."""
        if not self._initialized:
            return
        try:
            import pygame.mixer
        except ImportError:
            return

        for event, filename in _SOUND_FILES.items():
            path = os.path.join(self.sfx_dir, filename)
            if not os.path.isfile(path):
                logger.debug("Sound file missing: %s", path)
                continue
            try:
                self._sounds[event] = pygame.mixer.Sound(path)
            except Exception as exc:
                logger.warning("Could not load %s: %s", path, exc)

    def _load_music(self) -> None:
        if not self._initialized:
            return
        path = os.path.join(self.sfx_dir, _MUSIC_FILE)
        if not os.path.isfile(path):
            logger.debug("Music file missing: %s", path)
            return
        try:
            import pygame.mixer
            pygame.mixer.music.load(path)
            pygame.mixer.music.set_volume(self.music_volume)
            self._music_loaded = True
        except Exception as exc:
            logger.warning("Could not load music %s: %s", path, exc)

    # ── Effects ─────────────────────────────────────────────────────────

    def play(self, event: SoundEvent) -> None:
        """Play the sound associated with *event*, if available."""
        if not self._initialized or not self.enabled or self.muted:
            return
        sound = self._sounds.get(event)
        if sound is not None:
            try:
                # Restart from the beginning if it is still playing.
                sound.stop()
                sound.play()
            except Exception as exc:
                logger.debug("Playback of %s failed: %s", event.name, exc)

    # ── Music ───────────────────────────────────────────────────────────

    def start_music(self) -> None:
        """Restart the background loop from the beginning unless muted."""
        if not self._music_loaded or self.muted:
            return
        try:
            import pygame.mixer
            pygame.mixer.music.play(loops=-1)
        except Exception as exc:
            logger.debug("Music playback failed: %s", exc)

    def pause_music(self) -> None:
        if not self._music_loaded:
            return
        try:
            import pygame.mixer
            pygame.mixer.music.pause()
        except Exception as exc:
            logger.debug("Music pause failed: %s", exc)

    def resume_music(self) -> None:
        if not self._music_loaded or self.muted:
            return
        try:
            import pygame.mixer
            if pygame.mixer.music.get_busy():
                return
            pygame.mixer.music.unpause()
            if not pygame.mixer.music.get_busy():
                pygame.mixer.music.play(loops=-1)
        except Exception as exc:
            logger.debug("Music resume failed: %s", exc)

    def toggle_mute(self, session_running: bool = False) -> bool:
        """Flip the mute flag and return the new value.

        Muting pauses the music; unmuting resumes it only while a session
        is running.
        """
        self.muted = not self.muted
        if self.muted:
            self.pause_music()
        elif session_running:
            self.resume_music()
        return self.muted

    def shutdown(self) -> None:
        """Release mixer resources."""
        if self._initialized:
            try:
                import pygame.mixer
                pygame.mixer.quit()
            except Exception as exc:
                logger.debug("Mixer shutdown failed: %s", exc)
            self._initialized = False
            self._music_loaded = False
            self._sounds.clear()
