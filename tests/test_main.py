"""
Tests for main.py – argument parsing and application wiring.
"""

import pygame
import pytest

from main import FRAME_TIME, PigArcherApp, configure_logging, parse_args
from pig_archer.game import GameState
from pig_archer.models import Wolf
from pig_archer.ui.audio import AudioManager, SoundEvent
from pig_archer.utils.input_handler import GameAction, InputEvent, map_event


class RecordingAudio(AudioManager):
    """AudioManager that records calls instead of touching the mixer."""

    def __init__(self):
        super().__init__(enabled=False)
        self.played = []
        self.music = []

    def play(self, event):
        if not self.muted:
            self.played.append(event)

    def start_music(self):
        self.music.append("start")

    def pause_music(self):
        self.music.append("pause")

    def resume_music(self):
        self.music.append("resume")


# ── Argument parsing ───────────────────────────────────────────────────────


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.fullscreen is False
        assert args.mute is False
        assert args.no_audio is False
        assert args.seed is None
        assert args.debug is False
        assert args.log_level == "WARNING"

    def test_fullscreen_flag(self):
        assert parse_args(["--fullscreen"]).fullscreen is True

    def test_seed(self):
        assert parse_args(["--seed", "17"]).seed == 17

    def test_invalid_seed_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--seed", "abc"])

    def test_log_level_case_insensitive(self):
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "chatty"])

    def test_mute_and_no_audio_mutually_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--mute", "--no-audio"])

    def test_sfx_dir(self):
        assert parse_args(["--sfx-dir", "/tmp/sfx"]).sfx_dir == "/tmp/sfx"

    def test_configure_logging_accepts_levels(self):
        configure_logging("INFO")


# ── Input mapping ───────────────────────────────────────────────────────────


class TestInputMapping:
    @pytest.mark.parametrize("key,action", [
        (pygame.K_SPACE, GameAction.FIRE),
        (pygame.K_RETURN, GameAction.FIRE),
        (pygame.K_m, GameAction.TOGGLE_MUTE),
        (pygame.K_s, GameAction.START),
        (pygame.K_r, GameAction.RESTART),
        (pygame.K_ESCAPE, GameAction.QUIT),
        (pygame.K_z, GameAction.NONE),
    ])
    def test_keys(self, key, action):
        event = pygame.event.Event(pygame.KEYDOWN, key=key)
        assert map_event(event) == InputEvent(action)

    def test_tap_fires(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10))
        assert map_event(event).action == GameAction.FIRE

    def test_right_click_ignored(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10))
        assert map_event(event).action == GameAction.NONE

    def test_window_close_quits(self):
        assert map_event(pygame.event.Event(pygame.QUIT)).action == GameAction.QUIT


# ── PigArcherApp (without a display) ───────────────────────────────────────


class TestPigArcherApp:
    def test_app_defaults(self):
        app = PigArcherApp()
        assert app.fullscreen is False
        assert app.debug is False
        assert app.running is False
        assert app.game.state == GameState.IDLE

    def test_frame_time_constant(self):
        assert abs(FRAME_TIME - 1.0 / 60) < 1e-6

    def test_seed_reaches_game(self):
        assert PigArcherApp(seed=5).game.seed == 5

    def test_run_without_init_is_noop(self):
        app = PigArcherApp()
        app.run()
        assert app.running is False

    def test_render_without_display_is_noop(self):
        PigArcherApp()._render()


class TestDispatch:
    def make_app(self):
        return PigArcherApp(audio=RecordingAudio())

    def test_start_begins_music(self):
        app = self.make_app()
        assert app._dispatch(GameAction.START) is True
        assert app.game.state == GameState.RUNNING
        assert app.audio.music == ["start"]

    def test_fire_only_while_running(self):
        app = self.make_app()
        assert app._dispatch(GameAction.FIRE) is False
        app._dispatch(GameAction.START)
        assert app._dispatch(GameAction.FIRE) is True
        assert len(app.game.arrows) == 1

    def test_quit_stops_loop(self):
        app = self.make_app()
        app.running = True
        app._dispatch(GameAction.QUIT)
        assert app.running is False

    def test_mute_toggle(self):
        app = self.make_app()
        app._dispatch(GameAction.START)
        app._dispatch(GameAction.TOGGLE_MUTE)
        assert app.audio.muted is True
        app._dispatch(GameAction.TOGGLE_MUTE)
        assert app.audio.muted is False
        assert app.audio.music == ["start", "pause", "resume"]

    def test_unmute_while_idle_keeps_music_off(self):
        app = self.make_app()
        app._dispatch(GameAction.TOGGLE_MUTE)
        app._dispatch(GameAction.TOGGLE_MUTE)
        assert app.audio.music == ["pause"]

    def test_restart_after_game_over(self):
        app = self.make_app()
        app._dispatch(GameAction.START)
        app.game.game_over()
        assert app._dispatch(GameAction.RESTART) is True
        assert app.audio.music == ["start", "start"]


class TestUpdate:
    def test_update_plays_queued_cues(self):
        app = PigArcherApp(audio=RecordingAudio())
        app._dispatch(GameAction.START)
        app._dispatch(GameAction.FIRE)
        app._update()
        assert app.audio.played == [SoundEvent.SHOOT]
        assert app.game.drain_sounds() == []

    def test_muted_cues_are_dropped(self):
        app = PigArcherApp(audio=RecordingAudio())
        app._dispatch(GameAction.START)
        app._dispatch(GameAction.TOGGLE_MUTE)
        app._dispatch(GameAction.FIRE)
        app._update()
        assert app.audio.played == []

    def test_game_over_pauses_music(self):
        app = PigArcherApp(audio=RecordingAudio())
        app._dispatch(GameAction.START)
        app.game.score_display.lives = 1
        app.game.wolves.append(Wolf(x=500, y=600))
        app._update()
        assert app.game.state == GameState.GAME_OVER
        assert app.audio.music == ["start", "pause"]
        assert SoundEvent.HURT in app.audio.played
