"""
Input handler for Pig Archer.

Maps keyboard and mouse events to game actions.  The game only ever sees
:class:`GameAction` values, never pygame events.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pygame


class GameAction(Enum):
    """Actions the player can trigger."""
    FIRE = auto()
    TOGGLE_MUTE = auto()
    START = auto()
    RESTART = auto()
    QUIT = auto()
    NONE = auto()


@dataclass
class InputEvent:
    """Abstract input event consumed by the game loop."""
    action: GameAction


KEY_BINDINGS: dict[int, GameAction] = {
    pygame.K_SPACE: GameAction.FIRE,
    pygame.K_RETURN: GameAction.FIRE,
    pygame.K_KP_ENTER: GameAction.FIRE,
    pygame.K_m: GameAction.TOGGLE_MUTE,
    pygame.K_s: GameAction.START,
    pygame.K_1: GameAction.START,
    pygame.K_r: GameAction.RESTART,
    pygame.K_ESCAPE: GameAction.QUIT,
}

# Left click / tap fires, like the on-screen fire button.
MOUSE_BINDINGS: dict[int, GameAction] = {
    1: GameAction.FIRE,
}


def map_event(event: pygame.event.Event) -> InputEvent:
    """Translate a pygame event into an :class:`InputEvent`."""
    if event.type == pygame.QUIT:
        return InputEvent(GameAction.QUIT)
    if event.type == pygame.KEYDOWN:
        return InputEvent(KEY_BINDINGS.get(event.key, GameAction.NONE))
    if event.type == pygame.MOUSEBUTTONDOWN:
        return InputEvent(MOUSE_BINDINGS.get(event.button, GameAction.NONE))
    return InputEvent(GameAction.NONE)
