"""Utility functions and helpers."""

from .functions import (
    arrow_hits_balloon,
    distance,
    get_spawn_interval,
    resolve_collisions,
    should_spawn,
)
from .input_handler import GameAction, InputEvent, map_event

__all__ = [
    "arrow_hits_balloon",
    "distance",
    "get_spawn_interval",
    "resolve_collisions",
    "should_spawn",
    "GameAction",
    "InputEvent",
    "map_event",
]
