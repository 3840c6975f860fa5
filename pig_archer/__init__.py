"""
Pig Archer - a stationary archer pops the balloons of descending wolves.
"""

__version__ = "1.0.0"

from .game import Game, GameState

__all__ = ["Game", "GameState"]
