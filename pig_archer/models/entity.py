"""
Shared entity contract for Pig Archer.

Every simulated object has a position, a fixed size, a per-tick
``update`` and a ``draw`` that issues primitives against a
:class:`DrawTarget`.  Models never import pygame; the renderer in
``pig_archer.ui.renderer`` is the only concrete draw target.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, Sequence

Color = Sequence[int]
Point = tuple[float, float]


class DrawTarget(Protocol):
    """Drawing primitives in the play field's logical coordinate space."""

    def rect(self, color: Color, x: float, y: float,
             width: float, height: float) -> None: ...

    def circle(self, color: Color, cx: float, cy: float,
               radius: float, width: int = 0) -> None: ...

    def line(self, color: Color, start: Point, end: Point,
             width: int = 1) -> None: ...

    def polygon(self, color: Color, points: Sequence[Point]) -> None: ...


@dataclass
class Entity(ABC):
    """Base class for anything advanced once per tick."""

    x: float
    y: float
    width: int = 0
    height: int = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @abstractmethod
    def update(self) -> object:
        """Advance one tick."""

    @abstractmethod
    def draw(self, target: DrawTarget) -> None:
        """Issue this entity's primitives against *target*."""
