"""Rectangles, directions and movement steps shared by every game object."""

from __future__ import annotations

import math
from dataclasses import dataclass

TILE_SIZE = 64
SPRITE_HALF = TILE_SIZE // 2


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains_point(self, px: float, py: float) -> bool:
        """Return True when the point lies inside; the far edges are exclusive."""
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


def degree_direction(
    pos: tuple[float, float],
    other_pos: tuple[float, float],
    adjust_second: bool,
) -> float:
    """Angle in degrees from the centre of the sprite at ``pos`` towards ``other_pos``.

    ``pos`` is a sprite's top-left corner and is shifted to its centre. ``other_pos``
    is shifted the same way only when ``adjust_second`` is true.
    """
    ax = pos[0] + SPRITE_HALF
    ay = pos[1] + SPRITE_HALF
    bx, by = other_pos
    if adjust_second:
        bx += SPRITE_HALF
        by += SPRITE_HALF
    return math.degrees(math.atan2(by - ay, bx - ax))


def step(direction: float, speed: float) -> tuple[float, float]:
    """Displacement of one frame of movement along ``direction`` degrees."""
    radians = math.radians(direction)
    return math.cos(radians) * speed, math.sin(radians) * speed