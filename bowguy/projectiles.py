"""Projectile kinds and the projectiles in flight."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .geometry import SPRITE_HALF, Rect, step

PROJECTILE_HITBOX = 48


class RotationType(IntEnum):
    """How a projectile sprite is rotated when drawn."""

    NONE = 0
    HEADING = 1
    DIAGONAL_SPRITE = 2


@dataclass(frozen=True)
class ProjectileKind:
    """Shared stats of one type of projectile."""

    damage: int
    pierce: int
    speed: float
    rotation_type: int = RotationType.NONE
    texture: Any = None

    def rotation(self, direction: float) -> float:
        """Sprite rotation in degrees for a projectile heading ``direction``."""
        if self.rotation_type == RotationType.HEADING:
            return direction
        if self.rotation_type == RotationType.DIAGONAL_SPRITE:
            return direction + 45
        return 0.0


ARROW = ProjectileKind(5, 0, 8, RotationType.DIAGONAL_SPRITE)
SILVER_ARROW = ProjectileKind(8, 1, 10, RotationType.DIAGONAL_SPRITE)
COBALT_ARROW = ProjectileKind(15, 3, 12, RotationType.DIAGONAL_SPRITE)
PLANT_SEED = ProjectileKind(1, 0, 9, RotationType.NONE)

STANDARD_KINDS: tuple[ProjectileKind, ...] = (ARROW, SILVER_ARROW, COBALT_ARROW, PLANT_SEED)
ENEMY_PROJECTILE = 3


@dataclass(eq=False)
class Projectile:
    """A projectile in flight, positioned by its centre."""

    kind: ProjectileKind
    x: float
    y: float
    direction: float
    pierce: int = field(init=False)

    def __post_init__(self) -> None:
        self.pierce = self.kind.pierce

    @property
    def damage(self) -> int:
        return self.kind.damage

    @property
    def speed(self) -> float:
        return self.kind.speed

    @property
    def rotation(self) -> float:
        return self.kind.rotation(self.direction)

    @property
    def rect(self) -> Rect:
        half = PROJECTILE_HITBOX / 2
        return Rect(self.x - half, self.y - half, PROJECTILE_HITBOX, PROJECTILE_HITBOX)

    def go_forward(self) -> None:
        """Advance one frame along the heading."""
        dx, dy = step(self.direction, self.speed)
        self.x += dx
        self.y += dy


def spawn_projectile(kind: ProjectileKind, x: float, y: float, direction: float) -> Projectile:
    """Create a projectile fired by a sprite whose top-left corner is at (x, y)."""
    return Projectile(kind, int(x + SPRITE_HALF), int(y + SPRITE_HALF), direction)