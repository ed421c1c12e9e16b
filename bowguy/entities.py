"""The player and the ordinary enemies."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from .geometry import TILE_SIZE, Rect, degree_direction, step

PLAYER_MAX_HEALTH = 6
PLAYER_SPEED = 3
RELOAD_FRAMES = 50
CRAB_DASH_FRAMES = 35
CRAB_DASH_RANGE = 300
CRAB_SPEED = 8
SPIKE_SPEED = 7
SPIKE_DIRECTIONS = (45, 135, 225, 315)


class Drop(Enum):
    """What a defeated enemy leaves behind."""

    NONE = "none"
    COIN = "coin"
    HEART = "heart"


@dataclass(frozen=True)
class EnemyTemplate:
    """Base stats shared by all enemies of one kind."""

    health: int
    attack_timer: int
    contact_damage: int
    texture: Any = None


PLANT = EnemyTemplate(6, 120, 1)
CRAB = EnemyTemplate(12, 90, 1)
SPIKE = EnemyTemplate(14, 0, 2)
BOSS = EnemyTemplate(300, 100, 1)
ENEMY_TEMPLATES: tuple[EnemyTemplate, ...] = (PLANT, CRAB, SPIKE, BOSS)


class Entity:
    """Anything with health, a sprite and invincibility frames."""

    hitbox_inset = 0

    def __init__(self, x: int = 0, y: int = 0, health: int = 0, texture: Any = None) -> None:
        self.x = x
        self.y = y
        self.health = health
        self.texture = texture
        self.i_frames = 0

    @property
    def rect(self) -> Rect:
        inset = self.hitbox_inset
        size = TILE_SIZE - 2 * inset
        return Rect(self.x + inset, self.y + inset, size, size)

    def has_i_frames(self) -> bool:
        return self.i_frames > 0

    def lose_i_frame(self) -> None:
        self.i_frames -= 1

    def is_visible(self) -> bool:
        """False on the frames where a hurt entity blinks out."""
        return self.i_frames % 8 not in (6, 7)

    def collides(self, rect: Rect) -> bool:
        return self.rect.collides(rect)

    def _advance(self, direction: float, speed: float) -> None:
        dx, dy = step(direction, speed)
        self.x = int(self.x + dx)
        self.y = int(self.y + dy)


class Enemy(Entity):
    """An enemy built from a template."""

    coin_odds = 3
    heart_odds = 8

    def __init__(self, template: EnemyTemplate, x: int = 0, y: int = 0) -> None:
        super().__init__(x, y, template.health, template.texture)
        self.attack_timer = template.attack_timer
        self.contact_damage = template.contact_damage

    def roll_drop(self, rng) -> Drop:
        """Decide what this enemy drops when it dies."""
        if rng.randint(1, self.coin_odds) == self.coin_odds:
            return Drop.COIN
        if rng.randint(1, self.heart_odds) == self.heart_odds:
            return Drop.HEART
        return Drop.NONE


class Player(Entity):
    """The archer controlled by the keyboard and mouse."""

    hitbox_inset = 8

    def __init__(self, x: int = 0, y: int = 0, texture: Any = None) -> None:
        super().__init__(x, y, PLAYER_MAX_HEALTH, texture)
        self.speed = PLAYER_SPEED
        self.coins = 0
        self.arrow_type = 0
        self.reload_timer = 0
        self.facing_right = True

    def _try_move(self, dx: float, dy: float, walls: list) -> None:
        old = (self.x, self.y)
        self.x = int(self.x + dx)
        self.y = int(self.y + dy)
        rect = self.rect
        if any(wall.collides(rect) for wall in walls):
            self.x, self.y = old

    def apply_controls(self, up: bool, down: bool, left: bool, right: bool, walls: Iterable) -> None:
        """Move one frame for the held keys; a move into a wall is undone."""
        walls = list(walls)
        if up:
            self._try_move(0, -self.speed, walls)
        if down:
            self._try_move(0, self.speed, walls)
        if left:
            self.facing_right = False
            self._try_move(-self.speed, 0, walls)
        if right:
            self.facing_right = True
            self._try_move(self.speed, 0, walls)

    def try_shoot(self, target: tuple[float, float], editing: bool) -> float | None:
        """Fire at ``target`` if reloaded; return the shot's direction or None."""
        if self.reload_timer > 0 or editing:
            return None
        self.reload_timer = RELOAD_FRAMES
        return degree_direction((self.x, self.y), target, False)

    def tick(self) -> None:
        """End-of-frame countdown of reload and invincibility."""
        if self.reload_timer > 0:
            self.reload_timer -= 1
        if self.i_frames > 0:
            self.lose_i_frame()


class EnemyPlant(Enemy):
    """A stationary plant that shoots at the player."""

    def __init__(self, template: EnemyTemplate, x: int = 0, y: int = 0) -> None:
        super().__init__(template, x, y)
        self.timer = self.attack_timer

    def update(self, player: Player) -> float | None:
        """Count down; when due, return the direction of a shot at the player."""
        if self.timer == 0:
            self.timer = self.attack_timer
            return degree_direction((self.x, self.y), (player.x, player.y), True)
        self.timer -= 1
        return None


class EnemyCrab(Enemy):
    """A crab that dashes at a nearby player."""

    hitbox_inset = 8

    def __init__(self, template: EnemyTemplate, x: int = 0, y: int = 0) -> None:
        super().__init__(template, x, y)
        self.timer = self.attack_timer
        self.dash_timer = 0
        self.direction = 0.0
        self.speed = CRAB_SPEED

    def update(self, player: Player) -> None:
        if self.dash_timer > 0:
            self.dash()
            self.dash_timer -= 1
            return
        if self.timer > 0:
            self.timer -= 1
        elif math.dist((player.x, player.y), (self.x, self.y)) < CRAB_DASH_RANGE:
            self.start_dash(player)
            self.timer = self.attack_timer

    def start_dash(self, player: Player) -> None:
        self.dash_timer = CRAB_DASH_FRAMES
        self.direction = degree_direction((self.x, self.y), (player.x, player.y), False)

    def dash(self) -> None:
        self._advance(self.direction, self.speed)

    def bounce(self) -> None:
        """Stop the dash and back away from a wall."""
        self.dash_timer = 0
        self.direction += 180
        self.dash()
        self.dash()


class EnemySpike(Enemy):
    """A spike ball that keeps moving diagonally and bounces off walls."""

    coin_odds = 2
    hitbox_inset = 8

    def __init__(self, template: EnemyTemplate, x: int = 0, y: int = 0, rng=None) -> None:
        super().__init__(template, x, y)
        self.timer = self.attack_timer
        choice = rng.randint(0, 3) if rng is not None else 0
        self.direction = float(SPIKE_DIRECTIONS[choice])
        self.speed = SPIKE_SPEED

    def move(self) -> None:
        self._advance(self.direction, self.speed)

    def bounce(self, rng) -> None:
        """Back out of an obstacle and turn a random quarter turn."""
        self.direction += 180
        self.move()
        self.move()
        self.direction += 90 if rng.randint(0, 1) == 0 else -90