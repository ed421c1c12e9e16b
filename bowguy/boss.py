"""The boss fought on the final map."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from .entities import BOSS, Enemy, EnemyTemplate, Player
from .geometry import TILE_SIZE, Rect, degree_direction, step
from .projectiles import ENEMY_PROJECTILE, STANDARD_KINDS, Projectile, spawn_projectile

BOSS_SPEED = 8
BOSS_WIDTH = 128
BOSS_START = (750, 400)
FIRST_ATTACK_DELAY = 60
INTRO_WAIT_FRAMES = 60
HEALTH_BAR_FILL_STEP = 2
WANDER_REST = 40
SHOOTING_REST = 80
BARRAGE_FRAMES = 120
BARRAGE_INTERVAL = 12
BARRAGE_SPREAD = 15
FAN_FRAMES = 180
FAN_INTERVAL = 40
FAN_ANGLE = 20
CHANGE_DIR_START = 20
CHANGE_DIR_COOLDOWN = 40
ARENA_MID_X = 800
ARENA_MID_Y = 600
MUZZLE_OFFSET = 64


class BossAction(IntEnum):
    """The attack pattern the boss is carrying out."""

    NONE = -1
    WANDER = 0
    BARRAGE = 1
    FAN = 2


class Boss(Enemy):
    """A large enemy that wanders the arena and fires volleys at the player."""

    def __init__(
        self,
        template: EnemyTemplate = BOSS,
        x: int = BOSS_START[0],
        y: int = BOSS_START[1],
    ) -> None:
        super().__init__(template, x, y)
        self.timer = 0
        self.change_dir_timer = 0
        self.direction = 0.0
        self.speed = BOSS_SPEED
        self.next_attack_timer = FIRST_ATTACK_DELAY
        self.can_attack = True
        self.active = False
        self.dead = False
        self.action_taken = BossAction.NONE
        self.health_bar_timer = 0
        self.intro_wait_timer = INTRO_WAIT_FRAMES

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y + TILE_SIZE, BOSS_WIDTH, TILE_SIZE)

    def intro_step(self) -> bool:
        """Advance the intro by one frame: wait, fill the health bar, then wake up.

        Returns whether the boss is active.
        """
        if self.intro_wait_timer > 0:
            self.intro_wait_timer -= 1
        elif self.health_bar_timer < self.health:
            self.health_bar_timer += HEALTH_BAR_FILL_STEP
        else:
            self.active = True
        return self.active

    def run_ai(self, player: Player, walls: Iterable, rng) -> list[Projectile]:
        """Run one frame of behaviour and return the projectiles fired."""
        walls = list(walls)
        if self.health < 1:
            self.dead = True

        if self.next_attack_timer > 1:
            self.next_attack_timer -= 1
            return []

        if self.can_attack:
            self._choose_action(rng)

        shots: list[Projectile] = []
        if self.action_taken == BossAction.WANDER:
            self._wander(walls, rng)
            self._count_down(WANDER_REST)
        elif self.action_taken == BossAction.BARRAGE:
            if self.timer % BARRAGE_INTERVAL == 0:
                shots.append(self._shoot(player, rng.randint(-BARRAGE_SPREAD, BARRAGE_SPREAD)))
            self._count_down(SHOOTING_REST)
        elif self.action_taken == BossAction.FAN:
            phase = self.timer % FAN_INTERVAL
            if phase == 0:
                shots.append(self._shoot(player, 0))
            elif phase == FAN_INTERVAL // 2:
                shots.append(self._shoot(player, FAN_ANGLE))
                shots.append(self._shoot(player, -FAN_ANGLE))
            self._count_down(SHOOTING_REST)
        return shots

    def _choose_action(self, rng) -> None:
        choice = rng.randint(0, 3)
        if choice == BossAction.BARRAGE:
            self.action_taken = BossAction.BARRAGE
            self.timer = BARRAGE_FRAMES
        elif choice == BossAction.FAN:
            self.action_taken = BossAction.FAN
            self.timer = FAN_FRAMES
        else:
            self.action_taken = BossAction.WANDER
            self.timer = rng.randint(120, 240)
            self.change_dir_timer = CHANGE_DIR_START
            self.direction = 0.0
        self.can_attack = False

    def _count_down(self, rest: int) -> None:
        self.timer -= 1
        if self.timer < 0:
            self.can_attack = True
            self.next_attack_timer = rest

    def _shoot(self, player: Player, offset: float) -> Projectile:
        direction = degree_direction((self.x, self.y), (player.x, player.y), False) + offset
        return spawn_projectile(
            STANDARD_KINDS[ENEMY_PROJECTILE],
            self.x + MUZZLE_OFFSET,
            self.y + MUZZLE_OFFSET,
            direction,
        )

    def _turn(self, delta: float) -> None:
        self.direction += delta
        if self.direction > 359:
            self.direction -= 360
        elif self.direction < 0:
            self.direction += 360

    def _turn_from_side_wall(self) -> None:
        if self.x > ARENA_MID_X:
            if self.direction == 45:
                self._turn(90)
            elif self.direction == 315:
                self._turn(-90)
            else:
                self.direction = 180.0
        elif self.direction == 135:
            self._turn(-90)
        elif self.direction == 225:
            self._turn(90)
        else:
            self._turn(180)

    def _turn_from_end_wall(self) -> None:
        if self.y < ARENA_MID_Y:
            if self.direction == 135:
                self._turn(90)
            elif self.direction == 45:
                self._turn(-90)
            else:
                self._turn(180)
        elif self.direction == 225:
            self._turn(-90)
        elif self.direction == 315:
            self._turn(90)
        else:
            self._turn(180)

    def _hits_wall(self, walls: list) -> bool:
        rect = self.rect
        return any(wall.collides(rect) for wall in walls)

    def _wander(self, walls: list, rng) -> None:
        if rng.randint(1, 20) == 20 and self.change_dir_timer < 1:
            self.direction = float(45 * rng.randint(0, 7))
            self.change_dir_timer = CHANGE_DIR_COOLDOWN
        elif self.change_dir_timer > 0:
            self.change_dir_timer -= 1

        self.x = int(self.x + step(self.direction, self.speed)[0])
        if self._hits_wall(walls):
            self._turn_from_side_wall()
            self.x = int(self.x + step(self.direction, self.speed)[0])

        self.y = int(self.y + step(-self.direction, self.speed)[1])
        if self._hits_wall(walls):
            self._turn_from_end_wall()
            self.y = int(self.y + step(-self.direction, self.speed * 2)[1])