"""The game world: the loaded map, everything on it and one frame of play."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Sequence

from .boss import Boss
from .collectibles import COBALT_UPGRADE, SILVER_UPGRADE, Coin, Heart, ShopItem
from .entities import (
    ENEMY_TEMPLATES,
    PLAYER_MAX_HEALTH,
    Drop,
    Enemy,
    EnemyCrab,
    EnemyPlant,
    EnemySpike,
    EnemyTemplate,
    Player,
)
from .mapfile import MAP_CELLS, MapData, load_map, map_path, tile_position
from .projectiles import ENEMY_PROJECTILE, STANDARD_KINDS, Projectile, ProjectileKind, spawn_projectile
from .tiles import Tile, TransitionTile, WallTile

ENEMY_I_FRAMES = 40
PLAYER_I_FRAMES = 90
START_MAP = 0
BOSS_MAP = 16
SHOP_MAPS = (5, 10)
PLAYER_START = (768, 500)
DEATH_PENALTY = 10

MAIN_MUSIC = "main"
BOSS_MUSIC = "boss"

HEART_FULL = "full"
HEART_HALF = "half"
HEART_EMPTY = "empty"
HEART_COUNT = 3

FLOOR_LAYER = 0
WALL_LAYER = 1
TRANSITION_LAYER = 2
ENEMY_LAYER = 3

PLANT_CODE = 1
CRAB_CODE = 2
SPIKE_CODE = 3
BOSS_TEMPLATE = 3


class SoundEvent(Enum):
    """A sound effect the frame asks to be played."""

    SHOOT = "shoot"
    HIT = "hit"
    ENEMY_SHOOT = "enemy_shoot"
    COIN = "coin"


@dataclass
class Controls:
    """The input state for one frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False
    target: tuple[float, float] = (0.0, 0.0)
    start: bool = False
    restart: bool = False


class World:
    """All game state, advanced one frame at a time by :meth:`update`.

    No map is loaded on construction; call :meth:`load_map` first.
    """

    def __init__(
        self,
        maps_dir: str | Path,
        rng: random.Random | None = None,
        tile_textures: Mapping[int, Any] | None = None,
        enemy_templates: Sequence[EnemyTemplate] = ENEMY_TEMPLATES,
        projectile_kinds: Sequence[ProjectileKind] = STANDARD_KINDS,
        coin_texture: Any = None,
        heart_texture: Any = None,
    ) -> None:
        self.maps_dir = Path(maps_dir)
        self.rng = rng if rng is not None else random.Random()
        self.tile_textures = dict(tile_textures or {})
        self.enemy_templates = tuple(enemy_templates)
        self.projectile_kinds = tuple(projectile_kinds)
        self.coin_texture = coin_texture
        self.heart_texture = heart_texture

        self.map_number = START_MAP
        self.map_data = MapData.blank()
        self.title_screen = True
        self.editing = False
        self.music = MAIN_MUSIC

        self.player = Player(*PLAYER_START)
        self.boss = Boss(self.enemy_templates[BOSS_TEMPLATE])

        self.floor_tiles: list[Tile] = []
        self.wall_tiles: list[WallTile] = []
        self.transition_tiles: list[TransitionTile] = self.map_data.transitions
        self.plants: list[EnemyPlant] = []
        self.crabs: list[EnemyCrab] = []
        self.spikes: list[EnemySpike] = []
        self.arrows: list[Projectile] = []
        self.enemy_projectiles: list[Projectile] = []
        self.coins: list[Coin] = []
        self.hearts: list[Heart] = []

        self.shop_items = [
            ShopItem(500, 360, self._kind_texture(1), SILVER_UPGRADE, 50, SHOP_MAPS[0]),
            ShopItem(500, 360, self._kind_texture(2), COBALT_UPGRADE, 110, SHOP_MAPS[1]),
        ]

    def _kind_texture(self, index: int) -> Any:
        if index < len(self.projectile_kinds):
            return self.projectile_kinds[index].texture
        return None

    @property
    def won(self) -> bool:
        """Whether the boss has been defeated on the boss map."""
        return self.map_number == BOSS_MAP and self.boss.dead

    @property
    def is_shop(self) -> bool:
        return self.map_number in SHOP_MAPS

    # ------------------------------------------------------------------ maps

    def load_map(self, map_id: int) -> None:
        """Load map ``map_id`` from the maps directory and rebuild its contents."""
        self.arrows.clear()
        self.enemy_projectiles.clear()
        self.coins.clear()
        self.hearts.clear()
        self.map_data = load_map(map_path(self.maps_dir, map_id))
        self.map_number = map_id
        self.build_layers()
        if map_id == BOSS_MAP:
            self.boss = Boss(self.enemy_templates[BOSS_TEMPLATE])
            self.music = BOSS_MUSIC
        if map_id == START_MAP:
            self.music = MAIN_MUSIC

    def build_layers(self) -> None:
        """Create tiles and enemies from the current map data."""
        self._build_floor()
        self._build_walls()
        self._build_enemies()
        self.transition_tiles = self.map_data.transitions
        for tile in self.transition_tiles:
            tile.texture = self.tile_textures.get(tile.tile_id)

    def _occupied_cells(self, layer: list[int]):
        for index, value in enumerate(layer):
            if value != 0:
                yield value, tile_position(index)

    def _build_floor(self) -> None:
        self.floor_tiles = [
            Tile(x, y, self.tile_textures.get(value))
            for value, (x, y) in self._occupied_cells(self.map_data.floor)
        ]

    def _build_walls(self) -> None:
        self.wall_tiles = [
            WallTile(x, y, self.tile_textures.get(value))
            for value, (x, y) in self._occupied_cells(self.map_data.walls)
        ]

    def _build_enemies(self) -> None:
        self.plants = []
        self.crabs = []
        self.spikes = []
        for value, (x, y) in self._occupied_cells(self.map_data.enemies):
            if value == PLANT_CODE:
                self.plants.append(EnemyPlant(self.enemy_templates[value - 1], x, y))
            elif value == CRAB_CODE:
                self.crabs.append(EnemyCrab(self.enemy_templates[value - 1], x, y))
            elif value == SPIKE_CODE:
                self.spikes.append(EnemySpike(self.enemy_templates[value - 1], x, y, self.rng))

    # ---------------------------------------------------------------- editor

    def editor_place(self, layer: int, tile_id: int, index: int) -> None:
        """Put ``tile_id`` into map cell ``index`` of an editor layer."""
        x, y = tile_position(index)
        if layer == FLOOR_LAYER:
            self.map_data.floor[index] = tile_id
            self._build_floor()
        elif layer == WALL_LAYER:
            self.map_data.walls[index] = tile_id
            self._build_walls()
        elif layer == TRANSITION_LAYER:
            self._edit_transition(tile_id, x, y)
        elif layer == ENEMY_LAYER:
            self.map_data.enemies[index] = tile_id
            self._build_enemies()
        else:
            raise ValueError(f"unknown editor layer {layer}")

    def _edit_transition(self, tile_id: int, x: int, y: int) -> None:
        existing = next((t for t in self.transition_tiles if t.x == x and t.y == y), None)
        if tile_id == 0:
            if existing is not None:
                self.transition_tiles.remove(existing)
            return
        if existing is not None:
            return
        self.transition_tiles.append(
            TransitionTile(x, y, self.tile_textures.get(tile_id), tile_id=tile_id, destination_id=0)
        )

    # ------------------------------------------------------------------ HUD

    def heart_states(self) -> list[str]:
        """The state of each heart in the health display, left to right."""
        states = []
        for slot in range(1, HEART_COUNT + 1):
            full_at = slot * 2
            if self.player.health >= full_at:
                states.append(HEART_FULL)
            elif self.player.health == full_at - 1:
                states.append(HEART_HALF)
            else:
                states.append(HEART_EMPTY)
        return states

    # ----------------------------------------------------------------- frame

    def update(self, controls: Controls) -> list[SoundEvent]:
        """Advance the game by one frame and return the sounds to play."""
        sounds: list[SoundEvent] = []
        if self.title_screen:
            if controls.start:
                self.title_screen = False
            return sounds

        self._clear_blocked_projectiles(self.wall_tiles)
        self._check_transitions()
        self._update_plants(sounds)
        self._update_crabs(sounds)
        self._update_spikes(sounds)
        self._move_projectiles(sounds)
        self._update_shop()
        if self.map_number == BOSS_MAP and not self.boss.dead:
            self._update_boss(sounds)
        self._update_player(controls, sounds)
        self._collect_items(sounds)
        self._check_death()
        if self.won:
            self.enemy_projectiles.clear()
            self.arrows.clear()
            if controls.restart:
                self.load_map(START_MAP)
        return sounds

    def _clear_blocked_projectiles(self, tiles: list) -> None:
        for group in (self.arrows, self.enemy_projectiles):
            group[:] = [p for p in group if not any(t.collides(p.rect) for t in tiles)]

    def _check_transitions(self) -> None:
        player_rect = self.player.rect
        for tile in self.transition_tiles:
            if tile.collides(player_rect):
                self.load_map(tile.destination_id)
                self.player.x = tile.player_dest_x
                self.player.y = tile.player_dest_y
                return
        self._clear_blocked_projectiles(self.transition_tiles)

    def _enemy_shot(self, x: float, y: float, direction: float, sounds: list) -> None:
        kind = self.projectile_kinds[ENEMY_PROJECTILE]
        self.enemy_projectiles.append(spawn_projectile(kind, x, y, direction))
        sounds.append(SoundEvent.ENEMY_SHOOT)

    def _take_arrow_hits(self, target: Enemy, sounds: list) -> None:
        for arrow in list(self.arrows):
            if target.collides(arrow.rect):
                sounds.append(SoundEvent.HIT)
                target.i_frames = ENEMY_I_FRAMES
                target.health -= arrow.damage
                arrow.pierce -= 1
                if arrow.pierce < 0:
                    self.arrows.remove(arrow)

    def _hurt_player(self, damage: int, sounds: list) -> None:
        sounds.append(SoundEvent.HIT)
        self.player.i_frames = PLAYER_I_FRAMES
        self.player.health -= damage

    def _kill(self, enemy: Enemy, group: list) -> None:
        drop = enemy.roll_drop(self.rng)
        if drop is Drop.COIN:
            self.coins.append(Coin(enemy.x, enemy.y, self.coin_texture))
        elif drop is Drop.HEART:
            self.hearts.append(Heart(enemy.x, enemy.y, self.heart_texture))
        group.remove(enemy)

    def _defend(self, enemy: Enemy, sounds: list) -> None:
        if enemy.has_i_frames():
            enemy.lose_i_frame()
        else:
            self._take_arrow_hits(enemy, sounds)

    def _contact(self, enemy: Enemy, sounds: list) -> None:
        if not self.player.has_i_frames() and self.player.collides(enemy.rect):
            self._hurt_player(enemy.contact_damage, sounds)

    def _update_plants(self, sounds: list) -> None:
        for plant in list(self.plants):
            direction = plant.update(self.player)
            if direction is not None:
                self._enemy_shot(plant.x, plant.y, direction, sounds)
            if plant.has_i_frames():
                plant.lose_i_frame()
                continue
            self._take_arrow_hits(plant, sounds)
            if plant.health <= 0:
                self._kill(plant, self.plants)

    def _update_crabs(self, sounds: list) -> None:
        for crab in list(self.crabs):
            crab.update(self.player)
            for wall in self.wall_tiles:
                if wall.collides(crab.rect):
                    crab.bounce()
            self._defend(crab, sounds)
            if crab.health <= 0:
                self._kill(crab, self.crabs)
                continue
            self._contact(crab, sounds)

    def _update_spikes(self, sounds: list) -> None:
        for spike in list(self.spikes):
            spike.move()
            for tile in [*self.wall_tiles, *self.transition_tiles]:
                if tile.collides(spike.rect):
                    spike.bounce(self.rng)
            self._defend(spike, sounds)
            if spike.health <= 0:
                self._kill(spike, self.spikes)
                continue
            self._contact(spike, sounds)

    def _move_projectiles(self, sounds: list) -> None:
        for arrow in self.arrows:
            arrow.go_forward()
        for projectile in list(self.enemy_projectiles):
            projectile.go_forward()
            if self.player.has_i_frames():
                continue
            if self.player.collides(projectile.rect):
                self._hurt_player(projectile.damage, sounds)
                projectile.pierce -= 1
                if projectile.pierce < 0:
                    self.enemy_projectiles.remove(projectile)

    def _update_shop(self) -> None:
        for item in self.shop_items:
            if (
                item.is_offered(self.map_number, self.player.arrow_type)
                and item.collides(self.player.rect)
                and item.price <= self.player.coins
            ):
                item.buy(self.player)

    def _update_boss(self, sounds: list) -> None:
        boss = self.boss
        if boss.active:
            for shot in boss.run_ai(self.player, self.wall_tiles, self.rng):
                self.enemy_projectiles.append(shot)
                sounds.append(SoundEvent.ENEMY_SHOOT)
        else:
            boss.intro_step()
        self._defend(boss, sounds)
        self._contact(boss, sounds)

    def _update_player(self, controls: Controls, sounds: list) -> None:
        player = self.player
        player.apply_controls(controls.up, controls.down, controls.left, controls.right, self.wall_tiles)
        if controls.shoot:
            direction = player.try_shoot(controls.target, self.editing)
            if direction is not None:
                kind = self.projectile_kinds[player.arrow_type]
                self.arrows.append(spawn_projectile(kind, player.x, player.y, direction))
                sounds.append(SoundEvent.SHOOT)
        player.tick()

    def _collect_items(self, sounds: list) -> None:
        player_rect = self.player.rect
        for coin in list(self.coins):
            if coin.collides(player_rect):
                sounds.append(SoundEvent.COIN)
                coin.collect(self.player, self.rng)
                self.coins.remove(coin)
        for heart in list(self.hearts):
            if heart.collides(player_rect):
                heart.collect(self.player)
                self.hearts.remove(heart)

    def _check_death(self) -> None:
        player = self.player
        if player.health > 0:
            return
        self.load_map(START_MAP)
        player.x, player.y = PLAYER_START
        player.coins = max(player.coins - DEATH_PENALTY, 0)
        player.health = PLAYER_MAX_HEALTH


__all__ = ["Controls", "SoundEvent", "World", "MAP_CELLS"]