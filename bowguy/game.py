"""The Tale of Bow Guy: window, assets, input and drawing around the game world."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import pygame

from .entities import ENEMY_TEMPLATES, Entity
from .geometry import TILE_SIZE
from .projectiles import STANDARD_KINDS
from .world import BOSS_MAP, BOSS_MUSIC, HEART_FULL, HEART_HALF, MAIN_MUSIC, START_MAP, Controls, SoundEvent, World

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 1000
FPS = 60
WINDOW_TITLE = "Final Project :D"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (230, 41, 55)
ORANGE = (255, 161, 0)
DARKBLUE = (0, 82, 172)
TITLE_BACKGROUND = (16, 23, 80)

TILE_FILES = (
    "projectiles/arrow.png",
    "tiles/tile_ground.png",
    "tiles/tile_ground_leaves.png",
    "tiles/tile_area_exit.png",
    "tiles/tile_wall_horiz.png",
    "tiles/tile_wall_vert.png",
    "tiles/tile_wall_tl_corner.png",
    "tiles/tile_wall_tr_corner.png",
    "tiles/tile_wall_bl_corner.png",
    "tiles/tile_wall_br_corner.png",
    "tiles/tile_wall_vert_top.png",
    "tiles/tile_wall_vert_bottom.png",
    "tiles/tile_wall_horiz_left.png",
    "tiles/tile_wall_horiz_right.png",
)
ENEMY_FILES = (
    "enemies/enemy_plant.png",
    "enemies/enemy_crab_rock.png",
    "enemies/enemy_spike.png",
    "enemies/boss.png",
)
PROJECTILE_FILES = (
    "projectiles/arrow.png",
    "projectiles/arrow_silver.png",
    "projectiles/arrow_cobalt.png",
    "projectiles/proj_plant.png",
)
SOUND_FILES = {
    SoundEvent.SHOOT: "shoot.wav",
    SoundEvent.HIT: "hit.wav",
    SoundEvent.ENEMY_SHOOT: "enemyShoot.wav",
    SoundEvent.COIN: "pickupCoin.wav",
}
MUSIC_FILES = {MAIN_MUSIC: "Main Song.wav", BOSS_MUSIC: "Boss Music.mp3"}

HEART_SLOTS_X = (1200, 1270, 1340)
HEALTH_BAR = (20, 950, 40)


def load_texture(path: str | Path, size: tuple[int, int] | None = None) -> pygame.Surface:
    """Load an image, scaled to ``size`` when one is given.

    A missing or unreadable file gives a fully transparent surface of ``size``,
    or of one tile when no size is given, so the game still runs without it.
    """
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        return pygame.Surface(size or (TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
    if size is not None and surface.get_size() != tuple(size):
        surface = pygame.transform.scale(surface, size)
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


@dataclass
class _Assets:
    tiles: dict[int, pygame.Surface]
    enemy_templates: tuple
    projectile_kinds: tuple
    player_right: pygame.Surface
    player_left: pygame.Surface
    crosshair: pygame.Surface
    crosshair_inactive: pygame.Surface
    heart_full: pygame.Surface
    heart_half: pygame.Surface
    heart_empty: pygame.Surface
    shopkeeper: pygame.Surface
    coin: pygame.Surface
    heart: pygame.Surface
    sounds: dict[SoundEvent, Any] = field(default_factory=dict)
    music: dict[str, Path] = field(default_factory=dict)


def _load_assets(resources: Path, audio: bool) -> _Assets:
    tile = (TILE_SIZE, TILE_SIZE)

    def texture(name: str, size: tuple[int, int] | None = tile) -> pygame.Surface:
        return load_texture(resources / name, size)

    sounds: dict[SoundEvent, Any] = {}
    if audio:
        for event, name in SOUND_FILES.items():
            try:
                sounds[event] = pygame.mixer.Sound(str(resources / name))
            except (pygame.error, FileNotFoundError, OSError):
                sounds[event] = None

    return _Assets(
        tiles={index: texture(name) for index, name in enumerate(TILE_FILES)},
        enemy_templates=tuple(
            replace(template, texture=texture(name, None))
            for template, name in zip(ENEMY_TEMPLATES, ENEMY_FILES)
        ),
        projectile_kinds=tuple(
            replace(kind, texture=texture(name)) for kind, name in zip(STANDARD_KINDS, PROJECTILE_FILES)
        ),
        player_right=texture("player_right.png"),
        player_left=texture("player_left.png"),
        crosshair=texture("crosshair.png"),
        crosshair_inactive=texture("crosshair_red.png"),
        heart_full=texture("heart_full.png"),
        heart_half=texture("heart_half.png"),
        heart_empty=texture("heart_empty.png"),
        shopkeeper=texture("shopkeeper.png"),
        coin=texture("coin.png"),
        heart=texture("heart_full.png"),
        sounds=sounds,
        music={name: resources / file for name, file in MUSIC_FILES.items()},
    )


class _Text:
    """Draws text with the default font, caching one font per size."""

    def __init__(self) -> None:
        self._fonts: dict[int, pygame.font.Font] = {}

    def draw(self, screen: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        for line_number, line in enumerate(text.split("\n")):
            screen.blit(font.render(line, True, color), (x, y + line_number * size))


class _Music:
    """Keeps the streamed background track in step with the world."""

    def __init__(self, tracks: dict[str, Path], enabled: bool) -> None:
        self.tracks = tracks
        self.enabled = enabled
        self.current: str | None = None

    def play(self, name: str) -> None:
        if not self.enabled or name == self.current:
            return
        self.current = name
        path = self.tracks.get(name)
        if path is None:
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(-1)
        except (pygame.error, FileNotFoundError, OSError):
            pass


def _blit(screen: pygame.Surface, texture, x: float, y: float) -> None:
    if texture is not None:
        screen.blit(texture, (round(x), round(y)))


def _blit_centered(screen: pygame.Surface, texture, x: float, y: float, angle: float) -> None:
    if texture is None:
        return
    image = pygame.transform.rotate(texture, -angle) if angle else texture
    screen.blit(image, image.get_rect(center=(round(x), round(y))))


def _draw_entity(screen: pygame.Surface, entity: Entity) -> None:
    if entity.is_visible():
        _blit(screen, entity.texture, entity.x, entity.y)


def _draw_title(screen: pygame.Surface, assets: _Assets, text: _Text) -> None:
    screen.fill(TITLE_BACKGROUND)
    text.draw(screen, "The Tale of", 500, 100, 100, WHITE)
    text.draw(screen, "Bow Guy", 400, 200, 200, RED)
    text.draw(screen, 'Press "T" to begin!', 510, 870, 60, WHITE)
    width, height = assets.player_right.get_size()
    big = pygame.transform.scale(assets.player_right, (width * 6, height * 6))
    screen.blit(big, (620, 430))


def _draw_boss(screen: pygame.Surface, world: World) -> None:
    boss = world.boss
    _draw_entity(screen, boss)
    x, y, height = HEALTH_BAR
    if boss.active:
        width = boss.health * 2
    elif boss.intro_wait_timer <= 0:
        width = boss.health_bar_timer * 2
    else:
        width = 0
    if width > 0:
        pygame.draw.rect(screen, ORANGE, (x, y, width, height))


def _draw_hearts(screen: pygame.Surface, world: World, assets: _Assets) -> None:
    for x, state in zip(HEART_SLOTS_X, world.heart_states()):
        if state == HEART_FULL:
            texture = assets.heart_full
        elif state == HEART_HALF:
            texture = assets.heart_half
        else:
            texture = assets.heart_empty
        _blit(screen, texture, x, 30)


def _render(screen: pygame.Surface, world: World, assets: _Assets, text: _Text, mouse: tuple[int, int]) -> None:
    """Draw one frame of the world."""
    if world.title_screen:
        _draw_title(screen, assets, text)
        return

    screen.fill(DARKBLUE)
    for tile in (*world.floor_tiles, *world.wall_tiles, *world.transition_tiles):
        _blit(screen, tile.texture, tile.x, tile.y)
    for enemy in (*world.plants, *world.crabs, *world.spikes):
        _draw_entity(screen, enemy)
    for projectile in (*world.arrows, *world.enemy_projectiles):
        _blit_centered(screen, projectile.kind.texture, projectile.x, projectile.y, projectile.rotation)

    for item in world.shop_items:
        if item.is_offered(world.map_number, world.player.arrow_type):
            _blit(screen, item.texture, item.x, item.y)
            text.draw(screen, str(item.price), item.x + 20, item.y + 64, 20, WHITE)
    if world.is_shop:
        _blit(screen, assets.shopkeeper, 768, 200)
        text.draw(screen, "Buy something with your coins!", 500, 280, 40, WHITE)

    if world.map_number == BOSS_MAP and not world.boss.dead:
        _draw_boss(screen, world)

    text.draw(screen, f"Coins : {world.player.coins}", 100, 40, 50, WHITE)
    _draw_hearts(screen, world, assets)

    player = world.player
    player.texture = assets.player_right if player.facing_right else assets.player_left
    _draw_entity(screen, player)

    for item in (*world.coins, *world.hearts):
        _blit(screen, item.texture, item.x, item.y)

    crosshair = assets.crosshair_inactive if player.reload_timer > 0 else assets.crosshair
    _blit(screen, crosshair, mouse[0] - 32, mouse[1] - 32)

    if world.won:
        pygame.draw.rect(screen, BLACK, (360, 230, 900, 600))
        text.draw(screen, "You won!", 610, 400, 100, WHITE)
        text.draw(screen, "Click R to go back to the\nwith your upgrades!", 430, 520, 60, WHITE)


def _read_controls(keys, shoot: bool, mouse: tuple[int, int]) -> Controls:
    return Controls(
        up=bool(keys[pygame.K_w]),
        down=bool(keys[pygame.K_s]),
        left=bool(keys[pygame.K_a]),
        right=bool(keys[pygame.K_d]),
        shoot=shoot,
        target=(float(mouse[0]), float(mouse[1])),
        start=bool(keys[pygame.K_t]),
        restart=bool(keys[pygame.K_r]),
    )


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="bowguy", description="Play The Tale of Bow Guy.")
    parser.add_argument("--resources", default="resources", help="directory holding images and sounds")
    parser.add_argument("--maps", default="maps", help="directory holding the map files")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random number generator")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def _init_audio() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    return True


def main(argv=None) -> int:
    """Open the game window and play until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.mouse.set_visible(False)
        audio = _init_audio()

        assets = _load_assets(Path(args.resources), audio)
        world = World(
            args.maps,
            rng=random.Random(args.seed),
            tile_textures=assets.tiles,
            enemy_templates=assets.enemy_templates,
            projectile_kinds=assets.projectile_kinds,
            coin_texture=assets.coin,
            heart_texture=assets.heart,
        )
        try:
            world.load_map(START_MAP)
        except (OSError, ValueError) as exc:
            print(f"bowguy: cannot load map {START_MAP}: {exc}", file=sys.stderr)
            return 1

        text = _Text()
        music = _Music(assets.music, audio)
        clock = pygame.time.Clock()
        frame = 0
        running = True
        while running:
            shoot = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_p:
                        world.editing = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    shoot = True
            if not running:
                break

            mouse = pygame.mouse.get_pos()
            sounds = world.update(_read_controls(pygame.key.get_pressed(), shoot, mouse))
            for sound_event in sounds:
                sound = assets.sounds.get(sound_event)
                if sound is not None:
                    sound.play()
            if not world.title_screen:
                music.play(world.music)

            _render(screen, world, assets, text, mouse)
            pygame.display.flip()
            clock.tick(FPS)

            frame += 1
            if args.frames is not None and frame >= args.frames:
                break
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())