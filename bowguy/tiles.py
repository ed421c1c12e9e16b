"""Map tiles: floor, wall, transition and editor palette tiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .geometry import TILE_SIZE, Rect


@dataclass
class Tile:
    """A square tile drawn at a fixed screen position."""

    x: int = 0
    y: int = 0
    texture: Any = None

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, TILE_SIZE, TILE_SIZE)

    def collides(self, rect: Rect) -> bool:
        """Return True when ``rect`` overlaps this tile."""
        return self.rect.collides(rect)


@dataclass
class WallTile(Tile):
    """A tile that blocks movement and destroys projectiles."""


@dataclass
class TransitionTile(Tile):
    """A tile that moves the player to another map when touched."""

    tile_id: int = 0
    destination_id: int = 0
    player_dest_x: int = 0
    player_dest_y: int = 0


@dataclass
class EditorTile(Tile):
    """A tile shown in the level editor's palette."""