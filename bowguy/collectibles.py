"""Pick-ups lying on the map and items sold in the shop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .entities import PLAYER_MAX_HEALTH, Player
from .geometry import TILE_SIZE, Rect

COIN_VALUE_RANGE = (2, 5)
HEART_HEAL = 2

SILVER_UPGRADE = 0
COBALT_UPGRADE = 1


@dataclass(eq=False)
class Collectible:
    """An item the player picks up by touching it."""

    x: int = 0
    y: int = 0
    texture: Any = None

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, TILE_SIZE, TILE_SIZE)

    def collides(self, rect: Rect) -> bool:
        """Return True when ``rect`` overlaps the item."""
        return self.rect.collides(rect)


@dataclass(eq=False)
class Coin(Collectible):
    """A coin dropped by a defeated enemy."""

    def collect(self, player: Player, rng) -> int:
        """Give the player a random number of coins and return how many."""
        amount = rng.randint(*COIN_VALUE_RANGE)
        player.coins += amount
        return amount


@dataclass(eq=False)
class Heart(Collectible):
    """A heart that restores one full heart of health."""

    def collect(self, player: Player) -> None:
        player.health = min(player.health + HEART_HEAL, PLAYER_MAX_HEALTH)


@dataclass(eq=False)
class ShopItem(Collectible):
    """An arrow upgrade offered on one shop screen."""

    item_id: int = SILVER_UPGRADE
    price: int = 0
    screen_id: int = 0

    def is_offered(self, map_number: int, arrow_type: int) -> bool:
        """Whether the item is on display for this map and arrow type."""
        if self.screen_id != map_number:
            return False
        if self.item_id == SILVER_UPGRADE:
            return arrow_type == 0
        return arrow_type >= 2

    def buy(self, player: Player) -> None:
        """Charge the player and apply the upgrade."""
        player.coins -= self.price
        if self.item_id == SILVER_UPGRADE:
            if player.arrow_type <= 0:
                player.arrow_type = 1
        elif self.item_id == COBALT_UPGRADE:
            if player.arrow_type <= 1:
                player.arrow_type = 2