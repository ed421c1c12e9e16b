import random

import pytest

from bowguy.collectibles import COBALT_UPGRADE, SILVER_UPGRADE, Coin, Heart, ShopItem
from bowguy.entities import Player
from bowguy.geometry import Rect


def test_collectible_rect_and_collision():
    coin = Coin(100, 100)
    assert coin.rect == Rect(100, 100, 64, 64)
    assert coin.collides(Player(100, 100).rect)
    assert not coin.collides(Rect(300, 300, 10, 10))


@pytest.mark.parametrize("seed", range(20))
def test_coin_gives_between_two_and_five(seed):
    player = Player(0, 0)
    player.coins = 10
    gained = Coin(0, 0).collect(player, random.Random(seed))
    assert 2 <= gained <= 5
    assert player.coins == 10 + gained


def test_heart_heals_and_caps():
    player = Player(0, 0)
    player.health = 2
    Heart().collect(player)
    assert player.health == 4
    player.health = 5
    Heart().collect(player)
    assert player.health == 6


def test_silver_upgrade_purchase():
    player = Player(0, 0)
    player.coins = 60
    item = ShopItem(500, 360, item_id=SILVER_UPGRADE, price=50, screen_id=5)
    item.buy(player)
    assert player.coins == 10
    assert player.arrow_type == 1


def test_cobalt_upgrade_purchase():
    player = Player(0, 0)
    player.coins = 110
    player.arrow_type = 1
    item = ShopItem(500, 360, item_id=COBALT_UPGRADE, price=110, screen_id=10)
    item.buy(player)
    assert player.coins == 0
    assert player.arrow_type == 2


def test_upgrade_never_downgrades():
    player = Player(0, 0)
    player.arrow_type = 2
    ShopItem(item_id=SILVER_UPGRADE, price=50).buy(player)
    assert player.arrow_type == 2


def test_is_offered_rules():
    silver = ShopItem(item_id=SILVER_UPGRADE, price=50, screen_id=5)
    cobalt = ShopItem(item_id=COBALT_UPGRADE, price=110, screen_id=10)
    assert silver.is_offered(5, 0)
    assert not silver.is_offered(5, 1)
    assert not silver.is_offered(4, 0)
    assert cobalt.is_offered(10, 2)
    assert not cobalt.is_offered(10, 1)
    assert not cobalt.is_offered(5, 2)