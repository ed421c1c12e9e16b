import math

import pytest

from bowguy.entities import (
    CRAB,
    PLANT,
    SPIKE,
    Drop,
    EnemyCrab,
    EnemyPlant,
    EnemySpike,
    EnemyTemplate,
    Entity,
    Player,
)
from bowguy.geometry import Rect
from bowguy.tiles import WallTile


class ScriptedRng:
    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        return value


@pytest.mark.parametrize("frames, visible", [(0, True), (5, True), (6, False), (7, False), (8, True), (15, False)])
def test_visibility_blinks(frames, visible):
    entity = Entity(0, 0, 1)
    entity.i_frames = frames
    assert entity.is_visible() is visible


def test_i_frames_countdown():
    entity = Entity(0, 0, 1)
    entity.i_frames = 1
    assert entity.has_i_frames()
    entity.lose_i_frame()
    assert not entity.has_i_frames()


def test_player_defaults_and_hitbox():
    player = Player(768, 500)
    assert player.health == 6
    assert player.coins == 0
    assert player.rect == Rect(776, 508, 48, 48)


def test_player_moves_by_speed():
    player = Player(100, 100)
    player.apply_controls(False, True, False, True, [])
    assert (player.x, player.y) == (103, 103)
    assert player.facing_right


def test_player_blocked_by_wall():
    player = Player(100, 100)
    wall = WallTile(100, 30)
    before = player.y
    player.apply_controls(True, False, True, False, [wall])
    assert player.y == before
    assert player.x == 97
    assert not player.facing_right


def test_player_shoot_and_reload():
    player = Player(100, 100)
    direction = player.try_shoot((182, 132), False)
    assert math.isclose(direction, 0.0, abs_tol=1e-9)
    assert player.reload_timer == 50
    assert player.try_shoot((182, 132), False) is None
    player.tick()
    assert player.reload_timer == 49


def test_player_cannot_shoot_while_editing():
    player = Player(0, 0)
    assert player.try_shoot((10, 10), True) is None
    assert player.reload_timer == 0


def test_plant_fires_after_timer():
    plant = EnemyPlant(EnemyTemplate(6, 2, 1), 0, 0)
    player = Player(0, 200)
    assert plant.update(player) is None
    assert plant.update(player) is None
    direction = plant.update(player)
    assert math.isclose(direction, 90.0)
    assert plant.timer == 2


def test_plant_uses_template():
    plant = EnemyPlant(PLANT, 10, 20)
    assert plant.health == PLANT.health
    assert plant.timer == PLANT.attack_timer
    assert plant.rect == Rect(10, 20, 64, 64)


def test_crab_ignores_distant_player():
    crab = EnemyCrab(EnemyTemplate(12, 1, 1), 0, 0)
    far = Player(1000, 1000)
    for _ in range(5):
        crab.update(far)
    assert crab.dash_timer == 0


def test_crab_dashes_toward_player():
    crab = EnemyCrab(EnemyTemplate(12, 2, 1), 100, 100)
    player = Player(332, 132)
    crab.update(player)
    crab.update(player)
    crab.update(player)
    assert crab.dash_timer == 35
    assert crab.timer == 2
    crab.update(player)
    assert crab.x == 108
    assert crab.y == 100
    assert crab.dash_timer == 34


def test_crab_bounce_reverses():
    crab = EnemyCrab(CRAB, 100, 100)
    crab.direction = 0.0
    crab.dash_timer = 10
    crab.bounce()
    assert crab.dash_timer == 0
    assert crab.x < 100


def test_spike_direction_from_rng():
    spike = EnemySpike(SPIKE, 0, 0, ScriptedRng(2))
    assert spike.direction == 225
    assert spike.contact_damage == SPIKE.contact_damage


def test_spike_bounce_turns():
    spike = EnemySpike(SPIKE, 200, 200, ScriptedRng(0))
    spike.bounce(ScriptedRng(0))
    assert spike.direction % 360 == 315
    assert spike.x < 200 and spike.y < 200


def test_spike_move_is_diagonal():
    spike = EnemySpike(SPIKE, 200, 200, ScriptedRng(0))
    spike.move()
    assert spike.x - 200 == spike.y - 200 > 0


def test_drop_rolls():
    plant = EnemyPlant(PLANT)
    assert plant.roll_drop(ScriptedRng(3)) is Drop.COIN
    assert plant.roll_drop(ScriptedRng(1, 8)) is Drop.HEART
    assert plant.roll_drop(ScriptedRng(1, 2)) is Drop.NONE
    spike = EnemySpike(SPIKE, 0, 0, ScriptedRng(0))
    assert spike.roll_drop(ScriptedRng(2)) is Drop.COIN