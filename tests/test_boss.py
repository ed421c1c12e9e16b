import pytest

from bowguy.boss import Boss, BossAction
from bowguy.entities import BOSS, Player
from bowguy.geometry import Rect, degree_direction
from bowguy.projectiles import ENEMY_PROJECTILE, STANDARD_KINDS
from bowguy.tiles import WallTile


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        self.calls.append((low, high))
        return value


def ready_boss():
    boss = Boss()
    boss.next_attack_timer = 1
    return boss


def test_new_boss_uses_template_and_start_state():
    boss = Boss()
    assert (boss.x, boss.y) == (750, 400)
    assert boss.health == BOSS.health
    assert boss.contact_damage == BOSS.contact_damage
    assert boss.next_attack_timer == 60
    assert boss.intro_wait_timer == 60
    assert boss.can_attack and not boss.active and not boss.dead
    assert boss.action_taken == BossAction.NONE


def test_rect_is_lower_half_of_sprite():
    boss = Boss(BOSS, 10, 20)
    assert boss.rect == Rect(10, 20 + 64, 128, 64)


def test_waits_before_first_attack():
    boss = Boss()
    rng = ScriptedRng([])
    shots = boss.run_ai(Player(0, 0), [], rng)
    assert shots == []
    assert boss.next_attack_timer == 59
    assert rng.calls == []


def test_dies_when_health_runs_out():
    boss = Boss()
    boss.health = 0
    boss.run_ai(Player(0, 0), [], ScriptedRng([]))
    assert boss.dead is True


def test_intro_waits_then_fills_then_activates():
    boss = Boss()
    boss.health = 4
    results = [boss.intro_step() for _ in range(60)]
    assert not any(results)
    assert boss.intro_wait_timer == 0
    assert boss.health_bar_timer == 0
    assert boss.intro_step() is False
    assert boss.health_bar_timer == 2
    assert boss.intro_step() is False
    assert boss.health_bar_timer == 4
    assert boss.intro_step() is True
    assert boss.active is True


def test_barrage_fires_enemy_projectile_at_player():
    boss = ready_boss()
    player = Player(boss.x + 100, boss.y)
    rng = ScriptedRng([BossAction.BARRAGE, 5])
    shots = boss.run_ai(player, [], rng)
    assert boss.action_taken == BossAction.BARRAGE
    assert boss.can_attack is False
    assert boss.timer == 119
    assert len(shots) == 1
    shot = shots[0]
    assert shot.kind == STANDARD_KINDS[ENEMY_PROJECTILE]
    expected = degree_direction((boss.x, boss.y), (player.x, player.y), False) + 5
    assert shot.direction == pytest.approx(expected)
    assert (shot.x, shot.y) == (boss.x + 64 + 32, boss.y + 64 + 32)


def test_barrage_only_fires_on_interval():
    boss = ready_boss()
    boss.run_ai(Player(0, 0), [], ScriptedRng([BossAction.BARRAGE, 0]))
    shots = boss.run_ai(Player(0, 0), [], ScriptedRng([]))
    assert shots == []
    assert boss.timer == 118


def test_fan_fires_pair_around_player_direction():
    boss = ready_boss()
    player = Player(boss.x + 100, boss.y)
    shots = boss.run_ai(player, [], ScriptedRng([BossAction.FAN]))
    assert boss.timer == 179
    base = degree_direction((boss.x, boss.y), (player.x, player.y), False)
    assert [s.direction for s in shots] == pytest.approx([base + 20, base - 20])


def test_action_three_becomes_wander():
    boss = ready_boss()
    rng = ScriptedRng([3, 150, 1])
    start_x, start_y = boss.x, boss.y
    shots = boss.run_ai(Player(0, 0), [], rng)
    assert shots == []
    assert boss.action_taken == BossAction.WANDER
    assert boss.timer == 149
    assert boss.change_dir_timer == 19
    assert boss.x == start_x + boss.speed
    assert boss.y == start_y


def test_wander_changes_direction_when_allowed():
    boss = ready_boss()
    boss.can_attack = False
    boss.action_taken = BossAction.WANDER
    boss.timer = 100
    boss.change_dir_timer = 0
    start_x, start_y = boss.x, boss.y
    boss.run_ai(Player(0, 0), [], ScriptedRng([20, 2]))
    assert boss.direction == 90
    assert boss.change_dir_timer == 40
    assert boss.x == start_x
    assert boss.y == start_y - boss.speed


def test_wander_bounces_off_side_wall():
    boss = Boss(BOSS, 500, 400)
    boss.next_attack_timer = 1
    boss.can_attack = False
    boss.action_taken = BossAction.WANDER
    boss.timer = 100
    boss.change_dir_timer = 5
    wall = WallTile(500 + 128 + 4, 400 + 64)
    boss.run_ai(Player(0, 0), [wall], ScriptedRng([1]))
    assert boss.direction == 180
    assert boss.x == 500
    assert not wall.collides(boss.rect)


def test_attack_ends_and_rests_when_timer_expires():
    boss = ready_boss()
    boss.can_attack = False
    boss.action_taken = BossAction.BARRAGE
    boss.timer = 0
    shots = boss.run_ai(Player(0, 0), [], ScriptedRng([0]))
    assert len(shots) == 1
    assert boss.can_attack is True
    assert boss.next_attack_timer == 80


def test_collides_with_player_rect():
    boss = Boss()
    assert boss.collides(Rect(boss.x + 10, boss.y + 70, 10, 10))
    assert not boss.collides(Rect(boss.x + 10, boss.y + 10, 10, 10))