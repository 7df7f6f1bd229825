from roguelike.models import Unit
from roguelike.models.unit import DEAD_COLOR, Stats
from roguelike.services import AttackOutcome, resolve_attack


def test_player_hits_orc_for_difference_of_stats():
    player, orc = Unit.player(1, 1), Unit.orc(2, 1)
    result = resolve_attack(player, orc)
    assert result.outcome is AttackOutcome.HIT
    assert result.damage == 5
    assert orc.stats.current_hp == 5
    assert result.message == "player attacks orc for 5 hit points."


def test_second_blow_kills_and_frees_tile():
    player, orc = Unit.player(1, 1), Unit.orc(2, 1)
    resolve_attack(player, orc)
    result = resolve_attack(player, orc)
    assert result.outcome is AttackOutcome.KILLED
    assert result.message.endswith("orc is dead!")
    assert not orc.alive
    assert not orc.blocks_point
    assert orc.color == DEAD_COLOR
    assert orc.base_color == "green"


def test_thirty_orc_hits_kill_the_player():
    player, orc = Unit.player(1, 1), Unit.orc(2, 1)
    for i in range(29):
        assert resolve_attack(orc, player).outcome is AttackOutcome.HIT
        assert player.stats.current_hp == 30 - (i + 1)
    assert player.alive
    assert resolve_attack(orc, player).outcome is AttackOutcome.KILLED
    assert not player.alive
    assert player.stats.current_hp == 0


def test_defense_can_absorb_a_blow():
    orc = Unit.orc(1, 1)
    tank = Unit(x=2, y=1, glyph="K", color="blue", name="knight", stats=Stats.preset(20, 3, 1))
    result = resolve_attack(orc, tank)
    assert result.outcome is AttackOutcome.ABSORBED
    assert result.damage == 0 and not result.dealt_damage
    assert tank.stats.current_hp == 20
    assert result.message == "orc attacks knight but it has no effect!"


def test_zero_damage_attacker_is_too_weak_even_against_negative_defense():
    rat = Unit(x=1, y=1, glyph="r", color="grey", name="rat", stats=Stats.preset(2, 0, 0))
    target = Unit(x=2, y=1, glyph="s", color="grey", name="slime", stats=Stats.preset(5, -1, 1))
    result = resolve_attack(rat, target)
    assert result.outcome is AttackOutcome.TOO_WEAK
    assert target.stats.current_hp == 5
    assert result.message == "rat is too weak to hurt slime."


def test_attacking_a_corpse_changes_nothing():
    player, orc = Unit.player(1, 1), Unit.orc(2, 1)
    orc.take_damage(100)
    hp_before = orc.stats.current_hp
    result = resolve_attack(player, orc)
    assert result.outcome is AttackOutcome.TARGET_DEAD
    assert orc.stats.current_hp == hp_before
    assert result.message == "orc is already dead."


def test_hp_never_increases_and_death_is_one_way():
    unit = Unit.troll(0, 0)
    history = [unit.stats.current_hp]
    for amount in (3, 0, -5, 4, 20, 7):
        unit.take_damage(amount)
        history.append(unit.stats.current_hp)
    assert all(b <= a for a, b in zip(history, history[1:]))
    assert not unit.alive
    assert unit.take_damage(5) is False
    assert history[-1] == unit.stats.current_hp


def test_kill_is_logged(capsys):
    player, orc = Unit.player(1, 1), Unit.orc(2, 1)
    orc.stats.current_hp = 1
    resolve_attack(player, orc)
    out = capsys.readouterr().out
    assert "event=unit_died" in out
    assert "name=orc" in out
