"""Tests for the die-type registry."""

import pytest

from yzcore.modules.dice.errors import DiceError, UnknownDieType, UnknownGame
from yzcore.modules.dice.types import (
    DIE_TYPES,
    GAMES,
    LADDER,
    check_die_type,
    get_die_type,
    get_game_die_types,
)


def test_games_in_order():
    assert GAMES == ("myz", "fbl", "alien", "tales", "cor", "vae", "t2k")


def test_game_die_types():
    assert get_game_die_types("myz") == ("base", "skill", "gear", "neg")
    assert get_game_die_types("alien") == ("skill", "stress")
    assert get_game_die_types("t2k") == ("a", "b", "c", "d", "ammo", "loc")


def test_every_game_die_type_is_registered():
    for game in GAMES:
        for key in get_game_die_types(game):
            assert get_die_type(key).key == key


def test_denominations_are_unique():
    denominations = [t.denomination for t in DIE_TYPES.values()]
    assert len(denominations) == len(set(denominations))


def test_unknown_die_type_lists_alternatives():
    with pytest.raises(UnknownDieType, match='"d20"') as exc_info:
        get_die_type("d20")
    assert "base" in str(exc_info.value)
    assert "loc" in str(exc_info.value)


def test_unknown_game_lists_alternatives():
    with pytest.raises(UnknownGame) as exc_info:
        get_game_die_types("dnd")
    msg = str(exc_info.value)
    assert '"dnd"' in msg
    assert "myz, fbl, alien, tales, cor, vae, t2k" in msg


def test_die_type_not_legal_for_game():
    with pytest.raises(UnknownDieType) as exc_info:
        check_die_type("alien", "base")
    assert exc_info.value.allowed == ("skill", "stress")


def test_errors_are_value_errors():
    assert issubclass(UnknownGame, DiceError)
    assert issubclass(DiceError, ValueError)


def test_ladder_faces_grow():
    assert [get_die_type(k).faces for k in LADDER] == [6, 8, 10, 12]


class TestLockedValues:
    def test_base_and_gear_lock_ones_and_sixes(self):
        for key in ("base", "gear", "stress"):
            assert get_die_type(key).locked_values == {1, 6}

    def test_skill_locks_six(self):
        assert get_die_type("skill").locked_values == {6}
        assert get_die_type("neg").locked_values == {6}

    def test_artifact_locks_six_and_up(self):
        assert get_die_type("artoD12").locked_values == set(range(6, 13))
        assert get_die_type("artoD8").locked_values == {6, 7, 8}

    def test_twilight_locks_one_and_six_up(self):
        assert get_die_type("b").locked_values == {1, 6, 7, 8, 9, 10}

    def test_ammo_and_location_never_lock(self):
        assert get_die_type("ammo").locked_values == frozenset()
        assert get_die_type("loc").locked_values == frozenset()


class TestSuccess:
    @pytest.mark.parametrize("key", ["base", "skill", "gear", "stress", "ammo"])
    def test_threshold(self, key):
        die_type = get_die_type(key)
        assert [die_type.success_for(v) for v in range(1, 7)] == [0, 0, 0, 0, 0, 1]

    def test_negative_die_subtracts(self):
        assert get_die_type("neg").success_for(6) == -1
        assert get_die_type("neg").success_for(5) == 0

    def test_artifact_table(self):
        die_type = get_die_type("artoD12")
        assert [die_type.success_for(v) for v in range(1, 13)] == [
            0, 0, 0, 0, 0, 1, 1, 2, 2, 3, 3, 4,
        ]

    def test_twilight_table(self):
        die_type = get_die_type("a")
        assert [die_type.success_for(v) for v in range(1, 13)] == [
            0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2,
        ]

    def test_location_counts_nothing(self):
        assert get_die_type("loc").counts_successes is False
        assert get_die_type("loc").success_for(6) == 0


class TestLabels:
    def test_base_labels(self):
        base = get_die_type("base")
        assert [base.label_for(v) for v in range(1, 7)] == ["☣", "2", "3", "4", "5", "☢"]

    def test_gear_damage_label(self):
        assert get_die_type("gear").label_for(1) == "💥"

    def test_skill_has_no_bane_label(self):
        assert get_die_type("skill").label_for(1) == "1"
        assert get_die_type("skill").label_for(6) == "☢"

    def test_stress_labels(self):
        stress = get_die_type("stress")
        assert stress.label_for(1) == "⚠️"
        assert stress.label_for(6) == "✔️"

    def test_ammo_labels(self):
        ammo = get_die_type("ammo")
        assert ammo.label_for(1) == "•"
        assert ammo.label_for(3) == "3"
        assert ammo.label_for(6) == "🎯"

    def test_location_zones(self):
        loc = get_die_type("loc")
        assert [loc.label_for(v) for v in range(1, 7)] == ["L", "T", "T", "T", "A", "H"]

    def test_artifact_shows_face(self):
        assert get_die_type("artoD10").label_for(9) == "9"
