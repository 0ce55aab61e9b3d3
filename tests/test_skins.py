import pytest

from questrpg.geometry import Rect
from questrpg.skins import (
    Direction,
    PowerStyle,
    alien_power_skin,
    boss_power_skin,
    dragon_boss_power_skin,
    dragon_power_skin,
    helldog_power_skin,
    player_skin,
    power_skin,
    switch_skin,
    zombie_power_skin,
)


def test_player_skin_up_frame():
    assert player_skin(3) == Rect(290, 677, 90, 98)


def test_player_skin_frames_share_size_and_column():
    frames = [player_skin(i) for i in range(4)]
    assert {(f.left, f.width, f.height) for f in frames} == {(290, 90, 98)}
    tops = [f.top for f in frames]
    assert tops == sorted(tops)


def test_power_skin_down_frame():
    assert power_skin(3) == Rect(96, 226, 33, 25)


def test_power_skin_frames_share_row():
    assert {power_skin(i).top for i in range(4)} == {226}


@pytest.mark.parametrize(
    "func", [player_skin, power_skin, boss_power_skin, dragon_power_skin, dragon_boss_power_skin]
)
@pytest.mark.parametrize("bad", [-1, 4])
def test_unknown_frames_raise(func, bad):
    with pytest.raises(ValueError):
        func(bad)


def test_single_frame_sheets():
    assert zombie_power_skin() == Rect(0, 0, 49, 48)
    assert alien_power_skin() == Rect(15, 15, 72, 68)
    assert helldog_power_skin() == Rect(0, 0, 100, 100)


def test_boss_power_frame_order():
    assert boss_power_skin(0).left == 188
    assert boss_power_skin(3).left == 0


@pytest.mark.parametrize("i", range(4))
def test_switch_skin_dispatch(i):
    assert switch_skin(0, i) == zombie_power_skin()
    assert switch_skin(1, i) == boss_power_skin(i)
    assert switch_skin(2, i) == dragon_power_skin(i)
    assert switch_skin(3, i) == dragon_boss_power_skin(i)
    assert switch_skin(4, i) == alien_power_skin()
    assert switch_skin(5, i) == helldog_power_skin()


def test_switch_skin_accepts_enum():
    assert switch_skin(PowerStyle.DRAGON, 2) == dragon_power_skin(2)


@pytest.mark.parametrize("nb", [-1, 6])
def test_switch_skin_unknown_style(nb):
    with pytest.raises(ValueError):
        switch_skin(nb, 0)


def test_initial_frames():
    assert PowerStyle.BOSS.initial_frame() == boss_power_skin(3)
    assert PowerStyle.DRAGON.initial_frame() == dragon_power_skin(0)


def test_power_textures():
    assert PowerStyle(5).texture == "ressources/world3/mob/POWERHELLDOG.png"
    textures = {PowerStyle(nb).texture for nb in range(6)}
    assert len(textures) == 6


def test_direction_frames_are_permutations():
    directions = [Direction(code) for code in range(1, 5)]
    assert sorted(d.player_frame for d in directions) == list(range(4))
    assert sorted(d.power_frame for d in directions) == list(range(4))


def test_direction_letters_and_units():
    up, down, right, left = Direction(4), Direction(3), Direction(1), Direction(2)
    assert [d.letter for d in (up, down, right, left)] == ["Z", "S", "D", "Q"]
    for code in range(1, 5):
        dx, dy = Direction(code).unit
        assert abs(dx) + abs(dy) == 1
    assert up.unit == tuple(-c for c in down.unit)
    assert left.unit == tuple(-c for c in right.unit)