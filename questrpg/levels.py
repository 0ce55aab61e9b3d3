"""The three monster-filled worlds: who lives where, and what they do each frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from questrpg.entities import Mob, MobKind, _Rng, create_mob
from questrpg.projectiles import advance_mob_shot, mob_fire

Screen = tuple[int, int]

# Where each minion starts and which map screen it belongs to, in order.
_MINION_LAYOUT: tuple[tuple[float, float, Screen], ...] = (
    (450, 500, (1, 1)),
    (800, 500, (1, 1)),
    (450, 750, (1, 1)),
    (800, 750, (1, 1)),
    (450, 500, (2, 1)),
    (800, 500, (2, 1)),
    (450, 750, (2, 1)),
    (800, 750, (2, 1)),
    (600, 500, (3, 1)),
    (1200, 500, (3, 1)),
)
_BOSS_SPOT: tuple[float, float, Screen] = (800, 250, (3, 1))

_ROSTERS: dict[int, tuple[MobKind, MobKind]] = {
    1: (MobKind.ZOMBIE, MobKind.BOSS),
    2: (MobKind.DRAGON, MobKind.DRAGON_BOSS),
    3: (MobKind.ALIEN, MobKind.HELLDOG),
}


@dataclass
class Level:
    """One world's monsters: ten minions then a boss, each tied to a map screen."""

    number: int
    members: list[Mob]
    screens: list[Screen]

    def __post_init__(self) -> None:
        if len(self.members) != len(self.screens):
            raise ValueError("every member needs exactly one screen")
        if not self.members:
            raise ValueError("a level needs at least its boss")

    @property
    def world(self) -> str:
        """Name of the world directory this level plays in."""
        return f"world{self.number}"

    @property
    def boss(self) -> Mob:
        return self.members[-1]

    @property
    def minions(self) -> list[Mob]:
        return self.members[:-1]

    def visible(self, map_x: int, map_y: int) -> list[Mob]:
        """Members placed on screen (``map_x``, ``map_y``), dead or alive, in order."""
        return [
            mob
            for mob, screen in zip(self.members, self.screens)
            if screen == (map_x, map_y)
        ]

    def update(self, player: Mob, elapsed_ms: float, rng: Optional[_Rng] = None) -> int:
        """Let every member walk, fire and move its shot; returns how many shots hit the hero."""
        hits = 0
        for mob in self.members:
            mob.update(elapsed_ms, rng)
            mob_fire(mob)
            if advance_mob_shot(mob, player, elapsed_ms):
                hits += 1
        return hits

    def targets(self) -> list[Mob]:
        """Every member the hero's shot is tested against, in the order it is tested."""
        return list(self.members)


def build_level(number: int) -> Level:
    """A fresh copy of level ``number`` (1, 2 or 3) with every shot ready."""
    try:
        minion_kind, boss_kind = _ROSTERS[number]
    except KeyError:
        raise ValueError(f"no level {number!r}") from None
    members: list[Mob] = []
    screens: list[Screen] = []
    for x, y, screen in _MINION_LAYOUT:
        members.append(create_mob(minion_kind, x, y))
        screens.append(screen)
    x, y, screen = _BOSS_SPOT
    members.append(create_mob(boss_kind, x, y))
    screens.append(screen)
    return Level(number=number, members=members, screens=screens)