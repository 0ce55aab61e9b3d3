"""Monsters, the player and the shots they carry."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from questrpg.geometry import Rect, Vec2
from questrpg.skins import (
    PLAYER_POWER_TEXTURE,
    PLAYER_TEXTURE,
    Direction,
    PowerStyle,
    player_skin,
    power_skin,
)

OFFSCREEN = Vec2(-1000, -1000)
STEP = 15
PLAYER_START = Vec2(475, 500)
PLAYER_LIFE = 100
FONT_PATH = "ressources/font.ttf"
LABEL_SIZE = 33
LABEL_OFFSET = 42
# A mob takes a step once its clock shows more than this many hundredths of a second.
_STEP_TICKS = 30


class _Rng(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class MobKind(Enum):
    """Every kind of creature that walks the maps."""

    ZOMBIE = "zombie"
    BOSS = "boss"
    DRAGON = "dragon"
    DRAGON_BOSS = "dragon_boss"
    ALIEN = "alien"
    HELLDOG = "helldog"
    NPC = "npc"
    PRINCESS = "princess"


@dataclass(frozen=True)
class _KindSpec:
    texture: str
    frame_left: int
    tops: dict[int, int]
    width: int
    height: int
    walk_frames: dict[Direction, int]
    initial_frame: int
    life: int
    style: Optional[PowerStyle]
    specials: dict[int, Rect] = field(default_factory=dict)


_BOSS_WALK = {Direction.RIGHT: 0, Direction.LEFT: 3, Direction.DOWN: 2, Direction.UP: 1}

_SPECS: dict[MobKind, _KindSpec] = {
    MobKind.ZOMBIE: _KindSpec(
        "ressources/world1/mob/ZOMBIE.png", 0,
        {0: 0, 1: 66, 2: 154, 3: 242}, 86, 70,
        {Direction.RIGHT: 1, Direction.LEFT: 3, Direction.DOWN: 0, Direction.UP: 2},
        3, 100, PowerStyle.ZOMBIE,
    ),
    MobKind.BOSS: _KindSpec(
        "ressources/world1/mob/BOSS.png", 0,
        {0: 0, 1: 103, 2: 203}, 103, 97,
        _BOSS_WALK, 3, 1000, PowerStyle.BOSS,
        specials={3: Rect(206, 103, 103, 97)},
    ),
    MobKind.DRAGON: _KindSpec(
        "ressources/world2/mob/DRAGON.png", 0,
        {0: 0, 1: 65, 2: 132, 3: 197}, 98, 65,
        {Direction.RIGHT: 2, Direction.LEFT: 1, Direction.DOWN: 0, Direction.UP: 3},
        3, 1000, PowerStyle.DRAGON,
    ),
    MobKind.DRAGON_BOSS: _KindSpec(
        "ressources/world2/mob/BOSSDRAGON.png", 0,
        {0: 0, 1: 170, 2: 334, 3: 497}, 170, 170,
        {Direction.RIGHT: 2, Direction.LEFT: 1, Direction.DOWN: 0, Direction.UP: 3},
        3, 5000, PowerStyle.DRAGON_BOSS,
    ),
    MobKind.ALIEN: _KindSpec(
        "ressources/world3/mob/ALIEN.png", 0,
        {0: 0, 1: 111, 2: 224, 3: 335}, 183, 111,
        {Direction.RIGHT: 3, Direction.LEFT: 1, Direction.DOWN: 1, Direction.UP: 0},
        3, 1500, PowerStyle.ALIEN,
    ),
    # The hell dog sheet has only three rows.
    MobKind.HELLDOG: _KindSpec(
        "ressources/world3/mob/HELLDOG.png", 0,
        {0: 0, 1: 230, 2: 460}, 400, 230,
        {Direction.RIGHT: 2, Direction.LEFT: 1, Direction.DOWN: 0, Direction.UP: 0},
        0, 10000, PowerStyle.HELLDOG,
    ),
    # Bystanders are drawn from the player sheet and wander like the first boss.
    MobKind.NPC: _KindSpec(
        PLAYER_TEXTURE, 0, {}, 0, 0, _BOSS_WALK, 3, PLAYER_LIFE, None,
    ),
    MobKind.PRINCESS: _KindSpec(
        PLAYER_TEXTURE, 0, {}, 0, 0, _BOSS_WALK, 3, PLAYER_LIFE, None,
    ),
}

_BYSTANDERS = (MobKind.NPC, MobKind.PRINCESS)


def _boss_frame(i: int) -> Rect:
    spec = _SPECS[MobKind.BOSS]
    if i in spec.specials:
        return spec.specials[i]
    if i not in spec.tops:
        raise ValueError(f"no boss frame {i!r}")
    return Rect(spec.frame_left, spec.tops[i], spec.width, spec.height)


def mob_skin(kind: MobKind, i: int) -> Rect:
    """Frame ``i`` of the walking sheet of ``kind``."""
    if kind in _BYSTANDERS:
        return _boss_frame(i)
    spec = _SPECS[kind]
    if i in spec.specials:
        return spec.specials[i]
    if i not in spec.tops:
        raise ValueError(f"no {kind.value} frame {i!r}")
    return Rect(spec.frame_left, spec.tops[i], spec.width, spec.height)


@dataclass
class Projectile:
    """A shot; it waits off screen until it is fired."""

    texture: str
    skin: Rect
    pos: Vec2 = OFFSCREEN
    active: bool = False
    direction: Optional[Direction] = None
    style: Optional[PowerStyle] = None
    since_ms: float = 0.0

    def reset(self) -> None:
        """Put the shot back off screen."""
        self.pos = OFFSCREEN


@dataclass
class Mob:
    """A creature on the map: a monster, a bystander or the player."""

    kind: Optional[MobKind]
    texture: str
    skin: Rect
    pos: Vec2
    life: int
    power: Optional[Projectile] = None
    facing: Optional[Direction] = None
    since_ms: float = 0.0

    @property
    def style(self) -> Optional[PowerStyle]:
        """The shot style this creature fires, if any."""
        return None if self.power is None else self.power.style

    def _walk_frame(self, direction: Direction) -> Rect:
        if self.kind is None:
            return player_skin(direction.player_frame)
        frame = _SPECS[self.kind].walk_frames[direction]
        return mob_skin(self.kind, frame)

    def advance(self, roll: int) -> None:
        """Take one step for a die roll of 1 to 5; rolls other than 1 to 4 stand still."""
        try:
            direction = Direction(roll)
        except ValueError:
            return
        dx, dy = direction.unit
        self.skin = self._walk_frame(direction)
        self.pos = self.pos.shifted(dx * STEP, dy * STEP)
        self.facing = direction

    def update(self, elapsed_ms: float, rng: Optional[_Rng] = None) -> bool:
        """Let time pass; step at random once enough has gone by. Returns whether a step was taken."""
        self.since_ms += elapsed_ms
        if int(self.since_ms / 10) <= _STEP_TICKS:
            return False
        self.advance((rng or random).randint(1, 5))
        self.since_ms = 0.0
        return True

    @property
    def alive(self) -> bool:
        return self.life > 0

    @property
    def label_pos(self) -> Vec2:
        """Where the life counter is drawn, just above the creature."""
        return self.pos.shifted(dy=-LABEL_OFFSET)

    def life_label(self) -> str:
        """The life counter as it is shown on screen."""
        return str(self.life)


def create_mob(kind: MobKind, x: float, y: float) -> Mob:
    """A fresh creature of ``kind`` standing at (``x``, ``y``), with its shot ready."""
    spec = _SPECS[kind]
    if kind in _BYSTANDERS:
        return Mob(
            kind=kind,
            texture=spec.texture,
            skin=player_skin(spec.initial_frame),
            pos=Vec2(x, y),
            life=spec.life,
        )
    assert spec.style is not None
    power = Projectile(
        texture=spec.style.texture,
        skin=spec.style.initial_frame(),
        style=spec.style,
    )
    return Mob(
        kind=kind,
        texture=spec.texture,
        skin=mob_skin(kind, spec.initial_frame),
        pos=Vec2(x, y),
        life=spec.life,
        power=power,
    )


def create_player() -> Mob:
    """The hero at the starting spot, facing up, with its shot ready."""
    return Mob(
        kind=None,
        texture=PLAYER_TEXTURE,
        skin=player_skin(Direction.UP.player_frame),
        pos=PLAYER_START,
        life=PLAYER_LIFE,
        power=Projectile(texture=PLAYER_POWER_TEXTURE, skin=power_skin(3)),
    )