"""Sprite-sheet frames for the player, its shot and every monster's shot."""

from __future__ import annotations

from enum import Enum, IntEnum

from questrpg.geometry import Rect

PLAYER_TEXTURE = "ressources/player/skin.png"
PLAYER_POWER_TEXTURE = "ressources/EFFECT.png"


class Direction(IntEnum):
    """A facing; the value is the code the game stores for it."""

    RIGHT = 1
    LEFT = 2
    DOWN = 3
    UP = 4

    @property
    def player_frame(self) -> int:
        """Row of the player sheet used when facing this way."""
        return _PLAYER_FRAMES[self]

    @property
    def power_frame(self) -> int:
        """Column of a shot sheet used when firing this way."""
        return _POWER_FRAMES[self]

    @property
    def letter(self) -> str:
        """The keyboard letter that names this direction of travel."""
        return _LETTERS[self]

    @property
    def unit(self) -> tuple[int, int]:
        """The (dx, dy) step of one unit in this direction."""
        return _UNITS[self]


_PLAYER_FRAMES = {Direction.DOWN: 0, Direction.LEFT: 1, Direction.RIGHT: 2, Direction.UP: 3}
_POWER_FRAMES = {Direction.RIGHT: 0, Direction.UP: 1, Direction.LEFT: 2, Direction.DOWN: 3}
_LETTERS = {Direction.UP: "Z", Direction.DOWN: "S", Direction.RIGHT: "D", Direction.LEFT: "Q"}
_UNITS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.UP: (0, -1),
}


def _frame(table: dict[int, int], i: int, what: str) -> int:
    try:
        return table[i]
    except KeyError:
        raise ValueError(f"no {what} frame {i!r}") from None


def player_skin(i: int) -> Rect:
    """Frame ``i`` (0 down, 1 left, 2 right, 3 up) of the player sheet."""
    top = _frame({0: 383, 1: 481, 2: 579, 3: 677}, i, "player")
    return Rect(290, top, 90, 98)


def power_skin(i: int) -> Rect:
    """Frame ``i`` of the player's shot (0 right, 1 up, 2 left, 3 down)."""
    left = _frame({0: 0, 1: 33, 2: 61, 3: 96}, i, "power")
    return Rect(left, 226, 33, 25)


def zombie_power_skin() -> Rect:
    """The single frame of a zombie's shot."""
    return Rect(0, 0, 49, 48)


def boss_power_skin(i: int) -> Rect:
    """Frame ``i`` of the first boss's shot."""
    left = _frame({3: 0, 1: 64, 2: 120, 0: 188}, i, "boss power")
    return Rect(left, 0, 64, 74)


def dragon_power_skin(i: int) -> Rect:
    """Frame ``i`` of a dragon's shot."""
    left = _frame({0: 0, 1: 42, 2: 85, 3: 132}, i, "dragon power")
    return Rect(left, 0, 42, 70)


def dragon_boss_power_skin(i: int) -> Rect:
    """Frame ``i`` of the giant dragon's shot."""
    left = _frame({0: 0, 1: 51, 2: 99, 3: 155}, i, "dragon boss power")
    return Rect(left, 0, 51, 70)


def alien_power_skin() -> Rect:
    """The single frame of an alien's shot."""
    return Rect(15, 15, 72, 68)


def helldog_power_skin() -> Rect:
    """The single frame of the hell dog's shot."""
    return Rect(0, 0, 100, 100)


class PowerStyle(IntEnum):
    """Which monster's shot sheet to use; the value is the game's style code."""

    ZOMBIE = 0
    BOSS = 1
    DRAGON = 2
    DRAGON_BOSS = 3
    ALIEN = 4
    HELLDOG = 5

    @property
    def texture(self) -> str:
        return _POWER_TEXTURES[self]

    def initial_frame(self) -> Rect:
        """The frame a freshly created shot of this style shows."""
        return switch_skin(self, _INITIAL_FRAMES[self])


class _Sheet(Enum):
    pass


_POWER_TEXTURES = {
    PowerStyle.ZOMBIE: "ressources/world1/mob/POWERZOMBIE.png",
    PowerStyle.BOSS: "ressources/world1/mob/POWERBOSS.png",
    PowerStyle.DRAGON: "ressources/world2/mob/DRAGONPOWER.png",
    PowerStyle.DRAGON_BOSS: "ressources/world2/mob/POWERDRAGONBOSS.png",
    PowerStyle.ALIEN: "ressources/world3/mob/POWERALIEN.png",
    PowerStyle.HELLDOG: "ressources/world3/mob/POWERHELLDOG.png",
}

_INITIAL_FRAMES = {
    PowerStyle.ZOMBIE: 0,
    PowerStyle.BOSS: 3,
    PowerStyle.DRAGON: 0,
    PowerStyle.DRAGON_BOSS: 0,
    PowerStyle.ALIEN: 0,
    PowerStyle.HELLDOG: 0,
}


def switch_skin(nb: int, i: int) -> Rect:
    """Frame ``i`` of the shot sheet for style ``nb``; single-frame sheets ignore ``i``."""
    try:
        style = PowerStyle(nb)
    except ValueError:
        raise ValueError(f"unknown power style {nb!r}") from None
    if style is PowerStyle.ZOMBIE:
        return zombie_power_skin()
    if style is PowerStyle.BOSS:
        return boss_power_skin(i)
    if style is PowerStyle.DRAGON:
        return dragon_power_skin(i)
    if style is PowerStyle.DRAGON_BOSS:
        return dragon_boss_power_skin(i)
    if style is PowerStyle.ALIEN:
        return alien_power_skin()
    return helldog_power_skin()