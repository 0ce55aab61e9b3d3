"""The whole game state: menus, the hero's world, keys, clicks and frame ticks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional

from questrpg.entities import Mob, MobKind, _Rng, create_mob, create_player
from questrpg.geometry import Rect, Vec2, is_collision
from questrpg.levels import Level, build_level
from questrpg.projectiles import advance_player_shot, player_fire
from questrpg.skins import Direction, player_skin
from questrpg.world import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Moves,
    TileMap,
    map_path,
    probe_moves,
    screen_shift,
)

TITLE = "My Rpg"
START_WORLD = "tuto_world"
MOVE_STEP = 50
NPC_START = Vec2(900, 400)
PRINCESS_START = Vec2(900, 400)
PORTAL_CELL = (5, 15)
QUEST_FONT_SIZE = 20
QUEST_POSITION = Vec2(0, 560)

INTRO_LINES = (
    "Deplacez vous grace au fleche directionnelle",
    "du clavier et tirer avec la touche J",
)
FIRST_QUEST = "Vous allez devoir trouver votre princesse, d'abord trouver le chateau"

# The hero's walk frame moves on once its clock shows more than this many hundredths.
_LEG_TICKS = 30
_LEG_FIRST = 290
_LEG_LAST = 580
_LEG_STRIDE = 100

_NEXT_LEVEL = {0: 1, 1: 2, 2: 3}


class Key(Enum):
    """The inputs the game reacts to while it is being played."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    CLOSE = "close"


_KEY_DIRECTIONS = {
    Key.RIGHT: Direction.RIGHT,
    Key.LEFT: Direction.LEFT,
    Key.DOWN: Direction.DOWN,
    Key.UP: Direction.UP,
}


class Screen(IntEnum):
    """What the window is showing; the value is the game's menu code."""

    MENU = 1
    PLAYING = -1
    RETRY = 2
    WIN = 3
    LOSE = 4
    QUIT = -99


@dataclass(frozen=True)
class Button:
    """A textured rectangle of a menu; clicking it switches to ``action``, if set."""

    name: str
    texture: str
    rect: Rect
    action: Optional[Screen] = None

    def contains(self, x: float, y: float) -> bool:
        return is_collision(Vec2(x, y), self.rect)


BACKGROUND = Button(
    "background", "ressources/background/background.png", Rect(0, 0, 1900, 1000)
)
BACKGROUND_2 = Button(
    "background2", "ressources/background/background2.png", Rect(0, 0, 1900, 1000)
)
ABOUT = Button("about", "ressources/button/about.png", Rect(1250.57, 350, 402.30, 111.11))
PLAY = Button(
    "play", "ressources/button/play.png", Rect(1293.68, 150, 316.09, 111.11), Screen.PLAYING
)
EXIT = Button(
    "exit", "ressources/button/exit.png", Rect(1322.41, 600, 258.62, 111.11), Screen.QUIT
)
RETRY = Button(
    "retry", "ressources/button/retry.png", Rect(422.41, 0, 258.62, 111.11), Screen.RETRY
)

_SCREEN_BUTTONS: dict[Screen, tuple[Button, ...]] = {
    Screen.MENU: (BACKGROUND, ABOUT, PLAY, EXIT),
    Screen.WIN: (BACKGROUND, EXIT, RETRY),
    Screen.LOSE: (RETRY, EXIT, BACKGROUND_2),
}

MapLoader = Callable[[str], TileMap]


class Game:
    """Everything that changes while the game runs."""

    def __init__(self, loader: MapLoader = TileMap.load, rng: Optional[_Rng] = None) -> None:
        self.loader = loader
        self.rng = rng
        self.world = START_WORLD
        self.map_x = 0
        self.map_y = 0
        self.maps_crossed = 0
        self.screen = Screen.MENU
        self.level = 0
        self.tip = False
        self.player: Mob = create_player()
        self.npc: Mob = create_mob(MobKind.NPC, NPC_START.x, NPC_START.y)
        self.princess: Mob = create_mob(MobKind.PRINCESS, PRINCESS_START.x, PRINCESS_START.y)
        self.levels: dict[int, Level] = {number: build_level(number) for number in (1, 2, 3)}
        self.moves = Moves(left=True, right=True, top=True, bottom=True, portal=False)
        self.quest = FIRST_QUEST
        self._leg_ms = 0.0
        self.tilemap: TileMap = self.reload_map()

    def reload_map(self) -> TileMap:
        """Load the map of the current world and screen."""
        self.tilemap = self.loader(map_path(self.world, self.map_x, self.map_y))
        return self.tilemap

    def enter_world(self, world: str, level: int) -> None:
        """Go to the first screen of ``world`` and play ``level`` there."""
        self.world = world
        self.map_x = 0
        self.map_y = 0
        self.level = level
        self.reload_map()

    def handle_key(self, key: Key) -> bool:
        """React to a key while playing; returns whether the key was taken."""
        if self.screen is not Screen.PLAYING:
            return False
        if key is Key.CLOSE:
            self.screen = Screen.QUIT
        elif key is Key.FIRE:
            player_fire(self.player)
        else:
            self.move_player(key)
        return True

    def move_player(self, key: Key) -> None:
        """Turn the hero toward ``key`` and step that way unless a wall is in the way."""
        try:
            direction = _KEY_DIRECTIONS[key]
        except KeyError:
            raise ValueError(f"{key!r} is not a direction") from None
        allowed = {
            Direction.RIGHT: self.moves.right,
            Direction.LEFT: self.moves.left,
            Direction.DOWN: self.moves.bottom,
            Direction.UP: self.moves.top,
        }[direction]
        if allowed:
            dx, dy = direction.unit
            self.player.pos = self.player.pos.shifted(dx * MOVE_STEP, dy * MOVE_STEP)
        self.player.skin = player_skin(direction.player_frame)
        self.player.facing = direction
        self._step_leg()
        self._collide_map()

    def _step_leg(self) -> None:
        if int(self._leg_ms / 10) <= _LEG_TICKS:
            return
        skin = self.player.skin
        left = _LEG_FIRST if skin.left >= _LEG_LAST else skin.left + _LEG_STRIDE
        self.player.skin = Rect(left, skin.top, skin.width, skin.height)
        self._leg_ms = 0.0

    def _collide_map(self) -> None:
        pos = self.player.pos
        if pos.x < 0 or pos.x >= SCREEN_WIDTH or pos.y < 0 or pos.y >= SCREEN_HEIGHT:
            new_pos, d_map_x, d_map_y = screen_shift(pos.x, pos.y)
            self.player.pos = new_pos
            if d_map_x or d_map_y:
                self.map_x += d_map_x
                self.map_y += d_map_y
                self.maps_crossed += 1
                self.reload_map()
        self.moves = self._probe()
        if self.moves.portal:
            following = _NEXT_LEVEL.get(self.level)
            if following is not None:
                self.enter_world(f"world{following}", following)
                self.moves = self._probe()

    def _probe(self) -> Moves:
        return probe_moves(self.tilemap, self.player.pos.x, self.player.pos.y)

    def _targets(self) -> list[Mob]:
        if self.level == 0:
            return [self.npc]
        level = self.levels.get(self.level)
        return [] if level is None else level.targets()

    def tick(self, elapsed_ms: float) -> None:
        """Advance the game by one frame of ``elapsed_ms`` milliseconds."""
        if self.screen in (Screen.MENU, Screen.WIN):
            self.level = 0
            return
        if self.screen is not Screen.PLAYING:
            return
        self._leg_ms += elapsed_ms
        if self.level == 0:
            self.npc.update(elapsed_ms, self.rng)
        elif self.level in self.levels:
            self.levels[self.level].update(self.player, elapsed_ms, self.rng)
        if self.level == 3:
            self.princess.update(elapsed_ms, self.rng)
        advance_player_shot(self.player, self._targets(), elapsed_ms)
        if self.level == 0 and not self.npc.alive and not self.tip:
            self.tilemap.set_tile(*PORTAL_CELL, "P")
            self.tip = True
        self._update_quest()

    def _update_quest(self) -> None:
        in_lair = (self.map_x, self.map_y) == (2, 1)
        if self.level == 1 and in_lair:
            self.quest = "Tuez les zombies et le boss pour trouver le portail"
        if self.level == 2:
            self.quest = "Trouver l'abri du dragon geant"
        if self.level == 2 and in_lair:
            self.quest = "Tuez les dragons et le geant dragon pour trouver le portail"
        if self.level == 3:
            self.quest = "Terminer le labyrinthe"
        if self.level == 3 and in_lair:
            self.quest = "Tuez les Alien et le chien de l'enfer et trouver la princesse"

    def quest_lines(self) -> list[str]:
        """The quest texts shown on screen right now."""
        lines: list[str] = []
        if self.level == 0 and (self.map_x, self.map_y) == (0, 0) and self.npc.alive:
            lines.extend(INTRO_LINES)
        if self.level != 0:
            lines.append(self.quest)
        return lines

    def buttons(self) -> list[Button]:
        """The menu pieces of the current screen, in drawing order."""
        return list(_SCREEN_BUTTONS.get(self.screen, ()))

    def click(self, x: float, y: float) -> Screen:
        """Press the mouse at (``x``, ``y``); returns the screen shown afterwards."""
        for button in self.buttons():
            if button.action is not None and button.contains(x, y):
                self.screen = button.action
                break
        return self.screen