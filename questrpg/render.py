"""Drawing the game with pygame, and the window loop that runs it."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import pygame

from questrpg.entities import FONT_PATH, LABEL_SIZE, Mob
from questrpg.game import QUEST_FONT_SIZE, QUEST_POSITION, TITLE, Game, Key, Screen
from questrpg.geometry import Rect, Vec2
from questrpg.world import SCREEN_HEIGHT, SCREEN_WIDTH, TileMap, texture_path

FRAME_RATE = 60
PLACEHOLDER_COLOR = (255, 0, 255)
TEXT_COLOR = (255, 255, 255)
CLEAR_COLOR = (0, 0, 0)

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_j: Key.FIRE,
}

_MENU_SCREENS = (Screen.MENU, Screen.WIN, Screen.LOSE)


def translate_key(keycode: int) -> Optional[Key]:
    """The game input a pygame key code stands for, or ``None`` if it means nothing."""
    return _KEYS.get(keycode)


@dataclass(frozen=True)
class Sprite:
    """A texture drawn into ``dest``; ``area`` picks a frame of it, or the whole texture is stretched."""

    texture: str
    area: Optional[Rect]
    dest: Rect


@dataclass(frozen=True)
class Label:
    """A line of text drawn at ``pos``."""

    text: str
    pos: Vec2
    size: int


DrawItem = Union[Sprite, Label]


def _pg_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(
        int(round(rect.left)), int(round(rect.top)),
        int(round(rect.width)), int(round(rect.height)),
    )


def _mob_sprite(texture: str, skin: Rect, pos: Vec2) -> Sprite:
    return Sprite(texture, skin, skin.moved_to(pos))


class Renderer:
    """Paints a game onto a pygame surface, loading textures from ``root``."""

    def __init__(self, surface: pygame.Surface, root: Union[str, os.PathLike] = ".") -> None:
        self.surface = surface
        self.root = os.fspath(root)
        self._textures: dict[str, Optional[pygame.Surface]] = {}
        self._scaled: dict[tuple[str, int, int], pygame.Surface] = {}
        self._fonts: dict[int, Optional[pygame.font.Font]] = {}
        if not pygame.font.get_init():
            pygame.font.init()

    def _texture(self, path: str) -> Optional[pygame.Surface]:
        if path not in self._textures:
            try:
                image: Optional[pygame.Surface] = pygame.image.load(
                    os.path.join(self.root, path)
                )
            except (FileNotFoundError, OSError, pygame.error):
                image = None
            self._textures[path] = image
        return self._textures[path]

    def _font(self, size: int) -> Optional[pygame.font.Font]:
        if size not in self._fonts:
            font: Optional[pygame.font.Font]
            try:
                font = pygame.font.Font(os.path.join(self.root, FONT_PATH), size)
            except (FileNotFoundError, OSError, pygame.error):
                try:
                    font = pygame.font.Font(None, size)
                except (OSError, pygame.error):
                    font = None
            self._fonts[size] = font
        return self._fonts[size]

    def _paint_sprite(self, sprite: Sprite) -> None:
        dest = _pg_rect(sprite.dest)
        image = self._texture(sprite.texture)
        if image is None:
            self.surface.fill(PLACEHOLDER_COLOR, dest)
            return
        if sprite.area is None:
            key = (sprite.texture, max(dest.width, 0), max(dest.height, 0))
            scaled = self._scaled.get(key)
            if scaled is None:
                scaled = pygame.transform.scale(image, (key[1], key[2]))
                self._scaled[key] = scaled
            self.surface.blit(scaled, dest.topleft)
        else:
            self.surface.blit(image, dest.topleft, area=_pg_rect(sprite.area))

    def _paint_label(self, label: Label) -> None:
        font = self._font(label.size)
        if font is None:
            return
        rendered = font.render(label.text, True, TEXT_COLOR)
        self.surface.blit(rendered, (int(round(label.pos.x)), int(round(label.pos.y))))

    def _mob_items(self, mob: Mob) -> list[DrawItem]:
        items: list[DrawItem] = [Label(mob.life_label(), mob.label_pos, LABEL_SIZE)]
        if mob.alive:
            items.append(_mob_sprite(mob.texture, mob.skin, mob.pos))
            if mob.power is not None:
                items.append(_mob_sprite(mob.power.texture, mob.power.skin, mob.power.pos))
        return items

    def _playing_items(self, game: Game) -> list[DrawItem]:
        items: list[DrawItem] = [
            Sprite(texture_path(game.world, char), None, rect)
            for rect, char in game.tilemap.cells()
        ]
        player = game.player
        items.append(_mob_sprite(player.texture, player.skin, player.pos))
        if player.power is not None:
            items.append(_mob_sprite(player.power.texture, player.power.skin, player.power.pos))
        level = game.levels.get(game.level)
        if level is not None:
            for mob in level.visible(game.map_x, game.map_y):
                items.extend(self._mob_items(mob))
        on_start = (game.map_x, game.map_y) == (0, 0)
        if game.level == 0 and on_start and game.npc.alive:
            items.append(_mob_sprite(game.npc.texture, game.npc.skin, game.npc.pos))
            items.append(Label(game.npc.life_label(), game.npc.label_pos, LABEL_SIZE))
        items.extend(Label(line, QUEST_POSITION, QUEST_FONT_SIZE) for line in game.quest_lines())
        if game.level == 3 and (game.map_x, game.map_y) == (3, 2) and game.npc.alive:
            items.append(_mob_sprite(game.princess.texture, game.princess.skin, game.princess.pos))
        return items

    def scene(self, game: Game) -> list[DrawItem]:
        """What the current screen consists of, in drawing order."""
        if game.screen is Screen.PLAYING:
            return self._playing_items(game)
        return [Sprite(button.texture, None, button.rect) for button in game.buttons()]

    def draw(self, game: Game) -> list[DrawItem]:
        """Paint the current screen of ``game``; returns what was drawn, in order."""
        items = self.scene(game)
        self.surface.fill(CLEAR_COLOR)
        for item in items:
            if isinstance(item, Sprite):
                self._paint_sprite(item)
            else:
                self._paint_label(item)
        return items


def _parse(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="questrpg", description=TITLE)
    parser.add_argument(
        "--root", default=".", help="directory holding the ressources folder"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed or quit from a menu."""
    args = _parse(argv)
    root = args.root

    def loader(path: str) -> TileMap:
        return TileMap.load(os.path.join(root, path))

    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        game = Game(loader=loader)
        renderer = Renderer(window, root)
        clock = pygame.time.Clock()
        while True:
            elapsed = clock.tick(FRAME_RATE)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and game.screen is Screen.PLAYING:
                    key = translate_key(event.key)
                    if key is not None:
                        game.handle_key(key)
            if game.screen in _MENU_SCREENS and pygame.mouse.get_pressed()[0]:
                game.click(*pygame.mouse.get_pos())
            if game.screen is Screen.QUIT:
                return 0
            game.tick(elapsed)
            renderer.draw(game)
            pygame.display.flip()
    finally:
        pygame.quit()