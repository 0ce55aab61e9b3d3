import pygame
import pytest

from questrpg.game import ABOUT, BACKGROUND, EXIT, INTRO_LINES, PLAY, Game, Key, Screen
from questrpg.render import PLACEHOLDER_COLOR, Label, Renderer, Sprite, translate_key
from questrpg.world import COLS, ROWS, TileMap, texture_path


def _flat_loader(path):
    return TileMap.from_lines(["." * COLS] * ROWS)


@pytest.fixture
def game():
    return Game(loader=_flat_loader)


@pytest.fixture
def renderer(tmp_path):
    return Renderer(pygame.Surface((1900, 1000)), tmp_path)


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_UP, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_j, Key.FIRE),
    ],
)
def test_translate_key_known(code, key):
    assert translate_key(code) is key


def test_translate_key_unknown():
    assert translate_key(pygame.K_a) is None


def test_menu_draws_buttons_in_order(game, renderer):
    items = renderer.draw(game)
    assert [item.texture for item in items] == [
        "ressources/background/background.png",
        "ressources/button/about.png",
        "ressources/button/play.png",
        "ressources/button/exit.png",
    ]
    assert [item.dest for item in items] == [
        BACKGROUND.rect, ABOUT.rect, PLAY.rect, EXIT.rect
    ]


def test_menu_stretches_whole_texture(game, renderer):
    items = renderer.draw(game)
    assert all(isinstance(item, Sprite) and item.area is None for item in items)


def test_texture_is_painted(game, tmp_path):
    image = pygame.Surface((4, 4))
    image.fill((200, 10, 20))
    target = tmp_path / "ressources" / "background"
    target.mkdir(parents=True)
    pygame.image.save(image, str(target / "background.png"))
    surface = pygame.Surface((1900, 1000))
    Renderer(surface, tmp_path).draw(game)
    assert tuple(surface.get_at((5, 5)))[:3] == (200, 10, 20)


def test_missing_texture_uses_placeholder(game, renderer):
    renderer.draw(game)
    x = int(PLAY.rect.left) + 10
    y = int(PLAY.rect.top) + 10
    assert tuple(renderer.surface.get_at((x, y)))[:3] == PLACEHOLDER_COLOR


def test_playing_draws_tiles_then_player(game, renderer):
    game.screen = Screen.PLAYING
    items = renderer.draw(game)
    tiles = items[: ROWS * COLS]
    assert all(item.texture == texture_path("tuto_world", ".") for item in tiles)
    player_item = items[ROWS * COLS]
    assert player_item.texture == game.player.texture
    assert player_item.dest == game.player.skin.moved_to(game.player.pos)
    assert player_item.area == game.player.skin


def test_playing_start_screen_shows_intro_and_npc(game, renderer):
    game.screen = Screen.PLAYING
    items = renderer.draw(game)
    texts = [item.text for item in items if isinstance(item, Label)]
    assert texts[-2:] == list(INTRO_LINES)
    assert game.npc.life_label() in texts
    assert any(isinstance(i, Sprite) and i.dest.position == game.npc.pos for i in items)


def test_level_mobs_on_their_screen(game, renderer):
    game.screen = Screen.PLAYING
    game.level = 1
    game.map_x, game.map_y = 1, 1
    visible = game.levels[1].visible(1, 1)
    visible[0].life = 0
    items = renderer.draw(game)
    labels = [item for item in items if isinstance(item, Label)]
    mob_labels = [label for label in labels if label.text != game.quest]
    assert [label.text for label in mob_labels] == [mob.life_label() for mob in visible]
    positions = [i.dest.position for i in items if isinstance(i, Sprite) and i.area is not None]
    assert visible[0].pos not in positions
    assert visible[1].pos in positions


def test_level_quest_is_shown(game, renderer):
    game.screen = Screen.PLAYING
    game.level = 2
    game.tick(0)
    items = renderer.draw(game)
    texts = [item.text for item in items if isinstance(item, Label)]
    assert "Trouver l'abri du dragon geant" in texts
    assert INTRO_LINES[0] not in texts