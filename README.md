# questrpg

A small top-down role-playing game in a window of 1900 × 1000 pixels. Every
screen of a world is a grid of 20 rows by 38 columns of 50-pixel tiles.

You start in a tutorial world with a guide. Shoot the guide down to open a
portal, then walk through portals into three worlds in turn: zombies and
their boss, dragons and the giant dragon, aliens and the hell dog.

## Installing

```
pip install .
```

`pygame` is installed with it.

## Playing

The game reads its fonts, textures, menu buttons and maps from a
`ressources/` folder. Maps are text files named
`ressources/<world>/map/map<x>.<y>.txt`, one line per row, at least 38
characters per line, 20 lines.

```
questrpg
questrpg --root path/to/game
```

`--root` names the directory that holds `ressources/` (the current directory
by default). A texture that cannot be loaded is drawn as a magenta block; if
the font cannot be loaded, pygame's default font is used.

- In the main menu, click *Play* to start or *Exit* to quit.
- Arrow keys turn the hero and move it 50 pixels (one tile), unless a wall
  (`M` tile) is in the way. Walking off the edge of the screen leads to the
  neighbouring map screen.
- Touching a portal tile (`P`) takes the hero to the first screen of the
  next world.
- `J` fires a shot in the direction the hero faces; only one shot is in
  flight at a time. A hit takes 50 life points.
- Monsters wander at random and keep firing the way they face. Each monster
  shot that ends, whether it hits the hero or flies away, takes 10 life
  points from the hero.
- Closing the window quits.

## Using the package

The game logic runs without a window:

- `questrpg.game.Game` holds the whole state. `handle_key` and `move_player`
  take `Key` values, `tick(elapsed_ms)` advances one frame, `click(x, y)`
  presses the menu buttons of the current `Screen`, `buttons()` lists them,
  and `quest_lines()` gives the quest hints shown. A `Game` takes a map
  loader (by default `TileMap.load`) and an optional random source with a
  `randint` method.
- `questrpg.world`: `TileMap.load`, `TileMap.tile`, `TileMap.set_tile`,
  `probe_moves` (which ways are open from a position, and whether a portal
  is touched), `screen_shift`, `map_path`, `texture_path`, `is_solid_block`.
- `questrpg.levels.build_level(n)` builds world `n` (1 to 3): ten minions and
  a boss, each placed on a map screen; `Level.visible`, `Level.update`,
  `Level.targets`.
- `questrpg.entities`: `create_mob`, `create_player`, `Mob`, `Projectile`,
  `MobKind`, `mob_skin`.
- `questrpg.projectiles`: `player_fire`, `mob_fire`, `advance_player_shot`,
  `advance_mob_shot`, `strike`.
- `questrpg.skins` and `questrpg.geometry`: sprite-sheet frames, `Vec2`,
  `Rect`, `is_collision`, `is_hit`.
- `questrpg.render.Renderer(surface, root).draw(game)` paints a game with
  pygame and returns what it drew; `translate_key` maps pygame key codes to
  `Key`.

## What it does not do

The game has no ending. Nothing moves it to the win or lose screens: the
hero's life can fall below zero and play goes on, beating a boss opens
nothing, and the portal of the last world leads nowhere further. The
*Retry* button only switches to a screen on which nothing happens, and the
*About* button does nothing. There is no sound and no saving.

## Running the tests

```
pip install ".[test]"
pytest
```