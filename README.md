# dungeonecs

A small top-down dungeon game built on a minimal entity-component system,
drawn with pygame.

The player is an elf enchanter standing in a walled room. The arrow keys move
the player one 32-pixel tile at a time, and a move only happens when the
target tile is floor. One press gives one move: after a key has been pressed,
the player does not move again until every arrow key has been released. A
goblin plays its idle animation nearby, and the text "YA MANO" is drawn over
the room.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
dungeonecs
```

The command takes no options besides `--help`. It opens an 800×800 window,
runs at up to 60 frames per second and stops when the window is closed.

Images and the font are read from `assets/`, relative to the working
directory:

- `assets/16x16DungeonTileset.png`
- `assets/Characters/ElfEnchanterIdleSide.png`
- `assets/Characters/GoblinFighter.png`
- `assets/Fonts/ConnectionIi-2wj8.otf`

If one of them cannot be loaded, the game stops with a
`dungeonecs.textures.TextureError`. If pygame cannot open the window, the
error is logged and the game ends at once.

## Using the pieces

The modules can also serve as a base for other small games.

- `dungeonecs.vector2d.Vector2D`: an immutable integer vector (`x`, `y`) with
  `+`, `-` and component-wise `*`.
- `dungeonecs.ecs`:
  - `Component`: base class with `init()`, `update()` and `draw(surface)`.
  - `Entity`: holds components. `add_component(component)` attaches,
    initialises and returns the component; `get_component(type)` returns the
    first component of that type or `None`; `update()` and `draw(surface)`
    pass the call to every component; `destroy()` and `is_active()` mark and
    query the entity.
  - `Manager`: `create_entity()`, `update()`, `draw(surface)`, and
    `refresh()`, which drops destroyed entities.
  - `PositionComponent`: a pixel position with `x`, `y`, `position` and
    `set_pos(x, y)`.
- `dungeonecs.tilemap.TileMap(sprite_sheet, level=LEVEL_1)`: a 25×25 grid of
  tile numbers. `load_map(grid)` replaces the level and raises `ValueError`
  unless the grid is 25×25; `is_walkable(x, y)` is true only for floor tiles
  inside the map; `draw_map(surface)` draws every non-empty tile at 32×32
  pixels. `Tile` names the tile numbers and `LEVEL_1` is the built-in room.
- `dungeonecs.components`:
  - `SpriteComponent(texture_path, src_x, src_y, src_w, src_h)`: draws a fixed
    region of an image at the entity's position, 32×32 pixels.
  - `AnimatedSprite(texture_path, src_x, src_y, src_w, src_h, frames, fps,
    clock=None)`: steps through `frames` horizontally laid out frames at
    `fps` frames per second; `clock` returns milliseconds and defaults to
    `pygame.time.get_ticks`. A non-positive `fps` raises `ValueError`.
  - `TextComponent(font_path, r, g, b, a, font_size, text)`: renders a line
    of text at the entity's position; a `font_path` of `None` uses pygame's
    default font.
  - `InputComponent(tilemap, key_state=None)`: moves the entity one tile per
    key press onto walkable tiles; `key_state` returns the pressed keys and
    defaults to `pygame.key.get_pressed`. `is_move_valid(x, y)` checks a
    pixel position against the tile map.

  The sprite and text components raise `LookupError` when their entity has
  no `PositionComponent`.
- `dungeonecs.game_object.GameObject`: a stand-alone image region drawn at a
  pixel position at twice its size, with `set_source_rect`, `update` and
  `render(surface)`.
- `dungeonecs.textures`: `load_texture(filename)`,
  `load_font_texture(filename, font_size, r, g, b, a, text)` and
  `draw(surface, texture, src, dest)`, which copies a region of a texture
  onto a surface, scaled to the destination rectangle. The loaders raise
  `TextureError` when an image or font cannot be loaded.
- `dungeonecs.game`: the `Game` class and `main()`, behind the `dungeonecs`
  command.

```python
import pygame

from dungeonecs.ecs import Manager, PositionComponent
from dungeonecs.tilemap import TileMap
from dungeonecs.vector2d import Vector2D

manager = Manager()
entity = manager.create_entity()
position = entity.add_component(PositionComponent(Vector2D(32, 64)))
position.set_pos(64, 64)
manager.update()

level = TileMap(pygame.Surface((320, 64)))
level.is_walkable(5, 3)  # True: floor in the built-in room
level.is_walkable(0, 0)  # False: empty tile
```

## What it does not do

- No images or fonts ship with the package; the files listed under
  *Running* must be supplied.
- There is a single room. The goblin does not move or act, and there is no
  combat, no goal and no way to save or load a game.