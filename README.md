# tileengine

A small tile-based game engine built on pygame. A level is a plain text
file in which every character is one tile. The engine reads the file,
spawns an actor for each tile, draws the actors in a window and moves the
player with the keyboard.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running a level

    tileengine [MAP]

`MAP` defaults to `level01.map` in the current directory. The window is
800×600 and titled "Engine"; each tile is drawn 30 pixels square.

Images are loaded from `data/` under the current directory:
`player.bmp`, `wall.bmp`, `floor.bmp`, `goal.bmp` and `monster.bmp`. White
is the transparent colour key for every image except the player's, which
uses magenta. The player image is an animated strip: its width is split
into five frames, each drawn with a height of one fifth of the image, and
the frame advances every 0.25 seconds. The frame counter is shared by all
animated images.

Move the player with the arrow keys or W, A, S, D. The player moves one
tile on every frame for which the most recent event was a key press, so
holding a key keeps it moving until the key is released. Close the window
to quit.

## Level format

Each line of the map file is a row, each character a column:

| Character | Actor      |
|-----------|------------|
| `*`       | `Wall`     |
| `P`       | `Player`   |
| `G`       | `Goal`     |
| `M`       | `Monster`  |
| space     | floor only |

Every character in a row, including ones not listed above, also gets a
`Floor` underneath. A line longer than 99 characters raises `ValueError`;
a NUL character ends its line. The file is read as Latin-1.

After loading, actors are sorted by render order, highest first, and drawn
in that order: floor (10), wall (9), player (7), then goal and monster (6).

Example:

    *******
    *P   G*
    *  M  *
    *******

## What it does not do

The engine only loads, draws and moves. Walls do not block the player,
reaching the goal ends nothing, monsters stand still, and there is no
score or level progression. Each tile's `shape` character and `color` are
stored on its flipbook but are not drawn; the renderer's text screen
buffers are cleared and swapped each frame but never shown.

## Using it from Python

    from tileengine.engine import Engine

    engine = Engine.get_instance()
    engine.initialize("level01.map")
    try:
        engine.run()
    finally:
        engine.terminate()

`tileengine.engine.main(argv=None)` does the same from a list of
command-line arguments.

The building blocks can also be used on their own:

- `tileengine.vector.Vector2D`: integer grid position; `+` returns a new
  vector.
- `tileengine.component`: `Component` (with an `owner` and a `tick`),
  `ActorComponent`, and `SceneComponent`, which has a `render_order` and a
  `render` method.
- `tileengine.actor.Actor`: a `location` and a list of `components`;
  `create_default_subobject` attaches a component and returns it,
  `add_actor_world_offset` moves the actor, `tick` ticks every component
  and `render` renders every scene component.
- `tileengine.flipbook.PaperFlipbookComponent`: a bitmap drawn on its
  owner's tile; `load` reads `filename` from `PaperFlipbookComponent.data_dir`
  (by default `data`), and `is_sprite` turns on the five-frame animation.
- `tileengine.actors`: `Player`, `Wall`, `Floor`, `Goal`, `Monster`. Each
  creates and loads its flipbook when constructed, so the image files must
  exist.
- `tileengine.world.World`: `load` reads a level; `tick` and `render`
  drive its actors; `spawn_actor` and `destroy_actor` manage the `actors`
  list (`destroy_actor` raises `ValueError` for an actor not in it).
- `tileengine.timer.Timer`: `tick` updates `delta_seconds`; a custom clock
  returning milliseconds can be passed in.
- `tileengine.input.Input`: `tick` stores the key returned by an optional
  poll function in `key_code`, or 0. The engine creates it without one.
- `tileengine.renderer.Renderer`: the shared drawing surface;
  `get_instance`, `clear`, `render` and `present`.