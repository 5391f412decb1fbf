# elorpg

A small tile-based adventure game. You walk across a map read from a `.ber`
file, pick up every collectible and then reach the exit. In bonus mode the
exit door is animated, enemies wander the map, the move counter is drawn at
the top of the window, and an enemy reaching you ends the game.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
elorpg path/to/level.ber [--bonus] [--images DIR]
```

- `--bonus` turns on bonus mode (enemies, animated door, on-screen counter).
- `--images DIR` (or `--images=DIR`) names the directory holding the sprite
  images; it defaults to `img`.

Move with `W`/`A`/`S`/`D` or the arrow keys. `Escape` or closing the window
quits. In the standard mode each step prints a line `tu as fait N pas` with
the running step count. Winning prints `YOU WON!`, losing prints
`YOU LOOSE!` (or `YOU LOOSE` when an enemy walks into you).

If the arguments are wrong, or the map or a sprite cannot be loaded, the
command prints `Error` followed by the reason and exits with status 1.

### Sprites

No sprite images come with the package: the images directory must hold these
XPM files.

- Always: `floor.xpm`, `wall.xpm`, `collectible.xpm`, `door.xpm`,
  `player_up.xpm`, `player_down.xpm`, `player_left.xpm`, `player_right.xpm`.
- In bonus mode also: `enemy_up.xpm`, `enemy_down.xpm`, `enemy_left.xpm`,
  `enemy_right.xpm`, and the door frames `door_01.xpm`, `door_02.xpm`,
  `door_1.xpm`, `door_2.xpm`, `door_3.xpm`, `door_4.xpm`.

Tiles are drawn 32 pixels square.

## Map format

A map is a rectangle of text lines, each of the same width, saved in a file
whose name ends in `.ber`. It uses these characters:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | floor                      |
| `P`  | player start (exactly one) |
| `C`  | collectible (at least one) |
| `E`  | exit (exactly one)         |
| `M`  | enemy (bonus mode only)    |

The map must be at least three columns wide, surrounded by walls, and every
collectible and the exit must be reachable from the start. Otherwise loading
raises `elorpg.mapcheck.MapError` explaining the problem. The exit stays
locked until every collectible is taken; walking into a locked exit jumps
over it when the cell behind is not a wall. For example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from elorpg.mapcheck import load_map
from elorpg.game import Game, Direction, GameOver

info = load_map("level.ber", bonus=False)
game = Game(info, bonus=False)
try:
    moved = game.move(Direction.RIGHT)
except GameOver as outcome:
    print(outcome.message, outcome.won)
```

- `elorpg.mapcheck`: `check_extension`, `read_map`, `check_map`,
  `count_elements`, `flood_fill`, `valid_path` and `load_map`, returning a
  `MapInfo` (grid, start position, collectible count).
- `elorpg.game`: `Game` with `move`, `handle_key`, `footstep_message`,
  `moves_text` and `tile`; `Direction`; `GameOver` (`won` is `True`, `False`,
  or `None` when the player quit).
- `elorpg.enemy.EnemyController` moves enemies at random every `delay` ticks.
- `elorpg.animation.DoorAnimation` steps through door frames over time.
- `elorpg.keys`: key tests `is_up`, `is_down`, `is_left`, `is_right` and
  `is_valid_char`.
- `elorpg.xpm` reads XPM images without any display attached
  (`load_xpm`, `parse_xpm_text`, `parse_xpm_lines`) into an `XpmImage` whose
  `pixel(x, y)` gives `0xRRGGBB`, or `TRANSPARENT` for `None` colours;
  errors raise `XpmError`.
- `elorpg.colors.lookup_color` resolves X11 colour names to `0xRRGGBB`
  values.
- `elorpg.app`: `App` draws a game with pygame and runs its loop;
  `load_sprites` and `xpm_to_surface` turn XPM files into surfaces.