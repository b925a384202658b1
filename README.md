# solong

A small top-down puzzle game. You steer a ship around a walled map, pick up
every collectible, and then fly into the exit. Each move is counted and
printed; reaching the exit with everything collected ends the game with your
total.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
```

The same entry point is `solong.app.main`, which also runs with
`python -m solong.app path/to/level.ber`.

Controls:

- `W` / Up arrow: move up
- `S` / Down arrow: move down
- `A` / Left arrow: move left
- `D` / Right arrow: move right
- `Esc` or closing the window: quit

Every move prints `Movements: N`. Walking onto the exit before everything is
collected is allowed but is not counted as a move; walking onto it with
everything collected prints `You Win in N Moves!!` and ends the game.

### Textures

Sprites are loaded from `./textures/`, relative to where you start the game:

| Sprite       | File                         |
|--------------|------------------------------|
| background   | `backgroud/black.xpm`        |
| wall         | `wall/wall_00.xpm`           |
| player       | `player/ship_up.xpm`, `ship_down.xpm`, `ship_left.xpm`, `ship_right.xpm` |
| exit         | `goal/tv.xpm`                |
| collectible  | `rewards/reward.xpm`         |

If they cannot be loaded the game prints `Error` and exits with status 1.

## Map files

A map is a plain text file, conventionally with the `.ber` extension, one row
per line:

| Tile | Meaning       |
|------|---------------|
| `1`  | wall          |
| `0`  | empty floor   |
| `P`  | player start  |
| `C`  | collectible   |
| `E`  | exit          |

Example:

```
1111111
1P0C0E1
1111111
```

The game prints `Error` and stops unless:

- exactly one path argument is given, and it passes
  `solong.validation.check_input_path` (a path of four or more characters
  needs a `.` followed by at least three characters; it is rejected when the
  character right after the first `.` is `e` or the one after that is `r`),
- the file can be read and holds at least one line,
- the map passes `solong.validation.validate_map`: it is not empty, its
  border is all walls, it has at least one `C`, exactly one `E`, rows of equal
  length (the last row may lack its newline), exactly one `P`, no other
  characters, and every collectible is reachable from the start.

Bad arguments or an unreadable file exit with status 1; a map that fails
validation exits with status 0.

## Using it as a library

```python
from solong.gamemap import load_map
from solong.validation import validate_map
from solong.game import Game, Direction, Event

level = load_map("level.ber")      # raises MapError if unreadable or empty
validate_map(level)                # raises MapError naming the broken rule
game = Game(level)                 # messages go to stdout; pass out= to redirect
event = game.step(Direction.RIGHT) # Event.MOVED, BLOCKED, COLLECTED, ON_EXIT or WON
game.press("w")                    # keys: WASD, arrow keycodes, escape -> Event.QUIT
```

- `solong.gamemap.GameMap` holds the grid (`tile`, `set_tile`, `count`,
  `find`, `grid`, `width`, `height`, `columns`). `width` counts the first
  row's newline, so `columns` is the number of playable columns.
- `solong.validation` has each check on its own (`is_empty`,
  `is_surrounded_by_wall`, `is_rectangle`, `has_only_known_tiles`,
  `count_players`, `count_exits`, `count_collectibles`,
  `collectibles_reachable`) and `flood_fill(grid, row, col)`, which marks
  reachable cells with `V` in place.
- `solong.game.Game` tracks `position`, `moves`, `collected`,
  `total_collectibles`, `facing`, `won` and `quit`; stepping after the game
  has finished raises `RuntimeError`. `direction_for_key` maps a key to a
  `Direction`.
- `solong.app.load_game(path)` loads, validates and starts a `Game`;
  `solong.app.Renderer` draws a game onto a pygame surface, and
  `Renderer.sprite_for(game, x, y)` names the sprites drawn on a tile.
- `solong.printf.render(fmt, *args)` and `solong.printf.printf(fmt, *args,
  stream=None)` handle `%d %i %u %x %X %c %s %p`. Integers wrap to 32 bits,
  `%s` of `None` gives `(null)`, `%p` of 0 or `None` gives `(nil)`, and `%u`
  writes nonzero values with one leading zero.
- `solong.linereader.LineReader(stream, buffer_size=1024)` yields lines,
  newlines kept, from a text or binary stream read in fixed-size chunks;
  `read_lines(path)` returns all lines of a file.

## Running the tests

```
pip install .[test]
pytest
```