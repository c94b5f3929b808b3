# boxpush

A robot walks around a warehouse grid and follows a list of moves. It
pushes boxes ahead of it, and walls stop it. A move that would push a box
into a wall does nothing. When every move has been made, each box scores
`100 * row + column`, and the command prints the total.

There are two modes:

- **Narrow** (`boxpush.part1`): boxes are single cells (`O`), as drawn in
  the map.
- **Wide** (`boxpush.part2`): the map is first doubled in width. `#`
  becomes `##`, `O` becomes `[]`, `.` becomes `..` and `@` becomes `@.`.
  Any other character is dropped. A box pushed up or down also pushes the
  boxes that touch either of its halves. A box scores by the position of
  its left half (`[`).

## Input

Two text files:

- the map, one row per line, using `#` for walls, `O` for boxes, `.` for
  empty floor and `@` for the robot. The default is `./2d_input.txt`.
- the moves, made up of `^`, `v`, `<` and `>`. The default is
  `./1d_input.txt`. Any other character, newlines included, is skipped and
  logged as a warning ("Error in sequence").

## Usage

```
pip install .
boxpush [GRID] [MOVES]          # narrow boxes
boxpush-wide [GRID] [MOVES]     # wide boxes
```

`GRID` and `MOVES` are optional paths to the two files. When they are
left out, the default names above are read from the current directory.

Each command prints:

1. `Game Field`, then the map with a space before every tile. In wide
   mode this is the widened map.
2. `Game instructions`, then the moves.
3. The final score, on a line of its own, as `Score : <total>`.

## From Python

```python
from boxpush.reader import Grid, parse_moves, ROBOT
from boxpush import part1

grid = Grid.from_text(map_text)
moves = parse_moves(move_text)
robot = grid.locate(ROBOT)
print(part1.play_game(grid, moves, robot))
```

`play_game` changes `grid` and `robot` in place. If you need to follow
the game step by step, `make_move(grid, robot, direction)` makes a
single move and returns whether the robot moved. `score(grid)` returns
the score of any layout.

For wide boxes, call `grid.widened()` and use the same functions from
`boxpush.part2`.

`boxpush.reader` also provides:

- `read_grid(path)` and `read_moves(path)`, which load the two files.
- `Grid.render()` and `render_moves(moves)`, which turn a map or a move
  list back into text.
- `Direction`, an enum of the four moves. `Direction.from_char(c)`
  raises `ValueError` for any character that is not a move.

## Tests

```
pip install .[test]
pytest
```