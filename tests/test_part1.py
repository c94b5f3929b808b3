import pytest

from boxpush.part1 import (
    can_move,
    collect_movable,
    main,
    make_move,
    next_coordinate,
    play_game,
    score,
)
from boxpush.reader import Direction, Grid, Location, parse_moves

SMALL_MAP = "\n".join(
    [
        "########",
        "#..O.O.#",
        "##@.O..#",
        "#...O..#",
        "#.#.O..#",
        "#...O..#",
        "#......#",
        "########",
    ]
)
SMALL_MOVES = "<^^>>>vv<v>>v<<"

SMALL_FINAL = "\n".join(
    [
        "########",
        "#....OO#",
        "##.....#",
        "#.....O#",
        "#.#O@..#",
        "#...O..#",
        "#...O..#",
        "########",
    ]
)


def _count(grid, char):
    return sum(row.count(char) for row in grid.rows)


@pytest.mark.parametrize(
    "value, delta, expected",
    [(0, -1, 0), (3, -1, 2), (3, 1, 4), (3, 0, 3)],
)
def test_next_coordinate(value, delta, expected):
    assert next_coordinate(value, delta) == expected


def test_can_move_into_empty_space():
    grid = Grid.from_text("#@.#")
    assert can_move(grid, Location(1, 0), 1, 0) is True


def test_can_move_blocked_by_wall():
    grid = Grid.from_text("#@#")
    assert can_move(grid, Location(1, 0), 1, 0) is False


def test_can_move_through_boxes_to_space():
    grid = Grid.from_text("#@OO.#")
    assert can_move(grid, Location(1, 0), 1, 0) is True


def test_can_move_boxes_against_wall():
    grid = Grid.from_text("#@OO#")
    assert can_move(grid, Location(1, 0), 1, 0) is False


def test_can_move_at_edge_is_false():
    grid = Grid.from_text("@.")
    assert can_move(grid, Location(0, 0), -1, 0) is False


def test_collect_movable_lists_robot_and_boxes():
    grid = Grid.from_text("#@OO.#")
    assert collect_movable(grid, Location(1, 0), 1, 0) == [
        (Location(1, 0), "@"),
        (Location(2, 0), "O"),
        (Location(3, 0), "O"),
    ]


def test_collect_movable_stops_at_space():
    grid = Grid.from_text("#@O.O#")
    assert collect_movable(grid, Location(1, 0), 1, 0) == [
        (Location(1, 0), "@"),
        (Location(2, 0), "O"),
    ]


def test_make_move_pushes_boxes():
    grid = Grid.from_text("#@OO.#")
    robot = Location(1, 0)
    assert make_move(grid, robot, Direction.RIGHT) is True
    assert "".join(grid.rows[0]) == "#.@OO#"
    assert robot == Location(2, 0)


def test_make_move_blocked_leaves_grid_alone():
    grid = Grid.from_text("#@OO#")
    robot = Location(1, 0)
    assert make_move(grid, robot, Direction.RIGHT) is False
    assert "".join(grid.rows[0]) == "#@OO#"
    assert robot == Location(1, 0)


def test_make_move_vertical():
    grid = Grid.from_text("#\n.\nO\n@\n#")
    robot = Location(0, 3)
    assert make_move(grid, robot, Direction.UP) is True
    assert [row[0] for row in grid.rows] == ["#", "O", "@", ".", "#"]
    assert robot == Location(0, 2)


def test_score_of_empty_grid_is_zero():
    assert score(Grid.from_text("#..#\n#@.#")) == 0


def test_small_example():
    grid = Grid.from_text(SMALL_MAP)
    robot = grid.locate("@")
    result = play_game(grid, parse_moves(SMALL_MOVES), robot)
    assert grid == Grid.from_text(SMALL_FINAL)
    assert result == 2028
    assert robot == Location(4, 4)


def test_play_game_preserves_walls_and_boxes():
    grid = Grid.from_text(SMALL_MAP)
    before = Grid.from_text(SMALL_MAP)
    robot = grid.locate("@")
    play_game(grid, parse_moves(SMALL_MOVES), robot)
    assert _count(grid, "O") == _count(before, "O")
    assert _count(grid, "@") == 1
    walls = lambda g: {
        (x, y) for y, row in enumerate(g.rows) for x, t in enumerate(row) if t == "#"
    }
    assert walls(grid) == walls(before)


def test_play_game_returns_score_of_final_grid():
    grid = Grid.from_text(SMALL_MAP)
    robot = grid.locate("@")
    result = play_game(grid, parse_moves(SMALL_MOVES), robot)
    assert result == score(grid)


def test_main_prints_score(tmp_path, capsys):
    grid_file = tmp_path / "grid.txt"
    moves_file = tmp_path / "moves.txt"
    grid_file.write_text(SMALL_MAP)
    moves_file.write_text(SMALL_MOVES)

    grid = Grid.from_text(SMALL_MAP)
    expected = play_game(grid, parse_moves(SMALL_MOVES), grid.locate("@"))

    assert main([str(grid_file), str(moves_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Game Field\n")
    assert "Game instructions\n" + SMALL_MOVES in out
    assert out.endswith(f"\nScore : {expected}\n")