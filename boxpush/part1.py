"""Single-width warehouse: the robot pushes rows of ``O`` boxes."""

from __future__ import annotations

import argparse
from typing import Iterable

from boxpush.reader import (
    BOX,
    DEFAULT_GRID_PATH,
    DEFAULT_MOVES_PATH,
    EMPTY,
    ROBOT,
    WALL,
    Direction,
    Grid,
    Location,
    read_grid,
    read_moves,
    render_moves,
)


def next_coordinate(value: int, delta: int) -> int:
    """Step ``value`` by ``delta`` (-1, 0 or 1), never going below zero."""
    if delta == -1:
        return value - 1 if value > 0 else value
    if delta == 1:
        return value + 1
    return value


def _step(location: Location, dx: int, dy: int) -> Location:
    return Location(next_coordinate(location.x, dx), next_coordinate(location.y, dy))


def can_move(grid: Grid, location: Location, dx: int, dy: int) -> bool:
    """Tell whether the line of boxes ahead of ``location`` ends in free space."""
    current = location
    while True:
        ahead = _step(current, dx, dy)
        if ahead == current:
            return False
        tile = grid.cell(ahead.x, ahead.y)
        if tile == EMPTY:
            return True
        if tile == WALL:
            return False
        current = ahead


def collect_movable(
    grid: Grid, location: Location, dx: int, dy: int
) -> list[tuple[Location, str]]:
    """Return the robot and every box directly in line ahead of it."""
    movable = [(Location(location.x, location.y), ROBOT)]
    current = location
    while True:
        ahead = _step(current, dx, dy)
        if ahead == current:
            break
        tile = grid.cell(ahead.x, ahead.y)
        if tile in (EMPTY, WALL):
            break
        if tile == BOX:
            movable.append((ahead, BOX))
        current = ahead
    return movable


def _shift(
    grid: Grid,
    movable: Iterable[tuple[Location, str]],
    robot: Location,
    dx: int,
    dy: int,
) -> None:
    movable = list(movable)
    for location, _ in movable:
        grid.rows[location.y][location.x] = EMPTY
    for location, tile in movable:
        target = _step(location, dx, dy)
        grid.rows[target.y][target.x] = tile
        if tile == ROBOT:
            robot.x, robot.y = target.x, target.y


def make_move(grid: Grid, robot: Location, direction: Direction) -> bool:
    """Carry out one move, updating ``grid`` and ``robot``; return whether it happened."""
    dx, dy = direction.delta()
    if not can_move(grid, robot, dx, dy):
        return False
    _shift(grid, collect_movable(grid, robot, dx, dy), robot, dx, dy)
    return True


def play_game(grid: Grid, moves: Iterable[Direction], robot: Location) -> int:
    """Play every move in turn and return the final score."""
    for move in moves:
        make_move(grid, robot, move)
    return score(grid)


def score(grid: Grid) -> int:
    """Sum 100 times the row plus the column of every box."""
    return sum(
        100 * y + x
        for y, row in enumerate(grid.rows)
        for x, tile in enumerate(row)
        if tile == BOX
    )


def main(argv: list[str] | None = None) -> int:
    """Read a map and moves, play them out and print the score."""
    parser = argparse.ArgumentParser(description="Push boxes around a warehouse.")
    parser.add_argument("grid", nargs="?", default=DEFAULT_GRID_PATH)
    parser.add_argument("moves", nargs="?", default=DEFAULT_MOVES_PATH)
    args = parser.parse_args(argv)

    grid = read_grid(args.grid)
    moves = read_moves(args.moves)

    print("Game Field")
    print(grid.render(), end="")
    print("Game instructions")
    print(render_moves(moves), end="")

    robot = grid.locate(ROBOT)
    result = play_game(grid, moves, robot)
    print(f"\nScore : {result}")
    return 0