"""Double-width warehouse: the robot pushes ``[]`` boxes that may topple others."""

from __future__ import annotations

import argparse
from typing import Iterable

from boxpush.part1 import next_coordinate
from boxpush.reader import (
    BOX_LEFT,
    BOX_RIGHT,
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


def _step(location: Location, dx: int, dy: int) -> Location:
    return Location(next_coordinate(location.x, dx), next_coordinate(location.y, dy))


def _partner(location: Location, tile: str) -> Location:
    offset = 1 if tile == BOX_LEFT else -1
    return Location(location.x + offset, location.y)


def can_move(grid: Grid, location: Location, dx: int, dy: int) -> bool:
    """Tell whether whatever stands at ``location`` can shift one step.

    A vertical push onto a box also needs the other half of that box to be free
    to move.
    """
    ahead = _step(location, dx, dy)
    if ahead == location:
        return False
    tile = grid.cell(ahead.x, ahead.y)
    if tile == EMPTY:
        return True
    if tile not in (BOX_LEFT, BOX_RIGHT):
        return False
    if dy == 0:
        return can_move(grid, ahead, dx, dy)
    if dx == 0:
        first = can_move(grid, ahead, dx, dy)
        second = can_move(grid, _partner(ahead, tile), dx, dy)
        return first and second
    return False


def collect_movable(
    grid: Grid, location: Location, dx: int, dy: int
) -> list[tuple[Location, str]]:
    """Return every tile that moves along with the one at ``location``.

    The list may name the same tile more than once when box stacks overlap.
    """
    movable = [(Location(location.x, location.y), grid.cell(location.x, location.y))]
    current = location
    while True:
        ahead = _step(current, dx, dy)
        if ahead == current:
            break
        tile = grid.cell(ahead.x, ahead.y)
        if tile in (EMPTY, WALL):
            break
        if tile in (BOX_LEFT, BOX_RIGHT):
            if dy == 0:
                movable.append((ahead, tile))
            elif dx == 0:
                movable.append((ahead, tile))
                movable.extend(collect_movable(grid, _partner(ahead, tile), dx, dy))
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
    """Sum 100 times the row plus the column of every box's left edge."""
    return sum(
        100 * y + x
        for y, row in enumerate(grid.rows)
        for x, tile in enumerate(row)
        if tile == BOX_LEFT
    )


def main(argv: list[str] | None = None) -> int:
    """Read a map, widen it, play the moves out and print the score."""
    parser = argparse.ArgumentParser(description="Push wide boxes around a warehouse.")
    parser.add_argument("grid", nargs="?", default=DEFAULT_GRID_PATH)
    parser.add_argument("moves", nargs="?", default=DEFAULT_MOVES_PATH)
    args = parser.parse_args(argv)

    grid = read_grid(args.grid).widened()
    moves = read_moves(args.moves)

    print("Game Field")
    print(grid.render(), end="")
    print("Game instructions")
    print(render_moves(moves), end="")

    robot = grid.locate(ROBOT)
    result = play_game(grid, moves, robot)
    print(f"\nScore : {result}")
    return 0