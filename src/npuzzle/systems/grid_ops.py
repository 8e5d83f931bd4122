from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from npuzzle.components.direction import Direction
from npuzzle.components.grid import Grid

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Moved:
    direction: Direction
    blank_from: Position
    blank_to: Position


@dataclass(frozen=True, slots=True)
class InvalidMove:
    """The blank would leave the board; the grid was not touched."""
    direction: Direction
    blank: Position
    target: Position


MoveResult = Union[Moved, InvalidMove]


def solved_cells(width: int, height: int) -> List[int]:
    return list(range(1, width * height)) + [0]


def is_solved(grid: Grid) -> bool:
    return grid.cells == solved_cells(grid.width, grid.height)


def blank_index(grid: Grid) -> int:
    return grid.cells.index(0)


def index_to_xy(grid: Grid, index: int) -> Position:
    return index % grid.width, index // grid.width


def xy_to_index(grid: Grid, x: int, y: int) -> int:
    return y * grid.width + x


def blank_position(grid: Grid) -> Position:
    return index_to_xy(grid, blank_index(grid))


def in_bounds(grid: Grid, x: int, y: int) -> bool:
    return 0 <= x < grid.width and 0 <= y < grid.height


def legal_directions(grid: Grid) -> List[Direction]:
    """Directions whose move would keep the blank on the board."""
    x, y = blank_position(grid)
    return [d for d in Direction if in_bounds(grid, x + d.offset[0], y + d.offset[1])]


def move(grid: Grid, direction: Direction) -> MoveResult:
    """Slide the blank one cell in ``direction``, swapping it with that tile."""
    x, y = blank_position(grid)
    dx, dy = direction.offset
    tx, ty = x + dx, y + dy
    if not in_bounds(grid, tx, ty):
        logger.debug("rejected %s: blank at %s would leave the board", direction.name, (x, y))
        return InvalidMove(direction=direction, blank=(x, y), target=(tx, ty))
    src = xy_to_index(grid, x, y)
    dst = xy_to_index(grid, tx, ty)
    grid.cells[src], grid.cells[dst] = grid.cells[dst], grid.cells[src]
    logger.debug("moved blank %s from %s to %s", direction.name, (x, y), (tx, ty))
    return Moved(direction=direction, blank_from=(x, y), blank_to=(tx, ty))
