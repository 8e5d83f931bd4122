from __future__ import annotations

from typing import Callable

from npuzzle.components.direction import Direction
from npuzzle.components.grid import Grid
from npuzzle.rendering.assets import AssetTable, build_placeholder_assets


class FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def held(*directions: Direction) -> Callable[[Direction], bool]:
    """Input query reporting exactly ``directions`` as held."""

    return lambda direction: direction in directions


def make_assets(columns: int = 3, rows: int = 3) -> AssetTable:
    return build_placeholder_assets(48, columns, rows)


def one_move_from_solved() -> Grid:
    """3x3 board solved by a single WEST move: tile 8 sits right of the blank."""

    return Grid(width=3, height=3, cells=[1, 2, 3, 4, 5, 6, 7, 0, 8])
