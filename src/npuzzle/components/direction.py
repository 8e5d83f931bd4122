"""Directions the blank can travel in."""
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Each value is the (dx, dy) offset applied to the blank, y growing downward.

    Moving the blank North pulls the tile below it up, which is what the
    player expects from pressing the Up arrow.
    """
    NORTH = (0, 1)
    SOUTH = (0, -1)
    WEST = (1, 0)
    EAST = (-1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value
