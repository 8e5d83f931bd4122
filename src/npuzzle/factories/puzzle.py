"""Factory for shuffled, solvable puzzle grids."""
from __future__ import annotations

import logging
import random
from typing import List

from npuzzle.components.grid import Grid
from npuzzle.constants import GENERATOR_MAX_ATTEMPTS
from npuzzle.systems.grid_ops import solved_cells

logger = logging.getLogger(__name__)


class PuzzleGenerationError(RuntimeError):
    """Raised when every shuffle attempt produced an already solved board."""


def shuffle_with_parity(cells: List[int], rng: random.Random) -> int:
    """Fisher-Yates shuffle ``cells`` in place and return the number of swaps made.

    Only swaps between distinct positions are counted, so the result's parity
    equals the parity of the applied permutation.
    """
    swaps = 0
    for i in range(len(cells) - 1, 0, -1):
        j = rng.randint(0, i)
        if i != j:
            cells[i], cells[j] = cells[j], cells[i]
            swaps += 1
    return swaps


def _shuffled_solvable_cells(width: int, height: int, rng: random.Random) -> List[int]:
    cells = solved_cells(width, height)
    swaps = shuffle_with_parity(cells, rng)
    last = len(cells) - 1
    blank = cells.index(0)
    if blank != last:
        cells[blank], cells[last] = cells[last], cells[blank]
        swaps += 1
    # With the blank home, only even permutations can be solved.
    if swaps % 2 == 1:
        cells[0], cells[1] = cells[1], cells[0]
    return cells


def generate_grid(
    width: int,
    height: int,
    rng: random.Random | None = None,
    *,
    max_attempts: int = GENERATOR_MAX_ATTEMPTS,
) -> Grid:
    """Return a solvable grid that is not already solved.

    Single-row and single-column boards cannot be shuffled without either
    becoming unsolvable or staying solved, so they are rejected up front.
    """
    if width < 2 or height < 2:
        raise ValueError(f"puzzle needs at least 2 columns and 2 rows, got {width}x{height}")
    rng = rng or random.Random()
    solved = solved_cells(width, height)
    for attempt in range(1, max_attempts + 1):
        cells = _shuffled_solvable_cells(width, height, rng)
        if cells != solved:
            logger.debug("generated %dx%d puzzle after %d attempt(s)", width, height, attempt)
            return Grid(width=width, height=height, cells=cells)
    raise PuzzleGenerationError(
        f"could not shuffle a {width}x{height} puzzle in {max_attempts} attempts"
    )
