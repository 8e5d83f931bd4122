"""Breadth-first solver for small boards.

Only practical up to 3x3 (181440 reachable states); larger boards hit the
state budget and raise.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Tuple

from npuzzle.components.direction import Direction
from npuzzle.components.grid import Grid
from npuzzle.systems.grid_ops import solved_cells

DEFAULT_MAX_STATES = 200_000

State = Tuple[int, ...]


def _neighbours(state: State, width: int, height: int):
    blank = state.index(0)
    x, y = blank % width, blank // width
    for direction in Direction:
        dx, dy = direction.offset
        tx, ty = x + dx, y + dy
        if 0 <= tx < width and 0 <= ty < height:
            target = ty * width + tx
            cells = list(state)
            cells[blank], cells[target] = cells[target], cells[blank]
            yield direction, tuple(cells)


def solve(grid: Grid, *, max_states: int = DEFAULT_MAX_STATES) -> List[Direction]:
    """Return a shortest list of directions that turns ``grid`` into the solved board.

    Raises ``ValueError`` if no solution is found within ``max_states`` visited
    states (either the board is unsolvable or too large to search).
    """
    start: State = tuple(grid.cells)
    goal: State = tuple(solved_cells(grid.width, grid.height))
    if start == goal:
        return []
    parents: Dict[State, Optional[Tuple[State, Direction]]] = {start: None}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        for direction, nxt in _neighbours(state, grid.width, grid.height):
            if nxt in parents:
                continue
            parents[nxt] = (state, direction)
            if nxt == goal:
                return _unwind(parents, nxt)
            if len(parents) >= max_states:
                raise ValueError(f"no solution within {max_states} states")
            queue.append(nxt)
    raise ValueError("board is not solvable")


def _unwind(parents: Dict[State, Optional[Tuple[State, Direction]]], state: State) -> List[Direction]:
    path: List[Direction] = []
    link = parents[state]
    while link is not None:
        state, direction = link
        path.append(direction)
        link = parents[state]
    path.reverse()
    return path
