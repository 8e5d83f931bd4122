from __future__ import annotations

from typing import Dict, Mapping, Set

from npuzzle.components.direction import Direction
from npuzzle.constants import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

DEFAULT_KEY_BINDINGS: Dict[int, Direction] = {
    KEY_LEFT: Direction.WEST,
    KEY_RIGHT: Direction.EAST,
    KEY_UP: Direction.NORTH,
    KEY_DOWN: Direction.SOUTH,
}


class KeyboardState:
    """Set of currently held key symbols, queried per direction."""

    def __init__(self, bindings: Mapping[int, Direction] | None = None) -> None:
        self.bindings: Dict[int, Direction] = dict(bindings or DEFAULT_KEY_BINDINGS)
        self._held: Set[int] = set()

    def press(self, symbol: int) -> None:
        self._held.add(symbol)

    def release(self, symbol: int) -> None:
        self._held.discard(symbol)

    def clear(self) -> None:
        self._held.clear()

    def is_held(self, direction: Direction) -> bool:
        return any(self.bindings.get(symbol) == direction for symbol in self._held)
