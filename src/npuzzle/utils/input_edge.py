from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from npuzzle.components.direction import Direction

# When several directions are held at once the first one in this order wins.
DIRECTION_PRIORITY: Tuple[Direction, ...] = (
    Direction.WEST,
    Direction.EAST,
    Direction.NORTH,
    Direction.SOUTH,
)


@dataclass(slots=True)
class DirectionEdgeDetector:
    """Turns a polled "direction held" signal into single-shot presses.

    A press fires only on the frame where the input goes from nothing held to
    some direction held. Holding keeps firing nothing; switching directly from
    one held direction to another fires nothing either, the player has to let
    go first.
    """

    priority: Tuple[Direction, ...] = DIRECTION_PRIORITY

    _held: Optional[Direction] = field(init=False, default=None, repr=False)
    _pressed: Optional[Direction] = field(init=False, default=None, repr=False)

    def sample(self, is_held: Callable[[Direction], bool]) -> Optional[Direction]:
        """Poll once for this frame and return the newly pressed direction, if any."""
        current = next((d for d in self.priority if is_held(d)), None)
        if current is None:
            self._pressed = None
        elif self._held is None:
            self._pressed = current
        else:
            self._pressed = None
        self._held = current
        return self._pressed

    @property
    def held(self) -> Optional[Direction]:
        return self._held

    @property
    def pressed(self) -> Optional[Direction]:
        """Result of the latest ``sample`` call."""
        return self._pressed

    def reset(self) -> None:
        self._held = None
        self._pressed = None
