from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable


@dataclass(slots=True)
class FrameClock:
    """Monotonic stopwatch answering "how long since you were last asked"."""

    clock: Callable[[], float] | None = field(default=None, repr=False)

    _clock: Callable[[], float] = field(init=False, repr=False)
    _last: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._clock = self.clock or monotonic
        self._last = self._clock()

    def elapsed(self) -> float:
        """Seconds since the previous call (or construction); never negative."""
        now = self._clock()
        delta = max(0.0, now - self._last)
        self._last = now
        return delta

    def restart(self) -> None:
        self._last = self._clock()
