from __future__ import annotations

from typing import Any

from npuzzle.events.bus import EVENT_KEY_PRESS_RAW, EVENT_KEY_RELEASE_RAW, EventBus
from npuzzle.utils.keyboard_state import KeyboardState


class KeyboardSystem:
    """Keeps a KeyboardState in sync with raw key events from the window."""

    def __init__(self, event_bus: EventBus, *, keyboard: KeyboardState | None = None) -> None:
        self.event_bus = event_bus
        self._keyboard = keyboard or KeyboardState()
        self.event_bus.subscribe(EVENT_KEY_PRESS_RAW, self._on_key_press_raw)
        self.event_bus.subscribe(EVENT_KEY_RELEASE_RAW, self._on_key_release_raw)

    @property
    def keyboard(self) -> KeyboardState:
        return self._keyboard

    def _on_key_press_raw(self, sender: Any, **payload: Any) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        self._keyboard.press(int(symbol))

    def _on_key_release_raw(self, sender: Any, **payload: Any) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        self._keyboard.release(int(symbol))
