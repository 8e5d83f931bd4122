from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS_RAW = "key_press_raw"          # payload: symbol=int, modifiers=int
EVENT_KEY_RELEASE_RAW = "key_release_raw"      # payload: symbol=int, modifiers=int
EVENT_DIRECTION_PRESSED = "direction_pressed"  # payload: direction=Direction, frame=int


# ============================================================================
# PUZZLE
# ============================================================================
EVENT_TILE_MOVED = "tile_moved"            # payload: direction=Direction, blank_from=(x,y), blank_to=(x,y)
EVENT_MOVE_REJECTED = "move_rejected"      # payload: direction=Direction, blank=(x,y), target=(x,y)
EVENT_PUZZLE_SOLVED = "puzzle_solved"      # payload: width=int, height=int


# ============================================================================
# SCENES
# ============================================================================
EVENT_SCENE_CHANGED = "scene_changed"      # payload: previous_kind=SceneKind, new_kind=SceneKind, frame=int
