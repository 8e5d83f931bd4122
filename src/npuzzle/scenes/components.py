"""Scene variants driven by the frame loop.

A scene is an immutable value; stepping it returns the scene for the next
frame, either an updated copy of itself or its successor.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple, Union

from npuzzle.components.grid import Grid
from npuzzle.constants import FINISH_FRAME_INTERVAL, TRANSITION_SPEED
from npuzzle.rendering.assets import FINISH_FRAMES, AssetId


class SceneKind(Enum):
    ACTIVE = auto()
    TRANSITIONING = auto()
    TERMINAL = auto()


@dataclass(frozen=True, slots=True)
class ActiveScene:
    """Gameplay on ``grid``; the grid itself is mutated in place by moves."""
    grid: Grid
    picture: AssetId = AssetId.PICTURE

    kind = SceneKind.ACTIVE


@dataclass(frozen=True, slots=True)
class TerminalScene:
    """Looping animation over ``frames``; never hands over to another scene."""
    frames: Tuple[AssetId, ...] = FINISH_FRAMES
    frame_index: int = 0
    elapsed: float = 0.0
    interval: float = FINISH_FRAME_INTERVAL

    kind = SceneKind.TERMINAL

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("terminal scene needs at least one frame")
        if self.interval <= 0:
            raise ValueError(f"frame interval must be positive, got {self.interval}")

    @property
    def current_frame(self) -> AssetId:
        return self.frames[self.frame_index]


@dataclass(frozen=True, slots=True)
class TransitionScene:
    """Horizontal wipe from ``previous`` to ``next``; progress runs 0..1."""
    previous: "Scene"
    next: "Scene"
    progress: float = 0.0
    speed: float = TRANSITION_SPEED

    kind = SceneKind.TRANSITIONING


Scene = Union[ActiveScene, TransitionScene, TerminalScene]
