"""Factory helpers for building scenes."""
from __future__ import annotations

import random

from npuzzle.constants import GRID_HEIGHT, GRID_WIDTH, TRANSITION_SPEED
from npuzzle.factories.puzzle import generate_grid
from npuzzle.rendering.assets import AssetId
from npuzzle.scenes.components import ActiveScene, Scene, TerminalScene, TransitionScene


def spawn_puzzle_scene(
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    rng: random.Random | None = None,
    *,
    picture: AssetId = AssetId.PICTURE,
) -> ActiveScene:
    """Create the opening gameplay scene with a freshly shuffled board."""
    return ActiveScene(grid=generate_grid(width, height, rng), picture=picture)


def spawn_finish_transition(previous: Scene, *, speed: float = TRANSITION_SPEED) -> TransitionScene:
    """Wipe from ``previous`` into the looping finish animation."""
    return TransitionScene(previous=previous, next=TerminalScene(), progress=0.0, speed=speed)
