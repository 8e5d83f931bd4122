"""Per-frame scene processing.

``process_scene`` is the single entry point: it draws ``scene`` into the
target and returns the scene to process on the next frame.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from npuzzle.components.direction import Direction
from npuzzle.constants import BACKGROUND_COLOR
from npuzzle.events.bus import (
    EVENT_MOVE_REJECTED,
    EVENT_PUZZLE_SOLVED,
    EVENT_TILE_MOVED,
    EventBus,
)
from npuzzle.rendering.assets import AssetTable
from npuzzle.rendering.display_list import DisplayList
from npuzzle.rendering.grid_renderer import draw_grid
from npuzzle.rendering.target import RenderTarget
from npuzzle.scenes.components import ActiveScene, Scene, TerminalScene, TransitionScene
from npuzzle.scenes.factory import spawn_finish_transition
from npuzzle.systems.grid_ops import InvalidMove, is_solved, move

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FrameInput:
    """Everything a scene may consume during one frame."""
    pressed: Optional[Direction]
    dt: float
    assets: AssetTable
    event_bus: Optional[EventBus] = None

    def emit(self, name: str, **payload) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(name, **payload)


def process_scene(scene: Scene, target: RenderTarget, frame: FrameInput) -> Scene:
    if isinstance(scene, ActiveScene):
        return process_active(scene, target, frame)
    if isinstance(scene, TransitionScene):
        return process_transition(scene, target, frame)
    if isinstance(scene, TerminalScene):
        return process_terminal(scene, target, frame)
    raise TypeError(f"not a scene: {scene!r}")


def process_active(scene: ActiveScene, target: RenderTarget, frame: FrameInput) -> Scene:
    grid = scene.grid
    result: Scene = scene
    if not is_solved(grid) and frame.pressed is not None:
        outcome = move(grid, frame.pressed)
        if isinstance(outcome, InvalidMove):
            frame.emit(
                EVENT_MOVE_REJECTED,
                direction=outcome.direction,
                blank=outcome.blank,
                target=outcome.target,
            )
        else:
            frame.emit(
                EVENT_TILE_MOVED,
                direction=outcome.direction,
                blank_from=outcome.blank_from,
                blank_to=outcome.blank_to,
            )
        if is_solved(grid):
            logger.info("puzzle solved (%dx%d)", grid.width, grid.height)
            frame.emit(EVENT_PUZZLE_SOLVED, width=grid.width, height=grid.height)
            result = spawn_finish_transition(scene)
    target.clear(BACKGROUND_COLOR)
    draw_grid(target, grid, frame.assets.get(scene.picture))
    return result


def process_transition(scene: TransitionScene, target: RenderTarget, frame: FrameInput) -> Scene:
    previous_buffer = DisplayList(target.width, target.height)
    next_buffer = DisplayList(target.width, target.height)
    # Sub-scenes only render and animate; the wipe owns the input.
    sub_frame = replace(frame, pressed=None)
    previous = process_scene(scene.previous, previous_buffer, sub_frame)
    upcoming = process_scene(scene.next, next_buffer, sub_frame)

    boundary = scene.progress * target.height
    with target.clip(0, 0, target.width, boundary):
        next_buffer.replay(target)
    with target.clip(0, boundary, target.width, target.height - boundary):
        previous_buffer.replay(target)

    progress = scene.progress + frame.dt * scene.speed
    if progress >= 1.0:
        return upcoming
    return replace(scene, previous=previous, next=upcoming, progress=progress)


def process_terminal(scene: TerminalScene, target: RenderTarget, frame: FrameInput) -> Scene:
    elapsed = scene.elapsed + frame.dt
    index = scene.frame_index
    while elapsed >= scene.interval:
        elapsed -= scene.interval
        index = (index + 1) % len(scene.frames)
    updated = replace(scene, frame_index=index, elapsed=elapsed)
    target.clear(BACKGROUND_COLOR)
    target.draw_texture(frame.assets.get(updated.current_frame), 0, 0, target.width, target.height)
    return updated
