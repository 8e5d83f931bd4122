from __future__ import annotations

import logging

from esper import World

from npuzzle.components.scene_state import SceneState
from npuzzle.events.bus import EVENT_DIRECTION_PRESSED, EVENT_SCENE_CHANGED, EventBus
from npuzzle.rendering.assets import AssetTable
from npuzzle.rendering.target import RenderTarget
from npuzzle.scenes.components import Scene
from npuzzle.scenes.step import FrameInput, process_scene
from npuzzle.utils.frame_clock import FrameClock
from npuzzle.utils.input_edge import DirectionEdgeDetector
from npuzzle.utils.keyboard_state import KeyboardState

logger = logging.getLogger(__name__)


def get_scene_state(world: World) -> SceneState:
    for _, state in world.get_component(SceneState):
        return state
    raise RuntimeError("SceneState resource not found")


class SceneSystem:
    """Runs one scene step per rendered frame.

    Samples the clock and the input edge detector exactly once per ``process``
    call and stores whatever scene the step returns.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        assets: AssetTable,
        keyboard: KeyboardState,
        *,
        clock: FrameClock | None = None,
        detector: DirectionEdgeDetector | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.assets = assets
        self.keyboard = keyboard
        self.clock = clock or FrameClock()
        self.detector = detector or DirectionEdgeDetector()

    @property
    def current_scene(self) -> Scene:
        return get_scene_state(self.world).scene

    def process(self, target: RenderTarget) -> Scene:
        state = get_scene_state(self.world)
        dt = self.clock.elapsed()
        pressed = self.detector.sample(self.keyboard.is_held)
        if pressed is not None:
            self.event_bus.emit(EVENT_DIRECTION_PRESSED, direction=pressed, frame=state.frame)
        frame = FrameInput(pressed=pressed, dt=dt, assets=self.assets, event_bus=self.event_bus)
        previous = state.scene
        state.scene = process_scene(previous, target, frame)
        if state.scene.kind != previous.kind:
            logger.info("scene %s -> %s at frame %d", previous.kind.name, state.scene.kind.name, state.frame)
            self.event_bus.emit(
                EVENT_SCENE_CHANGED,
                previous_kind=previous.kind,
                new_kind=state.scene.kind,
                frame=state.frame,
            )
        state.frame += 1
        return state.scene
