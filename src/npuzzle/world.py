import random

from esper import World

from npuzzle.components.scene_state import SceneState
from npuzzle.constants import GRID_HEIGHT, GRID_WIDTH
from npuzzle.events.bus import EventBus
from npuzzle.rendering.assets import AssetId
from npuzzle.scenes.components import Scene
from npuzzle.scenes.factory import spawn_puzzle_scene


def create_world(
    event_bus: EventBus,
    *,
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    rng: random.Random | None = None,
    picture: AssetId = AssetId.PICTURE,
    initial_scene: Scene | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the scene state resource; the board is shuffled here unless a scene is given.
    scene = initial_scene or spawn_puzzle_scene(width, height, world.random, picture=picture)
    state_entity = world.create_entity()
    world.add_component(state_entity, SceneState(scene=scene))
    return world
