"""Scene state resource holding the scene the next frame will process."""
from dataclasses import dataclass

from npuzzle.scenes.components import Scene


@dataclass
class SceneState:
    """Singleton component storing the current scene value."""
    scene: Scene
    frame: int = 0
