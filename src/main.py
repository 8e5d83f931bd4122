"""Entry point for the N-puzzle.

Sets up the ECS world, event bus, systems, asset table and Arcade window.
"""
import argparse
import logging
import random
from pathlib import Path

from arcade import Window, run

from npuzzle.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    PLACEHOLDER_ART_SIZE,
    UPDATE_RATE,
    WINDOW_TITLE,
)
from npuzzle.events.bus import EVENT_KEY_PRESS_RAW, EVENT_KEY_RELEASE_RAW, EventBus
from npuzzle.rendering.arcade_target import ArcadeRenderTarget
from npuzzle.rendering.assets import AssetId, AssetTable, build_placeholder_assets, load_asset_table
from npuzzle.systems.keyboard_system import KeyboardSystem
from npuzzle.systems.scene_system import SceneSystem, get_scene_state
from npuzzle.systems.solver import solve
from npuzzle.world import create_world

logger = logging.getLogger(__name__)

# arcade.key.ESCAPE
KEY_ESCAPE = 65307


class PuzzleWindow(Window):
    def __init__(self, assets: AssetTable, *, width: int, height: int, rng: random.Random):
        window_w, window_h = assets.size(AssetId.PICTURE)
        super().__init__(window_w, window_h, WINDOW_TITLE)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, width=width, height=height, rng=rng)

        # Input systems
        self.keyboard_system = KeyboardSystem(self.event_bus)

        # Scene systems
        self.render_target = ArcadeRenderTarget(self)
        self.scene_system = SceneSystem(
            self.world,
            self.event_bus,
            assets,
            self.keyboard_system.keyboard,
        )

    def on_draw(self):
        self.clear()
        self.scene_system.process(self.render_target)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == KEY_ESCAPE:
            self.close()
            return
        self.event_bus.emit(EVENT_KEY_PRESS_RAW, symbol=symbol, modifiers=modifiers)

    def on_key_release(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_RELEASE_RAW, symbol=symbol, modifiers=modifiers)

    def on_deactivate(self):
        # Keys released while unfocused never report a release.
        self.keyboard_system.keyboard.clear()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sliding picture puzzle.")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="columns on the board")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="rows on the board")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    parser.add_argument("--assets", type=Path, default=None, help="directory with picture.png and finish-0..5.png")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    parser.add_argument("--hint", action="store_true", help="log a shortest solution for the shuffled board")
    return parser.parse_args(argv)


def log_hint(window: PuzzleWindow) -> None:
    grid = get_scene_state(window.world).scene.grid
    try:
        moves = solve(grid)
    except ValueError as exc:
        logger.warning("no hint available: %s", exc)
        return
    logger.warning("solution (%d moves): %s", len(moves), " ".join(d.name for d in moves))


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.assets is not None:
        assets = load_asset_table(args.assets)
    else:
        assets = build_placeholder_assets(PLACEHOLDER_ART_SIZE, args.width, args.height)
    window = PuzzleWindow(assets, width=args.width, height=args.height, rng=random.Random(args.seed))
    if args.hint:
        log_hint(window)
    run()

if __name__ == "__main__":
    main()
