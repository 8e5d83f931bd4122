from npuzzle.components.direction import Direction
from npuzzle.components.grid import Grid
from npuzzle.constants import TRANSITION_SPEED
from npuzzle.events.bus import EVENT_MOVE_REJECTED, EVENT_PUZZLE_SOLVED, EVENT_TILE_MOVED, EventBus
from npuzzle.rendering.display_list import DisplayList
from npuzzle.scenes.components import ActiveScene, SceneKind, TerminalScene, TransitionScene
from npuzzle.scenes.step import FrameInput, process_scene
from tests.helpers import make_assets, one_move_from_solved


def _frame(assets, pressed=None, dt=1 / 60, bus=None):
    return FrameInput(pressed=pressed, dt=dt, assets=assets, event_bus=bus)


def test_solving_move_starts_transition_then_terminal_forever():
    assets = make_assets()
    target = DisplayList(120, 120)
    scene = ActiveScene(grid=one_move_from_solved())

    nxt = process_scene(scene, target, _frame(assets, Direction.WEST))

    assert isinstance(nxt, TransitionScene)
    assert nxt.kind is SceneKind.TRANSITIONING
    assert nxt.progress == 0.0
    assert nxt.speed == TRANSITION_SPEED
    assert nxt.previous is scene
    assert isinstance(nxt.next, TerminalScene)

    after = process_scene(nxt, target, _frame(assets, dt=1 / TRANSITION_SPEED))
    assert isinstance(after, TerminalScene)

    for _ in range(10):
        after = process_scene(after, target, _frame(assets, Direction.NORTH, dt=0.3))
        assert isinstance(after, TerminalScene)


def test_transition_duration_is_frame_rate_independent():
    assets = make_assets()
    target = DisplayList(64, 64)

    def frames_until_terminal(dt):
        scene = TransitionScene(previous=ActiveScene(grid=Grid(3, 3)), next=TerminalScene())
        count = 0
        while not isinstance(scene, TerminalScene):
            scene = process_scene(scene, target, _frame(assets, dt=dt))
            count += 1
        return count

    assert frames_until_terminal(0.5) == 8
    assert frames_until_terminal(0.25) == 16


def test_transition_self_loop_keeps_progress_and_sub_scenes():
    assets = make_assets()
    target = DisplayList(64, 64)
    previous = ActiveScene(grid=Grid(3, 3))
    scene = TransitionScene(previous=previous, next=TerminalScene(), speed=0.25)

    scene = process_scene(scene, target, _frame(assets, dt=1.0))

    assert isinstance(scene, TransitionScene)
    assert scene.progress == 0.25
    assert scene.previous is previous
    # The finish animation keeps running underneath the wipe.
    assert scene.next.frame_index == 2


def test_invalid_move_is_a_noop():
    assets = make_assets()
    bus = EventBus()
    rejected = []
    bus.subscribe(EVENT_MOVE_REJECTED, lambda sender, **kw: rejected.append(kw))
    grid = one_move_from_solved()
    before = list(grid.cells)
    scene = ActiveScene(grid=grid)

    nxt = process_scene(scene, DisplayList(90, 90), _frame(assets, Direction.NORTH, bus=bus))

    assert nxt is scene
    assert grid.cells == before
    assert rejected == [{"direction": Direction.NORTH, "blank": (1, 2), "target": (1, 3)}]


def test_non_solving_move_stays_active():
    assets = make_assets()
    bus = EventBus()
    moved = []
    solved = []
    bus.subscribe(EVENT_TILE_MOVED, lambda sender, **kw: moved.append(kw))
    bus.subscribe(EVENT_PUZZLE_SOLVED, lambda sender, **kw: solved.append(kw))
    scene = ActiveScene(grid=one_move_from_solved())

    nxt = process_scene(scene, DisplayList(90, 90), _frame(assets, Direction.EAST, bus=bus))

    assert nxt is scene
    assert scene.grid.cells == [1, 2, 3, 4, 5, 6, 0, 7, 8]
    assert moved[0]["blank_to"] == (0, 2)
    assert solved == []


def test_solving_move_emits_puzzle_solved():
    assets = make_assets()
    bus = EventBus()
    solved = []
    bus.subscribe(EVENT_PUZZLE_SOLVED, lambda sender, **kw: solved.append(kw))

    process_scene(ActiveScene(grid=one_move_from_solved()), DisplayList(90, 90), _frame(assets, Direction.WEST, bus=bus))

    assert solved == [{"width": 3, "height": 3}]


def test_already_solved_active_scene_ignores_input():
    assets = make_assets()
    grid = Grid(3, 3)
    scene = ActiveScene(grid=grid)

    nxt = process_scene(scene, DisplayList(90, 90), _frame(assets, Direction.SOUTH))

    assert nxt is scene
    assert grid.cells == [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_no_input_keeps_active_scene():
    assets = make_assets()
    scene = ActiveScene(grid=one_move_from_solved())
    assert process_scene(scene, DisplayList(90, 90), _frame(assets)) is scene
