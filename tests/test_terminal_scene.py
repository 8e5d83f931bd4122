import pytest

from npuzzle.rendering.assets import FINISH_FRAMES
from npuzzle.rendering.display_list import DisplayList
from npuzzle.scenes.components import TerminalScene
from npuzzle.scenes.step import FrameInput, process_scene
from tests.helpers import make_assets


def _run(scene, assets, steps):
    target = DisplayList(32, 32)
    for dt in steps:
        scene = process_scene(scene, target, FrameInput(pressed=None, dt=dt, assets=assets))
    return scene


def test_frame_index_after_1700ms_single_step():
    scene = _run(TerminalScene(), make_assets(), [1.7])
    assert len(scene.frames) == 6
    assert scene.frame_index == 3


def test_frame_index_after_1700ms_in_small_steps():
    scene = _run(TerminalScene(), make_assets(), [0.25] * 6 + [0.2])
    assert scene.frame_index == 3
    assert scene.elapsed == pytest.approx(0.2)


def test_frame_index_wraps_around():
    scene = _run(TerminalScene(), make_assets(), [0.5] * 7)
    assert scene.frame_index == 1


def test_frame_stays_until_interval_reached():
    scene = _run(TerminalScene(), make_assets(), [0.125] * 3)
    assert scene.frame_index == 0


def test_terminal_draws_current_frame_over_target():
    assets = make_assets()
    target = DisplayList(40, 30)
    scene = process_scene(TerminalScene(frame_index=4), target, FrameInput(pressed=None, dt=0.0, assets=assets))
    assert scene.current_frame is FINISH_FRAMES[4]
    assert target.ops() == ["clear", "texture"]
    texture = target.commands[1]
    assert texture.args == (assets.get(FINISH_FRAMES[4]), 0, 0, 40, 30, None)


def test_terminal_requires_frames_and_positive_interval():
    with pytest.raises(ValueError):
        TerminalScene(frames=())
    with pytest.raises(ValueError):
        TerminalScene(interval=0.0)
