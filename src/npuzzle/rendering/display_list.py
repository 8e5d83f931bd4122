from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from npuzzle.rendering.target import Color, Region, RenderTarget


@dataclass(frozen=True, slots=True)
class DrawCommand:
    op: str
    args: Tuple[Any, ...]


class DisplayList:
    """Offscreen buffer that records draw calls so they can be replayed later.

    Clip regions are recorded as ``push_clip``/``pop_clip`` pairs and nest.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.commands: List[DrawCommand] = []

    def _record(self, op: str, *args: Any) -> None:
        self.commands.append(DrawCommand(op, args))

    def clear(self, color: Color) -> None:
        self.commands.clear()
        self._record("clear", color)

    def draw_rect_filled(self, left, top, width, height, color: Color) -> None:
        self._record("rect_filled", left, top, width, height, color)

    def draw_rect_outline(self, left, top, width, height, color: Color, thickness) -> None:
        self._record("rect_outline", left, top, width, height, color, thickness)

    def draw_texture(self, asset, left, top, width, height, region: Optional[Region] = None) -> None:
        self._record("texture", asset, left, top, width, height, region)

    @contextmanager
    def clip(self, left, top, width, height) -> Iterator[None]:
        self._record("push_clip", left, top, width, height)
        try:
            yield
        finally:
            self._record("pop_clip")

    def ops(self) -> List[str]:
        return [command.op for command in self.commands]

    def replay(self, target: RenderTarget) -> None:
        """Issue every recorded command against ``target``.

        A recorded ``clear`` becomes a filled rectangle over the buffer so that
        replaying inside a clip region only paints that region.
        """
        open_clips: List[ExitStack] = []
        for command in self.commands:
            op, args = command.op, command.args
            if op == "clear":
                target.draw_rect_filled(0, 0, self.width, self.height, args[0])
            elif op == "rect_filled":
                target.draw_rect_filled(*args)
            elif op == "rect_outline":
                target.draw_rect_outline(*args)
            elif op == "texture":
                target.draw_texture(*args)
            elif op == "push_clip":
                scope = ExitStack()
                scope.enter_context(target.clip(*args))
                open_clips.append(scope)
            elif op == "pop_clip":
                open_clips.pop().close()
            else:
                raise ValueError(f"unknown draw command {op!r}")
        while open_clips:
            open_clips.pop().close()
