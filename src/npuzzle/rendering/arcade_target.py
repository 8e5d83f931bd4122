from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from npuzzle.rendering.target import Color, Region

Box = Tuple[int, int, int, int]


class ArcadeRenderTarget:
    """RenderTarget drawing straight onto an Arcade window.

    Flips the top-left coordinates used by scenes into Arcade's bottom-left
    space, turns PIL images into cached textures and maps ``clip`` onto the
    GL scissor box.
    """

    def __init__(self, window) -> None:
        self.window = window
        self._texture_cache: Dict[Tuple[int, Optional[Box]], Any] = {}
        self._clip_stack: List[Box] = []

    @property
    def width(self) -> int:
        return self.window.width

    @property
    def height(self) -> int:
        return self.window.height

    def _bottom(self, top: float, height: float) -> float:
        return self.height - top - height

    def clear(self, color: Color) -> None:
        self.window.clear(color=color)

    def draw_rect_filled(self, left, top, width, height, color: Color) -> None:
        import arcade

        arcade.draw_lbwh_rectangle_filled(left, self._bottom(top, height), width, height, color)

    def draw_rect_outline(self, left, top, width, height, color: Color, thickness) -> None:
        import arcade

        arcade.draw_lbwh_rectangle_outline(
            left,
            self._bottom(top, height),
            width,
            height,
            color,
            border_width=thickness,
        )

    def draw_texture(self, asset, left, top, width, height, region: Optional[Region] = None) -> None:
        import arcade

        texture = self._texture_for(arcade, asset, region)
        arcade.draw_texture_rect(texture, arcade.LBWH(left, self._bottom(top, height), width, height))

    @contextmanager
    def clip(self, left, top, width, height) -> Iterator[None]:
        box = (
            int(round(left)),
            int(round(self._bottom(top, height))),
            max(0, int(round(width))),
            max(0, int(round(height))),
        )
        if self._clip_stack:
            box = _intersect(self._clip_stack[-1], box)
        self._clip_stack.append(box)
        self.window.ctx.scissor = box
        try:
            yield
        finally:
            self._clip_stack.pop()
            self.window.ctx.scissor = self._clip_stack[-1] if self._clip_stack else None

    def _texture_for(self, arcade_module, image, region: Optional[Region]):
        box: Optional[Box] = None
        if region is not None:
            x, y, w, h = region
            box = (int(x), int(y), int(x + w), int(y + h))
        key = (id(image), box)
        cached = self._texture_cache.get(key)
        if cached is not None:
            return cached
        source = image.crop(box) if box is not None else image
        texture = arcade_module.Texture(source.convert("RGBA"), hash=f"npuzzle:{id(image)}:{box}")
        self._texture_cache[key] = texture
        return texture


def _intersect(a: Box, b: Box) -> Box:
    left = max(a[0], b[0])
    bottom = max(a[1], b[1])
    right = min(a[0] + a[2], b[0] + b[2])
    top = min(a[1] + a[3], b[1] + b[3])
    return left, bottom, max(0, right - left), max(0, top - bottom)
