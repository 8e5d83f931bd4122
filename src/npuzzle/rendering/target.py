"""Drawing surface the scenes render into.

Coordinates are pixels with the origin at the top-left corner and y growing
downward, matching grid rows. Concrete targets translate from there.
"""
from __future__ import annotations

from typing import Any, ContextManager, Optional, Protocol, Tuple

Color = Tuple[int, int, int]
Region = Tuple[float, float, float, float]


class RenderTarget(Protocol):
    width: int
    height: int

    def clear(self, color: Color) -> None: ...

    def draw_rect_filled(self, left: float, top: float, width: float, height: float, color: Color) -> None: ...

    def draw_rect_outline(
        self, left: float, top: float, width: float, height: float, color: Color, thickness: float
    ) -> None: ...

    def draw_texture(
        self,
        asset: Any,
        left: float,
        top: float,
        width: float,
        height: float,
        region: Optional[Region] = None,
    ) -> None: ...

    def clip(self, left: float, top: float, width: float, height: float) -> ContextManager[None]: ...
