from __future__ import annotations

from typing import Any

from npuzzle.components.grid import Grid
from npuzzle.constants import BLANK_COLOR, FRAME_COLOR, FRAME_THICKNESS
from npuzzle.rendering.target import RenderTarget


def draw_grid(target: RenderTarget, grid: Grid, picture: Any, *, frame_thickness: float = FRAME_THICKNESS) -> None:
    """Draw ``grid`` as pieces of ``picture`` scaled to fill the target.

    Tile ``n`` shows the n-th cell (row-major) of the picture; the blank is a
    solid block. Every cell, blank included, gets a frame.
    """
    tile_w = target.width / grid.width
    tile_h = target.height / grid.height
    pic_w, pic_h = picture.size
    src_w = pic_w / grid.width
    src_h = pic_h / grid.height
    for y in range(grid.height):
        for x in range(grid.width):
            value = grid.at(x, y)
            left = x * tile_w
            top = y * tile_h
            if value == 0:
                target.draw_rect_filled(left, top, tile_w, tile_h, BLANK_COLOR)
            else:
                home = value - 1
                region = ((home % grid.width) * src_w, (home // grid.width) * src_h, src_w, src_h)
                target.draw_texture(picture, left, top, tile_w, tile_h, region=region)
            half = frame_thickness / 2
            target.draw_rect_outline(
                left + half,
                top + half,
                tile_w - frame_thickness,
                tile_h - frame_thickness,
                FRAME_COLOR,
                frame_thickness,
            )
