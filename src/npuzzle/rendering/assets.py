"""Asset table: logical ids to loaded images.

Scenes refer to artwork only through ``AssetId``; the table is built once at
startup and handed to whoever renders.
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Tuple

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)


class AssetId(Enum):
    PICTURE = "picture"
    FINISH_0 = "finish-0"
    FINISH_1 = "finish-1"
    FINISH_2 = "finish-2"
    FINISH_3 = "finish-3"
    FINISH_4 = "finish-4"
    FINISH_5 = "finish-5"


FINISH_FRAMES: Tuple[AssetId, ...] = (
    AssetId.FINISH_0,
    AssetId.FINISH_1,
    AssetId.FINISH_2,
    AssetId.FINISH_3,
    AssetId.FINISH_4,
    AssetId.FINISH_5,
)


class AssetLoadError(RuntimeError):
    """An asset file is missing or cannot be decoded."""


class AssetTable:
    """Read-only lookup from ``AssetId`` to a PIL image."""

    def __init__(self, assets: Mapping[AssetId, Image.Image]) -> None:
        self._assets: Dict[AssetId, Image.Image] = dict(assets)

    def get(self, asset_id: AssetId) -> Image.Image:
        return self._assets[asset_id]

    def __contains__(self, asset_id: AssetId) -> bool:
        return asset_id in self._assets

    def size(self, asset_id: AssetId) -> Tuple[int, int]:
        return self._assets[asset_id].size


def load_asset_table(directory: Path) -> AssetTable:
    """Load ``<id>.png`` for every ``AssetId`` from ``directory``."""
    directory = Path(directory)
    assets: Dict[AssetId, Image.Image] = {}
    for asset_id in AssetId:
        path = directory / f"{asset_id.value}.png"
        if not path.exists():
            raise AssetLoadError(f"missing asset {asset_id.name}: {path}")
        try:
            with Image.open(path) as img:
                assets[asset_id] = img.convert("RGBA")
        except OSError as exc:
            raise AssetLoadError(f"cannot read asset {asset_id.name}: {path}") from exc
        logger.info("loaded %s from %s", asset_id.name, path)
    return AssetTable(assets)


def build_placeholder_assets(size: int, columns: int, rows: int) -> AssetTable:
    """Draw stand-in artwork so the game runs without an asset folder."""
    assets: Dict[AssetId, Image.Image] = {AssetId.PICTURE: _placeholder_picture(size, columns, rows)}
    for index, asset_id in enumerate(FINISH_FRAMES):
        assets[asset_id] = _placeholder_finish_frame(size, index, len(FINISH_FRAMES))
    logger.info("using generated placeholder artwork (%dpx)", size)
    return AssetTable(assets)


def _placeholder_picture(size: int, columns: int, rows: int) -> Image.Image:
    img = Image.new("RGBA", (size, size))
    draw = ImageDraw.Draw(img)
    for y in range(size):
        t = y / max(1, size - 1)
        draw.line([(0, y), (size, y)], fill=(int(40 + 180 * t), int(90 + 60 * (1 - t)), int(200 - 120 * t)))
    font = ImageFont.load_default()
    tile_w = size / columns
    tile_h = size / rows
    for index in range(columns * rows - 1):
        cx = (index % columns + 0.5) * tile_w
        cy = (index // columns + 0.5) * tile_h
        radius = min(tile_w, tile_h) * 0.28
        draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=(250, 245, 230))
        _draw_centered_text(draw, (cx, cy), str(index + 1), (30, 30, 30), font)
    return img


def _placeholder_finish_frame(size: int, index: int, count: int) -> Image.Image:
    img = Image.new("RGBA", (size, size), (255, 255, 255, 255))
    draw = ImageDraw.Draw(img)
    center = size / 2
    angle = 2 * math.pi * index / count
    for ray in range(12):
        a = angle + ray * math.pi / 6
        end = (center + math.cos(a) * size * 0.45, center + math.sin(a) * size * 0.45)
        draw.line([(center, center), end], fill=(255, 200, 60), width=max(1, size // 60))
    radius = size * (0.18 + 0.03 * math.sin(angle))
    draw.ellipse([center - radius, center - radius, center + radius, center + radius], fill=(226, 62, 160))
    _draw_centered_text(draw, (center, center), "SOLVED", (255, 255, 255), ImageFont.load_default())
    return img


def _draw_centered_text(draw, center, text, fill, font) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) / 2 - left
    y = center[1] - (bottom - top) / 2 - top
    draw.text((x, y), text, fill=fill, font=font)
