import pytest
from PIL import Image

from npuzzle.rendering.assets import (
    FINISH_FRAMES,
    AssetId,
    AssetLoadError,
    AssetTable,
    build_placeholder_assets,
    load_asset_table,
)


def _write_assets(directory, skip=None):
    for asset_id in AssetId:
        if asset_id is skip:
            continue
        Image.new("RGB", (30, 20), (10, 20, 30)).save(directory / f"{asset_id.value}.png")


def test_placeholder_assets_cover_every_id():
    table = build_placeholder_assets(64, 3, 3)
    for asset_id in AssetId:
        assert asset_id in table
        assert table.size(asset_id) == (64, 64)
    assert len(FINISH_FRAMES) == 6


def test_load_asset_table_reads_pngs(tmp_path):
    _write_assets(tmp_path)
    table = load_asset_table(tmp_path)
    assert table.size(AssetId.PICTURE) == (30, 20)
    assert table.get(AssetId.FINISH_3).mode == "RGBA"


def test_missing_asset_is_fatal(tmp_path):
    _write_assets(tmp_path, skip=AssetId.FINISH_2)
    with pytest.raises(AssetLoadError, match="FINISH_2"):
        load_asset_table(tmp_path)


def test_unreadable_asset_is_fatal(tmp_path):
    _write_assets(tmp_path)
    (tmp_path / "picture.png").write_bytes(b"not a png")
    with pytest.raises(AssetLoadError):
        load_asset_table(tmp_path)


def test_unknown_id_raises_key_error():
    table = AssetTable({})
    with pytest.raises(KeyError):
        table.get(AssetId.PICTURE)
