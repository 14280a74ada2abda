# tests/integration/test_pipeline.py

from pathlib import Path

import pytest
from pyrsistent import pvector

from identicon import (
    Identicon,
    IdenticonConfig,
    build_identicon,
    generate_identicon,
    render_identicon,
)
from tests.test_utils import (
    HEY_HO_CELLS,
    HEY_HO_DIGEST,
    WHITE,
    cell_pixels,
    decode_png,
    is_solid,
)


def test_build_identicon_reference() -> None:
    identicon = build_identicon("hey ho")
    assert list(identicon.hash) == HEY_HO_DIGEST
    assert identicon.color == (172, 137, 160)
    assert list(identicon.cells_to_fill) == HEY_HO_CELLS
    assert len(identicon.pixel_map) == len(identicon.cells_to_fill)
    assert identicon.pixel_map[0] == ((0, 0), (50, 50))


def test_identicon_is_immutable() -> None:
    identicon = build_identicon("hey ho")
    with pytest.raises(AttributeError):
        identicon.color = (0, 0, 0)  # type: ignore[misc]


def test_identicon_rejects_mismatched_pixel_map() -> None:
    with pytest.raises(ValueError):
        Identicon(
            hash=pvector(HEY_HO_DIGEST),
            color=(1, 2, 3),
            cells_to_fill=pvector([0, 1]),
            pixel_map=pvector([((0, 0), (50, 50))]),
        )


def test_generate_writes_reference_image(tmp_path: Path) -> None:
    path = generate_identicon("hey ho", directory=tmp_path)
    assert path == tmp_path / "hey ho.png"
    pixels = decode_png(path.read_bytes())
    assert pixels.shape == (250, 250, 3)
    for index in range(25):
        expected = (172, 137, 160) if index in HEY_HO_CELLS else WHITE
        assert is_solid(cell_pixels(pixels, index), expected), index


def test_generate_in_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    generate_identicon("alice")
    assert (tmp_path / "alice.png").is_file()


@pytest.mark.parametrize("data", ["hey ho", "", "alice", "ünïcödé"])
def test_generate_is_deterministic(tmp_path: Path, data: str) -> None:
    first = generate_identicon(data, directory=tmp_path).read_bytes()
    second = generate_identicon(data, directory=tmp_path).read_bytes()
    assert first == second == render_identicon(data)


def test_generate_propagates_write_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        generate_identicon("alice", directory=tmp_path / "missing")


def test_custom_config() -> None:
    config = IdenticonConfig(cell_size=10)
    pixels = decode_png(render_identicon("hey ho", config))
    assert pixels.shape == (50, 50, 3)
    assert is_solid(cell_pixels(pixels, 0, cell_size=10), (172, 137, 160))
    assert is_solid(cell_pixels(pixels, 1, cell_size=10), WHITE)


def test_config_background_reaches_renderer() -> None:
    config = IdenticonConfig(background=(0, 0, 0))
    pixels = decode_png(render_identicon("hey ho", config))
    assert is_solid(cell_pixels(pixels, 1), (0, 0, 0))
    assert is_solid(cell_pixels(pixels, 0), (172, 137, 160))
