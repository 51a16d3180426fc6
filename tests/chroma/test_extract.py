from __future__ import annotations

import asyncio
import io
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from chroma.engine import RGB
from chroma.errors import ChromaError, ImageDecodeError
from chroma.extract import extract_colors, extract_from_image, extract_from_image_async, load_pixels
from common import settings as _settings

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def _two_tone(n: int = 100) -> np.ndarray:
    return np.array([RED] * n + [BLUE] * n, dtype=np.uint8)


def _png(tmp_path: Path, size: tuple[int, int] = (400, 100)) -> Path:
    img = Image.new("RGB", size, RED)
    img.paste(BLUE, (0, 0, size[0] // 2, size[1]))
    path = tmp_path / "two_tone.png"
    img.save(path)
    return path


def test_two_tone_pixels() -> None:
    assert extract_colors(_two_tone()) == [RGB(0, 0, 255), RGB(255, 0, 0)]


def test_image_shaped_input() -> None:
    img = _two_tone(50).reshape(10, 10, 3)
    assert set(extract_colors(img)) == {RGB(*RED), RGB(*BLUE)}


def test_transparent_pixels_are_ignored() -> None:
    px = np.array([[255, 0, 0, 0]] * 50 + [[0, 160, 0, 255]] * 50, dtype=np.uint8)
    assert extract_colors(px) == [RGB(0, 160, 0)]


def test_flat_rgba_bytes() -> None:
    buf = bytes([0, 160, 0, 255] * 20 + [9, 9])
    assert extract_colors(buf) == [RGB(0, 160, 0)]


def test_unusable_colors_are_dropped() -> None:
    grays = np.array([(128, 128, 128), (5, 5, 5), (250, 250, 250)] * 10, dtype=np.uint8)
    assert extract_colors(grays) == []
    assert extract_colors(np.empty((0, 3), dtype=np.uint8)) == []
    assert extract_colors([]) == []
    assert extract_colors(_two_tone(), count=0) == []


def test_near_duplicates_are_merged() -> None:
    px = np.array([RED] * 50 + [(250, 4, 4)] * 50, dtype=np.uint8)
    assert len(extract_colors(px)) == 1


def test_count_limits_result() -> None:
    px = np.array(
        [RED] * 20 + [BLUE] * 20 + [(0, 160, 0)] * 20 + [(250, 200, 0)] * 20, dtype=np.uint8
    )
    assert len(extract_colors(px, count=2)) == 2


def test_bad_shape_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported pixel array shape"):
        extract_colors(np.zeros((2, 2, 5), dtype=np.uint8))


def test_subsampling_is_reproducible(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(_settings.get(), "EXTRACT_MAX_SAMPLES", 64)
    px = _two_tone(500)
    a = extract_colors(px, rng=np.random.default_rng(3))
    b = extract_colors(px, rng=np.random.default_rng(3))
    assert a == b
    assert set(a) == {RGB(*RED), RGB(*BLUE)}


def test_load_pixels_thumbnails(tmp_path: Path) -> None:
    arr = load_pixels(_png(tmp_path))
    assert arr.shape == (50, 200, 4)
    assert arr.dtype == np.uint8
    assert load_pixels(_png(tmp_path), max_edge=40).shape == (10, 40, 4)


def test_load_pixels_from_bytes(tmp_path: Path) -> None:
    data = _png(tmp_path, (20, 10)).read_bytes()
    assert load_pixels(data).shape == (10, 20, 4)
    assert load_pixels(io.BytesIO(data)).shape == (10, 20, 4)


def test_extract_from_image(tmp_path: Path) -> None:
    # small enough that no resampling blends the two halves
    got = extract_from_image(_png(tmp_path, (100, 50)), count=4, rng=np.random.default_rng(0))
    assert set(got) == {RGB(*RED), RGB(*BLUE)}


def test_extract_from_image_async(tmp_path: Path) -> None:
    path = _png(tmp_path, (100, 50))
    got = asyncio.run(extract_from_image_async(path, count=4))
    assert set(got) == {RGB(*RED), RGB(*BLUE)}


def test_decode_failure(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    bad = tmp_path / "broken.png"
    bad.write_bytes(b"definitely not an image")
    with pytest.raises(ImageDecodeError) as ei:
        load_pixels(bad)
    assert isinstance(ei.value, ChromaError)
    assert "Cannot decode image" in str(ei.value)
    assert any("decode failed" in r.getMessage() for r in caplog.records)

    with pytest.raises(ImageDecodeError):
        load_pixels(tmp_path / "missing.png")
    with pytest.raises(ImageDecodeError):
        load_pixels(b"\x00\x01\x02")
