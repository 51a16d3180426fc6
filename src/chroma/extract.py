from __future__ import annotations

"""Dominant-color extraction by median-cut quantization.

:func:`extract_colors` works on already-decoded pixels (numpy arrays or a
flat RGBA byte buffer). :func:`load_pixels` is the separate, I/O-bound step
that decodes an image file with Pillow and shrinks it to a small working
size. :func:`extract_from_image_async` runs both in a worker thread.
"""

import asyncio
import io
import logging
import math
import os
from typing import IO, List, Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from common import settings as _settings

from .engine import RGB, color_distance, rgb_to_hsl
from .errors import ImageDecodeError

logger = logging.getLogger(__name__)

PixelInput = Union[np.ndarray, bytes, bytearray, memoryview, list]
ImageSource = Union[str, os.PathLike, bytes, bytearray, IO[bytes]]


def _as_pixel_rows(pixels: PixelInput) -> np.ndarray:
    """Flatten input to an ``(N, 3|4)`` uint8 array."""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(pixels, dtype=np.uint8)
    else:
        arr = np.asarray(pixels)
        if arr.size == 0:
            return np.empty((0, 3), dtype=np.uint8)
        arr = np.clip(arr, 0, 255).astype(np.uint8, copy=False)

    if arr.ndim == 1:
        # flat RGBA buffer; a trailing partial pixel is ignored
        usable = (arr.shape[0] // 4) * 4
        return arr[:usable].reshape(-1, 4)
    if arr.ndim in (2, 3) and arr.shape[-1] in (3, 4):
        return arr.reshape(-1, arr.shape[-1])
    raise ValueError(f"Unsupported pixel array shape: {arr.shape}")


def _opaque_rgb(rows: np.ndarray, alpha_min: int) -> np.ndarray:
    if rows.shape[1] == 4:
        rows = rows[rows[:, 3] >= alpha_min]
    return rows[:, :3]


def _median_cut(px: np.ndarray, depth: int, out: List[np.ndarray]) -> None:
    if depth == 0 or px.shape[0] == 0:
        if px.shape[0]:
            out.append(px)
        return
    ranges = px.max(axis=0).astype(np.int16) - px.min(axis=0).astype(np.int16)
    # argmax picks the first widest channel, so ties resolve r, g, b
    channel = int(np.argmax(ranges))
    px = px[np.argsort(px[:, channel], kind="stable")]
    mid = px.shape[0] // 2
    _median_cut(px[:mid], depth - 1, out)
    _median_cut(px[mid:], depth - 1, out)


def _bucket_mean(bucket: np.ndarray) -> RGB:
    mean = bucket.astype(np.int64).sum(axis=0) / bucket.shape[0]
    r, g, b = (int(v) for v in np.floor(mean + 0.5))
    return RGB(r, g, b)


def _is_usable(rgb: RGB) -> bool:
    # near-gray, near-black and near-white buckets make poor palette colors
    _, s, l = rgb_to_hsl(rgb)
    return s >= 8.0 and 10.0 <= l <= 92.0


def _dedupe(colors: List[RGB], threshold: float) -> List[RGB]:
    kept: List[RGB] = []
    for c in colors:
        if all(color_distance(c, k) >= threshold for k in kept):
            kept.append(c)
    return kept


def extract_colors(
    pixels: PixelInput, count: int = 8, rng: Optional[np.random.Generator] = None
) -> List[RGB]:
    """Return up to ``count`` dominant colors, most saturated first.

    Pixels with alpha below the configured threshold (128) are ignored.
    Inputs larger than the configured sample limit are subsampled with ``rng``.
    Empty or fully filtered input returns ``[]``.
    """
    if count <= 0:
        return []
    cfg = _settings.get()
    px = _opaque_rgb(_as_pixel_rows(pixels), cfg.EXTRACT_ALPHA_MIN)
    if px.shape[0] == 0:
        return []

    if px.shape[0] > cfg.EXTRACT_MAX_SAMPLES:
        gen = rng if rng is not None else np.random.default_rng()
        idx = np.sort(gen.choice(px.shape[0], size=cfg.EXTRACT_MAX_SAMPLES, replace=False))
        logger.debug("subsampled %d -> %d pixels", px.shape[0], idx.shape[0])
        px = px[idx]

    depth = math.ceil(math.log2(count * 2))
    buckets: List[np.ndarray] = []
    _median_cut(px, depth, buckets)

    reps = [c for c in (_bucket_mean(b) for b in buckets) if _is_usable(c)]
    unique = _dedupe(reps, cfg.EXTRACT_DEDUP_DISTANCE)
    unique.sort(key=lambda c: rgb_to_hsl(c).s, reverse=True)
    logger.debug(
        "median cut depth=%d buckets=%d usable=%d unique=%d",
        depth,
        len(buckets),
        len(reps),
        len(unique),
    )
    return unique[:count]


def load_pixels(source: ImageSource, max_edge: Optional[int] = None) -> np.ndarray:
    """Decode an image into an ``(H, W, 4)`` RGBA uint8 array.

    The image is shrunk (aspect preserved) so its longer edge is at most
    ``max_edge`` pixels (default 200). Raises :class:`ImageDecodeError` when
    the source cannot be opened or decoded.
    """
    edge = max_edge if max_edge is not None else _settings.get().EXTRACT_MAX_EDGE
    label = "<bytes>" if isinstance(source, (bytes, bytearray)) else source
    fp = io.BytesIO(bytes(source)) if isinstance(source, (bytes, bytearray)) else source
    try:
        with Image.open(fp) as img:
            rgba = img.convert("RGBA")
        rgba.thumbnail((edge, edge))
        return np.asarray(rgba, dtype=np.uint8)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        logger.warning("image decode failed: %s (%s)", label, e)
        raise ImageDecodeError(label, str(e)) from e


def extract_from_image(
    source: ImageSource, count: int = 8, rng: Optional[np.random.Generator] = None
) -> List[RGB]:
    """Decode ``source`` and extract up to ``count`` colors."""
    return extract_colors(load_pixels(source), count, rng)


async def extract_from_image_async(
    source: ImageSource, count: int = 8, rng: Optional[np.random.Generator] = None
) -> List[RGB]:
    """Same as :func:`extract_from_image`, off the event loop."""
    return await asyncio.to_thread(extract_from_image, source, count, rng)


__all__ = [
    "extract_colors",
    "load_pixels",
    "extract_from_image",
    "extract_from_image_async",
]
