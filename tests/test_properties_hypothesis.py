from __future__ import annotations

import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings, strategies as st  # type: ignore

from chroma.accessibility import apca_contrast, apca_level, contrast_ratio
from chroma.api import generate_palette
from chroma.engine import (
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hue,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklch,
)
from chroma.gamut import oklch_to_rgb
from chroma.harmony import HarmonyMode

channel = st.integers(0, 255)
rgb = st.tuples(channel, channel, channel)


@given(rgb)
def test_hex_roundtrip(c):
    assert hex_to_rgb(rgb_to_hex(c)) == c


@given(rgb)
def test_hsl_roundtrip(c):
    assert hsl_to_rgb(rgb_to_hsl(c)) == c


@given(rgb)
def test_oklch_roundtrip_within_one_step(c):
    back = oklch_to_rgb(rgb_to_oklch(c))
    assert all(abs(a - b) <= 1 for a, b in zip(back, c))


@given(st.floats(-1e6, 1e6, allow_nan=False))
def test_normalize_hue_range(h):
    out = normalize_hue(h)
    assert 0.0 <= out < 360.0


@given(rgb, rgb)
def test_contrast_symmetric_and_bounded(a, b):
    r = contrast_ratio(a, b)
    assert r == pytest.approx(contrast_ratio(b, a))
    assert 1.0 - 1e-9 <= r <= 21.0 + 1e-9


@given(rgb, rgb)
def test_apca_level_matches_magnitude(a, b):
    lc = apca_contrast(a, b)
    assert abs(lc) <= 110.0
    assert apca_level(lc) is apca_level(-lc)


@settings(max_examples=60, deadline=None)
@given(
    mode=st.sampled_from(list(HarmonyMode)),
    count=st.integers(0, 12),
    seed=st.integers(0, 2**32 - 1),
)
def test_generate_returns_exact_count(mode, count, seed):
    stops = generate_palette(mode, count, rng=np.random.default_rng(seed))
    assert len(stops) == count
    assert all(hex_to_rgb(s.hex) == s.rgb for s in stops)
