from __future__ import annotations

import pytest

from chroma.engine import RGB, rgb_to_oklch
from chroma.gamut import (
    expand_to_p3,
    in_gamut,
    is_wide_gamut,
    map_to_gamut,
    oklab_to_rgb,
    oklch_to_rgb,
    srgb_to_p3,
    to_srgb_gamut_safe,
)


def test_in_gamut_color_is_untouched() -> None:
    lch = rgb_to_oklch((60, 120, 180))
    mapped = map_to_gamut(lch)
    assert mapped.C == pytest.approx(lch.C)
    assert oklch_to_rgb(lch) == RGB(60, 120, 180)


def test_out_of_gamut_reduces_chroma_only() -> None:
    lch = (0.7, 0.4, 150.0)
    assert not in_gamut(lch)
    mapped = map_to_gamut(lch)
    assert mapped.L == pytest.approx(0.7)
    assert mapped.H == pytest.approx(150.0)
    assert 0.0 < mapped.C < 0.4
    assert in_gamut(mapped)


def test_lightness_extremes() -> None:
    assert oklch_to_rgb((0.0, 0.2, 30.0)) == RGB(0, 0, 0)
    assert oklch_to_rgb((-0.5, 0.2, 30.0)) == RGB(0, 0, 0)
    assert oklch_to_rgb((1.0, 0.2, 30.0)) == RGB(255, 255, 255)
    assert oklch_to_rgb((1.5, 0.2, 30.0)) == RGB(255, 255, 255)


def test_gray_shortcut_is_neutral() -> None:
    lin, lch = to_srgb_gamut_safe(0.5, 0.0, 200.0)
    assert lin[0] == lin[1] == lin[2]
    assert lch.C == 0.0
    r, g, b = oklch_to_rgb((0.5, 0.0, 200.0))
    assert r == g == b


def test_negative_chroma_treated_as_zero() -> None:
    r, g, b = oklch_to_rgb((0.6, -0.1, 90.0))
    assert r == g == b


def test_oklab_to_rgb_goes_through_mapping() -> None:
    r, g, b = oklab_to_rgb((0.7, 0.3, 0.3))
    assert all(0 <= v <= 255 for v in (r, g, b))


def test_wide_gamut_helpers() -> None:
    assert is_wide_gamut("#ff0000")
    assert not is_wide_gamut("#808080")
    assert expand_to_p3("not a color") is None
    assert expand_to_p3("#808080") == "#808080"
    assert srgb_to_p3("#ffffff") == pytest.approx((1.0, 1.0, 1.0), abs=1e-3)
    p3_red = srgb_to_p3("#ff0000")
    # sRGB red sits inside P3, so it needs less than full P3 red
    assert p3_red[0] < 1.0
