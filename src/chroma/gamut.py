from __future__ import annotations

"""sRGB gamut handling for OKLCH colors.

Out-of-gamut OKLCH colors are brought into sRGB by bisecting chroma at fixed
lightness and hue. Channels are only clipped for the last float-noise step,
so the hue of a mapped color never shifts.

The display-P3 helpers at the bottom are illustrative previews: they report
how a color would be expressed on a wide-gamut display, not a color-managed
conversion.
"""

from typing import Tuple

from .engine import (
    OKLCH,
    RGB,
    LinearRGB,
    clamp,
    linear_rgb_to_rgb,
    normalize_hue,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    parse_hex,
    rgb_to_hex,
    rgb_to_oklch,
    linear_to_srgb,
    srgb_to_linear,
)
from .parsing import ColorLike, to_rgb


GAMUT_TOLERANCE = 1e-4
GAMUT_MAX_ITER = 32

# Linear channels this far outside [0, 1] still count as in gamut.
_GAMUT_EPS = 1e-6

# Below this chroma the color is treated as neutral gray.
_GRAY_C = 1e-4

WIDE_GAMUT_CHROMA = 0.25
P3_CHROMA_BOOST = 1.25
P3_MAX_CHROMA = 0.38

_SRGB_TO_P3 = (
    (0.8225, 0.1774, 0.0),
    (0.0332, 0.9669, 0.0),
    (0.0171, 0.0724, 0.9108),
)


def _linear_in_gamut(lin: LinearRGB) -> bool:
    return all(-_GAMUT_EPS <= c <= 1.0 + _GAMUT_EPS for c in lin)


def _lch_to_linear(L: float, C: float, h: float) -> LinearRGB:
    return oklab_to_linear_rgb(oklch_to_oklab((L, C, h)))


def in_gamut(lch: Tuple[float, float, float]) -> bool:
    """Return True when the OKLCH color maps inside the sRGB cube."""
    L, C, h = lch
    return _linear_in_gamut(_lch_to_linear(L, C, h))


def to_srgb_gamut_safe(
    L: float,
    C: float,
    h: float,
    max_iter: int = GAMUT_MAX_ITER,
    tolerance: float = GAMUT_TOLERANCE,
) -> Tuple[LinearRGB, OKLCH]:
    """Convert OKLCH to in-gamut linear sRGB, bisecting C until within gamut.

    Returns ``((r, g, b), (L_adj, C_adj, h_adj))`` where the channels are
    linear light in [0, 1]. L is clamped to [0, 1] and negative C is treated
    as 0 before mapping.
    """
    L = clamp(L, 0.0, 1.0)
    C = max(0.0, C)
    h = normalize_hue(h)

    if L <= 0.0:
        return (0.0, 0.0, 0.0), OKLCH(0.0, 0.0, h)
    if L >= 1.0:
        return (1.0, 1.0, 1.0), OKLCH(1.0, 0.0, h)
    if C < _GRAY_C:
        # OKLab L is the cube root of the shared LMS response
        y = clamp(L * L * L, 0.0, 1.0)
        return (y, y, y), OKLCH(L, 0.0, h)

    lin = _lch_to_linear(L, C, h)
    if _linear_in_gamut(lin):
        return _clip_linear(lin), OKLCH(L, C, h)

    lo, hi = 0.0, C
    best = _lch_to_linear(L, 0.0, h)
    for _ in range(max_iter):
        if hi - lo < tolerance:
            break
        mid = (lo + hi) / 2.0
        cand = _lch_to_linear(L, mid, h)
        if _linear_in_gamut(cand):
            lo = mid
            best = cand
        else:
            hi = mid
    return _clip_linear(best), OKLCH(L, lo, h)


def _clip_linear(lin: LinearRGB) -> LinearRGB:
    r, g, b = lin
    return (_clip01(r), _clip01(g), _clip01(b))


def _clip01(x: float) -> float:
    return max(0.0, min(1.0, x))


def map_to_gamut(lch: Tuple[float, float, float]) -> OKLCH:
    """Return the in-gamut OKLCH coordinates the color is rendered with."""
    L, C, h = lch
    _, mapped = to_srgb_gamut_safe(L, C, h)
    return mapped


def oklch_to_rgb(lch: Tuple[float, float, float]) -> RGB:
    """Gamut-mapped OKLCH to 8-bit sRGB."""
    L, C, h = lch
    lin, _ = to_srgb_gamut_safe(L, C, h)
    return linear_rgb_to_rgb(lin)


def oklab_to_rgb(lab: Tuple[float, float, float]) -> RGB:
    """Gamut-mapped OKLab to 8-bit sRGB (goes through OKLCH)."""
    return oklch_to_rgb(oklab_to_oklch(lab))


# --- display-P3 preview ----------------------------------------------------------


def is_wide_gamut(color: ColorLike) -> bool:
    """Colors with OKLCH chroma above 0.25 benefit visibly from a P3 display."""
    return rgb_to_oklch(to_rgb(color)).C > WIDE_GAMUT_CHROMA


def expand_to_p3(hex_str: str) -> str | None:
    """Boost chroma by 25 % (capped at 0.38) to preview a wide-gamut variant.

    The result is still encoded for sRGB, so the boost is only visible up to
    the sRGB boundary. Returns ``None`` for unparsable input.
    """
    norm = parse_hex(hex_str)
    if norm is None:
        return None
    L, C, h = rgb_to_oklch(to_rgb(norm))
    boosted = clamp(C * P3_CHROMA_BOOST, C, max(C, P3_MAX_CHROMA))
    return rgb_to_hex(oklch_to_rgb((L, boosted, h)))


def srgb_to_p3(color: ColorLike) -> Tuple[float, float, float]:
    """Express an sRGB color as display-P3 components in [0, 1]."""
    r, g, b = to_rgb(color)
    lin = (srgb_to_linear(r / 255.0), srgb_to_linear(g / 255.0), srgb_to_linear(b / 255.0))
    out = []
    for row in _SRGB_TO_P3:
        v = row[0] * lin[0] + row[1] * lin[1] + row[2] * lin[2]
        # P3 shares the sRGB transfer curve
        out.append(linear_to_srgb(v))
    return (out[0], out[1], out[2])


__all__ = [
    "GAMUT_TOLERANCE",
    "in_gamut",
    "to_srgb_gamut_safe",
    "map_to_gamut",
    "oklch_to_rgb",
    "oklab_to_rgb",
    "is_wide_gamut",
    "expand_to_p3",
    "srgb_to_p3",
]
