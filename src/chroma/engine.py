"""Color conversion engine.

This module holds the channel tuples for every supported color space and the
pure conversion functions between them: hex, sRGB, HSL, HSV, CMYK, OKLab and
OKLCh. Everything here is deterministic and total over its valid domain;
only hex parsing can fail, and it reports failure by returning ``None``.

OKLCh -> sRGB needs gamut mapping and therefore lives in :mod:`chroma.gamut`.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple, Optional, Tuple


class RGB(NamedTuple):
    """sRGB channels as integers in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in [0, 360), saturation and lightness in [0, 100]."""

    h: float
    s: float
    l: float


class HSV(NamedTuple):
    """Hue in [0, 360), saturation and value in [0, 100]."""

    h: float
    s: float
    v: float


class CMYK(NamedTuple):
    """Cyan, magenta, yellow and key channels in [0, 100]."""

    c: float
    m: float
    y: float
    k: float


class OKLab(NamedTuple):
    L: float
    a: float
    b: float


class OKLCH(NamedTuple):
    """Polar OKLab. L in [0, 1], C >= 0, H in [0, 360)."""

    L: float
    C: float
    H: float


LinearRGB = Tuple[float, float, float]

# Below this chroma the hue angle is numerical noise.
_ACHROMATIC_C = 1e-6

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


# --- numeric domain helpers ---------------------------------------------------


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def round_half_up(v: float) -> int:
    """Round .5 away from zero for non-negative values (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(v + 0.5))


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    out = h % 360.0
    # -1e-15 % 360 == 360.0 in floating point
    return 0.0 if out >= 360.0 else out


def rotate_hue(h: float, delta: float) -> float:
    return normalize_hue(h + delta)


def hue_delta(from_h: float, to_h: float) -> float:
    """Signed shortest rotation (degrees, in [-180, 180)) from ``from_h`` to ``to_h``."""
    return (to_h - from_h + 540.0) % 360.0 - 180.0


def hue_distance(h1: float, h2: float) -> float:
    """Unsigned angular distance in [0, 180]."""
    d = abs(h1 - h2) % 360.0
    return min(d, 360.0 - d)


# --- sRGB transfer function -----------------------------------------------------


def srgb_to_linear(c: float) -> float:
    """Gamma-encoded channel in [0, 1] to linear light."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Linear channel to gamma-encoded [0, 1]; input is clamped to [0, 1]."""
    if c <= 0.0:
        return 0.0
    if c >= 1.0:
        return 1.0
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


# --- hex --------------------------------------------------------------------------


def _hex_digits(text: str) -> Optional[str]:
    if not isinstance(text, str):
        return None
    m = _HEX_RE.match(text.strip())
    if m is None:
        return None
    digits = m.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return digits


def parse_hex(text: str) -> Optional[str]:
    """Normalize ``#RGB`` / ``#RRGGBB`` / ``#RRGGBBAA`` to ``#rrggbb``.

    The leading ``#`` is optional and case is ignored. Any alpha byte is
    dropped. Returns ``None`` for anything else.
    """
    digits = _hex_digits(text)
    if digits is None:
        return None
    return "#" + digits[:6]


def parse_hex_alpha(text: str) -> Optional[float]:
    """Alpha percentage (0-100) of an 8-digit hex, or ``None`` for other input."""
    digits = _hex_digits(text)
    if digits is None or len(digits) != 8:
        return None
    return round_half_up(int(digits[6:8], 16) / 255.0 * 100.0)


def opaque_hex(text: str) -> Optional[str]:
    """Same as :func:`parse_hex`; named for call sites that strip alpha."""
    return parse_hex(text)


def hex_to_rgb(text: str) -> Optional[RGB]:
    """Parse a hex color into RGB. Returns ``None`` on malformed input."""
    hex6 = parse_hex(text)
    if hex6 is None:
        return None
    n = int(hex6[1:], 16)
    return RGB((n >> 16) & 255, (n >> 8) & 255, n & 255)


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = (max(0, min(255, int(v))) for v in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def to_hex_alpha(hex_str: str, alpha: Optional[float]) -> str:
    """Append the alpha byte (``#rrggbbaa``) when alpha is below 100."""
    base = parse_hex(hex_str) or hex_str
    if alpha is None or alpha >= 100:
        return base
    aa = round_half_up(clamp(alpha, 0.0, 100.0) / 100.0 * 255.0)
    return f"{base}{aa:02x}"


# --- HSL / HSV --------------------------------------------------------------------


def _hue_from_rgb(rn: float, gn: float, bn: float, mx: float, d: float) -> float:
    if d <= 0.0:
        return 0.0
    if mx == rn:
        h = ((gn - bn) / d + (6.0 if gn < bn else 0.0)) / 6.0
    elif mx == gn:
        h = ((bn - rn) / d + 2.0) / 6.0
    else:
        h = ((rn - gn) / d + 4.0) / 6.0
    return normalize_hue(h * 360.0)


def rgb_to_hsl(rgb: Tuple[int, int, int]) -> HSL:
    r, g, b = rgb
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(rn, gn, bn), min(rn, gn, bn)
    l = (mx + mn) / 2.0
    if mx == mn:
        return HSL(0.0, 0.0, l * 100.0)
    d = mx - mn
    s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
    return HSL(_hue_from_rgb(rn, gn, bn, mx, d), s * 100.0, l * 100.0)


def hsl_to_rgb(hsl: Tuple[float, float, float]) -> RGB:
    """HSL to RGB. Saturation and lightness are clamped, hue wraps."""
    h, s, l = hsl
    sn = clamp(s, 0.0, 100.0) / 100.0
    ln = clamp(l, 0.0, 100.0) / 100.0
    if sn == 0.0:
        v = round_half_up(ln * 255.0)
        return RGB(v, v, v)
    q = ln * (1.0 + sn) if ln < 0.5 else ln + sn - ln * sn
    p = 2.0 * ln - q
    hk = normalize_hue(h) / 360.0

    def channel(t: float) -> float:
        x = t % 1.0
        if x < 1.0 / 6.0:
            return p + (q - p) * 6.0 * x
        if x < 0.5:
            return q
        if x < 2.0 / 3.0:
            return p + (q - p) * (2.0 / 3.0 - x) * 6.0
        return p

    return RGB(
        round_half_up(channel(hk + 1.0 / 3.0) * 255.0),
        round_half_up(channel(hk) * 255.0),
        round_half_up(channel(hk - 1.0 / 3.0) * 255.0),
    )


def rgb_to_hsv(rgb: Tuple[int, int, int]) -> HSV:
    r, g, b = rgb
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(rn, gn, bn), min(rn, gn, bn)
    d = mx - mn
    s = 0.0 if mx == 0.0 else d / mx * 100.0
    return HSV(_hue_from_rgb(rn, gn, bn, mx, d), s, mx * 100.0)


def hsv_to_rgb(hsv: Tuple[float, float, float]) -> RGB:
    """HSV to RGB. Saturation and value are clamped, hue wraps."""
    h, s, v = hsv
    sn = clamp(s, 0.0, 100.0) / 100.0
    vn = clamp(v, 0.0, 100.0) / 100.0
    hh = normalize_hue(h) / 60.0
    i = int(math.floor(hh)) % 6
    f = hh - math.floor(hh)
    p = vn * (1.0 - sn)
    q = vn * (1.0 - sn * f)
    t = vn * (1.0 - sn * (1.0 - f))
    rn, gn, bn = (
        (vn, t, p),
        (q, vn, p),
        (p, vn, t),
        (p, q, vn),
        (t, p, vn),
        (vn, p, q),
    )[i]
    return RGB(round_half_up(rn * 255.0), round_half_up(gn * 255.0), round_half_up(bn * 255.0))


# --- CMYK -------------------------------------------------------------------------


def rgb_to_cmyk(rgb: Tuple[int, int, int]) -> CMYK:
    r, g, b = rgb
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    k = 1.0 - max(rn, gn, bn)
    if k >= 1.0:
        return CMYK(0.0, 0.0, 0.0, 100.0)
    d = 1.0 - k
    return CMYK(
        (1.0 - rn - k) / d * 100.0,
        (1.0 - gn - k) / d * 100.0,
        (1.0 - bn - k) / d * 100.0,
        k * 100.0,
    )


def cmyk_to_rgb(cmyk: Tuple[float, float, float, float]) -> RGB:
    c, m, y, k = (clamp(v, 0.0, 100.0) / 100.0 for v in cmyk)
    return RGB(
        round_half_up(255.0 * (1.0 - c) * (1.0 - k)),
        round_half_up(255.0 * (1.0 - m) * (1.0 - k)),
        round_half_up(255.0 * (1.0 - y) * (1.0 - k)),
    )


# --- OKLab / OKLCh ---------------------------------------------------------------


def linear_rgb_to_oklab(rl: float, gl: float, bl: float) -> OKLab:
    l = 0.4122214708 * rl + 0.5363325363 * gl + 0.0514459929 * bl
    m = 0.2119034982 * rl + 0.6806995451 * gl + 0.1073969566 * bl
    s = 0.0883024619 * rl + 0.2817188376 * gl + 0.6299787005 * bl

    l_ = math.copysign(abs(l) ** (1 / 3), l)
    m_ = math.copysign(abs(m) ** (1 / 3), m)
    s_ = math.copysign(abs(s) ** (1 / 3), s)

    return OKLab(
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def oklab_to_linear_rgb(lab: Tuple[float, float, float]) -> LinearRGB:
    """OKLab to unclipped linear sRGB. Channels may fall outside [0, 1]."""
    L, a, b = lab
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def linear_rgb_to_rgb(lin: LinearRGB) -> RGB:
    """Encode linear channels to 8-bit sRGB (channels are clamped to [0, 1])."""
    r, g, b = (round_half_up(linear_to_srgb(c) * 255.0) for c in lin)
    return RGB(r, g, b)


def rgb_to_oklab(rgb: Tuple[int, int, int]) -> OKLab:
    r, g, b = rgb
    return linear_rgb_to_oklab(
        srgb_to_linear(r / 255.0), srgb_to_linear(g / 255.0), srgb_to_linear(b / 255.0)
    )


def oklab_to_oklch(lab: Tuple[float, float, float]) -> OKLCH:
    L, a, b = lab
    C = math.sqrt(a * a + b * b)
    if C < _ACHROMATIC_C:
        return OKLCH(L, C, 0.0)
    return OKLCH(L, C, normalize_hue(math.degrees(math.atan2(b, a))))


def oklch_to_oklab(lch: Tuple[float, float, float]) -> OKLab:
    L, C, H = lch
    C = max(0.0, C)
    h_rad = math.radians(normalize_hue(H))
    return OKLab(L, C * math.cos(h_rad), C * math.sin(h_rad))


def rgb_to_oklch(rgb: Tuple[int, int, int]) -> OKLCH:
    return oklab_to_oklch(rgb_to_oklab(rgb))


# --- luminance and distance -------------------------------------------------------


def relative_luminance(rgb: Tuple[int, int, int]) -> float:
    """WCAG 2.1 relative luminance in [0, 1]."""
    r, g, b = rgb
    return (
        0.2126 * srgb_to_linear(r / 255.0)
        + 0.7152 * srgb_to_linear(g / 255.0)
        + 0.0722 * srgb_to_linear(b / 255.0)
    )


def color_distance(a: Tuple[int, int, int], b: Tuple[int, int, int]) -> float:
    """Euclidean distance in OKLab (perceptual, roughly 0-1)."""
    la, lb = rgb_to_oklab(a), rgb_to_oklab(b)
    return math.sqrt((la.L - lb.L) ** 2 + (la.a - lb.a) ** 2 + (la.b - lb.b) ** 2)


__all__ = [
    "RGB",
    "HSL",
    "HSV",
    "CMYK",
    "OKLab",
    "OKLCH",
    "clamp",
    "round_half_up",
    "normalize_hue",
    "rotate_hue",
    "hue_delta",
    "hue_distance",
    "srgb_to_linear",
    "linear_to_srgb",
    "parse_hex",
    "parse_hex_alpha",
    "opaque_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "to_hex_alpha",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "linear_rgb_to_oklab",
    "oklab_to_linear_rgb",
    "linear_rgb_to_rgb",
    "rgb_to_oklab",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "rgb_to_oklch",
    "relative_luminance",
    "color_distance",
]
