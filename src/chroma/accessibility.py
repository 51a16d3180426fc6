from __future__ import annotations

"""Contrast scoring: WCAG 2.x ratios, APCA lightness contrast and fixes.

All functions accept color text (hex, ``rgb()``, ``hsl()``), RGB triples or
anything carrying an ``rgb`` attribute such as :class:`ColorStop`.

APCA follows the published APCA-W3 0.0.98G constants, including the soft
clamp for near-black luminance, so black on white scores about Lc 106.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from common import settings as _settings

from .engine import RGB, relative_luminance, rgb_to_hex, rgb_to_oklch
from .gamut import oklch_to_rgb
from .parsing import ColorLike, to_rgb

logger = logging.getLogger(__name__)


class WcagLevel(str, Enum):
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA Large"
    FAIL = "Fail"


class ApcaLevel(str, Enum):
    PREFERRED = "Preferred"
    BODY = "Body"
    LARGE = "Large"
    UI = "UI"
    FAIL = "Fail"


# --- WCAG 2.x -----------------------------------------------------------------------


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    """WCAG contrast ratio in [1, 21]; symmetric in its arguments."""
    la = relative_luminance(to_rgb(a))
    lb = relative_luminance(to_rgb(b))
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)


def wcag_level(ratio: float) -> WcagLevel:
    if ratio >= 7.0:
        return WcagLevel.AAA
    if ratio >= 4.5:
        return WcagLevel.AA
    if ratio >= 3.0:
        return WcagLevel.AA_LARGE
    return WcagLevel.FAIL


# --- APCA ---------------------------------------------------------------------------

_APCA_R, _APCA_G, _APCA_B = 0.2126729, 0.7151522, 0.0721750
_APCA_TRC = 2.4
_NORM_BG, _NORM_TXT = 0.56, 0.57
_REV_BG, _REV_TXT = 0.65, 0.62
_BLK_THRS, _BLK_CLMP = 0.022, 1.414
_SCALE = 1.14
_LO_OFFSET = 0.027
_LO_CLIP = 0.1
_DELTA_Y_MIN = 0.0005


def _apca_y(rgb: RGB) -> float:
    r, g, b = rgb
    y = (
        _APCA_R * (r / 255.0) ** _APCA_TRC
        + _APCA_G * (g / 255.0) ** _APCA_TRC
        + _APCA_B * (b / 255.0) ** _APCA_TRC
    )
    # soft clamp keeps near-black text from overstating contrast
    if y < _BLK_THRS:
        y += (_BLK_THRS - y) ** _BLK_CLMP
    return y


def apca_contrast(fg: ColorLike, bg: ColorLike) -> float:
    """Signed APCA lightness contrast (Lc) of text ``fg`` on background ``bg``.

    Positive values mean dark text on a lighter background, negative values
    light text on a darker background. Results inside the low clip are 0.
    """
    y_txt = _apca_y(to_rgb(fg))
    y_bg = _apca_y(to_rgb(bg))
    if abs(y_bg - y_txt) < _DELTA_Y_MIN:
        return 0.0

    if y_bg > y_txt:
        sapc = (y_bg**_NORM_BG - y_txt**_NORM_TXT) * _SCALE
        out = 0.0 if sapc < _LO_CLIP else sapc - _LO_OFFSET
    else:
        sapc = (y_bg**_REV_BG - y_txt**_REV_TXT) * _SCALE
        out = 0.0 if sapc > -_LO_CLIP else sapc + _LO_OFFSET
    return out * 100.0


def apca_level(lc: float) -> ApcaLevel:
    """Usage tier for an Lc value (polarity is ignored)."""
    v = abs(lc)
    if v >= 75.0:
        return ApcaLevel.PREFERRED
    if v >= 60.0:
        return ApcaLevel.BODY
    if v >= 45.0:
        return ApcaLevel.LARGE
    if v >= 30.0:
        return ApcaLevel.UI
    return ApcaLevel.FAIL


# --- reports and fixes --------------------------------------------------------------


@dataclass(frozen=True)
class ContrastReport:
    ratio: float
    wcag: WcagLevel
    apca: float
    apca_level: ApcaLevel

    @property
    def passes_aa(self) -> bool:
        return self.ratio >= 4.5

    @property
    def passes_aaa(self) -> bool:
        return self.ratio >= 7.0


def contrast_report(fg: ColorLike, bg: ColorLike) -> ContrastReport:
    ratio = contrast_ratio(fg, bg)
    lc = apca_contrast(fg, bg)
    return ContrastReport(ratio=ratio, wcag=wcag_level(ratio), apca=lc, apca_level=apca_level(lc))


def text_color(bg: ColorLike) -> str:
    """Return ``#ffffff`` or ``#000000``, whichever contrasts more with ``bg``."""
    rgb = to_rgb(bg)
    on_white = contrast_ratio((255, 255, 255), rgb)
    on_black = contrast_ratio((0, 0, 0), rgb)
    return "#ffffff" if on_white >= on_black else "#000000"


@dataclass(frozen=True)
class ContrastFix:
    """A foreground adjusted to reach a contrast target.

    ``direction`` is ``"darken"`` or ``"lighten"``.
    """

    hex: str
    rgb: RGB
    ratio: float
    direction: str


def _fix_candidate(L0: float, C0: float, H: float, L: float) -> RGB:
    # chroma eases off as lightness moves away from the original
    C = max(0.0, C0 * (1.0 - abs(L - L0) * 0.3))
    return oklch_to_rgb((L, C, H))


def suggest_contrast_fix(
    fg: ColorLike,
    bg: ColorLike,
    target: Optional[float] = None,
    max_iter: Optional[int] = None,
) -> Optional[ContrastFix]:
    """Adjust the OKLCH lightness of ``fg`` until it reaches ``target`` on ``bg``.

    Hue is kept and chroma eases off slightly with distance. The search
    bisects between the original lightness and whichever endpoint (black or
    white) can reach the target, and returns the passing candidate closest
    to the original.

    Returns ``None`` if the pair already passes or no lightness can reach
    the target. Unparsable color text raises ``ValueError`` (see
    :func:`chroma.parsing.to_rgb`); use ``parse_any`` first to get ``None``
    for bad input instead.
    """
    cfg = _settings.get()
    goal = cfg.CONTRAST_TARGET if target is None else float(target)
    iters = cfg.CONTRAST_FIX_MAX_ITER if max_iter is None else max(1, int(max_iter))

    fg_rgb = to_rgb(fg)
    bg_rgb = to_rgb(bg)
    if contrast_ratio(fg_rgb, bg_rgb) >= goal:
        return None

    L0, C0, H = rgb_to_oklch(fg_rgb)
    feasible = {
        "darken": contrast_ratio(_fix_candidate(L0, C0, H, 0.0), bg_rgb) >= goal,
        "lighten": contrast_ratio(_fix_candidate(L0, C0, H, 1.0), bg_rgb) >= goal,
    }
    preferred = "darken" if relative_luminance(bg_rgb) > 0.5 else "lighten"
    if feasible[preferred]:
        direction = preferred
    else:
        direction = "lighten" if preferred == "darken" else "darken"
        if not feasible[direction]:
            logger.debug("no lightness reaches %.2f on %s", goal, rgb_to_hex(bg_rgb))
            return None

    # invariant: `passing` end always meets the goal, `failing` end never does
    passing = 0.0 if direction == "darken" else 1.0
    failing = L0
    best = _fix_candidate(L0, C0, H, passing)
    for _ in range(iters):
        if abs(failing - passing) < 0.001:
            break
        mid = (passing + failing) / 2.0
        cand = _fix_candidate(L0, C0, H, mid)
        if contrast_ratio(cand, bg_rgb) >= goal:
            passing = mid
            best = cand
        else:
            failing = mid

    ratio = contrast_ratio(best, bg_rgb)
    logger.debug(
        "contrast fix %s -> %s (%s, %.2f)", rgb_to_hex(fg_rgb), rgb_to_hex(best), direction, ratio
    )
    return ContrastFix(hex=rgb_to_hex(best), rgb=best, ratio=ratio, direction=direction)


__all__ = [
    "WcagLevel",
    "ApcaLevel",
    "contrast_ratio",
    "wcag_level",
    "apca_contrast",
    "apca_level",
    "ContrastReport",
    "contrast_report",
    "text_color",
    "ContrastFix",
    "suggest_contrast_fix",
]
