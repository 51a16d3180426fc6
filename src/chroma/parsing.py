from __future__ import annotations

"""Free-form color text parsing.

Accepts what users paste into a color field: hex (``#abc``, ``#aabbcc``,
``#aabbccdd``), ``rgb()``/``rgba()`` and ``hsl()``/``hsla()``. Every parser
returns ``None`` when the text is not understood.
"""

import re
from typing import Any, Optional, Tuple, Union

from .engine import RGB, HSL, clamp, hex_to_rgb, hsl_to_rgb, round_half_up


_NUM = r"[-+]?(?:\d+\.?\d*|\.\d+)"

_RGB_RE = re.compile(
    rf"^rgba?\(\s*({_NUM})(%?)\s*[,\s]\s*({_NUM})(%?)\s*[,\s]\s*({_NUM})(%?)"
    rf"\s*(?:[,/]\s*{_NUM}%?\s*)?\)$",
    re.IGNORECASE,
)

_HSL_RE = re.compile(
    rf"^hsla?\(\s*({_NUM})(?:deg)?\s*[,\s]\s*({_NUM})%?\s*[,\s]\s*({_NUM})%?"
    rf"\s*(?:[,/]\s*{_NUM}%?\s*)?\)$",
    re.IGNORECASE,
)


def _channel(value: str, percent: str) -> int:
    v = float(value)
    if percent:
        v = v / 100.0 * 255.0
    return round_half_up(clamp(v, 0.0, 255.0))


def parse_rgb_str(text: str) -> Optional[RGB]:
    """Parse ``rgb(r, g, b)`` / ``rgba(r g b / a)``; channels may be percentages."""
    m = _RGB_RE.match(text.strip())
    if m is None:
        return None
    return RGB(
        _channel(m.group(1), m.group(2)),
        _channel(m.group(3), m.group(4)),
        _channel(m.group(5), m.group(6)),
    )


def parse_hsl_str(text: str) -> Optional[RGB]:
    """Parse ``hsl(h, s%, l%)`` / ``hsla(...)`` into RGB. Alpha is ignored."""
    m = _HSL_RE.match(text.strip())
    if m is None:
        return None
    return hsl_to_rgb(HSL(float(m.group(1)), float(m.group(2)), float(m.group(3))))


def parse_any(text: str) -> Optional[RGB]:
    """Parse hex, rgb() or hsl() text. Returns ``None`` when nothing matches."""
    if not isinstance(text, str):
        return None
    s = text.strip()
    if not s:
        return None
    lowered = s.lower()
    if lowered.startswith("rgb"):
        return parse_rgb_str(s)
    if lowered.startswith("hsl"):
        return parse_hsl_str(s)
    return hex_to_rgb(s)


ColorLike = Union[str, Tuple[int, int, int], Any]


def to_rgb(color: ColorLike) -> RGB:
    """Coerce color text or an RGB triple to :class:`RGB`.

    Unlike the ``parse_*`` functions this raises ``ValueError`` for
    unparsable text; it is meant for call sites that take a color argument.
    """
    if isinstance(color, str):
        rgb = parse_any(color)
        if rgb is None:
            raise ValueError(f"Invalid color: {color!r}")
        return rgb
    # ColorStop and PaletteSlot-like values carry their channels on .rgb
    inner = getattr(color, "rgb", None)
    if inner is not None:
        color = inner
    r, g, b = color
    return RGB(
        round_half_up(clamp(r, 0, 255)),
        round_half_up(clamp(g, 0, 255)),
        round_half_up(clamp(b, 0, 255)),
    )


__all__ = ["ColorLike", "parse_any", "parse_rgb_str", "parse_hsl_str", "to_rgb"]
