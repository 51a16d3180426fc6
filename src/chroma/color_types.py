"""Core color types used by the chroma engine.

This module defines :class:`ColorStop`, the canonical swatch value passed
between components, and re-exports the channel tuples from
:mod:`chroma.engine`. A ColorStop stores only its RGB channels (plus an
optional alpha); hex, HSL and OKLCh are derived on access so they can never
drift out of sync.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from .engine import (
    CMYK,
    HSL,
    HSV,
    OKLCH,
    RGB,
    OKLab,
    hex_to_rgb,
    hsl_to_rgb,
    parse_hex,
    parse_hex_alpha,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklch,
    round_half_up,
)
from .gamut import oklch_to_rgb
from .parsing import parse_any


def _clamp_channel(v: float) -> int:
    return max(0, min(255, round_half_up(v)))


@dataclass(frozen=True)
class ColorStop:
    """A single swatch.

    Attributes
    ----------
    rgb:
        Channels in [0, 255]. Values are rounded and clamped on construction.
    alpha:
        Opacity percentage in [0, 100]. ``None`` means fully opaque; an
        explicit 100 is normalized to ``None``.
    """

    rgb: RGB
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        r, g, b = self.rgb
        object.__setattr__(
            self, "rgb", RGB(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))
        )
        if self.alpha is not None:
            a = max(0.0, min(100.0, float(self.alpha)))
            object.__setattr__(self, "alpha", None if a >= 100.0 else a)

    @property
    def hex(self) -> str:
        """Normalized ``#rrggbb`` (lowercase, no alpha)."""
        return rgb_to_hex(self.rgb)

    @property
    def srgb(self) -> Tuple[float, float, float]:
        """Channels as floats in [0, 1]."""
        r, g, b = self.rgb
        return (r / 255.0, g / 255.0, b / 255.0)

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(self.rgb)

    @property
    def oklch(self) -> OKLCH:
        return rgb_to_oklch(self.rgb)

    @classmethod
    def from_rgb(cls, rgb: Iterable[float], alpha: Optional[float] = None) -> "ColorStop":
        r, g, b = rgb
        return cls(rgb=RGB(r, g, b), alpha=alpha)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "ColorStop":
        return cls(rgb=hsl_to_rgb(HSL(h, s, l)))

    @classmethod
    def from_oklch(cls, L: float, C: float, H: float) -> "ColorStop":
        """Create a gamut-mapped ColorStop from OKLCh coordinates."""
        return cls(rgb=oklch_to_rgb(OKLCH(L, C, H)))

    def with_alpha(self, alpha: Optional[float]) -> "ColorStop":
        return ColorStop(rgb=self.rgb, alpha=alpha)


def hex_to_stop(text: str, alpha: Optional[float] = None) -> Optional[ColorStop]:
    """Build a ColorStop from hex text.

    An 8-digit hex supplies its own alpha, which takes precedence over the
    ``alpha`` argument. Returns ``None`` when the text is not a hex color.
    """
    hex6 = parse_hex(text)
    if hex6 is None:
        return None
    own_alpha = parse_hex_alpha(text)
    return ColorStop(rgb=hex_to_rgb(hex6), alpha=own_alpha if own_alpha is not None else alpha)


StopLike = Union[ColorStop, str, Tuple[int, int, int]]


def as_stop(value: StopLike) -> ColorStop:
    """Coerce a ColorStop, color text or RGB triple to a ColorStop.

    Raises ``ValueError`` for unparsable text.
    """
    if isinstance(value, ColorStop):
        return value
    if isinstance(value, str):
        stop = hex_to_stop(value)
        if stop is not None:
            return stop
        rgb = parse_any(value)
        if rgb is None:
            raise ValueError(f"Invalid color: {value!r}")
        return ColorStop(rgb=rgb)
    return ColorStop.from_rgb(value)


__all__ = [
    "RGB",
    "HSL",
    "HSV",
    "CMYK",
    "OKLab",
    "OKLCH",
    "ColorStop",
    "StopLike",
    "hex_to_stop",
    "as_stop",
]
