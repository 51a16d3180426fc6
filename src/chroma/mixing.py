from __future__ import annotations

"""Two-color interpolation in OKLab, HSL or sRGB."""

from enum import Enum
from typing import List

from .engine import (
    HSL,
    RGB,
    OKLab,
    clamp,
    hsl_to_rgb,
    hue_delta,
    normalize_hue,
    rgb_to_hsl,
    rgb_to_oklab,
    round_half_up,
)
from .gamut import oklab_to_rgb
from .parsing import ColorLike, to_rgb


class MixSpace(Enum):
    OKLAB = "oklab"
    HSL = "hsl"
    RGB = "rgb"

    @classmethod
    def from_value(cls, value: str) -> "MixSpace":
        for space in cls:
            if space.value == value:
                return space
        raise ValueError(f"Unknown mix space: {value}")


def mix_oklab(a: ColorLike, b: ColorLike, t: float) -> RGB:
    """Perceptually even blend; the result is gamut-mapped."""
    la, lb = rgb_to_oklab(to_rgb(a)), rgb_to_oklab(to_rgb(b))
    t = clamp(t, 0.0, 1.0)
    return oklab_to_rgb(
        OKLab(la.L + (lb.L - la.L) * t, la.a + (lb.a - la.a) * t, la.b + (lb.b - la.b) * t)
    )


def mix_hsl(a: ColorLike, b: ColorLike, t: float) -> RGB:
    """Blend in HSL, rotating hue along the shorter arc."""
    ha, hb = rgb_to_hsl(to_rgb(a)), rgb_to_hsl(to_rgb(b))
    t = clamp(t, 0.0, 1.0)
    return hsl_to_rgb(
        HSL(
            normalize_hue(ha.h + hue_delta(ha.h, hb.h) * t),
            ha.s + (hb.s - ha.s) * t,
            ha.l + (hb.l - ha.l) * t,
        )
    )


def mix_rgb(a: ColorLike, b: ColorLike, t: float) -> RGB:
    ra, rb = to_rgb(a), to_rgb(b)
    t = clamp(t, 0.0, 1.0)
    return RGB(*(round_half_up(x + (y - x) * t) for x, y in zip(ra, rb)))


_MIXERS = {
    MixSpace.OKLAB: mix_oklab,
    MixSpace.HSL: mix_hsl,
    MixSpace.RGB: mix_rgb,
}


def mix(a: ColorLike, b: ColorLike, t: float = 0.5, space: MixSpace | str = MixSpace.OKLAB) -> RGB:
    s = space if isinstance(space, MixSpace) else MixSpace.from_value(space)
    return _MIXERS[s](a, b, t)


def gradient(
    a: ColorLike, b: ColorLike, steps: int, space: MixSpace | str = MixSpace.OKLAB
) -> List[RGB]:
    """``steps`` evenly spaced colors from ``a`` to ``b`` inclusive."""
    if steps <= 0:
        return []
    if steps == 1:
        return [to_rgb(a)]
    return [mix(a, b, i / (steps - 1), space) for i in range(steps)]


__all__ = ["MixSpace", "mix_oklab", "mix_hsl", "mix_rgb", "mix", "gradient"]
