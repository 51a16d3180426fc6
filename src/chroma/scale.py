from __future__ import annotations

"""Tint/shade scales (50..950) at a fixed OKLCH hue."""

from dataclasses import dataclass
from typing import List, Tuple

from .color_types import ColorStop
from .engine import clamp, rgb_to_oklch
from .parsing import ColorLike, to_rgb

SCALE_STEPS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

L_MAX = 0.97
L_MIN = 0.1
MAX_BASE_CHROMA = 0.32


@dataclass(frozen=True)
class ScaleStep:
    step: int
    color: ColorStop

    @property
    def hex(self) -> str:
        return self.color.hex


def generate_scale(color: ColorLike) -> List[ScaleStep]:
    """Build an 11-step scale from near-white (50) to near-black (950).

    Lightness follows ``0.97 - 0.87 * t**0.85`` with ``t = step / 1000``.
    Chroma is a tent that is zero at both ends and peaks around step 400,
    scaled by the input chroma (capped at 0.32). Hue stays fixed.
    """
    L0, C0, H = rgb_to_oklch(to_rgb(color))
    c_base = min(C0, MAX_BASE_CHROMA)
    out = []
    for step in SCALE_STEPS:
        t = step / 1000.0
        L = clamp(L_MAX - (L_MAX - L_MIN) * t**0.85, 0.02, 0.98)
        tent = 4.0 * t * (1.0 - t)
        # slight bias toward step 400
        bias = 1.1 - 0.3 * abs(t - 0.4)
        C = clamp(c_base * tent * bias, 0.0, 0.37)
        out.append(ScaleStep(step=step, color=ColorStop.from_oklch(L, C, H)))
    return out


__all__ = ["SCALE_STEPS", "ScaleStep", "generate_scale"]
