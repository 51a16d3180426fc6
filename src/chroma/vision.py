from __future__ import annotations

"""Color-vision deficiency simulation.

Each deficiency is a 3x3 matrix applied to linear-light sRGB. The matrices
are approximations meant for previewing a palette, not clinical models.
"""

from enum import Enum
from typing import Dict, List, Sequence

import numpy as np

from .engine import RGB, linear_to_srgb, round_half_up, srgb_to_linear
from .parsing import ColorLike, to_rgb


class VisionType(Enum):
    DEUTERANOPIA = "deuteranopia"
    PROTANOPIA = "protanopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"
    DEUTERANOMALY = "deuteranomaly"

    @classmethod
    def from_value(cls, value: str) -> "VisionType":
        for vt in cls:
            if vt.value == value:
                return vt
        raise ValueError(f"Unknown vision type: {value}")


VISION_MATRICES: Dict[VisionType, np.ndarray] = {
    VisionType.DEUTERANOPIA: np.array(
        [[0.367, 0.861, -0.228], [0.28, 0.673, 0.047], [-0.012, 0.043, 0.969]]
    ),
    VisionType.PROTANOPIA: np.array(
        [[0.152, 1.053, -0.205], [0.115, 0.786, 0.099], [-0.004, -0.048, 1.052]]
    ),
    VisionType.TRITANOPIA: np.array(
        [[1.256, -0.077, -0.179], [-0.079, 0.931, 0.148], [0.005, 0.691, 0.304]]
    ),
    VisionType.ACHROMATOPSIA: np.array(
        [[0.299, 0.587, 0.114], [0.299, 0.587, 0.114], [0.299, 0.587, 0.114]]
    ),
    VisionType.DEUTERANOMALY: np.array(
        [[0.531, 0.566, -0.097], [0.176, 0.764, 0.06], [-0.004, 0.04, 0.964]]
    ),
}
for _m in VISION_MATRICES.values():
    _m.setflags(write=False)

VISION_DESCRIPTIONS: Dict[VisionType, str] = {
    VisionType.DEUTERANOPIA: "No green cones (most common, about 6% of men)",
    VisionType.PROTANOPIA: "No red cones (about 2% of men)",
    VisionType.TRITANOPIA: "No blue cones (rare)",
    VisionType.ACHROMATOPSIA: "Total color blindness (very rare)",
    VisionType.DEUTERANOMALY: "Weak green cones (mild, common)",
}


def simulate(color: ColorLike, vision: VisionType | str) -> RGB:
    """Return how ``color`` appears under ``vision``."""
    vt = vision if isinstance(vision, VisionType) else VisionType.from_value(vision)
    r, g, b = to_rgb(color)
    lin = np.array([srgb_to_linear(r / 255.0), srgb_to_linear(g / 255.0), srgb_to_linear(b / 255.0)])
    out = np.clip(VISION_MATRICES[vt] @ lin, 0.0, 1.0)
    r2, g2, b2 = (round_half_up(linear_to_srgb(float(v)) * 255.0) for v in out)
    return RGB(r2, g2, b2)


def simulate_palette(colors: Sequence[ColorLike], vision: VisionType | str) -> List[RGB]:
    return [simulate(c, vision) for c in colors]


__all__ = [
    "VisionType",
    "VISION_MATRICES",
    "VISION_DESCRIPTIONS",
    "simulate",
    "simulate_palette",
]
