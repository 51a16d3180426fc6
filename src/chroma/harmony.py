from __future__ import annotations

"""Harmony modes and hue templates.

This module defines :class:`HarmonyMode` and the logic that turns a base hue
into the set of anchor hues a palette is built from. Geometric modes use
fixed offsets, Matsuda modes sample hues from arcs of the hue wheel, and the
procedural modes (monochromatic, shades, natural, random) have no anchor set
of their own and are handled in :mod:`chroma.api`.
"""

import math
from enum import Enum
from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np

from .engine import hue_distance, normalize_hue, round_half_up


class HarmonyMode(Enum):
    """Hue relationships used to build palettes."""

    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-comp"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SQUARE = "square"
    DOUBLE_SPLIT = "double-split"
    COMPOUND = "compound"
    MATSUDA_L = "matsuda_L"
    MATSUDA_Y = "matsuda_Y"
    MATSUDA_X = "matsuda_X"
    MATSUDA_T = "matsuda_T"
    MONOCHROMATIC = "monochromatic"
    SHADES = "shades"
    NATURAL = "natural"
    RANDOM = "random"

    @classmethod
    def from_value(cls, value: str) -> "HarmonyMode":
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(f"Unknown harmony mode: {value}")


class SeedBehavior(Enum):
    """How seed colors are used during generation."""

    INFLUENCE = "influence"
    PIN = "pin"

    @classmethod
    def from_value(cls, value: str) -> "SeedBehavior":
        for behavior in cls:
            if behavior.value == value:
                return behavior
        raise ValueError(f"Unknown seed behavior: {value}")


class TemplateArc(NamedTuple):
    """An arc of the hue wheel, relative to the anchor hue (degrees)."""

    center: float
    width: float


# Matsuda hue templates. Widths are shares of the wheel (26 % = 93.6 deg).
MATSUDA_TEMPLATES: Dict[HarmonyMode, Tuple[TemplateArc, ...]] = {
    # V: one wide arc, used for analogous palettes
    HarmonyMode.ANALOGOUS: (TemplateArc(0.0, 93.6),),
    HarmonyMode.MATSUDA_L: (TemplateArc(0.0, 79.2), TemplateArc(90.0, 18.0)),
    HarmonyMode.MATSUDA_Y: (TemplateArc(0.0, 93.6), TemplateArc(180.0, 18.0)),
    HarmonyMode.MATSUDA_X: (TemplateArc(0.0, 93.6), TemplateArc(180.0, 93.6)),
    HarmonyMode.MATSUDA_T: (TemplateArc(0.0, 180.0),),
}

GEOMETRIC_OFFSETS: Dict[HarmonyMode, Tuple[float, ...]] = {
    HarmonyMode.COMPLEMENTARY: (0.0, 180.0),
    HarmonyMode.SPLIT_COMPLEMENTARY: (0.0, 150.0, 210.0),
    HarmonyMode.TRIADIC: (0.0, 120.0, 240.0),
    HarmonyMode.TETRADIC: (0.0, 90.0, 180.0, 270.0),
    HarmonyMode.SQUARE: (0.0, 90.0, 180.0, 270.0),
    HarmonyMode.DOUBLE_SPLIT: (-30.0, 0.0, 30.0, 150.0, 210.0),
    HarmonyMode.COMPOUND: (0.0, 150.0, 180.0, 210.0),
}

PROCEDURAL_MODES = frozenset(
    {
        HarmonyMode.MONOCHROMATIC,
        HarmonyMode.SHADES,
        HarmonyMode.NATURAL,
        HarmonyMode.RANDOM,
    }
)

# Matsuda anchor sets are sampled at this size so that multi-seed
# orientation has enough hues to match against.
MATSUDA_ANCHOR_SAMPLES = 5


def is_matsuda(mode: HarmonyMode) -> bool:
    return mode in MATSUDA_TEMPLATES


def is_procedural(mode: HarmonyMode) -> bool:
    return mode in PROCEDURAL_MODES


def sample_arcs(
    arcs: Sequence[TemplateArc], anchor_h: float, n: int, rng: np.random.Generator
) -> List[float]:
    """Sample ``n`` hues from template arcs rotated to ``anchor_h``.

    Each arc gets a share of the samples proportional to its width (at least
    one; the last arc takes whatever remains). Offsets are drawn as
    ``sin(U*pi - pi/2) * width/2`` which concentrates samples toward the arc
    center.
    """
    if n <= 0:
        return []
    total_width = sum(a.width for a in arcs)
    remaining = n
    hues: List[float] = []
    for i, arc in enumerate(arcs):
        if i == len(arcs) - 1:
            count = remaining
        else:
            count = max(1, round_half_up(arc.width / total_width * n))
        remaining -= count
        for _ in range(max(0, count)):
            u = math.sin(float(rng.random()) * math.pi - math.pi / 2.0)
            hues.append(normalize_hue(anchor_h + arc.center + u * arc.width / 2.0))
    return hues


def anchor_hues(mode: HarmonyMode, h: float, rng: np.random.Generator) -> List[float]:
    """Anchor hue set of ``mode`` rotated to ``h``.

    Procedural modes return ``[h]``.
    """
    offsets = GEOMETRIC_OFFSETS.get(mode)
    if offsets is not None:
        return [normalize_hue(h + off) for off in offsets]
    arcs = MATSUDA_TEMPLATES.get(mode)
    if arcs is not None:
        return sample_arcs(arcs, h, MATSUDA_ANCHOR_SAMPLES, rng) or [normalize_hue(h)]
    return [normalize_hue(h)]


def orientation_cost(candidate: Sequence[float], seed_hues: Sequence[float]) -> float:
    """Total distance from each seed hue to its nearest candidate hue."""
    return sum(min(hue_distance(c, s) for c in candidate) for s in seed_hues)


def best_orientation(
    mode: HarmonyMode, seed_hues: Sequence[float], rng: np.random.Generator
) -> List[float]:
    """Anchor the template at each seed hue in turn and keep the closest fit.

    Ties keep the earliest seed.
    """
    best: List[float] = anchor_hues(mode, seed_hues[0], rng)
    best_cost = orientation_cost(best, seed_hues)
    for seed_h in seed_hues[1:]:
        candidate = anchor_hues(mode, seed_h, rng)
        cost = orientation_cost(candidate, seed_hues)
        if cost < best_cost:
            best, best_cost = candidate, cost
    return best


__all__ = [
    "HarmonyMode",
    "SeedBehavior",
    "TemplateArc",
    "MATSUDA_TEMPLATES",
    "GEOMETRIC_OFFSETS",
    "PROCEDURAL_MODES",
    "is_matsuda",
    "is_procedural",
    "sample_arcs",
    "anchor_hues",
    "orientation_cost",
    "best_orientation",
]
