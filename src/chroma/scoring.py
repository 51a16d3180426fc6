from __future__ import annotations

"""Palette quality scores.

Each dimension is an integer in [0, 100]:

- ``balance``: how evenly hues are spread around the wheel
  (standard deviation of circular hue gaps against the ideal gap).
- ``accessibility``: share of colors that reach WCAG AA (4.5) against
  white or black.
- ``harmony``: consistency of OKLCH chroma (a deviation of 0.15 scores 0).
- ``uniqueness``: mean pairwise OKLab distance, scaled by 500.
- ``overall``: the rounded mean of the four.
"""

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from .accessibility import contrast_ratio
from .engine import color_distance, round_half_up
from .palette import SlotLike, stop_of

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


@dataclass(frozen=True)
class PaletteScore:
    balance: int = 0
    accessibility: int = 0
    harmony: int = 0
    uniqueness: int = 0
    overall: int = 0


def score_palette(items: Sequence[SlotLike]) -> PaletteScore:
    """Score a palette. Fewer than two colors scores zero everywhere."""
    stops = [stop_of(it) for it in items]
    if len(stops) < 2:
        return PaletteScore()

    rgbs = [s.rgb for s in stops]
    lchs = [s.oklch for s in stops]
    n = len(stops)

    hues = sorted(c.H for c in lchs)
    gaps = [(hues[(i + 1) % n] - h + 360.0) % 360.0 for i, h in enumerate(hues)]
    ideal = 360.0 / n
    gap_dev = math.sqrt(sum((g - ideal) ** 2 for g in gaps) / n)
    balance = round_half_up(max(0.0, 100.0 - gap_dev / ideal * 100.0))

    aa = sum(
        1 for rgb in rgbs if max(contrast_ratio(rgb, _WHITE), contrast_ratio(rgb, _BLACK)) >= 4.5
    )
    accessibility = round_half_up(aa / n * 100.0)

    chromas = [c.C for c in lchs]
    avg_c = sum(chromas) / n
    chroma_dev = math.sqrt(sum((c - avg_c) ** 2 for c in chromas) / n)
    harmony = round_half_up(max(0.0, 100.0 - chroma_dev / 0.15 * 100.0))

    dists = [color_distance(a, b) for a, b in combinations(rgbs, 2)]
    uniqueness = round_half_up(min(100.0, sum(dists) / len(dists) * 500.0))

    overall = round_half_up((balance + accessibility + harmony + uniqueness) / 4.0)
    return PaletteScore(balance, accessibility, harmony, uniqueness, overall)


__all__ = ["PaletteScore", "score_palette"]
