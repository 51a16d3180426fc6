from __future__ import annotations

"""Utility (status) colors derived from a palette.

Info, success, warning and error hues are taken from palette slots that sit
near each role's canonical OKLCH hue; when no slot is close, the nearest
palette hue is blended toward the canonical one. Neutral is a gray tinted
with the primary hue and focus follows the primary itself. All roles share
a lightness/chroma level derived from the palette average.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .color_types import OKLCH, ColorStop
from .engine import clamp, hue_delta, hue_distance, normalize_hue
from .palette import SlotLike, stop_of

logger = logging.getLogger(__name__)


class UtilityRole(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    NEUTRAL = "neutral"
    FOCUS = "focus"


@dataclass(frozen=True)
class UtilityColor:
    role: UtilityRole
    label: str
    description: str
    anchor_hue: float
    color: ColorStop
    locked: bool = False

    def with_lock(self, locked: bool) -> "UtilityColor":
        return replace(self, locked=locked)

    def with_color(self, color: ColorStop) -> "UtilityColor":
        return replace(self, color=color)


UtilityColorSet = Dict[UtilityRole, UtilityColor]

# label, description, display anchor hue
UTILITY_DEFS: Dict[UtilityRole, tuple] = {
    UtilityRole.INFO: ("Info", "Informational messages, tooltips, hints", 231.0),
    UtilityRole.SUCCESS: ("Success", "Confirmations, completed states, positive actions", 142.0),
    UtilityRole.WARNING: ("Warning", "Cautions, pending states, non-critical alerts", 85.0),
    UtilityRole.ERROR: ("Error", "Destructive actions, validation failures, danger", 25.0),
    UtilityRole.NEUTRAL: ("Neutral", "Disabled states, placeholders, secondary content", 0.0),
    UtilityRole.FOCUS: ("Focus", "Keyboard focus rings, matches the primary palette color", 0.0),
}

# canonical hue center and tolerance arc per status role
ROLE_HUES: Dict[UtilityRole, tuple] = {
    UtilityRole.INFO: (220.0, 60.0),
    UtilityRole.SUCCESS: (148.0, 50.0),
    UtilityRole.WARNING: (75.0, 35.0),
    UtilityRole.ERROR: (27.0, 35.0),
}

_DEFAULT_PRIMARY = OKLCH(0.55, 0.15, 230.0)


def _make(role: UtilityRole, L: float, C: float, H: float) -> UtilityColor:
    label, description, anchor = UTILITY_DEFS[role]
    return UtilityColor(
        role=role,
        label=label,
        description=description,
        anchor_hue=anchor,
        color=ColorStop.from_oklch(L, C, normalize_hue(H)),
    )


def primary_of(lchs: Sequence[OKLCH]) -> OKLCH:
    """Highest-chroma color; the first wins ties."""
    best: Optional[OKLCH] = None
    for c in lchs:
        if best is None or c.C > best.C:
            best = c
    return best if best is not None else _DEFAULT_PRIMARY


def _resolve_hue(
    role: UtilityRole, lchs: Sequence[OKLCH], target_l: float, target_c: float
) -> float:
    center, arc = ROLE_HUES[role]
    if not lchs:
        return center

    best_h: Optional[float] = None
    best_score = float("-inf")
    for c in lchs:
        dist = hue_distance(c.H, center)
        if dist > arc:
            continue
        # hue fit dominates; lightness and chroma closeness break near-ties
        score = (
            (1.0 - dist / arc) * 0.5
            + (1.0 - abs(c.L - target_l)) * 0.3
            + (1.0 - abs(c.C - target_c)) * 0.2
        )
        if score > best_score:
            best_h, best_score = c.H, score
    if best_h is not None:
        return best_h

    nearest_h, nearest_d = center, float("inf")
    for c in lchs:
        d = hue_distance(c.H, center)
        if d < nearest_d:
            nearest_h, nearest_d = c.H, d
    # far hues lean to the canonical center, near hues keep up to 60 % palette
    keep = clamp(1.0 - nearest_d / 120.0, 0.0, 0.6)
    return normalize_hue(nearest_h + hue_delta(nearest_h, center) * (1.0 - keep))


def _warning_l(h: float, target_l: float) -> float:
    # yellow reads brighter than other hues at the same L
    yellowness = max(0.0, 1.0 - hue_distance(h, 75.0) / 40.0)
    return clamp(target_l - yellowness * 0.08, 0.42, 0.62)


def generate_utility_colors(slots: Sequence[SlotLike]) -> UtilityColorSet:
    """Derive the six utility colors from palette slots (or stops / hex text).

    An empty palette yields the canonical role hues at a default level.
    """
    lchs: List[OKLCH] = [stop_of(s).oklch for s in slots]
    n = len(lchs)
    avg_l = sum(c.L for c in lchs) / n if n else 0.55
    avg_c = sum(c.C for c in lchs) / n if n else 0.12
    primary = primary_of(lchs)

    if avg_l > 0.68:
        level = avg_l - 0.14
    elif avg_l < 0.38:
        level = avg_l + 0.14
    else:
        level = avg_l
    target_l = clamp(level, 0.44, 0.64)
    target_c = clamp(avg_c * 0.9 + 0.04, 0.1, 0.22)

    info_h = _resolve_hue(UtilityRole.INFO, lchs, target_l, target_c)
    success_h = _resolve_hue(UtilityRole.SUCCESS, lchs, target_l, target_c)
    warning_h = _resolve_hue(UtilityRole.WARNING, lchs, target_l, target_c)
    error_h = _resolve_hue(UtilityRole.ERROR, lchs, target_l, target_c)
    logger.debug(
        "utility hues info=%.1f success=%.1f warning=%.1f error=%.1f",
        info_h,
        success_h,
        warning_h,
        error_h,
    )

    return {
        UtilityRole.INFO: _make(UtilityRole.INFO, target_l, target_c, info_h),
        UtilityRole.SUCCESS: _make(UtilityRole.SUCCESS, target_l, target_c, success_h),
        UtilityRole.WARNING: _make(
            UtilityRole.WARNING,
            _warning_l(warning_h, target_l),
            clamp(target_c * 1.05, 0.09, 0.2),
            warning_h,
        ),
        UtilityRole.ERROR: _make(
            UtilityRole.ERROR, target_l, clamp(target_c * 1.1, 0.12, 0.24), error_h
        ),
        UtilityRole.NEUTRAL: _make(
            UtilityRole.NEUTRAL,
            clamp(target_l + 0.05, 0.5, 0.68),
            clamp(primary.C * 0.08, 0.006, 0.035),
            primary.H,
        ),
        UtilityRole.FOCUS: _make(
            UtilityRole.FOCUS,
            clamp(primary.L, 0.5, 0.7),
            clamp(primary.C, 0.12, 0.3),
            primary.H,
        ),
    }


def merge_utility_colors(existing: UtilityColorSet, generated: UtilityColorSet) -> UtilityColorSet:
    """Take ``generated`` for every role except those locked in ``existing``."""
    out: UtilityColorSet = {}
    for role in UtilityRole:
        prev = existing.get(role)
        out[role] = prev if prev is not None and prev.locked else generated[role]
    return out


__all__ = [
    "UtilityRole",
    "UtilityColor",
    "UtilityColorSet",
    "UTILITY_DEFS",
    "primary_of",
    "generate_utility_colors",
    "merge_utility_colors",
]
