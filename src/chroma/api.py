from __future__ import annotations

"""High-level public API for generating color palettes.

This module provides :func:`generate_palette`, which combines a harmony
mode, optional seed colors and a temperature bias into an ordered list of
:class:`ColorStop` values. All work happens in OKLCH; every generated stop is
gamut-mapped into sRGB on construction.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .color_types import OKLCH, ColorStop, StopLike, as_stop
from .engine import clamp, hue_delta, normalize_hue
from .harmony import (
    MATSUDA_TEMPLATES,
    HarmonyMode,
    SeedBehavior,
    anchor_hues,
    best_orientation,
    is_matsuda,
    is_procedural,
    sample_arcs,
)

logger = logging.getLogger(__name__)

WARM_HUE = 30.0
COOL_HUE = 240.0
GOLDEN_ANGLE = 137.508

# Requested lightness for harmony modes and requested chroma for every stop.
HARMONY_L_RANGE = (0.24, 0.78)
STOP_C_RANGE = (0.06, 0.3)


def generate_palette(
    mode: HarmonyMode | str,
    count: int,
    seeds: Optional[Sequence[StopLike]] = None,
    seed_behavior: SeedBehavior | str = SeedBehavior.INFLUENCE,
    temperature: float = 0.0,
    rng: Optional[np.random.Generator] = None,
) -> List[ColorStop]:
    """Generate ``count`` colors for a harmony mode.

    Parameters
    ----------
    mode:
        HarmonyMode or its string id (``"triadic"``, ``"matsuda_L"``, ...).
    count:
        Number of stops to return. ``count <= 0`` yields an empty list.
    seeds:
        Optional seed colors (ColorStop, color text or RGB). The first seed
        becomes the base color.
    seed_behavior:
        ``influence`` biases the base color and hue set; ``pin`` places every
        seed verbatim at the front and generates the rest around the first.
        With two or more seeds, ``influence`` also leads with the seeds and
        orients the hue template to fit them best.
    temperature:
        -1 (cool) to +1 (warm). Rotates the base hue toward 240 or 30
        degrees, by up to 60 % without seeds and 18 % with seeds.
    rng:
        numpy Generator used for every random draw. Pass a seeded generator
        for reproducible output.

    Returns
    -------
    list[ColorStop]
        Exactly ``count`` stops; seed stops (when placed) come first.
    """
    harmony = mode if isinstance(mode, HarmonyMode) else HarmonyMode.from_value(mode)
    behavior = (
        seed_behavior
        if isinstance(seed_behavior, SeedBehavior)
        else SeedBehavior.from_value(seed_behavior)
    )
    if count <= 0:
        return []
    gen = rng if rng is not None else np.random.default_rng()

    seed_stops = [as_stop(s) for s in (seeds or [])]
    seed_lch = [s.oklch for s in seed_stops]

    if seed_lch:
        base = seed_lch[0]
    else:
        base = OKLCH(
            0.42 + float(gen.random()) * 0.25,
            0.1 + float(gen.random()) * 0.14,
            float(gen.random()) * 360.0,
        )
    base = _apply_temperature(base, temperature, has_seeds=bool(seed_lch))
    logger.debug(
        "generate mode=%s count=%d seeds=%d behavior=%s base=(%.3f, %.3f, %.1f)",
        harmony.value,
        count,
        len(seed_stops),
        behavior.value,
        base.L,
        base.C,
        base.H,
    )

    ctx = _Targets(
        L=clamp(base.L, 0.32, 0.72),
        C=clamp(base.C, 0.08, 0.26),
        H=base.H,
        seeded=bool(seed_lch),
        rng=gen,
    )

    if behavior is SeedBehavior.PIN and seed_stops:
        return _pinned(harmony, count, seed_stops, seed_lch, ctx)
    if is_procedural(harmony):
        return _procedural(harmony, count, ctx)
    if len(seed_stops) >= 2:
        return _multi_seed(harmony, count, seed_stops, seed_lch, ctx)
    if is_matsuda(harmony):
        return _matsuda(harmony, count, ctx)
    return _cycled(harmony, count, ctx)


@dataclass
class _Targets:
    """Clamped target lightness/chroma and base hue shared by the generators."""

    L: float
    C: float
    H: float
    seeded: bool
    rng: np.random.Generator

    def jitter(self, span: float) -> float:
        """Uniform value in [-span/2, span/2)."""
        return (float(self.rng.random()) - 0.5) * span


def _apply_temperature(base: OKLCH, temperature: float, has_seeds: bool) -> OKLCH:
    t = clamp(float(temperature), -1.0, 1.0)
    if t == 0.0:
        return base
    target = WARM_HUE if t > 0 else COOL_HUE
    blend = abs(t) * (0.18 if has_seeds else 0.6)
    return OKLCH(base.L, base.C, normalize_hue(base.H + hue_delta(base.H, target) * blend))


def _stop(L: float, C: float, H: float, l_range: Optional[tuple] = HARMONY_L_RANGE) -> ColorStop:
    if l_range is not None:
        L = clamp(L, l_range[0], l_range[1])
    C = clamp(C, STOP_C_RANGE[0], STOP_C_RANGE[1])
    return ColorStop.from_oklch(L, C, normalize_hue(H))


# --- procedural modes --------------------------------------------------------------


def _monochromatic(count: int, ctx: _Targets) -> List[ColorStop]:
    out = []
    for i in range(count):
        t = 0.5 if count == 1 else i / (count - 1)
        L = clamp(0.88 - t * 0.7, 0.1, 0.92)
        # chroma peaks mid-sweep
        C = ctx.C * (1.0 - 0.35 * abs(t - 0.5))
        out.append(_stop(L, C, ctx.H, l_range=None))
    return out


def _shades(count: int, ctx: _Targets) -> List[ColorStop]:
    out = []
    for i in range(count):
        t = 0.5 if count == 1 else i / (count - 1)
        L = clamp(0.93 - t * 0.82, 0.06, 0.94)
        C = ctx.C * math.sin(t * math.pi) * 0.9
        out.append(_stop(L, C, ctx.H, l_range=None))
    return out


def _natural(count: int, ctx: _Targets) -> List[ColorStop]:
    out = []
    for _ in range(count):
        L = clamp(0.3 + float(ctx.rng.random()) * 0.45, 0.25, 0.78)
        C = clamp(0.04 + float(ctx.rng.random()) * 0.14, 0.02, 0.18)
        H = ctx.H + ctx.jitter(80.0)
        # gamut mapping wins over the chroma floor: dark cyans land near C 0.05

        out.append(_stop(L, C, H))
    return out


def _random(count: int, ctx: _Targets) -> List[ColorStop]:
    # a seed fixes the starting hue; otherwise the start is random
    start = ctx.H if ctx.seeded else float(ctx.rng.random()) * 360.0
    out = []
    for i in range(count):
        L = clamp(0.35 + float(ctx.rng.random()) * 0.3, 0.28, 0.72)
        C = clamp(0.1 + float(ctx.rng.random()) * 0.16, 0.08, 0.28)
        out.append(_stop(L, C, start + i * GOLDEN_ANGLE))
    return out


_PROCEDURAL: dict[HarmonyMode, Callable[[int, _Targets], List[ColorStop]]] = {
    HarmonyMode.MONOCHROMATIC: _monochromatic,
    HarmonyMode.SHADES: _shades,
    HarmonyMode.NATURAL: _natural,
    HarmonyMode.RANDOM: _random,
}


def _procedural(mode: HarmonyMode, count: int, ctx: _Targets) -> List[ColorStop]:
    return _PROCEDURAL[mode](count, ctx)


# --- template modes ----------------------------------------------------------------


def _matsuda(mode: HarmonyMode, count: int, ctx: _Targets) -> List[ColorStop]:
    hues = sample_arcs(MATSUDA_TEMPLATES[mode], ctx.H, count, ctx.rng)
    out = []
    for H in hues:
        L = clamp(ctx.L + ctx.jitter(0.18), 0.28, 0.74)
        C = clamp(ctx.C + ctx.jitter(0.06), 0.06, 0.28)
        out.append(_stop(L, C, H))
    return out


def _cycled(mode: HarmonyMode, count: int, ctx: _Targets) -> List[ColorStop]:
    hues = anchor_hues(mode, ctx.H, ctx.rng)
    cycles = math.ceil(count / len(hues))
    out = []
    for i in range(count):
        cycle = i // len(hues)
        if cycles > 1:
            # spread repeated hues evenly over +/-0.09 lightness
            l_offset = (cycle / (cycles - 1) - 0.5) * 0.18
        else:
            l_offset = ctx.jitter(0.14)
        L = ctx.L + l_offset
        C = ctx.C + ctx.jitter(0.08)
        out.append(_stop(L, C, hues[i % len(hues)]))
    return out


def _fill(hues: Sequence[float], need: int, start: int, ctx: _Targets) -> List[ColorStop]:
    out = []
    for i in range(need):
        H = hues[(start + i) % len(hues)]
        L = clamp(ctx.L + ctx.jitter(0.22), 0.28, 0.75)
        C = clamp(ctx.C + ctx.jitter(0.06), 0.06, 0.28)
        out.append(_stop(L, C, H))
    return out


# --- seeds -------------------------------------------------------------------------


def _pinned(
    mode: HarmonyMode,
    count: int,
    seed_stops: List[ColorStop],
    seed_lch: List[OKLCH],
    ctx: _Targets,
) -> List[ColorStop]:
    if len(seed_stops) >= count:
        return list(seed_stops[:count])
    need = count - len(seed_stops)
    if is_procedural(mode):
        # continue the procedural sequence after the pinned positions
        generated = _procedural(mode, count, ctx)[len(seed_stops):]
    elif is_matsuda(mode):
        hues = sample_arcs(MATSUDA_TEMPLATES[mode], seed_lch[0].H, need, ctx.rng)
        generated = _fill(hues, need, 0, ctx)
    else:
        hues = anchor_hues(mode, seed_lch[0].H, ctx.rng)
        generated = _fill(hues, need, len(seed_stops), ctx)
    return list(seed_stops) + generated


def _multi_seed(
    mode: HarmonyMode,
    count: int,
    seed_stops: List[ColorStop],
    seed_lch: List[OKLCH],
    ctx: _Targets,
) -> List[ColorStop]:
    if len(seed_stops) >= count:
        return list(seed_stops[:count])
    hues = best_orientation(mode, [lch.H for lch in seed_lch], ctx.rng)
    return list(seed_stops) + _fill(hues, count - len(seed_stops), len(seed_stops), ctx)


__all__ = ["generate_palette", "WARM_HUE", "COOL_HUE", "GOLDEN_ANGLE"]
