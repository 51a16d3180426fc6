from __future__ import annotations

"""Design-token derivation (light and dark) from a palette.

The highest-chroma slot becomes the primary brand color, the next one the
secondary. Every neutral (surfaces, text, borders) is a near-gray tinted with
the primary hue at very low chroma. Surfaces come in five elevation tiers:
light tiers darken as they rise, dark tiers lighten (tonal elevation).
Destructive tokens follow the error utility color.

Every token carries both a light and a dark value.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .color_types import OKLCH, ColorStop
from .engine import clamp, rgb_to_hex
from .gamut import oklch_to_rgb
from .naming import nearest_name
from .palette import SlotLike, stop_of
from .utility import UtilityColorSet, UtilityRole, generate_utility_colors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SemanticToken:
    name: str
    light: str
    dark: str
    description: str = ""


@dataclass(frozen=True)
class UtilityToken:
    base: str
    light: str
    dark: str
    subtle: str
    subtle_dark: str


@dataclass(frozen=True)
class ThemeTokenSet:
    semantic: List[SemanticToken] = field(default_factory=list)
    utility: Dict[UtilityRole, UtilityToken] = field(default_factory=dict)
    # (semantic slot name, hex) in slot order
    palette: List[Tuple[str, str]] = field(default_factory=list)

    def get(self, name: str) -> Optional[SemanticToken]:
        for tok in self.semantic:
            if tok.name == name:
                return tok
        return None

    def values(self, mode: str = "light") -> Dict[str, str]:
        """Map token name to hex for ``"light"`` or ``"dark"``."""
        if mode not in ("light", "dark"):
            raise ValueError(f"Unknown theme mode: {mode}")
        return {t.name: getattr(t, mode) for t in self.semantic}


def _hex(L: float, C: float, H: float) -> str:
    return rgb_to_hex(oklch_to_rgb((L, C, H)))


def _rank_by_chroma(lchs: Sequence[OKLCH]) -> List[int]:
    # sorted() is stable, so equal chroma keeps input order
    return sorted(range(len(lchs)), key=lambda i: -lchs[i].C)


def derive_theme_tokens(
    slots: Sequence[SlotLike], utility: Optional[UtilityColorSet] = None
) -> ThemeTokenSet:
    """Derive semantic and utility tokens from palette slots.

    ``utility`` defaults to :func:`generate_utility_colors` over the same
    slots. An empty palette yields an empty token set.
    """
    stops: List[ColorStop] = [stop_of(s) for s in slots]
    if not stops:
        return ThemeTokenSet()
    if utility is None:
        utility = generate_utility_colors(stops)

    lchs = [s.oklch for s in stops]
    ranked = _rank_by_chroma(lchs)
    p = lchs[ranked[0]]
    sec_h = lchs[ranked[1]].H if len(ranked) > 1 else p.H

    dominant_h = p.H
    tint_c = clamp(p.C * 0.055, 0.005, 0.015)

    def neutral(L: float, C: float = tint_c, H: float = dominant_h) -> str:
        return _hex(clamp(L, 0.01, 0.995), C, H)

    # Primary. The light range sits just inside [0.26, 0.4] so 8-bit
    # rounding cannot push the stored color outside it.
    primary_light = _hex(clamp(p.L, 0.27, 0.39), clamp(p.C, 0.14, 0.3), p.H)
    primary_dark = _hex(clamp(p.L + 0.36, 0.62, 0.82), clamp(p.C * 0.88, 0.1, 0.28), p.H)
    primary_fg_light = neutral(0.985, 0.004)
    primary_fg_dark = neutral(0.12, 0.01)

    container_light = _hex(0.92, clamp(p.C * 0.38, 0.03, 0.1), p.H)
    container_dark = _hex(0.24, clamp(p.C * 0.35, 0.03, 0.09), p.H)
    container_fg_light = _hex(0.2, clamp(p.C * 0.5, 0.06, 0.16), p.H)
    container_fg_dark = _hex(0.88, clamp(p.C * 0.45, 0.05, 0.14), p.H)

    # secondary surfaces carry the second slot's hue
    secondary_light = neutral(0.96, H=sec_h)
    secondary_dark = neutral(0.18, H=sec_h)

    accent_light = _hex(0.935, clamp(p.C * 0.38, 0.03, 0.11), p.H)
    accent_dark = _hex(0.24, clamp(p.C * 0.38, 0.03, 0.1), p.H)

    err = utility[UtilityRole.ERROR].color.oklch
    destructive_light = _hex(clamp(err.L, 0.42, 0.52), clamp(err.C, 0.18, 0.28), err.H)
    destructive_dark = _hex(
        clamp(err.L + 0.12, 0.56, 0.72), clamp(err.C * 0.88, 0.14, 0.26), err.H
    )
    destructive_subtle_light = _hex(0.94, clamp(err.C * 0.28, 0.03, 0.08), err.H)
    destructive_subtle_dark = _hex(0.18, clamp(err.C * 0.28, 0.03, 0.07), err.H)

    def dark_surface(level: int) -> str:
        return neutral(0.08 + level * 0.028, clamp(p.C * (0.04 + level * 0.012), 0.004, 0.025))

    # background, dim, card, raised card, popover
    surface_light = [neutral(L) for L in (0.99, 0.972, 0.955, 0.935, 0.98)]
    surface_dark = [dark_surface(level) for level in (0, 1, 2, 3, 5)]

    text_light, text_dark = neutral(0.1), neutral(0.94)

    semantic = [
        SemanticToken("--background", surface_light[0], surface_dark[0], "Page / canvas background"),
        SemanticToken("--foreground", text_light, text_dark, "Default body text"),
        SemanticToken(
            "--surface-dim",
            surface_light[1],
            surface_dark[1],
            "Subtle background: striped rows, aside panels, code wells",
        ),
        SemanticToken(
            "--surface-dim-foreground", neutral(0.25), neutral(0.8), "Text on dim surface"
        ),
        SemanticToken("--card", surface_light[2], surface_dark[2], "Card / content block background"),
        SemanticToken("--card-foreground", text_light, text_dark, "Card text"),
        SemanticToken(
            "--card-raised", surface_light[3], surface_dark[3], "Raised card, sidebar, drawer"
        ),
        SemanticToken("--card-raised-foreground", text_light, text_dark, "Text on raised card"),
        SemanticToken(
            "--popover",
            surface_light[4],
            surface_dark[4],
            "Popover, tooltip, dropdown and modal background",
        ),
        SemanticToken("--popover-foreground", text_light, text_dark, "Popover text"),
        SemanticToken(
            "--primary", primary_light, primary_dark, "Primary actions: buttons, links, active nav"
        ),
        SemanticToken(
            "--primary-foreground", primary_fg_light, primary_fg_dark, "Text and icons on primary"
        ),
        SemanticToken(
            "--primary-container",
            container_light,
            container_dark,
            "Soft primary surface for large sections and secondary actions",
        ),
        SemanticToken(
            "--primary-container-foreground",
            container_fg_light,
            container_fg_dark,
            "Text on primary-container",
        ),
        SemanticToken(
            "--secondary", secondary_light, secondary_dark, "Secondary buttons, quieter surfaces"
        ),
        SemanticToken(
            "--secondary-foreground",
            neutral(0.14, H=sec_h),
            neutral(0.93, H=sec_h),
            "Text on secondary",
        ),
        SemanticToken("--muted", neutral(0.94), neutral(0.2), "Disabled and placeholder surfaces"),
        SemanticToken(
            "--muted-foreground", neutral(0.46), neutral(0.62), "Secondary and placeholder text"
        ),
        SemanticToken("--accent", accent_light, accent_dark, "Hover, selection and highlight surface"),
        SemanticToken("--accent-foreground", neutral(0.14), neutral(0.93), "Text on accent surface"),
        SemanticToken(
            "--destructive", destructive_light, destructive_dark, "Error and delete actions"
        ),
        SemanticToken(
            "--destructive-foreground",
            neutral(0.985, 0.004),
            neutral(0.985, 0.004),
            "Text on destructive",
        ),
        SemanticToken(
            "--destructive-subtle",
            destructive_subtle_light,
            destructive_subtle_dark,
            "Error alert background",
        ),
        SemanticToken("--border", neutral(0.86), neutral(0.26), "Default divider / border"),
        SemanticToken(
            "--border-strong", neutral(0.72), neutral(0.4), "Active inputs, selected cards"
        ),
        SemanticToken("--input", neutral(0.86), neutral(0.24), "Form input border"),
        SemanticToken("--ring", primary_light, primary_dark, "Keyboard focus ring (primary)"),
    ]

    utility_tokens: Dict[UtilityRole, UtilityToken] = {}
    for role in UtilityRole:
        uc = utility[role]
        L, C, H = uc.color.oklch
        # yellow is already bright, so warning moves less
        light_adj = -0.1 if role is UtilityRole.WARNING else -0.06
        dark_adj = 0.04 if role is UtilityRole.WARNING else 0.08
        utility_tokens[role] = UtilityToken(
            base=uc.color.hex,
            light=_hex(clamp(L + light_adj, 0.34, 0.55), clamp(C * 1.05, 0.1, 0.26), H),
            dark=_hex(clamp(L + dark_adj, 0.5, 0.78), clamp(C * 0.88, 0.08, 0.22), H),
            subtle=_hex(0.945, clamp(C * 0.3, 0.02, 0.07), H),
            subtle_dark=_hex(0.16, clamp(C * 0.32, 0.02, 0.08), H),
        )

    names = semantic_slot_names(stops)
    logger.debug("derived %d semantic tokens for %d slots", len(semantic), len(stops))
    return ThemeTokenSet(
        semantic=semantic,
        utility=utility_tokens,
        palette=[(name, s.hex) for name, s in zip(names, stops)],
    )


def slugify(text: str) -> str:
    s = re.sub(r"\s+", "-", text.strip().lower())
    s = re.sub(r"[^a-z0-9-]", "", s)
    return re.sub(r"-{2,}", "-", s).strip("-") or "color"


def semantic_slot_names(slots: Sequence[SlotLike]) -> List[str]:
    """Name slots ``primary``, ``secondary`` (by chroma) and nearest-name slugs.

    Names are unique; repeats get ``-2``, ``-3``, ... suffixes.
    """
    stops = [stop_of(s) for s in slots]
    if not stops:
        return []
    ranked = _rank_by_chroma([s.oklch for s in stops])
    names = [""] * len(stops)
    used: set[str] = set()
    for rank, i in enumerate(ranked):
        if rank == 0:
            base = "primary"
        elif rank == 1:
            base = "secondary"
        else:
            base = slugify(nearest_name(stops[i].rgb))
        name, n = base, 2
        while name in used:
            name = f"{base}-{n}"
            n += 1
        names[i] = name
        used.add(name)
    return names


__all__ = [
    "SemanticToken",
    "UtilityToken",
    "ThemeTokenSet",
    "derive_theme_tokens",
    "semantic_slot_names",
    "slugify",
]
