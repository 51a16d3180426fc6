from __future__ import annotations

"""Helpers for wiring the engine into external UIs.

Label/enum pairs for the harmony picker and export formats, plus
:func:`export_palette`, which turns stops (or slots) into plain value lists.
"""

from enum import Enum
from typing import Dict, List, Sequence

from .engine import round_half_up
from .harmony import HarmonyMode
from .palette import SlotLike, stop_of


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HEX = "hex"
    RGB_255 = "rgb_255"
    SRGB_01 = "srgb_01"
    HSL = "hsl"
    OKLCH = "oklch"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices, in picker order
HARMONY_MODE_OPTIONS: List[tuple[str, HarmonyMode]] = [
    ("Analogous", HarmonyMode.ANALOGOUS),
    ("Complementary", HarmonyMode.COMPLEMENTARY),
    ("Split-Comp", HarmonyMode.SPLIT_COMPLEMENTARY),
    ("Triadic", HarmonyMode.TRIADIC),
    ("Tetradic", HarmonyMode.TETRADIC),
    ("Square", HarmonyMode.SQUARE),
    ("Monochromatic", HarmonyMode.MONOCHROMATIC),
    ("Shades & Tints", HarmonyMode.SHADES),
    ("Double Split", HarmonyMode.DOUBLE_SPLIT),
    ("Compound", HarmonyMode.COMPOUND),
    ("Natural", HarmonyMode.NATURAL),
    ("Random", HarmonyMode.RANDOM),
    ("Matsuda L", HarmonyMode.MATSUDA_L),
    ("Matsuda Y", HarmonyMode.MATSUDA_Y),
    ("Matsuda X", HarmonyMode.MATSUDA_X),
    ("Matsuda T", HarmonyMode.MATSUDA_T),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("sRGB (0-255)", ExportFormat.RGB_255),
    ("sRGB (0-1)", ExportFormat.SRGB_01),
    ("HSL", ExportFormat.HSL),
    ("OKLCH", ExportFormat.OKLCH),
]

HARMONY_MODE_LABEL_MAP: Dict[str, HarmonyMode] = {
    label: value for label, value in HARMONY_MODE_OPTIONS
}


def mode_from_label(text: str) -> HarmonyMode:
    """Resolve a picker label (``"Split-Comp"``) or mode id (``"split-comp"``).

    Labels match case-insensitively. Raises ``ValueError`` for anything else.
    """
    key = text.strip()
    for label, mode in HARMONY_MODE_LABEL_MAP.items():
        if label.lower() == key.lower():
            return mode
    return HarmonyMode.from_value(key)


def export_palette(items: Sequence[SlotLike], fmt: ExportFormat | str) -> List[object]:
    """Convert palette colors to a list in the desired format.

    ``hex`` gives ``"#rrggbb"`` strings, ``rgb_255`` integer triples,
    ``srgb_01`` float triples rounded to 4 places, ``hsl`` integer
    ``(h, s%, l%)`` and ``oklch`` ``(L, C, H)`` rounded to 4/4/2 places.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    stops = [stop_of(i) for i in items]
    if export_fmt == ExportFormat.HEX:
        return [s.hex for s in stops]
    if export_fmt == ExportFormat.RGB_255:
        return [tuple(s.rgb) for s in stops]
    if export_fmt == ExportFormat.SRGB_01:
        return [tuple(round(v, 4) for v in s.srgb) for s in stops]
    if export_fmt == ExportFormat.HSL:
        out = []
        for h, sat, light in (s.hsl for s in stops):
            out.append((round_half_up(h) % 360, round_half_up(sat), round_half_up(light)))
        return out
    if export_fmt == ExportFormat.OKLCH:
        return [(round(L, 4), round(C, 4), round(H, 2)) for L, C, H in (s.oklch for s in stops)]
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "HARMONY_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "HARMONY_MODE_LABEL_MAP",
    "mode_from_label",
    "export_palette",
]
