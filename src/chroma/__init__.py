"""Public entrypoint for the chroma color engine.

This module re-exports the main user-facing types and functions so that
applications can import from ``chroma`` instead of individual submodules.
"""

from .color_types import HSL, OKLCH, RGB, ColorStop, OKLab, StopLike, as_stop, hex_to_stop
from .engine import (
    color_distance,
    hsl_to_rgb,
    parse_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklab,
    rgb_to_oklch,
)
from .gamut import map_to_gamut, oklch_to_rgb
from .parsing import parse_any, to_rgb
from .naming import nearest_name
from .accessibility import (
    ApcaLevel,
    WcagLevel,
    apca_contrast,
    contrast_ratio,
    contrast_report,
    suggest_contrast_fix,
    text_color,
)
from .harmony import HarmonyMode, SeedBehavior
from .api import generate_palette
from .palette import PaletteSlot, regenerate_slots, slots_from_hex
from .utility import UtilityRole, generate_utility_colors, merge_utility_colors
from .theme import ThemeTokenSet, derive_theme_tokens
from .scale import generate_scale
from .scoring import PaletteScore, score_palette
from .mixing import MixSpace, mix
from .vision import VisionType, simulate
from .extract import extract_colors, extract_from_image, load_pixels
from .errors import ChromaError, ImageDecodeError
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    HARMONY_MODE_OPTIONS,
    ExportFormat,
    export_palette,
    mode_from_label,
)

__all__ = [
    "RGB",
    "HSL",
    "OKLab",
    "OKLCH",
    "ColorStop",
    "StopLike",
    "as_stop",
    "hex_to_stop",
    "parse_hex",
    "parse_any",
    "to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_oklab",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "map_to_gamut",
    "relative_luminance",
    "color_distance",
    "nearest_name",
    "WcagLevel",
    "ApcaLevel",
    "contrast_ratio",
    "apca_contrast",
    "contrast_report",
    "text_color",
    "suggest_contrast_fix",
    "HarmonyMode",
    "SeedBehavior",
    "generate_palette",
    "PaletteSlot",
    "regenerate_slots",
    "slots_from_hex",
    "UtilityRole",
    "generate_utility_colors",
    "merge_utility_colors",
    "ThemeTokenSet",
    "derive_theme_tokens",
    "generate_scale",
    "PaletteScore",
    "score_palette",
    "MixSpace",
    "mix",
    "VisionType",
    "simulate",
    "extract_colors",
    "extract_from_image",
    "load_pixels",
    "ChromaError",
    "ImageDecodeError",
    "ExportFormat",
    "export_palette",
    "HARMONY_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "mode_from_label",
]
