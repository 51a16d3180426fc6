"""
Command-line entry for the color engine.

Subcommands print plain text, one value per line:

    chroma generate --mode triadic --count 5 --seed "#3b82f6"
    chroma contrast "#777777" "#ffffff" --fix
    chroma name "#ff6347"
    chroma extract photo.jpg --count 6
    chroma theme "#3b82f6" "#f97316" --mode dark
    chroma scale "#3b82f6"

Defaults for generate/extract come from ``configs/default.yaml`` (overridable
by a root ``config.yaml``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from common import setup_default_logging
from util.utils import config_section, load_config

from .accessibility import contrast_report, suggest_contrast_fix
from .api import generate_palette
from .engine import rgb_to_hex
from .errors import ImageDecodeError
from .extract import extract_from_image
from .harmony import HarmonyMode, SeedBehavior
from .naming import nearest_name
from .parsing import to_rgb
from .scale import generate_scale
from .theme import derive_theme_tokens
from .ui_helpers import HARMONY_MODE_OPTIONS, ExportFormat, export_palette, mode_from_label

logger = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return " ".join(str(v) for v in value)


def _rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed)


def _mode_arg(text: str) -> HarmonyMode:
    try:
        return mode_from_label(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _cmd_generate(args: argparse.Namespace) -> int:
    stops = generate_palette(
        args.mode,
        args.count,
        seeds=args.seed or None,
        seed_behavior=SeedBehavior.PIN if args.pin else SeedBehavior.INFLUENCE,
        temperature=args.temperature,
        rng=_rng(args.random_seed),
    )
    for value in export_palette(stops, args.format):
        print(_format_value(value))
    return 0


def _cmd_contrast(args: argparse.Namespace) -> int:
    report = contrast_report(args.fg, args.bg)
    print(f"ratio {report.ratio:.2f} ({report.wcag.value})")
    print(f"apca  {report.apca:.1f} ({report.apca_level.value})")
    if args.fix:
        fix = suggest_contrast_fix(args.fg, args.bg, target=args.target)
        if fix is None:
            print("fix   none")
        else:
            print(f"fix   {fix.hex} {fix.ratio:.2f} ({fix.direction})")
    return 0


def _cmd_name(args: argparse.Namespace) -> int:
    rgb = to_rgb(args.color)
    print(f"{rgb_to_hex(rgb)} {nearest_name(rgb)}")
    return 0


def _cmd_extract(args: argparse.Namespace) -> int:
    colors = extract_from_image(args.image, args.count, _rng(args.random_seed))
    for c in colors:
        print(rgb_to_hex(c))
    return 0


def _cmd_theme(args: argparse.Namespace) -> int:
    tokens = derive_theme_tokens(args.colors)
    for name, value in tokens.values(args.mode).items():
        print(f"{name}: {value}")
    return 0


def _cmd_scale(args: argparse.Namespace) -> int:
    for step in generate_scale(args.color):
        print(f"{step.step} {step.hex}")
    return 0


def build_parser(config: Optional[Dict[str, Any]] = None) -> argparse.ArgumentParser:
    cfg = load_config() if config is None else config
    gen = config_section("generate", cfg)
    ext = config_section("extract", cfg)

    p = argparse.ArgumentParser(prog="chroma", description="Color palette toolkit")
    p.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="generate a harmony palette")
    g.add_argument(
        "--mode",
        type=_mode_arg,
        default=str(gen.get("mode", HarmonyMode.ANALOGOUS.value)),
        help="mode id or picker label: " + ", ".join(label for label, _ in HARMONY_MODE_OPTIONS),
    )
    g.add_argument("--count", type=int, default=int(gen.get("count", 5)))
    g.add_argument("--seed", action="append", help="seed color (repeatable)")
    g.add_argument("--pin", action="store_true", help="place seeds verbatim")
    g.add_argument("--temperature", type=float, default=float(gen.get("temperature", 0.0)))
    g.add_argument("--random-seed", type=int, default=None)
    g.add_argument(
        "--format", default=ExportFormat.HEX.value, choices=[f.value for f in ExportFormat]
    )
    g.set_defaults(func=_cmd_generate)

    c = sub.add_parser("contrast", help="WCAG and APCA contrast of a pair")
    c.add_argument("fg")
    c.add_argument("bg")
    c.add_argument("--fix", action="store_true", help="suggest a passing foreground")
    c.add_argument("--target", type=float, default=None)
    c.set_defaults(func=_cmd_contrast)

    n = sub.add_parser("name", help="nearest reference name")
    n.add_argument("color")
    n.set_defaults(func=_cmd_name)

    e = sub.add_parser("extract", help="dominant colors of an image")
    e.add_argument("image")
    e.add_argument("--count", type=int, default=int(ext.get("count", 8)))
    e.add_argument("--random-seed", type=int, default=None)
    e.set_defaults(func=_cmd_extract)

    t = sub.add_parser("theme", help="semantic tokens for a palette")
    t.add_argument("colors", nargs="+")
    t.add_argument("--mode", default="light", choices=["light", "dark"])
    t.set_defaults(func=_cmd_theme)

    s = sub.add_parser("scale", help="50-950 tonal scale")
    s.add_argument("color")
    s.set_defaults(func=_cmd_scale)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    setup_default_logging(args.log_level)
    try:
        return args.func(args)
    except ImageDecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        logger.debug("invalid argument", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
