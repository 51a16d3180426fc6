from __future__ import annotations

from pathlib import Path

import pytest

from chroma.cli import build_parser, main
from chroma.harmony import HarmonyMode


def test_name(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["name", "#FF0000"]) == 0
    assert capsys.readouterr().out.strip() == "#ff0000 Red"


def test_contrast_with_fix(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["contrast", "#000000", "#ffffff", "--fix"]) == 0
    out = capsys.readouterr().out
    assert "ratio 21.00 (AAA)" in out
    assert "fix   none" in out


def test_generate_is_reproducible(capsys: pytest.CaptureFixture[str]) -> None:
    args = ["generate", "--mode", "triadic", "--count", "4", "--random-seed", "9"]
    assert main(args) == 0
    first = capsys.readouterr().out.split()
    assert main(args) == 0
    assert capsys.readouterr().out.split() == first
    assert len(first) == 4
    assert all(h.startswith("#") and len(h) == 7 for h in first)


def test_generate_pin_and_format(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["generate", "--count", "3", "--seed", "#ff0000", "--pin", "--format", "rgb_255"]
    assert main(argv) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "255 0 0"
    assert len(lines) == 3


def test_scale_and_theme(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scale", "#3b82f6"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 11
    assert main(["theme", "#3b82f6", "#f97316", "--mode", "dark"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 27
    assert lines[0].startswith("--background: #")


def test_extract_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["extract", str(tmp_path / "missing.png")]) == 1
    assert "Cannot decode image" in capsys.readouterr().err


def test_invalid_color_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["name", "not-a-color"]) == 2
    assert "Invalid color" in capsys.readouterr().err


def test_parser_uses_config_defaults() -> None:
    parser = build_parser({"generate": {"mode": "square", "count": 7}, "extract": {"count": 3}})
    args = parser.parse_args(["generate"])
    assert args.mode is HarmonyMode.SQUARE and args.count == 7
    assert parser.parse_args(["extract", "x.png"]).count == 3


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(SystemExit):
        build_parser({}).parse_args(["generate", "--mode", "pentadic"])


def test_contrast_fix_reports_direction(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["contrast", "#cccccc", "#ffffff", "--fix"]) == 0
    fix_line = [ln for ln in capsys.readouterr().out.splitlines() if ln.startswith("fix")][0]
    assert fix_line.endswith("(darken)")


def test_generate_accepts_picker_label() -> None:
    args = build_parser({}).parse_args(["generate", "--mode", "Shades & Tints"])
    assert args.mode is HarmonyMode.SHADES
    args = build_parser({}).parse_args(["generate", "--mode", "split-comp"])
    assert args.mode is HarmonyMode.SPLIT_COMPLEMENTARY
