from __future__ import annotations

import pytest

from chroma.accessibility import (
    ApcaLevel,
    WcagLevel,
    apca_contrast,
    apca_level,
    contrast_ratio,
    contrast_report,
    suggest_contrast_fix,
    text_color,
    wcag_level,
)
from common import settings as _settings


def test_contrast_ratio_bounds_and_symmetry() -> None:
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#ffffff", "#000000") == pytest.approx(21.0)
    assert contrast_ratio("#3b82f6", "#3b82f6") == pytest.approx(1.0)
    assert contrast_ratio("#777777", "#ffffff") == pytest.approx(4.48, abs=0.01)


@pytest.mark.parametrize(
    "ratio, level",
    [
        (21.0, WcagLevel.AAA),
        (7.0, WcagLevel.AAA),
        (4.5, WcagLevel.AA),
        (3.0, WcagLevel.AA_LARGE),
        (2.99, WcagLevel.FAIL),
    ],
)
def test_wcag_levels(ratio: float, level: WcagLevel) -> None:
    assert wcag_level(ratio) is level


def test_apca_polarity() -> None:
    assert apca_contrast("#000000", "#ffffff") == pytest.approx(106.04, abs=0.5)
    assert apca_contrast("#ffffff", "#000000") == pytest.approx(-107.88, abs=0.5)
    assert apca_contrast("#777777", "#777777") == 0.0


def test_apca_levels_ignore_sign() -> None:
    assert apca_level(-80.0) is ApcaLevel.PREFERRED
    assert apca_level(60.0) is ApcaLevel.BODY
    assert apca_level(50.0) is ApcaLevel.LARGE
    assert apca_level(-30.0) is ApcaLevel.UI
    assert apca_level(10.0) is ApcaLevel.FAIL


def test_contrast_report() -> None:
    rep = contrast_report("#777777", "#ffffff")
    assert rep.wcag is WcagLevel.AA_LARGE
    assert not rep.passes_aa
    assert contrast_report("#000000", "#ffffff").passes_aaa


def test_text_color() -> None:
    assert text_color("#ffffff") == "#000000"
    assert text_color("#000000") == "#ffffff"
    assert text_color("#1e3a8a") == "#ffffff"
    assert text_color("#fde68a") == "#000000"


def test_fix_darkens_on_light_background() -> None:
    fix = suggest_contrast_fix("#777777", "#ffffff")
    assert fix is not None
    assert fix.direction == "darken"
    assert fix.ratio >= 4.5
    assert contrast_ratio(fix.hex, "#ffffff") == pytest.approx(fix.ratio)
    # closest passing gray, not black
    assert fix.hex != "#000000"


def test_fix_lightens_on_dark_background() -> None:
    fix = suggest_contrast_fix("#333333", "#222222")
    assert fix is not None
    assert fix.direction == "lighten"
    assert fix.ratio >= 4.5


def test_fix_falls_back_to_other_direction() -> None:
    # mid-gray background: white cannot reach 4.5, black can
    fix = suggest_contrast_fix("#999999", "#aaaaaa")
    assert fix is not None
    assert fix.direction == "darken"
    assert fix.ratio >= 4.5


def test_fix_none_when_passing_or_impossible() -> None:
    assert suggest_contrast_fix("#000000", "#ffffff") is None
    assert suggest_contrast_fix("#808080", "#808080", target=21.0) is None


def test_fix_target_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHROMA_CONTRAST_TARGET", "7")
    _settings.reload_from_env()
    try:
        fix = suggest_contrast_fix("#777777", "#ffffff")
        assert fix is not None and fix.ratio >= 7.0
    finally:
        monkeypatch.delenv("CHROMA_CONTRAST_TARGET")
        _settings.reload_from_env()


def test_fix_light_gray_on_white() -> None:
    fix = suggest_contrast_fix("#CCCCCC", "#FFFFFF")
    assert fix is not None
    assert fix.direction == "darken"
    assert contrast_ratio(fix.hex, "#ffffff") >= 4.5


@pytest.mark.parametrize(
    "fg, bg, expected",
    [
        ("#CCCCCC", (255, 255, 255), "darken"),
        ("#444444", (0, 0, 0), "lighten"),
    ],
)
def test_fix_direction_labels(fg: str, bg: tuple, expected: str) -> None:
    fix = suggest_contrast_fix(fg, bg)
    assert fix is not None
    assert fix.direction in ("lighten", "darken")
    assert fix.direction == expected


def test_fix_rejects_unparsable_color() -> None:
    with pytest.raises(ValueError):
        suggest_contrast_fix("not-a-color", "#ffffff")
    with pytest.raises(ValueError):
        contrast_ratio("#ffffff", "#12")
