from __future__ import annotations

from chroma.color_types import RGB, ColorStop, as_stop
from chroma.engine import hue_distance
from chroma.utility import (
    UtilityRole,
    generate_utility_colors,
    merge_utility_colors,
    primary_of,
)


def test_empty_palette_uses_canonical_hues() -> None:
    colors = generate_utility_colors([])
    assert set(colors) == set(UtilityRole)
    assert hue_distance(colors[UtilityRole.INFO].color.oklch.H, 220.0) < 3.0
    assert hue_distance(colors[UtilityRole.ERROR].color.oklch.H, 27.0) < 3.0
    assert colors[UtilityRole.SUCCESS].label == "Success"


def test_matching_palette_hue_is_adopted() -> None:
    green = as_stop("#22c55e")
    colors = generate_utility_colors(["#3b82f6", green])
    got = colors[UtilityRole.SUCCESS].color.oklch.H
    assert hue_distance(got, green.oklch.H) < 3.0


def test_far_palette_hues_fall_back_to_center() -> None:
    colors = generate_utility_colors(["#3b82f6"])
    assert hue_distance(colors[UtilityRole.ERROR].color.oklch.H, 27.0) < 3.0


def test_focus_and_neutral_follow_primary() -> None:
    blue = as_stop("#3b82f6")
    colors = generate_utility_colors([blue, "#a3a3a3"])
    focus = colors[UtilityRole.FOCUS].color.oklch
    assert hue_distance(focus.H, blue.oklch.H) < 3.0
    assert colors[UtilityRole.NEUTRAL].color.oklch.C < 0.045
    warning_l = colors[UtilityRole.WARNING].color.oklch.L
    assert 0.41 <= warning_l <= 0.63


def test_primary_of_prefers_first_on_ties() -> None:
    a = as_stop("#ff0000").oklch
    b = as_stop("#ff0000").oklch
    assert primary_of([a, b]) is a
    assert primary_of([]).H == 230.0


def test_merge_keeps_locked_roles() -> None:
    generated = generate_utility_colors(["#3b82f6"])
    custom = ColorStop(RGB(1, 2, 3))
    existing = {
        UtilityRole.INFO: generated[UtilityRole.INFO].with_color(custom).with_lock(True),
        UtilityRole.ERROR: generated[UtilityRole.ERROR].with_color(custom),
    }
    merged = merge_utility_colors(existing, generated)
    assert merged[UtilityRole.INFO].color == custom
    assert merged[UtilityRole.INFO].locked
    assert merged[UtilityRole.ERROR] is generated[UtilityRole.ERROR]
    assert set(merged) == set(UtilityRole)
