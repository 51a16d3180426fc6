from __future__ import annotations

from chroma.color_types import as_stop
from chroma.engine import hue_distance
from chroma.palette import slots_from_hex
from chroma.scale import SCALE_STEPS, generate_scale
from chroma.scoring import PaletteScore, score_palette


def test_scale_steps_and_lightness() -> None:
    steps = generate_scale("#3b82f6")
    assert [s.step for s in steps] == list(SCALE_STEPS)
    ls = [s.color.oklch.L for s in steps]
    assert all(a > b for a, b in zip(ls, ls[1:]))
    assert ls[0] > 0.85
    assert ls[-1] < 0.2


def test_scale_keeps_hue() -> None:
    seed_h = as_stop("#3b82f6").oklch.H
    mid = generate_scale("#3b82f6")[SCALE_STEPS.index(500)]
    assert hue_distance(mid.color.oklch.H, seed_h) < 5.0
    assert mid.hex == mid.color.hex


def test_gray_scale_stays_neutral() -> None:
    for step in generate_scale("#808080"):
        r, g, b = step.color.rgb
        assert r == g == b


def test_score_needs_two_colors() -> None:
    assert score_palette([]) == PaletteScore()
    assert score_palette(["#ff0000"]) == PaletteScore()


def test_black_and_white_score() -> None:
    score = score_palette(["#000000", "#ffffff"])
    # both hues sit at 0, so balance is as bad as it gets
    assert score == PaletteScore(balance=0, accessibility=100, harmony=100, uniqueness=100, overall=75)


def test_scores_are_bounded() -> None:
    slots = slots_from_hex(["#3b82f6", "#f97316", "#16a34a", "#fde68a", "#7c3aed"])
    score = score_palette(slots)
    for v in (score.balance, score.accessibility, score.harmony, score.uniqueness, score.overall):
        assert 0 <= v <= 100
    assert score.accessibility == 100
