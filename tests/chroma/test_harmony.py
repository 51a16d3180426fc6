from __future__ import annotations

import numpy as np
import pytest

from chroma.engine import hue_distance
from chroma.harmony import (
    MATSUDA_TEMPLATES,
    HarmonyMode,
    SeedBehavior,
    anchor_hues,
    best_orientation,
    is_matsuda,
    is_procedural,
    orientation_cost,
    sample_arcs,
)


def test_mode_lookup() -> None:
    assert HarmonyMode.from_value("split-comp") is HarmonyMode.SPLIT_COMPLEMENTARY
    assert SeedBehavior.from_value("pin") is SeedBehavior.PIN
    with pytest.raises(ValueError, match="Unknown harmony mode"):
        HarmonyMode.from_value("pentadic")
    with pytest.raises(ValueError):
        SeedBehavior.from_value("ignore")


def test_mode_families() -> None:
    assert is_matsuda(HarmonyMode.ANALOGOUS)
    assert is_matsuda(HarmonyMode.MATSUDA_T)
    assert not is_matsuda(HarmonyMode.TRIADIC)
    assert is_procedural(HarmonyMode.SHADES)
    assert not is_procedural(HarmonyMode.COMPOUND)


def test_geometric_anchor_hues(rng: np.random.Generator) -> None:
    assert anchor_hues(HarmonyMode.TRIADIC, 10.0, rng) == pytest.approx([10.0, 130.0, 250.0])
    assert anchor_hues(HarmonyMode.DOUBLE_SPLIT, 10.0, rng) == pytest.approx(
        [340.0, 10.0, 40.0, 160.0, 220.0]
    )
    assert anchor_hues(HarmonyMode.RANDOM, 400.0, rng) == pytest.approx([40.0])


def test_sample_arcs_respects_template(rng: np.random.Generator) -> None:
    arcs = MATSUDA_TEMPLATES[HarmonyMode.MATSUDA_L]
    hues = sample_arcs(arcs, 0.0, 5, rng)
    assert len(hues) == 5
    # widths 79.2 and 18 split five samples 4 / 1
    main = [h for h in hues if hue_distance(h, 0.0) <= 39.6 + 1e-9]
    side = [h for h in hues if hue_distance(h, 90.0) <= 9.0 + 1e-9]
    assert len(main) == 4
    assert len(side) == 1
    assert sample_arcs(arcs, 0.0, 0, rng) == []


def test_sample_arcs_small_counts(rng: np.random.Generator) -> None:
    arcs = MATSUDA_TEMPLATES[HarmonyMode.MATSUDA_X]
    assert len(sample_arcs(arcs, 120.0, 1, rng)) == 1
    assert len(sample_arcs(arcs, 120.0, 2, rng)) == 2


def test_orientation_prefers_lowest_cost(rng: np.random.Generator) -> None:
    assert orientation_cost([10.0, 190.0], [10.0, 190.0]) == 0.0
    assert orientation_cost([10.0, 190.0], [10.0, 200.0]) == pytest.approx(10.0)
    got = best_orientation(HarmonyMode.TRIADIC, [200.0, 80.0], rng)
    assert orientation_cost(got, [200.0, 80.0]) == pytest.approx(0.0)


def test_orientation_ties_keep_first_seed(rng: np.random.Generator) -> None:
    got = best_orientation(HarmonyMode.COMPLEMENTARY, [10.0, 200.0], rng)
    assert got == pytest.approx([10.0, 190.0])
