from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from chroma.naming import NameIndex, get_index, hexes_for_name, names_for_hex, nearest_name


def test_exact_and_nearest_match() -> None:
    assert nearest_name((255, 0, 0)) == "Red"
    assert nearest_name((254, 1, 1)) == "Red"
    assert nearest_name((255, 99, 71)) == "Tomato"
    assert nearest_name((30, 144, 255)) == "Dodger Blue"


def test_duplicate_hex_keeps_table_order() -> None:
    assert names_for_hex("#00FFFF") == ["Cyan", "Aqua"]
    assert nearest_name((0, 255, 255)) == "Cyan"
    assert nearest_name((128, 128, 128)) == "Gray"


def test_reverse_lookup() -> None:
    assert hexes_for_name("  tomato ") == ["#ff6347"]
    assert hexes_for_name("no such color") == []
    assert names_for_hex("zzz") == []


def test_custom_index_ties_go_to_first_entry() -> None:
    idx = NameIndex.build([("Low", "#000010"), ("High", "#000030")])
    # equidistant from both entries
    assert idx.nearest((0, 0, 0x20)) == "Low"
    assert idx.by_name["low"] == ("#000010",)


def test_index_is_read_only() -> None:
    idx = get_index()
    assert not idx.rgb.flags.writeable
    with pytest.raises(TypeError):
        idx.by_hex["#123456"] = ("x",)  # type: ignore[index]


def test_invalid_table_entry_raises() -> None:
    with pytest.raises(ValueError, match="Invalid hex"):
        NameIndex.build([("Bad", "#zz")])


def test_shared_index_across_threads() -> None:
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(lambda _: get_index(), range(8)))
    assert all(g is got[0] for g in got)


def test_nearest_uses_squared_rgb_distance() -> None:
    idx = NameIndex.build([("Green", "#003c00"), ("Blue", "#000032"), ("Gray", "#1e1e1e")])
    # squared distances from black: 3600, 2500, 2700
    assert idx.nearest((0, 0, 0)) == "Blue"
    # from (20, 20, 20): 2400, 1700, 300
    assert idx.nearest((20, 20, 20)) == "Gray"
