from __future__ import annotations

import pytest

from chroma.color_types import ColorStop
from chroma.engine import RGB
from chroma.parsing import parse_any, parse_hsl_str, parse_rgb_str, to_rgb


@pytest.mark.parametrize(
    "text, expected",
    [
        ("rgb(255, 0, 0)", RGB(255, 0, 0)),
        ("rgba(0, 128, 255, 0.5)", RGB(0, 128, 255)),
        ("rgb(0 128 255 / 50%)", RGB(0, 128, 255)),
        ("RGB(100%, 50%, 0%)", RGB(255, 128, 0)),
        ("rgb(300, -4, 12)", RGB(255, 0, 12)),
    ],
)
def test_parse_rgb_str(text: str, expected: RGB) -> None:
    assert parse_rgb_str(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hsl(120, 100%, 50%)", RGB(0, 255, 0)),
        ("hsla(240deg 100% 50% / 0.3)", RGB(0, 0, 255)),
        ("hsl(0, 0%, 100%)", RGB(255, 255, 255)),
    ],
)
def test_parse_hsl_str(text: str, expected: RGB) -> None:
    assert parse_hsl_str(text) == expected


def test_parse_any_dispatch() -> None:
    assert parse_any("#f00") == RGB(255, 0, 0)
    assert parse_any("rgb(1,2,3)") == RGB(1, 2, 3)
    assert parse_any("hsl(0,100%,50%)") == RGB(255, 0, 0)
    for bad in ["", "   ", "rgb(1,2)", "tomato", "hsl(a,b,c)"]:
        assert parse_any(bad) is None
    assert parse_any(None) is None  # type: ignore[arg-type]


def test_to_rgb_coerces() -> None:
    assert to_rgb("#0000ff") == RGB(0, 0, 255)
    assert to_rgb((10.4, 10.5, 300)) == RGB(10, 11, 255)
    assert to_rgb(ColorStop(RGB(1, 2, 3))) == RGB(1, 2, 3)
    with pytest.raises(ValueError, match="Invalid color"):
        to_rgb("nope")
