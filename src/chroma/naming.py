from __future__ import annotations

"""Nearest-name lookup over the reference color table.

The index is built lazily on first use and is immutable afterwards, so it
can be shared freely between threads. Lookups are an exact hex match first,
then a vectorized nearest-neighbour scan by squared RGB distance.
"""

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .engine import hex_to_rgb, parse_hex, rgb_to_hex
from .named_colors import NAMED_COLORS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class NameIndex:
    """Read-only lookup structure derived from a ``(name, hex)`` table."""

    names: Tuple[str, ...]
    rgb: np.ndarray  # (N, 3) float64, write-protected
    by_hex: Mapping[str, Tuple[str, ...]]
    by_name: Mapping[str, Tuple[str, ...]]

    @classmethod
    def build(cls, table: Sequence[Tuple[str, str]]) -> "NameIndex":
        names: List[str] = []
        rows: List[Tuple[int, int, int]] = []
        by_hex: dict[str, List[str]] = {}
        by_name: dict[str, List[str]] = {}
        for name, hex_str in table:
            rgb = hex_to_rgb(hex_str)
            if rgb is None:
                raise ValueError(f"Invalid hex in color table: {name}={hex_str!r}")
            norm = rgb_to_hex(rgb)
            names.append(name)
            rows.append(rgb)
            by_hex.setdefault(norm, []).append(name)
            hexes = by_name.setdefault(name.lower(), [])
            if norm not in hexes:
                hexes.append(norm)

        arr = np.asarray(rows, dtype=np.float64).reshape(-1, 3)
        arr.setflags(write=False)
        return cls(
            names=tuple(names),
            rgb=arr,
            by_hex=MappingProxyType({k: tuple(v) for k, v in by_hex.items()}),
            by_name=MappingProxyType({k: tuple(v) for k, v in by_name.items()}),
        )

    def nearest(self, rgb: Tuple[int, int, int]) -> str:
        exact = self.by_hex.get(rgb_to_hex(rgb))
        if exact:
            return exact[0]
        q = np.asarray(rgb, dtype=np.float64)
        d2 = np.sum((self.rgb - q) ** 2, axis=1)
        # argmin returns the first minimum, so ties go to table order
        return self.names[int(np.argmin(d2))]


_index: Optional[NameIndex] = None
_index_lock = threading.Lock()


def get_index() -> NameIndex:
    """Return the shared name index, building it on first call."""
    global _index
    idx = _index
    if idx is not None:
        return idx
    with _index_lock:
        if _index is None:
            _index = NameIndex.build(NAMED_COLORS)
            logger.debug("built color name index with %d entries", len(_index.names))
        return _index


def nearest_name(rgb: Tuple[int, int, int]) -> str:
    """Return the reference name closest to ``rgb``."""
    return get_index().nearest(rgb)


def names_for_hex(hex_str: str) -> List[str]:
    """All names registered for exactly this color (empty when none)."""
    norm = parse_hex(hex_str)
    if norm is None:
        return []
    return list(get_index().by_hex.get(norm, ()))


def hexes_for_name(name: str) -> List[str]:
    """Hex values registered under ``name`` (case-insensitive)."""
    return list(get_index().by_name.get(name.strip().lower(), ()))


__all__ = ["NameIndex", "get_index", "nearest_name", "names_for_hex", "hexes_for_name"]
