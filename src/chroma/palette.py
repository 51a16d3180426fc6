from __future__ import annotations

"""Palette slots: generated colors plus the caller's edits.

A :class:`PaletteSlot` wraps a :class:`ColorStop` with a lock flag, a stable
id and an optional user-given name. Slots are the only mutable values in the
package; the caller edits them through the methods below.
"""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import numpy as np

from .api import generate_palette
from .color_types import RGB, ColorStop, StopLike, as_stop, hex_to_stop
from .harmony import HarmonyMode, SeedBehavior
from .naming import nearest_name


def new_slot_id() -> str:
    return str(uuid.uuid4())


@dataclass
class PaletteSlot:
    """One position in a palette.

    Attributes
    ----------
    color:
        The swatch shown in this slot.
    locked:
        Locked slots survive regeneration unchanged.
    id:
        Stable identifier, kept across regenerations.
    name:
        User-given name. ``None`` falls back to the nearest reference name.
    """

    color: ColorStop
    locked: bool = False
    id: str = field(default_factory=new_slot_id)
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return nearest_name(self.color.rgb)

    @property
    def rgb(self) -> RGB:
        return self.color.rgb

    def toggle_lock(self) -> bool:
        self.locked = not self.locked
        return self.locked

    def rename(self, name: Optional[str]) -> None:
        """Set the user name; blank text clears it."""
        self.name = name.strip() if name and name.strip() else None

    def replace_color(self, color: StopLike) -> None:
        self.color = as_stop(color)

    def clone(self) -> "PaletteSlot":
        # ColorStop is frozen, so sharing it is safe
        return PaletteSlot(color=self.color, locked=self.locked, id=self.id, name=self.name)


SlotLike = Union[PaletteSlot, StopLike]


def stop_of(item: SlotLike) -> ColorStop:
    """The ColorStop behind a slot, stop, color text or RGB triple."""
    if isinstance(item, PaletteSlot):
        return item.color
    return as_stop(item)


def slots_from_stops(stops: Sequence[StopLike]) -> List[PaletteSlot]:
    return [PaletteSlot(color=as_stop(s)) for s in stops]


def slots_from_hex(hexes: Sequence[str]) -> List[PaletteSlot]:
    """Build unlocked slots from hex text, skipping entries that do not parse."""
    out = []
    for text in hexes:
        stop = hex_to_stop(text)
        if stop is not None:
            out.append(PaletteSlot(color=stop))
    return out


def regenerate_slots(
    slots: Sequence[PaletteSlot],
    mode: HarmonyMode | str,
    count: int,
    seeds: Optional[Sequence[StopLike]] = None,
    seed_behavior: SeedBehavior | str = SeedBehavior.INFLUENCE,
    temperature: float = 0.0,
    rng: Optional[np.random.Generator] = None,
) -> List[PaletteSlot]:
    """Generate a new palette while keeping locked slots in place.

    Position ``i`` keeps a copy of ``slots[i]`` when that slot is locked;
    otherwise it receives the freshly generated color, reusing the old slot
    id when one exists. With ``pin`` seeds, the leading seed positions come
    back locked. The input slots are not modified.
    """
    behavior = (
        seed_behavior
        if isinstance(seed_behavior, SeedBehavior)
        else SeedBehavior.from_value(seed_behavior)
    )
    colors = generate_palette(mode, count, seeds, behavior, temperature, rng)
    seed_count = len(seeds or []) if behavior is SeedBehavior.PIN else 0

    out: List[PaletteSlot] = []
    for i, color in enumerate(colors):
        prev = slots[i] if i < len(slots) else None
        if prev is not None and prev.locked:
            out.append(prev.clone())
            continue
        out.append(
            PaletteSlot(
                color=color,
                locked=i < seed_count,
                id=prev.id if prev is not None else new_slot_id(),
            )
        )
    return out


__all__ = [
    "PaletteSlot",
    "SlotLike",
    "new_slot_id",
    "stop_of",
    "slots_from_stops",
    "slots_from_hex",
    "regenerate_slots",
    "hex_to_stop",
]
