"""Inventory item models."""
from __future__ import annotations

from dataclasses import dataclass

from minirpg.core.types import ItemKind


@dataclass(frozen=True, slots=True)
class Item:
    """An owned weapon, armor piece or consumable.

    ``bonus`` applies to attack for weapons, defense for armor and maximum
    health for consumables.
    """

    name: str
    kind: ItemKind
    bonus: int = 0
