"""Market product definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from minirpg.core.types import ItemKind, Rarity
from minirpg.domain.entities import Item

KIND_BONUS_STAT: Dict[str, str] = {
    "weapon": "attack",
    "armor": "defense",
    "consumable": "health",
}


@dataclass(slots=True)
class ProductDef:
    """A purchasable catalog entry."""

    id: str
    name: str
    price: int
    rarity: Rarity
    kind: ItemKind
    bonus_stat: str
    bonus_amount: int

    def to_item(self) -> Item:
        """Convert to an inventory item; off-kind bonuses become zero."""
        bonus = self.bonus_amount if KIND_BONUS_STAT[self.kind] == self.bonus_stat else 0
        return Item(name=self.name, kind=self.kind, bonus=bonus)
