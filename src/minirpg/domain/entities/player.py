"""Player model."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, List

from minirpg.core.types import ItemKind
from minirpg.domain.stat_aggregation import sum_bonus

from .item import Item

DEFAULT_MAX_HEALTH = 100
STARTING_CURRENCY = 500


@dataclass(slots=True)
class Player:
    """The player's character for one session.

    Effective stats are derived from the base values and the inventory on
    every call; only ``current_health`` is stored.
    """

    has_attack: ClassVar[bool] = True
    has_defense: ClassVar[bool] = True

    name: str
    max_health: int = DEFAULT_MAX_HEALTH
    base_attack: int = 0
    base_defense: int = 0
    score: int = 0
    currency: int = STARTING_CURRENCY
    inventory: List[Item] = field(default_factory=list)
    current_health: int | None = None

    def __post_init__(self) -> None:
        if self.current_health is None:
            self.current_health = self.effective_max_health()

    def effective_attack(self) -> int:
        return self.base_attack + sum_bonus(self.inventory, "weapon")

    def effective_defense(self) -> int:
        return self.base_defense + sum_bonus(self.inventory, "armor")

    def effective_max_health(self) -> int:
        return self.max_health + sum_bonus(self.inventory, "consumable")

    def add_item(self, item: Item) -> Item:
        """Store a copy of ``item`` at the end of the inventory."""
        stored = replace(item)
        self.inventory.append(stored)
        return stored

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError("Score can only increase.")
        self.score += points

    def spend_currency(self, amount: int) -> bool:
        """Deduct ``amount`` if affordable and report whether it was spent."""
        if amount < 0 or amount > self.currency:
            return False
        self.currency -= amount
        return True

    def reset_health(self) -> None:
        self.current_health = self.effective_max_health()

    def inventory_by_kind(self) -> Dict[ItemKind, List[Item]]:
        groups: Dict[ItemKind, List[Item]] = {}
        for item in self.inventory:
            groups.setdefault(item.kind, []).append(item)
        return groups
