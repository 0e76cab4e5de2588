"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class EnemyDef:
    """Enemy or boss definition; bosses carry an ability and multiplier."""

    id: str
    name: str
    attack_power: int
    health: int
    special_ability: str | None = None
    damage_multiplier: float | None = None

    @property
    def is_boss(self) -> bool:
        return self.special_ability is not None


@dataclass(slots=True)
class RosterDef:
    """Ordered regular enemies followed by a single boss."""

    id: str
    name: str
    enemy_ids: Tuple[str, ...]
    boss_id: str
