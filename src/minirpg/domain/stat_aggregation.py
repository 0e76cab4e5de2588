"""Effective stat derivation from base stats and inventory bonuses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from minirpg.core.types import ItemKind

if TYPE_CHECKING:
    from minirpg.domain.entities import Item, Player


@dataclass(frozen=True, slots=True)
class EffectiveStats:
    attack: int
    defense: int
    max_health: int


def sum_bonus(items: Iterable["Item"], kind: ItemKind) -> int:
    """Sum the bonuses of every item of ``kind``; other kinds contribute nothing."""
    return sum(item.bonus or 0 for item in items if item.kind == kind)


def aggregate_stats(player: "Player") -> EffectiveStats:
    """Return the player's current effective attack, defense and max health."""
    return EffectiveStats(
        attack=player.effective_attack(),
        defense=player.effective_defense(),
        max_health=player.effective_max_health(),
    )
