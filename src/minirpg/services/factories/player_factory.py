"""Factory for creating the player character."""
from __future__ import annotations

from minirpg.domain.character import AttributeAllocation, max_health_for
from minirpg.domain.entities import Player
from minirpg.domain.entities.player import STARTING_CURRENCY


def create_player(
    name: str,
    allocation: AttributeAllocation | None = None,
    *,
    currency: int = STARTING_CURRENCY,
) -> Player:
    """Create a full-health player from an attribute allocation."""
    allocation = (allocation or AttributeAllocation()).clamped()
    return Player(
        name=name,
        max_health=max_health_for(allocation),
        base_attack=allocation.attack,
        base_defense=allocation.defense,
        currency=currency,
    )
