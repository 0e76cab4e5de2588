"""Character creation: name rules and the attribute point budget."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from minirpg.domain.character import (
    ATTRIBUTE_BUDGET,
    AttributeAllocation,
    normalize_player_name,
    validate_player_name,
)
from minirpg.domain.entities import Player
from minirpg.services.factories import create_player

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CharacterCreationResult:
    success: bool
    message: str
    player: Player | None = None
    allocation: AttributeAllocation | None = None


class CharacterService:
    """Builds players within the attribute budget."""

    def __init__(self, *, budget: int = ATTRIBUTE_BUDGET) -> None:
        self._budget = budget

    @property
    def budget(self) -> int:
        return self._budget

    def create_character(self, raw_name: str, allocation: AttributeAllocation) -> CharacterCreationResult:
        name = normalize_player_name(raw_name)
        problem = validate_player_name(name)
        if problem is not None:
            return CharacterCreationResult(success=False, message=problem)
        clamped = allocation.clamped()
        if clamped.spent > self._budget:
            return CharacterCreationResult(
                success=False,
                message=f"Allocation spends {clamped.spent} of {self._budget} points.",
            )
        player = create_player(name, clamped)
        logger.debug("Created player %s with %s", name, clamped)
        return CharacterCreationResult(
            success=True,
            message=f"{name} is ready with {self._budget - clamped.spent} unspent points.",
            player=player,
            allocation=clamped,
        )
