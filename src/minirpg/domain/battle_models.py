"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

from minirpg.core.types import Winner

SimulatedWinner = Literal["player", "enemy", "draw"]


@dataclass(frozen=True, slots=True)
class BattleSimulation:
    """Result of running the turn loop, before any scoring or mutation."""

    winner: SimulatedWinner
    turns_elapsed: int
    player_health: int
    enemy_health: int
    turn_log: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BattleOutcome:
    """Resolved encounter as reported to callers."""

    winner: Winner
    points_awarded: int = 0
    turn_log: Tuple[str, ...] = field(default_factory=tuple)
    turns_elapsed: int = 0
    detail: str = ""

    @property
    def is_error(self) -> bool:
        return self.winner == "error"

    @property
    def player_won(self) -> bool:
        return self.winner == "player"
