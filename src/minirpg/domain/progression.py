"""Run progression state machine: N regular enemies, then one boss."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from minirpg.core.types import ProgressionPhase
from minirpg.domain.battle_models import BattleOutcome
from minirpg.domain.entities import Boss, Combatant, Enemy, Player
from minirpg.domain.errors import RunCompleteError

logger = logging.getLogger(__name__)

Resolver = Callable[[Player, Combatant], BattleOutcome]


@dataclass(frozen=True, slots=True)
class ProgressionState:
    phase: ProgressionPhase
    index: int = 0

    @property
    def is_complete(self) -> bool:
        return self.phase == "complete"


def initial_state(enemy_count: int) -> ProgressionState:
    if enemy_count < 0:
        raise ValueError("enemy_count must not be negative.")
    if enemy_count == 0:
        return ProgressionState(phase="awaiting_boss")
    return ProgressionState(phase="awaiting_battle", index=0)


def advance_progression(state: ProgressionState, enemy_count: int) -> ProgressionState:
    """Return the state that follows ``state`` once its encounter resolves."""
    if state.phase == "awaiting_battle":
        next_index = state.index + 1
        if next_index < enemy_count:
            return ProgressionState(phase="awaiting_battle", index=next_index)
        return ProgressionState(phase="awaiting_boss")
    if state.phase == "awaiting_boss":
        return ProgressionState(phase="complete")
    raise RunCompleteError("The run is already complete.")


@dataclass(slots=True)
class EncounterRecord:
    opponent_name: str
    is_boss: bool
    outcome: BattleOutcome


@dataclass(slots=True)
class ProgressionTracker:
    """Moves forward through the roster one resolved encounter at a time."""

    enemies: Tuple[Enemy, ...]
    boss: Boss
    state: ProgressionState = field(init=False)
    battles_won: int = 0
    history: List[EncounterRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.state = initial_state(len(self.enemies))

    @property
    def total_encounters(self) -> int:
        return len(self.enemies) + 1

    def current_opponent(self) -> Combatant:
        if self.state.phase == "awaiting_battle":
            return self.enemies[self.state.index]
        if self.state.phase == "awaiting_boss":
            return self.boss
        raise RunCompleteError("The run is already complete.")

    def fight_current(self, player: Player, resolver: Resolver) -> BattleOutcome:
        """Resolve the current encounter and advance.

        Error outcomes leave the tracker where it was.
        """
        opponent = self.current_opponent()
        outcome = resolver(player, opponent)
        if outcome.is_error:
            logger.warning("Encounter against %s not resolved: %s", opponent.name, outcome.detail)
            return outcome
        if outcome.player_won:
            self.battles_won += 1
        self.history.append(
            EncounterRecord(
                opponent_name=opponent.name,
                is_boss=isinstance(opponent, Boss),
                outcome=outcome,
            )
        )
        previous = self.state
        self.state = advance_progression(self.state, len(self.enemies))
        logger.debug("Progression %s -> %s (wins=%d)", previous, self.state, self.battles_won)
        return outcome
