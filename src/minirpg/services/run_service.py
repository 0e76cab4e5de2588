"""Run lifecycle: new session, encounters in order, final report, restart."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from minirpg.core.rng import RNG
from minirpg.core.types import Tier
from minirpg.data.repositories import EnemiesRepository
from minirpg.domain.battle_models import BattleOutcome
from minirpg.domain.character import AttributeAllocation
from minirpg.domain.classification import classify
from minirpg.domain.entities import Combatant
from minirpg.domain.progression import ProgressionTracker
from minirpg.domain.ranking import RunSummary, build_run_summary
from minirpg.domain.state import GameSession
from minirpg.services.battle_service import resolve_battle
from minirpg.services.factories import create_player, create_roster

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_ID = "main_run"


@dataclass(frozen=True, slots=True)
class RunReport:
    tier: Tier
    battles_won: int
    total_encounters: int
    items_purchased: int
    summary: RunSummary


class RunService:
    """Creates sessions and drives the tracker through the roster."""

    def __init__(self, *, enemies_repo: EnemiesRepository, roster_id: str = DEFAULT_ROSTER_ID) -> None:
        self._enemies_repo = enemies_repo
        self._roster_id = roster_id

    def new_session(
        self,
        *,
        player_name: str,
        seed: int,
        allocation: AttributeAllocation | None = None,
    ) -> GameSession:
        """Build a complete session; nothing is returned half-initialized."""
        allocation = (allocation or AttributeAllocation()).clamped()
        enemies, boss = create_roster(self._roster_id, self._enemies_repo)
        session = GameSession(
            seed=seed,
            rng=RNG(seed),
            player=create_player(player_name, allocation),
            tracker=ProgressionTracker(enemies=enemies, boss=boss),
            allocation=allocation,
            roster_id=self._roster_id,
        )
        logger.info("New run for %s (seed=%d, roster=%s)", player_name, seed, self._roster_id)
        return session

    def restart_run(self, session: GameSession) -> GameSession:
        """Return a fresh session with the same name, seed and allocation.

        The old session is left untouched.
        """
        return self.new_session(
            player_name=session.player.name,
            seed=session.seed,
            allocation=session.allocation,
        )

    def current_opponent(self, session: GameSession) -> Combatant:
        return session.tracker.current_opponent()

    def fight_current(self, session: GameSession) -> BattleOutcome:
        return session.tracker.fight_current(session.player, resolve_battle)

    def finish_run(self, session: GameSession, now: datetime | None = None) -> RunReport:
        """Classify a completed run and capture its summary."""
        tracker = session.tracker
        if not tracker.state.is_complete:
            raise ValueError("The run is not complete yet.")
        tier = classify(tracker.battles_won, tracker.total_encounters)
        logger.info(
            "Run finished for %s: %d/%d wins, tier %s",
            session.player.name,
            tracker.battles_won,
            tracker.total_encounters,
            tier,
        )
        return RunReport(
            tier=tier,
            battles_won=tracker.battles_won,
            total_encounters=tracker.total_encounters,
            items_purchased=session.items_purchased,
            summary=build_run_summary(session.player, now),
        )
