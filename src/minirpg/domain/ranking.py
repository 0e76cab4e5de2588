"""Finished-run summaries for the ranked history list."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from minirpg.domain.entities import Player


@dataclass(frozen=True, slots=True)
class RunSummary:
    name: str
    final_score: int
    final_currency: int
    timestamp: str

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


def build_run_summary(player: Player, now: datetime | None = None) -> RunSummary:
    """Capture the player's final standing for persistence."""
    moment = now or datetime.now(timezone.utc)
    return RunSummary(
        name=player.name,
        final_score=player.score,
        final_currency=player.currency,
        timestamp=moment.isoformat(),
    )


def rank_summaries(summaries: Iterable[RunSummary]) -> List[RunSummary]:
    """Order summaries by score, highest first; ties keep insertion order."""
    return sorted(summaries, key=lambda entry: entry.final_score, reverse=True)
