"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, List, Sequence

from minirpg.domain.battle_models import BattleOutcome
from minirpg.domain.classification import TIER_HEADLINES
from minirpg.domain.entities import Player
from minirpg.domain.ranking import RunSummary

_SUMMARY_MARKERS = ("Battle:", "VICTORY", "DEFEAT", "DRAW", "Boss defeated", "Total turns")


def debug_enabled() -> bool:
    """Return True only when MINIRPG_DEBUG is explicitly set to '1'."""
    return os.getenv("MINIRPG_DEBUG") == "1"


def format_price(cents: int) -> str:
    """Render a currency amount stored in cents, e.g. ``500`` -> ``5.00€``."""
    return f"{cents / 100:.2f}€"


def render_player(player: Player) -> List[str]:
    lines = [
        f"{player.name}  |  Score: {player.score}  |  Money: {format_price(player.currency)}",
        f"HP {player.current_health}/{player.effective_max_health()}  "
        f"ATK {player.effective_attack()}  DEF {player.effective_defense()}",
    ]
    for kind, items in player.inventory_by_kind().items():
        names = ", ".join(f"{item.name} (+{item.bonus})" for item in items)
        lines.append(f"  {kind}: {names}")
    return lines


def render_outcome(outcome: BattleOutcome, mode: str = "full") -> List[str]:
    """Lines for a battle outcome; ``summary`` mode keeps only the headline lines."""
    if outcome.is_error:
        return [f"Battle could not start: {outcome.detail}"]
    if mode == "summary":
        return [line for line in outcome.turn_log if line.startswith(_SUMMARY_MARKERS)]
    return list(outcome.turn_log)


def render_ranking(entries: Sequence[RunSummary], highlight: RunSummary | None = None) -> List[str]:
    if not entries:
        return ["No runs recorded yet."]
    lines = [f"{'#':>3}  {'Name':<20} {'Score':>6} {'Money':>9}"]
    for position, entry in enumerate(entries, start=1):
        marker = " <" if highlight is not None and entry == highlight else ""
        lines.append(
            f"{position:>3}  {entry.name:<20} {entry.final_score:>6} {format_price(entry.final_currency):>9}{marker}"
        )
    return lines


def render_tier(tier: str) -> str:
    return f"{TIER_HEADLINES.get(tier, tier)} ({tier})"  # type: ignore[call-overload]


def print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)
