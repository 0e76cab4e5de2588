from __future__ import annotations

import pytest

from minirpg.domain.battle_models import BattleOutcome
from minirpg.domain.entities import Boss, Combatant, Enemy, Player
from minirpg.domain.errors import RunCompleteError
from minirpg.domain.progression import (
    ProgressionState,
    ProgressionTracker,
    advance_progression,
    initial_state,
)
from minirpg.services.battle_service import resolve_battle


def _make_tracker() -> ProgressionTracker:
    enemies = (
        Enemy(name="Goblin", attack_power=15, health=50),
        Enemy(name="Orc", attack_power=25, health=80),
        Enemy(name="Troll", attack_power=35, health=100),
    )
    boss = Boss(name="Dragon", attack_power=50, health=150, special_ability_name="Flame Burst", damage_multiplier=1.5)
    return ProgressionTracker(enemies=enemies, boss=boss)


def test_advance_progression_walks_enemies_then_boss() -> None:
    state = initial_state(3)
    visited = [state]
    while not state.is_complete:
        state = advance_progression(state, 3)
        visited.append(state)

    assert visited == [
        ProgressionState(phase="awaiting_battle", index=0),
        ProgressionState(phase="awaiting_battle", index=1),
        ProgressionState(phase="awaiting_battle", index=2),
        ProgressionState(phase="awaiting_boss"),
        ProgressionState(phase="complete"),
    ]


def test_empty_roster_starts_at_boss() -> None:
    assert initial_state(0) == ProgressionState(phase="awaiting_boss")


def test_advance_from_complete_raises() -> None:
    with pytest.raises(RunCompleteError):
        advance_progression(ProgressionState(phase="complete"), 3)


def test_tracker_advances_regardless_of_outcome() -> None:
    tracker = _make_tracker()
    player = Player(name="Tester", base_attack=10)

    opponents = []
    while not tracker.state.is_complete:
        opponents.append(tracker.current_opponent().name)
        tracker.fight_current(player, resolve_battle)

    assert opponents == ["Goblin", "Orc", "Troll", "Dragon"]
    assert tracker.total_encounters == 4
    assert tracker.battles_won == 1
    assert [record.outcome.winner for record in tracker.history] == ["player", "enemy", "enemy", "enemy"]
    assert tracker.history[-1].is_boss


def test_tracker_counts_every_win() -> None:
    tracker = _make_tracker()
    player = Player(name="Tester", base_attack=200)

    while not tracker.state.is_complete:
        tracker.fight_current(player, resolve_battle)

    assert tracker.battles_won == 4
    assert player.score == 120 + 130 + 140 + 242


def test_tracker_cannot_fight_after_completion() -> None:
    tracker = _make_tracker()
    player = Player(name="Tester", base_attack=200)
    for _ in range(4):
        tracker.fight_current(player, resolve_battle)

    with pytest.raises(RunCompleteError):
        tracker.fight_current(player, resolve_battle)


def test_error_outcome_does_not_advance_tracker() -> None:
    tracker = _make_tracker()

    def broken_resolver(_player: Player, _enemy: Combatant) -> BattleOutcome:
        return BattleOutcome(winner="error", detail="broken")

    outcome = tracker.fight_current(Player(name="Tester"), broken_resolver)

    assert outcome.is_error
    assert tracker.state == ProgressionState(phase="awaiting_battle", index=0)
    assert tracker.history == []
    assert tracker.battles_won == 0
