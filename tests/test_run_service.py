from __future__ import annotations

from datetime import datetime, timezone

import pytest

from minirpg.data.repositories import EnemiesRepository
from minirpg.domain.character import AttributeAllocation
from minirpg.domain.entities import Item
from minirpg.domain.errors import RunCompleteError
from minirpg.services.run_service import RunService


def _make_service() -> RunService:
    return RunService(enemies_repo=EnemiesRepository())


def _play_out(service: RunService, session) -> None:
    while not session.tracker.state.is_complete:
        service.fight_current(session)


def test_new_session_uses_default_roster() -> None:
    service = _make_service()

    session = service.new_session(player_name="Tester", seed=5, allocation=AttributeAllocation(health=4, attack=6))

    assert [enemy.name for enemy in session.tracker.enemies] == ["Goblin", "Orc", "Troll"]
    assert session.tracker.boss.name == "Dragon"
    assert session.player.max_health == 104
    assert session.player.base_attack == 6
    assert session.player.currency == 500
    assert service.current_opponent(session).name == "Goblin"


def test_full_clear_is_pro() -> None:
    service = _make_service()
    session = service.new_session(player_name="Tester", seed=1)
    session.player.add_item(Item(name="Cursed Sword", kind="weapon", bonus=150))

    _play_out(service, session)
    report = service.finish_run(session, now=datetime(2024, 1, 2, tzinfo=timezone.utc))

    assert report.tier == "PRO"
    assert report.battles_won == 4
    assert report.total_encounters == 4
    assert report.summary.name == "Tester"
    assert report.summary.final_score == 632
    assert report.summary.final_currency == 500
    assert report.summary.timestamp == "2024-01-02T00:00:00+00:00"


def test_partial_and_loser_tiers() -> None:
    service = _make_service()
    partial = service.new_session(player_name="Tester", seed=1, allocation=AttributeAllocation(attack=10))
    loser = service.new_session(player_name="Tester", seed=1, allocation=AttributeAllocation(defense=10))

    _play_out(service, partial)
    _play_out(service, loser)

    assert service.finish_run(partial).tier == "PARTIAL"
    assert service.finish_run(loser).tier == "LOSER"


def test_finish_run_requires_completion() -> None:
    service = _make_service()
    session = service.new_session(player_name="Tester", seed=1)

    with pytest.raises(ValueError):
        service.finish_run(session)


def test_fighting_after_completion_raises() -> None:
    service = _make_service()
    session = service.new_session(player_name="Tester", seed=1)
    _play_out(service, session)

    with pytest.raises(RunCompleteError):
        service.fight_current(session)


def test_restart_run_builds_a_fresh_session() -> None:
    service = _make_service()
    session = service.new_session(player_name="Tester", seed=9, allocation=AttributeAllocation(attack=10))
    session.player.add_item(Item(name="Basic Sword", kind="weapon", bonus=5))
    service.fight_current(session)

    restarted = service.restart_run(session)

    assert restarted is not session
    assert restarted.player.name == "Tester"
    assert restarted.seed == 9
    assert restarted.player.base_attack == 10
    assert restarted.player.score == 0
    assert restarted.player.inventory == []
    assert restarted.tracker.battles_won == 0
    assert restarted.tracker.state.index == 0
    assert session.player.score == 120
    assert session.tracker.state.index == 1
