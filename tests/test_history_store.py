from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from minirpg.domain.entities import Player
from minirpg.domain.ranking import RunSummary, build_run_summary, rank_summaries
from minirpg.presentation.cli.history_store import RankingHistoryStore
from minirpg.services.errors import HistoryStoreError


def _summary(name: str, score: int, currency: int = 0) -> RunSummary:
    return RunSummary(name=name, final_score=score, final_currency=currency, timestamp="2024-01-01T00:00:00+00:00")


def test_missing_history_is_empty(tmp_path: Path) -> None:
    store = RankingHistoryStore(tmp_path / "history.json")

    assert store.load() == []
    assert store.ranked() == []


def test_record_appends_and_ranks_by_score(tmp_path: Path) -> None:
    store = RankingHistoryStore(tmp_path / "nested" / "history.json")
    store.record(_summary("Mage", 280))
    store.record(_summary("Knight", 350))
    store.record(_summary("Archer", 280))

    assert [entry.name for entry in store.load()] == ["Mage", "Knight", "Archer"]
    assert [entry.name for entry in store.ranked()] == ["Knight", "Mage", "Archer"]


def test_corrupt_history_raises(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(HistoryStoreError):
        RankingHistoryStore(path).load()


def test_history_entries_are_validated(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    path.write_text('[{"name": "Ana", "final_score": "high"}]', encoding="utf-8")

    with pytest.raises(HistoryStoreError):
        RankingHistoryStore(path).load()


def test_build_run_summary_captures_player() -> None:
    player = Player(name="Ana", score=245, currency=120)

    summary = build_run_summary(player, now=datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc))

    assert summary == RunSummary(
        name="Ana",
        final_score=245,
        final_currency=120,
        timestamp="2024-05-06T07:08:00+00:00",
    )


def test_rank_summaries_is_stable() -> None:
    ranked = rank_summaries([_summary("A", 10), _summary("B", 30), _summary("C", 10)])

    assert [entry.name for entry in ranked] == ["B", "A", "C"]
