"""File-system storage for the ranked history of finished runs."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from minirpg.domain.ranking import RunSummary, rank_summaries
from minirpg.presentation.cli import config
from minirpg.services.errors import HistoryStoreError

logger = logging.getLogger(__name__)


class RankingHistoryStore:
    """Appends run summaries to a JSON list on disk."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else config.get_history_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[RunSummary]:
        """Return stored summaries in insertion order; a missing file is empty."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise HistoryStoreError(f"Unable to read history file: {self._path}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise HistoryStoreError(f"History file is corrupt: {self._path}") from exc
        if not isinstance(raw, list):
            raise HistoryStoreError("History file must contain a list.")
        return [self._parse_entry(entry, index) for index, entry in enumerate(raw)]

    def record(self, summary: RunSummary) -> None:
        """Append ``summary`` and persist the whole list."""
        entries = self.load()
        entries.append(summary)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = [entry.to_payload() for entry in entries]
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("Recorded run for %s with %d points", summary.name, summary.final_score)

    def ranked(self) -> List[RunSummary]:
        return rank_summaries(self.load())

    @staticmethod
    def _parse_entry(entry: Any, index: int) -> RunSummary:
        context = f"history entry {index}"
        if not isinstance(entry, dict):
            raise HistoryStoreError(f"{context} must be an object.")
        try:
            name = entry["name"]
            final_score = entry["final_score"]
            final_currency = entry["final_currency"]
            timestamp = entry["timestamp"]
        except KeyError as exc:
            raise HistoryStoreError(f"{context} is missing '{exc.args[0]}'.") from exc
        if not isinstance(name, str) or not isinstance(timestamp, str):
            raise HistoryStoreError(f"{context} has invalid text fields.")
        if not isinstance(final_score, int) or not isinstance(final_currency, int):
            raise HistoryStoreError(f"{context} has invalid numeric fields.")
        return RunSummary(
            name=name,
            final_score=final_score,
            final_currency=final_currency,
            timestamp=timestamp,
        )
