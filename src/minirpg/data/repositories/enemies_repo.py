"""Enemies repository."""
from __future__ import annotations

from typing import Dict

from minirpg.data.errors import DataReferenceError, DataValidationError
from minirpg.data.repositories.base import RepositoryBase
from minirpg.domain.defs import EnemyDef, RosterDef

_ENEMY_FIELDS = {"name", "attack_power", "health"}
_BOSS_FIELDS = _ENEMY_FIELDS | {"special_ability", "damage_multiplier"}
_ROSTER_FIELDS = {"name", "enemy_ids", "boss_id"}


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates enemy, boss and roster definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)
        self._rosters: Dict[str, RosterDef] = {}

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        self._rosters = {}
        for raw_id, payload in raw.items():
            context = f"enemy '{raw_id}'"
            enemy_data = self._require_mapping(payload, context)
            if "enemy_ids" in enemy_data:
                self._assert_required(enemy_data, _ROSTER_FIELDS, context)
                self._assert_known(enemy_data, _ROSTER_FIELDS, context)
                self._rosters[raw_id] = RosterDef(
                    id=raw_id,
                    name=self._require_str(enemy_data["name"], f"{context} name"),
                    enemy_ids=tuple(self._require_str_list(enemy_data["enemy_ids"], f"{context} enemy_ids")),
                    boss_id=self._require_str(enemy_data["boss_id"], f"{context} boss_id"),
                )
                continue

            is_boss = "special_ability" in enemy_data
            expected = _BOSS_FIELDS if is_boss else _ENEMY_FIELDS
            self._assert_required(enemy_data, expected, context)
            self._assert_known(enemy_data, expected, context)
            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                attack_power=self._require_int(enemy_data["attack_power"], f"{context} attack_power", minimum=0),
                health=self._require_int(enemy_data["health"], f"{context} health", minimum=1),
                special_ability=(
                    self._require_str(enemy_data["special_ability"], f"{context} special_ability")
                    if is_boss
                    else None
                ),
                damage_multiplier=(
                    self._require_multiplier(enemy_data["damage_multiplier"], f"{context} damage_multiplier")
                    if is_boss
                    else None
                ),
            )
        self._validate_rosters(enemies)
        return enemies

    def get_roster(self, roster_id: str) -> RosterDef:
        """Return a roster definition."""
        self._ensure_loaded()
        try:
            return self._rosters[roster_id]
        except KeyError as exc:
            raise KeyError(roster_id) from exc

    def _validate_rosters(self, enemies: Dict[str, EnemyDef]) -> None:
        for roster in self._rosters.values():
            for enemy_id in roster.enemy_ids:
                enemy = enemies.get(enemy_id)
                if enemy is None:
                    raise DataReferenceError(f"Roster '{roster.id}' references unknown enemy '{enemy_id}'.")
                if enemy.is_boss:
                    raise DataReferenceError(f"Roster '{roster.id}' lists boss '{enemy_id}' as a regular enemy.")
            boss = enemies.get(roster.boss_id)
            if boss is None or not boss.is_boss:
                raise DataReferenceError(f"Roster '{roster.id}' boss_id '{roster.boss_id}' is not a boss.")

    @staticmethod
    def _require_multiplier(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        if value <= 0:
            raise DataValidationError(f"{context} must be positive.")
        return float(value)
