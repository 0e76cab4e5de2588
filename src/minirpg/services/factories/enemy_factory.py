"""Factory for creating enemies and bosses from definitions."""
from __future__ import annotations

from typing import Tuple

from minirpg.data.repositories import EnemiesRepository
from minirpg.domain.defs import EnemyDef
from minirpg.domain.entities import Boss, Enemy
from minirpg.services.errors import FactoryError


def _get_def(enemy_id: str, enemies_repo: EnemiesRepository) -> EnemyDef:
    try:
        return enemies_repo.get(enemy_id)
    except KeyError as exc:
        raise FactoryError(f"Enemy '{enemy_id}' not found.") from exc


def create_enemy(enemy_id: str, enemies_repo: EnemiesRepository) -> Enemy:
    """Instantiate a regular enemy."""
    enemy_def = _get_def(enemy_id, enemies_repo)
    if enemy_def.is_boss:
        raise FactoryError(f"Enemy '{enemy_id}' is a boss definition.")
    return Enemy(name=enemy_def.name, attack_power=enemy_def.attack_power, health=enemy_def.health)


def create_boss(enemy_id: str, enemies_repo: EnemiesRepository) -> Boss:
    """Instantiate a boss."""
    enemy_def = _get_def(enemy_id, enemies_repo)
    if not enemy_def.is_boss:
        raise FactoryError(f"Enemy '{enemy_id}' is not a boss definition.")
    assert enemy_def.special_ability is not None and enemy_def.damage_multiplier is not None
    return Boss(
        name=enemy_def.name,
        attack_power=enemy_def.attack_power,
        health=enemy_def.health,
        special_ability_name=enemy_def.special_ability,
        damage_multiplier=enemy_def.damage_multiplier,
    )


def create_roster(roster_id: str, enemies_repo: EnemiesRepository) -> Tuple[Tuple[Enemy, ...], Boss]:
    """Build the ordered regular enemies and the boss of a roster."""
    try:
        roster = enemies_repo.get_roster(roster_id)
    except KeyError as exc:
        raise FactoryError(f"Roster '{roster_id}' not found.") from exc
    enemies = tuple(create_enemy(enemy_id, enemies_repo) for enemy_id in roster.enemy_ids)
    return enemies, create_boss(roster.boss_id, enemies_repo)
