"""Deterministic battle resolution between the player and one opponent."""
from __future__ import annotations

import logging
from typing import Callable, List

from minirpg.domain.battle_models import BattleOutcome, BattleSimulation
from minirpg.domain.entities import Boss, Combatant, Enemy, Item, Player
from minirpg.domain.scoring import score_victory

logger = logging.getLogger(__name__)

MAX_TURNS = 100

Simulator = Callable[[Player, Combatant], BattleSimulation]
Scorer = Callable[[Combatant], int]


def simulate_battle(player: Player, enemy: Combatant, *, max_turns: int = MAX_TURNS) -> BattleSimulation:
    """Run the turn loop without touching the player.

    The player strikes first each turn. The enemy's hit is applied as
    ``health + defense - attack``, so surplus defense heals.
    """
    player_attack = player.effective_attack()
    player_defense = player.effective_defense()
    player_health = player.effective_max_health()
    enemy_attack = enemy.attack_power
    enemy_health = enemy.health

    log: List[str] = [
        f"Battle: {player.name} vs {enemy.name}",
        f"Player - ATK: {player_attack}, DEF: {player_defense}, HP: {player_health}/{player_health}",
        f"Enemy - ATK: {enemy_attack}, HP: {enemy_health}",
    ]
    winner = "draw"
    turns = 0
    while turns < max_turns:
        turns += 1
        log.append(f"--- Turn {turns} ---")

        enemy_health -= player_attack
        log.append(
            f"{player.name} attacks for {player_attack} damage -> "
            f"{enemy.name} has {max(0, enemy_health)} HP left"
        )
        if enemy_health <= 0:
            log.append(f"{enemy.name} has been defeated!")
            winner = "player"
            break

        health_before = player_health
        player_health = player_health + player_defense - enemy_attack
        log.append(
            f"{enemy.name} attacks for {enemy_attack} damage, blocked by {player_defense} defense -> "
            f"{player.name} {health_before} HP -> {max(0, player_health)} HP"
        )
        if player_health <= 0:
            log.append(f"{player.name} has been defeated!")
            winner = "enemy"
            break

    return BattleSimulation(
        winner=winner,  # type: ignore[arg-type]
        turns_elapsed=turns,
        player_health=player_health,
        enemy_health=enemy_health,
        turn_log=tuple(log),
    )


def resolve_battle(
    player: Player | None,
    enemy: Combatant | None,
    *,
    simulate: Simulator = simulate_battle,
    score: Scorer = score_victory,
) -> BattleOutcome:
    """Resolve one encounter and apply its result to the player.

    A win adds the awarded points to ``player.score`` and stores the
    remaining health; a loss stores zero health; a draw changes nothing.
    Invalid arguments produce an ``error`` outcome instead of raising.
    """
    problem = _validate_arguments(player, enemy)
    if problem is not None:
        logger.warning("Battle rejected: %s", problem)
        return BattleOutcome(winner="error", detail=problem)
    assert player is not None and enemy is not None

    simulation = simulate(player, enemy)
    log = list(simulation.turn_log)
    points = 0

    if simulation.winner == "player":
        points = score(enemy)
        if isinstance(enemy, Boss):
            log.append(f"Boss defeated! Points x {enemy.damage_multiplier} (boss multiplier)")
        log.append(f"VICTORY - {player.name} earns {points} points!")
        player.add_score(points)
        player.current_health = max(0, simulation.player_health)
    elif simulation.winner == "enemy":
        log.append(f"DEFEAT - {player.name} earns no points")
        player.current_health = 0
    else:
        log.append("DRAW - the battle ended without a victor")
    log.append(f"Total turns: {simulation.turns_elapsed}")

    logger.info(
        "Battle %s vs %s: winner=%s points=%d turns=%d",
        player.name,
        enemy.name,
        simulation.winner,
        points,
        simulation.turns_elapsed,
    )
    return BattleOutcome(
        winner=simulation.winner,
        points_awarded=points,
        turn_log=tuple(log),
        turns_elapsed=simulation.turns_elapsed,
    )


def _validate_arguments(player: object, enemy: object) -> str | None:
    if player is None or enemy is None:
        return "Missing argument(s): a player and an enemy are required."
    if not isinstance(player, Player) or not isinstance(enemy, (Enemy, Boss)):
        return "Arguments must be a Player and an Enemy or Boss."
    if not _is_int(enemy.attack_power) or not _is_int(enemy.health):
        return f"Enemy '{enemy.name}' stats must be whole numbers."
    if enemy.attack_power < 0 or enemy.health <= 0:
        return f"Enemy '{enemy.name}' has invalid stats."
    if isinstance(enemy, Boss):
        multiplier = enemy.damage_multiplier
        if not isinstance(multiplier, (int, float)) or isinstance(multiplier, bool):
            return f"Boss '{enemy.name}' damage multiplier must be a number."
        if multiplier <= 0:
            return f"Boss '{enemy.name}' has an invalid damage multiplier."
    if not all(_is_int(value) for value in (player.base_attack, player.base_defense, player.max_health)):
        return f"Player '{player.name}' stats must be whole numbers."
    if player.base_attack < 0 or player.base_defense < 0:
        return f"Player '{player.name}' has invalid stats."
    if not isinstance(player.inventory, list):
        return f"Player '{player.name}' inventory must be a list of items."
    for item in player.inventory:
        if not isinstance(item, Item) or not _is_int(item.bonus):
            return f"Player '{player.name}' carries an invalid inventory entry: {item!r}."
    return None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
