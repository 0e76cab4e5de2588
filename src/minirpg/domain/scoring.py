"""Victory point rules."""
from __future__ import annotations

import math

from minirpg.domain.entities import Boss, Combatant

VICTORY_BASE_POINTS = 100
BOUNTY_POINTS = 5
BOSS_BONUS_POINTS = 10


def base_victory_points(enemy_attack: int) -> int:
    return VICTORY_BASE_POINTS + enemy_attack + BOUNTY_POINTS


def score_victory(enemy: Combatant) -> int:
    """Points for defeating ``enemy``.

    Regular enemies award ``100 + attack + 5``. Bosses multiply that by their
    damage multiplier, round down and add a flat 10.
    """
    points = base_victory_points(enemy.attack_power)
    if isinstance(enemy, Boss):
        return math.floor(points * enemy.damage_multiplier) + BOSS_BONUS_POINTS
    return points
