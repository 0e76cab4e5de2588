"""Factories for creating runtime entities."""

from .enemy_factory import create_boss, create_enemy, create_roster
from .player_factory import create_player

__all__ = [
    "create_boss",
    "create_enemy",
    "create_player",
    "create_roster",
]
