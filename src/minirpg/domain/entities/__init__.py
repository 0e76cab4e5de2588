"""Runtime entity exports."""

from .enemy import Boss, Combatant, Enemy
from .item import Item
from .player import Player

__all__ = [
    "Boss",
    "Combatant",
    "Enemy",
    "Item",
    "Player",
]
