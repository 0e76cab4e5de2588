"""Shared type aliases for the core and domain layers."""
from typing import Literal

ItemKind = Literal["weapon", "armor", "consumable"]
Rarity = Literal["common", "rare", "epic", "legendary"]
Winner = Literal["player", "enemy", "draw", "error"]
Tier = Literal["PRO", "PARTIAL", "LOSER"]
ProgressionPhase = Literal["awaiting_battle", "awaiting_boss", "complete"]
TurnLogMode = Literal["full", "summary"]

ITEM_KINDS: tuple[ItemKind, ...] = ("weapon", "armor", "consumable")
RARITIES: tuple[Rarity, ...] = ("common", "rare", "epic", "legendary")

__all__ = [
    "ITEM_KINDS",
    "ItemKind",
    "ProgressionPhase",
    "RARITIES",
    "Rarity",
    "Tier",
    "TurnLogMode",
    "Winner",
]
