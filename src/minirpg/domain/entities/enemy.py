"""Enemy and boss models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

DEFAULT_DAMAGE_MULTIPLIER = 2.0


@dataclass(frozen=True, slots=True)
class Enemy:
    """A regular opponent. Its stats are fixed configuration."""

    has_attack: ClassVar[bool] = True
    has_defense: ClassVar[bool] = False

    name: str
    attack_power: int
    health: int

    def describe(self) -> str:
        return f"{self.name}: {self.attack_power} attack, {self.health} health."


@dataclass(frozen=True, slots=True)
class Boss:
    """The final opponent of a run; its victory points are multiplied."""

    has_attack: ClassVar[bool] = True
    has_defense: ClassVar[bool] = False

    name: str
    attack_power: int
    health: int
    special_ability_name: str
    damage_multiplier: float = DEFAULT_DAMAGE_MULTIPLIER

    def describe(self) -> str:
        return f"{self.name}, the final boss. Special ability: {self.special_ability_name}."


Combatant = Union[Enemy, Boss]
