"""Character creation rules: attribute budget and name normalization."""
from __future__ import annotations

import re
from dataclasses import dataclass

from minirpg.domain.entities.player import DEFAULT_MAX_HEALTH

ATTRIBUTE_BUDGET = 10
MAX_NAME_LENGTH = 20
DEFAULT_PLAYER_NAME = "Adventurer"

_DISALLOWED_NAME_CHARS = re.compile(r"[^a-zA-ZáéíóúüñÁÉÍÓÚÜÑ\s]")


@dataclass(frozen=True, slots=True)
class AttributeAllocation:
    """Points spent on each attribute during character creation."""

    health: int = 0
    attack: int = 0
    defense: int = 0

    def clamped(self) -> "AttributeAllocation":
        return AttributeAllocation(
            health=max(0, self.health),
            attack=max(0, self.attack),
            defense=max(0, self.defense),
        )

    @property
    def spent(self) -> int:
        return self.health + self.attack + self.defense

    @property
    def remaining(self) -> int:
        return ATTRIBUTE_BUDGET - self.spent


def max_health_for(allocation: AttributeAllocation) -> int:
    return DEFAULT_MAX_HEALTH + allocation.health


def normalize_player_name(raw: str) -> str:
    """Strip disallowed characters, capitalize and truncate a typed name."""
    value = _DISALLOWED_NAME_CHARS.sub("", raw or "")
    if value:
        value = value[0].upper() + value[1:]
    value = value[:MAX_NAME_LENGTH]
    if not value.strip():
        return DEFAULT_PLAYER_NAME
    return value


def validate_player_name(raw: str) -> str | None:
    """Return an error message for an unusable name, or None when it is valid."""
    if not raw:
        return "A name is required."
    if not raw.strip():
        return "The name cannot be only spaces."
    if _DISALLOWED_NAME_CHARS.search(raw):
        return "Only letters and spaces are allowed."
    if len(raw) > MAX_NAME_LENGTH:
        return f"The name can have at most {MAX_NAME_LENGTH} characters."
    if not raw[0].isupper():
        return "The name must start with an uppercase letter."
    return None
