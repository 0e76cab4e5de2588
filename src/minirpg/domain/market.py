"""Market pricing rules."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from minirpg.core.rng import RNG
from minirpg.core.types import Rarity

OFFER_SIZE = 9


@dataclass(frozen=True, slots=True)
class DiscountRange:
    minimum: int
    maximum: int


DISCOUNT_RANGES: Dict[Rarity, DiscountRange] = {
    "common": DiscountRange(5, 25),
    "rare": DiscountRange(10, 40),
    "epic": DiscountRange(15, 55),
    "legendary": DiscountRange(20, 70),
}
_FALLBACK_RANGE = DiscountRange(0, 10)


def roll_discount(rarity: str, rng: RNG) -> int:
    """Draw a discount percentage for ``rarity``."""
    discount_range = DISCOUNT_RANGES.get(rarity, _FALLBACK_RANGE)  # type: ignore[call-overload]
    return rng.randint(discount_range.minimum, discount_range.maximum)


def roll_discounts(rng: RNG) -> Dict[Rarity, int]:
    return {rarity: roll_discount(rarity, rng) for rarity in DISCOUNT_RANGES}


def apply_discount(price: int, percent: int) -> int:
    """Discounted price rounded half up; ``percent`` is clamped to [0, 100]."""
    percent = min(100, max(0, percent))
    return math.floor(price * (1 - percent / 100) + 0.5)
