"""Session state owned by the top-level controller."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from minirpg.core.rng import RNG
from minirpg.core.types import Rarity
from minirpg.domain.character import AttributeAllocation
from minirpg.domain.entities import Player
from minirpg.domain.progression import ProgressionTracker


@dataclass(slots=True)
class MarketOffer:
    """Products shown on the current market visit and their discounts."""

    product_ids: List[str] = field(default_factory=list)
    discounts: Dict[Rarity, int] = field(default_factory=dict)


@dataclass
class GameSession:
    """Everything one run needs; replaced wholesale on restart."""

    seed: int
    rng: RNG
    player: Player
    tracker: ProgressionTracker
    allocation: AttributeAllocation = field(default_factory=AttributeAllocation)
    roster_id: str = "main_run"
    market_offer: MarketOffer | None = None
    items_purchased: int = 0
