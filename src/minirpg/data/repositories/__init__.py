"""Repository exports."""

from .enemies_repo import EnemiesRepository
from .market_repo import MarketRepository

__all__ = [
    "EnemiesRepository",
    "MarketRepository",
]
