"""Service layer exports."""

from .battle_service import resolve_battle, simulate_battle
from .character_service import CharacterService
from .errors import FactoryError, HistoryStoreError, RunCompleteError
from .market_service import MarketService
from .run_service import RunReport, RunService

__all__ = [
    "CharacterService",
    "FactoryError",
    "HistoryStoreError",
    "MarketService",
    "RunCompleteError",
    "RunReport",
    "RunService",
    "resolve_battle",
    "simulate_battle",
]
