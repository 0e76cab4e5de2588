"""Domain definition exports."""

from .enemy_def import EnemyDef, RosterDef
from .product_def import ProductDef

__all__ = [
    "EnemyDef",
    "ProductDef",
    "RosterDef",
]
