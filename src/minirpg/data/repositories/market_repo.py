"""Market catalog repository."""
from __future__ import annotations

from typing import Dict, List

from minirpg.core.types import ITEM_KINDS, RARITIES
from minirpg.data.errors import DataValidationError
from minirpg.data.repositories.base import RepositoryBase
from minirpg.domain.defs import ProductDef

_PRODUCT_FIELDS = {"name", "price", "rarity", "kind", "bonus"}
_BONUS_STATS = ("attack", "defense", "health")


class MarketRepository(RepositoryBase[ProductDef]):
    """Loads and validates the purchasable product catalog."""

    def __init__(self, base_path=None) -> None:
        super().__init__("market.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ProductDef]:
        products: Dict[str, ProductDef] = {}
        for raw_id, payload in raw.items():
            context = f"product '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, _PRODUCT_FIELDS, context)
            self._assert_known(data, _PRODUCT_FIELDS, context)

            rarity = self._require_str(data["rarity"], f"{context} rarity")
            if rarity not in RARITIES:
                raise DataValidationError(f"{context} rarity must be one of {list(RARITIES)}.")
            kind = self._require_str(data["kind"], f"{context} kind")
            if kind not in ITEM_KINDS:
                raise DataValidationError(f"{context} kind must be one of {list(ITEM_KINDS)}.")
            bonus_stat, bonus_amount = self._parse_bonus(data["bonus"], context)

            products[raw_id] = ProductDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                price=self._require_int(data["price"], f"{context} price", minimum=0),
                rarity=rarity,  # type: ignore[arg-type]
                kind=kind,  # type: ignore[arg-type]
                bonus_stat=bonus_stat,
                bonus_amount=bonus_amount,
            )
        return products

    def filter_by_rarity(self, rarity: str) -> List[ProductDef]:
        return [product for product in self.all() if product.rarity == rarity]

    def find_by_name(self, name: str) -> ProductDef | None:
        for product in self.all():
            if product.name == name:
                return product
        return None

    def _parse_bonus(self, value: object, context: str) -> tuple[str, int]:
        bonus = self._require_mapping(value, f"{context} bonus")
        if len(bonus) != 1:
            raise DataValidationError(f"{context} bonus must name exactly one stat.")
        ((stat, amount),) = bonus.items()
        if stat not in _BONUS_STATS:
            raise DataValidationError(f"{context} bonus stat must be one of {list(_BONUS_STATS)}.")
        return stat, self._require_int(amount, f"{context} bonus {stat}", minimum=0)
