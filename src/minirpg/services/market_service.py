"""Market visits and all-or-nothing cart purchases."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from minirpg.data.repositories import MarketRepository
from minirpg.domain.defs import ProductDef
from minirpg.domain.market import OFFER_SIZE, apply_discount, roll_discounts
from minirpg.domain.state import GameSession, MarketOffer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MarketEvent:
    """Base class for market-related events."""


@dataclass(slots=True)
class ItemPurchasedEvent(MarketEvent):
    product_id: str
    item_name: str
    price: int


@dataclass(slots=True)
class PurchaseCompletedEvent(MarketEvent):
    item_count: int
    total_cost: int
    remaining_currency: int


@dataclass(slots=True)
class PurchaseFailedEvent(MarketEvent):
    reason: str
    message: str


@dataclass(slots=True)
class MarketEntryView:
    product_id: str
    name: str
    kind: str
    rarity: str
    bonus_stat: str
    bonus_amount: int
    original_price: int
    price: int
    discount: int


@dataclass(slots=True)
class MarketView:
    currency: int
    entries: List[MarketEntryView] = field(default_factory=list)


class MarketService:
    """Deterministic market offers drawn from the session RNG."""

    def __init__(self, *, market_repo: MarketRepository, offer_size: int = OFFER_SIZE) -> None:
        self._market_repo = market_repo
        self._offer_size = offer_size

    def open_market(self, session: GameSession) -> MarketView:
        """Roll a fresh offer for this visit and return its view."""
        discounts = roll_discounts(session.rng)
        products = session.rng.sample(self._market_repo.all(), self._offer_size)
        session.market_offer = MarketOffer(
            product_ids=[product.id for product in products],
            discounts=discounts,
        )
        logger.debug("Market offer: %s with discounts %s", session.market_offer.product_ids, discounts)
        return self.build_view(session)

    def build_view(self, session: GameSession) -> MarketView:
        offer = session.market_offer or MarketOffer()
        entries = [self._to_entry(self._market_repo.get(product_id), offer) for product_id in offer.product_ids]
        return MarketView(currency=session.player.currency, entries=entries)

    def cart_total(self, session: GameSession, product_ids: Sequence[str]) -> int:
        view = {entry.product_id: entry for entry in self.build_view(session).entries}
        return sum(view[product_id].price for product_id in product_ids if product_id in view)

    def buy_many(self, session: GameSession, product_ids: Sequence[str]) -> List[MarketEvent]:
        """Buy every product in the cart, or nothing at all."""
        if not product_ids:
            return [PurchaseFailedEvent(reason="empty_cart", message="The cart is empty.")]
        duplicates = sorted({product_id for product_id in product_ids if product_ids.count(product_id) > 1})
        if duplicates:
            return [
                PurchaseFailedEvent(
                    reason="duplicate",
                    message=f"Each offer can be added to the cart once: {', '.join(duplicates)}.",
                )
            ]
        offered = {entry.product_id: entry for entry in self.build_view(session).entries}
        missing = [product_id for product_id in product_ids if product_id not in offered]
        if missing:
            return [
                PurchaseFailedEvent(
                    reason="not_offered",
                    message=f"Not available on this visit: {', '.join(missing)}.",
                )
            ]
        total = sum(offered[product_id].price for product_id in product_ids)
        player = session.player
        if not player.spend_currency(total):
            return [
                PurchaseFailedEvent(
                    reason="insufficient_currency",
                    message=f"The cart costs {total} but only {player.currency} is available.",
                )
            ]

        events: List[MarketEvent] = []
        for product_id in product_ids:
            product = self._market_repo.get(product_id)
            item = player.add_item(product.to_item())
            events.append(
                ItemPurchasedEvent(product_id=product_id, item_name=item.name, price=offered[product_id].price)
            )
        session.items_purchased += len(product_ids)
        events.append(
            PurchaseCompletedEvent(
                item_count=len(product_ids),
                total_cost=total,
                remaining_currency=player.currency,
            )
        )
        logger.info("%s bought %d item(s) for %d", player.name, len(product_ids), total)
        return events

    def filter_by_rarity(self, rarity: str) -> List[ProductDef]:
        return self._market_repo.filter_by_rarity(rarity)

    def find_product(self, name: str) -> ProductDef | None:
        return self._market_repo.find_by_name(name)

    @staticmethod
    def _to_entry(product: ProductDef, offer: MarketOffer) -> MarketEntryView:
        discount = offer.discounts.get(product.rarity, 0)
        return MarketEntryView(
            product_id=product.id,
            name=product.name,
            kind=product.kind,
            rarity=product.rarity,
            bonus_stat=product.bonus_stat,
            bonus_amount=product.bonus_amount,
            original_price=product.price,
            price=apply_discount(product.price, discount),
            discount=discount,
        )
