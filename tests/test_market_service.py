from __future__ import annotations

import json
from pathlib import Path

from minirpg.core.rng import RNG
from minirpg.data.repositories import MarketRepository
from minirpg.domain.entities import Boss, Player
from minirpg.domain.market import DISCOUNT_RANGES, apply_discount
from minirpg.domain.progression import ProgressionTracker
from minirpg.domain.state import GameSession
from minirpg.services.market_service import (
    ItemPurchasedEvent,
    MarketService,
    PurchaseCompletedEvent,
    PurchaseFailedEvent,
)


def _write_json(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(
        definitions_dir / "market.json",
        {
            "basic_sword": {"name": "Basic Sword", "price": 25, "rarity": "common", "kind": "weapon", "bonus": {"attack": 5}},
            "light_armor": {"name": "Light Armor", "price": 40, "rarity": "rare", "kind": "armor", "bonus": {"defense": 10}},
            "grenade": {"name": "Grenade", "price": 20, "rarity": "rare", "kind": "consumable", "bonus": {"attack": 30}},
        },
    )
    return definitions_dir


def _make_session(seed: int = 3) -> GameSession:
    boss = Boss(name="Dragon", attack_power=50, health=150, special_ability_name="Flame Burst")
    return GameSession(
        seed=seed,
        rng=RNG(seed),
        player=Player(name="Tester"),
        tracker=ProgressionTracker(enemies=(), boss=boss),
    )


def _make_service(tmp_path: Path) -> MarketService:
    return MarketService(market_repo=MarketRepository(base_path=_make_definitions_dir(tmp_path)))


def test_open_market_offers_discounted_products(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    session = _make_session()

    view = service.open_market(session)

    assert view.currency == 500
    assert sorted(entry.product_id for entry in view.entries) == ["basic_sword", "grenade", "light_armor"]
    for entry in view.entries:
        discount_range = DISCOUNT_RANGES[entry.rarity]
        assert discount_range.minimum <= entry.discount <= discount_range.maximum
        assert entry.price == apply_discount(entry.original_price, entry.discount)


def test_same_seed_gives_same_offer(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    first = service.open_market(_make_session(seed=11))
    second = service.open_market(_make_session(seed=11))

    assert [(e.product_id, e.price) for e in first.entries] == [(e.product_id, e.price) for e in second.entries]


def test_offer_size_limits_products(tmp_path: Path) -> None:
    service = MarketService(
        market_repo=MarketRepository(base_path=_make_definitions_dir(tmp_path)),
        offer_size=2,
    )

    view = service.open_market(_make_session())

    assert len(view.entries) == 2


def test_buy_many_deducts_currency_and_adds_items(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    session = _make_session()
    view = service.open_market(session)
    prices = {entry.product_id: entry.price for entry in view.entries}

    events = service.buy_many(session, ["light_armor", "basic_sword"])

    assert [type(event) for event in events] == [ItemPurchasedEvent, ItemPurchasedEvent, PurchaseCompletedEvent]
    total = prices["light_armor"] + prices["basic_sword"]
    assert session.player.currency == 500 - total
    assert [item.name for item in session.player.inventory] == ["Light Armor", "Basic Sword"]
    assert session.player.effective_attack() == 5
    assert session.player.effective_defense() == 10
    assert session.items_purchased == 2
    assert service.cart_total(session, ["light_armor", "basic_sword"]) == total


def test_off_kind_bonus_is_dropped_on_purchase(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    session = _make_session()
    service.open_market(session)

    service.buy_many(session, ["grenade"])

    assert session.player.inventory[0].bonus == 0
    assert session.player.effective_attack() == 0
    assert session.player.effective_max_health() == 100


def test_buy_many_is_all_or_nothing(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    session = _make_session()
    service.open_market(session)
    session.player.currency = 30

    events = service.buy_many(session, ["basic_sword", "light_armor"])

    assert len(events) == 1
    assert isinstance(events[0], PurchaseFailedEvent)
    assert events[0].reason == "insufficient_currency"
    assert session.player.currency == 30
    assert session.player.inventory == []
    assert session.items_purchased == 0


def test_buy_rejects_empty_and_unknown_carts(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    session = _make_session()
    service.open_market(session)

    empty = service.buy_many(session, [])
    unknown = service.buy_many(session, ["excalibur"])

    assert isinstance(empty[0], PurchaseFailedEvent) and empty[0].reason == "empty_cart"
    assert isinstance(unknown[0], PurchaseFailedEvent) and unknown[0].reason == "not_offered"
    assert session.player.currency == 500


def test_buy_before_opening_market_fails(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    session = _make_session()

    events = service.buy_many(session, ["basic_sword"])

    assert isinstance(events[0], PurchaseFailedEvent)
    assert events[0].reason == "not_offered"


def test_catalog_queries(tmp_path: Path) -> None:
    service = _make_service(tmp_path)

    assert [product.id for product in service.filter_by_rarity("rare")] == ["grenade", "light_armor"]
    found = service.find_product("Basic Sword")
    assert found is not None and found.price == 25
    assert service.find_product("Excalibur") is None


def test_apply_discount_rounds_half_up_and_clamps() -> None:
    assert apply_discount(15, 10) == 14
    assert apply_discount(25, 20) == 20
    assert apply_discount(100, 150) == 0
    assert apply_discount(100, -5) == 100


def test_buy_rejects_the_same_offer_twice(tmp_path: Path) -> None:
    service = _make_service(tmp_path)
    session = _make_session()
    service.open_market(session)

    events = service.buy_many(session, ["basic_sword", "light_armor", "basic_sword"])

    assert len(events) == 1
    assert isinstance(events[0], PurchaseFailedEvent)
    assert events[0].reason == "duplicate"
    assert "basic_sword" in events[0].message
    assert session.player.currency == 500
    assert session.player.inventory == []
    assert session.items_purchased == 0
