"""Console-driven UI loop for minirpg."""
from __future__ import annotations

import secrets
from typing import List

from minirpg.data.repositories import EnemiesRepository, MarketRepository
from minirpg.domain.character import ATTRIBUTE_BUDGET, AttributeAllocation
from minirpg.domain.entities import Boss
from minirpg.domain.state import GameSession
from minirpg.presentation.cli import config, render
from minirpg.presentation.cli.history_store import RankingHistoryStore
from minirpg.services.character_service import CharacterService
from minirpg.services.errors import HistoryStoreError
from minirpg.services.market_service import (
    MarketService,
    MarketView,
    PurchaseCompletedEvent,
    PurchaseFailedEvent,
)
from minirpg.services.run_service import RunService

_MAX_RANDOM_SEED = 2**31 - 1


def main() -> None:
    """Start the interactive CLI session."""
    run_service = RunService(enemies_repo=EnemiesRepository())
    market_service = MarketService(market_repo=MarketRepository())
    character_service = CharacterService()
    history = RankingHistoryStore()
    options = config.load_config()
    print("=== minirpg ===")
    session = _create_session(run_service, character_service)
    while True:
        _market_loop(market_service, session)
        _battle_loop(run_service, session, options["turn_log_mode"])
        _final_screen(run_service, session, history)
        if not _confirm("Play again with the same character? [y/N] "):
            break
        session = run_service.restart_run(session)
    print("Goodbye!")


def _create_session(run_service: RunService, character_service: CharacterService) -> GameSession:
    while True:
        name = input("Character name: ")
        allocation = _prompt_allocation()
        result = character_service.create_character(name, allocation)
        if result.success and result.player is not None:
            print(result.message)
            return run_service.new_session(
                player_name=result.player.name,
                seed=secrets.randbelow(_MAX_RANDOM_SEED),
                allocation=result.allocation,
            )
        print(result.message)


def _prompt_allocation() -> AttributeAllocation:
    print(f"Distribute {ATTRIBUTE_BUDGET} points between health, attack and defense.")
    return AttributeAllocation(
        health=_prompt_int("Health points: "),
        attack=_prompt_int("Attack points: "),
        defense=_prompt_int("Defense points: "),
    )


def _market_loop(market_service: MarketService, session: GameSession) -> None:
    view = market_service.open_market(session)
    while True:
        print()
        _print_market(view)
        choice = input("Item numbers to buy (comma separated, empty to leave): ").strip()
        if not choice:
            return
        product_ids = _parse_selection(choice, view)
        if product_ids is None:
            print("Invalid selection.")
            continue
        events = market_service.buy_many(session, product_ids)
        for event in events:
            if isinstance(event, PurchaseFailedEvent):
                print(event.message)
            elif isinstance(event, PurchaseCompletedEvent):
                print(
                    f"Bought {event.item_count} item(s) for {render.format_price(event.total_cost)}; "
                    f"{render.format_price(event.remaining_currency)} left."
                )
        view = market_service.build_view(session)


def _print_market(view: MarketView) -> None:
    print(f"Market  |  Money: {render.format_price(view.currency)}")
    for index, entry in enumerate(view.entries, start=1):
        print(
            f"{index}. {entry.name} [{entry.rarity} {entry.kind}] +{entry.bonus_amount} {entry.bonus_stat}  "
            f"{render.format_price(entry.original_price)} -> {render.format_price(entry.price)} (-{entry.discount}%)"
        )


def _parse_selection(raw: str, view: MarketView) -> List[str] | None:
    product_ids: List[str] = []
    for piece in raw.split(","):
        piece = piece.strip()
        if not piece.isdigit():
            return None
        index = int(piece) - 1
        if not 0 <= index < len(view.entries):
            return None
        product_ids.append(view.entries[index].product_id)
    return product_ids


def _battle_loop(run_service: RunService, session: GameSession, turn_log_mode: str) -> None:
    tracker = session.tracker
    while not tracker.state.is_complete:
        opponent = run_service.current_opponent(session)
        print()
        render.print_lines(render.render_player(session.player))
        label = "FINAL BOSS" if isinstance(opponent, Boss) else "Next battle"
        print(f"{label}: {opponent.describe()}")
        input("Press Enter to fight...")
        outcome = run_service.fight_current(session)
        render.print_lines(render.render_outcome(outcome, turn_log_mode))
        if outcome.is_error:
            return


def _final_screen(run_service: RunService, session: GameSession, history: RankingHistoryStore) -> None:
    if not session.tracker.state.is_complete:
        return
    report = run_service.finish_run(session)
    print()
    print(render.render_tier(report.tier))
    print(f"Battles won: {report.battles_won}/{report.total_encounters}  |  Items bought: {report.items_purchased}")
    try:
        history.record(report.summary)
        render.print_lines(render.render_ranking(history.ranked(), highlight=report.summary))
    except HistoryStoreError as exc:
        print(f"Ranking unavailable: {exc}")


def _prompt_int(prompt: str) -> int:
    while True:
        raw = input(prompt).strip() or "0"
        try:
            return int(raw)
        except ValueError:
            print("Please enter a whole number.")


def _confirm(prompt: str) -> bool:
    return input(prompt).strip().lower() in {"y", "yes"}
