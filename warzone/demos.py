"""Demonstrations of maps, players, orders lists and cards."""

from __future__ import annotations

import random
import sys
from contextlib import redirect_stdout
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from .cards import Card, Deck
from .map import Map, MapError, MapLoader, Territory
from .orders import Advance, Airlift, Blockade, Bomb, Deploy, Negotiate, OrdersList
from .player import Player

DEFAULT_MAP_FILES = (
    "../resources/maps/World++.map",
    "../resources/maps/World2005.map",
)

_STARS = "\n***********************************\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("expected a number, but input ended") from None
    return int(token)


def _numbered(orders: OrdersList) -> str:
    return "".join(f"{index} {order.description}\n" for index, order in enumerate(orders, 1))


def demo_load_maps(
    paths: Iterable[str | Path] | None = None, stdout: TextIO | None = None
) -> list[bool | None]:
    """Load each map file and report whether it is connected; None marks a failure."""
    out = stdout if stdout is not None else sys.stdout
    results: list[bool | None] = []
    for path in DEFAULT_MAP_FILES if paths is None else paths:
        print(f"Loading file: {path}", file=out)
        loader = MapLoader(stdout=out)
        if not loader.load_map(path):
            results.append(None)
            continue
        try:
            connected = loader.game_map.validate()
        except MapError as error:
            print(error, file=out)
            results.append(None)
            continue
        print("Graph is connected" if connected else "Graph is not connected", file=out)
        results.append(connected)
    return results


def demo_players(stdout: TextIO | None = None) -> Player:
    """Show a player's attack and defence options, then issue one order of each kind."""
    out = stdout if stdout is not None else sys.stdout
    with redirect_stdout(out):
        canada = Territory("Canada", 1, "NA")
        usa = Territory("USA", 2, "NA")
        mexico = Territory("Mexico", 3, "NA")
        player = Player("Dummy", [canada])

        game_map = Map()
        for territory in (canada, usa, mexico):
            game_map.add_territory(territory)
        game_map.add_adjacent_territories(canada, [usa.name, mexico.name])

        player.to_attack(game_map)
        player.to_defend()
        print()
        for card_num in range(1, 7):
            player.issue_order(card_num)
    return player


def demo_orders_lists(stdin: TextIO | None = None, stdout: TextIO | None = None) -> OrdersList:
    """Build a list of every order, then move and remove orders chosen on ``stdin``."""
    out = stdout if stdout is not None else sys.stdout
    tokens = _tokens(stdin if stdin is not None else sys.stdin)
    with redirect_stdout(out):
        print("Creating Orders...")
        orders = [Deploy(), Advance(), Bomb(), Blockade(), Airlift(), Negotiate()]
        orders_list = OrdersList()
        for order in orders:
            orders_list.add_order(order)

        print(f"\n{_numbered(orders_list)}")
        print(f"\nPrinting effect of each order type:\n{_STARS}", end="")
        for index, order in enumerate(orders_list, 1):
            print(f"{index} {order}\n")
        print(f"{_STARS}\nTesting to print specific order:")
        index = len(orders) + 1
        for order in orders:
            print(f"{index} {order}\n")
        print(_STARS)

        print("Input the order number you want to move: ", end="")
        i = _read_int(tokens)
        print("Where to input it? : ", end="")
        j = _read_int(tokens)
        try:
            orders_list.move(i, j)
        except IndexError as error:
            print(error)
        print(f"\nNew order list:\n{_numbered(orders_list)}")

        print("Input the order number you want to remove: ", end="")
        r = _read_int(tokens)
        try:
            orders_list.remove(r)
        except IndexError as error:
            print(f" {error}")
        print(f"\nNew order list:\n{_numbered(orders_list)}")
    return orders_list


def demo_cards(
    rng: random.Random | None = None, stdout: TextIO | None = None
) -> tuple[Deck, Player]:
    """Fill a deck with random cards, draw five into a hand and play them all back."""
    rng = rng if rng is not None else random.Random()
    out = stdout if stdout is not None else sys.stdout
    with redirect_stdout(out):
        print("Creating Deck...")
        deck = Deck([Card(rng.randint(1, 6)) for _ in range(10)])
        print(f"\nState: Deck contains: \t{deck}\n------------------------")

        player = Player("dummy")
        for _ in range(5):
            player.hand.draw(deck)

        print("\nState: Player has drawn 5 cards")
        print(f"\nState: Deck contains: \t{deck}")
        print(f"State: Player Hand before playing: \t{player.hand}")

        print("\nHand plays all cards...")
        for card in reversed(list(player.hand.cards)):
            deck.cards.insert(0, card.play(player.hand, player.orders))
            print(f"\nState: Deck contains: \t{deck}", end="")
        print()
    return deck, player