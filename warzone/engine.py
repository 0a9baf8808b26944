"""The game loop: map choice, players, territory assignment and turns, plus the menu."""

from __future__ import annotations

import argparse
import copy
import random
import sys
from pathlib import Path
from typing import Iterator, TextIO

from .demos import demo_cards, demo_load_maps, demo_orders_lists, demo_players
from .map import Map, MapError, MapLoader
from .orders import Advance, Airlift, Blockade, Bomb, Deploy, Negotiate, Order
from .player import Player

DEFAULT_MAPS_DIR = Path("../resources/maps")
DEMO_MAP_NAMES = ("World++.map", "World2005.map")
MAX_PLAYERS = 5

MENU = (
    "Choose an option:\n1 - Test Load Maps\n2 - Test Players\n3 - Test Orders List\n"
    "4 - Test Cards\n5 - Test Game States\n0 - Quit\n"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _as_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _listing(orders: list[Order]) -> str:
    return "".join(f"{index} {order.description}\n" for index, order in enumerate(orders))


class GameEngine:
    """Runs one interactive game, reading answers from ``stdin``."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        maps_dir: str | Path = DEFAULT_MAPS_DIR,
        rng: random.Random | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._tokens = _tokens(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr
        self.maps_dir = Path(maps_dir)
        self.rng = rng if rng is not None else random.Random()
        self.game_map: Map | None = None
        self.players: list[Player] = []

    def _say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def _next_token(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input ended before the game was over") from None

    def _read_int(self) -> int | None:
        return _as_int(self._next_token())

    def _report_connectivity(self, game_map: Map) -> None:
        try:
            connected = game_map.validate()
        except MapError as error:
            self._say(str(error))
            return
        self._say("Graph is connected" if connected else "Graph is not connected")

    def _choose_map(self) -> Map:
        loader = MapLoader(stdout=self._out, stderr=self._err)
        game_map: Map | None = None
        while True:
            self._say("Enter the name of your map...")
            name = self._next_token()
            self._say(f"Loading {name}")
            if loader.load_map(self.maps_dir / f"{name}.map"):
                game_map = loader.game_map
                self._report_connectivity(game_map)
            else:
                game_map = None
            self._say("Proceed with this map?\n1- Yes\n2- No")
            if self._read_int() != 1:
                continue
            if game_map is None:
                self._say("No map has been loaded")
                continue
            return game_map

    def _add_players(self) -> list[Player]:
        players: list[Player] = []
        while True:
            self._say("New Player Name (press 0 to stop): ", end="")
            name = self._next_token()
            if name == "0":
                if players:
                    self._say(f"There are {len(players)} players")
                    break
                self._say("Must have at least one player.")
                continue
            player = Player(name)
            for order in (Deploy(), Advance(), Bomb(), Blockade(), Airlift(), Negotiate()):
                player.orders.add_order(order)
            players.append(player)
            if len(players) >= MAX_PLAYERS:
                self._say("\nMax amount of players have been reached!")
                self._say(f"There are {len(players)} players")
                break
        self._say("State: Players Added")
        return players

    def _assign_territories(self, game_map: Map) -> None:
        self._say("Assigning territories to Players")
        taken: set[str] = set()
        for player in self.players:
            free = [
                territory
                for name, territory in game_map.territories.items()
                if name not in taken
            ]
            if not free:
                raise MapError("not enough territories for every player")
            territory = self.rng.choice(free)
            taken.add(territory.name)
            self._say(f"Assigning Territory {territory.name} to {player.name}")
            player.territories.append(copy.copy(territory))

    def _choose_order(self, available: list[Order]) -> Order:
        while True:
            self._say("Which order would you like to issue?")
            choice = self._read_int()
            if choice is not None and 0 <= choice < len(available):
                return available.pop(choice)
            self._say("Pick a valid choice")

    def _take_turn(self, player: Player) -> list[str]:
        available = player.orders.orders
        self._say(f"It is {player}'s turn\n{player}'s Orders List\n\n{_listing(available)}")
        to_execute = [self._choose_order(available)]
        while True:
            self._say("Would you like to issue more orders?\n1 - Yes\n2 - No")
            choice = self._read_int()
            if choice == 2:
                self._say("End Issue Orders")
                self._say(f"{player}'s Orders List\n\n\n{_listing(available)}")
                break
            if choice == 1:
                self._say(_listing(available), end="")
                to_execute.append(self._choose_order(available))
            else:
                self._say("Pick a valid choice")
        self._say("-------------------------\nState: Execute Orders")
        results = []
        for order in to_execute:
            result = order.execute() or ""
            self._say(result)
            results.append(result)
        return results

    def _game_over(self, player: Player) -> bool:
        while True:
            self._say("Did you win?\n1 - Yes\n2 - No")
            choice = self._read_int()
            if choice == 1:
                self._say(f"{player} has won")
                while True:
                    self._say("Would you like a rematch?\n1 - Yes\n2 - No")
                    rematch = self._read_int()
                    if rematch == 2:
                        return True
                    if rematch == 1:
                        break
                    self._say("Pick a valid choice")
            elif choice == 2:
                return False
            else:
                self._say("Pick a valid choice")

    def run(self) -> Player:
        """Play until a winner declines a rematch; return that winner."""
        self._say("Starting game...\nLoading map...")
        self.game_map = self._choose_map()
        self._say("Map loaded")
        self._say("Adding Players...")
        self.players = self._add_players()
        self._assign_territories(self.game_map)
        while True:
            for player in self.players:
                self._take_turn(player)
                if self._game_over(player):
                    return player


def run_game_states(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    maps_dir: str | Path = DEFAULT_MAPS_DIR,
    rng: random.Random | None = None,
) -> Player:
    """Run one interactive game and return its winner."""
    return GameEngine(stdin, stdout, maps_dir, rng).run()


def main(argv: list[str] | None = None) -> int:
    """Menu that starts each demonstration or a game."""
    parser = argparse.ArgumentParser(prog="warzone", description="Warzone game menu")
    parser.add_argument(
        "--maps-dir",
        default=str(DEFAULT_MAPS_DIR),
        help="directory holding the .map files",
    )
    args = parser.parse_args(argv)
    maps_dir = Path(args.maps_dir)
    stdin, stdout = sys.stdin, sys.stdout
    tokens = _tokens(stdin)
    try:
        while True:
            print(MENU, end="", file=stdout)
            try:
                token = next(tokens)
            except StopIteration:
                return 0
            choice = _as_int(token)
            if choice == 1:
                print("Testing Maps", file=stdout)
                demo_load_maps([maps_dir / name for name in DEMO_MAP_NAMES], stdout)
            elif choice == 2:
                print("Testing Players", file=stdout)
                demo_players(stdout)
            elif choice == 3:
                print("Testing Orders List", file=stdout)
                demo_orders_lists(stdin, stdout)
                print("I have tested the orders lists", file=stdout)
            elif choice == 4:
                print("Testing Cards", file=stdout)
                demo_cards(stdout=stdout)
            elif choice == 5:
                run_game_states(stdin, stdout, maps_dir)
                return 0
            elif choice == 0:
                print("This is the end of the game", file=stdout)
                return 0
            else:
                print("You have chosen a wrong choice", file=stdout)
    except (EOFError, MapError) as error:
        print(error, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())