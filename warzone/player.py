"""A player with orders, a hand of cards and owned territories."""

from __future__ import annotations

from typing import Iterable

from .cards import Hand
from .map import Map, Territory
from .orders import Advance, Airlift, Blockade, Bomb, Deploy, Negotiate, Order, OrdersList

_ISSUED_ORDERS: dict[int, type[Order]] = {
    1: Deploy,
    2: Advance,
    3: Bomb,
    4: Blockade,
    5: Airlift,
    6: Negotiate,
}


class Player:
    """A named player holding orders, cards and territories."""

    def __init__(self, name: str = "", territories: Iterable[Territory] | None = None) -> None:
        self.name = name
        self.orders = OrdersList()
        self.hand = Hand()
        self.territories: list[Territory] = list(territories or [])

    def __str__(self) -> str:
        return self.name

    def _listing(self) -> str:
        return "".join(f"{index} {order.description}\n" for index, order in enumerate(self.orders))

    def to_attack(self, game_map: Map) -> list[str]:
        """Print and return each owned territory with its neighbours, in map order."""
        print(f"{self.name} can attack:")
        lines = [
            game_map.iterate(territory)
            for name in game_map.adjacency
            for territory in self.territories
            if territory.name == name
        ]
        for line in lines:
            print(line)
        return lines

    def to_defend(self) -> str:
        """Print and return the territories this player has to defend."""
        described = "".join(territory.display() for territory in self.territories)
        print(f"{self.name} has to defend:\n{described}", end="")
        return described

    def issue_order(self, card_num: int) -> Order | None:
        """Add the order for ``card_num`` to the player's list and return it."""
        print(f"{self.name}'s Orders List\n{self._listing()}")
        factory = _ISSUED_ORDERS.get(card_num)
        order = None if factory is None else factory()
        print("Adding ", end="")
        if order is not None:
            self.orders.add_order(order)
            print(order.description)
        print(f"After Issuing:\n{self._listing()}")
        print(
            "-----------------------------\nIssuing Order...\n"
            "-----------------------------\nCurrent Orders:"
        )
        return order