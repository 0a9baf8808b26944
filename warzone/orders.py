"""Orders a player can issue and the ordered list that holds them."""

from __future__ import annotations

import copy
from typing import Iterator

from .map import Territory


def _describe(territory: Territory | None) -> str:
    return "None" if territory is None else str(territory)


class Order:
    """An order with a description and a description of its effect."""

    kind: str | None = None
    default_description: str = ""
    default_effect: str = ""

    def __init__(self, description: str | None = None, effect: str | None = None) -> None:
        self.description = self.default_description if description is None else description
        self.effect = self.default_effect if effect is None else effect

    def validate(self) -> bool:
        """Whether the order may be executed; every order is valid for now."""
        return True

    def execute(self) -> str | None:
        """Execute the order if it validates; return what was done, if anything."""
        if self.kind is None or not self.validate():
            return None
        return f"{self.kind} order validated and executed"

    def __str__(self) -> str:
        return f"{self.description} {self.effect}"


class Deploy(Order):
    """Put a certain number of army units on a target territory."""

    kind = "Deploy"
    default_description = "Deploy order"
    default_effect = " -> Put a certain number of army units on a target territory"

    def __init__(self, territory: Territory | None = None, num_of_army: int = 0) -> None:
        super().__init__()
        self.territory = territory
        self.num_of_army = num_of_army

    def __str__(self) -> str:
        return (
            f"{self.description}\n{self.effect}"
            f"\nNumber of army deployed: {self.num_of_army}"
            f"\nDeploy to: {_describe(self.territory)}"
        )


class Advance(Order):
    """Move army units from a source territory to a target territory."""

    kind = "Advance"
    default_description = "Advance order"
    default_effect = (
        "-> Move a certain number of army units from one territory (source territory)"
        "\nto another territory(target territory)"
    )

    def __init__(
        self,
        target: Territory | None = None,
        source: Territory | None = None,
        army: int = 0,
    ) -> None:
        super().__init__()
        self.target = target
        self.source = source
        self.army = army

    def __str__(self) -> str:
        return (
            f"{self.description}\n{self.effect}"
            f"\nNumber of army advanced : {self.army}"
            f"\nAdvance from: {_describe(self.source)}"
            f"\nTo: {_describe(self.target)}"
        )


class Bomb(Order):
    """Destroy half of the army units located on a target territory."""

    kind = "Bomb"
    default_description = "Bomb order"
    default_effect = "-> Destroy half of the army units located on a target territory"

    def __init__(self, target: Territory | None = None) -> None:
        super().__init__()
        self.target = target

    def __str__(self) -> str:
        return (
            f"{self.description}\n{self.effect}"
            f"\nTarget to bomb: {_describe(self.target)}"
        )


class Blockade(Order):
    """Triple the army units on a territory and make it neutral."""

    kind = "Blockade"
    default_description = "Blockade order"
    default_effect = (
        "-> Triple the number of army units on a target territory "
        "and make it a neutral territory"
    )

    def __init__(self, blocked_territory: Territory | None = None) -> None:
        super().__init__()
        self.blocked_territory = blocked_territory

    def __str__(self) -> str:
        return (
            f"{self.description}\n{self.effect}"
            f"\nBlocked territory: {_describe(self.blocked_territory)}"
        )


class Airlift(Order):
    """Advance army units from one territory to any other territory."""

    kind = "Airlift"
    default_description = "Airlift Order"
    default_effect = (
        "-> Advance a certain number of army units from one from one territory "
        "(source territory)\nto another territory (target territory)."
    )

    def __init__(
        self,
        source: Territory | None = None,
        target: Territory | None = None,
        army: int = 0,
    ) -> None:
        super().__init__()
        self.source = copy.copy(source)
        self.target = copy.copy(target)
        self.army = army

    def __str__(self) -> str:
        return (
            f"{self.description}\n{self.effect}"
            f"\nNumber of army advanced with airlift : {self.army}"
            f"\nFrom: {_describe(self.source)} To : {_describe(self.target)}"
        )


class Negotiate(Order):
    """Prevent attacks between two players until the end of the turn."""

    kind = "Negotiate"
    default_description = "Negotiate order"
    default_effect = (
        "-> Prevent attacks between the current player and another target player "
        "until the end of the turn."
    )

    def __str__(self) -> str:
        return f"{self.description}\n{self.effect}"


class OrdersList:
    """An ordered list of orders, addressed by 1-based positions."""

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: list[Order] = list(orders or [])

    @property
    def orders(self) -> list[Order]:
        """A copy of the orders in their current order."""
        return list(self._orders)

    def add_order(self, order: Order) -> None:
        """Append an order at the end of the list."""
        self._orders.append(order)

    def _check(self, position: int, message: str) -> None:
        if not 0 < position <= len(self._orders):
            raise IndexError(message)

    def remove(self, index: int) -> Order:
        """Remove and return the order at 1-based ``index``."""
        self._check(index, "Out of range")
        return self._orders.pop(index - 1)

    def move(self, i: int, j: int) -> None:
        """Swap the orders at 1-based positions ``i`` and ``j``."""
        self._check(i, "Input out of range")
        self._check(j, "Input out of range")
        self._orders[i - 1], self._orders[j - 1] = self._orders[j - 1], self._orders[i - 1]

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    def __getitem__(self, index: int) -> Order:
        return self._orders[index]

    def __str__(self) -> str:
        names = "".join(f"{order.description} " for order in self._orders)
        return f"Printing out list of order: {names}End of list\n"