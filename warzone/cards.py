"""Cards, the deck they are drawn from and the hand that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .orders import Advance, Airlift, Blockade, Bomb, Deploy, Negotiate, Order, OrdersList

_CARD_ORDERS: dict[int, type[Order]] = {
    1: Airlift,
    2: Blockade,
    3: Bomb,
    4: Negotiate,
    5: Deploy,
    6: Advance,
}


def order_for_card(card_type: int) -> Order | None:
    """A new order for a card type, or None when the type has no order."""
    factory = _CARD_ORDERS.get(card_type)
    return None if factory is None else factory()


@dataclass
class Card:
    """A card whose kind decides the order it creates when played."""

    kind: int = 0

    def __str__(self) -> str:
        return str(self.kind)

    def play(self, hand: Hand, orders: OrdersList) -> Card:
        """Add this card's order to ``orders``, take a card off ``hand`` and return self."""
        order = order_for_card(self.kind)
        if order is not None:
            orders.add_order(order)
        mine = "".join(f"{card}\t" for card in hand.cards)
        print(f"\n------------------------\nMy Cards: \t{mine}\nI play: {self}")
        if any(card.kind == self.kind for card in hand.cards):
            hand.cards.pop()
        return self


@dataclass
class Deck:
    """A pile of cards; cards are drawn from its end."""

    cards: list[Card] = field(default_factory=list)

    def draw(self, hand: Hand) -> Card:
        """Move the last card of the deck to the front of ``hand`` and return it."""
        if not self.cards:
            raise IndexError("cannot draw from an empty deck")
        card = self.cards.pop()
        hand.cards.insert(0, card)
        return card

    def __str__(self) -> str:
        return "".join(f"{card}\t" for card in self.cards)


@dataclass
class Hand:
    """The cards a player holds."""

    cards: list[Card] = field(default_factory=list)

    def draw(self, deck: Deck) -> Card:
        """Draw one card from ``deck`` into this hand and return it."""
        return deck.draw(self)

    def __str__(self) -> str:
        return "".join(f"{card}\t" for card in self.cards)