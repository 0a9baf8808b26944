"""A console turn-based territory conquest game: maps, orders, cards, players and the game loop."""

__version__ = "0.1.0"
__all__ = ["cards", "demos", "engine", "map", "orders", "player"]