# warzone

A console turn-based territory conquest game. Territories and their links are
read from Conquest-style `.map` files. Players are given territories, hold
hands of cards and issue orders (deploy, advance, bomb, blockade, airlift,
negotiate) that go into their orders list and are then executed.

## Installing

```
pip install .
```

## Playing

```
warzone
warzone --maps-dir path/to/maps
```

`--maps-dir` names the directory that holds the `.map` files; it defaults to
`../resources/maps`, relative to the current directory. The command opens a
menu, read from standard input:

```
1 - Test Load Maps
2 - Test Players
3 - Test Orders List
4 - Test Cards
5 - Test Game States
0 - Quit
```

- **1** loads `World++.map` and `World2005.map` from the maps directory and
  says whether each map's territories form a connected graph.
- **2** shows a sample player's attack and defence options, then issues one
  order of each kind.
- **3** builds a list of all six orders, prints them, then asks for two
  positions to swap and one position to remove (positions count from 1).
- **4** fills a deck with ten random cards, draws five into a hand and plays
  them back into the deck.
- **5** starts a game, described below. When the game ends, the command exits.
- **0** quits.

### A game

The game asks for a map name and loads `<name>.map` from the maps directory,
reporting whether the map is connected, then asks whether to proceed with it.
It then asks for player names, one at a time; enter `0` to stop. There must be
at least one player and at most five. Each player is given one territory at
random, no two players the same one.

Players then take turns. On a turn, a player picks orders from their orders
list by number (counting from 0) until answering that no more orders are to be
issued; the chosen orders are then executed. After each turn the game asks
whether that player won. A winner who declines a rematch ends the game.

If standard input ends before the game is over, the command reports it and
exits with status 1.

## Map files

A map file has a `[Continents]` section followed by a `[Territories]` section.
Every non-empty line after `[Territories]` describes one territory as
comma-separated fields, with spaces around each field ignored:

```
[Continents]
North America=5

[Territories]
Alaska,70,126,North America,Northwest Territory,Alberta,Kamchatka
```

The first field is the territory name, the fourth its continent, and every
field from the fifth on names an adjacent territory. Every adjacent name must
be a territory defined in the file, or the file is rejected. Territories are
numbered from 0 in the order they appear.

## Using it as a library

```python
from warzone.map import load_map
from warzone.orders import Deploy, Bomb, OrdersList
from warzone.player import Player

game_map = load_map("maps/World.map")
connected = game_map.validate()   # True when every territory is reachable

orders = OrdersList()
orders.add_order(Deploy())
orders.add_order(Bomb())
orders.move(1, 2)   # positions count from 1
orders.remove(1)    # returns the removed order

player = Player("Alice")
player.issue_order(3)   # adds a Bomb order and returns it
```

- `warzone.map`: `Territory`, `Map` (`add_territory`,
  `add_adjacent_territories`, `iterate`, `bfs`, `validate`), `parse_map`,
  `load_map` and `MapLoader`. `load_map` and `parse_map` raise `MapError`;
  `MapLoader.load_map` instead returns `False`, reports the error and keeps an
  empty map.
- `warzone.orders`: `Order` and its kinds `Deploy`, `Advance`, `Bomb`,
  `Blockade`, `Airlift`, `Negotiate`, and `OrdersList`. `OrdersList.move` and
  `OrdersList.remove` raise `IndexError` for a position out of range.
- `warzone.cards`: `Card`, `Deck`, `Hand` and `order_for_card`.
- `warzone.player`: `Player` (`to_attack`, `to_defend`, `issue_order`).
- `warzone.demos`: the menu's demonstrations as functions taking their input
  and output streams.
- `warzone.engine`: `GameEngine`, `run_game_states` and `main`.

## What it does not do

Orders carry no game effect: executing an order only reports that it was
validated and executed, and every order is valid. Armies, reinforcements and
combat are not modelled, so a win is whatever the players answer when asked.
Games are not saved.

## Running the tests

```
pip install .[test]
pytest
```