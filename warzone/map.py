"""Territories, the map graph that connects them, and the loader for .map files."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, TextIO


class MapError(Exception):
    """Raised when a map cannot be read or is inconsistent."""


@dataclass
class Territory:
    """A node of the map: a named territory that belongs to a continent."""

    name: str = ""
    id: int = 0
    continent: str = ""

    def display(self) -> str:
        """Short form of the territory: name and id."""
        return f"({self.name},{self.id}) "

    def __str__(self) -> str:
        return f"({self.name},{self.id},{self.continent}) "


class Map:
    """A graph of territories keyed by name, with an adjacency list per territory."""

    def __init__(self) -> None:
        self._territories: dict[str, Territory] = {}
        self._adjacency: dict[str, list[str]] = {}

    @property
    def territories(self) -> dict[str, Territory]:
        """Territories by name, in name order."""
        return dict(sorted(self._territories.items()))

    @property
    def adjacency(self) -> dict[str, list[str]]:
        """Adjacent territory names for each territory, in name order."""
        return {name: list(names) for name, names in sorted(self._adjacency.items())}

    def add_territory(self, territory: Territory) -> None:
        """Add a territory; a territory already known by that name is kept."""
        self._territories.setdefault(territory.name, territory)

    def add_adjacent_territories(
        self, territory: Territory, adjacent_names: Iterable[str]
    ) -> None:
        """Record the neighbours of a territory; an existing entry is kept."""
        self._adjacency.setdefault(territory.name, list(adjacent_names))

    def _territory(self, name: str) -> Territory:
        try:
            return self._territories[name]
        except KeyError:
            raise MapError(f"Territory {name} does not exist") from None

    def _neighbours(self, name: str) -> list[str]:
        try:
            return self._adjacency[name]
        except KeyError:
            raise MapError(f"Territory {name} has no adjacency entry") from None

    def iterate(self, territory: Territory) -> str:
        """Describe a territory followed by each of its neighbours."""
        neighbours = self._neighbours(territory.name)
        described = "".join(self._territory(name).display() for name in neighbours)
        return f"{territory.display()} : {described}"

    def bfs(self, start: Territory) -> set[str]:
        """Names of the territories reached by following edges from ``start``."""
        visited: set[str] = set()
        queue = deque([start.name])
        while queue:
            for name in self._neighbours(queue.popleft()):
                self._territory(name)
                if name not in visited:
                    visited.add(name)
                    queue.append(name)
        return visited

    def validate(self) -> bool:
        """True when every territory is reachable from the first one by name."""
        if not self._adjacency:
            raise MapError("map has no territories")
        start = self._territory(min(self._adjacency))
        return len(self.bfs(start)) == len(self._adjacency)

    def __str__(self) -> str:
        lines = "".join(f"{territory}\n" for territory in self.territories.values())
        return f"Territories in map:\n{lines}"


def _split_fields(line: str) -> list[str]:
    fields = line.split(",")
    if line.endswith(","):
        fields.pop()
    return [field.strip() for field in fields]


def _field(row: list[str], index: int) -> str:
    try:
        return row[index]
    except IndexError:
        raise MapError(f"territory line {','.join(row)!r} has too few fields") from None


def parse_map(lines: Iterable[str]) -> Map:
    """Build a map from the lines of a .map file."""
    stripped: Iterator[str] = (line.rstrip("\r\n") for line in lines)
    for line in stripped:
        if line == "[Continents]":
            break
    for line in stripped:
        if line == "[Territories]":
            break
    rows = [_split_fields(line) for line in stripped if line]

    game_map = Map()
    for territory_id, row in enumerate(rows):
        name = _field(row, 0)
        continent = _field(row, 3)
        game_map.add_territory(Territory(name, territory_id, continent))

    for row in rows:
        territory = game_map._territory(row[0])
        neighbours = row[4:]
        for name in neighbours:
            if name not in game_map._territories:
                raise MapError(f"Entry {name} does not exist")
        game_map.add_adjacent_territories(territory, neighbours)
    return game_map


def load_map(path: str | Path) -> Map:
    """Read and parse a .map file."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as handle:
            return parse_map(handle)
    except OSError:
        raise MapError(f"failed to open {path}") from None


class MapLoader:
    """Loads a map file, reporting its territories and any failure."""

    def __init__(
        self, stdout: TextIO | None = None, stderr: TextIO | None = None
    ) -> None:
        self.game_map = Map()
        self._stdout = stdout
        self._stderr = stderr

    def load_map(self, file_name: str | Path) -> bool:
        """Load ``file_name``; on failure report it and keep an empty map."""
        out = self._stdout or sys.stdout
        err = self._stderr or sys.stderr
        try:
            game_map = load_map(file_name)
            lines = [
                game_map.iterate(game_map._territory(name))
                for name in game_map._adjacency
            ]
        except MapError as error:
            print("Map not Valid", file=err)
            print(error, file=err)
            self.game_map = Map()
            return False
        for line in lines:
            print(line, file=out)
        self.game_map = game_map
        return True

    def __str__(self) -> str:
        return f"{self.game_map}\n"