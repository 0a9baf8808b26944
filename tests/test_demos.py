import io
import random

import pytest

from warzone.demos import demo_cards, demo_load_maps, demo_orders_lists, demo_players
from warzone.orders import Advance, Airlift, Blockade, Bomb, Deploy, Negotiate


def _write_map(tmp_path, name, territory_lines):
    path = tmp_path / name
    path.write_text(
        "[Map]\nauthor=someone\n\n[Continents]\nNA=5\n\n[Territories]\n"
        + "\n".join(territory_lines)
        + "\n",
        encoding="utf-8",
    )
    return path


def test_load_maps_reports_connected(tmp_path):
    path = _write_map(tmp_path, "ok.map", ["A,0,0,NA,B", "B,0,0,NA,A"])
    out = io.StringIO()
    assert demo_load_maps([path], out) == [True]
    text = out.getvalue()
    assert f"Loading file: {path}" in text
    assert "Graph is connected" in text


def test_load_maps_reports_disconnected(tmp_path):
    path = _write_map(tmp_path, "split.map", ["A,0,0,NA,B", "B,0,0,NA,A", "C,0,0,NA,C"])
    out = io.StringIO()
    assert demo_load_maps([path], out) == [False]
    assert "Graph is not connected" in out.getvalue()


def test_load_maps_missing_file(tmp_path, capsys):
    out = io.StringIO()
    assert demo_load_maps([tmp_path / "absent.map"], out) == [None]
    assert "Map not Valid" in capsys.readouterr().err


def test_demo_players_issues_every_kind():
    out = io.StringIO()
    player = demo_players(out)
    assert [type(order) for order in player.orders] == [
        Deploy, Advance, Bomb, Blockade, Airlift, Negotiate,
    ]
    assert "Dummy can attack:" in out.getvalue()
    assert "Dummy has to defend:" in out.getvalue()


def test_demo_orders_lists_move_and_remove():
    out = io.StringIO()
    result = demo_orders_lists(io.StringIO("1 6\n3\n"), out)
    assert [type(order) for order in result] == [Negotiate, Advance, Blockade, Airlift, Deploy]
    assert "New order list:" in out.getvalue()


def test_demo_orders_lists_out_of_range():
    out = io.StringIO()
    result = demo_orders_lists(io.StringIO("9 1\n0\n"), out)
    assert len(result) == 6
    text = out.getvalue()
    assert "Input out of range" in text
    assert " Out of range" in text


def test_demo_orders_lists_needs_input():
    with pytest.raises(EOFError):
        demo_orders_lists(io.StringIO("1\n"), io.StringIO())


def test_demo_cards_returns_all_cards_to_deck():
    out = io.StringIO()
    deck, player = demo_cards(random.Random(7), out)
    assert len(deck.cards) == 10
    assert player.hand.cards == []
    assert len(player.orders) == 5
    assert all(1 <= card.kind <= 6 for card in deck.cards)
    assert out.getvalue().startswith("Creating Deck...")


def test_demo_cards_is_repeatable_with_seed():
    first, _ = demo_cards(random.Random(3), io.StringIO())
    second, _ = demo_cards(random.Random(3), io.StringIO())
    assert first.cards == second.cards