import io
import random
import sys

import pytest

from warzone.engine import GameEngine, main, run_game_states
from warzone.map import MapError

SMALL_MAP = """[Continents]
North=5
[Territories]
Alpha,1,1,North,Beta
Beta,2,2,North,Alpha,Gamma
Gamma,3,3,North,Beta
"""


@pytest.fixture
def maps_dir(tmp_path):
    (tmp_path / "small.map").write_text(SMALL_MAP, encoding="utf-8")
    return tmp_path


def play(maps_dir, script, seed=0):
    out = io.StringIO()
    err = io.StringIO()
    engine = GameEngine(
        io.StringIO(script), out, maps_dir=maps_dir, rng=random.Random(seed), stderr=err
    )
    winner = engine.run()
    return engine, winner, out.getvalue(), err.getvalue()


def test_single_player_game(maps_dir):
    script = "small\n1\nann\n0\n0\n2\n1\n2\n"
    winner = run_game_states(io.StringIO(script), io.StringIO(), maps_dir, random.Random(1))
    assert winner.name == "ann"
    assert len(winner.territories) == 1
    assert winner.territories[0].name in {"Alpha", "Beta", "Gamma"}


def test_game_output_reports_execution_and_winner(maps_dir):
    _, _, out, _ = play(maps_dir, "small\n1\nann\n0\n0\n2\n1\n2\n")
    assert "Graph is connected" in out
    assert "Deploy order validated and executed" in out
    assert "ann has won" in out
    assert "State: Players Added" in out


def test_territories_are_distinct(maps_dir):
    script = "small\n1\na\nb\nc\n0\n0\n2\n2\n0\n2\n1\n2\n"
    engine, winner, _, _ = play(maps_dir, script, seed=3)
    names = [p.territories[0].name for p in engine.players]
    assert len(set(names)) == len(engine.players) == 3
    assert winner.name == "b"


def test_too_many_players_for_map(maps_dir):
    script = "small\n1\na\nb\nc\nd\n0\n"
    with pytest.raises(MapError):
        play(maps_dir, script)


def test_max_players_reached(tmp_path):
    rows = "".join(f"T{i},1,1,North,T{(i + 1) % 6}\n" for i in range(6))
    (tmp_path / "ring.map").write_text(f"[Continents]\n[Territories]\n{rows}", encoding="utf-8")
    script = "ring\n1\na\nb\nc\nd\ne\n0\n2\n1\n2\n"
    engine, winner, out, _ = play(tmp_path, script)
    assert "Max amount of players have been reached!" in out
    assert len(engine.players) == 5
    assert winner is engine.players[0]


def test_invalid_order_choice_is_rejected(maps_dir):
    _, winner, out, _ = play(maps_dir, "small\n1\nann\n0\n9\nx\n0\n2\n1\n2\n")
    assert out.count("Pick a valid choice") == 2
    assert winner.name == "ann"


def test_several_orders_execute_in_issue_order(maps_dir):
    _, _, out, _ = play(maps_dir, "small\n1\nann\n0\n0\n1\n0\n2\n1\n2\n")
    deploy = out.index("Deploy order validated and executed")
    advance = out.index("Advance order validated and executed")
    assert deploy < advance


def test_turn_does_not_consume_player_orders(maps_dir):
    _, winner, _, _ = play(maps_dir, "small\n1\nann\n0\n0\n1\n0\n2\n1\n2\n")
    assert len(winner.orders) == 6


def test_missing_map_then_retry(maps_dir):
    engine, _, _, err = play(maps_dir, "nosuch\n2\nsmall\n1\nann\n0\n0\n2\n1\n2\n")
    assert "Map not Valid" in err
    assert "failed to open" in err
    assert set(engine.game_map.territories) == {"Alpha", "Beta", "Gamma"}


def test_proceeding_without_map_asks_again(maps_dir):
    engine, winner, out, _ = play(maps_dir, "nosuch\n1\nsmall\n1\nann\n0\n0\n2\n1\n2\n")
    assert out.count("Enter the name of your map...") == 2
    assert "Alpha" in engine.game_map.territories
    assert winner.name == "ann"


def test_at_least_one_player_required(maps_dir):
    _, winner, out, _ = play(maps_dir, "small\n1\n0\nann\n0\n0\n2\n1\n2\n")
    assert "Must have at least one player." in out
    assert winner.name == "ann"


def test_rematch_asks_again(maps_dir):
    _, _, out, _ = play(maps_dir, "small\n1\nann\n0\n0\n2\n1\n1\n1\n2\n")
    assert out.count("Did you win?") == 2
    assert out.count("ann has won") == 2


def test_end_of_input_raises(maps_dir):
    with pytest.raises(EOFError):
        play(maps_dir, "small\n1\nann\n")


def test_main_quit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "This is the end of the game" in capsys.readouterr().out


def test_main_wrong_choice(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "You have chosen a wrong choice" in out
    assert out.count("Choose an option:") == 2


def test_main_ends_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Choose an option:" in capsys.readouterr().out


def test_main_orders_list_demo(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1\n2\n1\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "I have tested the orders lists" in out
    assert "This is the end of the game" in out


def test_main_load_maps_demo(monkeypatch, capsys, maps_dir):
    (maps_dir / "World++.map").write_text(SMALL_MAP, encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n0\n"))
    assert main(["--maps-dir", str(maps_dir)]) == 0
    out = capsys.readouterr().out
    assert out.count("Loading file:") == 2
    assert "Graph is connected" in out


def test_main_game(monkeypatch, capsys, maps_dir):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\nsmall\n1\nann\n0\n0\n2\n1\n2\n"))
    assert main(["--maps-dir", str(maps_dir)]) == 0
    assert "ann has won" in capsys.readouterr().out


def test_main_game_input_ends(monkeypatch, capsys, maps_dir):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\nsmall\n"))
    assert main(["--maps-dir", str(maps_dir)]) == 1