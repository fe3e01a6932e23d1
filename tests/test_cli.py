import io

import pytest

from tictacnet.cli import DEFAULT_TRAINING_GAMES, _parse_game_count, main

ALL_MOVES_INPUT = "".join(f"{i}\n" for i in range(9))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5", 5),
        ("+7", 7),
        ("0", 0),
        ("abc", DEFAULT_TRAINING_GAMES),
        ("-3", DEFAULT_TRAINING_GAMES),
        ("4294967296", DEFAULT_TRAINING_GAMES),
        (None, DEFAULT_TRAINING_GAMES),
    ],
)
def test_parse_game_count(text, expected):
    assert _parse_game_count(text) == expected


def test_default_training_games():
    assert _parse_game_count(None) == 2_000_000
    assert _parse_game_count("") == 2_000_000


def test_main_plays_one_game_without_training(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(ALL_MOVES_INPUT))
    assert main(["0"]) == 0
    text = capsys.readouterr().out
    assert text.startswith("Creating neural network...\n")
    assert "Training" not in text
    assert "Welcome to Tic-Tac-Toe!" in text
    assert text.endswith("Thanks for playing!\n")


def test_main_trains_before_playing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["2"]) == 0
    text = capsys.readouterr().out
    assert "Training against random player with 2 games..." in text
    assert "Training complete! 2 games played." in text
    assert "Training completed!" in text
    assert text.endswith("Thanks for playing!\n")


def test_main_stops_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["0"]) == 0
    text = capsys.readouterr().out
    assert "Your move (0-8):" in text
    assert "Play again?" not in text