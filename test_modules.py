"""
Tests for the console front end and the command line.
"""

import random

import pytest

import main
from logic.game_state import GameMode, Difficulty
from logic.session import GameSession


def scripted(*answers):
    """Input function that replays answers, then behaves like Ctrl+D."""
    remaining = iter(answers)

    def _input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return _input


def test_console_friend_game(capsys):
    session = GameSession()
    game = main.ConsoleGame(session, GameMode.FRIEND, input_func=scripted("0", "3", "1", "4", "2", "q"))
    game.start()

    out = capsys.readouterr().out
    assert "Mode: friend" in out
    assert "X WINS!" in out
    assert "X Wins: 1  O Wins: 0  Ties: 0" in out
    assert "Goodbye!" in out


def test_console_reports_bad_input(capsys):
    session = GameSession()
    game = main.ConsoleGame(session, GameMode.FRIEND, input_func=scripted("abc", "4", "4", "12", "q"))
    game.start()

    out = capsys.readouterr().out
    assert "Not a cell: 'abc'" in out
    assert "Cell 4 is already occupied by X" in out
    assert "Invalid position 12" in out


def test_console_restart_clears_round():
    session = GameSession()
    game = main.ConsoleGame(session, GameMode.FRIEND, input_func=scripted("4", "r", "q"))
    game.start()
    assert session.state.board == [None] * 9


def test_console_ai_game_prints_computer_move(capsys):
    session = GameSession()
    game = main.ConsoleGame(session, GameMode.SINGLE, Difficulty.HARD, input_func=scripted("0", "q"))
    game.start()

    out = capsys.readouterr().out
    assert "Difficulty: Hard" in out
    assert "Computer plays 4" in out


def test_console_blitz_starts_next_round_by_itself(capsys):
    session = GameSession(rng=random.Random(3))
    moves = [str(i) for i in range(9)] * 3
    game = main.ConsoleGame(session, GameMode.BLITZ, Difficulty.EASY, input_func=scripted(*moves))
    game.start()

    # Any nine answers in a row try every cell, so each such run ends a round
    scores = session.state.scores
    assert scores.x + scores.o + scores.ties >= 2

    out = capsys.readouterr().out
    assert "Press Enter" not in out


def test_console_survives_end_of_input(capsys):
    session = GameSession()
    game = main.ConsoleGame(session, GameMode.FRIEND, input_func=scripted())
    game.start()

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


def test_parser_defaults():
    args = main.build_parser().parse_args([])
    assert not args.no_ui
    assert args.mode == "single"
    assert args.difficulty == "medium"
    assert args.seed is None


def test_parser_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--mode", "online"])


def test_main_console_mode(monkeypatch, capsys):
    answers = scripted("0", "3", "1", "4", "2", "q")
    monkeypatch.setattr("builtins.input", answers)

    main.main(["--no-ui", "--mode", "friend", "--seed", "1"])

    out = capsys.readouterr().out
    assert "X WINS!" in out


def test_main_console_hard_ai_is_never_beaten(monkeypatch):
    played = []

    def record_session(*args, **kwargs):
        session = GameSession(*args, **kwargs)
        played.append(session)
        return session

    monkeypatch.setattr(main, "GameSession", record_session)
    monkeypatch.setattr("builtins.input", scripted("0", "1", "2", "3", "5", "6", "7", "8", "q"))

    main.main(["--no-ui", "--difficulty", "hard"])

    assert played[0].state.scores.x == 0
    assert played[0].state.scores.o >= 1
