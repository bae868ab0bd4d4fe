"""
Tests for the command-line interface.
"""

import pytest

import hex_mc.cli as cli
from hex_mc.inference.monte_carlo import MonteCarloPlayer
from hex_mc.inference.game_engine import HexBoard
from hex_mc.inference.players import KeyboardPlayer, RandomPlayer


class DummyShutdown:
    shutdown_requested = False


def scripted_input(answers):
    answers = iter(answers)
    return lambda prompt="": next(answers)


@pytest.fixture(autouse=True)
def no_signal_handlers(monkeypatch):
    monkeypatch.setattr(cli, "GracefulShutdown", DummyShutdown)


class TestParseArguments:
    def test_defaults(self):
        args = cli.parse_arguments([])
        assert args.board_size == 11
        assert args.trials == 1000
        assert args.workers == 1
        assert args.mode is None
        assert args.seed is None
        assert not args.random_opponent

    @pytest.mark.parametrize("argv", [["--board-size", "2"], ["--trials", "0"],
                                      ["--workers", "0"], ["--mode", "5"]])
    def test_invalid_values_exit(self, argv):
        with pytest.raises(SystemExit):
            cli.parse_arguments(argv)


class TestBuildPlayers:
    def test_human_vs_computer(self):
        board = HexBoard(3)
        args = cli.parse_arguments(["--board-size", "3", "--trials", "25", "--seed", "3"])
        p1, p2 = cli.build_players(board, 2, args)
        assert isinstance(p1, KeyboardPlayer)
        assert isinstance(p2, MonteCarloPlayer)
        assert p2.trials == 25
        assert (p1.name, p2.name) == ("Player1", "Player2")

    def test_random_opponent_replaces_computers(self):
        board = HexBoard(3)
        args = cli.parse_arguments(["--random-opponent"])
        players = cli.build_players(board, 4, args)
        assert all(isinstance(p, RandomPlayer) for p in players)


class TestRun:
    def test_computer_match_then_quit(self, capsys):
        args = cli.parse_arguments(["--board-size", "3", "--mode", "4", "--random-opponent"])
        cli.run(args, input_fn=scripted_input(["n"]))
        out = capsys.readouterr().out
        assert "wins!" in out
        assert "Bye!" in out

    def test_play_again_and_change_players(self, capsys):
        args = cli.parse_arguments(["--board-size", "3", "--mode", "4", "--random-opponent",
                                    "--show-margins"])
        cli.run(args, input_fn=scripted_input(["y", "c", "4", "n"]))
        assert capsys.readouterr().out.count("wins!") == 3

    def test_shutdown_stops_the_match(self, monkeypatch, capsys):
        class Requested:
            shutdown_requested = True
        monkeypatch.setattr(cli, "GracefulShutdown", Requested)
        args = cli.parse_arguments(["--board-size", "3", "--mode", "4", "--random-opponent"])
        cli.run(args, input_fn=scripted_input([]))
        assert "interrupted" in capsys.readouterr().out

    def test_main_handles_closed_input(self, monkeypatch, capsys):
        def closed(args):
            raise EOFError
        monkeypatch.setattr(cli, "run", closed)
        assert cli.main(["--board-size", "3", "--mode", "3"]) == 0
        assert "Input closed" in capsys.readouterr().out
