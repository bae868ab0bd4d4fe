"""
Unit tests for the Monte Carlo move selection engine.

To run these tests, use:
    python -m pytest tests/test_monte_carlo.py -v
"""

import pytest

from hex_mc.enums import Color, Outcome
from hex_mc.error_handling import NoFreeVerticesError
from hex_mc.inference.game_engine import HexBoard
from hex_mc.inference.monte_carlo import MonteCarloConfig, MonteCarloPlayer, select_best_candidate
from hex_mc.inference.playout import PlayoutSimulator
from hex_mc.utils.random_utils import make_generator, make_seed_sequence


def make_player(board, trials=50, seed=1234, workers=1):
    config = MonteCarloConfig(trials=trials, seed=seed, workers=workers, show_progress=False)
    return MonteCarloPlayer("Computer", board, config=config)


@pytest.fixture
def blue_to_win():
    """3x3 board, player 1 to move; (0, 0) completes the top row."""
    board = HexBoard(3)
    for move in [(0, 1), (1, 0), (0, 2), (1, 1)]:
        assert board.play(*move) is Outcome.NO_WIN
    return board


@pytest.fixture
def red_to_win():
    """3x3 board, player 2 to move; (2, 0) completes the left column."""
    board = HexBoard(3)
    for move in [(0, 2), (0, 0), (1, 2), (1, 0), (2, 1)]:
        assert board.play(*move) is Outcome.NO_WIN
    return board


class TestSelectBestCandidate:
    def test_highest_count_wins(self):
        assert select_best_candidate([10, 11, 12], [3, 7, 5]) == (11, 7)

    def test_first_to_reach_maximum_is_kept(self):
        assert select_best_candidate([10, 11, 12, 13], [2, 9, 9, 1]) == (11, 9)

    def test_all_zero_falls_back_to_first(self):
        assert select_best_candidate([10, 11, 12], [0, 0, 0]) == (10, 0)


class TestMonteCarloConfig:
    def test_defaults(self):
        config = MonteCarloConfig()
        assert config.trials == 1000
        assert config.workers == 1
        assert config.seed is None

    @pytest.mark.parametrize("kwargs", [{"trials": 0}, {"trials": -5}, {"workers": 0}])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            MonteCarloConfig(**kwargs).validate()

    def test_set_trials(self):
        player = make_player(HexBoard(3))
        player.set_trials(7)
        assert player.trials == 7
        with pytest.raises(ValueError):
            player.set_trials(0)


class TestSimulate:
    def test_immediate_win_wins_every_trial(self, blue_to_win):
        player = make_player(blue_to_win, trials=40)
        free = blue_to_win.get_free_vertices()
        assert player.simulate(blue_to_win.row_col_to_vertex(0, 0), free) == 40

    def test_immediate_win_for_player2(self, red_to_win):
        player = make_player(red_to_win, trials=40)
        free = red_to_win.get_free_vertices()
        assert player.simulate(red_to_win.row_col_to_vertex(2, 0), free) == 40

    def test_wins_bounded_by_trials(self):
        board = HexBoard(4)
        player = make_player(board, trials=25)
        free = board.get_free_vertices()
        for vertex in free[:4]:
            assert 0 <= player.simulate(vertex, free) <= 25

    def test_rollback_is_idempotent(self):
        board = HexBoard(4)
        for move in [(1, 1), (2, 2), (0, 3)]:
            board.play(*move)
        board_before = board.vertex_keys()
        player = make_player(board, trials=20)
        free = board.get_free_vertices()

        player.simulate(free[2], free)
        first = player.scratch.vertex_keys()
        player.simulate(free[2], free)
        second = player.scratch.vertex_keys()

        assert first == second
        assert first == board_before
        assert board.vertex_keys() == board_before

    def test_generator_advances_between_trials(self):
        board = HexBoard(4)
        player = make_player(board, trials=5)
        state = player.rng.bit_generator.state
        free = board.get_free_vertices()
        player.simulate(free[0], free)
        assert player.rng.bit_generator.state != state

    def test_simulator_on_its_own(self, blue_to_win):
        simulator = PlayoutSimulator(3, make_generator(make_seed_sequence(5)))
        free = blue_to_win.get_free_vertices()
        wins = simulator.simulate(blue_to_win, blue_to_win.row_col_to_vertex(0, 0), free, 10)
        assert wins == 10
        assert simulator.scratch.vertex_keys() == blue_to_win.vertex_keys()


class TestMonteCarloPlay:
    def test_finds_winning_move_for_player1(self, blue_to_win):
        player = make_player(blue_to_win)
        move = player.play()
        assert move == (0, 0)
        assert blue_to_win.play(*move) is Outcome.P1_WIN

    def test_finds_winning_move_for_player2(self, red_to_win):
        player = make_player(red_to_win)
        move = player.play()
        assert move == (2, 0)
        assert red_to_win.play(*move) is Outcome.P2_WIN

    def test_single_free_vertex(self):
        board = HexBoard(3)
        colors = [Color.BLUE, Color.RED]
        cells = [(r, c) for r in range(3) for c in range(3) if (r, c) != (2, 2)]
        for i, (row, col) in enumerate(cells):
            board.set_vertex_key(board.row_col_to_vertex(row, col), colors[i % 2])
        player = make_player(board, trials=1)
        assert player.play() == (2, 2)

    def test_full_board_is_fatal(self):
        board = HexBoard(3)
        for row in range(3):
            for col in range(3):
                board.set_vertex_key(board.row_col_to_vertex(row, col), Color.RED)
        player = make_player(board, trials=1)
        with pytest.raises(NoFreeVerticesError):
            player.play()

    def test_play_only_reads_the_board(self):
        board = HexBoard(4)
        board.play(1, 2)
        before = board.vertex_keys()
        player = make_player(board, trials=10)
        row, col = player.play()
        assert board.vertex_keys() == before
        assert board.get_current_player() == 2
        assert board.row_col_to_vertex(row, col) in board.get_free_vertices()

    def test_same_seed_same_move(self):
        board = HexBoard(4)
        board.play(0, 0)
        first = make_player(board, trials=15, seed=99).play()
        second = make_player(board, trials=15, seed=99).play()
        assert first == second

    def test_is_not_interactive(self):
        player = make_player(HexBoard(3))
        assert not player.is_interactive()
        player.reset()


class TestParallelEvaluation:
    def test_parallel_finds_winning_move(self, blue_to_win):
        player = make_player(blue_to_win, trials=30, workers=2)
        assert player.play() == (0, 0)

    def test_parallel_scores_every_candidate(self, red_to_win):
        player = make_player(red_to_win, trials=30, workers=3)
        free = red_to_win.get_free_vertices()
        wins = player._evaluate_parallel(free, 30)
        assert len(wins) == len(free)
        assert wins[free.index(red_to_win.row_col_to_vertex(2, 0))] == 30
        assert all(0 <= w <= 30 for w in wins)
