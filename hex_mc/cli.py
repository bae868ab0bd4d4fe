"""
Command-line interface for playing Hex against the Monte Carlo player.

Usage:
    hex-mc --mode 2 --board-size 7 --trials 200
"""

import argparse
import logging
import os
import sys
from typing import Callable, List, Optional, Tuple

from hex_mc.config import DEFAULT_BOARD_SIZE, DEFAULT_LOG_LEVEL, DEFAULT_TRIALS, DEFAULT_WORKERS, LOG_FORMAT
from hex_mc.enums import PlayerKind, int_to_player_kind
from hex_mc.error_handling import GracefulShutdown
from hex_mc.inference.board_display import display_hex_board
from hex_mc.inference.game_engine import HexBoard
from hex_mc.inference.match import play_match
from hex_mc.inference.monte_carlo import MonteCarloConfig
from hex_mc.inference.players import Player, create_player

logger = logging.getLogger(__name__)

BANNER = "#" * 65

GAME_TYPES = (
    "Select game type:\n"
    "1 - Computer(X) vs (O)Human\n"
    "2 -    Human(X) vs (O)Computer\n"
    "3 -    Human(X) vs (O)Human\n"
    "4 - Computer(X) vs (O)Computer"
)


def setup_logging(log_level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Play Hex against a Monte Carlo computer player")
    parser.add_argument("--board-size", type=int, default=DEFAULT_BOARD_SIZE,
                        help=f"Playable board dimension (default: {DEFAULT_BOARD_SIZE})")
    parser.add_argument("--mode", type=int, choices=[1, 2, 3, 4], default=None,
                        help="Game type: 1 computer vs human, 2 human vs computer, "
                             "3 human vs human, 4 computer vs computer (default: ask)")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS,
                        help=f"Random playouts per candidate move (default: {DEFAULT_TRIALS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the computer players (default: from the clock)")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help="Processes used to score candidate moves (default: 1)")
    parser.add_argument("--random-opponent", action="store_true",
                        help="Computer players pick random cells instead of simulating")
    parser.add_argument("--no-progress", action="store_true",
                        help="Hide the 'thinking' progress bar")
    parser.add_argument("--show-margins", action="store_true",
                        help="Draw the full board including the margin walls")
    parser.add_argument("--no-clear", action="store_true",
                        help="Do not clear the screen between moves")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})")
    args = parser.parse_args(argv)

    if args.board_size < 3:
        parser.error("--board-size must be at least 3")
    if args.trials < 1:
        parser.error("--trials must be at least 1")
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def build_players(board: HexBoard, code: int, args: argparse.Namespace) -> Tuple[Player, Player]:
    """Create (player1, player2) for a game type code from the menu."""
    players = []
    for i, kind in enumerate(int_to_player_kind(code)):
        name = f"Player{i + 1}"
        if kind is PlayerKind.COMPUTER and args.random_opponent:
            kind = PlayerKind.RANDOM
        if kind is PlayerKind.COMPUTER:
            # distinct seeds so two computer players don't mirror each other
            seed = None if args.seed is None else args.seed + i
            config = MonteCarloConfig(trials=args.trials, seed=seed, workers=args.workers,
                                      show_progress=not args.no_progress)
            players.append(create_player(kind, name, board, config=config))
        else:
            players.append(create_player(kind, name, board))
    return players[0], players[1]


def ask_game_type(input_fn: Callable[[str], str] = input) -> int:
    """Prompt for a game type until a valid one is given."""
    print(GAME_TYPES)
    while True:
        answer = input_fn("> ").strip()
        if answer in ("1", "2", "3", "4"):
            return int(answer)


def ask_continue(input_fn: Callable[[str], str] = input) -> str:
    """Return 'y' (play again), 'c' (change players) or 'n' (quit)."""
    while True:
        answer = input_fn("Continue(y/n) or change players (c): ").strip().lower()
        if answer in ("y", "c", "n"):
            return answer


def clear_screen(board: HexBoard, args: argparse.Namespace) -> None:
    """Draw the board, clearing the terminal first unless disabled."""
    if not args.no_clear and sys.stdout.isatty():
        os.system("clear")
    print(BANNER)
    print("# Hex Game")
    print(BANNER)
    display_hex_board(board, include_margins=args.show_margins)
    print(BANNER)


def run(args: argparse.Namespace, input_fn: Callable[[str], str] = input) -> None:
    """Play matches until the user quits."""
    board = HexBoard(args.board_size)
    shutdown_handler = GracefulShutdown()

    clear_screen(board, args)
    code = args.mode if args.mode is not None else ask_game_type(input_fn)
    players = build_players(board, code, args)

    def on_invalid(player, row, col, outcome):
        print(f"\nInvalid move ({row},{col}): {outcome.message}")
        input_fn("")

    def on_move(player, row, col, outcome):
        clear_screen(board, args)

    while True:
        outcome = play_match(board, players, on_move=on_move, on_invalid=on_invalid,
                             should_stop=lambda: shutdown_handler.shutdown_requested)
        if outcome is None:
            print("\nGame interrupted.")
            return
        print(f"\n{outcome.message}\n")

        answer = ask_continue(input_fn)
        if answer == "n":
            print("\nThanks for playing! Bye!\n")
            return
        board.reset_board()
        if answer == "c":
            clear_screen(board, args)
            players = build_players(board, ask_game_type(input_fn), args)
        else:
            for player in players:
                player.reset()
        clear_screen(board, args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_arguments(argv)
    setup_logging(args.log_level)
    try:
        run(args)
    except EOFError:
        print("\nInput closed. Exiting.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
