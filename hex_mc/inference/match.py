"""
Turn loop for one match between two players.
"""

import logging
from typing import Callable, Optional, Sequence

from hex_mc.enums import Outcome
from hex_mc.inference.players import Player

logger = logging.getLogger(__name__)


def play_match(board, players: Sequence[Player],
               on_move: Optional[Callable[[Player, int, int, Outcome], None]] = None,
               on_invalid: Optional[Callable[[Player, int, int, Outcome], None]] = None,
               should_stop: Optional[Callable[[], bool]] = None) -> Optional[Outcome]:
    """
    Ask the player to move until someone wins.

    Rejected moves (OOB_ERROR/OCC_ERROR) change nothing on the board; the
    same player is asked again. on_invalid is only called for interactive
    players, computer players retry silently.

    Args:
        board: Authoritative HexBoard, reset by the caller
        players: (player1, player2)
        on_move: Called after every accepted move, winning ones included
        on_invalid: Called after a rejected move of an interactive player
        should_stop: Polled before each move; returning True ends the match

    Returns:
        P1_WIN or P2_WIN, or None if the match was stopped
    """
    if len(players) != 2:
        raise ValueError(f"A match needs exactly 2 players, got {len(players)}")

    while True:
        if should_stop is not None and should_stop():
            logger.info("Match stopped before completion")
            return None

        player = players[board.get_current_player() - 1]
        row, col = player.play()
        outcome = board.play(row, col)

        if outcome.is_error:
            logger.debug(f"{player.name} move ({row}, {col}) rejected: {outcome.message}")
            if player.is_interactive() and on_invalid is not None:
                on_invalid(player, row, col, outcome)
            continue

        if on_move is not None:
            on_move(player, row, col, outcome)
        if outcome.is_win:
            logger.info(f"{player.name} wins with ({row}, {col})")
            return outcome
