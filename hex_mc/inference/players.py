"""
Player strategies for the turn loop.

Every player implements the same small contract: play() returns the
(row, col) it wants to claim, is_interactive() says whether the driver should
show error messages and pause for it, and reset() clears per-match state.
The variant is picked once, when players are selected, via create_player().
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

import numpy as np

from hex_mc.enums import PlayerKind

logger = logging.getLogger(__name__)


class Player(ABC):
    """Abstract base class for a human or computer player."""

    def __init__(self, name: str, board):
        self.name = name
        self.board = board

    def is_interactive(self) -> bool:
        """By default players are not interactive: no messages, no pauses."""
        return False

    @abstractmethod
    def play(self) -> Tuple[int, int]:
        """Settle on a move and return it as (row, col)."""
        pass

    def reset(self) -> None:
        """Reset per-match state, if any."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class KeyboardPlayer(Player):
    """Human player typing a move as 'row col'."""

    def __init__(self, name: str, board, input_fn: Callable[[str], str] = input):
        super().__init__(name, board)
        self.input_fn = input_fn

    def is_interactive(self) -> bool:
        return True

    def play(self) -> Tuple[int, int]:
        """
        Prompt until the answer parses as two integers.

        Range and occupancy are not checked here: the board rejects such
        moves and the driver asks again.

        Raises:
            EOFError: If the input stream is closed
        """
        while True:
            answer = self.input_fn(f"\n{self.name} enter move (row col): ")
            try:
                return parse_move(answer)
            except ValueError as e:
                logger.debug(f"Unparseable move {answer!r}: {e}")
                print(f"Invalid input: {e}")


class RandomPlayer(Player):
    """Computer player picking uniformly random coordinates, free or not."""

    def __init__(self, name: str, board, rng: Optional[np.random.Generator] = None):
        super().__init__(name, board)
        self.rng = rng if rng is not None else np.random.default_rng()

    def play(self) -> Tuple[int, int]:
        dim = self.board.get_playable_dim()
        row, col = self.rng.integers(0, dim, size=2)
        return int(row), int(col)


def parse_move(text: str) -> Tuple[int, int]:
    """Parse 'row col' (or 'row,col') into a pair of ints."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"expected 'row col', got {text!r}")
    return int(parts[0]), int(parts[1])


def create_player(kind: PlayerKind, name: str, board, **kwargs) -> Player:
    """
    Build the player variant for `kind`.

    Args:
        kind: PlayerKind to create
        name: Display name ("Player1", "Player2")
        board: Authoritative HexBoard the player moves on
        **kwargs: Passed to the variant's constructor (e.g. `config` for
            the Monte Carlo player, `input_fn` for the keyboard player)
    """
    if not isinstance(kind, PlayerKind):
        raise ValueError(f"Unknown player kind: {kind!r}")
    if kind is PlayerKind.HUMAN:
        return KeyboardPlayer(name, board, **kwargs)
    if kind is PlayerKind.RANDOM:
        return RandomPlayer(name, board, **kwargs)
    # Imported here: monte_carlo imports Player from this module
    from hex_mc.inference.monte_carlo import MonteCarloPlayer
    return MonteCarloPlayer(name, board, **kwargs)
