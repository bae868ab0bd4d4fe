"""
Random playouts for one candidate move.

A playout fills every remaining free cell of a private scratch board in a
random order, alternating colors starting with the opponent, and checks
whether the player who made the candidate move connected its margins. The
board is full after a playout, so exactly one of the two players has won.
"""

from typing import Sequence

import numpy as np

from hex_mc.enums import Color, get_opponent
from hex_mc.inference.game_engine import HexBoard


class PlayoutSimulator:
    """
    Scratch board plus random generator used to score candidate moves.

    The scratch board's adjacency is built once; only its labels are
    overwritten from the authoritative board before each simulation.

    Args:
        dim: Playable dimension of the boards that will be simulated
        rng: Generator shuffling the free cells; advanced, never reseeded
    """

    def __init__(self, dim: int, rng: np.random.Generator):
        self.scratch = HexBoard(dim)
        self.rng = rng

    def simulate(self, board: HexBoard, fixed_move: int,
                 free_vertices: Sequence[int], trials: int) -> int:
        """
        Count the playouts won after playing `fixed_move` on `board`.

        `board` is only read. The scratch board ends holding the labels of
        `board`, whatever state it started in.

        Args:
            board: Authoritative board (its current player makes fixed_move)
            fixed_move: Vertex index of the candidate move
            free_vertices: All free vertices of `board`, fixed_move included
            trials: Number of playouts

        Returns:
            Number of playouts won by the player to move
        """
        remaining = np.array([v for v in free_vertices if v != fixed_move], dtype=np.intp)
        scratch = self.scratch
        scratch.clone_board_state(board)

        me = board.get_current_color()
        op = get_opponent(me)
        scratch.set_vertex_key(fixed_move, me)

        wins = 0
        for _ in range(trials):
            self.rng.shuffle(remaining)
            order = remaining.tolist()
            # the opponent moves right after the fixed move
            scratch.fill_alternating(order, op, me)
            if scratch.is_victory(me):
                wins += 1
            scratch.clear_vertices(order)

        scratch.set_vertex_key(fixed_move, Color.WHITE)
        return wins
