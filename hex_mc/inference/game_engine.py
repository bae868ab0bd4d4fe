"""
Game engine for Hex.

A Hex board is a graph with Color vertex labels and integer edge weights.
The playable N×N area is surrounded by one row/column of "margin" vertices
representing the players' walls, so an N×N board is stored as an
(N+2)×(N+2) graph:

- the four corners are GRAY and can never be played,
- the top and bottom margin rows are RED (player 2's walls),
- the left and right margin columns are BLUE (player 1's walls),
- every playable cell starts WHITE.

Coordinates come in two flavours. Absolute coordinates address the whole
(N+2)×(N+2) grid; relative coordinates address only the playable area and
are shifted by one row and one column. Both map onto the same vertex index
space through a Transpose functor.

Each cell is connected to its horizontal, vertical and lower-left diagonal
neighbours, which embeds the hexagonal adjacency in the square index space.
Victory is a color-aware depth-first search from one of the player's margins
to the opposite one: margins of the other color act as walls because only
vertices labelled with the searched color are expanded.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from hex_mc.config import DEFAULT_EDGE_WEIGHT, MARGIN_WIDTH, MIN_BOARD_SIZE, PLAYER_ONE, PLAYER_TWO
from hex_mc.enums import Color, Outcome, winning_outcome
from hex_mc.error_handling import BoardSizeMismatchError, UndefinedMarginError, VertexIndexError
from hex_mc.graph import Graph
from hex_mc.inference.board_display import render_board

logger = logging.getLogger(__name__)


class Transpose:
    """
    Converts a (row, col) coordinate into a vertex index of a square grid.

    Args:
        row_offset: Added to the row before conversion
        col_offset: Added to the column before conversion
        dim: Side of the square grid the index lives in
    """

    def __init__(self, row_offset: int, col_offset: int, dim: int):
        self.row_offset = row_offset
        self.col_offset = col_offset
        self.dim = dim

    def __call__(self, row: int, col: int) -> int:
        i = (row + self.row_offset) * self.dim + (col + self.col_offset)
        if not 0 <= i < self.dim * self.dim:
            raise VertexIndexError(f"({row}, {col}) maps outside a {self.dim}x{self.dim} grid")
        return i

    def __repr__(self) -> str:
        return f"Transpose(row_offset={self.row_offset}, col_offset={self.col_offset}, dim={self.dim})"


class HexBoard(Graph[Color, int]):
    """
    Hex board of playable dimension `dim` with a two-player turn state.

    Player 1 places BLUE stones and connects left to right; player 2 places
    RED stones and connects top to bottom. Player 1 always moves first.
    """

    def __init__(self, dim: int):
        super().__init__()
        if dim < MIN_BOARD_SIZE:
            raise ValueError(f"Board dimension must be at least {MIN_BOARD_SIZE}, got {dim}")
        self.rel_dim = dim
        self.abs_dim = dim + 2 * MARGIN_WIDTH
        # abs_pos addresses the full grid including margins
        self.abs_pos = Transpose(0, 0, self.abs_dim)
        # rel_pos addresses the playable area only
        self.rel_pos = Transpose(MARGIN_WIDTH, MARGIN_WIDTH, self.abs_dim)
        self._p1_turn = True
        self.winner: Optional[Color] = None
        self.reset_board()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def reset_board(self) -> None:
        """
        Rebuild every vertex and edge from scratch and give the move to
        player 1.
        """
        self.clear()
        last = self.abs_dim - 1

        for _ in range(self.abs_dim * self.abs_dim):
            self.add_vertex(Color.WHITE)

        for i in range(self.abs_dim):
            self.set_vertex_key(self.abs_pos(0, i), Color.RED)
            self.set_vertex_key(self.abs_pos(last, i), Color.RED)
            self.set_vertex_key(self.abs_pos(i, 0), Color.BLUE)
            self.set_vertex_key(self.abs_pos(i, last), Color.BLUE)
        for row, col in ((0, 0), (0, last), (last, 0), (last, last)):
            self.set_vertex_key(self.abs_pos(row, col), Color.GRAY)

        for row in range(self.abs_dim):
            for col in range(self.abs_dim):
                here = self.abs_pos(row, col)
                if col < last:
                    self.add_edge(here, self.abs_pos(row, col + 1), DEFAULT_EDGE_WEIGHT)
                if row < last:
                    self.add_edge(here, self.abs_pos(row + 1, col), DEFAULT_EDGE_WEIGHT)
                # right-to-left diagonal: the hexagonal link
                if col > 0 and row < last:
                    self.add_edge(here, self.abs_pos(row + 1, col - 1), DEFAULT_EDGE_WEIGHT)

        self._p1_turn = True
        self.winner = None
        logger.debug(f"Reset {self.rel_dim}x{self.rel_dim} board: "
                     f"{self.get_nodes()} vertices, {self.get_edges()} edges")

    # ------------------------------------------------------------------
    # Turn state
    # ------------------------------------------------------------------

    def get_current_player(self) -> int:
        """1 if it's player 1's turn, 2 otherwise."""
        return PLAYER_ONE if self._p1_turn else PLAYER_TWO

    def get_current_color(self) -> Color:
        """Color placed by the player to move."""
        return Color.BLUE if self._p1_turn else Color.RED

    def get_playable_dim(self) -> int:
        return self.rel_dim

    @property
    def game_over(self) -> bool:
        return self.winner is not None

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def play(self, row: int, col: int) -> Outcome:
        """
        Try to claim the playable cell (row, col) for the player to move.

        Returns:
            OOB_ERROR or OCC_ERROR for rejected moves (nothing changes),
            P1_WIN/P2_WIN if the move wins (the turn is not flipped),
            NO_WIN otherwise (the turn passes to the other player).
        """
        if not (0 <= row < self.rel_dim and 0 <= col < self.rel_dim):
            return Outcome.OOB_ERROR

        vertex = self.rel_pos(row, col)
        if self._keys[vertex] is not Color.WHITE:
            return Outcome.OCC_ERROR

        color = self.get_current_color()
        self.set_vertex_key(vertex, color)
        if self.is_victory(color):
            self.winner = color
            logger.debug(f"Player {self.get_current_player()} wins with ({row}, {col})")
            return winning_outcome(color)

        self._p1_turn = not self._p1_turn
        return Outcome.NO_WIN

    def _margin_pair(self, color: Color) -> Tuple[int, int]:
        """Source and destination margin vertices of the searched color."""
        if color is Color.BLUE:
            # left margin -> right margin
            return (self.abs_pos(1, 0),
                    self.abs_pos(self.abs_dim - 2, self.abs_dim - 1))
        if color is Color.RED:
            # top margin -> bottom margin
            return (self.abs_pos(0, 1),
                    self.abs_pos(self.abs_dim - 1, self.abs_dim - 2))
        raise UndefinedMarginError(f"{color} has no margins to connect")

    def is_victory(self, color: Color) -> bool:
        """
        Return True if `color` has a path between its two margins.

        Depth-first search with an explicit stack. Only vertices labelled
        `color` are expanded, so the opponent's margins and the gray corners
        block the search.
        """
        src, dst = self._margin_pair(color)
        keys = self._keys
        adjacency = self._adjacency

        visited = [False] * len(keys)
        visited[src] = True
        stack = [src]
        while stack:
            top = stack.pop()
            for neighbor in adjacency[top]:
                if neighbor == dst:
                    return True
                if not visited[neighbor]:
                    visited[neighbor] = True
                    if keys[neighbor] is color:
                        stack.append(neighbor)
        return False

    # ------------------------------------------------------------------
    # Simulation primitives
    # ------------------------------------------------------------------

    def get_free_vertices(self) -> List[int]:
        """Vertex indices of every WHITE playable cell, in row-major order."""
        keys = self._keys
        free = []
        for row in range(self.rel_dim):
            for col in range(self.rel_dim):
                vertex = self.rel_pos(row, col)
                if keys[vertex] is Color.WHITE:
                    free.append(vertex)
        return free

    def row_col_to_vertex(self, row: int, col: int) -> int:
        """Vertex index of the playable cell (row, col)."""
        return self.rel_pos(row, col)

    def vertex_to_row_col(self, vertex: int) -> Tuple[int, int]:
        """Inverse of row_col_to_vertex: playable (row, col) of a vertex."""
        self._validate_vertex(vertex)
        return vertex // self.abs_dim - MARGIN_WIDTH, vertex % self.abs_dim - MARGIN_WIDTH

    def fill_alternating(self, vertices: Sequence[int], first: Color, second: Color) -> None:
        """
        Label vertices[0], vertices[2], ... with `first` and the others with
        `second`. Vertices must be playable indices (as returned by
        get_free_vertices); they are not range-checked.
        """
        keys = self._keys
        for vertex in vertices[0::2]:
            keys[vertex] = first
        for vertex in vertices[1::2]:
            keys[vertex] = second

    def clear_vertices(self, vertices: Sequence[int]) -> None:
        """Label every given playable vertex WHITE again (unchecked)."""
        keys = self._keys
        for vertex in vertices:
            keys[vertex] = Color.WHITE

    def clone_board_state(self, other: "HexBoard") -> None:
        """Overwrite every vertex label with the labels of `other`."""
        if self.get_nodes() != other.get_nodes():
            raise BoardSizeMismatchError(
                f"Cannot copy a board of {other.get_nodes()} vertices "
                f"into one of {self.get_nodes()}")
        self._keys[:] = other._keys

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def to_nxn(self) -> np.ndarray:
        """Playable area as an (N, N) array of color characters."""
        board = np.full((self.rel_dim, self.rel_dim), Color.WHITE.value, dtype='U1')
        for row in range(self.rel_dim):
            for col in range(self.rel_dim):
                board[row, col] = self._keys[self.rel_pos(row, col)].value
        return board

    def __str__(self) -> str:
        return render_board(self)

    def __repr__(self) -> str:
        return (f"HexBoard(dim={self.rel_dim}, player={self.get_current_player()}, "
                f"free={len(self.get_free_vertices())})")
