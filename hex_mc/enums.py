"""
Centralized enum definitions for Hex semantic types.

This module is the single source of truth for vertex colors, move outcomes
and player kinds. Other modules should import these Enums rather than
duplicating constants.
"""

from enum import Enum


class StrictEnum(Enum):
    """Base class for enums that prevent cross-type comparisons."""
    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            raise TypeError(f"Cannot compare {self.__class__.__name__} with {type(other).__name__}")
        return super().__eq__(other)

    def __hash__(self):
        """Make enums hashable so they can be used as dictionary keys."""
        return hash(self.value)


class Color(StrictEnum):
    """
    Vertex labels of a Hex board.

    BLUE: taken by player 1, or player 1's margin (left/right wall)
    RED: taken by player 2, or player 2's margin (top/bottom wall)
    GRAY: corner vertex, nobody can move here
    WHITE: free cell, any player can claim it
    """
    BLUE = "X"
    RED = "O"
    GRAY = "*"
    WHITE = "."


class Outcome(StrictEnum):
    """Result of one HexBoard.play call."""
    OCC_ERROR = -2
    OOB_ERROR = -1
    NO_WIN = 0
    P1_WIN = 1
    P2_WIN = 2

    @property
    def is_error(self) -> bool:
        """True for rejected moves (no side effect on the board)."""
        return self.value < Outcome.NO_WIN.value

    @property
    def is_win(self) -> bool:
        return self.value > Outcome.NO_WIN.value

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES = {
    Outcome.OCC_ERROR: "Position already taken.",
    Outcome.OOB_ERROR: "Position out of bounds.",
    Outcome.NO_WIN: "Successful play, no winner.",
    Outcome.P1_WIN: "Player1 wins!",
    Outcome.P2_WIN: "Player2 wins!",
}


class PlayerKind(StrictEnum):
    """Player variants selectable by the driver."""
    HUMAN = "human"
    COMPUTER = "computer"
    RANDOM = "random"


# ============================================================================
# Helper Functions for Enum-Primitive Conversion
# ============================================================================

def color_to_char(color: Color) -> str:
    """Convert Color enum to its character representation."""
    return color.value


def char_to_color(char: str) -> Color:
    """Convert character to Color enum."""
    mapping = {c.value: c for c in Color}
    if char not in mapping:
        raise ValueError(f"Invalid color character: {char}")
    return mapping[char]


def get_opponent(color: Color) -> Color:
    """Return the other player color. Only BLUE and RED have opponents."""
    if color is Color.BLUE:
        return Color.RED
    if color is Color.RED:
        return Color.BLUE
    raise ValueError(f"{color} is not a player color")


def player_to_color(player: int) -> Color:
    """Convert a player number (1 or 2) to the color that player places."""
    if player == 1:
        return Color.BLUE
    if player == 2:
        return Color.RED
    raise ValueError(f"Invalid player number: {player}")


def winning_outcome(color: Color) -> Outcome:
    """Outcome reported when the player owning `color` wins."""
    if color is Color.BLUE:
        return Outcome.P1_WIN
    if color is Color.RED:
        return Outcome.P2_WIN
    raise ValueError(f"{color} is not a player color")


def int_to_player_kind(code: int) -> tuple:
    """
    Map the driver's game-type menu code to the (player1, player2) kinds.

    1 - Computer(X) vs (O)Human
    2 -    Human(X) vs (O)Computer
    3 -    Human(X) vs (O)Human
    4 - Computer(X) vs (O)Computer
    """
    mapping = {
        1: (PlayerKind.COMPUTER, PlayerKind.HUMAN),
        2: (PlayerKind.HUMAN, PlayerKind.COMPUTER),
        3: (PlayerKind.HUMAN, PlayerKind.HUMAN),
        4: (PlayerKind.COMPUTER, PlayerKind.COMPUTER),
    }
    if code not in mapping:
        raise ValueError(f"Invalid game type: {code}")
    return mapping[code]
