"""
Hex with a Monte Carlo computer player.

The board is a weighted graph with margin vertices for the players' walls;
the computer player scores each free cell by random playouts and plays the
one that wins most often.
"""

# Version info
__version__ = "2025.1.0"

__all__ = [
    "graph",
    "inference",
    "Color",
    "Outcome",
    "Graph",
    "HexBoard",
    "MonteCarloConfig",
    "MonteCarloPlayer",
]

from .enums import Color, Outcome
from .graph import Graph
from .inference import HexBoard, MonteCarloConfig, MonteCarloPlayer
