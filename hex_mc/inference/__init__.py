"""
Game engine, players and Monte Carlo move selection for Hex.
"""

from .game_engine import HexBoard, Transpose
from .monte_carlo import MonteCarloConfig, MonteCarloPlayer
from .players import KeyboardPlayer, Player, RandomPlayer, create_player

__all__ = [
    'HexBoard',
    'Transpose',
    'MonteCarloConfig',
    'MonteCarloPlayer',
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
    'create_player',
]
