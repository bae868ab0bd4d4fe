"""
Configuration constants and settings for the Hex Monte Carlo project.

This module contains the defaults used throughout the project: board
dimensions, simulation settings and logging.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent

# Board configuration
DEFAULT_BOARD_SIZE = 11
MIN_BOARD_SIZE = 3  # boards of dimension <= 2 are rejected
MARGIN_WIDTH = 1    # one margin row/column on each side of the playable area

# Edge weights are a placeholder: only edge existence is used by the search
DEFAULT_EDGE_WEIGHT = 1

# Players (as reported by HexBoard.get_current_player)
PLAYER_ONE = 1
PLAYER_TWO = 2
NUM_PLAYERS = 2

# Monte Carlo defaults
DEFAULT_TRIALS = 1000
DEFAULT_WORKERS = 1  # 1 = sequential candidate evaluation

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
