"""
Worker functions for parallel candidate evaluation.

Functions here are picklable (module level, not nested) so they can run in a
ProcessPoolExecutor. Each task carries its own copy of the board and its own
seed sequence, so workers never share a scratch board or a random stream.
"""

import logging
from typing import Any, Dict

from hex_mc.inference.playout import PlayoutSimulator
from hex_mc.utils.random_utils import make_generator

logger = logging.getLogger(__name__)


def simulate_candidates_worker(task: Dict[str, Any]) -> Dict[str, Any]:
    """
    Score a contiguous chunk of candidate moves.

    Args:
        task: Dict containing:
            - board: HexBoard - copy of the authoritative board
            - candidates: List[int] - candidate vertices, in candidate order
            - free_vertices: List[int] - every free vertex of the board
            - trials: int - playouts per candidate
            - seed: np.random.SeedSequence - this worker's seed
            - chunk_idx: int - position of the chunk among all chunks

    Returns:
        Dict with 'chunk_idx', 'candidates' and 'wins' (one count per
        candidate, same order)
    """
    board = task['board']
    simulator = PlayoutSimulator(board.get_playable_dim(), make_generator(task['seed']))
    wins = [simulator.simulate(board, candidate, task['free_vertices'], task['trials'])
            for candidate in task['candidates']]
    logger.debug(f"Chunk {task['chunk_idx']}: {len(wins)} candidates scored")
    return {
        'chunk_idx': task['chunk_idx'],
        'candidates': task['candidates'],
        'wins': wins,
    }
