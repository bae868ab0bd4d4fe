"""
Flat Monte Carlo move selection.

To pick a move the engine:
    1. lists every free cell of the board,
    2. for each free cell, assumes it is played and runs `trials` random
       playouts of the rest of the game on a scratch board, counting wins,
    3. plays the cell with the most wins (the first one to reach the maximum).

Win counts are compared as integers. This is only meaningful because every
candidate of a decision is simulated with the same trial count, which is read
once at the start of each decision.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from hex_mc.config import DEFAULT_TRIALS, DEFAULT_WORKERS
from hex_mc.error_handling import NoFreeVerticesError
from hex_mc.inference.players import Player
from hex_mc.inference.playout import PlayoutSimulator
from hex_mc.inference.workers import simulate_candidates_worker
from hex_mc.utils.random_utils import make_generator, make_seed_sequence, spawn_generator_seeds

logger = logging.getLogger(__name__)


@dataclass
class MonteCarloConfig:
    """
    Monte Carlo engine parameters.

    - trials: random playouts per candidate move
    - seed: master seed; None seeds from the clock at construction
    - workers: processes used to score candidates (1 = sequential)
    - show_progress: show a "thinking" progress bar over the candidates
    """

    trials: int = DEFAULT_TRIALS
    seed: Optional[int] = None
    workers: int = DEFAULT_WORKERS
    show_progress: bool = True

    def validate(self) -> None:
        """Raise ValueError if the configuration is unusable."""
        if self.trials < 1:
            raise ValueError(f"trials must be at least 1, got {self.trials}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")


def select_best_candidate(candidates: Sequence[int], wins: Sequence[int]) -> Tuple[int, int]:
    """
    Return (candidate, wins) of the first candidate reaching the highest count.

    A later candidate with an equal count does not replace the incumbent.
    If no candidate won a single playout, the first candidate is returned
    with 0 wins.
    """
    best = candidates[0]
    best_wins = 0
    for candidate, count in zip(candidates, wins):
        if count > best_wins:
            best_wins = count
            best = candidate
    return best, best_wins


class MonteCarloPlayer(Player):
    """
    Computer player choosing moves by flat Monte Carlo simulation.

    The player reads the authoritative board but never mutates it; all
    playouts happen on a private scratch board created once per player.
    Its generator is seeded once and advanced across the whole game.

    Args:
        name: Display name
        board: Authoritative HexBoard
        config: Engine parameters (defaults to MonteCarloConfig())
    """

    def __init__(self, name: str, board, config: Optional[MonteCarloConfig] = None):
        super().__init__(name, board)
        self.config = config if config is not None else MonteCarloConfig()
        self.config.validate()
        self._seed_seq = make_seed_sequence(self.config.seed)
        self.rng = make_generator(self._seed_seq)
        self._simulator = PlayoutSimulator(board.get_playable_dim(), self.rng)

    @property
    def scratch(self):
        """The private scratch board used for playouts."""
        return self._simulator.scratch

    @property
    def trials(self) -> int:
        return self.config.trials

    def set_trials(self, trials: int) -> None:
        """Set the number of playouts per candidate for future decisions."""
        if trials < 1:
            raise ValueError(f"trials must be at least 1, got {trials}")
        self.config.trials = trials

    def simulate(self, fixed_move: int, free_vertices: Sequence[int]) -> int:
        """Number of playouts won after playing `fixed_move` (a vertex index)."""
        return self._simulator.simulate(self.board, fixed_move, free_vertices, self.config.trials)

    def play(self) -> Tuple[int, int]:
        """
        Choose the next move for the player to move on the board.

        Returns:
            (row, col) of the chosen cell in playable coordinates

        Raises:
            NoFreeVerticesError: If the board has no free cell
        """
        free = self.board.get_free_vertices()
        if not free:
            raise NoFreeVerticesError(f"{self.name} asked to move on a full board")

        trials = self.config.trials
        start = time.perf_counter()
        if self.config.workers > 1 and len(free) > 1:
            wins = self._evaluate_parallel(free, trials)
        else:
            wins = self._evaluate_sequential(free, trials)

        best, best_wins = select_best_candidate(free, wins)
        if best_wins == 0:
            logger.warning(f"{self.name}: no candidate won any of {trials} playouts; "
                           f"playing the first free cell")

        row, col = self.board.vertex_to_row_col(best)
        logger.info(f"{self.name} plays ({row}, {col}): {best_wins}/{trials} wins, "
                    f"{len(free)} candidates, {time.perf_counter() - start:.2f}s")
        return row, col

    def _evaluate_sequential(self, free: List[int], trials: int) -> List[int]:
        wins = []
        for candidate in tqdm(free, desc=f"{self.name} thinking", leave=False,
                              disable=not self.config.show_progress):
            count = self._simulator.simulate(self.board, candidate, free, trials)
            logger.debug(f"Candidate {self.board.vertex_to_row_col(candidate)}: {count} wins")
            wins.append(count)
        return wins

    def _evaluate_parallel(self, free: List[int], trials: int) -> List[int]:
        """
        Score candidates in worker processes, one contiguous chunk per worker.

        Chunks are reassembled in candidate order, so the tie-break is the
        same as in sequential evaluation whatever order workers finish in.
        """
        n_chunks = min(self.config.workers, len(free))
        chunks = [chunk.tolist() for chunk in np.array_split(np.array(free), n_chunks)]
        seeds = spawn_generator_seeds(self._seed_seq, n_chunks)

        results = [None] * n_chunks
        with ProcessPoolExecutor(max_workers=n_chunks) as executor:
            futures = [
                executor.submit(simulate_candidates_worker, {
                    'board': self.board,
                    'candidates': chunk,
                    'free_vertices': free,
                    'trials': trials,
                    'seed': seed,
                    'chunk_idx': i,
                })
                for i, (chunk, seed) in enumerate(zip(chunks, seeds))
            ]
            for future in tqdm(as_completed(futures), total=n_chunks, desc=f"{self.name} thinking",
                               leave=False, disable=not self.config.show_progress):
                result = future.result()
                results[result['chunk_idx']] = result['wins']

        return [count for chunk_wins in results for count in chunk_wins]
