"""
Random generator utilities.

The Monte Carlo engine owns one numpy Generator for its whole lifetime. It is
seeded once, from the clock unless a seed is given, and never reseeded
between moves.
"""

import time
from typing import List, Optional

import numpy as np


def time_seed() -> int:
    """Seed derived from the current time (nanoseconds since the epoch)."""
    return time.time_ns()


def make_seed_sequence(seed: Optional[int] = None) -> np.random.SeedSequence:
    """
    Create the master seed sequence of an engine.

    Args:
        seed: Fixed seed for reproducible runs, or None to seed from the clock
    """
    return np.random.SeedSequence(time_seed() if seed is None else seed)


def make_generator(seed_seq: np.random.SeedSequence) -> np.random.Generator:
    return np.random.default_rng(seed_seq)


def spawn_generator_seeds(seed_seq: np.random.SeedSequence, n: int) -> List[np.random.SeedSequence]:
    """
    Derive `n` independent child seed sequences, one per parallel worker.

    Each call advances the parent's spawn counter, so successive calls never
    hand out the same stream twice.
    """
    return seed_seq.spawn(n)
