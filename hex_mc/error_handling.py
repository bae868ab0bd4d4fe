"""
Error handling utilities for Hex.

Illegal player input is reported as an Outcome value by HexBoard.play and
never raises. Everything in this module signals a broken internal invariant
(a programming error) and is meant to abort the current operation.
"""

import logging
import signal
import sys

logger = logging.getLogger(__name__)


class InvariantViolation(AssertionError):
    """Base class for fatal contract violations in the graph, board or engine."""
    pass


class VertexIndexError(InvariantViolation):
    """A vertex index outside [0, number of vertices)."""
    pass


class EdgeNotFoundError(InvariantViolation):
    """An edge getter/setter was used on a pair of vertices with no edge."""
    pass


class BoardSizeMismatchError(InvariantViolation):
    """Board state was copied between boards of different dimensions."""
    pass


class UndefinedMarginError(InvariantViolation):
    """Victory was asked about a color that owns no margin pair."""
    pass


class NoFreeVerticesError(InvariantViolation):
    """A move was requested on a board with no free cell."""
    pass


class GracefulShutdown:
    """Handle graceful shutdown on SIGTERM/SIGINT."""

    def __init__(self):
        self.shutdown_requested = False
        self.signal_count = 0

        # Register signal handlers
        signal.signal(signal.SIGTERM, self._signal_handler)
        signal.signal(signal.SIGINT, self._signal_handler)

    def _signal_handler(self, signum, frame):
        self.signal_count += 1
        if self.signal_count == 1:
            logger.info(f"Received signal {signum} - stopping after the current move...")
            self.shutdown_requested = True
        else:
            logger.warning(f"Received signal {signum} again - forcing exit!")
            sys.exit(1)
