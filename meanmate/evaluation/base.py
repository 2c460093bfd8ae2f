"""
Abstract Evaluator Interface

This module defines the abstract base class for leaf evaluators.
By defining a common interface, we can swap between evaluators without
modifying the tree builder.

Key Principles:
    1. Evaluators are stateless (they are shipped to worker processes)
    2. evaluate() returns one total per side, never a single signed score
    3. Turning the pair into a score is the aggregator's job, because only
       the aggregator knows whose perspective the search is played from
    4. Game-over positions get no special treatment
"""

from abc import ABC, abstractmethod
from typing import Tuple

import chess

# (white total, black total)
Material = Tuple[int, int]


class Evaluator(ABC):
    """
    Abstract base class for leaf evaluation.

    Methods:
        evaluate(board): Returns (white, black) totals
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> Material:
        """
        Evaluate a chess position for both sides.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            Tuple of non-negative totals (white, black)
        """
        pass

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
