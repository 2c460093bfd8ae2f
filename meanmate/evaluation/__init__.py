"""
Evaluation Module

Leaf evaluation for the search tree. Evaluators are SWAPPABLE: the tree
builder works with anything implementing the Evaluator interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material totals per side, no positional terms

Data Flow:
    chess.Board → evaluator.evaluate() → (white, black) material totals
"""

from meanmate.evaluation.base import Evaluator, Material
from meanmate.evaluation.material import MaterialEvaluator, PIECE_VALUES

__all__ = ['Evaluator', 'Material', 'MaterialEvaluator', 'PIECE_VALUES']
