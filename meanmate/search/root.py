"""
Root Search

Runs the whole pipeline for one "go" request:

    build_tree → aggregate_root → select_move

and packages the outcome together with the statistics the UCI layer
reports on its info line.
"""

import logging
import time
from concurrent.futures import Executor
from dataclasses import dataclass, field
from numbers import Rational
from typing import List, Optional

import chess
from meanmate.errors import NoLegalMovesError
from meanmate.evaluation.base import Evaluator
from meanmate.evaluation.material import MaterialEvaluator
from meanmate.search.aggregate import aggregate_root
from meanmate.search.select import gives_checkmate, select_move
from meanmate.search.tree import build_tree, count_leaves

logger = logging.getLogger("meanmate.search")


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move: Move to play
        score: Aggregated value of `move` (root side's perspective)
        mate: True if `move` checkmates immediately
        depth: Depth the tree was built to
        leaves: Number of evaluated positions
        elapsed: Wall time in seconds
        moves: Legal root moves in generation order
        scores: Aggregated value of every root move
    """
    move: chess.Move
    score: Rational
    mate: bool
    depth: int
    leaves: int
    elapsed: float
    moves: List[chess.Move] = field(default_factory=list)
    scores: List[Rational] = field(default_factory=list)


def find_best_move(
    board: chess.Board,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    executor: Optional[Executor] = None,
    parallel_plies: int = 1,
) -> SearchResult:
    """
    Find the move to play in the current position.

    Args:
        board: Chess position (not modified)
        depth: Search depth in plies (at least 1)
        evaluator: Leaf evaluator (default: MaterialEvaluator)
        executor: Optional worker pool for the fan-out levels
        parallel_plies: Number of levels expanded before fanning out

    Returns:
        SearchResult

    Raises:
        ValueError: If depth is less than 1
        NoLegalMovesError: If the side to move has no legal moves
    """
    if depth < 1:
        raise ValueError(f"Root search needs depth >= 1, got {depth}")

    evaluator = evaluator if evaluator else MaterialEvaluator()
    board = board.copy(stack=False)

    moves = list(board.legal_moves)
    if not moves:
        raise NoLegalMovesError(f"No legal moves in position {board.fen()}")

    start_time = time.time()

    tree = build_tree(board, depth, evaluator, executor, parallel_plies)
    scores = aggregate_root(tree, board.turn)
    move = select_move(board, moves, scores)

    elapsed = time.time() - start_time
    leaves = count_leaves(tree)
    score = scores[moves.index(move)]
    mate = gives_checkmate(board, move)

    logger.debug(
        f"Search done: move={move.uci()}, score={float(score):.2f}, mate={mate}, "
        f"leaves={leaves}, time={elapsed:.3f}s"
    )

    return SearchResult(
        move=move,
        score=score,
        mate=mate,
        depth=depth,
        leaves=leaves,
        elapsed=elapsed,
        moves=moves,
        scores=scores,
    )
