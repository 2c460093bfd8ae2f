"""
Search Tree Construction

This module expands a position into the complete game tree down to a
fixed depth. Nothing is pruned and nothing is cached: every legal move is
followed at every level, and every position at the last level becomes a
Leaf holding the evaluator's material totals.

Tree Shape:
    - Node: one child per legal move, in move generation order
    - Leaf: (white, black) material totals at depth 0

    The order of a Node's children is significant: the move selector
    matches child i of the root with legal move i of the root position.

Parallelism:
    The top `parallel_plies` levels are expanded on the calling thread.
    Each position reached at that frontier is handed to the executor as an
    independent task with its own board copy, and the finished subtrees are
    stitched back by move index, never by completion order. With the
    default of one ply, there is exactly one task per root move.

Complexity:
    O(b^d) leaves where b=branching factor (~35), d=depth
"""

import logging
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import chess
from meanmate.evaluation.base import Evaluator

logger = logging.getLogger("meanmate.search")


@dataclass(frozen=True)
class Leaf:
    """Material totals of a position at depth 0."""
    white: int
    black: int


@dataclass(frozen=True)
class Node:
    """Expanded position: one subtree per legal move."""
    children: Tuple[Union["Leaf", "Node"], ...] = ()


SearchTree = Union[Leaf, Node]


def expand(board: chess.Board, depth: int, evaluator: Evaluator) -> SearchTree:
    """
    Expand a position sequentially.

    The board is walked with push/pop and is back in its original state
    when this returns, so it must not be shared with another running
    expansion.

    Args:
        board: Position to expand (owned by the caller's branch)
        depth: Remaining depth in plies
        evaluator: Leaf evaluator

    Returns:
        Leaf if depth is 0, otherwise a Node
    """
    if depth == 0:
        return Leaf(*evaluator.evaluate(board))

    children = []
    for move in list(board.legal_moves):
        board.push(move)
        children.append(expand(board, depth - 1, evaluator))
        board.pop()

    return Node(tuple(children))


def _submit_frontier(
    board: chess.Board,
    depth: int,
    evaluator: Evaluator,
    executor: Executor,
    plies: int,
):
    """
    Walk the fan-out levels and submit one task per frontier position.

    Returns:
        A Future for a frontier position, or a list of the same structure
        (one entry per legal move) for positions above the frontier
    """
    if plies == 0 or depth == 0:
        return executor.submit(expand, board.copy(stack=False), depth, evaluator)

    pending = []
    for move in board.legal_moves:
        child = board.copy(stack=False)
        child.push(move)
        pending.append(_submit_frontier(child, depth - 1, evaluator, executor, plies - 1))

    return pending


def _collect(pending) -> SearchTree:
    """Resolve a structure built by _submit_frontier into a tree."""
    if isinstance(pending, Future):
        return pending.result()

    return Node(tuple(_collect(branch) for branch in pending))


def build_tree(
    board: chess.Board,
    depth: int,
    evaluator: Evaluator,
    executor: Optional[Executor] = None,
    parallel_plies: int = 1,
) -> SearchTree:
    """
    Build the complete search tree of a position.

    Args:
        board: Root position (never modified)
        depth: Search depth in plies
        evaluator: Leaf evaluator (must be picklable for process pools)
        executor: Optional worker pool; without one the build is sequential
        parallel_plies: Number of levels expanded before fanning out

    Returns:
        SearchTree rooted at `board`

    Example:
        >>> tree = build_tree(chess.Board(), 0, MaterialEvaluator())
        >>> tree
        Leaf(white=3600, black=3600)
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    if depth == 0:
        return Leaf(*evaluator.evaluate(board))

    if executor is None or parallel_plies == 0:
        return expand(board.copy(stack=False), depth, evaluator)

    pending = _submit_frontier(board, depth, evaluator, executor, parallel_plies)
    logger.debug(f"Submitted fan-out tasks for depth={depth}, parallel_plies={parallel_plies}")

    return _collect(pending)


def count_leaves(tree: SearchTree) -> int:
    """Number of leaves (evaluated positions) in a tree."""
    if isinstance(tree, Leaf):
        return 1
    return sum(count_leaves(child) for child in tree.children)

