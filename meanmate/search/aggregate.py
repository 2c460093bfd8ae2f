"""
Score Aggregation

Rolls the leaf totals of a search tree up into one value per root move.

This is NOT minimax. Every internal node is worth the arithmetic mean of
its children, so a root move is valued by the average material outcome
over everything reachable from it, rather than by assuming best play from
both sides. Every leaf is also scored from the perspective of the side to
move at the root, whichever side is on move at the leaf itself.

Values are exact rationals (ints at the leaves, Fractions above), so
equal subtrees compare equal and the selector's tie-break stays stable.
"""

from fractions import Fraction
from numbers import Rational
from typing import List

import chess
from meanmate.errors import SearchError
from meanmate.search.tree import Leaf, SearchTree


def leaf_score(leaf: Leaf, color: chess.Color) -> int:
    """
    Signed material balance of a leaf.

    Args:
        leaf: Leaf holding (white, black) totals
        color: Side whose perspective is used

    Returns:
        white - black for White, black - white for Black
    """
    if color == chess.WHITE:
        return leaf.white - leaf.black
    return leaf.black - leaf.white


def aggregate(tree: SearchTree, color: chess.Color) -> Rational:
    """
    Collapse a tree into a single value.

    Args:
        tree: Leaf or Node
        color: Side to move at the root of the search

    Returns:
        Leaf score for a leaf, mean of the children for a node (0 if the
        node has no children)
    """
    if isinstance(tree, Leaf):
        return leaf_score(tree, color)

    if not tree.children:
        return 0

    values = [aggregate(child, color) for child in tree.children]
    return Fraction(sum(values), len(values))


def aggregate_root(tree: SearchTree, color: chess.Color) -> List[Rational]:
    """
    One aggregated value per immediate child of the root.

    The result lines up index for index with the root's legal moves.

    Raises:
        SearchError: If the root was never expanded
    """
    if isinstance(tree, Leaf):
        raise SearchError("Cannot score root moves of an unexpanded tree (depth 0)")

    return [aggregate(child, color) for child in tree.children]
