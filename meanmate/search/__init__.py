"""
Search Module

Exhaustive fixed-depth search. The full game tree is expanded (no
pruning), leaves are scored by material, and values are rolled up by
arithmetic mean rather than minimax.

Key Components:
    - build_tree: Tree expansion, root fanned out to a worker pool
    - aggregate / aggregate_root: Mean rollup of leaf scores
    - select_move: Mate-in-one override, then stable argmax
    - find_best_move: Root-level search function

"""

from meanmate.search.tree import Leaf, Node, SearchTree, build_tree, count_leaves
from meanmate.search.aggregate import aggregate, aggregate_root, leaf_score
from meanmate.search.select import find_mating_move, select_move
from meanmate.search.root import SearchResult, find_best_move

__all__ = [
    'Leaf',
    'Node',
    'SearchTree',
    'build_tree',
    'count_leaves',
    'aggregate',
    'aggregate_root',
    'leaf_score',
    'find_mating_move',
    'select_move',
    'SearchResult',
    'find_best_move',
]
