"""
Unit Tests for Score Aggregation

The rollup is a plain arithmetic mean at every internal node, with
every leaf scored from the root side's point of view.
"""

from fractions import Fraction

import chess
import pytest
from meanmate.errors import SearchError
from meanmate.evaluation import MaterialEvaluator
from meanmate.search import Leaf, Node, aggregate, aggregate_root, build_tree, leaf_score


class TestLeafScore:
    """Tests for leaf_score."""

    def test_white_perspective(self):
        assert leaf_score(Leaf(900, 500), chess.WHITE) == 400

    def test_black_perspective(self):
        assert leaf_score(Leaf(900, 500), chess.BLACK) == -400

    def test_equal_material(self):
        assert leaf_score(Leaf(3600, 3600), chess.WHITE) == 0


class TestAggregate:
    """Tests for aggregate."""

    def test_leaf(self):
        assert aggregate(Leaf(10, 0), chess.WHITE) == 10

    def test_single_child_is_unchanged(self):
        """Mean of one value is the value itself."""
        assert aggregate(Node((Leaf(10, 0),)), chess.WHITE) == 10

    def test_mean_of_two(self):
        assert aggregate(Node((Leaf(10, 0), Leaf(20, 0))), chess.WHITE) == 15

    def test_empty_node_is_zero(self):
        assert aggregate(Node(()), chess.WHITE) == 0

    def test_exact_rational(self):
        """Means are exact, not rounded."""
        value = aggregate(Node((Leaf(1, 0), Leaf(2, 0))), chess.WHITE)

        assert value == Fraction(3, 2)

    def test_mean_of_means(self):
        """Each level averages its children's values, not all leaves."""
        tree = Node((
            Node((Leaf(10, 0), Leaf(20, 0))),
            Leaf(30, 0),
        ))

        # (15 + 30) / 2, whereas the flat leaf mean would be 20
        assert aggregate(tree, chess.WHITE) == Fraction(45, 2)

    def test_negative_values(self):
        """Scores below zero are kept (no unsigned wrap-around)."""
        tree = Node((Leaf(0, 900), Leaf(0, 100)))

        assert aggregate(tree, chess.WHITE) == -500
        assert aggregate(tree, chess.BLACK) == 500

    def test_uniform_root_perspective(self):
        """Deep leaves use the root side's perspective, not their own."""
        # White to move at the root; at two plies deep it is White again, at
        # one ply deep Black, but all leaves are scored for White.
        tree = Node((Node((Leaf(100, 0),)),))

        assert aggregate(tree, chess.WHITE) == 100
        assert aggregate(tree, chess.BLACK) == -100

    def test_empty_child_counts_as_zero(self):
        """A mated branch contributes 0 to its parent's mean."""
        tree = Node((Node(()), Leaf(40, 0)))

        assert aggregate(tree, chess.WHITE) == 20


class TestAggregateRoot:
    """Tests for aggregate_root."""

    def test_one_value_per_child(self):
        tree = Node((Leaf(10, 0), Node((Leaf(10, 0), Leaf(20, 0))), Node(())))

        assert aggregate_root(tree, chess.WHITE) == [10, 15, 0]

    def test_length_matches_root_moves(self):
        """Output aligns index for index with the root's legal moves."""
        board = chess.Board()
        tree = build_tree(board, 2, MaterialEvaluator())

        scores = aggregate_root(tree, board.turn)

        assert len(scores) == len(list(board.legal_moves))

    def test_index_matches_move(self):
        """Entry i is the value of root move i."""
        board = chess.Board("4k3/8/8/3q4/4P3/8/8/4K3 w - - 0 1")
        moves = list(board.legal_moves)

        scores = aggregate_root(build_tree(board, 1, MaterialEvaluator()), board.turn)

        capture = moves.index(chess.Move.from_uci("e4d5"))
        assert scores[capture] == 100
        assert all(score == -800 for i, score in enumerate(scores) if i != capture)

    def test_unexpanded_root_rejected(self):
        with pytest.raises(SearchError):
            aggregate_root(Leaf(1, 2), chess.WHITE)
