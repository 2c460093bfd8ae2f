"""
Material Evaluation

Scores a position by summing a fixed value for every piece on the board
into the bucket of the side that owns it. There is no positional,
mobility or game-phase term.

Because the occupancy bitboards are walked directly, promoted pieces are
counted as what they are now, and any number of pieces of one kind is
handled the same way.
"""

import chess
from meanmate.evaluation.base import Evaluator, Material

# ============================================================================
# Material Values (centipawns)
# ============================================================================

PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 225,
    chess.BISHOP: 225,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}


class MaterialEvaluator(Evaluator):
    """
    Material-only evaluation.

    Attributes:
        piece_values: Mapping of piece type to value in centipawns
    """

    def __init__(self, piece_values=None):
        self.piece_values = dict(piece_values) if piece_values else dict(PIECE_VALUES)

    def evaluate(self, board: chess.Board) -> Material:
        """
        Sum material for both sides.

        Each piece kind's bitboard is consumed lowest bit first, so every
        occupied square is visited exactly once.

        Args:
            board: Chess board to evaluate

        Returns:
            (white, black) material totals
        """
        white = 0
        black = 0

        for piece_type in chess.PIECE_TYPES:
            value = self.piece_values[piece_type]
            bb = board.pieces_mask(piece_type, chess.WHITE) | board.pieces_mask(piece_type, chess.BLACK)

            while bb:
                square = chess.lsb(bb)
                bb &= bb - 1

                if board.color_at(square) == chess.WHITE:
                    white += value
                else:
                    black += value

        return white, black

    def __repr__(self) -> str:
        return f"MaterialEvaluator(piece_values={self.piece_values})"
