"""
Root Move Selection

Turns the aggregated score vector into the move to play.

Priority:
    1. Any root move that checkmates immediately (first one in generation
       order), regardless of scores
    2. The highest aggregated score, ties going to the earliest move
"""

from typing import Optional, Sequence

import chess
from meanmate.errors import NoLegalMovesError, SearchError


def gives_checkmate(board: chess.Board, move: chess.Move) -> bool:
    """Whether playing `move` checkmates the opponent. Board is restored."""
    board.push(move)
    try:
        return board.is_checkmate()
    finally:
        board.pop()


def find_mating_move(board: chess.Board, moves: Sequence[chess.Move]) -> Optional[chess.Move]:
    """First move in `moves` that mates immediately, or None."""
    for move in moves:
        if gives_checkmate(board, move):
            return move
    return None


def select_move(board: chess.Board, moves: Sequence[chess.Move], scores: Sequence) -> chess.Move:
    """
    Pick the move to play.

    Args:
        board: Root position
        moves: Legal root moves in generation order
        scores: Aggregated value per move, same order as `moves`

    Returns:
        The chosen move

    Raises:
        NoLegalMovesError: If `moves` is empty
        SearchError: If `scores` does not line up with `moves`
    """
    if not moves:
        raise NoLegalMovesError(f"No legal moves in position {board.fen()}")

    if len(scores) != len(moves):
        raise SearchError(f"Got {len(scores)} scores for {len(moves)} root moves")

    mating_move = find_mating_move(board, moves)
    if mating_move is not None:
        return mating_move

    # max() keeps the first of equal keys
    best_index = max(range(len(scores)), key=lambda i: scores[i])
    return moves[best_index]
