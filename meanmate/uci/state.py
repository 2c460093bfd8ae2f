"""
Engine State

The single current position of a UCI session. Only the UCI loop mutates
it; searches work on snapshots.
"""

import logging
from typing import Iterable, Optional

import chess
from meanmate.errors import PositionError

logger = logging.getLogger("meanmate.uci")


class EngineState:
    """
    Current game position.

    Attributes:
        board: Current chess position
        is_new_game: True until a move has been played on top of a fresh
            start position (reset, or startpos with no moves)
    """

    def __init__(self):
        self.board = chess.Board()
        self.is_new_game = True

    def reset(self):
        """Back to the standard initial position."""
        self.board = chess.Board()
        self.is_new_game = True

    def set_position(self, fen: Optional[str] = None, moves: Iterable[chess.Move] = ()):
        """
        Set up a position and replay a move list on top of it.

        The update is atomic: if the FEN is invalid or any move is
        illegal, the previous position is kept.

        Args:
            fen: FEN string, or None for the standard initial position
            moves: Moves to replay, in order

        Raises:
            PositionError: If the FEN is invalid or a move is illegal
        """
        if fen is None:
            board = chess.Board()
        else:
            try:
                board = chess.Board(fen)
            except ValueError as e:
                raise PositionError(f"Invalid FEN: {e}") from e

        moves = list(moves)
        for move in moves:
            if not board.is_legal(move):
                raise PositionError(f"Illegal move: {move.uci()} in {board.fen()}")
            board.push(move)

        self.board = board
        self.is_new_game = fen is None and not moves

        logger.debug(f"Position set: {board.fen()} ({len(moves)} moves replayed)")

    def snapshot(self) -> chess.Board:
        """Independent copy of the current position for a search."""
        return self.board.copy()

    def fen(self) -> str:
        return self.board.fen()

    def __repr__(self) -> str:
        return f"EngineState(fen={self.fen()!r}, is_new_game={self.is_new_game})"
