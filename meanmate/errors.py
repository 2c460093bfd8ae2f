"""
Engine Exceptions

Every failure the UCI loop knows how to recover from derives from
EngineError. The loop reports these as ``info string`` lines and keeps
reading commands; anything else escaping a ``go`` is answered with a
fallback move.
"""


class EngineError(Exception):
    """Base class for recoverable engine errors."""


class CommandParseError(EngineError):
    """A UCI input line could not be parsed."""


class PositionError(EngineError):
    """A FEN or move list could not be applied to the board."""


class NoLegalMovesError(EngineError):
    """The side to move has no legal moves (checkmate or stalemate)."""


class SearchError(EngineError):
    """An internal search invariant was violated."""
