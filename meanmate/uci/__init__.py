"""
UCI Protocol Interface

This module implements the Universal Chess Interface (UCI) protocol,
which allows the engine to communicate with chess GUIs like Arena,
CuteChess, and Lichess bots.

Protocol Flow:
    GUI → "uci"
    Engine → "id name MeanMate"
    Engine → "id author ..."
    Engine → "uciok"
    GUI → "isready"
    Engine → "readyok"
    GUI → "position startpos moves e2e4"
    GUI → "go wtime 300000 btime 300000"
    Engine → "info depth 3 nodes 9322 time 812 score cp 4"
    Engine → "bestmove e7e5"

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

from meanmate.uci.commands import parse_command
from meanmate.uci.interface import UCIEngine
from meanmate.uci.state import EngineState

__all__ = ['UCIEngine', 'EngineState', 'parse_command']
