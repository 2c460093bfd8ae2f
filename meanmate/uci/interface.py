"""
UCI Protocol Implementation

This module implements the Universal Chess Interface (UCI) protocol for
communication between the engine and GUI applications.

UCI Commands Supported:
    - uci: Identify engine
    - debug: Toggle debug logging
    - isready: Synchronization check
    - setoption: Depth and Threads
    - register: Accepted, nothing to register
    - ucinewgame: Start new game
    - position: Set board position
    - go: Search and answer with bestmove
    - stop / ponderhit: Accepted, ignored (search is synchronous)
    - quit: Shutdown engine

Threading:
    - The command loop is single threaded: 'go' blocks until the search
      is done and the next line is only read afterwards
    - The search fans the root moves out to a persistent worker pool

References:
    - UCI Protocol: https://www.chessprogramming.org/UCI
"""

import logging
import sys
from concurrent.futures import BrokenExecutor, Executor, ProcessPoolExecutor, ThreadPoolExecutor
from pathlib import Path
from typing import Optional

import chess
from meanmate.config import EngineConfig
from meanmate.errors import CommandParseError, EngineError, NoLegalMovesError
from meanmate.evaluation.base import Evaluator
from meanmate.evaluation.material import MaterialEvaluator
from meanmate.search.root import SearchResult, find_best_move
from meanmate.uci import commands
from meanmate.uci.state import EngineState

MAX_DEPTH_OPTION = 10
CLASSIC_DEPTH = 5
MAX_THREADS_OPTION = 256


def setup_logger(log_file: Path, debug: bool = False):
    """
    Setup file-based logger for UCI debugging.

    Stdout belongs to the protocol, so everything goes to a file.

    Args:
        log_file: Path of the log file (parent directory is created)
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured logger instance
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("meanmate")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class UCIEngine:
    """
    UCI-compliant chess engine interface.

    This class handles all UCI communication and runs the search pipeline
    on 'go'.

    Attributes:
        config: Engine configuration (depth, workers, logging)
        state: Current game position
        evaluator: Leaf evaluator
        executor: Worker pool, created on the first search

    Methods:
        run: Main UCI command loop
        dispatch: Execute one parsed command
        handle_*: One handler per UCI command
        close: Shut down the worker pool
    """

    def __init__(self, config: Optional[EngineConfig] = None, evaluator: Optional[Evaluator] = None):
        """
        Initialize UCI engine.

        Args:
            config: Engine configuration (default: EngineConfig())
            evaluator: Leaf evaluator (default: MaterialEvaluator)
        """
        self.config = config if config else EngineConfig()
        self.evaluator = evaluator if evaluator else MaterialEvaluator()
        self.state = EngineState()
        self.executor: Optional[Executor] = None

        self.logger = setup_logger(self.config.log_file, debug=self.config.debug)
        self.logger.info(f"=== {self.config.name} Engine Started ===")
        self.logger.info(f"Log file: {self.config.log_file}")
        self.logger.info(f"Config: {self.config!r}")

    @property
    def board(self) -> chess.Board:
        return self.state.board

    def send(self, line: str):
        """Write one protocol line to stdout."""
        print(line)
        sys.stdout.flush()
        self.logger.debug(f"<<< {line}")

    def run(self):
        """
        Main UCI command loop.

        Reads one command per line from stdin until 'quit' or end of
        input. A bad line is answered with an 'info string' and the loop
        carries on.
        """
        try:
            while True:
                try:
                    line = input()
                except EOFError:
                    self.logger.info("EOF received, shutting down")
                    break

                if not line.strip():
                    continue

                self.logger.debug(f">>> {line}")

                try:
                    command = commands.parse_command(line)
                    if not self.dispatch(command):
                        break
                except EngineError as e:
                    self.logger.warning(f"{type(e).__name__}: {e}")
                    self.send(f"info string error: {e}")
                except Exception as e:
                    self.logger.error(f"Command error: {e}", exc_info=True)
                    self.send(f"info string internal error: {e}")
        finally:
            self.close()

    def dispatch(self, command) -> bool:
        """
        Execute one command.

        Returns:
            False if the loop should stop, True otherwise
        """
        if isinstance(command, commands.Uci):
            self.handle_uci()
        elif isinstance(command, commands.Debug):
            self.handle_debug(command)
        elif isinstance(command, commands.IsReady):
            self.handle_isready()
        elif isinstance(command, commands.Register):
            self.logger.info("Handling: register (nothing to register)")
        elif isinstance(command, commands.Position):
            self.handle_position(command)
        elif isinstance(command, commands.SetOption):
            self.handle_setoption(command)
        elif isinstance(command, commands.UciNewGame):
            self.handle_ucinewgame()
        elif isinstance(command, commands.Go):
            self.handle_go(command)
        elif isinstance(command, (commands.Stop, commands.PonderHit)):
            self.logger.info(f"Handling: {type(command).__name__.lower()} (search is synchronous, ignored)")
        elif isinstance(command, commands.Quit):
            self.handle_quit()
            return False
        elif isinstance(command, commands.Unknown):
            self.logger.debug(f"Unknown command: {command.line}")
            self.send("info string Help")

        return True

    def handle_uci(self):
        """
        Handle 'uci' command - identify engine.

        Response:
            id name MeanMate
            id author ...
            option ...
            info string (Depth advice)
            uciok
        """
        self.logger.info("Handling: uci")

        self.send(f"id name {self.config.name}")
        self.send(f"id author {self.config.author}")
        self.send(f"option name Depth type spin default {self.config.depth} min 1 max {MAX_DEPTH_OPTION}")
        self.send(f"option name Threads type spin default {self.config.workers} min 1 max {MAX_THREADS_OPTION}")
        self.send(
            f"info string Depth {CLASSIC_DEPTH} is the classic setting; "
            f"the default of {self.config.depth} keeps move times short"
        )
        self.send("uciok")

    def handle_debug(self, command: commands.Debug):
        """Handle 'debug on|off' - switch log level."""
        self.config.debug = command.enabled
        self.logger.setLevel(logging.DEBUG if command.enabled else logging.INFO)
        self.logger.info(f"Handling: debug {'on' if command.enabled else 'off'}")

    def handle_isready(self):
        """
        Handle 'isready' command - synchronization.

        Response:
            readyok
        """
        self.logger.info("Handling: isready")
        self.send("readyok")

    def handle_setoption(self, command: commands.SetOption):
        """
        Handle 'setoption name <id> value <x>'.

        Supported options:
            Depth: Fixed search depth in plies
            Threads: Worker pool size (the pool is recreated)
        """
        self.logger.info(f"Handling: setoption {command.name} = {command.value}")
        name = command.name.lower()

        if name == "depth":
            self.config.depth = self._spin_value(command, 1, MAX_DEPTH_OPTION)
        elif name == "threads":
            self.config.max_workers = self._spin_value(command, 1, MAX_THREADS_OPTION)
            self._shutdown_executor()
        else:
            self.logger.info(f"Unsupported option ignored: {command.name}")

    @staticmethod
    def _spin_value(command: commands.SetOption, minimum: int, maximum: int) -> int:
        try:
            value = int(command.value)
        except (TypeError, ValueError) as e:
            raise CommandParseError(f"Option {command.name} needs an integer value, got {command.value}") from e

        if not minimum <= value <= maximum:
            raise CommandParseError(f"Option {command.name} must be in [{minimum}, {maximum}], got {value}")
        return value

    def handle_ucinewgame(self):
        """Handle 'ucinewgame' command - reset for new game."""
        self.logger.info("Handling: ucinewgame - resetting board")
        self.state.reset()
        self.send("readyok")

    def handle_position(self, command: commands.Position):
        """
        Handle 'position' command - set board position.

        Raises:
            PositionError: Invalid FEN or illegal move (old position kept)
        """
        source = "startpos" if command.startpos else f"fen {command.fen}"
        self.logger.info(f"Handling: position {source} ({len(command.moves)} moves)")

        self.state.set_position(command.fen, command.moves)

        fen = self.state.fen()
        self.logger.info(f"Position updated: {fen[:60]}{'...' if len(fen) > 60 else ''}")
        if self.state.is_new_game:
            self.logger.info("Fresh game from the initial position")

    def handle_go(self, command: commands.Go):
        """
        Handle 'go' command - search and answer.

        Time controls and 'depth' are logged and ignored: the search
        always runs to the configured depth.

        Output:
            info depth X nodes Y time Z score cp S
            bestmove <move>
        """
        self.logger.info(f"Handling: go {command.params} {' '.join(command.flags)}")
        if command.params or command.flags or command.searchmoves:
            self.logger.debug(f"go parameters ignored, searching at fixed depth {self.config.depth}")

        board = self.state.snapshot()
        if self.state.is_new_game:
            self.logger.info("Searching the initial position of a fresh game")

        try:
            fen = board.fen()
            self.logger.info(f"Search started: depth={self.config.depth}, position={fen[:50]}{'...' if len(fen) > 50 else ''}")

            result = self._search(board)

            self.logger.info(
                f"Search complete: best_move={result.move.uci()}, score={float(result.score):.2f}, "
                f"leaves={result.leaves}, time={int(result.elapsed * 1000)}ms"
            )

            self.send(self._info_line(result))
            self.send(f"bestmove {result.move.uci()}")

        except NoLegalMovesError as e:
            self.logger.warning(f"No move available: {e}")
            self.send("info string no legal moves")
            self.send(f"bestmove {chess.Move.null().uci()}")

        except Exception as e:
            self.logger.error(f"Search error: {e}", exc_info=True)

            # Send a legal move as fallback
            legal_moves = list(board.legal_moves)
            fallback_move = legal_moves[0] if legal_moves else chess.Move.null()
            self.logger.warning(f"Using fallback move: {fallback_move.uci()}")
            self.send(f"info string search failed: {e}")
            self.send(f"bestmove {fallback_move.uci()}")

    def _search(self, board: chess.Board) -> SearchResult:
        """
        Run the search on the worker pool.

        A pool whose workers died (killed, out of memory) is unusable
        from then on, so it is discarded and the search retried once on
        a fresh pool.
        """
        try:
            return find_best_move(
                board, self.config.depth, self.evaluator,
                self._get_executor(), self.config.parallel_plies,
            )
        except BrokenExecutor as e:
            self.logger.warning(f"Worker pool broken ({e}), restarting it")
            self._shutdown_executor()

        return find_best_move(
            board, self.config.depth, self.evaluator,
            self._get_executor(), self.config.parallel_plies,
        )

    @staticmethod
    def _info_line(result: SearchResult) -> str:
        score = "mate 1" if result.mate else f"cp {round(result.score)}"
        return (
            f"info depth {result.depth} nodes {result.leaves} "
            f"time {int(result.elapsed * 1000)} score {score}"
        )

    def handle_quit(self):
        """Handle 'quit' command - shutdown engine."""
        self.logger.info("Handling: quit - shutting down engine")

    def _get_executor(self) -> Executor:
        """Worker pool for the fan-out levels, created on first use."""
        if self.executor is None:
            if self.config.executor == "thread":
                self.executor = ThreadPoolExecutor(max_workers=self.config.workers)
            else:
                self.executor = ProcessPoolExecutor(max_workers=self.config.workers)
            self.logger.debug(f"Started {self.config.executor} pool with {self.config.workers} workers")
        return self.executor

    def _shutdown_executor(self):
        if self.executor is not None:
            self.executor.shutdown(wait=True)
            self.executor = None
            self.logger.debug("Worker pool shut down")

    def close(self):
        """Release the worker pool."""
        self._shutdown_executor()
        self.logger.info(f"=== {self.config.name} Engine Stopped ===")
