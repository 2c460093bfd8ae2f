"""
UCI Command Parsing

Turns one line of UCI input into a typed command object. The loop in
interface.py only ever sees these objects, never raw tokens.

Malformed lines raise CommandParseError instead of crashing the engine;
lines whose first token is not a UCI command become Unknown. A go with a
bad parameter value still parses, minus that parameter.

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

import chess
from meanmate.errors import CommandParseError

logger = logging.getLogger("meanmate.uci")

# go parameters that take an integer argument
GO_INT_PARAMS = ("wtime", "btime", "winc", "binc", "movestogo", "depth", "nodes", "mate", "movetime")
GO_FLAGS = ("ponder", "infinite")


@dataclass(frozen=True)
class Uci:
    pass


@dataclass(frozen=True)
class Debug:
    enabled: bool


@dataclass(frozen=True)
class IsReady:
    pass


@dataclass(frozen=True)
class Register:
    later: bool = False
    name: Optional[str] = None
    code: Optional[str] = None


@dataclass(frozen=True)
class Position:
    """position startpos|fen <FEN> [moves ...]; fen is None for startpos."""
    fen: Optional[str] = None
    moves: Tuple[chess.Move, ...] = ()

    @property
    def startpos(self) -> bool:
        return self.fen is None


@dataclass(frozen=True)
class SetOption:
    name: str
    value: Optional[str] = None


@dataclass(frozen=True)
class UciNewGame:
    pass


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class PonderHit:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Go:
    """
    go [wtime X] [btime X] [depth X] [movetime X] [infinite] ...

    Parameters are kept for logging; the search depth is fixed by the
    engine configuration.
    """
    params: Dict[str, int] = field(default_factory=dict)
    flags: Tuple[str, ...] = ()
    searchmoves: Tuple[chess.Move, ...] = ()


@dataclass(frozen=True)
class Unknown:
    line: str


Command = Union[
    Uci, Debug, IsReady, Register, Position, SetOption,
    UciNewGame, Stop, PonderHit, Quit, Go, Unknown,
]


def _parse_move(text: str) -> chess.Move:
    try:
        return chess.Move.from_uci(text)
    except ValueError as e:
        raise CommandParseError(f"Invalid move format: {text}") from e


def parse_position(tokens) -> Position:
    """
    Parse 'position' arguments.

    Formats:
        position startpos
        position startpos moves e2e4 e7e5
        position fen <FEN string>
        position fen <FEN string> moves e2e4
    """
    if not tokens:
        raise CommandParseError("position: expected 'startpos' or 'fen'")

    if "moves" in tokens:
        moves_index = tokens.index("moves")
        setup, move_tokens = tokens[:moves_index], tokens[moves_index + 1:]
    else:
        setup, move_tokens = tokens, []

    if not setup:
        raise CommandParseError("position: expected 'startpos' or 'fen' before 'moves'")

    if setup[0] == "startpos":
        if len(setup) > 1:
            raise CommandParseError(f"position: unexpected tokens after startpos: {' '.join(setup[1:])}")
        fen = None
    elif setup[0] == "fen":
        if len(setup) < 2:
            raise CommandParseError("position: missing FEN")
        fen = " ".join(setup[1:])
    else:
        raise CommandParseError(f"position: unknown position type: {setup[0]}")

    return Position(fen=fen, moves=tuple(_parse_move(m) for m in move_tokens))


def parse_go(tokens) -> Go:
    """Parse 'go' arguments."""
    params = {}
    flags = []
    searchmoves = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in GO_INT_PARAMS:
            # A bad value only drops that parameter: every go gets a search
            value = tokens[i + 1] if i + 1 < len(tokens) else None
            try:
                params[token] = int(value)
            except (TypeError, ValueError):
                logger.warning(f"go: ignoring {token} with bad value {value!r}")
                i += 1
                continue
            i += 2
        elif token in GO_FLAGS:
            flags.append(token)
            i += 1
        elif token == "searchmoves":
            i += 1
            while i < len(tokens) and tokens[i] not in GO_INT_PARAMS + GO_FLAGS:
                searchmoves.append(_parse_move(tokens[i]))
                i += 1
        else:
            # Unknown tokens are ignored, as UCI asks
            i += 1

    return Go(params=params, flags=tuple(flags), searchmoves=tuple(searchmoves))


def parse_setoption(tokens) -> SetOption:
    """Parse 'setoption name <id> [value <x>]'; names may contain spaces."""
    if not tokens or tokens[0] != "name" or len(tokens) < 2:
        raise CommandParseError("setoption: expected 'name <id> [value <x>]'")

    if "value" in tokens:
        value_index = tokens.index("value")
        name = " ".join(tokens[1:value_index])
        value = " ".join(tokens[value_index + 1:])
    else:
        name = " ".join(tokens[1:])
        value = None

    if not name:
        raise CommandParseError("setoption: empty option name")

    return SetOption(name=name, value=value)


def parse_register(tokens) -> Register:
    """Parse 'register later' or 'register name <x> code <y>'."""
    if tokens == ["later"]:
        return Register(later=True)

    name = None
    code = None
    if "name" in tokens:
        start = tokens.index("name") + 1
        end = tokens.index("code") if "code" in tokens[start:] else len(tokens)
        name = " ".join(tokens[start:end])
    if "code" in tokens:
        code = " ".join(tokens[tokens.index("code") + 1:])

    return Register(name=name, code=code)


def parse_debug(tokens) -> Debug:
    if tokens == ["on"]:
        return Debug(enabled=True)
    if tokens == ["off"]:
        return Debug(enabled=False)
    raise CommandParseError(f"debug: expected 'on' or 'off', got {' '.join(tokens) or 'nothing'}")


_NO_ARGS = {
    "uci": Uci,
    "isready": IsReady,
    "ucinewgame": UciNewGame,
    "stop": Stop,
    "ponderhit": PonderHit,
    "quit": Quit,
}

_WITH_ARGS = {
    "debug": parse_debug,
    "register": parse_register,
    "position": parse_position,
    "setoption": parse_setoption,
    "go": parse_go,
}


def parse_command(line: str) -> Optional[Command]:
    """
    Parse one line of UCI input.

    Args:
        line: Raw input line

    Returns:
        Command object, or None for a blank line

    Raises:
        CommandParseError: If the line is a UCI command with bad arguments
    """
    tokens = line.split()
    if not tokens:
        return None

    cmd, args = tokens[0], tokens[1:]

    if cmd in _NO_ARGS:
        return _NO_ARGS[cmd]()

    if cmd in _WITH_ARGS:
        return _WITH_ARGS[cmd](args)

    return Unknown(line=line.strip())
