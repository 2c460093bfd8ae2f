"""
Unit Tests for UCI Command Parsing

Tests for parse_command, focusing on:
    - Every UCI command the engine accepts
    - Malformed arguments raising CommandParseError
    - Unknown input passing through as Unknown
"""

import chess
import pytest
from meanmate.errors import CommandParseError
from meanmate.uci import commands
from meanmate.uci.commands import parse_command


class TestSimpleCommands:
    """Commands without arguments."""

    @pytest.mark.parametrize("line, expected", [
        ("uci", commands.Uci),
        ("isready", commands.IsReady),
        ("ucinewgame", commands.UciNewGame),
        ("stop", commands.Stop),
        ("ponderhit", commands.PonderHit),
        ("quit", commands.Quit),
        ("  isready  \n", commands.IsReady),
    ])
    def test_parse(self, line, expected):
        assert isinstance(parse_command(line), expected)

    def test_blank_line(self):
        assert parse_command("   ") is None

    def test_unknown(self):
        command = parse_command("xyzzy plugh")

        assert command == commands.Unknown(line="xyzzy plugh")


class TestPosition:
    """Tests for 'position'."""

    def test_startpos(self):
        command = parse_command("position startpos")

        assert command.startpos
        assert command.fen is None
        assert command.moves == ()

    def test_startpos_with_moves(self):
        command = parse_command("position startpos moves e2e4 e7e5 e1g1")

        assert command.moves == (
            chess.Move.from_uci("e2e4"),
            chess.Move.from_uci("e7e5"),
            chess.Move.from_uci("e1g1"),
        )

    def test_fen(self):
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"

        command = parse_command(f"position fen {fen}")

        assert not command.startpos
        assert command.fen == fen

    def test_fen_with_moves(self):
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"

        command = parse_command(f"position fen {fen} moves e7e5")

        assert command.fen == fen
        assert command.moves == (chess.Move.from_uci("e7e5"),)

    def test_promotion_move(self):
        command = parse_command("position fen 8/P7/8/8/8/8/8/k6K w - - 0 1 moves a7a8q")

        assert command.moves[0].promotion == chess.QUEEN

    @pytest.mark.parametrize("line", [
        "position",
        "position moves e2e4",
        "position fen",
        "position somewhere",
        "position startpos extra",
        "position startpos moves e2e9",
        "position startpos moves hello",
    ])
    def test_malformed(self, line):
        with pytest.raises(CommandParseError):
            parse_command(line)


class TestGo:
    """Tests for 'go'."""

    def test_bare_go(self):
        command = parse_command("go")

        assert command == commands.Go()

    def test_time_controls(self):
        command = parse_command("go wtime 300000 btime 290000 winc 2000 binc 2000 movestogo 40")

        assert command.params == {
            "wtime": 300000, "btime": 290000, "winc": 2000, "binc": 2000, "movestogo": 40,
        }

    def test_flags_and_depth(self):
        command = parse_command("go infinite depth 7 ponder")

        assert command.params == {"depth": 7}
        assert command.flags == ("infinite", "ponder")

    def test_searchmoves(self):
        command = parse_command("go searchmoves e2e4 d2d4 depth 3")

        assert command.searchmoves == (chess.Move.from_uci("e2e4"), chess.Move.from_uci("d2d4"))
        assert command.params == {"depth": 3}

    def test_unknown_tokens_ignored(self):
        assert parse_command("go frobnicate depth 2").params == {"depth": 2}

    @pytest.mark.parametrize("line, params", [
        ("go depth", {}),
        ("go depth five", {}),
        ("go movetime 1.5", {}),
        ("go wtime abc depth 2", {"depth": 2}),
        ("go depth wtime 1000", {"wtime": 1000}),
    ])
    def test_bad_values_are_skipped(self, line, params):
        command = parse_command(line)

        assert isinstance(command, commands.Go)
        assert command.params == params


class TestOtherCommands:
    """Tests for debug, setoption and register."""

    def test_debug(self):
        assert parse_command("debug on") == commands.Debug(enabled=True)
        assert parse_command("debug off") == commands.Debug(enabled=False)

    @pytest.mark.parametrize("line", ["debug", "debug maybe"])
    def test_debug_malformed(self, line):
        with pytest.raises(CommandParseError):
            parse_command(line)

    def test_setoption(self):
        assert parse_command("setoption name Depth value 4") == commands.SetOption(name="Depth", value="4")

    def test_setoption_name_with_spaces(self):
        command = parse_command("setoption name Clear Hash")

        assert command == commands.SetOption(name="Clear Hash", value=None)

    @pytest.mark.parametrize("line", ["setoption", "setoption Depth 4", "setoption name value 4"])
    def test_setoption_malformed(self, line):
        with pytest.raises(CommandParseError):
            parse_command(line)

    def test_register_later(self):
        assert parse_command("register later") == commands.Register(later=True)

    def test_register_name_code(self):
        command = parse_command("register name Jane Doe code 1234")

        assert command == commands.Register(name="Jane Doe", code="1234")
