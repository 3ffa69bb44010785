# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the command-line tool."""

import argparse

import pytest
from utf8_rfc2279.errors import CodecError
from utf8_tool import cmd_decode, main, parse_value


class TestParseValue:
    """Tests for parse_value function."""

    def test_bases(self):
        """Hex, decimal and octal literals."""
        assert parse_value("0x2260") == 0x2260
        assert parse_value("65") == 65
        assert parse_value("0o101") == 65

    def test_invalid_raises(self):
        """Non-integers are rejected."""
        with pytest.raises(argparse.ArgumentTypeError, match="invalid code value"):
            parse_value("abc")


class TestMain:
    """Tests for main entry point."""

    def test_encode(self, capsys):
        """encode prints hex bytes per value."""
        main(["encode", "0x2260", "65"])
        assert capsys.readouterr().out == "0x2260: e2 89 a0\n0x41: 41\n"

    def test_decode(self, capsys):
        """decode prints each value and its length."""
        main(["decode", "c2 80 41"])
        assert capsys.readouterr().out == "0x80 (2 bytes)\n0x41 (1 byte)\n"

    def test_decode_split_args(self, capsys):
        """Hex may be given as several arguments."""
        main(["decode", "fc", "84", "80", "80", "80", "80"])
        assert capsys.readouterr().out == "0x4000000 (6 bytes)\n"

    def test_length(self, capsys):
        """length prints byte lengths."""
        main(["length", "0x7F", "0x80", "0x4000000"])
        assert capsys.readouterr().out == "0x7F: 1\n0x80: 2\n0x4000000: 6\n"

    def test_encode_overflow_exits(self, capsys):
        """Out-of-range values exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "0x80000000"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out.startswith("Error: Value 0x80000000 exceeds")

    def test_decode_truncated_exits(self, capsys):
        """Truncated input exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["decode", "e2 89"])
        assert exc_info.value.code == 1
        assert "needs 3 bytes, 2 available" in capsys.readouterr().out

    def test_decode_bad_hex_exits(self, capsys):
        """Non-hex input exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["decode", "zz"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == "Error: Invalid hex input\n"

    def test_bad_literal_is_usage_error(self):
        """Unparseable values are argparse usage errors."""
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "nope"])
        assert exc_info.value.code == 2

    def test_missing_command_is_usage_error(self):
        """A subcommand is required."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_length_negative_exits(self, capsys):
        """Negative values are reported without mentioning encoding."""
        with pytest.raises(SystemExit) as exc_info:
            main(["length", "-1"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == "Error: Code value must be non-negative\n"


class TestCmdDecode:
    """Tests for cmd_decode function."""

    def test_bad_hex_not_chained(self):
        """The hex parsing ValueError is not chained onto CodecError."""
        with pytest.raises(CodecError, match="Invalid hex input") as exc_info:
            cmd_decode(["zz"])
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__
