#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for the RFC 2279 UTF-8 codec.

Usage:
    python utf8_tool.py encode 0x2260 0x7DEADA55
    python utf8_tool.py decode "e2 89 a0 fd bd ba ad a9 95"
    python utf8_tool.py length 0x80 0x4000000
"""

import argparse
import sys
from typing import List

from utf8_rfc2279 import byte_length, decode, encode
from utf8_rfc2279.errors import CodecError


def parse_value(text: str) -> int:
    """Parse an integer literal in any base Python accepts (0x41, 65, 0o101)."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid code value: {text!r}")


def cmd_encode(values: List[int]):
    """Print the encoded bytes of each value."""
    for value in values:
        print(f"0x{value:X}: {encode(value).hex(' ')}")


def cmd_decode(hex_bytes: List[str]):
    """Print every value decoded from a hex byte string."""
    try:
        data = bytes.fromhex("".join(hex_bytes))
    except ValueError:
        raise CodecError("Invalid hex input") from None

    offset = 0
    while offset < len(data):
        value, length = decode(data, offset)
        print(f"0x{value:X} ({length} {'byte' if length == 1 else 'bytes'})")
        offset += length


def cmd_length(values: List[int]):
    """Print the sequence length of each value."""
    for value in values:
        print(f"0x{value:X}: {byte_length(value)}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="RFC 2279 UTF-8 encoder/decoder (1-6 byte sequences, no validation)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode code values")
    encode_parser.add_argument("values", nargs="+", type=parse_value,
                               help="Code values (e.g., 0x2260 or 8800)")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a hex byte string")
    decode_parser.add_argument("hex", nargs="+",
                               help="Encoded bytes as hex (spaces allowed)")

    # length command
    length_parser = subparsers.add_parser("length", help="Show sequence lengths")
    length_parser.add_argument("values", nargs="+", type=parse_value,
                               help="Code values")

    args = parser.parse_args(argv)

    try:
        if args.command == "encode":
            cmd_encode(args.values)
        elif args.command == "decode":
            cmd_decode(args.hex)
        elif args.command == "length":
            cmd_length(args.values)
    except CodecError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
