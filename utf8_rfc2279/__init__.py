# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
RFC 2279 UTF-8 codec - Python library.

This package encodes and decodes code values using the original UTF-8
definition from RFC 2279, where sequences run from 1 to 6 bytes and
carry up to 31 bits. It performs no validation and is NOT a replacement
for an RFC 3629 UTF-8 codec.

Example usage:
    from utf8_rfc2279 import encode, encode_into, decode

    encode(0x2260)              # b'\\xe2\\x89\\xa0'

    buf = bytearray(6)
    n = encode_into(0x7DEADA55, buf)
    value, consumed = decode(buf[:n])
"""

from .codec import encode, encode_into, decode, encode_all, iter_decode
from .errors import (
    CodecError,
    ValueOverflowError,
    BufferTooSmallError,
    TruncatedInputError,
)
from .header import MAX_VALUE, MAX_SEQUENCE_LENGTH, byte_length, get_header

__version__ = "0.1.0"

__all__ = [
    # Header
    "MAX_VALUE",
    "MAX_SEQUENCE_LENGTH",
    "byte_length",
    "get_header",
    # Codec
    "encode",
    "encode_into",
    "decode",
    "encode_all",
    "iter_decode",
    # Errors
    "CodecError",
    "ValueOverflowError",
    "BufferTooSmallError",
    "TruncatedInputError",
]
