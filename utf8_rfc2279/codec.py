# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
RFC 2279 UTF-8 encoder/decoder.

Encodes code values up to 0x7FFFFFFF as 1 to 6 byte sequences. No
validation is done on either side: surrogates, overlong forms and values
above U+10FFFF are all accepted. This is not an RFC 3629 codec and must
not be used as one.
"""

from typing import Iterable, Iterator, Tuple, Union

from .errors import BufferTooSmallError, TruncatedInputError
from .header import MAX_SEQUENCE_LENGTH, get_header


def encode_into(
    value: int,
    buffer: Union[bytearray, memoryview],
    offset: int = 0,
) -> int:
    """
    Encode a code value into a caller-owned buffer.

    Args:
        value: Code value in [0, 0x7FFFFFFF]
        buffer: Writable buffer (bytearray, memoryview)
        offset: Position of the leading byte in buffer

    Returns:
        Number of bytes written

    Raises:
        ValueOverflowError: If value does not fit in 6 bytes
        BufferTooSmallError: If buffer has no room for the sequence
    """
    length, header = get_header(value)

    if offset < 0:
        raise BufferTooSmallError("Offset must be non-negative")
    if len(buffer) - offset < length:
        raise BufferTooSmallError(
            f"Need {length} bytes at offset {offset}, buffer holds {len(buffer)}"
        )

    for i in range(offset + length - 1, offset, -1):
        buffer[i] = 0x80 | (value & 0x3F)
        value >>= 6
    # Works for ASCII too: the loop is skipped and the header is 0
    buffer[offset] = header | value

    return length


def encode(value: int) -> bytes:
    """
    Encode a code value as a 1 to 6 byte sequence.

    Example:
        >>> encode(0x2260)
        b'\\xe2\\x89\\xa0'
    """
    buffer = bytearray(MAX_SEQUENCE_LENGTH)
    length = encode_into(value, buffer)
    return bytes(buffer[:length])


def decode(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode one sequence from bytes.

    The leading byte alone decides the length; continuation bytes are
    not checked for their 10xxxxxx marker. An orphan continuation byte
    as lead decodes as a single byte (value = lead & 0x7F), and 0xFE/0xFF
    decode as 6-byte sequences.

    Args:
        data: Bytes starting with an encoded sequence
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        TruncatedInputError: If data ends before the sequence does
    """
    if offset < 0 or offset >= len(data):
        raise TruncatedInputError("Decode: unexpected end of data")

    lead = data[offset]
    ones = 0
    while ones < 8 and lead & (0x80 >> ones):
        ones += 1

    if ones < 2:
        return lead & 0x7F, 1

    length = min(ones, MAX_SEQUENCE_LENGTH)
    if offset + length > len(data):
        raise TruncatedInputError(
            f"Decode: sequence needs {length} bytes, "
            f"{len(data) - offset} available"
        )

    value = lead & ((1 << (7 - length)) - 1)
    for i in range(offset + 1, offset + length):
        value = (value << 6) | (data[i] & 0x3F)

    return value, length


def encode_all(values: Iterable[int]) -> bytes:
    """Encode a sequence of code values into one byte string."""
    output = bytearray()
    buffer = bytearray(MAX_SEQUENCE_LENGTH)
    for value in values:
        length = encode_into(value, buffer)
        output += buffer[:length]
    return bytes(output)


def iter_decode(data: bytes) -> Iterator[int]:
    """
    Decode consecutive sequences until data is exhausted.

    Raises:
        TruncatedInputError: If the last sequence is cut short
    """
    offset = 0
    while offset < len(data):
        value, length = decode(data, offset)
        offset += length
        yield value
