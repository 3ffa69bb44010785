# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Sequence length classification.

RFC 2279 extends the UTF-8 bit layout to sequences of up to 6 bytes,
giving 31 bits of payload. The leading byte of each sequence starts with
as many 1 bits as the sequence has bytes, followed by a 0 separator.
"""

from typing import Tuple

from .errors import ValueOverflowError

MAX_VALUE = 0x7FFFFFFF
MAX_SEQUENCE_LENGTH = 6

# (max value, length, header) for each sequence length
_HEADERS = (
    (0x0000007F, 1, 0b00000000),
    (0x000007FF, 2, 0b11000000),
    (0x0000FFFF, 3, 0b11100000),
    (0x001FFFFF, 4, 0b11110000),
    (0x03FFFFFF, 5, 0b11111000),
    (0x7FFFFFFF, 6, 0b11111100),
)


def get_header(value: int) -> Tuple[int, int]:
    """
    Get the sequence length and header byte for a code value.

    The header is the leading byte with its payload bits zeroed, so the
    remaining high-order payload can be OR-ed into it.

    Args:
        value: Code value in [0, 0x7FFFFFFF]

    Returns:
        Tuple of (sequence length, header byte)

    Raises:
        ValueOverflowError: If value is negative or above 0x7FFFFFFF
    """
    if value < 0:
        raise ValueOverflowError("Code value must be non-negative")

    for max_value, length, header in _HEADERS:
        if value <= max_value:
            return length, header

    raise ValueOverflowError(f"Value 0x{value:X} exceeds 0x{MAX_VALUE:X}")


def byte_length(value: int) -> int:
    """Return the number of bytes (1-6) needed to encode value."""
    return get_header(value)[0]
