# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the RFC 2279 codec."""


class CodecError(ValueError):
    """Base exception for codec errors."""
    pass


class ValueOverflowError(CodecError):
    """Code value does not fit in a 6-byte sequence."""
    pass


class BufferTooSmallError(CodecError):
    """Encode target cannot hold the encoded sequence."""
    pass


class TruncatedInputError(CodecError):
    """Decode source ends before the sequence does."""
    pass
