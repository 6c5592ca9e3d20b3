"""Left/right trimming of UTF-8 byte strings.

The scanners only ever look at 1-byte code points or at exactly three bytes,
since every multi-byte whitespace sequence in the table is three bytes long.
Results are slices of the input: a memoryview in gives a view of the same
storage back, and an untouched input is returned as-is.
"""

from __future__ import annotations

from typing import TypeVar

from utrim.tables import (
    MULTI_BYTE_WIDTH,
    is_continuation_byte,
    is_lead_byte,
    is_multi_byte_space,
    is_single_byte_space,
)

Buffer = TypeVar("Buffer", bytes, bytearray, memoryview)


def ltrim_index(value: bytes | bytearray | memoryview) -> int:
    """Return the offset of the first byte that is not leading whitespace."""
    size = len(value)
    idx = 0
    while idx < size:
        byte = value[idx]
        if is_lead_byte(byte):
            # An incomplete sequence at the end is content, not whitespace
            if idx + MULTI_BYTE_WIDTH > size:
                break
            if not is_multi_byte_space(value[idx : idx + MULTI_BYTE_WIDTH]):
                break
            idx += MULTI_BYTE_WIDTH
        elif is_single_byte_space(byte):
            idx += 1
        else:
            break
    return idx


def rtrim_index(value: bytes | bytearray | memoryview) -> int:
    """Return the offset just past the last byte that is not trailing whitespace."""
    end = len(value)
    while end > 0:
        idx = end - 1
        if is_continuation_byte(value[idx]):
            # A trailing continuation byte is assumed to close a 3-byte sequence
            if end < MULTI_BYTE_WIDTH:
                break
            if not is_multi_byte_space(value[end - MULTI_BYTE_WIDTH : end]):
                break
            end -= MULTI_BYTE_WIDTH
        elif is_single_byte_space(value[idx]):
            end = idx
        else:
            break
    return end


def trim_bounds(value: bytes | bytearray | memoryview) -> tuple[int, int]:
    """Return (start, end) such that value[start:end] == trim(value)."""
    end = rtrim_index(value)
    if end == len(value):
        start = ltrim_index(value)
    else:
        start = ltrim_index(memoryview(value)[:end])
    return start, end


def ltrim(value: Buffer) -> Buffer:
    """Remove leading single and multi-byte whitespace, returning a slice of value."""
    idx = ltrim_index(value)
    if idx == 0:
        return value
    return value[idx:]


def rtrim(value: Buffer) -> Buffer:
    """Remove trailing single and multi-byte whitespace, returning a slice of value."""
    end = rtrim_index(value)
    if end == len(value):
        return value
    return value[:end]


def trim(value: Buffer) -> Buffer:
    """Remove leading and trailing whitespace: ltrim(rtrim(value))."""
    return ltrim(rtrim(value))
