"""--debug dump of removed whitespace to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from utrim.lines import Mode
from utrim.tables import describe, is_lead_byte
from utrim.trim import ltrim_index, rtrim_index


def dump_trim(value: bytes, mode: Mode, *, file: TextIO = sys.stderr, label: str = "") -> None:
    """Print the kept range and every removed code point to *file*."""
    end = rtrim_index(value) if mode.right else len(value)
    start = ltrim_index(memoryview(value)[:end]) if mode.left else 0

    header = f"{label}: " if label else ""
    file.write(f"{header}keep [{start}:{end}] of {len(value)} bytes\n")
    if start:
        _dump_side("leading", value[:start], file)
    if end < len(value):
        _dump_side("trailing", value[end:], file)


def _dump_side(side: str, removed: bytes, f: TextIO) -> None:
    f.write(f"  {side}\n")
    for seq in _code_points(removed):
        f.write(f"    {describe(seq)}\n")


def _code_points(removed: bytes) -> list[bytes]:
    # removed only ever holds table entries, so a lead byte means 3 bytes
    result: list[bytes] = []
    idx = 0
    while idx < len(removed):
        width = 3 if is_lead_byte(removed[idx]) else 1
        result.append(removed[idx : idx + width])
        idx += width
    return result
