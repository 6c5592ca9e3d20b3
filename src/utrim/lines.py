"""Apply the trimmer to whole buffers or line by line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from utrim.trim import ltrim, ltrim_index, rtrim, rtrim_index, trim


class Mode(Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"

    @classmethod
    def parse(cls, text: str) -> Mode:
        """Return the Mode named by text (case-insensitive)."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"invalid mode {text!r} (expected one of: {choices})") from None

    @property
    def left(self) -> bool:
        return self is not Mode.RIGHT

    @property
    def right(self) -> bool:
        return self is not Mode.LEFT


@dataclass(frozen=True, slots=True)
class Region:
    """Removable whitespace at data[start:end]."""

    start: int
    end: int
    side: str  # "leading" or "trailing"


def apply(value: bytes, mode: Mode) -> bytes:
    """Trim value on the side(s) selected by mode."""
    if mode is Mode.LEFT:
        return ltrim(value)
    if mode is Mode.RIGHT:
        return rtrim(value)
    return trim(value)


def split_lines(data: bytes) -> list[tuple[bytes, bytes]]:
    """Split data into (content, terminator) pairs.

    Terminators are b"\\r\\n", b"\\n", or b"" for a final unterminated line.
    """
    result: list[tuple[bytes, bytes]] = []
    pos = 0
    size = len(data)
    while pos < size:
        nl = data.find(b"\n", pos)
        if nl == -1:
            result.append((data[pos:], b""))
            break
        if nl > pos and data[nl - 1] == 0x0D:
            result.append((data[pos : nl - 1], b"\r\n"))
        else:
            result.append((data[pos:nl], b"\n"))
        pos = nl + 1
    return result


def trim_lines(data: bytes, mode: Mode) -> bytes:
    """Trim the content of every line, keeping line terminators intact."""
    return b"".join(apply(content, mode) + term for content, term in split_lines(data))


def trim_buffer(data: bytes, mode: Mode, per_line: bool = True) -> bytes:
    """Trim data as a whole or line by line."""
    if per_line:
        return trim_lines(data, mode)
    return apply(data, mode)


def _segment_regions(segment: bytes, offset: int, mode: Mode) -> list[Region]:
    regions: list[Region] = []
    end = len(segment)
    if mode.right:
        end = rtrim_index(segment)
        if end < len(segment):
            regions.append(Region(offset + end, offset + len(segment), "trailing"))
    if mode.left:
        start = ltrim_index(memoryview(segment)[:end])
        if start > 0:
            regions.insert(0, Region(offset, offset + start, "leading"))
    return regions


def find_regions(data: bytes, mode: Mode, per_line: bool = True) -> list[Region]:
    """Return the byte ranges trim_buffer() would remove, in source order.

    With Mode.BOTH the trailing range is found first and the leading range is
    searched in what remains, so the ranges never overlap.
    """
    if not per_line:
        return _segment_regions(data, 0, mode)

    regions: list[Region] = []
    offset = 0
    for content, term in split_lines(data):
        regions.extend(_segment_regions(content, offset, mode))
        offset += len(content) + len(term)
    return regions
