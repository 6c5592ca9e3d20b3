"""Source positions for removable whitespace, with formatted context."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from utrim.lines import Region
from utrim.tables import describe, is_lead_byte


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based byte offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Issue:
    """A region of removable whitespace resolved against its source."""

    side: str
    span: Span
    removed: bytes

    @property
    def message(self) -> str:
        return region_message(self.side, self.removed)

    def format(self, source: bytes, filename: str = "<stdin>") -> str:
        lines = source.split(b"\n")
        line_idx = self.span.start.line - 1
        col = self.span.start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip(b"\r").decode("utf-8", errors="replace")
        else:
            source_line = ""

        # Underline the span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"warning: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


def region_message(side: str, removed: bytes) -> str:
    """Return e.g. "trailing whitespace (U+3000 IDEOGRAPHIC SPACE)"."""
    text = f"{side} whitespace"
    labels = _non_ascii_labels(removed)
    if labels:
        text += f" ({', '.join(labels)})"
    return text


def _non_ascii_labels(removed: bytes) -> list[str]:
    """Name each distinct non-ASCII whitespace sequence in removed, in order."""
    labels: list[str] = []
    idx = 0
    while idx < len(removed):
        if removed[idx] < 0x80:
            idx += 1
            continue
        width = 3 if is_lead_byte(removed[idx]) else 1
        label = describe(removed[idx : idx + width])
        if label not in labels:
            labels.append(label)
        idx += width
    return labels


class _LineIndex:
    """Maps byte offsets to 1-based line/column positions."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._starts = [0]
        pos = data.find(b"\n")
        while pos != -1:
            self._starts.append(pos + 1)
            pos = data.find(b"\n", pos + 1)

    def position(self, offset: int) -> Position:
        line_idx = bisect_right(self._starts, offset) - 1
        line_start = self._starts[line_idx]
        prefix = self._data[line_start:offset]
        column = len(prefix.decode("utf-8", errors="replace")) + 1
        return Position(line_idx + 1, column, offset)


def locate(data: bytes, regions: list[Region]) -> list[Issue]:
    """Resolve byte regions of data into Issues with line/column spans."""
    index = _LineIndex(data)
    return [
        Issue(
            side=r.side,
            span=Span(index.position(r.start), index.position(r.end)),
            removed=data[r.start : r.end],
        )
        for r in regions
    ]
