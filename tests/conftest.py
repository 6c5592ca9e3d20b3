"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from utrim.tables import WHITESPACE_TABLE

IDEOGRAPHIC_SPACE = "\u3000".encode("utf-8")
ZERO_WIDTH_SPACE = "\u200b".encode("utf-8")

# Every table entry, as (id, encoded bytes) for parametrize
ALL_WHITESPACE = [pytest.param(enc, id=f"U+{cp:04X}") for enc, cp, _ in WHITESPACE_TABLE]
MULTI_BYTE_WHITESPACE = [
    pytest.param(enc, id=f"U+{cp:04X}") for enc, cp, _ in WHITESPACE_TABLE if len(enc) == 3
]


def assert_sub_range(result: bytes, value: bytes) -> None:
    """Assert that result is a contiguous slice of value."""
    assert result in value, f"{result!r} is not contained in {value!r}"
