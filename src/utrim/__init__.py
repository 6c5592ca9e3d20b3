"""Trim ASCII and Unicode whitespace from UTF-8 byte strings."""

from __future__ import annotations

from utrim.trim import ltrim, ltrim_index, rtrim, rtrim_index, trim, trim_bounds

__version__ = "0.1.0"

__all__ = [
    "ltrim",
    "ltrim_index",
    "rtrim",
    "rtrim_index",
    "trim",
    "trim_bounds",
]
