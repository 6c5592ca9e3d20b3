"""Whitespace tables and byte classification helpers."""

from __future__ import annotations

# (encoded, code point, name). Single-byte entries first, then the 3-byte ones.
WHITESPACE_TABLE: tuple[tuple[bytes, int, str], ...] = (
    (b"\x09", 0x0009, "CHARACTER TABULATION"),
    (b"\x0a", 0x000A, "LINE FEED"),
    (b"\x0b", 0x000B, "LINE TABULATION"),
    (b"\x0c", 0x000C, "FORM FEED"),
    (b"\x0d", 0x000D, "CARRIAGE RETURN"),
    (b"\x20", 0x0020, "SPACE"),
    (b"\x85", 0x0085, "NEXT LINE"),
    (b"\xa0", 0x00A0, "NO-BREAK SPACE"),
    (b"\xe1\x9a\x80", 0x1680, "OGHAM SPACE MARK"),
    (b"\xe2\x80\x80", 0x2000, "EN QUAD"),
    (b"\xe2\x80\x81", 0x2001, "EM QUAD"),
    (b"\xe2\x80\x82", 0x2002, "EN SPACE"),
    (b"\xe2\x80\x83", 0x2003, "EM SPACE"),
    (b"\xe2\x80\x84", 0x2004, "THREE-PER-EM SPACE"),
    (b"\xe2\x80\x85", 0x2005, "FOUR-PER-EM SPACE"),
    (b"\xe2\x80\x86", 0x2006, "SIX-PER-EM SPACE"),
    (b"\xe2\x80\x87", 0x2007, "FIGURE SPACE"),
    (b"\xe2\x80\x88", 0x2008, "PUNCTUATION SPACE"),
    (b"\xe2\x80\x89", 0x2009, "THIN SPACE"),
    (b"\xe2\x80\x8a", 0x200A, "HAIR SPACE"),
    (b"\xe2\x80\xa8", 0x2028, "LINE SEPARATOR"),
    (b"\xe2\x80\xa9", 0x2029, "PARAGRAPH SEPARATOR"),
    (b"\xe2\x80\xaf", 0x202F, "NARROW NO-BREAK SPACE"),
    (b"\xe2\x81\x9f", 0x205F, "MEDIUM MATHEMATICAL SPACE"),
    (b"\xe3\x80\x80", 0x3000, "IDEOGRAPHIC SPACE"),
    # Not White_Space in Unicode, trimmed all the same
    (b"\xe1\xa0\x8e", 0x180E, "MONGOLIAN VOWEL SEPARATOR"),
    (b"\xe2\x80\x8b", 0x200B, "ZERO WIDTH SPACE"),
    (b"\xe2\x80\x8c", 0x200C, "ZERO WIDTH NON-JOINER"),
    (b"\xe2\x80\x8d", 0x200D, "ZERO WIDTH JOINER"),
    (b"\xe2\x81\xa0", 0x2060, "WORD JOINER"),
    (b"\xef\xbb\xbf", 0xFEFF, "ZERO WIDTH NO-BREAK SPACE"),
)

# Every multi-byte entry is exactly this long; the scanners rely on it.
MULTI_BYTE_WIDTH = 3

SINGLE_BYTE_SPACES = frozenset(enc[0] for enc, _, _ in WHITESPACE_TABLE if len(enc) == 1)
MULTI_BYTE_SPACES = frozenset(enc for enc, _, _ in WHITESPACE_TABLE if len(enc) > 1)

_NAMES = {enc: (cp, name) for enc, cp, name in WHITESPACE_TABLE}


def is_single_byte_space(byte: int) -> bool:
    """Return True if byte is one of the single-byte whitespace values.

    0x85 and 0xA0 are matched as raw Latin-1 bytes, not as their UTF-8 forms.
    """
    return byte in SINGLE_BYTE_SPACES


def is_multi_byte_space(seq: bytes | bytearray | memoryview) -> bool:
    """Return True if the 3-byte seq is a multi-byte whitespace sequence.

    The caller guarantees seq holds exactly three bytes.
    """
    return bytes(seq) in MULTI_BYTE_SPACES


def is_lead_byte(byte: int) -> bool:
    """Return True if byte starts a 3-byte UTF-8 sequence (1110xxxx)."""
    return byte & 0xF0 == 0xE0


def is_continuation_byte(byte: int) -> bool:
    """Return True if byte is a UTF-8 continuation byte (10xxxxxx)."""
    return byte & 0xC0 == 0x80


def describe(seq: bytes | bytearray | memoryview) -> str:
    """Return a readable label for a byte sequence, e.g. 'U+3000 IDEOGRAPHIC SPACE'."""
    key = bytes(seq)
    entry = _NAMES.get(key)
    if entry is None:
        return " ".join(f"0x{b:02X}" for b in key)
    cp, name = entry
    return f"U+{cp:04X} {name}"
