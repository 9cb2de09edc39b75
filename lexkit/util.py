"""Byte helpers shared by the lexers: case folding, whitespace and indentation."""

from __future__ import annotations

import unicodedata
from typing import BinaryIO

_WHITESPACE = b" \t\n\r\f"
_NEWLINES = b"\n\r"
_GRAPHIC_CATEGORIES = frozenset("LMNPS")


def _is_graphic(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] in _GRAPHIC_CATEGORIES or category == "Zs"


def copy(src: bytes | bytearray) -> bytearray:
    """Return an independent, mutable copy of the given bytes."""
    return bytearray(src)


def to_lower(src: bytes | bytearray) -> bytes | bytearray:
    """Convert A-Z to a-z; a bytearray is changed in place and returned."""
    if isinstance(src, bytearray):
        src[:] = src.lower()
        return src
    return bytes(src).lower()


def equal_fold(s: bytes, target_lower: bytes) -> bool:
    """Tell whether ``s`` matches the lowercase ``target_lower`` ignoring ASCII case."""
    if len(s) != len(target_lower):
        return False
    for d, c in zip(s, target_lower):
        if d != c and not (0x41 <= d <= 0x5A and d + 0x20 == c):
            return False
    return True


def printable(r: str | int) -> str:
    """Return a printable representation of a single character."""
    ch = chr(r) if isinstance(r, int) else r
    code = ord(ch)
    if _is_graphic(ch):
        return ch
    if code < 128:
        return f"0x{code:02X}"
    return f"U+{code:04X}"


def is_whitespace(c: int) -> bool:
    """True for space, \\n, \\r, \\t and \\f."""
    return c in _WHITESPACE


def is_newline(c: int) -> bool:
    """True for \\n and \\r."""
    return c in _NEWLINES


def is_all_whitespace(b: bytes) -> bool:
    """True when every byte is space, \\n, \\r, \\t or \\f."""
    return all(c in _WHITESPACE for c in b)


def trim_whitespace(b: bytes) -> bytes:
    """Remove leading and trailing whitespace bytes."""
    return b.strip(_WHITESPACE)


class Indenter:
    """A writer that indents every line after a newline by a number of spaces."""

    def __init__(self, writer: BinaryIO | Indenter, n: int) -> None:
        if isinstance(writer, Indenter):
            n += writer.indent()
            writer = writer.writer
        self.writer = writer
        self._prefix = b" " * n

    def indent(self) -> int:
        """Return the number of spaces written after each newline."""
        return len(self._prefix)

    def write(self, b: bytes) -> int:
        """Write ``b``, inserting the indentation after each newline."""
        *lines, rest = bytes(b).split(b"\n")
        written = 0
        for line in lines:
            written += self.writer.write(line + b"\n") or 0
            written += self.writer.write(self._prefix) or 0
        written += self.writer.write(rest) or 0
        return written