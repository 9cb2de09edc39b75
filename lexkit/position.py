"""Input buffer for lexers and recovery of line/column positions for errors."""

from __future__ import annotations

import unicodedata
from typing import BinaryIO

_EOF = EOFError("EOF")
_GRAPHIC_CATEGORIES = frozenset("LMNPS")
_CONTEXT_LIMIT = 60
_CONTEXT_OFFSET = 20


def _is_graphic(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] in _GRAPHIC_CATEGORIES or category == "Zs"


class Input:
    """A byte buffer with a read position and the start of the current lexeme.

    Reading past the end yields NUL bytes; ``err()`` then reports end of input.
    """

    def __init__(self, data: bytes | bytearray | str | BinaryIO) -> None:
        if hasattr(data, "read"):
            data = data.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buf = bytes(data) + b"\x00"
        self._pos = 0
        self._start = 0

    def err(self) -> EOFError | None:
        """Return an EOFError once the position reached the end, else None."""
        if self._pos >= len(self._buf) - 1:
            return _EOF
        return None

    def peek(self, pos: int) -> int:
        """Return the byte at ``pos`` relative to the position, 0 past the end."""
        index = self._pos + pos
        if 0 <= index < len(self._buf):
            return self._buf[index]
        return 0

    def peek_rune(self, pos: int) -> tuple[str, int]:
        """Decode the UTF-8 character at ``pos``; return it and its byte length."""
        c = self.peek(pos)
        if c < 0xC0 or self.peek(pos + 1) == 0:
            return chr(c), 1
        if c < 0xE0:
            return chr((c & 0x1F) << 6 | (self.peek(pos + 1) & 0x3F)), 2
        if c < 0xF0 or self.peek(pos + 2) == 0:
            code = (c & 0x0F) << 12 | (self.peek(pos + 1) & 0x3F) << 6 | (self.peek(pos + 2) & 0x3F)
            return chr(code), 3
        code = (
            (c & 0x07) << 18
            | (self.peek(pos + 1) & 0x3F) << 12
            | (self.peek(pos + 2) & 0x3F) << 6
            | (self.peek(pos + 3) & 0x3F)
        )
        return (chr(code) if code <= 0x10FFFF else "\ufffd"), 4

    def move(self, n: int) -> None:
        """Advance the position by ``n`` bytes (may be negative)."""
        self._pos += n

    def pos(self) -> int:
        """Return the position relative to the start of the lexeme."""
        return self._pos - self._start

    def rewind(self, pos: int) -> None:
        """Set the position relative to the start of the lexeme."""
        self._pos = self._start + pos

    def lexeme(self) -> bytes:
        """Return the bytes of the current lexeme."""
        return self._buf[self._start:self._pos]

    def skip(self) -> None:
        """Start a new lexeme at the current position."""
        self._start = self._pos

    def shift(self) -> bytes:
        """Return the current lexeme and start a new one."""
        lexeme = self.lexeme()
        self._start = self._pos
        return lexeme

    def offset(self) -> int:
        """Return the absolute position in the input."""
        return self._pos


class ParseError(ValueError):
    """An error at a byte offset in some input, with its line, column and context."""

    def __init__(self, data: bytes, offset: int, message: str) -> None:
        self.message = message
        self.offset = offset
        self.line, self.column, self.context = position(data, offset)
        super().__init__(f"{message} on line {self.line} and column {self.column}\n{self.context}")

    def position(self) -> tuple[int, int, str]:
        """Return the line, column and context of the error."""
        return self.line, self.column, self.context


def error_at(r: Input, message: str) -> ParseError:
    """Create a ParseError at the current offset of the input."""
    return ParseError(r._buf[:-1], r.offset(), message)


def position(data: bytes | str | BinaryIO, offset: int) -> tuple[int, int, str]:
    """Return the line, column and a context snippet for a byte offset.

    Only \\n, \\r, \\r\\n, U+2028 and U+2029 are treated as newlines.
    """
    inp = Input(data)
    line = 1
    while inp.pos() < offset:
        c = inp.peek(0)
        n = 1
        newline = False
        if c == 0x0A:
            newline = True
        elif c == 0x0D:
            newline = True
            if inp.peek(1) == 0x0A:
                n = 2
        elif c >= 0xC0:
            r, n = inp.peek_rune(0)
            newline = r in ("\u2028", "\u2029")
        elif c == 0 and inp.err() is not None:
            break

        if n > 1 and offset < inp.pos() + n:
            break
        inp.move(n)

        if newline:
            line += 1
            offset -= inp.pos()
            inp.skip()

    col = len(inp.lexeme().decode("utf-8", errors="replace")) + 1
    return line, col, _position_context(inp, line, col)


def _position_context(inp: Input, line: int, col: int) -> str:
    while True:
        c = inp.peek(0)
        if (c == 0 and inp.err() is not None) or c in (0x0A, 0x0D):
            break
        inp.move(1)
    rs = inp.lexeme().decode("utf-8", errors="replace")

    limit, offset = _CONTEXT_LIMIT, _CONTEXT_OFFSET
    front = rear = ""
    if limit < len(rs):
        if col <= limit - offset:
            rear = "..."
            rs = rs[: limit - 3]
        elif col >= len(rs) - offset - 3:
            front = "..."
            col -= len(rs) - offset - offset - 7
            rs = rs[len(rs) - offset - offset - 4:]
        else:
            front = rear = "..."
            rs = rs[col - offset - 1: col + offset]
            col = offset + 4

    rs = "".join(ch if _is_graphic(ch) else "·" for ch in rs)
    return f"{line:5d}: {front}{rs}{rear}\n" + " " * (6 + col) + "^"