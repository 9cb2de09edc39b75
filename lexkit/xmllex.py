"""An XML 1.0 lexer that splits input into tags, attributes, text and markup."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from .position import Input, ParseError, error_at

_SPACE = (0x20, 0x09, 0x0A, 0x0D)
_TAB_NEWLINE_TO_SPACE = bytes.maketrans(b"\t\n\r", b"   ")


class TokenType(IntEnum):
    """The kind of token returned by the lexer."""

    ERROR = 0
    COMMENT = 1
    DOCTYPE = 2
    CDATA = 3
    START_TAG = 4
    START_TAG_PI = 5
    START_TAG_CLOSE = 6
    START_TAG_CLOSE_VOID = 7
    START_TAG_CLOSE_PI = 8
    END_TAG = 9
    ATTRIBUTE = 10
    TEXT = 11

    def __str__(self) -> str:
        return _TOKEN_NAMES[self]


_TOKEN_NAMES = {
    TokenType.ERROR: "Error",
    TokenType.COMMENT: "Comment",
    TokenType.DOCTYPE: "DOCTYPE",
    TokenType.CDATA: "CDATA",
    TokenType.START_TAG: "StartTag",
    TokenType.START_TAG_PI: "StartTagPI",
    TokenType.START_TAG_CLOSE: "StartTagClose",
    TokenType.START_TAG_CLOSE_VOID: "StartTagCloseVoid",
    TokenType.START_TAG_CLOSE_PI: "StartTagClosePI",
    TokenType.END_TAG: "EndTag",
    TokenType.ATTRIBUTE: "Attribute",
    TokenType.TEXT: "Text",
}


class Lexer:
    """Splits XML input into tokens."""

    def __init__(self, r: Input | bytes | str) -> None:
        self._r = r if isinstance(r, Input) else Input(r)
        self._err: Exception | None = None
        self._in_tag = False
        self._text: bytes | None = None
        self._attr_val: bytes | None = None

    def err(self) -> Exception | None:
        """Return the error that stopped lexing; EOFError at end of input."""
        if self._err is not None:
            return self._err
        return self._r.err()

    def text(self) -> bytes | None:
        """Return the text of the last token without its delimiters."""
        return self._text

    def attr_val(self) -> bytes | None:
        """Return the value of the last attribute token, None if it had none."""
        return self._attr_val

    def __iter__(self) -> Iterator[tuple[TokenType, bytes]]:
        """Yield tokens until the end; raise ParseError on bad input."""
        while True:
            tt, data = self.next()
            if tt is TokenType.ERROR:
                err = self.err()
                if isinstance(err, ParseError):
                    raise err
                return
            yield tt, data

    def _null_error(self) -> tuple[TokenType, None]:
        if self._r.err() is None:
            self._err = error_at(self._r, "unexpected NULL character")
        return TokenType.ERROR, None

    def next(self) -> tuple[TokenType, bytes | None]:
        """Return the next token and its bytes.

        Returns ``(TokenType.ERROR, None)`` at the end of input or on an error;
        ``err()`` tells which.
        """
        self._text = None
        r = self._r
        if self._in_tag:
            self._attr_val = None
            while r.peek(0) in _SPACE:
                r.move(1)
            c = r.peek(0)
            if c == 0:
                return self._null_error()
            if c != 0x3E and (c not in (0x2F, 0x3F) or r.peek(1) != 0x3E):
                return TokenType.ATTRIBUTE, self._shift_attribute()
            r.skip()
            self._in_tag = False
            if c == 0x2F:
                r.move(2)
                return TokenType.START_TAG_CLOSE_VOID, r.shift()
            if c == 0x3F:
                r.move(2)
                return TokenType.START_TAG_CLOSE_PI, r.shift()
            r.move(1)
            return TokenType.START_TAG_CLOSE, r.shift()

        while True:
            c = r.peek(0)
            if c == 0x3C:
                if r.pos() > 0:
                    self._text = r.shift()
                    return TokenType.TEXT, self._text
                c = r.peek(1)
                if c == 0x2F:
                    r.move(2)
                    return TokenType.END_TAG, self._shift_end_tag()
                if c == 0x21:
                    r.move(2)
                    if self._at(b"--"):
                        r.move(2)
                        return TokenType.COMMENT, self._shift_comment_text()
                    if self._at(b"[CDATA["):
                        r.move(7)
                        return TokenType.CDATA, self._shift_cdata_text()
                    if self._at(b"DOCTYPE"):
                        r.move(7)
                        return TokenType.DOCTYPE, self._shift_doctype_text()
                    r.move(-2)
                elif c == 0x3F:
                    r.move(2)
                    self._in_tag = True
                    return TokenType.START_TAG_PI, self._shift_start_tag()
                r.move(1)
                self._in_tag = True
                return TokenType.START_TAG, self._shift_start_tag()
            if c == 0:
                if r.pos() > 0:
                    self._text = r.shift()
                    return TokenType.TEXT, self._text
                return self._null_error()
            r.move(1)

    def _at(self, literal: bytes) -> bool:
        return all(self._r.peek(k) == c for k, c in enumerate(literal))

    def _ends_name(self, c: int) -> bool:
        return (
            c in _SPACE
            or c == 0x3E
            or c == 0
            or (c in (0x2F, 0x3F) and self._r.peek(1) == 0x3E)
        )

    def _shift_doctype_text(self) -> bytes:
        r = self._r
        in_string = False
        in_brackets = False
        while True:
            c = r.peek(0)
            if c == 0x22:
                in_string = not in_string
            elif c in (0x5B, 0x5D) and not in_string:
                in_brackets = c == 0x5B
            elif c == 0x3E and not in_string and not in_brackets:
                self._text = r.lexeme()[9:]
                r.move(1)
                return r.shift()
            elif c == 0:
                self._text = r.lexeme()[9:]
                return r.shift()
            r.move(1)

    def _shift_cdata_text(self) -> bytes:
        r = self._r
        while True:
            c = r.peek(0)
            if c == 0x5D and r.peek(1) == 0x5D and r.peek(2) == 0x3E:
                self._text = r.lexeme()[9:]
                r.move(3)
                return r.shift()
            if c == 0:
                self._text = r.lexeme()[9:]
                return r.shift()
            r.move(1)

    def _shift_comment_text(self) -> bytes:
        r = self._r
        while True:
            c = r.peek(0)
            if c == 0x2D and r.peek(1) == 0x2D and r.peek(2) == 0x3E:
                self._text = r.lexeme()[4:]
                r.move(3)
                return r.shift()
            if c == 0:
                return r.shift()
            r.move(1)

    def _shift_start_tag(self) -> bytes:
        r = self._r
        name_start = r.pos()
        while not self._ends_name(r.peek(0)):
            r.move(1)
        self._text = r.lexeme()[name_start:]
        return r.shift()

    def _shift_attribute(self) -> bytes:
        r = self._r
        name_start = r.pos()
        while True:
            c = r.peek(0)
            if c == 0x3D or self._ends_name(c):
                break
            r.move(1)
        name_end = r.pos()
        while r.peek(0) in _SPACE:
            r.move(1)

        if r.peek(0) == 0x3D:
            r.move(1)
            while r.peek(0) in _SPACE:
                r.move(1)
            attr_pos = r.pos()
            delim = r.peek(0)
            quoted = delim in (0x22, 0x27)
            if quoted:
                r.move(1)
                while True:
                    c = r.peek(0)
                    if c == delim:
                        r.move(1)
                        break
                    if c == 0:
                        break
                    r.move(1)
            else:
                while not self._ends_name(r.peek(0)):
                    r.move(1)
            lexeme = r.lexeme()
            value = lexeme[attr_pos:]
            if quoted:
                value = value.translate(_TAB_NEWLINE_TO_SPACE)
                lexeme = lexeme[:attr_pos] + value
            self._attr_val = value
        else:
            r.rewind(name_end)
            lexeme = r.lexeme()
            self._attr_val = None
        self._text = lexeme[name_start:name_end]
        r.shift()
        return lexeme

    def _shift_end_tag(self) -> bytes:
        r = self._r
        while True:
            c = r.peek(0)
            if c == 0x3E:
                text = r.lexeme()[2:]
                r.move(1)
                break
            if c == 0:
                text = r.lexeme()[2:]
                break
            r.move(1)
        self._text = text.rstrip(b" \t\n\r")
        return r.shift()