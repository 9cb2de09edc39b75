"""A streaming JSON grammar parser that yields tokens one at a time."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from .position import Input, ParseError, error_at


class GrammarType(IntEnum):
    """The kind of grammar element returned by the parser."""

    ERROR = 0
    WHITESPACE = 1
    LITERAL = 2
    NUMBER = 3
    STRING = 4
    START_OBJECT = 5
    END_OBJECT = 6
    START_ARRAY = 7
    END_ARRAY = 8

    def __str__(self) -> str:
        return _GRAMMAR_NAMES[self]


_GRAMMAR_NAMES = {
    GrammarType.ERROR: "Error",
    GrammarType.WHITESPACE: "Whitespace",
    GrammarType.LITERAL: "Literal",
    GrammarType.NUMBER: "Number",
    GrammarType.STRING: "String",
    GrammarType.START_OBJECT: "StartObject",
    GrammarType.END_OBJECT: "EndObject",
    GrammarType.START_ARRAY: "StartArray",
    GrammarType.END_ARRAY: "EndArray",
}


class State(IntEnum):
    """Which token the parser expects next."""

    VALUE = 0
    OBJECT_KEY = 1
    OBJECT_VALUE = 2
    ARRAY = 3

    def __str__(self) -> str:
        return _STATE_NAMES[self]


_STATE_NAMES = {
    State.VALUE: "Value",
    State.OBJECT_KEY: "ObjectKey",
    State.OBJECT_VALUE: "ObjectValue",
    State.ARRAY: "Array",
}

_JSON_WHITESPACE = b" \n\r\t"


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


class Parser:
    """Splits JSON input into grammar elements."""

    def __init__(self, r: Input | bytes | str) -> None:
        self._r = r if isinstance(r, Input) else Input(r)
        self._states = [State.VALUE]
        self._err: Exception | None = None
        self._need_comma = False

    def err(self) -> Exception | None:
        """Return the error that stopped parsing; EOFError at end of input."""
        if self._err is not None:
            return self._err
        return self._r.err()

    def state(self) -> State:
        """Return the state the parser is in."""
        return self._states[-1]

    def __iter__(self) -> Iterator[tuple[GrammarType, bytes]]:
        """Yield grammar elements until the end; raise ParseError on bad input."""
        while True:
            gt, data = self.next()
            if gt is GrammarType.ERROR:
                err = self.err()
                if isinstance(err, ParseError):
                    raise err
                return
            yield gt, data

    def _fail(self, message: str) -> tuple[GrammarType, None]:
        self._err = error_at(self._r, message)
        return GrammarType.ERROR, None

    def _pop_state(self) -> None:
        self._states.pop()
        if self._states[-1] is State.OBJECT_VALUE:
            self._states[-1] = State.OBJECT_KEY

    def next(self) -> tuple[GrammarType, bytes | None]:
        """Return the next grammar element and its bytes.

        Returns ``(GrammarType.ERROR, None)`` at the end of input or on an
        error; ``err()`` tells which.
        """
        r = self._r
        self._move_whitespace()
        c = r.peek(0)
        state = self._states[-1]
        if c == 0x2C:
            if state not in (State.ARRAY, State.OBJECT_KEY):
                return self._fail("unexpected comma character")
            r.move(1)
            self._move_whitespace()
            self._need_comma = False
            c = r.peek(0)
        r.skip()

        if self._need_comma and c not in (0x7D, 0x5D, 0):
            return self._fail("expected comma character or an array or object ending")
        if c == 0x7B:
            self._states.append(State.OBJECT_KEY)
            r.move(1)
            return GrammarType.START_OBJECT, r.shift()
        if c == 0x7D:
            if state is not State.OBJECT_KEY:
                return self._fail("unexpected right brace character")
            self._need_comma = True
            self._pop_state()
            r.move(1)
            return GrammarType.END_OBJECT, r.shift()
        if c == 0x5B:
            self._states.append(State.ARRAY)
            r.move(1)
            return GrammarType.START_ARRAY, r.shift()
        if c == 0x5D:
            self._need_comma = True
            if state is not State.ARRAY:
                return self._fail("unexpected right bracket character")
            self._pop_state()
            r.move(1)
            return GrammarType.END_ARRAY, r.shift()
        if state is State.OBJECT_KEY:
            if c != 0x22 or not self._consume_string_token():
                return self._fail("expected object key to be a quoted string")
            n = r.pos()
            self._move_whitespace()
            if r.peek(0) != 0x3A:
                return self._fail("expected colon character after object key")
            r.move(1)
            self._states[-1] = State.OBJECT_VALUE
            return GrammarType.STRING, r.shift()[:n]

        self._need_comma = True
        if state is State.OBJECT_VALUE:
            self._states[-1] = State.OBJECT_KEY
        if c == 0x22 and self._consume_string_token():
            return GrammarType.STRING, r.shift()
        if self._consume_number_token():
            return GrammarType.NUMBER, r.shift()
        if self._consume_literal_token():
            return GrammarType.LITERAL, r.shift()
        c = r.peek(0)
        if c == 0:
            if r.err() is None:
                return self._fail("unexpected NULL character")
            return GrammarType.ERROR, None
        return self._fail(f"unexpected character '{chr(c)}'")

    def _move_whitespace(self) -> None:
        while self._r.peek(0) in _JSON_WHITESPACE and self._r.peek(0) != 0:
            self._r.move(1)

    def _at(self, literal: bytes) -> bool:
        return all(self._r.peek(k) == c for k, c in enumerate(literal))

    def _consume_literal_token(self) -> bool:
        for literal in (b"true", b"false", b"null"):
            if self._at(literal):
                self._r.move(len(literal))
                return True
        return False

    def _skip_digits(self) -> None:
        while _is_digit(self._r.peek(0)):
            self._r.move(1)

    def _consume_number_token(self) -> bool:
        r = self._r
        mark = r.pos()
        if r.peek(0) == 0x2D:
            r.move(1)
        c = r.peek(0)
        if 0x31 <= c <= 0x39:
            r.move(1)
            self._skip_digits()
        elif c != 0x30:
            r.rewind(mark)
            return False
        else:
            r.move(1)
        if r.peek(0) == 0x2E:
            r.move(1)
            if not _is_digit(r.peek(0)):
                r.move(-1)
                return True
            self._skip_digits()
        mark = r.pos()
        if r.peek(0) in (0x65, 0x45):
            r.move(1)
            if r.peek(0) in (0x2B, 0x2D):
                r.move(1)
            if not _is_digit(r.peek(0)):
                r.rewind(mark)
                return True
            self._skip_digits()
        return True

    def _consume_string_token(self) -> bool:
        r = self._r
        r.move(1)
        while True:
            c = r.peek(0)
            if c == 0x22:
                lexeme = r.lexeme()
                backslashes = len(lexeme) - len(lexeme.rstrip(b"\\"))
                if backslashes % 2 == 0:
                    r.move(1)
                    return True
            elif c == 0:
                return False
            r.move(1)