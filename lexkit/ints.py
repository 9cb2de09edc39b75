"""Parsing and formatting of 64-bit integers in byte strings."""

from __future__ import annotations

_INT64_MAX = (1 << 63) - 1
_INT64_NEG_LIMIT = 1 << 63
_UINT64_MAX = (1 << 64) - 1


def _digits(b: bytes, start: int):
    for c in b[start:]:
        if not 0x30 <= c <= 0x39:
            return
        yield c - 0x30


def parse_int(b: bytes) -> tuple[int, int]:
    """Parse a signed 64-bit integer; return it and the bytes consumed.

    Returns ``(0, 0)`` when no digits were found or the value overflows.
    """
    neg = False
    start = 0
    if b and b[0] in b"+-":
        neg = b[0] == ord("-")
        start = 1
    n = 0
    count = 0
    for digit in _digits(b, start):
        n = n * 10 + digit
        if n > _INT64_NEG_LIMIT:
            return 0, 0
        count += 1
    if count == 0:
        return 0, 0
    if neg:
        return -n, start + count
    if n > _INT64_MAX:
        return 0, 0
    return n, start + count


def parse_uint(b: bytes) -> tuple[int, int]:
    """Parse an unsigned 64-bit integer; return it and the bytes consumed.

    Returns ``(0, 0)`` on overflow.
    """
    n = 0
    count = 0
    for digit in _digits(b, 0):
        n = n * 10 + digit
        if n > _UINT64_MAX:
            return 0, 0
        count += 1
    return n, count


def format_int(num: int) -> bytes:
    """Return the decimal representation of an integer."""
    return str(num).encode("ascii")


def len_int(i: int) -> int:
    """Return the written length of an integer, including a minus sign."""
    if i < 0:
        return 1 + len_uint(-i)
    return len_uint(i)


def len_uint(i: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    return len(str(i))