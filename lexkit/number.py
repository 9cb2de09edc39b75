"""Parsing and formatting of fixed-point numbers with grouping and decimal symbols."""

from __future__ import annotations

_INT64_MAX = (1 << 63) - 1
_INT64_MIN = -(1 << 63)


def _decode_rune(b: bytes, pos: int) -> tuple[str, int]:
    for size in range(1, 5):
        chunk = b[pos:pos + size]
        if len(chunk) < size:
            break
        try:
            return bytes(chunk).decode("utf-8"), size
        except UnicodeDecodeError:
            continue
    return "\ufffd", 1


def _symbol(value: str | int | None, default: str) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= 0x10FFFF and not 0xD800 <= value <= 0xDFFF:
            return chr(value)
        return default
    if isinstance(value, str) and len(value) == 1 and not 0xD800 <= ord(value) <= 0xDFFF:
        return value
    return default


def parse_number(b: bytes, group_sym: str, dec_sym: str) -> tuple[int, int, int]:
    """Parse a fixed-point number.

    Returns the digits as a 64-bit integer, the number of decimals and the
    number of bytes consumed. Parsing stops before an overflowing digit.
    """
    n = 0
    dec = 0
    sign = 1
    num = 0
    has_decimals = False
    if b and b[0] == ord("-"):
        sign = -1
        n = 1
    while n < len(b):
        c = b[n]
        if 0x30 <= c <= 0x39:
            candidate = num * 10 + sign * (c - 0x30)
            if not _INT64_MIN <= candidate <= _INT64_MAX:
                break
            num = candidate
            if has_decimals:
                dec += 1
            n += 1
            continue
        r, size = _decode_rune(b, n)
        if has_decimals or r not in (group_sym, dec_sym):
            break
        if r == dec_sym:
            has_decimals = True
        n += size
    return num, dec, n


def format_number(
    num: int,
    dec: int,
    group_size: int,
    group_sym: str | int,
    dec_sym: str | int,
) -> bytes:
    """Format ``num`` with ``dec`` decimals, grouping the integer part.

    An invalid group symbol becomes '.', an invalid decimal symbol ','; a NUL
    group symbol or a non-positive group size disables grouping.
    """
    dec = max(dec, 0)
    group = _symbol(group_sym, ".")
    point = _symbol(dec_sym, ",")

    digits = str(abs(num))
    if dec > 0:
        digits = digits.rjust(dec + 1, "0")
        int_part, frac = digits[:-dec], digits[-dec:]
    else:
        int_part, frac = digits, ""

    if group_size > 0 and group != "\x00" and len(int_part) > group_size:
        head = len(int_part) % group_size or group_size
        chunks = [int_part[:head]]
        chunks.extend(int_part[i:i + group_size] for i in range(head, len(int_part), group_size))
        int_part = group.join(chunks)

    text = ("-" if num < 0 else "") + int_part
    if dec > 0:
        text += point + frac
    return text.encode("utf-8")