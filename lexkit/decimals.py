"""Parsing and formatting of plain decimal numbers such as ``1.2``."""

from __future__ import annotations

import math

from .floats import _pow10
from .ints import len_uint


def parse_decimal(b: bytes) -> tuple[float, int]:
    """Parse a decimal number without exponent; return it and the bytes consumed.

    At most 18 significant digits are used; leading and trailing zeros are
    ignored for that count.
    """
    i = 0
    sign = 1.0
    if b and b[0] == 0x2D:
        sign = -1.0
        i = 1

    start = -1
    dot = -1
    n = 0
    end = len(b)
    for pos, c in enumerate(b[i:], i):
        if 0x30 <= c <= 0x39:
            if start == -1:
                if c != 0x30:
                    n = c - 0x30
                    start = pos
            elif pos - start < 18:
                n = n * 10 + (c - 0x30)
        elif c == 0x2E:
            if dot != -1:
                end = pos
                break
            dot = pos
        else:
            end = pos
            break

    i = end
    if i == 1 and dot == 0:
        return 0.0, 0
    if start == -1:
        return 0.0, i
    if dot == -1:
        dot = i

    exp = (dot - start) - len_uint(n)
    if dot < start:
        exp += 1
    if exp > 1023:
        return math.copysign(math.inf, sign), i
    if exp < -1022:
        return 0.0, i
    return sign * float(n) * _pow10(exp), i


def format_decimal(f: float, dec: int) -> bytes:
    """Format ``f`` rounded to at most ``dec`` decimals, without trailing zeros.

    A negative or too large ``dec`` means 17. NaN and infinities give ``b""``.
    """
    if math.isnan(f) or math.isinf(f):
        return b""
    if dec < 0 or dec > 17:
        dec = 17
    f *= _pow10(dec)
    f = f + 0.5 if f >= 0.0 else f - 0.5
    if not math.isfinite(f):
        raise ValueError("value too large to format with the given decimals")

    num = int(f)
    if num == 0:
        return b"0"
    while dec > 0 and num % 10 == 0:
        num = int(num / 10) if abs(num) < (1 << 53) else (abs(num) // 10) * (1 if num > 0 else -1)
        dec -= 1

    digits = str(abs(num))
    if dec > 0:
        digits = digits.rjust(dec + 1, "0")
        digits = f"{digits[:-dec]}.{digits[-dec:]}"
    if num < 0:
        digits = "-" + digits
    return digits.encode("ascii")