"""Parsing and compact formatting of floating-point numbers in byte strings."""

from __future__ import annotations

import math
import struct

from .ints import len_int, parse_int

_UINT64_MASK = (1 << 64) - 1
_UINT64_TENTH = _UINT64_MASK // 10
_LOG10_2 = 0.3010299956639812

_POW10 = tuple(float(f"1e{k}") for k in range(32))
_POW10_POS32 = tuple(float(f"1e{32 * k}") for k in range(10))
_POW10_NEG32 = tuple(float(f"1e-{32 * k}") for k in range(11))


def _pow10(n: int) -> float:
    """Return 10**n as a float, saturating to inf or 0 outside the float range."""
    if 0 <= n <= 308:
        return _POW10_POS32[n // 32] * _POW10[n % 32]
    if -323 <= n <= 0:
        m = -n
        return _POW10_NEG32[m // 32] / _POW10[m % 32]
    return math.inf if n > 0 else 0.0


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def parse_float(b: bytes) -> tuple[float, int]:
    """Parse a float; return it and the number of bytes consumed.

    Parsing stops at the first invalid byte. Returns ``(0.0, 0)`` when no
    number was found.
    """
    neg = False
    start = 0
    if b and b[0] in b"+-":
        neg = b[0] == 0x2D
        start = 1

    dot = -1
    trunk = -1
    n = 0
    end = len(b)
    for pos, c in enumerate(b[start:], start):
        if _is_digit(c):
            if trunk == -1:
                if n > _UINT64_TENTH:
                    trunk = pos
                else:
                    n = (n * 10 + (c - 0x30)) & _UINT64_MASK
        elif dot == -1 and c == 0x2E:
            dot = pos
        else:
            end = pos
            break

    i = end
    if i == start or (i == start + 1 and dot == start):
        return 0.0, 0

    f = float(n)
    if neg:
        f = -f

    mant_exp = 0
    if dot != -1:
        if trunk == -1:
            trunk = i
        mant_exp = trunk - dot - 1
    elif trunk != -1:
        mant_exp = trunk - i

    exp_exp = 0
    if i < len(b) and b[i] in b"eE":
        e, exp_len = parse_int(b[i + 1:])
        if exp_len > 0:
            exp_exp = e
            i += 1 + exp_len

    exp = exp_exp - mant_exp
    if exp == 0:
        return f, i
    if 0 < exp <= 15 + 22:
        if exp > 22:
            f *= _pow10(exp - 22)
            exp = 22
        if -1e15 <= f <= 1e15:
            return f * _pow10(exp), i
    elif -22 <= exp < 0:
        return f / _pow10(-exp), i
    f *= _pow10(-mant_exp)
    return f * _pow10(exp_exp), i


def _float64exp(f: float) -> int:
    exp2 = 0
    if f != 0.0:
        bits = struct.unpack("<Q", struct.pack("<d", f))[0]
        exp2 = ((bits >> 52) & 0x7FF) - 1023 + 1
    exp10 = exp2 * _LOG10_2
    if exp10 < 0:
        exp10 -= 1.0
    return int(exp10)


def format_float(f: float, prec: int) -> bytes:
    """Format ``f`` in its shortest form with ``prec`` decimals of precision.

    ``prec + 1`` is the number of significant digits; a negative or too large
    precision means 17. Raises ValueError for NaN and infinities.
    """
    if math.isnan(f) or math.isinf(f):
        raise ValueError(f"cannot format {f!r}")

    neg = f < 0.0
    if neg:
        f = -f
    if prec < 0 or prec > 17:
        prec = 17
    prec -= _float64exp(f)
    f *= _pow10(prec)

    mant = int(f) if math.isfinite(f) else 0
    mant_len = len_int(mant)
    mant_exp = mant_len - prec - 1
    if mant == 0:
        return b"0"

    exp = 0
    exp_len = 0
    if mant_exp > 0:
        # a positive exponent is mostly found from the trailing zeros below,
        # unless digits were dropped up front to fit the mantissa
        if prec < 0:
            exp = mant_exp
        exp_len = 1 + len_int(exp)
    elif mant_exp < -3:
        exp = mant_exp
        exp_len = 1 + len_int(exp)
    elif mant_exp < -1:
        mant_len += -mant_exp - 1

    max_len = 1 + mant_len + exp_len + (1 if neg else 0)
    buf = bytearray(max_len + 8)

    i = 0
    if neg:
        buf[i] = 0x2D
        i += 1

    zero = True
    last = i + mant_len
    dot = last - prec - exp
    j = last
    while mant > 0:
        if j == dot:
            buf[j] = 0x2E
            j -= 1
        new_mant = mant // 10
        digit = mant - 10 * new_mant
        if zero and digit > 0:
            if dot < j:
                i = j + 1
                if exp < 0:
                    new_exp = exp - (j - dot)
                    if len_int(new_exp) == len_int(exp):
                        exp = new_exp
                        dot = j
                        j -= 1
                        i -= 1
            else:
                i = dot
            last = j
            zero = False
        buf[j] = 0x30 + digit
        j -= 1
        mant = new_mant

    if dot < j:
        while dot < j:
            buf[j] = 0x30
            j -= 1
        buf[j] = 0x2E
    elif last + 3 < dot:
        i = last + 1
        exp = dot - last - 1
    elif j == dot:
        buf[j] = 0x2E

    if exp != 0:
        if exp in (1, 2):
            buf[i:i + exp] = b"0" * exp
            i += exp
        else:
            buf[i] = 0x65
            i += 1
            if exp < 0:
                buf[i] = 0x2D
                i += 1
                exp = -exp
            digits = str(exp).encode("ascii")
            buf[i:i + len(digits)] = digits
            i += len(digits)
    return bytes(buf[:i])