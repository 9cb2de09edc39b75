"""Escaping of XML attribute values and CDATA contents."""

from __future__ import annotations

_CDATA_WRAPPER_LEN = len(b"<![CDATA[]]>")


def escape_attr_val(b: bytes) -> bytes:
    """Quote an attribute value with the quote that needs the fewest escapes."""
    b = bytes(b)
    if b.count(b'"') > b.count(b"'"):
        return b"'" + b.replace(b"'", b"&#39;") + b"'"
    return b'"' + b.replace(b'"', b"&#34;") + b'"'


def escape_cdata_val(b: bytes) -> tuple[bytes, bool]:
    """Escape CDATA contents as text.

    Returns the escaped bytes and True when that is shorter than keeping the
    CDATA section; otherwise the input unchanged and False.
    """
    extra = 0
    for c in b:
        if c == 0x3C:
            extra += 3
        elif c == 0x26:
            extra += 4
        else:
            continue
        if extra > _CDATA_WRAPPER_LEN:
            return b, False
    escaped = bytes(b).replace(b"&", b"&amp;").replace(b"<", b"&lt;")
    return escaped, True