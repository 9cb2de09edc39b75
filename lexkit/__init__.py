"""Lexing toolkit: input cursor and error positions, byte helpers, number parsing and formatting, a JSON parser and an XML lexer."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "position",
    "ints",
    "number",
    "floats",
    "decimals",
    "jsonparse",
    "xmllex",
    "xmlescape",
]