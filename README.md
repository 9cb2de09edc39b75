# lexkit

A small toolkit for writing lexers and parsers over byte input. It needs
nothing beyond the standard library.

## Modules

- `lexkit.position`
  - `Input` – a cursor over bytes (built from `bytes`, `str` or a readable
    binary file) with `peek`, `peek_rune`, `move`, `pos`, `rewind`, `lexeme`,
    `skip`, `shift` and `offset`. Peeking past the end gives `0`, and `err()`
    then returns an `EOFError`.
  - `ParseError` – a `ValueError` carrying `message`, `offset`, `line`,
    `column` and `context`; `position()` returns `(line, column, context)`.
  - `error_at(input, message)` – a `ParseError` at the input's current offset.
  - `position(data, offset)` – line, column and a context snippet (at most
    about 60 characters, with a `^` under the column) for a byte offset.
    `\n`, `\r`, `\r\n`, U+2028 and U+2029 count as newlines.
- `lexkit.util` – `copy`, `to_lower`, `equal_fold`, `printable`,
  `is_whitespace`, `is_newline`, `is_all_whitespace`, `trim_whitespace`, and
  `Indenter`, a writer wrapper that writes a number of spaces after every
  newline (wrapping another `Indenter` adds to its indentation).
- `lexkit.ints` – `parse_int`, `parse_uint` (64-bit, returning the value and
  the number of bytes consumed, `(0, 0)` on overflow), `format_int`,
  `len_int`, `len_uint`.
- `lexkit.number` – `parse_number(b, group_sym, dec_sym)` returning
  `(digits, decimals, consumed)`, and
  `format_number(num, dec, group_size, group_sym, dec_sym)`.
- `lexkit.floats` – `parse_float` (prefix parse, returns value and bytes
  consumed) and `format_float(f, prec)`, which writes the shortest form such as
  `b"12e3"`, `b".066"` or `b"1e-4"`; it raises `ValueError` for NaN and
  infinities.
- `lexkit.decimals` – `parse_decimal` for numbers like `1.2` without an
  exponent, and `format_decimal(f, dec)`, which rounds to at most `dec`
  decimals and drops trailing zeros (NaN and infinities give `b""`).
- `lexkit.jsonparse` – a streaming JSON `Parser` returning `GrammarType`
  tokens from `next()` and reporting its `State` through `state()`.
- `lexkit.xmllex` – an XML `Lexer` returning `TokenType` tokens from `next()`,
  with the tag name or text via `text()` and attribute values via
  `attr_val()`.
- `lexkit.xmlescape` – `escape_attr_val` (quotes a value with whichever quote
  needs fewer escapes) and `escape_cdata_val` (returns escaped text and `True`
  when that is shorter than keeping the CDATA section).

`Parser.next()` and `Lexer.next()` return an `ERROR` token both at the end of
input and on bad input; `err()` tells which (`EOFError` or `ParseError`).
Iterating over a `Parser` or `Lexer` instead yields `(token, bytes)` pairs and
raises the `ParseError` directly.

## Install

```
pip install .
```

## Examples

```python
from lexkit.position import Input
from lexkit.jsonparse import Parser, GrammarType

p = Parser(Input(b'{"key": 5}'))
while True:
    gt, data = p.next()
    if gt == GrammarType.ERROR:
        break
    print(gt, data)
```

```python
from lexkit.xmllex import Lexer

for tt, data in Lexer(b"<span class='user'>Jane Doe</span>"):
    print(tt, data)
```

```python
from lexkit.floats import format_float
from lexkit.number import format_number

format_float(12e3, 6)                  # b"12e3"
format_number(100000, 2, 3, ".", ",")  # b"1.000,00"
```

## What it does not do

The JSON parser and the XML lexer only split input into tokens: they do not
build documents or trees, decode string escapes or entities, or validate
against a schema. There is no command-line tool.

## Tests

```
pip install .[test]
pytest
```