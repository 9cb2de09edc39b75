import pytest

from lexkit.position import Input, ParseError
from lexkit.xmllex import Lexer, TokenType

T = TokenType


def _tokens(source):
    lexer = Lexer(Input(source))
    found = []
    while True:
        token, _ = lexer.next()
        if token is T.ERROR:
            return found, lexer.err()
        found.append(token)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("", []),
        ("<!-- comment -->", [T.COMMENT]),
        ("<!-- comment \n multi \r line -->", [T.COMMENT]),
        ("<foo/>", [T.START_TAG, T.START_TAG_CLOSE_VOID]),
        ("<foo \t\r\n/>", [T.START_TAG, T.START_TAG_CLOSE_VOID]),
        ("<foo:bar.qux-norf/>", [T.START_TAG, T.START_TAG_CLOSE_VOID]),
        ("<foo></foo>", [T.START_TAG, T.START_TAG_CLOSE, T.END_TAG]),
        ("<foo>text</foo>", [T.START_TAG, T.START_TAG_CLOSE, T.TEXT, T.END_TAG]),
        ("<foo/> text", [T.START_TAG, T.START_TAG_CLOSE_VOID, T.TEXT]),
        (
            "<a> <b> <c>text</c> </b> </a>",
            [
                T.START_TAG, T.START_TAG_CLOSE, T.TEXT, T.START_TAG, T.START_TAG_CLOSE,
                T.TEXT, T.START_TAG, T.START_TAG_CLOSE, T.TEXT, T.END_TAG, T.TEXT,
                T.END_TAG, T.TEXT, T.END_TAG,
            ],
        ),
        (
            "<foo a='a' b=\"b\" c=c/>",
            [T.START_TAG, T.ATTRIBUTE, T.ATTRIBUTE, T.ATTRIBUTE, T.START_TAG_CLOSE_VOID],
        ),
        ("<foo a=\"\"/>", [T.START_TAG, T.ATTRIBUTE, T.START_TAG_CLOSE_VOID]),
        ("<foo a-b=\"\"/>", [T.START_TAG, T.ATTRIBUTE, T.START_TAG_CLOSE_VOID]),
        (
            "<foo \nchecked \r\n value\r=\t'=/>\"' />",
            [T.START_TAG, T.ATTRIBUTE, T.ATTRIBUTE, T.START_TAG_CLOSE_VOID],
        ),
        ("<?xml?>", [T.START_TAG_PI, T.START_TAG_CLOSE_PI]),
        ("<?xml a=\"a\" ?>", [T.START_TAG_PI, T.ATTRIBUTE, T.START_TAG_CLOSE_PI]),
        ("<?xml a=a?>", [T.START_TAG_PI, T.ATTRIBUTE, T.START_TAG_CLOSE_PI]),
        ("<![CDATA[ test ]]>", [T.CDATA]),
        ("<!DOCTYPE>", [T.DOCTYPE]),
        ("<!DOCTYPE note SYSTEM \"Note.dtd\">", [T.DOCTYPE]),
        (
            '<!DOCTYPE note [<!ENTITY nbsp "&#xA0;"><!ENTITY writer "Writer: Donald Duck.">'
            '<!ENTITY copyright "Copyright:]> W3Schools.">]>',
            [T.DOCTYPE],
        ),
        ("<!foo>", [T.START_TAG, T.START_TAG_CLOSE]),
        ("<!-- comment", [T.COMMENT]),
        ("<foo", [T.START_TAG]),
        ("</foo", [T.END_TAG]),
        ("<foo x", [T.START_TAG, T.ATTRIBUTE]),
        ("<foo x=", [T.START_TAG, T.ATTRIBUTE]),
        ("<foo x='", [T.START_TAG, T.ATTRIBUTE]),
        ("<foo x=''", [T.START_TAG, T.ATTRIBUTE]),
        ("<?xml", [T.START_TAG_PI]),
        ("<![CDATA[ test", [T.CDATA]),
        ("<!DOCTYPE note SYSTEM", [T.DOCTYPE]),
        ("</", [T.END_TAG]),
        ("</\n", [T.END_TAG]),
    ],
)
def test_tokens(source, expected):
    found, err = _tokens(source)
    assert found == expected
    assert isinstance(err, EOFError)


def test_token_type_names():
    lexer = Lexer(Input("<!DOCTYPE x><a b='c'/>text"))
    names = []
    while True:
        token, _ = lexer.next()
        names.append(str(token))
        if token is T.ERROR:
            break
    assert names == [
        "DOCTYPE", "StartTag", "Attribute", "StartTagCloseVoid", "Text", "Error",
    ]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("<foo:bar.qux-norf/>", b"foo:bar.qux-norf"),
        ("<?xml?>", b"xml"),
        ("<foo?bar/qux>", b"foo?bar/qux"),
        ("<!DOCTYPE note SYSTEM \"Note.dtd\">", b" note SYSTEM \"Note.dtd\""),
        ("<foo ", b"foo"),
    ],
)
def test_tags(source, expected):
    lexer = Lexer(Input(source))
    tags = (T.START_TAG, T.START_TAG_PI, T.END_TAG, T.DOCTYPE)
    while True:
        token, _ = lexer.next()
        assert token is not T.ERROR, "tag expected before end of input"
        if token in tags:
            assert lexer.text() == expected
            break


@pytest.mark.parametrize(
    "source, expected",
    [
        ("<foo a=\"b\" />", [b"a", b"\"b\""]),
        ("<foo \nchecked \r\n value\r=\t'=/>\"' />", [b"checked", b"", b"value", b"'=/>\"'"]),
        ("<foo bar=\" a \n\t\r b \" />", [b"bar", b"\" a     b \""]),
        ("<?xml a=b?>", [b"a", b"b"]),
        ("<foo /=? >", [b"/", b"?"]),
        ("<foo x", [b"x", b""]),
        ("<foo x=", [b"x", b""]),
        ("<foo x='", [b"x", b"'"]),
    ],
)
def test_attributes(source, expected):
    lexer = Lexer(Input(source))
    found = []
    while True:
        token, _ = lexer.next()
        if token is T.ERROR:
            break
        if token is T.ATTRIBUTE:
            found.append(lexer.text())
            found.append(lexer.attr_val() or b"")
    assert found == expected
    assert isinstance(lexer.err(), EOFError)


@pytest.mark.parametrize(
    "source, col",
    [
        ("a\x00b", 2),
        ("<\x00 b='5'>", 2),
        ("<a\x00b='5'>", 3),
        ("<a \x00='5'>", 4),
        ("<a b\x00'5'>", 5),
        ("<a b=\x005'>", 6),
        ("<a b='\x00'>", 7),
        ("<a b='5\x00>", 8),
        ("<a b='5'\x00", 9),
        ("</\x00a>", 3),
        ("</ \x00>", 4),
        ("</ a\x00", 5),
        ("<!\x00", 3),
        ("<![CDATA[\x00", 10),
        ("/*\x00", 3),
    ],
)
def test_errors(source, col):
    _, err = _tokens(source)
    assert isinstance(err, ParseError)
    assert err.position()[1] == col


def test_iteration_raises_parse_error():
    with pytest.raises(ParseError):
        list(Lexer("a\x00b"))


def test_iteration_yields_tokens():
    tokens = [tt for tt, _ in Lexer("<a>b</a>")]
    assert tokens == [T.START_TAG, T.START_TAG_CLOSE, T.TEXT, T.END_TAG]


def test_text_and_attr_val():
    lexer = Lexer(
        Input('<xml attr="val" >text<!--comment--><!DOCTYPE doctype><![CDATA[cdata]]>')
    )
    expected = [
        (b"<xml", b"xml", None),
        (b' attr="val"', b"attr", b'"val"'),
        (b">", None, None),
        (b"text", b"text", None),
        (b"<!--comment-->", b"comment", None),
        (b"<!DOCTYPE doctype>", b" doctype", None),
        (b"<![CDATA[cdata]]>", b"cdata", None),
    ]
    for data, text, attr_val in expected:
        _, got = lexer.next()
        assert got == data
        assert lexer.text() == text
        assert lexer.attr_val() == attr_val


def test_offset():
    z = Input('<div attr="val">text</div>')
    lexer = Lexer(z)
    assert z.offset() == 0
    for offset in (4, 15, 16, 20, 26):
        lexer.next()
        assert z.offset() == offset


def test_round_trip_example():
    source = "<span class='user'>John Doe</span>"
    lexer = Lexer(Input(source))
    out = b""
    while True:
        token, data = lexer.next()
        if token is T.ERROR:
            break
        out += data
    assert out == source.encode()