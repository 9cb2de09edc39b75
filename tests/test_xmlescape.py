import pytest

from lexkit.xmlescape import escape_attr_val, escape_cdata_val


@pytest.mark.parametrize(
    "attr_val, expected",
    [
        ("xyz", '"xyz"'),
        ("", '""'),
        ("x'z", "\"x'z\""),
        ('x"z', "'x\"z'"),
        ("a'b=\"\"", "'a&#39;b=\"\"'"),
        ("'x'\"'z'", "\"x'&#34;'z\""),
        ("\"x\"'\"z\"", "'x\"&#39;\"z'"),
    ],
)
def test_escape_attr_val(attr_val, expected):
    b = attr_val.encode()
    if len(b) > 1 and b[:1] in (b'"', b"'") and b[:1] == b[-1:]:
        b = b[1:-1]
    assert escape_attr_val(b) == expected.encode()


@pytest.mark.parametrize(
    "cdata, expected",
    [
        ("<![CDATA[<b>]]>", "&lt;b>"),
        (
            "<![CDATA[abcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvwxyz]]>",
            "abcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvwxyz",
        ),
        ("<![CDATA[ <b> ]]>", " &lt;b> "),
        ("<![CDATA[<<<<<]]>", "<![CDATA[<<<<<]]>"),
        ("<![CDATA[&]]>", "&amp;"),
        ("<![CDATA[&&&&]]>", "<![CDATA[&&&&]]>"),
        ("<![CDATA[ a ]]>", " a "),
        ("<![CDATA[]]>", ""),
        ("<![CDATA[ a ]]&gt; b ]]>", " a ]]&amp;gt; b "),
    ],
)
def test_escape_cdata_val(cdata, expected):
    b = cdata[len("<![CDATA["):-len("]]>")].encode()
    data, use_text = escape_cdata_val(b)
    text = data.decode()
    if not use_text:
        text = "<![CDATA[" + text + "]]>"
    assert text == expected


def test_escape_cdata_val_keeps_input_when_too_long():
    data, use_text = escape_cdata_val(b"&&&&")
    assert use_text is False
    assert data == b"&&&&"