from hilite.escape import escape_markup, unescape_markup


def test_escapes_markup_characters():
    assert escape_markup("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"


def test_ampersand_escaped_once():
    # an entity already present in source is source text, not markup
    assert escape_markup("&amp;") == "&amp;amp;"
    assert escape_markup("&lt;") == "&amp;lt;"


def test_other_characters_untouched():
    text = "'\"\n\t é ß @#$%"
    assert escape_markup(text) == text


def test_empty():
    assert escape_markup("") == ""
    assert unescape_markup("") == ""


def test_unescape_inverts_escape():
    for text in ["x<y>z", "&&", "&amp;", "&lt;&gt;", "<<>>&"]:
        assert unescape_markup(escape_markup(text)) == text
