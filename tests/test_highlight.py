"""
End-to-end scenarios for highlight().
"""

import logging

import pytest

from hilite import ConfigurationError, Highlighter, LanguageProfile, highlight
from hilite.markup import SEMANTIC

from tests.infrastructure.highlight_utils import hl, marked


def test_comment_line_then_declaration():
    html = hl("// totalScore 42\nint totalScore = 42;")
    assert html == (
        '<span class="hl-comment">// totalScore 42</span>\n'
        '<span class="hl-builtin">int</span> totalScore = '
        '<span class="hl-number">42</span>;'
    )


def test_control_keyword_with_paren_is_function():
    assert hl("if(x)") == '<span class="hl-function">if</span>(x)'


def test_unterminated_string_leaves_next_line_open():
    html = hl('String s = "abc;\nint x = 1;')
    assert marked(html) == [
        ("type", "String"),
        ("builtin", "int"),
        ("number", "1"),
    ]
    assert "hl-string" not in html


def test_empty_input():
    assert highlight("", "java-like") == ""
    assert hl("", "c-like") == ""


def test_unknown_profile_fails_even_for_empty_input():
    with pytest.raises(ConfigurationError, match="Unknown language profile 'cobol'"):
        highlight("", "cobol")
    with pytest.raises(ConfigurationError):
        highlight("int x;", "cobol")


def test_profile_argument_is_required():
    with pytest.raises(TypeError):
        highlight("int x")


def test_default_theme_uses_vscode_classes():
    assert highlight("int x", "java-like") == '<span class="text-[#569cd6]">int</span> x'
    assert highlight("// hi", "java-like") == '<span class="text-[#6a9955]">// hi</span>'
    assert highlight('"s"', "java-like") == '<span class="text-[#ce9178]">"s"</span>'


def test_markup_in_source_is_escaped():
    html = hl('a < b && "</span><b>"')
    assert html == 'a &lt; b &amp;&amp; <span class="hl-string">"&lt;/span&gt;&lt;b&gt;"</span>'


def test_literals_reproduced_verbatim():
    src = "/* if (x) { return 1; } */ x = 'y';"
    assert marked(hl(src)) == [
        ("comment", "/* if (x) { return 1; } */"),
        ("string", "'y'"),
    ]


def test_full_java_snippet():
    src = (
        "@Override\n"
        "public static int sum(int[] xs) {\n"
        "    int total = 0; // running total\n"
        "    for (int x : xs) total += x;\n"
        "    return total;\n"
        "}"
    )
    assert marked(hl(src)) == [
        ("annotation", "@Override"),
        ("keyword", "public"),
        ("keyword", "static"),
        ("builtin", "int"),
        ("function", "sum"),
        ("builtin", "int"),
        ("builtin", "int"),
        ("number", "0"),
        ("comment", "// running total"),
        ("keyword", "for"),
        ("builtin", "int"),
        ("keyword", "return"),
    ]


def test_python_snippet():
    src = "@cache\ndef f(n):\n    return None if n else len('x')  # done"
    assert marked(hl(src, "python-like")) == [
        ("annotation", "@cache"),
        ("keyword", "def"),
        ("function", "f"),
        ("keyword", "return"),
        ("builtin", "None"),
        ("keyword", "if"),
        ("keyword", "else"),
        ("function", "len"),
        ("string", "'x'"),
        ("comment", "# done"),
    ]


def test_aliases_resolve_to_builtin_profiles():
    assert hl("int x;", "java") == hl("int x;", "java-like")
    assert hl("nullptr", "cpp") == '<span class="hl-builtin">nullptr</span>'


def test_profile_value_instead_of_key():
    profile = LanguageProfile(name="tiny", keywords=frozenset({"let"}), type_name_pattern=None)
    assert highlight("let X = 1", profile, theme=SEMANTIC) == (
        '<span class="hl-keyword">let</span> X = <span class="hl-number">1</span>'
    )


def test_highlighter_with_registered_profile():
    h = Highlighter(theme=SEMANTIC)
    h.register_profile("kotlin-like", LanguageProfile(
        name="kotlin-like",
        keywords=frozenset({"fun", "val"}),
        builtins=frozenset({"Int"}),
    ))
    assert marked(h.highlight("fun f(): Int { val x = 2 }", "kotlin-like")) == [
        ("keyword", "fun"),
        ("function", "f"),
        ("builtin", "Int"),
        ("keyword", "val"),
        ("number", "2"),
    ]


def test_analyze_exposes_regions_and_spans():
    result = Highlighter().analyze('int a = 1; // c\n"s"', "java-like")
    assert [r.raw_text for r in result.regions] == ["// c", '"s"']
    assert len(result.spans) == 2


def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="hilite")
    hl('int a = "b";')
    assert "1 literal region(s)" in caplog.text
